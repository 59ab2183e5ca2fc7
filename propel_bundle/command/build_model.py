from typing import Any, Callable, Dict

from .build_tool import BuildTool


class BuildModelCommand:
    """
    Build the model classes from the XML schemas of all bundles.

    Runs the generator's "om" (object model) target, then reports each
    schema that went into the build.
    """

    name = "propel:build-model"
    target = "om"

    def __init__(self, build_tool: BuildTool, schemas: Dict[str, Dict[str, Any]]):
        self.build_tool = build_tool
        self.temp_schemas = schemas

    def execute(self, write: Callable[[str], Any] = print) -> None:
        # BuildError propagates to the caller
        self.build_tool.call(self.target, self.temp_schemas)

        for schema_details in self.temp_schemas.values():
            write(f'Built model classes for bundle "{schema_details["bundle"]}"')
