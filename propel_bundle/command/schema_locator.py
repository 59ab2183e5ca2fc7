# ==============================================
# SchemaLocator
# ==============================================
#
# PURPOSE:
#   Find the XML schemas every bundle ships. A bundle is any
#   directory directly under the bundles directory; its schemas live
#   in <bundle>/Resources/config/ and match the configured pattern
#   (default "*schema.xml").
#
# OUTPUT:
#   Ordered mapping of temp schema file name → details:
#     "Blog-schema.xml" → {"bundle": "Blog",
#                          "basename": "schema.xml",
#                          "path": Path(".../Blog/Resources/config/schema.xml")}
#   Prefixing with the bundle name lets several bundles ship a file
#   called schema.xml.
#
# ==============================================

from pathlib import Path
from typing import Dict, Any, Union

SCHEMA_SUBDIR = Path("Resources") / "config"


class SchemaLocator:
    def __init__(self, pattern: str = "*schema.xml"):
        self.pattern = pattern

    def locate(self, bundles_dir: Union[str, Path]) -> Dict[str, Dict[str, Any]]:
        bundles_dir = Path(bundles_dir)
        if not bundles_dir.is_dir():
            raise FileNotFoundError(f"Bundles directory {bundles_dir} does not exist")

        schemas: Dict[str, Dict[str, Any]] = {}
        for bundle_dir in sorted(p for p in bundles_dir.iterdir() if p.is_dir()):
            config_dir = bundle_dir / SCHEMA_SUBDIR
            if not config_dir.is_dir():
                continue

            for schema in sorted(config_dir.glob(self.pattern)):
                if not schema.is_file():
                    continue
                temp_name = f"{bundle_dir.name}-{schema.name}"
                schemas[temp_name] = {
                    "bundle": bundle_dir.name,
                    "basename": schema.name,
                    "path": schema,
                }

        return schemas
