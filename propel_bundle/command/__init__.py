# ==============================================
# COMMAND: propel:build-model
# ==============================================
#
# Modules:
# --------
# - schema_locator.py  → Finds the schemas shipped by bundles
# - build_tool.py      → Runs the external model generator
# - build_model.py     → The build-model command itself
#
# ==============================================

from .build_model import BuildModelCommand
from .build_tool import BuildError, BuildTool
from .schema_locator import SchemaLocator

__all__ = [
    "BuildModelCommand",
    "BuildError",
    "BuildTool",
    "SchemaLocator",
]
