# ==============================================
# ORM: table metadata and model queries
# ==============================================
#
# Modules:
# --------
# - metadata.py      → TableMap / ColumnMap / RelationMap
# - query.py         → ModelQuery protocol, ModelRegistry, NoResultError
# - mysql_client.py  → MySQL reflection and MySQLModelQuery
#
# ==============================================

from .metadata import (
    ColumnMap,
    ColumnNotFoundError,
    RelationMap,
    RelationNotFoundError,
    RelationType,
    TableMap,
)
from .query import ModelQuery, ModelRegistry, NoResultError, UnknownModelError
from .mysql_client import MySQLClient, MySQLModelQuery, register_models

__all__ = [
    "ColumnMap",
    "ColumnNotFoundError",
    "RelationMap",
    "RelationNotFoundError",
    "RelationType",
    "TableMap",
    "ModelQuery",
    "ModelRegistry",
    "NoResultError",
    "UnknownModelError",
    "MySQLClient",
    "MySQLModelQuery",
    "register_models",
]
