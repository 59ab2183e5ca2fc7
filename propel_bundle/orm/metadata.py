# ==============================================
# Table Metadata (Data Classes)
# ==============================================
#
# PURPOSE:
#   Data classes describing a mapped table: its columns, primary
#   key and relations to other tables. The form guesser reads these
#   to pick field types, and the choice field reads the primary key
#   to know how models are identified.
#
# ENUMS:
# ------
# - RelationType(Enum): MANY_TO_ONE, ONE_TO_MANY, ONE_TO_ONE, MANY_TO_MANY
#
# CLASSES:
# --------
# - ColumnMap (dataclass)
#     name, type, size, is_nullable, is_primary_key, is_unique
#
# - RelationMap (dataclass)
#     name, type, foreign_table, foreign_class, local_columns, foreign_columns
#
# - TableMap
#     Column and relation lookup for one table. get_column() and
#     get_relation() raise when the name is unknown.
#
# ==============================================

from enum import Enum
from dataclasses import dataclass, field
from typing import Optional, Dict, List


class ColumnNotFoundError(LookupError):
    """Raised when a table map has no column with the requested name."""

    def __init__(self, table_name: str, column_name: str):
        super().__init__(f'Table "{table_name}" has no column "{column_name}"')
        self.table_name = table_name
        self.column_name = column_name


class RelationNotFoundError(LookupError):
    """Raised when a table map has no relation with the requested name."""

    def __init__(self, table_name: str, relation_name: str):
        super().__init__(f'Table "{table_name}" has no relation "{relation_name}"')
        self.table_name = table_name
        self.relation_name = relation_name


class RelationType(Enum):
    """
    Cardinality of a relation, seen from the table that declares it.
    """
    MANY_TO_ONE = "many_to_one"
    ONE_TO_MANY = "one_to_many"
    ONE_TO_ONE = "one_to_one"
    MANY_TO_MANY = "many_to_many"


@dataclass
class ColumnMap:
    """A single mapped column."""

    name: str
    type: str  # ORM type name, e.g. "varchar", "integer", "boolean"
    size: Optional[int] = None
    is_nullable: bool = True
    is_primary_key: bool = False
    is_unique: bool = False

    def is_not_null(self) -> bool:
        return not self.is_nullable


@dataclass
class RelationMap:
    """
    A relation from the declaring table to another table.

    foreign_class is the model class stored in the other table, or None
    when that table is not mapped to a class.
    """

    name: str
    type: RelationType
    foreign_table: str
    foreign_class: Optional[type] = None
    local_columns: List[str] = field(default_factory=list)
    foreign_columns: List[str] = field(default_factory=list)


class TableMap:
    """Column and relation lookup for one mapped table."""

    def __init__(
        self,
        name: str,
        model_class: Optional[type] = None,
        columns: Optional[List[ColumnMap]] = None,
        relations: Optional[List[RelationMap]] = None,
    ):
        self.name = name
        self.model_class = model_class
        self._columns: Dict[str, ColumnMap] = {}
        self._relations: Dict[str, RelationMap] = {}

        for column in columns or []:
            self.add_column(column)
        for relation in relations or []:
            self.add_relation(relation)

    def add_column(self, column: ColumnMap) -> None:
        self._columns[column.name] = column

    def add_relation(self, relation: RelationMap) -> None:
        self._relations[relation.name] = relation

    def has_column(self, name: str) -> bool:
        return name in self._columns

    def get_column(self, name: str) -> ColumnMap:
        try:
            return self._columns[name]
        except KeyError:
            raise ColumnNotFoundError(self.name, name) from None

    def get_columns(self) -> List[ColumnMap]:
        return list(self._columns.values())

    def get_primary_keys(self) -> List[ColumnMap]:
        return [column for column in self._columns.values() if column.is_primary_key]

    def has_relation(self, name: str) -> bool:
        return name in self._relations

    def get_relation(self, name: str) -> RelationMap:
        try:
            return self._relations[name]
        except KeyError:
            raise RelationNotFoundError(self.name, name) from None

    def get_relations(self) -> List[RelationMap]:
        return list(self._relations.values())

    def __repr__(self) -> str:
        return f"TableMap({self.name!r}, columns={list(self._columns)}, relations={list(self._relations)})"
