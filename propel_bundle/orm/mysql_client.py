# ==============================================
# MySQLClient
# ==============================================
#
# PURPOSE:
#   Manages the MySQL connection and everything the bundle needs
#   from the live database: table metadata (columns, primary keys,
#   foreign keys) read from INFORMATION_SCHEMA, and the two queries
#   the forms issue (load all rows, load one row by primary key).
#
# CLASS: MySQLClient
# ------------------
#   Stateful — holds connection to MySQL.
#
#   Constructor:
#   ------------
#   - __init__(host, port, user, password, database)
#       Store connection params. Don't connect yet.
#
#   Methods:
#   --------
#   - connect() / disconnect()
#   - fetch_all(query: str, params: tuple = None) -> list[dict]
#   - get_table_map(table_name, model_class=None, class_map=None) -> TableMap
#       Columns come from INFORMATION_SCHEMA.COLUMNS, relations from
#       INFORMATION_SCHEMA.KEY_COLUMN_USAGE:
#         outgoing foreign key  → MANY_TO_ONE
#         incoming foreign key  → ONE_TO_MANY
#                                 (ONE_TO_ONE if the referencing columns
#                                  are the whole primary key or a unique
#                                  column, MANY_TO_MANY if they are only
#                                  part of a composite primary key)
#
#   Context Manager:
#   ----------------
#   - __enter__ / __exit__ for `with MySQLClient(...) as db:` usage.
#
# CLASS: MySQLModelQuery
# ----------------------
#   ModelQuery implementation over one table. Rows are hydrated with
#   model_class(**row); without a model class the row dicts are returned.
#
# ==============================================

from typing import Any, Dict, List, Optional, cast
import pymysql
import pymysql.cursors

from .metadata import ColumnMap, RelationMap, RelationType, TableMap


# MySQL DATA_TYPE → ORM type name
TYPE_MAP = {
    "int": "integer",
    "integer": "integer",
    "mediumint": "integer",
    "bigint": "bigint",
    "smallint": "smallint",
    "tinyint": "smallint",
    "decimal": "decimal",
    "numeric": "decimal",
    "float": "float",
    "double": "float",
    "real": "float",
    "char": "varchar",
    "varchar": "varchar",
    "tinytext": "text",
    "text": "text",
    "mediumtext": "text",
    "longtext": "text",
    "datetime": "datetime",
    "timestamp": "datetime",
    "date": "date",
    "time": "time",
    "bit": "boolean",
    "bool": "boolean",
    "boolean": "boolean",
}


def normalize_column_type(data_type: str, column_type: str = "") -> str:
    """
    Map a MySQL column type to the type names used in table maps.

    TINYINT(1) is how MySQL stores booleans, so it maps to "boolean".
    Unknown types are returned lower-cased.
    """
    data_type = data_type.lower()
    if data_type == "tinyint" and column_type.lower().startswith("tinyint(1)"):
        return "boolean"
    return TYPE_MAP.get(data_type, data_type)


def camelize(name: str) -> str:
    """book_author -> BookAuthor"""
    return "".join(part[:1].upper() + part[1:] for part in name.split("_") if part)


class MySQLClient:
    def __init__(self, host, port, user, password, database):
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.database = database
        self.connection = None

    def connect(self) -> None:
        self.connection = pymysql.connect(
            host=self.host,
            port=self.port,
            user=self.user,
            password=self.password,
            database=self.database,
        )

    def disconnect(self) -> None:
        # Close connection cleanly
        if self.connection:
            self.connection.close()
            self.connection = None

    def fetch_all(self, query: str, params: tuple | None = None) -> list[dict]:
        # Execute SELECT and return rows as dicts
        if self.connection is None:
            raise RuntimeError("Not connected to MySQL")
        cursor = self.connection.cursor(pymysql.cursors.DictCursor)
        try:
            if params is not None:
                cursor.execute(query, params)
            else:
                cursor.execute(query)
            return cast(list[dict[str, Any]], list(cursor.fetchall()))
        finally:
            cursor.close()

    def get_table_map(
        self,
        table_name: str,
        model_class: Optional[type] = None,
        class_map: Optional[Dict[str, type]] = None,
    ) -> TableMap:
        """
        Build the TableMap of a table from INFORMATION_SCHEMA.

        Args:
            table_name: Name of the table
            model_class: Class the table's rows are hydrated into
            class_map: table name → model class, used to name relations
                and to tell the forms which class sits on the other side

        Returns:
            The table map with columns and relations
        """
        class_map = class_map or {}
        table_map = TableMap(table_name, model_class=model_class)

        rows = self.fetch_all(
            "SELECT COLUMN_NAME, DATA_TYPE, COLUMN_TYPE, IS_NULLABLE, "
            "CHARACTER_MAXIMUM_LENGTH, COLUMN_KEY "
            "FROM INFORMATION_SCHEMA.COLUMNS "
            "WHERE TABLE_SCHEMA = %s AND TABLE_NAME = %s "
            "ORDER BY ORDINAL_POSITION",
            (self.database, table_name)
        )
        for row in rows:
            size = row["CHARACTER_MAXIMUM_LENGTH"]
            table_map.add_column(ColumnMap(
                name=row["COLUMN_NAME"],
                type=normalize_column_type(row["DATA_TYPE"], row["COLUMN_TYPE"] or ""),
                size=int(size) if size is not None else None,
                is_nullable=row["IS_NULLABLE"] == "YES",
                is_primary_key=row["COLUMN_KEY"] == "PRI",
                is_unique=row["COLUMN_KEY"] in ("PRI", "UNI"),
            ))

        outgoing = self.fetch_all(
            "SELECT CONSTRAINT_NAME, COLUMN_NAME, REFERENCED_TABLE_NAME, REFERENCED_COLUMN_NAME "
            "FROM INFORMATION_SCHEMA.KEY_COLUMN_USAGE "
            "WHERE TABLE_SCHEMA = %s AND TABLE_NAME = %s "
            "AND REFERENCED_TABLE_NAME IS NOT NULL "
            "ORDER BY CONSTRAINT_NAME, ORDINAL_POSITION",
            (self.database, table_name)
        )
        for constraint in self._group_by_constraint(outgoing):
            first = constraint[0]
            self._add_relation(table_map, RelationMap(
                name=self._relation_name(first["REFERENCED_TABLE_NAME"], class_map),
                type=RelationType.MANY_TO_ONE,
                foreign_table=first["REFERENCED_TABLE_NAME"],
                foreign_class=class_map.get(first["REFERENCED_TABLE_NAME"]),
                local_columns=[row["COLUMN_NAME"] for row in constraint],
                foreign_columns=[row["REFERENCED_COLUMN_NAME"] for row in constraint],
            ))

        incoming = self.fetch_all(
            "SELECT k.CONSTRAINT_NAME, k.TABLE_NAME, k.COLUMN_NAME, "
            "k.REFERENCED_COLUMN_NAME, c.COLUMN_KEY, "
            "(SELECT COUNT(*) FROM INFORMATION_SCHEMA.KEY_COLUMN_USAGE p "
            "WHERE p.TABLE_SCHEMA = k.TABLE_SCHEMA AND p.TABLE_NAME = k.TABLE_NAME "
            "AND p.CONSTRAINT_NAME = 'PRIMARY') AS PK_COLUMNS "
            "FROM INFORMATION_SCHEMA.KEY_COLUMN_USAGE k "
            "JOIN INFORMATION_SCHEMA.COLUMNS c "
            "ON c.TABLE_SCHEMA = k.TABLE_SCHEMA AND c.TABLE_NAME = k.TABLE_NAME "
            "AND c.COLUMN_NAME = k.COLUMN_NAME "
            "WHERE k.REFERENCED_TABLE_SCHEMA = %s AND k.REFERENCED_TABLE_NAME = %s "
            "ORDER BY k.CONSTRAINT_NAME, k.ORDINAL_POSITION",
            (self.database, table_name)
        )
        for constraint in self._group_by_constraint(incoming):
            first = constraint[0]
            self._add_relation(table_map, RelationMap(
                name=self._relation_name(first["TABLE_NAME"], class_map),
                type=self._incoming_relation_type(constraint),
                foreign_table=first["TABLE_NAME"],
                foreign_class=class_map.get(first["TABLE_NAME"]),
                local_columns=[row["REFERENCED_COLUMN_NAME"] for row in constraint],
                foreign_columns=[row["COLUMN_NAME"] for row in constraint],
            ))

        return table_map

    @staticmethod
    def _incoming_relation_type(constraint: List[dict]) -> RelationType:
        """
        Type of a relation seen from the referenced table.

        ONE_TO_ONE  the referencing columns are the other table's whole
                    primary key, or a single UNIQUE column
        MANY_TO_MANY the referencing columns are only part of a composite
                    primary key (a cross-reference table such as book_tag)
        ONE_TO_MANY anything else
        """
        keys = [row["COLUMN_KEY"] for row in constraint]
        pk_columns = int(constraint[0].get("PK_COLUMNS") or 0)

        if all(key == "PRI" for key in keys):
            if len(constraint) == pk_columns:
                return RelationType.ONE_TO_ONE
            return RelationType.MANY_TO_MANY
        if len(constraint) == 1 and keys[0] == "UNI":
            return RelationType.ONE_TO_ONE
        return RelationType.ONE_TO_MANY

    @staticmethod
    def _group_by_constraint(rows: List[dict]) -> List[List[dict]]:
        groups: Dict[str, List[dict]] = {}
        for row in rows:
            groups.setdefault(row["CONSTRAINT_NAME"], []).append(row)
        return list(groups.values())

    @staticmethod
    def _relation_name(table_name: str, class_map: Dict[str, type]) -> str:
        model_class = class_map.get(table_name)
        if model_class is not None:
            return model_class.__name__
        return camelize(table_name)

    @staticmethod
    def _add_relation(table_map: TableMap, relation: RelationMap) -> None:
        # Two foreign keys to the same table: disambiguate by column
        if table_map.has_relation(relation.name):
            if relation.type == RelationType.MANY_TO_ONE:
                column = relation.local_columns[0]
            else:
                column = relation.foreign_columns[0]
            relation.name = f"{relation.name}RelatedBy{camelize(column)}"
        table_map.add_relation(relation)

    def __enter__(self):
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.disconnect()


class MySQLModelQuery:
    """Loads the models of one table through a connected MySQLClient."""

    def __init__(self, client: MySQLClient, table_map: TableMap):
        self.client = client
        self.table_map = table_map

    def get_table_map(self) -> TableMap:
        return self.table_map

    def find(self) -> list:
        rows = self.client.fetch_all(f"SELECT * FROM `{self.table_map.name}`")
        return [self._hydrate(row) for row in rows]

    def find_pk(self, key: Any) -> Optional[Any]:
        primary_keys = [column.name for column in self.table_map.get_primary_keys()]
        if not primary_keys:
            raise RuntimeError(f'Table "{self.table_map.name}" has no primary key')

        values = tuple(key) if len(primary_keys) > 1 else (key,)
        if len(values) != len(primary_keys):
            raise ValueError(
                f"Expected {len(primary_keys)} key values for {self.table_map.name}, got {len(values)}"
            )

        where_clause = " AND ".join(f"`{name}` = %s" for name in primary_keys)
        rows = self.client.fetch_all(
            f"SELECT * FROM `{self.table_map.name}` WHERE {where_clause} LIMIT 1",
            values
        )
        if not rows:
            return None
        return self._hydrate(rows[0])

    def _hydrate(self, row: dict) -> Any:
        if self.table_map.model_class is None:
            return row
        return self.table_map.model_class(**row)


def register_models(registry, client: MySQLClient, class_map: Dict[str, type]) -> None:
    """
    Reflect every table in class_map and register a query factory for
    its model class.
    """
    for table_name, model_class in class_map.items():
        table_map = client.get_table_map(table_name, model_class, class_map)
        registry.register(
            model_class,
            lambda table_map=table_map: MySQLModelQuery(client, table_map),
        )
