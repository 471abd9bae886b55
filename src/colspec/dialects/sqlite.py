"""
SQLite schema builder.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import ClassVar, Mapping

from ..schema.builder import ColumnSchemaBuilder
from ..schema.types import ColumnType


class SQLiteSchemaBuilder(ColumnSchemaBuilder):
    """
    Column builder for SQLite 2 and 3.
    """

    type_map: ClassVar[Mapping[str, str]] = MappingProxyType(
        {
            ColumnType.PK: "integer PRIMARY KEY AUTOINCREMENT NOT NULL",
            ColumnType.BIGPK: "integer PRIMARY KEY AUTOINCREMENT NOT NULL",
            ColumnType.STRING: "varchar(255)",
            ColumnType.TEXT: "text",
            ColumnType.SMALLINT: "smallint",
            ColumnType.INTEGER: "integer",
            ColumnType.BIGINT: "bigint",
            ColumnType.FLOAT: "float",
            ColumnType.DOUBLE: "double",
            ColumnType.DECIMAL: "decimal(10,0)",
            ColumnType.DATETIME: "datetime",
            ColumnType.TIMESTAMP: "timestamp",
            ColumnType.TIME: "time",
            ColumnType.DATE: "date",
            ColumnType.BINARY: "blob",
            ColumnType.BOOLEAN: "boolean",
            ColumnType.MONEY: "decimal(19,4)",
        }
    )
