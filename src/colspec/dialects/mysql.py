"""
MySQL schema builder.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import ClassVar, Mapping

from ..schema.builder import ColumnSchemaBuilder
from ..schema.types import ColumnType


class MySQLSchemaBuilder(ColumnSchemaBuilder):
    """
    Column builder for MySQL using backtick identifier quoting.
    """

    type_map: ClassVar[Mapping[str, str]] = MappingProxyType(
        {
            ColumnType.PK: "int(11) NOT NULL AUTO_INCREMENT PRIMARY KEY",
            ColumnType.BIGPK: "bigint(20) NOT NULL AUTO_INCREMENT PRIMARY KEY",
            ColumnType.STRING: "varchar(255)",
            ColumnType.TEXT: "text",
            ColumnType.SMALLINT: "smallint(6)",
            ColumnType.INTEGER: "int(11)",
            ColumnType.BIGINT: "bigint(20)",
            ColumnType.FLOAT: "float",
            ColumnType.DOUBLE: "double",
            ColumnType.DECIMAL: "decimal(10,0)",
            ColumnType.DATETIME: "datetime",
            ColumnType.TIMESTAMP: "timestamp",
            ColumnType.TIME: "time",
            ColumnType.DATE: "date",
            ColumnType.BINARY: "blob",
            ColumnType.BOOLEAN: "tinyint(1)",
            ColumnType.MONEY: "decimal(19,4)",
        }
    )

    @classmethod
    def quote_identifier(cls, identifier: str) -> str:
        escaped = identifier.replace("`", "``")
        return f"`{escaped}`"
