"""
Microsoft SQL Server schema builder.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import ClassVar, Mapping

from ..schema.builder import ColumnSchemaBuilder
from ..schema.types import ColumnType


class MSSQLSchemaBuilder(ColumnSchemaBuilder):
    """
    Column builder shared by the sqlsrv, mssql and dblib drivers.
    """

    type_map: ClassVar[Mapping[str, str]] = MappingProxyType(
        {
            ColumnType.PK: "int IDENTITY PRIMARY KEY",
            ColumnType.BIGPK: "bigint IDENTITY PRIMARY KEY",
            ColumnType.STRING: "varchar(255)",
            ColumnType.TEXT: "text",
            ColumnType.SMALLINT: "smallint",
            ColumnType.INTEGER: "int",
            ColumnType.BIGINT: "bigint",
            ColumnType.FLOAT: "float",
            ColumnType.DOUBLE: "float",
            ColumnType.DECIMAL: "decimal",
            ColumnType.DATETIME: "datetime",
            ColumnType.TIMESTAMP: "timestamp",
            ColumnType.TIME: "time",
            ColumnType.DATE: "date",
            ColumnType.BINARY: "binary(1)",
            ColumnType.BOOLEAN: "bit",
            ColumnType.MONEY: "decimal(19,4)",
        }
    )

    @classmethod
    def quote_identifier(cls, identifier: str) -> str:
        escaped = identifier.replace("]", "]]")
        return f"[{escaped}]"
