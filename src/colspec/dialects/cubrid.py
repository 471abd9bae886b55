"""
CUBRID schema builder.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import ClassVar, Mapping

from ..schema.builder import ColumnSchemaBuilder
from ..schema.types import ColumnType


class CubridSchemaBuilder(ColumnSchemaBuilder):
    type_map: ClassVar[Mapping[str, str]] = MappingProxyType(
        {
            ColumnType.PK: "int NOT NULL AUTO_INCREMENT PRIMARY KEY",
            ColumnType.BIGPK: "bigint NOT NULL AUTO_INCREMENT PRIMARY KEY",
            ColumnType.STRING: "varchar(255)",
            ColumnType.TEXT: "varchar",
            ColumnType.SMALLINT: "smallint",
            ColumnType.INTEGER: "int",
            ColumnType.BIGINT: "bigint",
            ColumnType.FLOAT: "float(7)",
            ColumnType.DOUBLE: "double(15)",
            ColumnType.DECIMAL: "decimal(10,0)",
            ColumnType.DATETIME: "datetime",
            ColumnType.TIMESTAMP: "timestamp",
            ColumnType.TIME: "time",
            ColumnType.DATE: "date",
            ColumnType.BINARY: "blob",
            ColumnType.BOOLEAN: "smallint",
            ColumnType.MONEY: "decimal(19,4)",
        }
    )
