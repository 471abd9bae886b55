"""
Oracle schema builder.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import ClassVar, Mapping

from ..schema.builder import ColumnSchemaBuilder
from ..schema.types import ColumnType


class OracleSchemaBuilder(ColumnSchemaBuilder):
    type_map: ClassVar[Mapping[str, str]] = MappingProxyType(
        {
            ColumnType.PK: "NUMBER(10) NOT NULL PRIMARY KEY",
            ColumnType.BIGPK: "NUMBER(20) NOT NULL PRIMARY KEY",
            ColumnType.STRING: "VARCHAR2(255)",
            ColumnType.TEXT: "CLOB",
            ColumnType.SMALLINT: "NUMBER(5)",
            ColumnType.INTEGER: "NUMBER(10)",
            ColumnType.BIGINT: "NUMBER(20)",
            ColumnType.FLOAT: "NUMBER",
            ColumnType.DOUBLE: "NUMBER",
            ColumnType.DECIMAL: "NUMBER",
            ColumnType.DATETIME: "TIMESTAMP",
            ColumnType.TIMESTAMP: "TIMESTAMP",
            ColumnType.TIME: "TIMESTAMP",
            ColumnType.DATE: "DATE",
            ColumnType.BINARY: "BLOB",
            ColumnType.BOOLEAN: "NUMBER(1)",
            ColumnType.MONEY: "NUMBER(19,4)",
        }
    )
