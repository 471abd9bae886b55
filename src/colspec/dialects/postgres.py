"""
PostgreSQL schema builder.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import ClassVar, Mapping

from ..schema.builder import ColumnSchemaBuilder
from ..schema.types import ColumnType


class PostgresSchemaBuilder(ColumnSchemaBuilder):
    """
    Column builder for PostgreSQL, using serial types for primary keys.
    """

    type_map: ClassVar[Mapping[str, str]] = MappingProxyType(
        {
            ColumnType.PK: "serial NOT NULL PRIMARY KEY",
            ColumnType.BIGPK: "bigserial NOT NULL PRIMARY KEY",
            ColumnType.STRING: "varchar(255)",
            ColumnType.TEXT: "text",
            ColumnType.SMALLINT: "smallint",
            ColumnType.INTEGER: "integer",
            ColumnType.BIGINT: "bigint",
            ColumnType.FLOAT: "double precision",
            ColumnType.DOUBLE: "double precision",
            ColumnType.DECIMAL: "numeric(10,0)",
            ColumnType.DATETIME: "timestamp(0)",
            ColumnType.TIMESTAMP: "timestamp(0)",
            ColumnType.TIME: "time(0)",
            ColumnType.DATE: "date",
            ColumnType.BINARY: "bytea",
            ColumnType.BOOLEAN: "boolean",
            ColumnType.MONEY: "numeric(19,4)",
        }
    )
