"""
colspec public package initialization.

Fluent, driver-aware column type builders for migration scripts.
"""

from .connections import (  # noqa: F401
    ConnectionConfig,
    ConnectionHandle,
    ConnectionLocator,
    ConnectionRegistry,
)
from .dialects import (  # noqa: F401
    CubridSchemaBuilder,
    MSSQLSchemaBuilder,
    MySQLSchemaBuilder,
    OracleSchemaBuilder,
    PostgresSchemaBuilder,
    SQLiteSchemaBuilder,
)
from .errors import (  # noqa: F401
    BuilderImportError,
    ConnectionResolutionError,
    InvalidColumnArgumentError,
    SchemaBuilderError,
    UnknownDriverError,
    UnsupportedColumnTypeError,
)
from .schema import ColumnSchemaBuilder, ColumnType, SchemaBuilderResolver  # noqa: F401

__all__ = [
    "ColumnSchemaBuilder",
    "ColumnType",
    "SchemaBuilderResolver",
    "ConnectionConfig",
    "ConnectionHandle",
    "ConnectionLocator",
    "ConnectionRegistry",
    "SQLiteSchemaBuilder",
    "PostgresSchemaBuilder",
    "MySQLSchemaBuilder",
    "MSSQLSchemaBuilder",
    "OracleSchemaBuilder",
    "CubridSchemaBuilder",
    "SchemaBuilderError",
    "UnknownDriverError",
    "BuilderImportError",
    "InvalidColumnArgumentError",
    "UnsupportedColumnTypeError",
    "ConnectionResolutionError",
]
