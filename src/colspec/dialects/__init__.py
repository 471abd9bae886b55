"""
Dialect-specific schema builders.
"""

from .cubrid import CubridSchemaBuilder
from .mssql import MSSQLSchemaBuilder
from .mysql import MySQLSchemaBuilder
from .oracle import OracleSchemaBuilder
from .postgres import PostgresSchemaBuilder
from .sqlite import SQLiteSchemaBuilder

__all__ = [
    "CubridSchemaBuilder",
    "MSSQLSchemaBuilder",
    "MySQLSchemaBuilder",
    "OracleSchemaBuilder",
    "PostgresSchemaBuilder",
    "SQLiteSchemaBuilder",
]
