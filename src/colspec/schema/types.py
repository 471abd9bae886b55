"""
Abstract column type keywords understood by every schema builder.
"""

from __future__ import annotations

from typing import Final


class ColumnType:
    """
    Dialect-neutral type keywords. Dialect builders map these to the
    engine's own spelling.
    """

    PK: Final[str] = "pk"
    BIGPK: Final[str] = "bigpk"
    STRING: Final[str] = "string"
    TEXT: Final[str] = "text"
    SMALLINT: Final[str] = "smallint"
    INTEGER: Final[str] = "integer"
    BIGINT: Final[str] = "bigint"
    FLOAT: Final[str] = "float"
    DOUBLE: Final[str] = "double"
    DECIMAL: Final[str] = "decimal"
    DATETIME: Final[str] = "datetime"
    TIMESTAMP: Final[str] = "timestamp"
    TIME: Final[str] = "time"
    DATE: Final[str] = "date"
    BINARY: Final[str] = "binary"
    BOOLEAN: Final[str] = "boolean"
    MONEY: Final[str] = "money"


ALL_TYPES: Final[frozenset[str]] = frozenset(
    value for key, value in vars(ColumnType).items() if key.isupper()
)
