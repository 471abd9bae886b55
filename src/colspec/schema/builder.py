"""
Fluent column type builder used by migration scripts.

A builder captures one column's declaration and renders it as an abstract
type clause, e.g. ``string(64) NOT NULL DEFAULT 'n/a'``. Dialect subclasses
(see ``colspec.dialects``) additionally know how their engine spells each
abstract type.

Example::

    columns = {
        "name": SQLiteSchemaBuilder.string(64).not_null(),
        "type": SQLiteSchemaBuilder.integer().not_null().default(10),
        "description": SQLiteSchemaBuilder.text(),
    }
"""

from __future__ import annotations

import math
import re
from typing import Any, ClassVar, Mapping

from ..errors import InvalidColumnArgumentError, UnsupportedColumnTypeError
from .types import ALL_TYPES, ColumnType


class _NotSet:
    """Marker for "no default configured"; distinct from every default value."""

    _instance: ClassVar["_NotSet | None"] = None

    def __new__(cls) -> "_NotSet":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_SET"

    def __bool__(self) -> bool:
        return False


NOT_SET: Any = _NotSet()

_LENGTH_GROUP_RE = re.compile(r"\(.+?\)")


def format_default(value: Any) -> str:
    """
    Render a default value as a SQL literal based on the value's own kind.

    Numbers are emitted unquoted, booleans as ``TRUE``/``FALSE`` and
    everything else as a single-quoted string with embedded quotes doubled.
    """

    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, (int, float)):
        return str(value)
    escaped = str(value).replace("'", "''")
    return f"'{escaped}'"


class ColumnSchemaBuilder:
    """
    Abstract, dialect-agnostic column declaration.

    Instances are created through the class-level factories so the concrete
    class always matches the dialect the call was made through. Mutators
    update the builder in place and return it for chaining.
    """

    type_map: ClassVar[Mapping[str, str]] = {}

    def __init__(self, column_type: str, length: int | str | None = None) -> None:
        if column_type not in ALL_TYPES:
            raise InvalidColumnArgumentError(f"Unknown column type '{column_type}'.")
        self._type = column_type
        self.length = length
        self.is_not_null: bool | None = None
        self.default_value: Any = NOT_SET
        self.check_expression: str | None = None

    @property
    def type(self) -> str:
        return self._type

    # Factories -----------------------------------------------------------
    @classmethod
    def primary_key(cls, length: int | None = None) -> "ColumnSchemaBuilder":
        return cls._create_default(ColumnType.PK, length)

    @classmethod
    def big_primary_key(cls, length: int | None = None) -> "ColumnSchemaBuilder":
        return cls._create_default(ColumnType.BIGPK, length)

    @classmethod
    def string(cls, length: int | None = None) -> "ColumnSchemaBuilder":
        return cls._create_default(ColumnType.STRING, length)

    @classmethod
    def text(cls, length: int | None = None) -> "ColumnSchemaBuilder":
        return cls._create_default(ColumnType.TEXT, length)

    @classmethod
    def small_integer(cls, length: int | None = None) -> "ColumnSchemaBuilder":
        return cls._create_default(ColumnType.SMALLINT, length)

    @classmethod
    def integer(cls, length: int | None = None) -> "ColumnSchemaBuilder":
        return cls._create_default(ColumnType.INTEGER, length)

    @classmethod
    def big_integer(cls, length: int | None = None) -> "ColumnSchemaBuilder":
        return cls._create_default(ColumnType.BIGINT, length)

    @classmethod
    def float(cls, precision: int | None = None, scale: int | None = None) -> "ColumnSchemaBuilder":
        return cls._create_numeric(ColumnType.FLOAT, precision, scale)

    @classmethod
    def double(cls, precision: int | None = None, scale: int | None = None) -> "ColumnSchemaBuilder":
        return cls._create_numeric(ColumnType.DOUBLE, precision, scale)

    @classmethod
    def decimal(cls, precision: int | None = None, scale: int | None = None) -> "ColumnSchemaBuilder":
        return cls._create_numeric(ColumnType.DECIMAL, precision, scale)

    @classmethod
    def date_time(cls, length: int | None = None) -> "ColumnSchemaBuilder":
        return cls._create_default(ColumnType.DATETIME, length)

    @classmethod
    def timestamp(cls, length: int | None = None) -> "ColumnSchemaBuilder":
        return cls._create_default(ColumnType.TIMESTAMP, length)

    @classmethod
    def time(cls, length: int | None = None) -> "ColumnSchemaBuilder":
        return cls._create_default(ColumnType.TIME, length)

    @classmethod
    def date(cls, length: int | None = None) -> "ColumnSchemaBuilder":
        return cls._create_default(ColumnType.DATE, length)

    @classmethod
    def binary(cls, length: int | None = None) -> "ColumnSchemaBuilder":
        return cls._create_default(ColumnType.BINARY, length)

    @classmethod
    def boolean(cls, length: int | None = None) -> "ColumnSchemaBuilder":
        return cls._create_default(ColumnType.BOOLEAN, length)

    @classmethod
    def money(cls, precision: int | None = None, scale: int | None = None) -> "ColumnSchemaBuilder":
        return cls._create_numeric(ColumnType.MONEY, precision, scale)

    @classmethod
    def _create_default(cls, column_type: str, length: int | None = None) -> "ColumnSchemaBuilder":
        return cls(column_type, length)

    @classmethod
    def _create_numeric(
        cls, column_type: str, precision: int | None = None, scale: int | None = None
    ) -> "ColumnSchemaBuilder":
        if precision is None:
            if scale is not None:
                raise InvalidColumnArgumentError(
                    f"Column type '{column_type}' received scale={scale!r} without a precision."
                )
            return cls(column_type)
        length = f"{precision},{scale}" if scale is not None else str(precision)
        return cls(column_type, length)

    # Fluent mutators -----------------------------------------------------
    def not_null(self) -> "ColumnSchemaBuilder":
        self.is_not_null = True
        return self

    def default(self, value: Any) -> "ColumnSchemaBuilder":
        """
        Set the column default. ``None`` clears a previously configured default.
        """

        if isinstance(value, float) and not math.isfinite(value):
            raise InvalidColumnArgumentError(f"Default value {value!r} is not a finite number.")
        self.default_value = NOT_SET if value is None else value
        return self

    def check(self, expression: str) -> "ColumnSchemaBuilder":
        self.check_expression = expression
        return self

    @property
    def has_default(self) -> bool:
        return self.default_value is not NOT_SET

    # Rendering -----------------------------------------------------------
    def render(self) -> str:
        return self._type + self._length_clause() + self._modifiers()

    def physical_type(self) -> str:
        """
        Return the dialect spelling of the type, carrying the declared length.
        """

        try:
            mapped = self.type_map[self._type]
        except KeyError:
            raise UnsupportedColumnTypeError(
                f"{self.__class__.__name__} has no column type mapping for '{self._type}'."
            ) from None
        if self.length is None:
            return mapped
        if _LENGTH_GROUP_RE.search(mapped):
            return _LENGTH_GROUP_RE.sub(f"({self.length})", mapped, count=1)
        if " " in mapped:
            # multi-word spellings such as "double precision" take no length
            return mapped
        return f"{mapped}({self.length})"

    def to_sql(self) -> str:
        physical = self.physical_type()
        null_clause = "" if "NOT NULL" in physical.upper() else self._null_clause()
        return physical + null_clause + self._default_clause() + self._check_clause()

    @classmethod
    def quote_identifier(cls, identifier: str) -> str:
        escaped = identifier.replace('"', '""')
        return f'"{escaped}"'

    def column_definition(self, column: str) -> str:
        return f"{self.quote_identifier(column)} {self.to_sql()}"

    def _length_clause(self) -> str:
        return f"({self.length})" if self.length is not None else ""

    def _null_clause(self) -> str:
        return " NOT NULL" if self.is_not_null is True else ""

    def _default_clause(self) -> str:
        if self.default_value is NOT_SET:
            return ""
        return f" DEFAULT {format_default(self.default_value)}"

    def _check_clause(self) -> str:
        return f" CHECK ({self.check_expression})" if self.check_expression is not None else ""

    def _modifiers(self) -> str:
        return self._null_clause() + self._default_clause() + self._check_clause()

    # Python protocol -----------------------------------------------------
    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.render()!r}>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColumnSchemaBuilder):
            return NotImplemented
        return self.__class__ is other.__class__ and self.render() == other.render()

    __hash__ = None  # type: ignore[assignment]
