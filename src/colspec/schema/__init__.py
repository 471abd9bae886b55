"""
Column type builders and driver-based resolution.
"""

from .builder import NOT_SET, ColumnSchemaBuilder, format_default
from .resolver import DEFAULT_BUILDER_MAP, FACTORY_METHODS, SchemaBuilderResolver, import_builder
from .types import ALL_TYPES, ColumnType

__all__ = [
    "ALL_TYPES",
    "ColumnSchemaBuilder",
    "ColumnType",
    "DEFAULT_BUILDER_MAP",
    "FACTORY_METHODS",
    "NOT_SET",
    "SchemaBuilderResolver",
    "format_default",
    "import_builder",
]
