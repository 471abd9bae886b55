"""
Initial blog schema written once and rendered for any supported database.
"""

from __future__ import annotations

from typing import Dict, List

from colspec import ColumnSchemaBuilder, ConnectionRegistry, SchemaBuilderResolver

Columns = Dict[str, ColumnSchemaBuilder]


def blog_tables(schema: SchemaBuilderResolver) -> Dict[str, Columns]:
    """
    Column declarations for the blog tables, independent of the target engine.
    """

    return {
        "author": {
            "id": schema.primary_key(),
            "name": schema.string(64).not_null(),
            "email": schema.string(128).not_null(),
            "bio": schema.text(),
        },
        "post": {
            "id": schema.big_primary_key(),
            "author_id": schema.integer().not_null(),
            "title": schema.string(200).not_null().default("Untitled"),
            "rating": schema.decimal(3, 1).check("rating >= 0"),
            "published": schema.boolean().not_null().default(False),
            "views": schema.integer().not_null().default(0),
            "created_at": schema.date_time(),
        },
    }


def create_table_statements(schema: SchemaBuilderResolver) -> List[str]:
    statements: List[str] = []
    for table, columns in blog_tables(schema).items():
        first = next(iter(columns.values()))
        body = ", ".join(builder.column_definition(name) for name, builder in columns.items())
        statements.append(f"CREATE TABLE {first.quote_identifier(table)} ({body})")
    return statements


def run_demo(dsn: str = "sqlite:///:memory:") -> List[str]:
    registry = ConnectionRegistry({"db": dsn})
    return create_table_statements(SchemaBuilderResolver("db", locator=registry))
