"""
Driver-aware resolution of dialect schema builders.

Migration code calls column factories on a resolver; the resolver asks its
connection which driver it uses and forwards the call to the matching
dialect builder::

    schema = SchemaBuilderResolver("sqlite:///app.db")
    schema.string(64).not_null()   # -> SQLiteSchemaBuilder instance
"""

from __future__ import annotations

import importlib
from types import MappingProxyType
from typing import Any, Callable, Final, Mapping

from ..connections import ConnectionLocator, ConnectionRegistry
from ..errors import BuilderImportError, UnknownDriverError
from ..utils import get_logger
from .builder import ColumnSchemaBuilder

DEFAULT_BUILDER_MAP: Final[Mapping[str, str]] = MappingProxyType(
    {
        "pgsql": "colspec.dialects.postgres.PostgresSchemaBuilder",
        "postgresql": "colspec.dialects.postgres.PostgresSchemaBuilder",
        "postgres": "colspec.dialects.postgres.PostgresSchemaBuilder",
        "mysqli": "colspec.dialects.mysql.MySQLSchemaBuilder",
        "mysql": "colspec.dialects.mysql.MySQLSchemaBuilder",
        "sqlite": "colspec.dialects.sqlite.SQLiteSchemaBuilder",
        "sqlite2": "colspec.dialects.sqlite.SQLiteSchemaBuilder",
        "sqlite3": "colspec.dialects.sqlite.SQLiteSchemaBuilder",
        "sqlsrv": "colspec.dialects.mssql.MSSQLSchemaBuilder",
        "mssql": "colspec.dialects.mssql.MSSQLSchemaBuilder",
        "dblib": "colspec.dialects.mssql.MSSQLSchemaBuilder",
        "oci": "colspec.dialects.oracle.OracleSchemaBuilder",
        "cubrid": "colspec.dialects.cubrid.CubridSchemaBuilder",
    }
)

FACTORY_METHODS: Final[frozenset[str]] = frozenset(
    {
        "primary_key",
        "big_primary_key",
        "string",
        "text",
        "small_integer",
        "integer",
        "big_integer",
        "float",
        "double",
        "decimal",
        "date_time",
        "timestamp",
        "time",
        "date",
        "binary",
        "boolean",
        "money",
    }
)


def import_builder(path: str) -> type[ColumnSchemaBuilder]:
    """
    Import a builder class from its dotted path.
    """

    module_name, _, class_name = path.rpartition(".")
    if not module_name:
        raise BuilderImportError(f"'{path}' is not a dotted class path.")
    try:
        module = importlib.import_module(module_name)
        builder = getattr(module, class_name)
    except (ImportError, AttributeError) as exc:
        raise BuilderImportError(f"Cannot import schema builder '{path}'.") from exc
    if not (isinstance(builder, type) and issubclass(builder, ColumnSchemaBuilder)):
        raise BuilderImportError(f"'{path}' is not a ColumnSchemaBuilder subclass.")
    return builder


class SchemaBuilderResolver:
    """
    Forwards column factory calls to the builder matching the connection's driver.

    The driver is looked up lazily on the first factory call and the chosen
    builder class is cached until the connection or the driver table is
    replaced. Each resolver owns its state; concurrent contexts that target
    different databases should hold separate resolvers.
    """

    def __init__(
        self,
        connection: Any = "db",
        *,
        locator: ConnectionLocator | None = None,
        builder_map: Mapping[str, str] | None = None,
    ) -> None:
        self._connection = connection
        self._locator: ConnectionLocator = locator if locator is not None else ConnectionRegistry()
        self._builder_map: Mapping[str, str] = MappingProxyType(
            dict(builder_map if builder_map is not None else DEFAULT_BUILDER_MAP)
        )
        self._resolved: type[ColumnSchemaBuilder] | None = None
        self.logger = get_logger("schema.resolver")

    @property
    def connection(self) -> Any:
        return self._connection

    @property
    def builder_map(self) -> Mapping[str, str]:
        return self._builder_map

    def set_connection(self, connection: Any) -> None:
        self._connection = connection
        self._resolved = None

    def set_builder_map(self, builder_map: Mapping[str, str]) -> None:
        self._builder_map = MappingProxyType(dict(builder_map))
        self._resolved = None

    def driver_name(self) -> str:
        handle = self._locator.resolve(self._connection)
        return handle.get_driver_name()

    def resolve(self) -> type[ColumnSchemaBuilder]:
        if self._resolved is not None:
            return self._resolved
        driver = self.driver_name()
        path = self._builder_map.get(driver)
        if path is None:
            self.logger.error("No schema builder registered for driver '%s'", driver)
            raise UnknownDriverError(driver, self._builder_map.keys())
        builder = import_builder(path)
        self.logger.debug("Resolved driver '%s' to %s", driver, builder.__qualname__)
        self._resolved = builder
        return builder

    def __getattr__(self, name: str) -> Callable[..., ColumnSchemaBuilder]:
        if name not in FACTORY_METHODS:
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

        def forward(*args: Any, **kwargs: Any) -> ColumnSchemaBuilder:
            return getattr(self.resolve(), name)(*args, **kwargs)

        forward.__name__ = name
        return forward
