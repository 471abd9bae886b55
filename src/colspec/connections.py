"""
Connection references consumed by the schema builder resolver.

colspec never opens connections. It only needs a handle that can report
its driver name, and a locator that turns a symbolic reference into such a
handle.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping, Protocol, runtime_checkable

from .errors import ConnectionResolutionError
from .security.dsns import DSNConfig, parse_dsn
from .utils import get_logger


@runtime_checkable
class ConnectionHandle(Protocol):
    """
    Anything that can name the database driver it talks to.
    """

    def get_driver_name(self) -> str: ...


class ConnectionLocator(Protocol):
    """
    Turns a connection reference into a :class:`ConnectionHandle`.
    """

    def resolve(self, reference: Any) -> ConnectionHandle: ...


@dataclass
class ConnectionConfig:
    """
    DSN-backed connection description usable as a handle.
    """

    url: str
    dsn: DSNConfig | None = None
    source: str | None = None

    @classmethod
    def from_dsn(cls, dsn: str, **kwargs: Any) -> "ConnectionConfig":
        return cls(url=dsn, dsn=parse_dsn(dsn), **kwargs)

    @classmethod
    def from_env(cls, env_var: str, **kwargs: Any) -> "ConnectionConfig":
        """
        Build a config from an environment variable containing a DSN.
        """

        value = os.getenv(env_var)
        if not value:
            raise ConnectionResolutionError(f"Environment variable {env_var} is not set")
        return cls.from_dsn(value, source=env_var, **kwargs)

    def get_driver_name(self) -> str:
        if self.dsn is None:
            self.dsn = parse_dsn(self.url)
        return self.dsn.driver_name

    def redacted_dsn(self) -> str:
        """
        Return a DSN safe for logging (credentials removed).
        """

        if self.dsn:
            return self.dsn.redacted()
        return parse_dsn(self.url).redacted()

    def descriptive_label(self) -> str:
        redacted = self.redacted_dsn()
        if self.source:
            return f"{self.source} ({redacted})"
        return redacted


class ConnectionRegistry:
    """
    Default locator keeping named connection handles.

    ``resolve`` accepts a handle (returned unchanged), a registered name, a
    DSN string or a mapping with a ``dsn`` key.
    """

    def __init__(self, connections: Mapping[str, Any] | None = None) -> None:
        self._connections: dict[str, ConnectionHandle] = {}
        self.logger = get_logger("connections")
        for name, target in (connections or {}).items():
            self.register(name, target)

    def register(self, name: str, target: Any) -> ConnectionHandle:
        handle = self._coerce(target)
        self._connections[name] = handle
        self.logger.debug("Registered connection '%s' -> %s", name, _describe(handle))
        return handle

    def register_env(self, name: str, env_var: str) -> ConnectionHandle:
        return self.register(name, ConnectionConfig.from_env(env_var))

    def unregister(self, name: str) -> None:
        self._connections.pop(name, None)

    def names(self) -> list[str]:
        return sorted(self._connections)

    def resolve(self, reference: Any) -> ConnectionHandle:
        if isinstance(reference, str) and reference in self._connections:
            return self._connections[reference]
        if isinstance(reference, str) and "://" not in reference:
            raise ConnectionResolutionError(
                f"Unknown connection '{reference}'; registered: {', '.join(self.names()) or 'none'}."
            )
        return self._coerce(reference)

    @staticmethod
    def _coerce(target: Any) -> ConnectionHandle:
        if isinstance(target, ConnectionHandle):
            return target
        if isinstance(target, str):
            if "://" not in target:
                raise ConnectionResolutionError(f"'{target}' is not a DSN.")
            return ConnectionConfig.from_dsn(target)
        if isinstance(target, Mapping):
            dsn = target.get("dsn")
            if not dsn:
                raise ConnectionResolutionError("Connection mapping requires a 'dsn' entry.")
            return ConnectionConfig.from_dsn(dsn, source=target.get("source"))
        raise ConnectionResolutionError(
            f"Cannot resolve connection from {type(target).__name__} value."
        )


def _describe(handle: ConnectionHandle) -> str:
    if isinstance(handle, ConnectionConfig):
        return handle.descriptive_label()
    return type(handle).__name__
