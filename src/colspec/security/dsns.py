"""DSN parsing and redaction utilities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from urllib.parse import parse_qs, urlencode, urlparse

from ..errors import ConnectionResolutionError

REDACTED_VALUE = "***"

_SENSITIVE_QUERY_KEYS = ("password", "passwd", "pwd", "secret", "token", "key")


@dataclass
class DSNConfig:
    scheme: str
    username: Optional[str]
    password: Optional[str]
    host: Optional[str]
    port: Optional[int]
    database: Optional[str]
    path: str
    query: dict[str, str]

    @property
    def driver_name(self) -> str:
        """
        Driver identifier encoded in the scheme; ``postgresql+psycopg`` yields
        ``postgresql``.
        """

        return self.scheme.split("+", 1)[0].lower()

    def redacted(self) -> str:
        """
        Return the DSN with credentials redacted but structure preserved.
        """

        netloc = ""
        if self.username:
            netloc += self.username
            if self.password:
                netloc += f":{REDACTED_VALUE}"
            netloc += "@"
        if self.host:
            netloc += self.host
        if self.port:
            netloc += f":{self.port}"

        query = {
            key: REDACTED_VALUE if _is_sensitive(key) else value for key, value in self.query.items()
        }
        query_string = urlencode(query, safe="*") if query else ""

        # sqlite:///path has an empty netloc but keeps the triple slash
        result = f"{self.scheme}://"
        if netloc:
            result += netloc
        result += self.path or ""
        if query_string:
            result += f"?{query_string}"
        return result


def _is_sensitive(key: str) -> bool:
    normalized = key.lower()
    return any(token in normalized for token in _SENSITIVE_QUERY_KEYS)


def parse_dsn(dsn: str) -> DSNConfig:
    parsed = urlparse(dsn)
    if not parsed.scheme:
        raise ConnectionResolutionError(f"DSN '{dsn}' does not name a driver scheme.")
    query = {k: v[0] for k, v in parse_qs(parsed.query).items()}
    try:
        port = parsed.port
    except ValueError as exc:
        raise ConnectionResolutionError(f"DSN for driver '{parsed.scheme}' has an invalid port.") from exc
    return DSNConfig(
        scheme=parsed.scheme,
        username=parsed.username,
        password=parsed.password,
        host=parsed.hostname,
        port=port,
        database=parsed.path.lstrip("/") or None,
        path=parsed.path or "",
        query=query,
    )

