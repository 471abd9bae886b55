"""
Credential handling helpers.
"""

from .dsns import DSNConfig, parse_dsn

__all__ = ["DSNConfig", "parse_dsn"]
