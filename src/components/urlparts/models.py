"""
URL parts component - Data models.

Normalized URL components as produced by parse() and consumed by build().
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any


class UrlParseError(ValueError):
    """Raised when a URL-like string cannot be split into components."""


@dataclass(frozen=True)
class UrlParts:
    """
    Normalized URL components.

    Absent components are None, never empty strings. The one exception is
    ``path``, which may be "" for a site whose media root is the host root.
    """

    scheme: str | None = None
    user: str | None = None
    password: str | None = None
    host: str | None = None
    port: int | None = None
    path: str | None = None
    hash: str | None = None
    query: str | None = None

    def with_changes(self, **changes: Any) -> UrlParts:
        """Return a copy with the given components replaced."""
        return replace(self, **changes)

    @property
    def is_hash_only(self) -> bool:
        """True if only a fragment is set (no scheme, host or path)."""
        return (
            self.hash is not None
            and self.scheme is None
            and self.host is None
            and self.path is None
        )
