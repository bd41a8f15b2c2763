"""
URL parts - split and rebuild URL-like strings.

Functional Core - pure string transformations, no I/O.

Key behaviors:
- Scheme and host are lowercased, port coerced to int
- Path always starts with "/", is lowercased and has no trailing slash
- A fragment holding "?" is split into hash and query, so hash-routed
  frontend URLs ("/page#section?tab=2") keep their state
- build() emits components in a fixed order: scheme, authority, path,
  hash, query
- IPv6 hosts are stored without brackets and bracketed again by build()

Invariants:
- build(parse(build(parts))) == build(parts)
"""

from __future__ import annotations

from urllib.parse import urlsplit

from .models import UrlParseError, UrlParts


def _normalize_path(path: str) -> str:
    return "/" + path.lower().strip("/")


def _split_fragment(fragment: str) -> tuple[str | None, str | None]:
    if "?" not in fragment:
        return fragment or None, None
    hash_part, _, query = fragment.partition("?")
    return hash_part or None, query or None


def parse(raw: str) -> UrlParts:
    """
    Split a URL-like string into normalized components.

    Raises:
        UrlParseError: if the port is not numeric or the host is malformed.
    """
    raw = raw.strip()
    try:
        split = urlsplit(raw)
        port = split.port
    except ValueError as e:
        raise UrlParseError(f"Cannot parse URL {raw[:80]!r}: {e}") from e

    host = split.hostname or None
    path = _normalize_path(split.path) if split.path else None
    query = split.query or None

    hash_part = None
    if split.fragment:
        hash_part, fragment_query = _split_fragment(split.fragment)
        if fragment_query:
            query = fragment_query

    return UrlParts(
        scheme=split.scheme.lower() if split.scheme else None,
        user=split.username or None,
        password=split.password or None,
        host=host,
        port=port,
        path=path,
        hash=hash_part,
        query=query,
    )


def build_path(parts: UrlParts) -> str:
    """Build the host-relative part of a URL (path, hash, query)."""
    result = parts.path or ""
    if parts.hash is not None:
        result += f"#{parts.hash}"
    if parts.query is not None:
        result += f"?{parts.query}"
    return result


def build(parts: UrlParts) -> str:
    """Build a URL string from components, omitting absent ones."""
    result = ""
    if parts.scheme is not None:
        result += f"{parts.scheme}:"
    if parts.user is not None or parts.host is not None:
        result += "//"
    if parts.user is not None:
        result += parts.user
        if parts.password is not None:
            result += f":{parts.password}"
        result += "@"
    if parts.host is not None:
        result += f"[{parts.host}]" if ":" in parts.host else parts.host
    if parts.port is not None:
        result += f":{parts.port}"
    return result + build_path(parts)


def same_origin(parts: UrlParts, host: str | None, port: int | None) -> bool:
    """
    Check whether a parsed URL points at the given host and port.

    URLs without a host are relative and always match. Otherwise host and
    port must both be equal; a missing port only matches a missing port.
    """
    if parts.host is None:
        return True
    if parts.host != host:
        return False
    return parts.port == port
