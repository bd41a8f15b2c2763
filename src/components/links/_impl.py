"""
LinkClassifier - Classify and rewrite hrefs for API consumers.

Functional Core - pure string/context logic, no network access.

Key behaviors:
- mailto: and tel: hrefs become email/tel links
- A bare "#fragment" becomes an anchor link
- Hrefs under the media path on the backend host become absolute file URLs
- Hrefs on the frontend (referer) host become host-relative page links,
  with root links and bare language slugs mapped to the language home page
- Everything else is an external link, passed through as parsed

Invariants:
- Exactly one kind per href; first matching rule wins
- target="_blank" only on page, file and extern links
- Host/port comparison is exact; ":80" does not equal "no port"
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from src.components.urlparts import (
    UrlParseError,
    UrlParts,
    build,
    build_path,
    parse,
    same_origin,
)

from .models import (
    BLANK_TARGET,
    ClassifiedLink,
    LinkContext,
    LinkKind,
    LinkResolutionError,
)
from .ports import SitePort

logger = logging.getLogger(__name__)

_TARGET_KINDS: frozenset[LinkKind] = frozenset({"page", "file", "extern"})


# --- Context ---


def _parse_referer(referer: str | None) -> UrlParts | None:
    if not referer or not referer.strip():
        return None
    try:
        parts = parse(referer)
    except UrlParseError:
        logger.debug("Ignoring unparsable referer %r", referer)
        return None
    return parts if parts.host else None


def build_link_context(
    site: SitePort,
    language_code: str,
    referer: str | None = None,
) -> LinkContext:
    """
    Compute the link context for one language.

    The referer header decides which host counts as "our frontend". Without
    a usable referer the backend host/port is used.
    """
    backend = parse(site.site_url(language_code))
    referer_parts = _parse_referer(referer)
    if referer_parts is not None:
        referer_host, referer_port = referer_parts.host, referer_parts.port
    else:
        referer_host, referer_port = backend.host, backend.port

    home = parse(site.home_uri(language_code))
    media = parse(site.media_url())
    multilang = site.is_multilang()

    return LinkContext(
        language_code=language_code,
        backend_scheme=backend.scheme,
        backend_host=backend.host,
        backend_port=backend.port,
        referer_host=referer_host,
        referer_port=referer_port,
        home_path=home.path or "",
        media_path=media.path or "",
        lang_prefix="/" + site.language_slug(language_code).strip("/"),
        multilang=multilang,
        languages=tuple(site.languages()) if multilang else (),
    )


class LinkContextCache:
    """
    Link contexts keyed by language code and referer.

    A context embeds the referer host, so one cache may be shared across
    requests from different frontends. Contexts are deterministic for a key,
    so a racing second build only repeats work; the lock keeps the first
    write single.
    """

    def __init__(self) -> None:
        self._contexts: dict[tuple[str, str | None], LinkContext] = {}
        self._lock = threading.Lock()

    def get_or_build(
        self,
        language_code: str,
        factory: Callable[[str], LinkContext],
        referer: str | None = None,
    ) -> LinkContext:
        """Return the cached context, building it on first use."""
        key = (language_code, referer)
        context = self._contexts.get(key)
        if context is not None:
            return context
        with self._lock:
            context = self._contexts.get(key)
            if context is None:
                context = factory(language_code)
                self._contexts[key] = context
                logger.debug(
                    "Initialized link context for language %r, referer %r", language_code, referer
                )
        return context

    def clear(self) -> None:
        """Drop all cached contexts."""
        with self._lock:
            self._contexts.clear()

    def __contains__(self, key: object) -> bool:
        # A bare language code matches its context for any referer
        if isinstance(key, tuple):
            return key in self._contexts
        return any(code == key for code, _ in self._contexts)

    def __len__(self) -> int:
        return len(self._contexts)


# --- Link Builders ---


def _make_link(
    kind: LinkKind,
    href: str,
    title: str | None,
    blank: bool = False,
) -> ClassifiedLink:
    return ClassifiedLink(
        kind=kind,
        href=href,
        title=title or None,
        target=BLANK_TARGET if blank and kind in _TARGET_KINDS else None,
    )


def page_href(context: LinkContext, parts: UrlParts) -> str:
    """
    Host-relative href for a page link.

    Root links point at the (language) home page. On multi-language sites a
    path that is exactly one language slug points at that language's home.
    Deeper paths are left alone.
    """
    path = parts.path
    if not path or path == "/":
        path = context.localized_home_path
    elif context.multilang:
        segments = [segment for segment in path.split("/") if segment]
        if len(segments) == 1:
            language = context.find_language(segments[0])
            if language is not None:
                path = f"/{language.slug}/{language.home_slug}"
    return build_path(parts.with_changes(path=path)) or "/"


def file_href(context: LinkContext, parts: UrlParts) -> str:
    """Absolute href for a file on the backend host."""
    return build(
        parts.with_changes(
            scheme=parts.scheme or context.backend_scheme,
            host=context.backend_host,
            port=context.backend_port,
        )
    )


def is_media_path(context: LinkContext, path: str | None) -> bool:
    """True if the path lies below the configured media path."""
    if not path or not context.media_path or context.media_path == "/":
        return False
    return path == context.media_path or path.startswith(context.media_path + "/")


# --- Link Classifier ---


class LinkClassifier:
    """
    Link classifier.

    One instance per request: the referer is fixed for its lifetime. The
    injected cache holds one context per language code and referer.
    """

    def __init__(
        self,
        site: SitePort,
        referer: str | None = None,
        cache: LinkContextCache | None = None,
    ) -> None:
        """Initialize classifier."""
        self._site = site
        self._referer = referer
        self._cache = cache if cache is not None else LinkContextCache()

    def context(self, language_code: str) -> LinkContext:
        """Get the link context for a language."""
        return self._cache.get_or_build(
            language_code,
            lambda code: build_link_context(self._site, code, self._referer),
            referer=self._referer,
        )

    def classify(
        self,
        language_code: str,
        href: str | None,
        title: str | None = None,
        blank: bool = False,
    ) -> ClassifiedLink:
        """
        Classify an href and rewrite it for the consuming frontend.

        Raises:
            LinkResolutionError: if the href is empty or cannot be parsed.
        """
        if href is None or not href.strip():
            raise LinkResolutionError("Link has no href")

        context = self.context(language_code)
        try:
            parts = parse(href)
        except UrlParseError as e:
            raise LinkResolutionError(str(e)) from e

        link = self._classify_parts(context, parts, title, blank)
        logger.debug("Classified %r as %s link %r", href, link.kind, link.href)
        return link

    def _classify_parts(
        self,
        context: LinkContext,
        parts: UrlParts,
        title: str | None,
        blank: bool,
    ) -> ClassifiedLink:
        if parts.scheme in ("mailto", "tel"):
            address = (parts.path or "").lstrip("/")
            if not address:
                raise LinkResolutionError(f"{parts.scheme}: link without address")
            kind: LinkKind = "email" if parts.scheme == "mailto" else "tel"
            return _make_link(kind, f"{parts.scheme}:{address}", title)

        if parts.is_hash_only:
            return _make_link("anchor", f"#{parts.hash}", title)

        if same_origin(parts, context.backend_host, context.backend_port) and is_media_path(
            context, parts.path
        ):
            return _make_link("file", file_href(context, parts), title, blank)

        if same_origin(parts, context.referer_host, context.referer_port):
            return _make_link("page", page_href(context, parts), title, blank)

        return _make_link("extern", build(parts), title, blank)
