"""
Links component - Data models.

Classified links, per-language link context and shell input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

# --- Enums / Literals ---

LinkKind = Literal["page", "file", "extern", "email", "tel", "anchor"]

BLANK_TARGET = "_blank"


class LinkResolutionError(ValueError):
    """Raised when an href cannot be classified (empty or unparsable)."""


# --- Validation Errors ---


@dataclass(frozen=True)
class LinkValidationError:
    """Link validation error."""

    code: str
    message: str
    field: str | None = None


# --- Context ---


@dataclass(frozen=True)
class LanguageInfo:
    """A configured site language as seen by the link classifier."""

    code: str
    slug: str
    home_slug: str


@dataclass(frozen=True)
class LinkContext:
    """
    Everything the classifier needs to know about one language of the site.

    Paths carry a leading slash ("/home", "/media", "/en"). ``media_path``
    may be "" when the media root is the host root.
    """

    language_code: str
    backend_scheme: str | None
    backend_host: str | None
    backend_port: int | None
    referer_host: str | None
    referer_port: int | None
    home_path: str
    media_path: str
    lang_prefix: str
    multilang: bool = False
    languages: tuple[LanguageInfo, ...] = ()

    @property
    def localized_home_path(self) -> str:
        """Home path with the language prefix on multi-language sites."""
        if self.multilang:
            return f"{self.lang_prefix}{self.home_path}"
        return self.home_path

    def find_language(self, slug: str) -> LanguageInfo | None:
        """Find a configured language by its URL slug."""
        return next((lang for lang in self.languages if lang.slug == slug), None)


# --- Classified Link ---


@dataclass(frozen=True)
class ClassifiedLink:
    """A link with its kind and rewritten href."""

    kind: LinkKind
    href: str
    title: str | None = None
    target: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the response representation."""
        result: dict[str, Any] = {"type": self.kind, "href": self.href}
        if self.title:
            result["title"] = self.title
        if self.target:
            result["target"] = self.target
        return result


# --- Input Models ---


@dataclass(frozen=True)
class ClassifyLinkInput:
    """Input for classifying a single href."""

    language_code: str
    href: str | None
    title: str | None = None
    blank: bool = False


# --- Output Models ---


@dataclass(frozen=True)
class ClassifyLinkOutput:
    """Output from link classification."""

    link: ClassifiedLink | None
    errors: tuple[LinkValidationError, ...]
    success: bool
