"""
Links component - Port interfaces.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .models import LanguageInfo


class SitePort(Protocol):
    """Site configuration the classifier reads per language."""

    def site_url(self, language_code: str) -> str:
        """Canonical site URL for a language."""
        ...

    def home_uri(self, language_code: str) -> str:
        """Relative URI of the homepage (without language prefix)."""
        ...

    def media_url(self) -> str:
        """URL of the media root."""
        ...

    def language_slug(self, language_code: str) -> str:
        """URL slug of a language."""
        ...

    def languages(self) -> Sequence[LanguageInfo]:
        """All configured languages."""
        ...

    def is_multilang(self) -> bool:
        """Whether the site has more than zero configured languages."""
        ...
