"""
Site rules adapter - exposes loaded site rules through the links SitePort.
"""

from __future__ import annotations

from src.components.links import LanguageInfo
from src.rules.models import SiteRules


class RulesSiteAdapter:
    """SitePort backed by a validated site rules file."""

    def __init__(self, rules: SiteRules) -> None:
        self._rules = rules

    def site_url(self, language_code: str) -> str:
        return self._rules.site_url_for(language_code)

    def home_uri(self, language_code: str) -> str:
        return self._rules.home_slug_for(language_code)

    def media_url(self) -> str:
        return self._rules.site.media_url

    def language_slug(self, language_code: str) -> str:
        language = self._rules.get_language(language_code)
        return language.url_slug if language is not None else language_code

    def languages(self) -> list[LanguageInfo]:
        return [
            LanguageInfo(
                code=lang.code,
                slug=lang.url_slug,
                home_slug=self._rules.home_slug_for(lang.code),
            )
            for lang in self._rules.languages
        ]

    def is_multilang(self) -> bool:
        return self._rules.is_multilang()
