"""
Site rules loader, model and adapter tests.

Tests for loading and validating site.yaml.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from src.adapters.site_rules import RulesSiteAdapter
from src.components.links import LanguageInfo
from src.rules.loader import load_site_rules, parse_site_rules

PROJECT_ROOT = Path(__file__).parent.parent.parent

MULTILANG_RULES = """
site:
  url: "https://cms.example.com"
  media_url: "https://cms.example.com/media"
languages:
  - code: en
    default: true
  - code: de
    slug: /deutsch/
    url: "https://cms.example.com/de"
    home_slug: startseite
"""


class TestLoadSiteRules:
    """Test site rules file loading."""

    def test_load_actual_rules_file(self) -> None:
        """Load the bundled site.yaml."""
        rules = load_site_rules(PROJECT_ROOT / "site.yaml")

        assert rules.site.url == "https://cms.example.com"
        assert [lang.code for lang in rules.languages] == ["en", "de"]

    def test_load_nonexistent_file_raises(self) -> None:
        """Loading a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_site_rules(Path("/nonexistent/site.yaml"))

    def test_load_from_tmp_path(self, tmp_path: Path) -> None:
        """Rules are read from disk."""
        path = tmp_path / "site.yaml"
        path.write_text("site:\n  url: http://localhost:8080\n")

        rules = load_site_rules(path)

        assert rules.site.media_url == "/media"
        assert rules.site.home_slug == "home"


class TestParseSiteRules:
    """Test parsing and validation."""

    def test_invalid_yaml_raises(self) -> None:
        """Broken YAML raises ValueError."""
        with pytest.raises(ValueError, match="Invalid YAML"):
            parse_site_rules("site: [")

    def test_missing_site_section_raises(self) -> None:
        """The site section is required."""
        with pytest.raises(ValueError, match="validation failed"):
            parse_site_rules("languages: []\n")

    def test_strips_markdown_code_fences(self) -> None:
        """Loader handles markdown-wrapped YAML."""
        content = """## site.yaml

```yaml
site:
  url: https://fenced.example.com
```

Trailing notes.
"""
        rules = parse_site_rules(content)

        assert rules.site.url == "https://fenced.example.com"

    def test_duplicate_language_codes_raise(self) -> None:
        """Language codes must be unique."""
        content = "site:\n  url: http://x\nlanguages:\n  - code: en\n  - code: en\n"

        with pytest.raises(ValueError, match="Duplicate language codes: en"):
            parse_site_rules(content)

    def test_two_defaults_raise(self) -> None:
        """Only one language may be the default."""
        content = (
            "site:\n  url: http://x\nlanguages:\n"
            "  - code: en\n    default: true\n  - code: de\n    default: true\n"
        )

        with pytest.raises(ValueError, match="Only one language"):
            parse_site_rules(content)


class TestSiteRulesHelpers:
    """Test lookups on validated rules."""

    def test_single_language(self) -> None:
        """No languages means single-language mode."""
        rules = parse_site_rules("site:\n  url: http://x\n")

        assert rules.is_multilang() is False
        assert rules.default_language() is None
        assert rules.site_url_for("en") == "http://x"

    def test_language_fallbacks(self) -> None:
        """Languages inherit the site URL and home slug."""
        rules = parse_site_rules(MULTILANG_RULES)

        assert rules.is_multilang() is True
        assert rules.site_url_for("en") == "https://cms.example.com"
        assert rules.site_url_for("de") == "https://cms.example.com/de"
        assert rules.home_slug_for("en") == "home"
        assert rules.home_slug_for("de") == "startseite"

    def test_default_language(self) -> None:
        """The flagged language is the default."""
        rules = parse_site_rules(MULTILANG_RULES)

        default = rules.default_language()
        assert default is not None
        assert default.code == "en"

    def test_url_slug(self) -> None:
        """The URL slug falls back to the code and drops slashes."""
        rules = parse_site_rules(MULTILANG_RULES)

        assert rules.languages[0].url_slug == "en"
        assert rules.languages[1].url_slug == "deutsch"


class TestRulesSiteAdapter:
    """Test the SitePort adapter."""

    def test_languages(self) -> None:
        """Languages are exposed with slug and home slug."""
        adapter = RulesSiteAdapter(parse_site_rules(MULTILANG_RULES))

        assert adapter.is_multilang() is True
        assert adapter.languages() == [
            LanguageInfo(code="en", slug="en", home_slug="home"),
            LanguageInfo(code="de", slug="deutsch", home_slug="startseite"),
        ]

    def test_lookups(self) -> None:
        """Per-language lookups use the rule fallbacks."""
        adapter = RulesSiteAdapter(parse_site_rules(MULTILANG_RULES))

        assert adapter.site_url("de") == "https://cms.example.com/de"
        assert adapter.home_uri("de") == "startseite"
        assert adapter.media_url() == "https://cms.example.com/media"
        assert adapter.language_slug("de") == "deutsch"
        assert adapter.language_slug("fr") == "fr"
