from __future__ import annotations

import pytest

from src.components.links import LanguageInfo, LinkClassifier, LinkContextCache
from src.components.richtext import TreeBuilder
from tests.fakes import FakeSite


@pytest.fixture
def site() -> FakeSite:
    """Single-language site."""
    return FakeSite()


@pytest.fixture
def multilang_site() -> FakeSite:
    """Site with English and German."""
    return FakeSite(
        langs=[
            LanguageInfo(code="en", slug="en", home_slug="home"),
            LanguageInfo(code="de", slug="de", home_slug="startseite"),
        ]
    )


@pytest.fixture
def cache() -> LinkContextCache:
    return LinkContextCache()


@pytest.fixture
def classifier(site: FakeSite, cache: LinkContextCache) -> LinkClassifier:
    return LinkClassifier(site, cache=cache)


@pytest.fixture
def multilang_classifier(multilang_site: FakeSite) -> LinkClassifier:
    return LinkClassifier(multilang_site)


@pytest.fixture
def builder(classifier: LinkClassifier) -> TreeBuilder:
    return TreeBuilder(classifier)
