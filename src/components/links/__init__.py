"""
Links component - Link classification and rewriting.

Classifies hrefs into page, file, extern, email, tel and anchor links and
rewrites them for the consuming frontend.
"""

from ._impl import (
    LinkClassifier,
    LinkContextCache,
    build_link_context,
    file_href,
    is_media_path,
    page_href,
)
from .component import run_classify
from .models import (
    BLANK_TARGET,
    ClassifiedLink,
    ClassifyLinkInput,
    ClassifyLinkOutput,
    LanguageInfo,
    LinkContext,
    LinkKind,
    LinkResolutionError,
    LinkValidationError,
)
from .ports import SitePort

__all__ = [
    # Entry points
    "run_classify",
    # Input models
    "ClassifyLinkInput",
    # Output models
    "ClassifyLinkOutput",
    "LinkValidationError",
    # Value models
    "BLANK_TARGET",
    "ClassifiedLink",
    "LanguageInfo",
    "LinkContext",
    "LinkKind",
    "LinkResolutionError",
    # Ports
    "SitePort",
    # Core
    "LinkClassifier",
    "LinkContextCache",
    "build_link_context",
    "file_href",
    "is_media_path",
    "page_href",
]
