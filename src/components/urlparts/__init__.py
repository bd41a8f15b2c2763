"""
URL parts component - Parse and rebuild URL-like strings.
"""

from ._impl import build, build_path, parse, same_origin
from .models import UrlParseError, UrlParts

__all__ = [
    "build",
    "build_path",
    "parse",
    "same_origin",
    "UrlParseError",
    "UrlParts",
]
