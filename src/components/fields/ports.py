"""
Fields component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from src.components.richtext import DocumentTree


class TreeBuilderPort(Protocol):
    """Port for turning markup into a document tree."""

    def build(self, markup: str, language_code: str) -> DocumentTree:
        """Build the document tree for markup."""
        ...
