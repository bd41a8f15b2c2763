"""
Richtext component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from src.components.links import ClassifiedLink


class LinkClassifierPort(Protocol):
    """Port for classifying anchors found in markup."""

    def classify(
        self,
        language_code: str,
        href: str | None,
        title: str | None = None,
        blank: bool = False,
    ) -> ClassifiedLink:
        """
        Classify an href.

        Raises LinkResolutionError when the href cannot be resolved.
        """
        ...
