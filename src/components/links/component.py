"""
Links component - Link classification entry point.

Shell Layer - converts classifier errors into output records.
"""

from __future__ import annotations

from ._impl import LinkClassifier
from .models import (
    ClassifyLinkInput,
    ClassifyLinkOutput,
    LinkResolutionError,
    LinkValidationError,
)


def run_classify(
    input_data: ClassifyLinkInput,
    classifier: LinkClassifier,
) -> ClassifyLinkOutput:
    """Classify a single href."""
    try:
        link = classifier.classify(
            input_data.language_code,
            input_data.href,
            title=input_data.title,
            blank=input_data.blank,
        )
    except LinkResolutionError as e:
        return ClassifyLinkOutput(
            link=None,
            errors=(
                LinkValidationError(
                    code="unresolvable_link",
                    message=str(e),
                    field="href",
                ),
            ),
            success=False,
        )

    return ClassifyLinkOutput(link=link, errors=(), success=True)
