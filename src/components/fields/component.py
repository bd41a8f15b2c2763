"""
Fields component - Render a single field value.

Shell Layer - a field that cannot be rendered yields an error record and,
for internal defects, an empty value, instead of aborting the response.
"""

from __future__ import annotations

import logging

from src.components.richtext import TreeInvariantError

from ._impl import FieldRenderer, coerce_field_kind, resolve_encoding
from .models import (
    FieldValidationError,
    FieldValue,
    RenderFieldInput,
    RenderFieldOutput,
    UnknownFieldKindError,
)

logger = logging.getLogger(__name__)


def run_render_field(
    inp: RenderFieldInput,
    renderer: FieldRenderer,
) -> RenderFieldOutput:
    """
    Render a field value.

    Args:
        inp: Raw value, field kind, flags and language.
        renderer: Renderer wired to a tree builder.

    Returns:
        RenderFieldOutput with the rendered field or errors.
    """
    try:
        kind = coerce_field_kind(inp.kind)
        encoding = resolve_encoding(kind, inp.flags)
    except UnknownFieldKindError as e:
        logger.warning("Cannot render field %r: %s", inp.name, e)
        return RenderFieldOutput(
            field=None,
            errors=(
                FieldValidationError(
                    code="unknown_field_kind",
                    message=str(e),
                    field=inp.name,
                ),
            ),
            success=False,
        )

    try:
        field = renderer.render_as(inp.value, kind, encoding, inp.language_code)
    except (TreeInvariantError, RecursionError) as e:
        logger.exception("Failed to render field %r", inp.name)
        return RenderFieldOutput(
            field=FieldValue(type=encoding, value=""),
            errors=(
                FieldValidationError(
                    code="render_failed",
                    message=str(e),
                    field=inp.name,
                ),
            ),
            success=False,
        )

    return RenderFieldOutput(field=field)
