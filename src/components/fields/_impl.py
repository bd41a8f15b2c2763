"""
FieldRenderer - Pick a field's output encoding and render its value.

Encoding table:

    text, slug                      -> string
    textarea (api.html)             -> html
    textarea (buttons: false)       -> text
    textarea                        -> markdown
    list, writer                    -> html

Only html values are transformed: they go through the markup tree
builder. Textarea values hold markdown and are converted to HTML first.
All other encodings return the raw value unchanged.
"""

from __future__ import annotations

import logging

import markdown

from .models import (
    DEFAULT_FLAGS,
    Encoding,
    FieldFlags,
    FieldKind,
    FieldValue,
    UnknownFieldKindError,
)
from .ports import TreeBuilderPort

logger = logging.getLogger(__name__)


def coerce_field_kind(kind: str | FieldKind) -> FieldKind:
    """
    Convert a field kind name into a FieldKind.

    Raises:
        UnknownFieldKindError: if the kind has no encoding rule.
    """
    if isinstance(kind, FieldKind):
        return kind
    try:
        return FieldKind(kind.strip().lower())
    except ValueError as e:
        raise UnknownFieldKindError(f"Unknown field kind: {kind!r}") from e


def resolve_encoding(
    kind: str | FieldKind,
    flags: FieldFlags = DEFAULT_FLAGS,
) -> Encoding:
    """Look up the output encoding for a field kind and its flags."""
    field_kind = coerce_field_kind(kind)

    if field_kind in (FieldKind.TEXT, FieldKind.SLUG):
        return Encoding.STRING
    if field_kind is FieldKind.TEXTAREA:
        if flags.html:
            return Encoding.HTML
        if not flags.buttons:
            return Encoding.TEXT
        return Encoding.MARKDOWN
    if field_kind in (FieldKind.LIST, FieldKind.WRITER):
        return Encoding.HTML

    raise UnknownFieldKindError(f"No encoding rule for field kind: {field_kind.value!r}")


def markup_source(kind: FieldKind, raw: str) -> str:
    """HTML to feed the tree builder for a field value."""
    if kind is FieldKind.TEXTAREA:
        return markdown.markdown(raw)
    return raw


class FieldRenderer:
    """
    Field renderer.

    Resolves the encoding and runs the tree builder for html fields.
    """

    def __init__(self, builder: TreeBuilderPort) -> None:
        """Initialize with the tree builder used for html fields."""
        self._builder = builder

    def render(
        self,
        raw: str | None,
        kind: str | FieldKind,
        language_code: str,
        flags: FieldFlags = DEFAULT_FLAGS,
    ) -> FieldValue:
        """Render a raw field value."""
        field_kind = coerce_field_kind(kind)
        return self.render_as(raw, field_kind, resolve_encoding(field_kind, flags), language_code)

    def render_as(
        self,
        raw: str | None,
        kind: FieldKind,
        encoding: Encoding,
        language_code: str,
    ) -> FieldValue:
        """Render a raw field value with an already resolved encoding."""
        value = raw or ""
        if encoding is not Encoding.HTML:
            return FieldValue(type=encoding, value=value)

        tree = self._builder.build(markup_source(kind, value), language_code)
        return FieldValue(type=encoding, value=tree)
