"""
Fields component - Field kinds, encodings and render models.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from src.components.richtext import DocumentTree, serialize_tree

# --- Enums ---


class FieldKind(str, Enum):
    """Text-like field kinds of the content store."""

    TEXT = "text"
    SLUG = "slug"
    TEXTAREA = "textarea"
    LIST = "list"
    WRITER = "writer"


class Encoding(str, Enum):
    """Output representation of a field value."""

    STRING = "string"
    TEXT = "text"
    MARKDOWN = "markdown"
    HTML = "html"


class UnknownFieldKindError(ValueError):
    """Raised for field kinds without an encoding rule (configuration error)."""


# --- Validation Errors ---


@dataclass(frozen=True)
class FieldValidationError:
    """Field render error."""

    code: str
    message: str
    field: str | None = None


# --- Flags ---


@dataclass(frozen=True)
class FieldFlags:
    """
    Per-field configuration flags.

    ``html`` asks for a textarea to be delivered as a document tree;
    ``buttons`` is off for textareas without a formatting toolbar.
    """

    html: bool = False
    buttons: bool = True

    @classmethod
    def from_definition(cls, definition: Mapping[str, Any]) -> FieldFlags:
        """Read flags from a field definition (``api.html``, ``buttons``)."""
        api = definition.get("api") or {}
        return cls(
            html=bool(api.get("html", False)) if isinstance(api, Mapping) else False,
            buttons=definition.get("buttons", True) is not False,
        )


DEFAULT_FLAGS = FieldFlags()


# --- Values ---


@dataclass(frozen=True)
class FieldValue:
    """A rendered field: its encoding and value."""

    type: Encoding
    value: str | DocumentTree

    def to_dict(self) -> dict[str, Any]:
        """Convert to the response representation."""
        value = serialize_tree(self.value) if self.type is Encoding.HTML else self.value
        return {"type": self.type.value, "value": value}


# --- Input Models ---


@dataclass(frozen=True)
class RenderFieldInput:
    """Input for rendering a field value."""

    value: str | None
    kind: str
    language_code: str
    flags: FieldFlags = DEFAULT_FLAGS
    name: str | None = None


# --- Output Models ---


@dataclass(frozen=True)
class RenderFieldOutput:
    """Output for a rendered field."""

    field: FieldValue | None
    errors: tuple[FieldValidationError, ...] = ()
    success: bool = True
