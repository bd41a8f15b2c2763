"""
Fields component - Encoding resolution and rendering of text-like fields.
"""

from ._impl import (
    FieldRenderer,
    coerce_field_kind,
    markup_source,
    resolve_encoding,
)
from .component import run_render_field
from .models import (
    DEFAULT_FLAGS,
    Encoding,
    FieldFlags,
    FieldKind,
    FieldValidationError,
    FieldValue,
    RenderFieldInput,
    RenderFieldOutput,
    UnknownFieldKindError,
)
from .ports import TreeBuilderPort

__all__ = [
    # Entry points
    "run_render_field",
    # Input models
    "RenderFieldInput",
    # Output models
    "RenderFieldOutput",
    "FieldValidationError",
    # Value models
    "DEFAULT_FLAGS",
    "Encoding",
    "FieldFlags",
    "FieldKind",
    "FieldValue",
    "UnknownFieldKindError",
    # Ports
    "TreeBuilderPort",
    # Core
    "FieldRenderer",
    "coerce_field_kind",
    "markup_source",
    "resolve_encoding",
]
