"""
Richtext component - Document tree models.

A document tree is built from two node kinds:

- ``TextNode``: a run of character data, serialized as ``{"value": "..."}``
- ``ElementNode``: a tag with a value, attributes and, for anchors, the
  classified link; serialized as ``{"elem", "value"?, "attr"?, "meta"?}``

An element's value is either a bare string (its only content was text) or
a tuple of child nodes. Elements without any DOM children carry no value.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from src.components.links import ClassifiedLink


class TreeInvariantError(RuntimeError):
    """Internal defect while building a tree (e.g. a link without href)."""


# --- Validation Error ---


@dataclass(frozen=True)
class RichTextValidationError:
    """Rich text build error."""

    code: str
    message: str
    path: str | None = None


# --- Nodes ---


@dataclass(frozen=True)
class TextNode:
    """Character data."""

    value: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"value": self.value}


@dataclass(frozen=True)
class ElementNode:
    """An element with its reduced content."""

    tag: str
    value: TreeValue | None = None
    attrs: dict[str, str] = field(default_factory=dict)
    link: ClassifiedLink | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        result: dict[str, Any] = {"elem": self.tag}
        if self.value is not None:
            result["value"] = serialize_value(self.value)
        if self.attrs:
            result["attr"] = dict(self.attrs)
        if self.link is not None:
            result["meta"] = self.link.to_dict()
        return result


Node = Union[TextNode, ElementNode]
TreeValue = Union[str, tuple[Node, ...]]
DocumentTree = Union[str, Node, tuple[Node, ...]]


def serialize_value(value: TreeValue) -> str | list[dict[str, Any]]:
    """Serialize an element value."""
    if isinstance(value, str):
        return value
    return [node.to_dict() for node in value]


def serialize_tree(tree: DocumentTree) -> str | dict[str, Any] | list[dict[str, Any]]:
    """Serialize a document tree for the response."""
    if isinstance(tree, (TextNode, ElementNode)):
        return tree.to_dict()
    return serialize_value(tree)


# --- Input Models ---


@dataclass(frozen=True)
class BuildTreeInput:
    """Input for building a document tree from markup."""

    markup: str
    language_code: str


# --- Output Models ---


@dataclass(frozen=True)
class BuildTreeOutput:
    """Output for a built document tree."""

    tree: DocumentTree
    errors: tuple[RichTextValidationError, ...] = ()
    success: bool = True

    def to_dict(self) -> str | dict[str, Any] | list[dict[str, Any]]:
        """Serialized tree."""
        return serialize_tree(self.tree)
