"""
Richtext component - Markup to structured document tree.
"""

from ._impl import (
    MAX_TREE_DEPTH,
    TreeBuilder,
    build_tree,
    collapse,
    normalize_markup,
    parse_markup,
)
from .component import run_build_tree
from .models import (
    BuildTreeInput,
    BuildTreeOutput,
    DocumentTree,
    ElementNode,
    Node,
    RichTextValidationError,
    TextNode,
    TreeInvariantError,
    TreeValue,
    serialize_tree,
    serialize_value,
)
from .ports import LinkClassifierPort

__all__ = [
    # Entry points
    "run_build_tree",
    "build_tree",
    # Input models
    "BuildTreeInput",
    # Output models
    "BuildTreeOutput",
    "RichTextValidationError",
    # Tree models
    "DocumentTree",
    "ElementNode",
    "Node",
    "TextNode",
    "TreeValue",
    "TreeInvariantError",
    "serialize_tree",
    "serialize_value",
    # Ports
    "LinkClassifierPort",
    # Core
    "MAX_TREE_DEPTH",
    "TreeBuilder",
    "collapse",
    "normalize_markup",
    "parse_markup",
]
