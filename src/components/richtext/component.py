"""
Richtext component - Markup to document tree.

Shell Layer - internal defects and runaway recursion become output errors
instead of exceptions, so one broken field does not abort a whole response.
"""

from __future__ import annotations

import logging

from ._impl import TreeBuilder
from .models import (
    BuildTreeInput,
    BuildTreeOutput,
    RichTextValidationError,
    TreeInvariantError,
)

logger = logging.getLogger(__name__)


def run_build_tree(
    inp: BuildTreeInput,
    builder: TreeBuilder,
) -> BuildTreeOutput:
    """
    Build the document tree for a markup string.

    Args:
        inp: Markup and the language used for link classification.
        builder: Tree builder wired to a link classifier.

    Returns:
        BuildTreeOutput with the tree, or an empty tree and an error.
    """
    try:
        tree = builder.build(inp.markup, inp.language_code)
    except (TreeInvariantError, RecursionError) as e:
        logger.exception("Failed to build document tree")
        return BuildTreeOutput(
            tree="",
            errors=(RichTextValidationError(code="tree_invariant", message=str(e)),),
            success=False,
        )

    return BuildTreeOutput(tree=tree)
