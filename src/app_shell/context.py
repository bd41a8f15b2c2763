from __future__ import annotations

from dataclasses import dataclass

from src.adapters.site_rules import RulesSiteAdapter
from src.components.fields import FieldRenderer
from src.components.links import LinkClassifier, LinkContextCache
from src.components.richtext import TreeBuilder
from src.rules.models import SiteRules


@dataclass
class RenderContext:
    site_rules: SiteRules
    classifier: LinkClassifier
    tree_builder: TreeBuilder
    field_renderer: FieldRenderer

    @classmethod
    def create(
        cls,
        rules: SiteRules,
        referer: str | None = None,
        cache: LinkContextCache | None = None,
    ) -> RenderContext:
        """
        Wire the rendering stack for one request.

        The referer decides which host counts as the frontend. A shared cache
        keeps one link context per language and referer.
        """
        classifier = LinkClassifier(RulesSiteAdapter(rules), referer=referer, cache=cache)
        tree_builder = TreeBuilder(classifier)
        return cls(
            site_rules=rules,
            classifier=classifier,
            tree_builder=tree_builder,
            field_renderer=FieldRenderer(tree_builder),
        )
