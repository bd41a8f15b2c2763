import argparse
import json
import logging
import sys
from pathlib import Path

from src.app_shell.context import RenderContext
from src.components.fields import FieldFlags, RenderFieldInput, run_render_field
from src.components.links import ClassifyLinkInput, run_classify
from src.rules.loader import load_site_rules
from src.rules.models import SiteRules

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")

RULES_PATH = "site.yaml"


def get_rules(path: str) -> SiteRules:
    rules_path = Path(path)
    if not rules_path.exists():
        logger.error(f"Site rules file {rules_path} not found.")
        sys.exit(1)

    try:
        return load_site_rules(rules_path)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)


def resolve_language(rules: SiteRules, lang: str | None) -> str:
    if lang:
        return lang
    default = rules.default_language()
    return default.code if default is not None else "default"


def handle_render(ctx: RenderContext, args: argparse.Namespace) -> int:
    if args.file == "-":
        raw = sys.stdin.read()
    else:
        source = Path(args.file)
        if not source.exists():
            logger.error(f"File {source} not found.")
            return 1
        raw = source.read_text(encoding="utf-8")

    inp = RenderFieldInput(
        value=raw,
        kind=args.kind,
        language_code=resolve_language(ctx.site_rules, args.lang),
        flags=FieldFlags(html=args.html, buttons=not args.no_buttons),
        name=args.file,
    )
    result = run_render_field(inp, ctx.field_renderer)
    if result.field is None:
        for error in result.errors:
            logger.error(f"{error.code}: {error.message}")
        return 1

    print(json.dumps(result.field.to_dict(), indent=2, ensure_ascii=False))
    return 0 if result.success else 1


def handle_classify(ctx: RenderContext, args: argparse.Namespace) -> int:
    inp = ClassifyLinkInput(
        language_code=resolve_language(ctx.site_rules, args.lang),
        href=args.href,
        title=args.title,
        blank=args.blank,
    )
    result = run_classify(inp, ctx.classifier)
    if result.link is None:
        for error in result.errors:
            logger.error(f"{error.code}: {error.message}")
        return 1

    print(json.dumps(result.link.to_dict(), indent=2, ensure_ascii=False))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render content fields as document trees")
    parser.add_argument("--rules", default=RULES_PATH, help="Path to site rules YAML")
    parser.add_argument("--lang", help="Language code (defaults to the site default)")
    parser.add_argument("--referer", help="Referer URL of the consuming frontend")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # render
    render_parser = subparsers.add_parser("render", help="Render a field value")
    render_parser.add_argument("file", help="File with the raw field value, '-' for stdin")
    render_parser.add_argument(
        "--kind", default="writer", help="Field kind (text, slug, textarea, list, writer)"
    )
    render_parser.add_argument("--html", action="store_true", help="Deliver textarea as html")
    render_parser.add_argument(
        "--no-buttons", action="store_true", help="Textarea without formatting buttons"
    )

    # classify
    classify_parser = subparsers.add_parser("classify", help="Classify a single href")
    classify_parser.add_argument("href", help="The href to classify")
    classify_parser.add_argument("--title", help="Link title")
    classify_parser.add_argument("--blank", action="store_true", help="Open in new tab")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    rules = get_rules(args.rules)
    ctx = RenderContext.create(rules, referer=args.referer)

    if args.command == "render":
        return handle_render(ctx, args)
    elif args.command == "classify":
        return handle_classify(ctx, args)
    return 2


if __name__ == "__main__":
    sys.exit(main())
