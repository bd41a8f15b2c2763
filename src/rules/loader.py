from pathlib import Path

import yaml
from pydantic import ValidationError

from src.rules.models import SiteRules


def _strip_yaml_fence(content: str) -> str:
    # Accept a ```yaml block embedded in a markdown file
    yaml_lines = []
    in_block = False
    found_block = False

    for line in content.splitlines():
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break
        if in_block:
            yaml_lines.append(line)

    return "\n".join(yaml_lines) if found_block else content


def parse_site_rules(content: str) -> SiteRules:
    """
    Parse and validate site rules from YAML text.
    Raises ValueError on invalid YAML or schema.
    """
    try:
        data = yaml.safe_load(_strip_yaml_fence(content))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in site rules: {e}") from e

    try:
        return SiteRules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Site rules validation failed:\n{e}") from e


def load_site_rules(path: Path) -> SiteRules:
    """
    Load and validate the site rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if YAML or schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Site rules file not found at: {path}")

    with open(path) as f:
        content = f.read()

    return parse_site_rules(content)
