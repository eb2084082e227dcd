import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from nexora.rules.models import Rules

logger = logging.getLogger(__name__)

DEFAULT_RULES_PATH = "rules.yaml"


def load_rules(path: Path) -> Rules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML or the schema is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    with open(path) as f:
        content = f.read()

    # Accept rules embedded in a ```yaml fenced block
    lines = content.splitlines()
    yaml_lines = []
    in_block = False
    found_block = False

    for line in lines:
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break

        if in_block:
            yaml_lines.append(line)

    clean_content = "\n".join(yaml_lines) if found_block else content

    try:
        data = yaml.safe_load(clean_content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        rules = Rules.model_validate(data or {})
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e

    return apply_env_overrides(rules)


def apply_env_overrides(rules: Rules) -> Rules:
    """Apply NEXORA_API_URL / NEXORA_BILLING_URL on top of file values."""
    updates: dict[str, str] = {}
    if api_url := os.environ.get("NEXORA_API_URL"):
        updates["base_url"] = api_url
    if billing_url := os.environ.get("NEXORA_BILLING_URL"):
        updates["billing_url"] = billing_url

    if not updates:
        return rules

    logger.info(f"API endpoints overridden from environment: {sorted(updates)}")
    return rules.model_copy(update={"api": rules.api.model_copy(update=updates)})


def load_rules_or_default(path: Path | None = None) -> Rules:
    """
    Load rules from path (or NEXORA_RULES_PATH), falling back to built-in defaults
    when no file exists.
    """
    path = path or Path(os.environ.get("NEXORA_RULES_PATH", DEFAULT_RULES_PATH))
    if not path.exists():
        logger.warning(f"Rules file {path} not found, using defaults")
        return apply_env_overrides(Rules())
    return load_rules(path)
