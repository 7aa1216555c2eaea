import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from utilkit.rules.models import UtilRules

logger = logging.getLogger(__name__)

RULES_PATH_ENV = "UTILKIT_RULES_PATH"

_cached_rules: UtilRules | None = None


def load_rules(path: Path | str) -> UtilRules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML or the schema is invalid.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    with open(path) as f:
        content = f.read()

    # Accept rules pasted inside a ```yaml fence
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

    # An empty file means "all defaults"
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Rules file must contain a mapping, got {type(data).__name__}")

    try:
        return UtilRules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e


def get_rules() -> UtilRules:
    """
    Process-wide rules.

    Loaded from $UTILKIT_RULES_PATH when set, otherwise the built-in
    defaults. Cached after the first call.
    """
    global _cached_rules
    if _cached_rules is None:
        env_path = os.environ.get(RULES_PATH_ENV)
        if env_path:
            logger.info("Loading rules from %s", env_path)
            _cached_rules = load_rules(Path(env_path))
        else:
            _cached_rules = UtilRules()
    return _cached_rules


def reset_rules_cache() -> None:
    global _cached_rules
    _cached_rules = None
