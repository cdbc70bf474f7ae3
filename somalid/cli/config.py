"""Configuration file loading and validation.

This module handles loading rule configuration from JSON and YAML files,
merging CLI arguments with file-based configuration (with CLI taking
precedence), and validating that the configuration describes a valid Rule.

A configuration file holds the rule parameters, either flat:

    id_length: 12
    id_must_start: "93"
    require_future_expiry: false

or in the legacy nested camelCase layout:

    {"idNumber": {"length": 12, "allowSpaces": true}, "nameMaxLen": 120}
"""

import json
from pathlib import Path
from typing import Any

import yaml

from somalid.core.exceptions import RuleConfigurationError
from somalid.core.rule import DEFAULT_RULE, Rule


class ConfigError(Exception):
    """Configuration file error.

    Raised when configuration files cannot be loaded, parsed, or do not
    describe a valid Rule.
    """


def load_config(path: Path) -> dict[str, Any]:
    """Load configuration from JSON or YAML file.

    Format is determined by file extension (.json, .yaml, .yml) or
    auto-detected (JSON first, then YAML) for any other extension. An empty
    file yields an empty configuration.

    Args:
        path: Path to configuration file

    Returns:
        Configuration dictionary

    Raises:
        ConfigError: If file cannot be loaded, parsed, or is not a mapping

    Example:
        >>> config = load_config(Path("rule.yaml"))
        >>> config["id_length"]
        12
    """
    if not path.exists():
        raise ConfigError(f"Configuration file not found: {path}")

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Failed to load config from {path}: {e}") from e

    try:
        if path.suffix == ".json":
            data = json.loads(content)
        elif path.suffix in (".yaml", ".yml"):
            data = yaml.safe_load(content)
        else:
            try:
                data = json.loads(content)
            except json.JSONDecodeError:
                data = yaml.safe_load(content)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Configuration in {path} must be a mapping, got: {type(data).__name__}"
        )
    return data


def merge_config(base: dict[str, Any], **overrides: Any) -> dict[str, Any]:
    """Merge CLI arguments into base configuration.

    Only non-None override values are applied, so config file values are
    kept when the matching CLI argument is not given.

    Example:
        >>> merge_config({"id_length": 12, "checksum": None}, id_length=10)
        {'id_length': 10, 'checksum': None}
    """
    merged = base.copy()
    for key, value in overrides.items():
        if value is not None:
            merged[key] = value
    return merged


def validate_config(config: dict[str, Any]) -> list[str]:
    """Validate that a configuration describes a valid Rule.

    Returns:
        List of validation error messages (empty list if valid)

    Example:
        >>> validate_config({"id_length": 0})
        ["id_length must be a positive integer [parameter='id_length', ...]"]
    """
    try:
        Rule.from_mapping(config)
    except RuleConfigurationError as e:
        return [str(e)]
    return []


def load_rule(path: Path | None = None, **overrides: Any) -> Rule:
    """Build a Rule from an optional config file plus CLI overrides.

    File values are normalized to the flat layout first, so overrides use
    the flat Rule field names regardless of the file's layout.

    Raises:
        ConfigError: If the file cannot be loaded or the merged values do not
                    form a valid Rule
    """
    base = DEFAULT_RULE.to_dict()
    try:
        if path is not None:
            base = Rule.from_mapping(load_config(path)).to_dict()
        return Rule.from_mapping(merge_config(base, **overrides))
    except RuleConfigurationError as e:
        source = path if path is not None else "command line"
        raise ConfigError(f"Invalid rule configuration in {source}: {e}") from e
