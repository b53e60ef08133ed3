"""
Rule configuration loading.

Reads the per-rule severity and option from a YAML file, validates every
option against the schema of its rule, and merges the result over the
defaults taken from the environment settings.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from padcheck.models import RuleSettings, Severity
from padcheck.rules import RULES

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when a rule configuration is malformed or names unknown values."""
    pass


def parse_rule_entry(rule_name: str, entry: Any) -> RuleSettings:
    """
    Parse the configuration of a single rule.

    An entry is either a bare string (a severity such as ``off``, or the rule
    option such as ``never``), a ``[severity, option]`` list, or a mapping
    with ``severity`` and ``option`` keys.

    Args:
        rule_name: Name of the configured rule
        entry: Raw YAML value

    Returns:
        Validated RuleSettings

    Raises:
        ConfigurationError: If the rule is unknown or the entry is invalid
    """
    rule_cls = RULES.get(rule_name)
    if rule_cls is None:
        raise ConfigurationError(f"Unknown rule '{rule_name}'")

    severity: Any = Severity.ERROR.value
    option: Any = None

    if entry is None:
        pass
    elif isinstance(entry, bool):
        severity = entry
    elif isinstance(entry, str):
        if entry in {s.value for s in Severity}:
            severity = entry
        else:
            option = entry
    elif isinstance(entry, list):
        if not 1 <= len(entry) <= 2:
            raise ConfigurationError(
                f"Rule '{rule_name}' expects [severity] or [severity, option], got {entry!r}"
            )
        severity = entry[0]
        option = entry[1] if len(entry) == 2 else None
    elif isinstance(entry, dict):
        unknown_keys = set(entry) - {"severity", "option"}
        if unknown_keys:
            raise ConfigurationError(
                f"Rule '{rule_name}' has unknown keys: {', '.join(sorted(unknown_keys))}"
            )
        severity = entry.get("severity", severity)
        option = entry.get("option")
    else:
        raise ConfigurationError(
            f"Rule '{rule_name}' has an invalid configuration: {entry!r}"
        )

    # YAML reads bare on/off as booleans
    if isinstance(severity, bool):
        severity = Severity.ERROR.value if severity else Severity.OFF.value

    try:
        severity = Severity(severity)
    except ValueError:
        allowed = ", ".join(s.value for s in Severity)
        raise ConfigurationError(
            f"Rule '{rule_name}' has invalid severity {severity!r} (expected one of: {allowed})"
        )

    if option is not None and option not in rule_cls.schema:
        allowed = ", ".join(rule_cls.schema) or "no option"
        raise ConfigurationError(
            f"Rule '{rule_name}' has invalid option {option!r} (expected one of: {allowed})"
        )

    return RuleSettings(severity=severity, option=option)


def parse_rule_config(data: Any) -> Dict[str, RuleSettings]:
    """
    Parse a loaded configuration document.

    Args:
        data: Document with a top-level ``rules`` mapping

    Returns:
        Dictionary mapping rule names to their settings

    Raises:
        ConfigurationError: If the document does not have the expected shape
    """
    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigurationError("Configuration must be a mapping")

    rules = data.get("rules") or {}
    if not isinstance(rules, dict):
        raise ConfigurationError("'rules' must be a mapping of rule names")

    return {
        rule_name: parse_rule_entry(rule_name, entry)
        for rule_name, entry in rules.items()
    }


def load_rule_config(config_path: Path) -> Dict[str, RuleSettings]:
    """
    Load rule configuration from a YAML file.

    Args:
        config_path: Path to the YAML file

    Returns:
        Dictionary mapping rule names to their settings

    Raises:
        ConfigurationError: If the file is missing, malformed or invalid
    """
    if not config_path.exists():
        raise ConfigurationError(f"Rule configuration not found: {config_path}")

    try:
        with open(config_path, 'r', encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read rule configuration {config_path}: {e}")
        raise ConfigurationError(f"Cannot read rule configuration {config_path}: {e}") from e
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse rule configuration {config_path}: {e}")
        raise ConfigurationError(f"Malformed rule configuration {config_path}: {e}") from e

    rule_settings = parse_rule_config(data)
    logger.info(f"Loaded rule configuration from {config_path}")
    return rule_settings


def resolve_rule_settings(
    padded_blocks: Optional[str] = None,
    config_file: Optional[str] = None,
) -> Dict[str, RuleSettings]:
    """
    Build the effective rule settings.

    Rules configured in ``config_file`` are taken as they are. An explicit
    ``padded_blocks`` option then replaces the option of the file's entry
    and keeps its severity. The ``padded_blocks`` setting applies only
    where neither sets an option.

    Args:
        padded_blocks: Explicit padded-blocks option (CLI flag or request field)
        config_file: YAML rule configuration. If None, uses application settings.

    Returns:
        Dictionary mapping every registered rule name to its settings

    Raises:
        ConfigurationError: If the option or the configuration file is invalid
    """
    from padcheck.config import settings

    if config_file is None:
        config_file = settings.config_file

    rule_settings = load_rule_config(Path(config_file)) if config_file else {}
    configured = rule_settings.get("padded-blocks", RuleSettings())

    option = padded_blocks
    if option is None:
        option = configured.option or settings.padded_blocks

    rule_settings["padded-blocks"] = parse_rule_entry(
        "padded-blocks", [configured.severity.value, option]
    )
    return rule_settings
