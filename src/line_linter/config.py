from __future__ import annotations

import json
from pathlib import Path

from line_linter.models import DEFAULT_MAX_LINE_LENGTH, SEVERITIES, LintSettings, RuleId
from line_linter.rules import UnknownRuleError, parse_rule_ids

KNOWN_KEYS = {"max_line_length", "rules", "disabled_rules", "fail_on"}


class ConfigError(ValueError):
    pass


def load_settings(path: str | Path) -> LintSettings:
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with config_path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
    except json.JSONDecodeError as exc:
        raise ConfigError(
            f"Invalid JSON in {config_path}: {exc.msg} (line {exc.lineno} column {exc.colno})"
        ) from exc

    if not isinstance(raw, dict):
        raise ConfigError("Config must be a JSON object")

    unknown = sorted(set(raw) - KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"Config has unknown keys: {', '.join(unknown)}")

    return build_settings(
        max_line_length=raw.get("max_line_length", DEFAULT_MAX_LINE_LENGTH),
        rules=_ensure_string_list(raw.get("rules"), "rules"),
        disabled_rules=_ensure_string_list(raw.get("disabled_rules"), "disabled_rules"),
        fail_on=raw.get("fail_on", "warning"),
    )


def build_settings(
    *,
    max_line_length: object = DEFAULT_MAX_LINE_LENGTH,
    rules: list[str] | None = None,
    disabled_rules: list[str] | None = None,
    fail_on: object = "warning",
) -> LintSettings:
    """Validate raw values into LintSettings; ``rules=None`` enables every rule."""
    if isinstance(max_line_length, bool) or not isinstance(max_line_length, int):
        raise ConfigError("'max_line_length' must be an integer")
    if max_line_length <= 0:
        raise ConfigError("'max_line_length' must be positive")

    severity = str(fail_on).strip().lower()
    if severity not in SEVERITIES:
        raise ConfigError(f"'fail_on' must be one of: {', '.join(SEVERITIES)}")

    try:
        enabled = frozenset(RuleId) if rules is None else parse_rule_ids(rules)
        disabled = parse_rule_ids(disabled_rules or [])
    except UnknownRuleError as exc:
        raise ConfigError(str(exc)) from exc

    return LintSettings(
        max_line_length=max_line_length,
        rules=enabled - disabled,
        fail_on=severity,
    )


def _ensure_string_list(value: object, key: str) -> list[str] | None:
    if value is None:
        return None
    if not isinstance(value, list):
        raise ConfigError(f"'{key}' must be a list of strings")
    return [str(item) for item in value]
