from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Callable


class RuleId(str, Enum):
    NO_VAR = "NO_VAR"
    NO_LOOSE_EQUALITY = "NO_LOOSE_EQUALITY"
    NO_CONSOLE = "NO_CONSOLE"
    MAX_LINE_LENGTH = "MAX_LINE_LENGTH"
    NO_TRAILING_WHITESPACE = "NO_TRAILING_WHITESPACE"
    NO_DEBUGGER = "NO_DEBUGGER"
    NO_DOUBLE_NEGATION = "NO_DOUBLE_NEGATION"
    NO_EMPTY_BLOCK = "NO_EMPTY_BLOCK"
    FUNCTION_SPACING = "FUNCTION_SPACING"
    MIXED_INDENTATION = "MIXED_INDENTATION"

    def __str__(self) -> str:
        return self.value


# Most severe first.
SEVERITIES = ("error", "warning", "info", "hint")

DEFAULT_MAX_LINE_LENGTH = 100


@dataclass(frozen=True)
class LintSettings:
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH
    rules: frozenset[RuleId] = field(default_factory=lambda: frozenset(RuleId))
    fail_on: str = "warning"


@dataclass(frozen=True)
class LineRule:
    rule_id: RuleId
    severity: str
    message: str
    check: Callable[[str, LintSettings], int | None]


@dataclass(frozen=True)
class Finding:
    line_number: int
    rule_id: RuleId
    message: str
    column: int = 1
    severity: str = "warning"

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["rule_id"] = self.rule_id.value
        return payload
