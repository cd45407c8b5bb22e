from __future__ import annotations

import re

from line_linter.models import LineRule, LintSettings, RuleId

VAR_DECLARATION = re.compile(r"(?:^|[;{}(])\s*(?:export\s+)?(var)\s+(?:[^\W\d]|[$\[{])")
LOOSE_EQUALITY = re.compile(r"(?<![=!<>])(?:==|!=)(?!=)")
CONSOLE_CALL = re.compile(
    r"\bconsole\s*\.\s*(?:log|debug|info|warn|error|trace|dir|table)\s*\("
)
DEBUGGER_STATEMENT = re.compile(r"(?:^|[;{})])\s*(debugger)\s*(?:;|\}|$)")
DOUBLE_NEGATION = re.compile(r"!!\s*[\w$(\[]")
EMPTY_BLOCK = re.compile(r"\{\s*\}")
# Anonymous `function(` without a space, or `){` right after a function's parameters.
FUNCTION_SPACING = re.compile(r"\bfunction\(|\bfunction\b[^(]*\([^)]*\)\{")


def _search(pattern: re.Pattern[str], line: str, group: int = 0) -> int | None:
    match = pattern.search(line)
    if match is None:
        return None
    return match.start(group) + 1


def check_no_var(line: str, settings: LintSettings) -> int | None:
    return _search(VAR_DECLARATION, line, group=1)


def check_no_loose_equality(line: str, settings: LintSettings) -> int | None:
    return _search(LOOSE_EQUALITY, line)


def check_no_console(line: str, settings: LintSettings) -> int | None:
    return _search(CONSOLE_CALL, line)


def check_max_line_length(line: str, settings: LintSettings) -> int | None:
    if len(line) > settings.max_line_length:
        return settings.max_line_length + 1
    return None


def check_no_trailing_whitespace(line: str, settings: LintSettings) -> int | None:
    stripped = line.rstrip()
    if len(stripped) < len(line):
        return len(stripped) + 1
    return None


def check_no_debugger(line: str, settings: LintSettings) -> int | None:
    return _search(DEBUGGER_STATEMENT, line, group=1)


def check_no_double_negation(line: str, settings: LintSettings) -> int | None:
    return _search(DOUBLE_NEGATION, line)


def check_no_empty_block(line: str, settings: LintSettings) -> int | None:
    return _search(EMPTY_BLOCK, line)


def check_function_spacing(line: str, settings: LintSettings) -> int | None:
    return _search(FUNCTION_SPACING, line)


def check_mixed_indentation(line: str, settings: LintSettings) -> int | None:
    indent = line[: len(line) - len(line.lstrip(" \t"))]
    if " " in indent and "\t" in indent:
        return 1
    return None


# Declared order; findings on the same line are reported in this order.
RULE_REGISTRY: list[LineRule] = [
    LineRule(
        RuleId.NO_VAR,
        "error",
        "Use 'let' or 'const' instead of 'var'",
        check_no_var,
    ),
    LineRule(
        RuleId.NO_LOOSE_EQUALITY,
        "error",
        "Use '===' or '!==' instead of loose equality",
        check_no_loose_equality,
    ),
    LineRule(
        RuleId.NO_CONSOLE,
        "warning",
        "Avoid console logging in production code",
        check_no_console,
    ),
    LineRule(
        RuleId.MAX_LINE_LENGTH,
        "warning",
        "Line too long (>{max_line_length} characters)",
        check_max_line_length,
    ),
    LineRule(
        RuleId.NO_TRAILING_WHITESPACE,
        "info",
        "Trailing whitespace",
        check_no_trailing_whitespace,
    ),
    LineRule(
        RuleId.NO_DEBUGGER,
        "error",
        "Remove debugger statements",
        check_no_debugger,
    ),
    LineRule(
        RuleId.NO_DOUBLE_NEGATION,
        "info",
        "Use Boolean() instead of double negation (!!)",
        check_no_double_negation,
    ),
    LineRule(
        RuleId.NO_EMPTY_BLOCK,
        "warning",
        "Empty block statement",
        check_no_empty_block,
    ),
    LineRule(
        RuleId.FUNCTION_SPACING,
        "info",
        "Missing space in function declaration, expected 'function (...) {'",
        check_function_spacing,
    ),
    LineRule(
        RuleId.MIXED_INDENTATION,
        "warning",
        "Mixed indentation (tabs and spaces)",
        check_mixed_indentation,
    ),
]


class UnknownRuleError(ValueError):
    pass


def parse_rule_ids(values) -> frozenset[RuleId]:
    """Accept rule ids in any case, with '-' or '_' separators."""
    selected: set[RuleId] = set()
    for value in values:
        text = str(value).strip().upper().replace("-", "_")
        if not text:
            continue
        try:
            selected.add(RuleId(text))
        except ValueError:
            raise UnknownRuleError(
                f"Unknown rule: {value} (expected one of: {', '.join(r.value for r in RuleId)})"
            ) from None
    return frozenset(selected)


def render_message(rule: LineRule, settings: LintSettings) -> str:
    return rule.message.replace("{max_line_length}", str(settings.max_line_length))
