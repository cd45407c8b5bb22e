import pytest

from line_linter.models import LintSettings, RuleId
from line_linter.rules import RULE_REGISTRY, UnknownRuleError, parse_rule_ids

SETTINGS = LintSettings()


def check(rule_id: RuleId, line: str, settings: LintSettings = SETTINGS):
    (rule,) = [rule for rule in RULE_REGISTRY if rule.rule_id == rule_id]
    return rule.check(line, settings)


def test_registry_follows_declared_order():
    assert [rule.rule_id for rule in RULE_REGISTRY] == list(RuleId)


@pytest.mark.parametrize(
    ("rule_id", "line", "column"),
    [
        (RuleId.NO_VAR, "var x = 1;", 1),
        (RuleId.NO_VAR, "    var oldStyle = \"avoid var\";", 5),
        (RuleId.NO_VAR, "for (var i = 0; i < n; i++) {", 6),
        (RuleId.NO_VAR, "let a = 1; var b = 2;", 12),
        (RuleId.NO_VAR, "export var legacy = 1;", 8),
        (RuleId.NO_VAR, "var π = 3.14;", 1),
        (RuleId.NO_VAR, "var { a, b } = obj;", 1),
        (RuleId.NO_LOOSE_EQUALITY, "if (value == null) {", 11),
        (RuleId.NO_LOOSE_EQUALITY, "a != b", 3),
        (RuleId.NO_CONSOLE, "console.log(\"Debug message\");", 1),
        (RuleId.NO_CONSOLE, "    console.error('Error fetching data:', error);", 5),
        (RuleId.NO_TRAILING_WHITESPACE, "let trailing = \"x\";   ", 20),
        (RuleId.NO_TRAILING_WHITESPACE, "a;\t", 3),
        (RuleId.NO_TRAILING_WHITESPACE, "   ", 1),
        (RuleId.NO_DEBUGGER, "  debugger;", 3),
        (RuleId.NO_DEBUGGER, "if (x) { debugger }", 10),
        (RuleId.NO_DEBUGGER, "if (dev) debugger;", 10),
        (RuleId.NO_DOUBLE_NEGATION, "const b = !!value;", 11),
        (RuleId.NO_EMPTY_BLOCK, "function noop() {}", 17),
        (RuleId.FUNCTION_SPACING, "function(){}", 1),
        (RuleId.FUNCTION_SPACING, "const f = function() {", 11),
        (RuleId.FUNCTION_SPACING, "function foo(a){", 1),
        (RuleId.MIXED_INDENTATION, " \treturn x;", 1),
    ],
)
def test_rule_reports_column(rule_id, line, column):
    assert check(rule_id, line) == column


@pytest.mark.parametrize(
    ("rule_id", "line"),
    [
        (RuleId.NO_VAR, "const variable = 1;"),
        (RuleId.NO_VAR, "variance = 3;"),
        (RuleId.NO_VAR, "let label = 'var y';"),
        (RuleId.NO_VAR, "var 1x = 2;"),
        (RuleId.NO_VAR, "exported var x = 1;"),
        (RuleId.NO_LOOSE_EQUALITY, "if (a === b) {"),
        (RuleId.NO_LOOSE_EQUALITY, "if (a !== b) {"),
        (RuleId.NO_LOOSE_EQUALITY, "x <= y && x >= z"),
        (RuleId.NO_LOOSE_EQUALITY, "const add = (a, b) => a + b;"),
        (RuleId.NO_CONSOLE, "myconsole.log(x);"),
        (RuleId.NO_CONSOLE, "logger.info('ok');"),
        (RuleId.NO_TRAILING_WHITESPACE, "let clean = 1;"),
        (RuleId.NO_DEBUGGER, "const debuggerEnabled = true;"),
        (RuleId.NO_DOUBLE_NEGATION, "if (a != !b) {"),
        (RuleId.NO_EMPTY_BLOCK, "if (x) {"),
        (RuleId.FUNCTION_SPACING, "function greet(name) {"),
        (RuleId.FUNCTION_SPACING, "const f = function () {"),
        (RuleId.MIXED_INDENTATION, "\t\treturn x;"),
        (RuleId.MIXED_INDENTATION, "    return x;"),
        (RuleId.MIXED_INDENTATION, "x \t y"),
    ],
)
def test_rule_ignores_clean_line(rule_id, line):
    assert check(rule_id, line) is None


def test_max_line_length_boundary():
    assert check(RuleId.MAX_LINE_LENGTH, "x" * 120) == 101
    assert check(RuleId.MAX_LINE_LENGTH, "x" * 100) is None


def test_max_line_length_uses_configured_limit():
    settings = LintSettings(max_line_length=80)
    assert check(RuleId.MAX_LINE_LENGTH, "x" * 81, settings) == 81
    assert check(RuleId.MAX_LINE_LENGTH, "x" * 80, settings) is None


def test_max_line_length_counts_characters_not_bytes():
    assert check(RuleId.MAX_LINE_LENGTH, "é" * 100) is None


def test_parse_rule_ids_accepts_loose_spelling():
    assert parse_rule_ids(["no-var", " no_console ", ""]) == {RuleId.NO_VAR, RuleId.NO_CONSOLE}


def test_parse_rule_ids_rejects_unknown():
    with pytest.raises(UnknownRuleError, match="NO_SUCH_RULE"):
        parse_rule_ids(["NO_SUCH_RULE"])
