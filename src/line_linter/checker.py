from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from line_linter.document import SourceDocument, read_document
from line_linter.models import SEVERITIES, Finding, LintSettings, RuleId
from line_linter.rules import RULE_REGISTRY, render_message

DEFAULT_SETTINGS = LintSettings()


def scan(
    document: SourceDocument,
    rules: Iterable[RuleId] | None = None,
    settings: LintSettings | None = None,
) -> list[Finding]:
    """Run the enabled rules over every line of ``document``.

    ``rules`` defaults to ``settings.rules``. Findings come back ordered by
    line number, then by the declared order of ``RULE_REGISTRY``.
    """
    settings = settings or DEFAULT_SETTINGS
    enabled = frozenset(settings.rules if rules is None else rules)
    active = [
        (rule, render_message(rule, settings))
        for rule in RULE_REGISTRY
        if rule.rule_id in enabled
    ]
    if not active:
        return []

    findings: list[Finding] = []
    for line_number, line in document.numbered_lines():
        for rule, message in active:
            column = rule.check(line, settings)
            if column is None:
                continue
            findings.append(
                Finding(
                    line_number=line_number,
                    rule_id=rule.rule_id,
                    message=message,
                    column=column,
                    severity=rule.severity,
                )
            )

    return findings


def scan_text(
    text: str,
    rules: Iterable[RuleId] | None = None,
    settings: LintSettings | None = None,
) -> list[Finding]:
    return scan(SourceDocument.from_text(text), rules, settings)


def scan_bytes(
    data: bytes,
    rules: Iterable[RuleId] | None = None,
    settings: LintSettings | None = None,
) -> list[Finding]:
    return scan(SourceDocument.from_bytes(data), rules, settings)


def scan_path(
    path: str | Path,
    rules: Iterable[RuleId] | None = None,
    settings: LintSettings | None = None,
) -> list[Finding]:
    return scan(read_document(path), rules, settings)


def count_by_severity(findings: Iterable[Finding]) -> dict[str, int]:
    counts = {severity: 0 for severity in SEVERITIES}
    for item in findings:
        counts[item.severity] += 1
    return counts


def exceeds_threshold(findings: Iterable[Finding], fail_on: str) -> bool:
    """True when any finding is at least as severe as ``fail_on``."""
    limit = SEVERITIES.index(fail_on)
    return any(SEVERITIES.index(item.severity) <= limit for item in findings)
