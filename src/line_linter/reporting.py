from __future__ import annotations

import csv
import json
import logging
from collections import Counter
from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from pathlib import Path

from line_linter.checker import count_by_severity
from line_linter.models import Finding, LintSettings

logger = logging.getLogger(__name__)

Sink = Callable[[str], None]


def format_finding(finding: Finding, path: str | None = None) -> str:
    location = f"{path}:{finding.line_number}" if path else f"line:{finding.line_number}"
    return (
        f"{location}:{finding.column}: [{finding.severity}] "
        f"{finding.rule_id.value} {finding.message}"
    )


def render_text(results: Mapping[str, list[Finding]], sink: Sink = print) -> None:
    all_findings: list[Finding] = []
    for path, findings in results.items():
        for item in findings:
            sink(format_finding(item, path))
        all_findings.extend(findings)

    counts = count_by_severity(all_findings)
    sink(
        f"{len(all_findings)} finding(s) in {len(results)} file(s): "
        + ", ".join(f"{counts[key]} {key}" for key in counts)
    )


def build_payload(results: Mapping[str, list[Finding]], settings: LintSettings) -> dict:
    all_findings = [item for findings in results.values() for item in findings]
    return {
        "settings": {
            "max_line_length": settings.max_line_length,
            "rules": sorted(rule.value for rule in settings.rules),
            "fail_on": settings.fail_on,
        },
        "counts": {
            "files_scanned": len(results),
            "files_with_findings": sum(1 for findings in results.values() if findings),
            "findings_total": len(all_findings),
            "by_severity": count_by_severity(all_findings),
        },
        "findings": [
            {"file_path": path, **item.to_dict()}
            for path, findings in results.items()
            for item in findings
        ],
    }


def write_report(
    results: Mapping[str, list[Finding]],
    settings: LintSettings,
    output_dir: str | Path,
) -> dict:
    out_dir = Path(output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    payload = build_payload(results, settings)
    rows = payload.pop("findings")

    by_rule = Counter((row["rule_id"], row["severity"]) for row in rows)
    by_rule_rows = [
        {"rule_id": rule_id, "severity": severity, "findings_count": count}
        for (rule_id, severity), count in sorted(by_rule.items(), key=lambda kv: (-kv[1], kv[0]))
    ]

    summary = {
        "generated_at": datetime.now(timezone.utc).isoformat(),
        **payload,
        "files": {},
    }

    summary_json = out_dir / "summary.json"
    findings_csv = out_dir / "findings.csv"
    by_rule_csv = out_dir / "findings_by_rule.csv"

    _write_csv(findings_csv, rows)
    _write_csv(by_rule_csv, by_rule_rows)
    summary["files"] = {
        "summary": str(summary_json.resolve()),
        "findings": str(findings_csv.resolve()),
        "findings_by_rule": str(by_rule_csv.resolve()),
    }
    _write_json(summary_json, summary)

    logger.info("Wrote report for %d file(s) to %s", len(results), out_dir)
    return summary


def _write_json(path: Path, payload: dict) -> None:
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2, ensure_ascii=True)


def _write_csv(path: Path, rows: list[dict]) -> None:
    with path.open("w", encoding="utf-8", newline="") as handle:
        if not rows:
            handle.write("")
            return

        fieldnames: list[str] = []
        seen = set()
        for row in rows:
            for key in row:
                if key not in seen:
                    seen.add(key)
                    fieldnames.append(key)

        writer = csv.DictWriter(handle, fieldnames=fieldnames)
        writer.writeheader()
        for row in rows:
            writer.writerow(row)
