from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace

from line_linter.config import ConfigError, build_settings, load_settings
from line_linter.models import SEVERITIES, LintSettings
from line_linter.pipeline import DEFAULT_EXCLUDE_DIRS, DEFAULT_INCLUDE_EXTS, lint_paths
from line_linter.reporting import build_payload, render_text, write_report
from line_linter.rules import RULE_REGISTRY, UnknownRuleError, parse_rule_ids


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="line-lint",
        description="Line-based style checks for JavaScript/TypeScript sources",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    check_parser = subparsers.add_parser("check", help="Lint files or directories")
    check_parser.add_argument("paths", nargs="+", help="Files or directories to lint")
    check_parser.add_argument("--config", default=None, help="Settings JSON path")
    check_parser.add_argument(
        "--rules",
        default=None,
        help="Comma-separated rule ids to enable, e.g. NO_VAR,NO_CONSOLE",
    )
    check_parser.add_argument("--max-line-length", type=int, default=None)
    check_parser.add_argument("--fail-on", choices=SEVERITIES, default=None)
    check_parser.add_argument("--format", choices=["text", "json"], default="text")
    check_parser.add_argument("--output-dir", default=None, help="Write summary.json and CSV files here")
    check_parser.add_argument(
        "--include-exts",
        default=",".join(sorted(DEFAULT_INCLUDE_EXTS)),
        help="Comma-separated extensions to include when walking directories",
    )
    check_parser.add_argument(
        "--exclude-dirs",
        default=",".join(sorted(DEFAULT_EXCLUDE_DIRS)),
        help="Comma-separated directory names to skip",
    )
    check_parser.add_argument("-v", "--verbose", action="store_true")

    subparsers.add_parser("rules", help="List available rules")

    return parser


def resolve_settings(args: argparse.Namespace) -> LintSettings:
    settings = load_settings(args.config) if args.config else build_settings()

    if args.rules is not None:
        try:
            settings = replace(settings, rules=parse_rule_ids(args.rules.split(",")))
        except UnknownRuleError as exc:
            raise ConfigError(str(exc)) from exc
    if args.max_line_length is not None:
        settings = build_settings(
            max_line_length=args.max_line_length,
            rules=[rule.value for rule in settings.rules],
            fail_on=settings.fail_on,
        )
    if args.fail_on is not None:
        settings = replace(settings, fail_on=args.fail_on)
    return settings


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "rules":
        for rule in RULE_REGISTRY:
            print(f"{rule.rule_id.value:<24} {rule.severity:<8} {rule.message}")
        return 0

    if args.command == "check":
        logging.basicConfig(
            level=logging.INFO if args.verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )
        try:
            settings = resolve_settings(args)
        except ConfigError as exc:
            parser.error(str(exc))
            return 2

        include = {item.strip().lower() for item in args.include_exts.split(",") if item.strip()}
        exclude = {item.strip() for item in args.exclude_dirs.split(",") if item.strip()}

        run = lint_paths(args.paths, settings, include_exts=include, exclude_dirs=exclude)

        if args.format == "json":
            payload = build_payload(run.results, settings)
            payload["errors"] = run.errors
            print(json.dumps(payload, indent=2, ensure_ascii=True))
        else:
            render_text(run.results)

        if args.output_dir:
            write_report(run.results, settings, args.output_dir)

        return run.exit_code(settings.fail_on)

    parser.error(f"Unsupported command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
