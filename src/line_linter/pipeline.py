from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

from line_linter.checker import exceeds_threshold, scan
from line_linter.document import InputDecodingError, read_document
from line_linter.models import Finding, LintSettings

logger = logging.getLogger(__name__)

DEFAULT_INCLUDE_EXTS = {
    ".js",
    ".jsx",
    ".mjs",
    ".cjs",
    ".ts",
    ".tsx",
}

DEFAULT_EXCLUDE_DIRS = {
    ".git",
    "node_modules",
    "dist",
    "build",
    "coverage",
}


@dataclass
class LintRun:
    results: dict[str, list[Finding]] = field(default_factory=dict)
    errors: dict[str, str] = field(default_factory=dict)

    def exit_code(self, fail_on: str) -> int:
        if self.errors:
            return 2
        findings = [item for items in self.results.values() for item in items]
        return 1 if exceeds_threshold(findings, fail_on) else 0


def lint_paths(
    paths: Iterable[str | Path],
    settings: LintSettings,
    *,
    include_exts: set[str] | None = None,
    exclude_dirs: set[str] | None = None,
) -> LintRun:
    run = LintRun()
    for file_path in iter_source_files(paths, include_exts, exclude_dirs):
        key = str(file_path)
        try:
            document = read_document(file_path)
        except InputDecodingError as exc:
            logger.error("Skipping %s: %s", key, exc)
            run.errors[key] = str(exc)
            continue
        except OSError as exc:
            logger.error("Cannot read %s: %s", key, exc)
            run.errors[key] = str(exc)
            continue

        findings = scan(document, settings=settings)
        logger.info("%s: %d line(s), %d finding(s)", key, len(document), len(findings))
        run.results[key] = findings

    return run


def iter_source_files(
    paths: Iterable[str | Path],
    include_exts: set[str] | None = None,
    exclude_dirs: set[str] | None = None,
) -> Iterator[Path]:
    """Yield explicit files as given, and matching files under directories in sorted order."""
    include = include_exts or DEFAULT_INCLUDE_EXTS
    exclude = exclude_dirs or DEFAULT_EXCLUDE_DIRS

    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            for candidate in sorted(path.rglob("*")):
                if not candidate.is_file():
                    continue
                if any(part in exclude for part in candidate.relative_to(path).parts):
                    continue
                if candidate.suffix.lower() in include:
                    yield candidate
        else:
            # Missing files surface as read errors in lint_paths.
            yield path
