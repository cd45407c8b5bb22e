from line_linter.checker import count_by_severity, scan, scan_bytes, scan_path, scan_text
from line_linter.document import InputDecodingError, SourceDocument, read_document
from line_linter.models import Finding, LintSettings, RuleId

__all__ = [
    "Finding",
    "InputDecodingError",
    "LintSettings",
    "RuleId",
    "SourceDocument",
    "count_by_severity",
    "read_document",
    "scan",
    "scan_bytes",
    "scan_path",
    "scan_text",
]
