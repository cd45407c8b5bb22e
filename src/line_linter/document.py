from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

UTF8_BOM = "\ufeff"


class InputDecodingError(ValueError):
    def __init__(self, message: str, *, path: str | None = None, offset: int | None = None):
        super().__init__(message)
        self.path = path
        self.offset = offset


@dataclass(frozen=True)
class SourceDocument:
    """Read-only, 1-indexed view of a source file's lines.

    Lines are split on LF only. A CR right before the LF belongs to the line
    terminator, and a trailing terminator does not open an extra empty line.
    """

    lines: tuple[str, ...]
    path: str | None = None

    @classmethod
    def from_text(cls, text: str, path: str | None = None) -> SourceDocument:
        if text.startswith(UTF8_BOM):
            text = text[len(UTF8_BOM):]
        if not text:
            return cls(lines=(), path=path)

        raw_lines = text.split("\n")
        if raw_lines[-1] == "":
            raw_lines.pop()
        return cls(
            lines=tuple(line[:-1] if line.endswith("\r") else line for line in raw_lines),
            path=path,
        )

    @classmethod
    def from_bytes(cls, data: bytes, path: str | None = None) -> SourceDocument:
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            where = f"{path}: " if path else ""
            raise InputDecodingError(
                f"{where}input is not valid UTF-8 (byte offset {exc.start}: {exc.reason})",
                path=path,
                offset=exc.start,
            ) from exc
        return cls.from_text(text, path=path)

    def __len__(self) -> int:
        return len(self.lines)

    def numbered_lines(self):
        return enumerate(self.lines, start=1)


def read_document(path: str | Path) -> SourceDocument:
    source_path = Path(path)
    return SourceDocument.from_bytes(source_path.read_bytes(), path=str(source_path))
