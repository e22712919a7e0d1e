from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass
class WriteResult:
    path: Path
    bytes_written: int


def ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def read_text_file(path: Path, encoding: str = "utf-8") -> str:
    # Bytes -> str without newline translation so CRLF files round-trip
    return path.read_bytes().decode(encoding)


def write_text_file(path: Path, content: str, encoding: str = "utf-8") -> WriteResult:
    ensure_parent(path)
    data = content.encode(encoding)
    path.write_bytes(data)
    return WriteResult(path=path, bytes_written=len(data))
