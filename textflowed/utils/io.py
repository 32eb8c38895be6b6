from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional


@dataclass
class WriteResult:
    path: Optional[Path]
    bytes_written: int


def ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def read_text(path: Optional[Path], encoding: str = "utf-8", stream: Optional[BinaryIO] = None) -> str:
    """Read a whole file, or the whole of ``stream`` (stdin) when ``path`` is None.

    Both paths decode raw bytes, so "\\r\\n" is never translated.
    """
    if path is None:
        data = (stream or sys.stdin.buffer).read()
    else:
        data = path.read_bytes()
    return data.decode(encoding)


def write_text(path: Optional[Path], content: str, encoding: str = "utf-8", stream: Optional[BinaryIO] = None) -> WriteResult:
    data = content.encode(encoding)
    if path is None:
        if stream is None:
            sys.stdout.flush()
            stream = sys.stdout.buffer
        stream.write(data)
        stream.flush()
        return WriteResult(path=None, bytes_written=len(data))
    ensure_parent(path)
    path.write_bytes(data)
    return WriteResult(path=path, bytes_written=len(data))
