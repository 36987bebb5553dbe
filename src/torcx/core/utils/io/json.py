"""JSON I/O utilities with explicit permission bits and atomic writes."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Callable, TextIO

from .core import PathLike, atomic_write

ENCODING = "utf-8"


def _json_writer(data: Any) -> Callable[[TextIO], None]:
    # Compact and in field order, so a codec round-trip reproduces the file.
    def _writer(f: TextIO) -> None:
        json.dump(data, f, ensure_ascii=False)
        f.write("\n")

    return _writer


_MISSING = object()  # Sentinel for unset default


def read_json(file_path: PathLike, *, default: Any = _MISSING) -> Any:
    """Read and parse a JSON document.

    Args:
        file_path: Path to JSON file
        default: Value to return if file doesn't exist (optional).
                 If not provided, FileNotFoundError is raised.

    Returns:
        Parsed JSON data, or ``default`` if file doesn't exist

    Raises:
        FileNotFoundError: If the file does not exist and no default is provided
        json.JSONDecodeError: If the content is not well-formed JSON
    """
    path = Path(file_path)
    if not path.exists() and default is not _MISSING:
        return default

    with open(path, "r", encoding=ENCODING) as f:
        return json.load(f)


def write_json(file_path: PathLike, data: Any, *, mode: int = 0o644) -> None:
    """Write JSON to ``file_path`` in place, with permission bits ``mode``.

    The file is created if missing and truncated otherwise. ``mode`` is
    applied even when the file already exists. No temp file is involved;
    use :func:`write_json_atomic` when the target must never be observed
    half-written.
    """
    path = Path(file_path)

    fd = os.open(str(path), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
    with os.fdopen(fd, "w", encoding=ENCODING) as f:
        _json_writer(data)(f)
    os.chmod(path, mode)


def write_json_atomic(file_path: PathLike, data: Any, *, mode: int = 0o644) -> None:
    """Atomically write JSON to ``file_path`` (temp file + rename)."""
    atomic_write(Path(file_path), _json_writer(data), mode=mode, encoding=ENCODING)


__all__ = [
    "read_json",
    "write_json",
    "write_json_atomic",
]
