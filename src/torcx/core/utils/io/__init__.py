"""I/O utilities for torcx.

This package provides the file primitives used by the codecs:
- Core: atomic writes, directory management
- JSON: read/write with explicit permission bits
- YAML: read for bundled and user configuration
"""
from __future__ import annotations

from .core import (
    PathLike,
    atomic_write,
    ensure_directory,
    ensure_parent_dir,
)
from .json import (
    read_json,
    write_json,
    write_json_atomic,
)
from .yaml import read_yaml

__all__ = [
    # core
    "PathLike",
    "ensure_parent_dir",
    "ensure_directory",
    "atomic_write",
    # json
    "read_json",
    "write_json",
    "write_json_atomic",
    # yaml
    "read_yaml",
]
