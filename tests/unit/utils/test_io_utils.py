from __future__ import annotations

import json
import stat
from pathlib import Path

import pytest
import yaml

from torcx.core.utils.io import (
    atomic_write,
    ensure_directory,
    read_json,
    read_yaml,
    write_json,
    write_json_atomic,
)
from torcx.core.utils.merge import deep_merge


def test_ensure_directory_creates_and_checks(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b"
    assert ensure_directory(target) == target
    assert target.is_dir()

    with pytest.raises(FileNotFoundError):
        ensure_directory(tmp_path / "missing", create=False)

    f = tmp_path / "file"
    f.write_text("x", encoding="utf-8")
    with pytest.raises(NotADirectoryError):
        ensure_directory(f)


def test_read_json_default_and_missing(tmp_path: Path) -> None:
    assert read_json(tmp_path / "absent.json", default={}) == {}
    with pytest.raises(FileNotFoundError):
        read_json(tmp_path / "absent.json")


def test_write_json_keeps_field_order(tmp_path: Path) -> None:
    path = tmp_path / "doc.json"
    write_json(path, {"kind": "k", "value": {"b": 1, "a": 2}}, mode=0o600)

    assert path.read_text(encoding="utf-8") == '{"kind": "k", "value": {"b": 1, "a": 2}}\n'
    assert stat.S_IMODE(path.stat().st_mode) == 0o600

    write_json(path, {"name": "caf\u00e9"})
    assert path.read_text(encoding="utf-8") == '{"name": "café"}\n'


def test_write_json_atomic_creates_parents_and_leaves_no_temp(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "doc.json"
    write_json_atomic(path, {"ok": True}, mode=0o640)

    assert json.loads(path.read_text(encoding="utf-8")) == {"ok": True}
    assert stat.S_IMODE(path.stat().st_mode) == 0o640
    assert [p.name for p in path.parent.iterdir()] == ["doc.json"]


def test_atomic_write_failure_keeps_original(tmp_path: Path) -> None:
    path = tmp_path / "doc.txt"
    path.write_text("original", encoding="utf-8")

    def _boom(f) -> None:
        f.write("partial")
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        atomic_write(path, _boom)

    assert path.read_text(encoding="utf-8") == "original"
    assert [p.name for p in tmp_path.iterdir()] == ["doc.txt"]


def test_read_yaml(tmp_path: Path) -> None:
    path = tmp_path / "cfg.yaml"
    path.write_text("a:\n  b: 1\n", encoding="utf-8")
    assert read_yaml(path) == {"a": {"b": 1}}

    bad = tmp_path / "bad.yaml"
    bad.write_text("a: [unclosed\n", encoding="utf-8")
    assert read_yaml(bad, default={}) == {}
    with pytest.raises(yaml.YAMLError):
        read_yaml(bad, raise_on_error=True)
    with pytest.raises(FileNotFoundError):
        read_yaml(tmp_path / "absent.yaml", raise_on_error=True)


def test_deep_merge_replaces_lists_and_merges_dicts() -> None:
    base = {"torcx": {"run_dir": "/run", "store_paths": ["/a", "/b"]}, "other": 1}
    override = {"torcx": {"store_paths": ["/c"]}}

    assert deep_merge(base, override) == {"torcx": {"run_dir": "/run", "store_paths": ["/c"]}, "other": 1}
    assert base["torcx"]["store_paths"] == ["/a", "/b"]
