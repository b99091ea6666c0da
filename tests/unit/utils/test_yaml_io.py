from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from flexconf.core.utils.io import is_path_like, iter_yaml_files, read_yaml


def test_iter_yaml_files_prefers_yaml_when_both_extensions_exist(tmp_path: Path) -> None:
    d = tmp_path / "production"
    d.mkdir()
    (d / "data.yml").write_text("key: 1\n", encoding="utf-8")
    (d / "data.yaml").write_text("key: 2\n", encoding="utf-8")
    (d / "cache.yml").write_text("ttl: 1\n", encoding="utf-8")
    (d / "notes.txt").write_text("x\n", encoding="utf-8")

    names = [p.name for p in iter_yaml_files(d)]

    assert names == ["cache.yml", "data.yaml"]


def test_iter_yaml_files_missing_directory_is_empty(tmp_path: Path) -> None:
    assert iter_yaml_files(tmp_path / "nope") == []


def test_read_yaml_returns_default_for_missing_or_empty(tmp_path: Path) -> None:
    empty = tmp_path / "empty.yaml"
    empty.write_text("", encoding="utf-8")

    assert read_yaml(tmp_path / "missing.yaml", default={}) == {}
    assert read_yaml(empty, default={}) == {}


def test_read_yaml_raise_on_error_propagates(tmp_path: Path) -> None:
    bad = tmp_path / "bad.yaml"
    bad.write_text("key: [unclosed\n", encoding="utf-8")

    with pytest.raises(FileNotFoundError):
        read_yaml(tmp_path / "missing.yaml", raise_on_error=True)
    with pytest.raises(yaml.YAMLError):
        read_yaml(bad, raise_on_error=True)
    assert read_yaml(bad, default="fallback") == "fallback"


def test_is_path_like() -> None:
    assert is_path_like("settings.yaml")
    assert is_path_like(Path("settings.yaml"))
    assert not is_path_like({"key": "value"})


def test_read_yaml_invalid_utf8_returns_default_or_raises(tmp_path: Path) -> None:
    bad = tmp_path / "binary.yaml"
    bad.write_bytes(b"\xff\xfe key: value\n")

    assert read_yaml(bad, default={}) == {}
    with pytest.raises(UnicodeDecodeError):
        read_yaml(bad, raise_on_error=True)
