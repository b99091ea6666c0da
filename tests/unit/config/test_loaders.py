from __future__ import annotations

import logging
from pathlib import Path

import pytest
import yaml

from flexconf.core.config import ConfigBuilder, load_file, load_source, load_tree
from flexconf.core.exceptions import ConfigFileError
from helpers.yaml_files import write_yaml


def test_tree_loader_reads_environments_and_sections(settings_tree: Path) -> None:
    cfg = load_tree(ConfigBuilder(), settings_tree)

    assert sorted(cfg.values) == ["development", "production"]
    assert sorted(cfg.values["production"]) == ["cache", "data"]

    cfg.environment("production")
    assert cfg.get("data.key") == "value"
    assert cfg.get("data.nested.sub") == 1
    cfg.environment("development")
    assert cfg.get("data.key") == "dev_value"
    assert cfg.get("notes") is None


def test_tree_loader_accepts_yml_and_prefers_yaml(tmp_path: Path) -> None:
    root = tmp_path / "settings"
    write_yaml(root / "production" / "data.yml", {"key": "from_yml"})
    write_yaml(root / "production" / "data.yaml", {"key": "from_yaml"})
    write_yaml(root / "production" / "cache.yml", {"ttl": 1})

    cfg = load_tree(ConfigBuilder(), root)
    cfg.environment("production")

    assert cfg.get("data.key") == "from_yaml"
    assert cfg.get("cache.ttl") == 1


def test_tree_loader_leaves_cursor_on_last_environment(settings_tree: Path) -> None:
    cfg = load_tree(ConfigBuilder(), settings_tree)

    # Environments are visited in sorted order.
    assert cfg.cursor.environment == "production"
    assert cfg.cursor.section == "data"


def test_file_loader_populates_every_environment(settings_file: Path) -> None:
    cfg = load_file(ConfigBuilder(), settings_file)

    assert cfg.cursor.environment == "production"
    assert cfg.cursor.section == "cache"
    assert cfg.get("data.key") == "value"

    cfg.environment("development")
    assert cfg.get("data.key") == "dev_value"


def test_file_loader_then_explicit_set_overrides(settings_file: Path) -> None:
    cfg = load_file(ConfigBuilder(), settings_file)
    cfg.environment("production")
    cfg.section("data")
    cfg.set({"key": "explicit", "extra": True})

    assert cfg.get("data.key") == "explicit"
    assert cfg.get("data.extra") is True
    assert cfg.get("cache.ttl") == 60


def test_file_loader_skips_malformed_entries(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "settings.yaml"
    path.write_text(
        "1: {data: {key: numeric}}\n"
        "scalar_env: 5\n"
        "production:\n"
        "  data: {key: value}\n"
        "  broken: [1, 2]\n",
        encoding="utf-8",
    )

    with caplog.at_level(logging.WARNING, logger="flexconf"):
        cfg = load_file(ConfigBuilder(), path)

    assert list(cfg.values) == ["production"]
    assert list(cfg.values["production"]) == ["data"]
    assert cfg.cursor.environment == "production"
    assert "Skipping" in caplog.text


def test_file_loader_top_level_must_be_mapping(tmp_path: Path) -> None:
    path = write_yaml(tmp_path / "settings.yaml", ["production"])
    with pytest.raises(ConfigFileError):
        load_file(ConfigBuilder(), path)


def test_file_loader_propagates_yaml_errors(tmp_path: Path) -> None:
    path = tmp_path / "settings.yaml"
    path.write_text("production: {data: [\n", encoding="utf-8")
    with pytest.raises(yaml.YAMLError):
        load_file(ConfigBuilder(), path)


def test_load_source_dispatches_on_path_kind(settings_tree: Path, settings_file: Path, tmp_path: Path) -> None:
    from_tree = load_source(ConfigBuilder(), settings_tree)
    from_file = load_source(ConfigBuilder(), settings_file)
    from_nothing = load_source(ConfigBuilder(), tmp_path / "missing")

    assert sorted(from_tree.values) == ["development", "production"]
    assert sorted(from_file.values) == ["development", "production"]
    assert from_nothing.values == {}
    assert from_nothing.cursor.environment is None
    assert load_source(ConfigBuilder(), None).values == {}


def test_tree_loader_ignores_hidden_entries(tmp_path: Path) -> None:
    root = tmp_path / "settings"
    write_yaml(root / "production" / "data.yaml", {"key": "value"})
    write_yaml(root / ".git" / "config.yaml", {"core": {"bare": False}})
    write_yaml(root / "production" / ".data.swp.yaml", {"key": "swap"})

    cfg = load_tree(ConfigBuilder(), root)

    assert list(cfg.values) == ["production"]
    assert list(cfg.values["production"]) == ["data"]
    cfg.environment("production")
    assert cfg.get("data.key") == "value"


def test_file_loader_skips_empty_environment_and_section_names(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    path = tmp_path / "settings.yaml"
    path.write_text(
        '"": {data: {key: x}}\n'
        "production:\n"
        '  "": {key: blank}\n'
        "  data: {key: value}\n",
        encoding="utf-8",
    )

    with caplog.at_level(logging.WARNING, logger="flexconf"):
        cfg = load_file(ConfigBuilder(), path)

    assert list(cfg.values) == ["production"]
    assert list(cfg.values["production"]) == ["data"]
    assert cfg.get("data.key") == "value"
    assert "Skipping" in caplog.text
