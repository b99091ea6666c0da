import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'flexconf' and tests/ as a root for 'helpers'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from flexconf.core.stdlib_logging import reset_logging_for_tests
from helpers.yaml_files import write_yaml


@pytest.fixture(autouse=True)
def _isolate_flexconf_env(monkeypatch: pytest.MonkeyPatch):
    """Keep FLEXCONF_* variables from the outer shell out of tests."""
    for name in ("FLEXCONF_FROM_FILE", "FLEXCONF_ENVIRONMENT", "FLEXCONF_ENVIRON_KEY"):
        monkeypatch.delenv(name, raising=False)
    yield
    reset_logging_for_tests()


@pytest.fixture
def settings_tree(tmp_path: Path) -> Path:
    """settings/<environment>/<section>.yaml with production and development."""
    root = tmp_path / "settings"
    write_yaml(root / "production" / "data.yaml", {"key": "value", "nested": {"sub": 1}})
    write_yaml(root / "production" / "cache.yaml", {"ttl": 60})
    write_yaml(root / "development" / "data.yaml", {"key": "dev_value"})
    (root / "README.txt").write_text("not an environment\n", encoding="utf-8")
    (root / "development" / "notes.txt").write_text("ignored\n", encoding="utf-8")
    return root


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    """Single-file layout with two environments."""
    return write_yaml(
        tmp_path / "settings.yaml",
        {
            "production": {
                "data": {"key": "value"},
                "cache": {"ttl": 60},
            },
            "development": {
                "data": {"key": "dev_value"},
            },
        },
    )
