from __future__ import annotations

from flexconf.core.exceptions import (
    ConfigFileError,
    FlexConfError,
    IllegalStateError,
    InvalidArgumentError,
)


def test_error_hierarchy_matches_builtin_categories() -> None:
    assert issubclass(InvalidArgumentError, (FlexConfError, TypeError))
    assert issubclass(IllegalStateError, RuntimeError)
    assert issubclass(ConfigFileError, ValueError)


def test_to_json_error_includes_context_copy() -> None:
    ctx = {"path": "settings.yaml"}
    err = ConfigFileError("bad layout", context=ctx)
    ctx["path"] = "other"

    assert err.to_json_error() == {
        "message": "bad layout",
        "code": "ConfigFileError",
        "context": {"path": "settings.yaml"},
    }
    assert IllegalStateError("x").context == {}
