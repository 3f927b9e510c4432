from __future__ import annotations

import pytest

from custsync.config import ConfigurationError, env_flag


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1", True), ("yes", True), ("On", True), ("0", False), ("false", False), ("", False)],
)
def test_env_flag_parses_booleans(
    monkeypatch: pytest.MonkeyPatch,
    raw: str,
    expected: bool,  # noqa: FBT001
) -> None:
    monkeypatch.setenv("FLAG_VAR", raw)

    assert env_flag("FLAG_VAR") is expected


def test_env_flag_uses_default_when_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FLAG_VAR", raising=False)

    assert env_flag("FLAG_VAR", default=True) is True


def test_env_flag_rejects_garbage(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FLAG_VAR", "maybe")

    with pytest.raises(ConfigurationError, match="FLAG_VAR"):
        env_flag("FLAG_VAR")
