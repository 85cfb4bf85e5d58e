"""Tests for the server entry point."""

from pathlib import Path

import pytest

from rail_planner.main import main


async def test_missing_route_file_exits_with_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Given a route CSV that does not exist, when starting the server, then it exits with code 1."""
    monkeypatch.setenv("ROUTES_CSV", str(tmp_path / "missing.csv"))
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    monkeypatch.delenv("CONFIG_FILE", raising=False)

    with pytest.raises(SystemExit) as exc_info:
        await main()

    assert exc_info.value.code == 1


async def test_invalid_configuration_exits_with_error(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given an invalid sort key, when starting the server, then it exits with code 1."""
    monkeypatch.setenv("DEFAULT_SORT", "fastest")

    with pytest.raises(SystemExit) as exc_info:
        await main()

    assert exc_info.value.code == 1


async def test_missing_toml_file_exits_with_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Given CONFIG_FILE pointing nowhere, when starting the server, then it exits with code 1."""
    monkeypatch.setenv("CONFIG_FILE", str(tmp_path / "absent.toml"))

    with pytest.raises(SystemExit) as exc_info:
        await main()

    assert exc_info.value.code == 1
