from __future__ import annotations

import logging
from pathlib import Path

import pytest

from custsync.domain.conflicts import IdentityConflictError
from custsync.domain.customer_sync import SyncCompleted
from custsync.domain.matching import MatchResult
from custsync.domain.model import Customer, ExternalCustomer
from custsync.ui import cli as cli_module

DATA_DIR = Path(__file__).resolve().parents[1] / "data"


def test_sync_command_passes_parsed_customer(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: list[ExternalCustomer] = []

    def fake_sync(external: ExternalCustomer) -> SyncCompleted:
        captured.append(external)
        return SyncCompleted(created=True, customer=Customer(internal_id="abc"))

    monkeypatch.setattr(cli_module, "sync_external_customer", fake_sync)

    cli_module.main(["sync", str(DATA_DIR / "external_company.json")])

    assert [external.external_id for external in captured] == ["E1"]


def test_match_command_logs_outcome(
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    def fake_match(external: ExternalCustomer) -> MatchResult:
        _ = external
        return MatchResult(duplicates=[None])

    monkeypatch.setattr(cli_module, "match_external_customer", fake_match)

    with caplog.at_level(logging.INFO, logger=cli_module.__name__):
        cli_module.main(["match", str(DATA_DIR / "external_person.json")])

    assert "primary=none (new customer)" in caplog.text
    assert "duplicates=[new]" in caplog.text


def test_conflict_exits_with_invalid_status(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_sync(external: ExternalCustomer) -> SyncCompleted:
        raise IdentityConflictError(f"conflict for {external.external_id}")

    monkeypatch.setattr(cli_module, "sync_external_customer", fake_sync)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["sync", str(DATA_DIR / "external_company.json")])

    assert excinfo.value.code == cli_module.EXIT_INVALID


def test_unexpected_error_exits_with_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_sync(external: ExternalCustomer) -> SyncCompleted:
        _ = external
        raise RuntimeError("database unavailable")

    monkeypatch.setattr(cli_module, "sync_external_customer", fake_sync)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["sync", str(DATA_DIR / "external_company.json")])

    assert excinfo.value.code == cli_module.EXIT_FAILURE


def test_missing_payload_exits_with_invalid_status(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["sync", str(tmp_path / "missing.json")])

    assert excinfo.value.code == cli_module.EXIT_INVALID


def test_undecodable_payload_exits_with_invalid_status(tmp_path: Path) -> None:
    path = tmp_path / "latin1.json"
    path.write_bytes(b"\xff\xfe not utf-8")

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["match", str(path)])

    assert excinfo.value.code == cli_module.EXIT_INVALID


def test_command_is_required() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main([])

    assert excinfo.value.code == 2
