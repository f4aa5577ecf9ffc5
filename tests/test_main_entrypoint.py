"""Regression tests for command-line entrypoint exit behavior."""

from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest

import statement_sync.bootstrap as bootstrap_module
import statement_sync.main as main_module
from statement_sync.adapters import NotionPagesAdapter

STATEMENT_HEADER = "Date,Narration,Value Dat,Debit Amount,Credit Amount,Chq/Ref Number,Closing Balance\n"


@pytest.fixture(autouse=True)
def _isolated_runtime(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for env_name in ("NOTION_TOKEN", "DATABASE_ID", "STATEMENT_CSV_PATH", "UPLOAD_BATCH_SIZE", "LOG_LEVEL"):
        monkeypatch.delenv(env_name, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(main_module, "config_configure_logging", lambda level: None)


def _install_mock_page_writer(monkeypatch: pytest.MonkeyPatch, handler) -> None:
    def _create_page_writer(settings) -> NotionPagesAdapter:
        return NotionPagesAdapter(
            token=settings.notion_token,
            base_url=settings.notion_api_base_url,
            transport=httpx.MockTransport(handler),
        )

    monkeypatch.setattr(bootstrap_module, "bootstrap_create_page_writer", _create_page_writer)


def test_main_missing_statement_exits_cleanly(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Complete without error and without requests when the statement is missing.

    Args:
        monkeypatch: Pytest monkeypatch fixture.
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate exit-code-0 behavior.

    Raises:
        AssertionError: Raised when the run fails or issues requests.
    """

    captured_requests: list[httpx.Request] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        captured_requests.append(request)
        return httpx.Response(200, json={"id": "page"})

    _install_mock_page_writer(monkeypatch, _handler)

    main_module.main(["--csv-path", str(tmp_path / "missing.csv")])

    assert captured_requests == []


def test_main_uploads_statement_from_default_path(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Read `transactions.csv` from the working directory and create pages.

    Args:
        monkeypatch: Pytest monkeypatch fixture.
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate the default-path happy path.

    Raises:
        AssertionError: Raised when pages are not created.
    """

    (tmp_path / "transactions.csv").write_text(
        STATEMENT_HEADER + "07/11/22,UPI-1,07/11/22,10,,1,90\n08/11/22,POS 2,08/11/22,5,,2,85\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("NOTION_TOKEN", "token")
    monkeypatch.setenv("DATABASE_ID", "database-1")
    captured_bodies: list[dict] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        captured_bodies.append(json.loads(request.content))
        return httpx.Response(200, json={"id": f"page-{len(captured_bodies)}"})

    _install_mock_page_writer(monkeypatch, _handler)

    main_module.main([])

    assert len(captured_bodies) == 2
    assert {body["parent"]["database_id"] for body in captured_bodies} == {"database-1"}


def test_main_failed_batch_exits_with_code_one(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Exit with code 1 and skip later batches when one create request fails.

    Args:
        monkeypatch: Pytest monkeypatch fixture.
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate exit-code-1 behavior.

    Raises:
        AssertionError: Raised when the failure does not abort the run.
    """

    rows = "".join(f"07/11/22,NEFT row {index},07/11/22,{index},,1,1\n" for index in range(8))
    statement_path = tmp_path / "statement.csv"
    statement_path.write_text(STATEMENT_HEADER + rows, encoding="utf-8")
    captured_bodies: list[dict] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        captured_bodies.append(body)
        if body["properties"]["Description"]["title"][0]["text"]["content"] == "NEFT row 3":
            return httpx.Response(
                400,
                json={"object": "error", "status": 400, "code": "validation_error", "message": "bad page"},
            )
        return httpx.Response(200, json={"id": "page"})

    _install_mock_page_writer(monkeypatch, _handler)

    with pytest.raises(SystemExit) as exit_info:
        main_module.main(["--csv-path", str(statement_path), "--batch-size", "5"])

    assert exit_info.value.code == 1
    assert len(captured_bodies) == 5


def test_main_dry_run_issues_no_requests(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Map the statement without creating pages when `--dry-run` is passed.

    Args:
        monkeypatch: Pytest monkeypatch fixture.
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate dry-run wiring.

    Raises:
        AssertionError: Raised when dry run issues requests.
    """

    (tmp_path / "transactions.csv").write_text(STATEMENT_HEADER + "07/11/22,UPI-1,07/11/22,10,,1,90\n", encoding="utf-8")
    captured_requests: list[httpx.Request] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        captured_requests.append(request)
        return httpx.Response(200, json={"id": "page"})

    _install_mock_page_writer(monkeypatch, _handler)

    main_module.main(["--dry-run"])

    assert captured_requests == []
