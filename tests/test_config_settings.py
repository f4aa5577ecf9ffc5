"""Regression tests for runtime settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from statement_sync.config import SettingsLoadError, config_load_settings
from statement_sync.domain import DEFAULT_CHANNEL_SELECT_IDS, TransactionChannel

_SETTINGS_ENV_NAMES = (
    "NOTION_TOKEN",
    "DATABASE_ID",
    "STATEMENT_CSV_PATH",
    "UPLOAD_BATCH_SIZE",
    "NOTION_API_BASE_URL",
    "NOTION_API_VERSION",
    "REQUEST_TIMEOUT_SECONDS",
    "LOG_LEVEL",
    "NOTION_MODE_UPI_ID",
    "NOTION_MODE_DEBIT_CARD_ID",
    "NOTION_MODE_SAVINGS_BANK_ID",
)


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for env_name in _SETTINGS_ENV_NAMES:
        monkeypatch.delenv(env_name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_config_load_settings_applies_defaults_without_credentials() -> None:
    """Load defaults without requiring credentials upfront.

    Returns:
        None: Assertions validate default settings.

    Raises:
        AssertionError: Raised when defaults differ or credentials are required.
    """

    settings = config_load_settings()

    assert settings.notion_token == ""
    assert settings.database_id == ""
    assert settings.statement_csv_path == "transactions.csv"
    assert settings.upload_batch_size == 10
    assert settings.log_level == "INFO"
    assert dict(settings.settings_channel_map().select_ids) == dict(DEFAULT_CHANNEL_SELECT_IDS)


def test_config_load_settings_reads_environment_and_dotenv(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Read values from environment variables and the working-directory `.env`.

    Args:
        monkeypatch: Pytest monkeypatch fixture.
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate settings sources.

    Raises:
        AssertionError: Raised when configured values are ignored.
    """

    (tmp_path / ".env").write_text("DATABASE_ID=db-from-dotenv\nUPLOAD_BATCH_SIZE=4\n", encoding="utf-8")
    monkeypatch.setenv("NOTION_TOKEN", " secret ")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("NOTION_MODE_UPI_ID", "custom-upi")

    settings = config_load_settings()

    assert settings.notion_token == "secret"
    assert settings.database_id == "db-from-dotenv"
    assert settings.upload_batch_size == 4
    assert settings.log_level == "DEBUG"
    assert settings.settings_channel_map().channel_select_id(TransactionChannel.UPI) == "custom-upi"


def test_config_load_settings_wraps_validation_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    """Raise project-native settings errors for invalid values.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None: Assertions validate validation error wrapping.

    Raises:
        AssertionError: Raised when invalid settings load successfully.
    """

    monkeypatch.setenv("UPLOAD_BATCH_SIZE", "0")

    with pytest.raises(SettingsLoadError, match="upload_batch_size"):
        config_load_settings()


def test_config_load_settings_rejects_unknown_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Reject log level names the logging module does not define.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None: Assertions validate log level validation.

    Raises:
        AssertionError: Raised when unknown log levels are accepted.
    """

    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(SettingsLoadError, match="log_level"):
        config_load_settings()
