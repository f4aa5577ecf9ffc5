"""Typed runtime settings with dotenv support."""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from statement_sync.domain import DEFAULT_CHANNEL_SELECT_IDS, ChannelMap, TransactionChannel


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for statement import configuration.

    Environment variable names map directly to field names in uppercase.
    Example: `notion_token` reads from `NOTION_TOKEN`.

    The Notion token and database id are not validated here; a missing value
    surfaces as an authentication or not-found failure on the first create call.

    Attributes:
        notion_token: Notion integration token.
        database_id: Target Notion database identifier.
        statement_csv_path: Location of the statement CSV export.
        upload_batch_size: Maximum number of concurrent create requests.
        notion_api_base_url: Base URL of the Notion API.
        notion_api_version: Value sent in the `Notion-Version` header.
        request_timeout_seconds: HTTP request timeout.
        log_level: Root logging level name.
        notion_mode_upi_id: Select option id of the UPI channel.
        notion_mode_debit_card_id: Select option id of the Debit-Card channel.
        notion_mode_savings_bank_id: Select option id of the default Savings-Bank channel.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    notion_token: str = Field(default="")
    database_id: str = Field(default="")
    statement_csv_path: str = Field(default="transactions.csv", min_length=1)
    upload_batch_size: int = Field(default=10, ge=1)
    notion_api_base_url: str = Field(default="https://api.notion.com/v1", min_length=1)
    notion_api_version: str = Field(default="2022-06-28", min_length=1)
    request_timeout_seconds: float = Field(default=30.0, gt=0)
    log_level: str = Field(default="INFO")
    notion_mode_upi_id: str = Field(default=DEFAULT_CHANNEL_SELECT_IDS[TransactionChannel.UPI], min_length=1)
    notion_mode_debit_card_id: str = Field(
        default=DEFAULT_CHANNEL_SELECT_IDS[TransactionChannel.DEBIT_CARD],
        min_length=1,
    )
    notion_mode_savings_bank_id: str = Field(
        default=DEFAULT_CHANNEL_SELECT_IDS[TransactionChannel.SAVINGS_BANK],
        min_length=1,
    )

    @field_validator("notion_token", "database_id")
    @classmethod
    def _strip_credentials(cls, value: str) -> str:
        return value.strip()

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError("log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return normalized_value

    def settings_channel_map(self) -> ChannelMap:
        """Build the channel lookup table from configured select option ids.

        Returns:
            ChannelMap: Channel to select option id table.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        return ChannelMap(
            select_ids={
                TransactionChannel.UPI: self.notion_mode_upi_id,
                TransactionChannel.DEBIT_CARD: self.notion_mode_debit_card_id,
                TransactionChannel.SAVINGS_BANK: self.notion_mode_savings_bank_id,
            }
        )


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings values are invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
