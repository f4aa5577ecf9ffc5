"""Application bootstrap wiring for dependency assembly."""

from __future__ import annotations

from pathlib import Path

from statement_sync.adapters import CsvStatementReader, NotionPagesAdapter
from statement_sync.config import AppSettings
from statement_sync.jobs import JobExecutionResult, StatementImportConfig, StatementImportOrchestrator
from statement_sync.mapping import NotionRecordMapper


def bootstrap_create_page_writer(settings: AppSettings) -> NotionPagesAdapter:
    """Build the Notion pages adapter from runtime settings.

    Args:
        settings: Validated runtime settings.

    Returns:
        NotionPagesAdapter: Adapter to be entered with `async with`.

    Raises:
        ValueError: Raised when adapter config values are invalid.
    """

    return NotionPagesAdapter(
        token=settings.notion_token,
        base_url=settings.notion_api_base_url,
        api_version=settings.notion_api_version,
        request_timeout_seconds=settings.request_timeout_seconds,
    )


async def bootstrap_run_statement_import(
    settings: AppSettings,
    statement_path: str | Path | None = None,
    batch_size: int | None = None,
    dry_run: bool = False,
) -> JobExecutionResult:
    """Wire the import workflow and execute it once.

    Args:
        settings: Validated runtime settings.
        statement_path: Optional statement path override.
        batch_size: Optional batch size override.
        dry_run: Map and log records without creating pages.

    Returns:
        JobExecutionResult: Final execution status payload.

    Raises:
        ValueError: Raised when config overrides are invalid.
    """

    resolved_statement_path = Path(statement_path or settings.statement_csv_path)
    resolved_batch_size = settings.upload_batch_size if batch_size is None else batch_size

    async with bootstrap_create_page_writer(settings) as page_writer:
        orchestrator = StatementImportOrchestrator(
            statement_reader=CsvStatementReader(),
            page_writer=page_writer,
            record_mapper=NotionRecordMapper(channel_map=settings.settings_channel_map()),
            config=StatementImportConfig(
                database_id=settings.database_id,
                statement_path=resolved_statement_path,
                batch_size=resolved_batch_size,
                dry_run=dry_run,
            ),
        )
        return await orchestrator.job_execute(job_name="statement_import")
