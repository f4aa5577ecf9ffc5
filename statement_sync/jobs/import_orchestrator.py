"""Job-layer statement import orchestrator."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from statement_sync.adapters import NotionWriteError, PageWriterPort, StatementReaderPort
from statement_sync.mapping import ChannelLookupError, MappingPort

from .batch_upload import DEFAULT_UPLOAD_BATCH_SIZE, job_upload_in_batches
from .interfaces import JobExecutionResult, JobOrchestratorPort

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatementImportConfig:
    """Configuration values for statement import execution.

    Attributes:
        database_id: Target Notion database identifier.
        statement_path: Location of the statement CSV export.
        batch_size: Maximum number of concurrent create requests.
        dry_run: Map and log records without creating pages.
    """

    database_id: str
    statement_path: Path
    batch_size: int = DEFAULT_UPLOAD_BATCH_SIZE
    dry_run: bool = False


class StatementImportOrchestrator(JobOrchestratorPort):
    """Concrete job orchestrator for the read, map and upload workflow."""

    _IMPORT_JOB_NAME = "statement_import"

    def __init__(
        self,
        statement_reader: StatementReaderPort,
        page_writer: PageWriterPort,
        record_mapper: MappingPort,
        config: StatementImportConfig,
    ):
        """Initialize import orchestrator dependencies.

        Args:
            statement_reader: Adapter loading transactions from the statement.
            page_writer: Adapter creating pages upstream.
            record_mapper: Mapper building page payloads.
            config: Import execution configuration.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when dependencies or config values are invalid.
        """

        if statement_reader is None:
            raise ValueError("statement_reader must not be None")
        if page_writer is None:
            raise ValueError("page_writer must not be None")
        if record_mapper is None:
            raise ValueError("record_mapper must not be None")
        if config.batch_size < 1:
            raise ValueError("config.batch_size must be >= 1")

        self._statement_reader = statement_reader
        self._page_writer = page_writer
        self._record_mapper = record_mapper
        self._config = config

    def job_supported_names(self) -> tuple[str, ...]:
        """Return supported job names.

        Returns:
            tuple[str, ...]: Supported job names.

        Raises:
            RuntimeError: This implementation does not raise runtime errors.
        """

        return (self._IMPORT_JOB_NAME,)

    async def job_execute(self, job_name: str = _IMPORT_JOB_NAME) -> JobExecutionResult:
        """Read the statement, map every transaction and upload pages in batches.

        Remote write failures and channel lookup defects are logged and
        reported as a failed run; pages created before the failing batch stay
        in place.

        Args:
            job_name: Name of job to execute.

        Returns:
            JobExecutionResult: Final execution status payload.

        Raises:
            ValueError: Raised when job name is unsupported.
        """

        normalized_job_name = job_name.strip()
        if normalized_job_name != self._IMPORT_JOB_NAME:
            raise ValueError(f"unsupported job_name={normalized_job_name}")

        transactions = self._statement_reader.adapter_read_transactions(self._config.statement_path)
        logger.info("Read %d transactions from %s", len(transactions), self._config.statement_path)

        try:
            page_requests = self._record_mapper.mapping_build_page_requests(
                transactions=transactions,
                database_id=self._config.database_id,
            )
            if self._config.dry_run:
                for page_request in page_requests:
                    logger.info("Dry run page payload: %s", json.dumps(page_request.request_payload()))
                return JobExecutionResult(
                    job_name=normalized_job_name,
                    status="success",
                    transaction_count=len(transactions),
                )

            upload_result = await job_upload_in_batches(
                records=page_requests,
                page_writer=self._page_writer,
                batch_size=self._config.batch_size,
            )
        except (NotionWriteError, ChannelLookupError) as error:
            logger.exception("Statement import failed: %s", error)
            return JobExecutionResult(
                job_name=normalized_job_name,
                status="failed",
                transaction_count=len(transactions),
            )

        logger.info(
            "Imported %d transactions in %d batches",
            upload_result.record_count,
            upload_result.batch_count,
        )
        return JobExecutionResult(
            job_name=normalized_job_name,
            status="success",
            transaction_count=len(transactions),
            uploaded_count=upload_result.record_count,
            batch_count=upload_result.batch_count,
        )
