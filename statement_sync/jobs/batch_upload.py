"""Batched page upload with bounded in-flight requests."""

from __future__ import annotations

import asyncio
import logging
from typing import Sequence, TypeVar

from statement_sync.adapters import PageWriterPort
from statement_sync.mapping import NotionPageCreateRequest

from .interfaces import BatchUploadResult

logger = logging.getLogger(__name__)

DEFAULT_UPLOAD_BATCH_SIZE = 10

_BatchItem = TypeVar("_BatchItem")


def job_partition_batches(records: Sequence[_BatchItem], batch_size: int) -> list[list[_BatchItem]]:
    """Split records into contiguous batches of at most `batch_size` items.

    Args:
        records: Ordered records to split.
        batch_size: Maximum batch size.

    Returns:
        list[list[_BatchItem]]: Batches in input order; empty for empty input.

    Raises:
        ValueError: Raised when batch size is lower than one.
    """

    if batch_size < 1:
        raise ValueError("batch_size must be >= 1")

    return [list(records[start : start + batch_size]) for start in range(0, len(records), batch_size)]


async def job_upload_in_batches(
    records: Sequence[NotionPageCreateRequest],
    page_writer: PageWriterPort,
    batch_size: int = DEFAULT_UPLOAD_BATCH_SIZE,
) -> BatchUploadResult:
    """Create pages batch by batch, concurrently within each batch.

    A batch starts only after every request of the previous batch settled.
    When any request of a batch fails, the first failure in batch order is
    raised once the batch settled and the remaining batches are not started.

    Args:
        records: Page payloads in upload order.
        page_writer: Adapter issuing one create call per record.
        batch_size: Maximum number of in-flight requests.

    Returns:
        BatchUploadResult: Sizes of every completed batch.

    Raises:
        ValueError: Raised when batch size is lower than one.
        NotionWriteError: Raised when a create call in a batch fails.
    """

    batches = job_partition_batches(records, batch_size)
    completed_sizes: list[int] = []

    for batch_index, batch in enumerate(batches, start=1):
        outcomes = await asyncio.gather(
            *(page_writer.adapter_create_page(record) for record in batch),
            return_exceptions=True,
        )
        failures = [outcome for outcome in outcomes if isinstance(outcome, BaseException)]
        if failures:
            logger.error(
                "Batch %d/%d failed: %d of %d create requests rejected",
                batch_index,
                len(batches),
                len(failures),
                len(batch),
            )
            raise failures[0]

        completed_sizes.append(len(batch))
        logger.info("Uploaded batch %d/%d with %d records", batch_index, len(batches), len(batch))

    return BatchUploadResult(batch_sizes=tuple(completed_sizes))
