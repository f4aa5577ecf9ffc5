"""Typed interfaces for adapter-layer responsibilities."""

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from statement_sync.domain import Transaction
from statement_sync.mapping import NotionPageCreateRequest


@dataclass(frozen=True)
class PageCreateResult:
    """Result contract for one page-creation call.

    Attributes:
        page_id: Identifier of the created page as reported upstream.
    """

    page_id: str


class StatementReaderPort(Protocol):
    """Port definition for loading transactions from a statement export."""

    def adapter_read_transactions(self, path: str | Path) -> list[Transaction]:
        """Read and normalize every transaction from one statement file.

        Args:
            path: Statement file location.

        Returns:
            list[Transaction]: Transactions in file order, empty on parse failure.

        Raises:
            RuntimeError: Implementations recover parse failures locally.
        """


class PageWriterPort(Protocol):
    """Port definition for creating pages in the external database."""

    async def adapter_create_page(self, request: NotionPageCreateRequest) -> PageCreateResult:
        """Create one page from a mapped record.

        Args:
            request: Immutable page-creation payload.

        Returns:
            PageCreateResult: Identifier of the created page.

        Raises:
            NotionWriteError: Raised when the upstream call fails.
        """
