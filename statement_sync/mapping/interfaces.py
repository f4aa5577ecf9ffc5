"""Typed interfaces for mapping-layer transformations."""

from typing import Protocol, Sequence

from statement_sync.domain import Transaction

from .notion_properties import NotionPageCreateRequest


class ChannelLookupError(LookupError):
    """Raised when a transaction channel has no registered select option id."""


class MappingPort(Protocol):
    """Port definition for mapping transactions to external page payloads."""

    def mapping_build_page_request(self, transaction: Transaction, database_id: str) -> NotionPageCreateRequest:
        """Map one transaction into a page-creation request.

        Args:
            transaction: Normalized transaction.
            database_id: Target database identifier.

        Returns:
            NotionPageCreateRequest: Immutable page payload.

        Raises:
            ChannelLookupError: Raised when the transaction channel is not mapped.
        """

    def mapping_build_page_requests(
        self,
        transactions: Sequence[Transaction],
        database_id: str,
    ) -> list[NotionPageCreateRequest]:
        """Map transactions into page-creation requests preserving order.

        Args:
            transactions: Normalized transactions.
            database_id: Target database identifier.

        Returns:
            list[NotionPageCreateRequest]: Page payloads in input order.

        Raises:
            ChannelLookupError: Raised when one transaction channel is not mapped.
        """
