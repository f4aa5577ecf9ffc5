"""Transaction to Notion page mapping service."""

from __future__ import annotations

from typing import Sequence

from statement_sync.domain import ChannelMap, Transaction, domain_amount_or_zero

from .interfaces import ChannelLookupError, MappingPort
from .notion_properties import (
    NotionDatabaseParent,
    NotionDateProperty,
    NotionDateValue,
    NotionNumberProperty,
    NotionPageCreateRequest,
    NotionSelectOption,
    NotionSelectProperty,
    NotionTitleProperty,
    TransactionPageProperties,
)


class NotionRecordMapper(MappingPort):
    """Mapper projecting transactions onto the transaction database schema."""

    def __init__(self, channel_map: ChannelMap | None = None):
        """Initialize mapper with the channel lookup table.

        Args:
            channel_map: Channel to select option id table; defaults to the built-in ids.

        Returns:
            None: Initializer does not return a value.

        Raises:
            RuntimeError: This initializer does not raise runtime errors.
        """

        self._channel_map = channel_map or ChannelMap()

    def mapping_build_page_request(self, transaction: Transaction, database_id: str) -> NotionPageCreateRequest:
        """Map one transaction into a page-creation request.

        Spent and Income carry zero for absent or unparsable amounts.

        Args:
            transaction: Normalized transaction with ISO date and channel.
            database_id: Target database identifier.

        Returns:
            NotionPageCreateRequest: Immutable page payload.

        Raises:
            ChannelLookupError: Raised when the transaction channel is not mapped.
        """

        try:
            select_id = self._channel_map.channel_select_id(transaction.mode)
        except KeyError as error:
            raise ChannelLookupError(f"no select option id configured for mode={transaction.mode.value}") from error

        return NotionPageCreateRequest(
            parent=NotionDatabaseParent(database_id=database_id),
            properties=TransactionPageProperties(
                Date=NotionDateProperty(date=NotionDateValue(start=transaction.date)),
                Spent=NotionNumberProperty(number=domain_amount_or_zero(transaction.debit_amount)),
                Income=NotionNumberProperty(number=domain_amount_or_zero(transaction.credit_amount)),
                Mode=NotionSelectProperty(select=NotionSelectOption(id=select_id)),
                Description=NotionTitleProperty.from_plain_text(transaction.narration),
            ),
        )

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

        return [
            self.mapping_build_page_request(transaction=transaction, database_id=database_id)
            for transaction in transactions
        ]
