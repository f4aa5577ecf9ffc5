"""Typed domain models shared across runtime layers.

This module provides the immutable statement row contracts passed from the
CSV reader to the record mapper, plus the channel lookup table used when
projecting transactions into Notion select options.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union

RawRowValue = Union[str, float]
RawRow = Mapping[str, RawRowValue]


class TransactionChannel(str, Enum):
    """Payment channel tag derived from transaction narration."""

    UPI = "UPI"
    DEBIT_CARD = "Debit-Card"
    SAVINGS_BANK = "Savings-Bank-default"


DEFAULT_CHANNEL_SELECT_IDS: Mapping[TransactionChannel, str] = MappingProxyType(
    {
        TransactionChannel.UPI: "8efd9db0-b592-4bad-8555-e1bd82cc5096",
        TransactionChannel.DEBIT_CARD: "3c1f6a52-0d4e-4f2a-9b7e-61a9e0c4d8b3",
        TransactionChannel.SAVINGS_BANK: "a7d2e914-5b38-4c6f-8e01-2f9b4c7a6d15",
    }
)


@dataclass(frozen=True)
class ChannelMap:
    """Read-only lookup from channel tag to Notion select option id.

    Attributes:
        select_ids: Mapping of channel tag to opaque select option id.
    """

    select_ids: Mapping[TransactionChannel, str] = field(default_factory=lambda: DEFAULT_CHANNEL_SELECT_IDS)

    def __post_init__(self) -> None:
        object.__setattr__(self, "select_ids", MappingProxyType(dict(self.select_ids)))

    def channel_select_id(self, channel: TransactionChannel) -> str:
        """Return the select option id registered for one channel.

        Args:
            channel: Channel tag to resolve.

        Returns:
            str: Opaque Notion select option id.

        Raises:
            KeyError: Raised when the channel has no registered id.
        """

        return self.select_ids[channel]


@dataclass(frozen=True)
class Transaction:
    """One normalized statement row with its derived payment channel.

    Attributes:
        date: Transaction date, ISO 8601 when the source matched `DD/MM/YY`.
        narration: Free-text bank description.
        value_date: Value date text as exported by the bank.
        debit_amount: Debited amount; 0 when absent, NaN when unparsable.
        credit_amount: Credited amount; 0 when absent, NaN when unparsable.
        cheque_ref_number: Cheque or reference number text.
        closing_balance: Closing balance text as exported by the bank.
        mode: Payment channel derived from narration.
        source_row: Normalized source row the transaction was built from.
    """

    date: str
    narration: str
    value_date: str
    debit_amount: float
    credit_amount: float
    cheque_ref_number: str
    closing_balance: str
    mode: TransactionChannel
    source_row: RawRow
