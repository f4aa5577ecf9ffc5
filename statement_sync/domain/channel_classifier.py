"""Narration-based payment channel classification."""

from __future__ import annotations

from typing import Callable, Final

from .models import TransactionChannel

NarrationPredicate = Callable[[str], bool]

DOMAIN_CHANNEL_RULES: Final[tuple[tuple[NarrationPredicate, TransactionChannel], ...]] = (
    (lambda narration: narration.startswith("UPI"), TransactionChannel.UPI),
    (lambda narration: narration.startswith("POS"), TransactionChannel.DEBIT_CARD),
)
DOMAIN_DEFAULT_CHANNEL: Final[TransactionChannel] = TransactionChannel.SAVINGS_BANK


def domain_classify_channel(
    narration: str,
    rules: tuple[tuple[NarrationPredicate, TransactionChannel], ...] = DOMAIN_CHANNEL_RULES,
    default: TransactionChannel = DOMAIN_DEFAULT_CHANNEL,
) -> TransactionChannel:
    """Return the channel of the first rule matching the narration.

    Args:
        narration: Free-text bank transaction description.
        rules: Ordered `(predicate, channel)` pairs evaluated top-down.
        default: Channel returned when no rule matches.

    Returns:
        TransactionChannel: Exactly one channel tag.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    for predicate, channel in rules:
        if predicate(narration):
            return channel
    return default
