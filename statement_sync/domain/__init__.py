"""Domain models and normalization helpers used across layer boundaries."""

from .channel_classifier import DOMAIN_CHANNEL_RULES, DOMAIN_DEFAULT_CHANNEL, domain_classify_channel
from .models import (
	DEFAULT_CHANNEL_SELECT_IDS,
	ChannelMap,
	RawRow,
	RawRowValue,
	Transaction,
	TransactionChannel,
)
from .normalization import (
	domain_amount_or_zero,
	domain_normalize_header,
	domain_parse_amount,
	domain_rewrite_statement_date,
)

__all__ = [
	"ChannelMap",
	"DEFAULT_CHANNEL_SELECT_IDS",
	"DOMAIN_CHANNEL_RULES",
	"DOMAIN_DEFAULT_CHANNEL",
	"RawRow",
	"RawRowValue",
	"Transaction",
	"TransactionChannel",
	"domain_amount_or_zero",
	"domain_classify_channel",
	"domain_normalize_header",
	"domain_parse_amount",
	"domain_rewrite_statement_date",
]
