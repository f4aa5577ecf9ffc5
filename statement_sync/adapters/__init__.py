"""Adapter layer package for statement input and Notion output boundaries."""

from .errors import (
	NotionConnectionError,
	NotionResponseError,
	NotionTimeoutError,
	NotionWriteError,
	StatementParseError,
)
from .interfaces import PageCreateResult, PageWriterPort, StatementReaderPort
from .notion_pages import NotionPagesAdapter
from .statement_csv import CsvStatementReader

__all__ = [
	"CsvStatementReader",
	"NotionConnectionError",
	"NotionPagesAdapter",
	"NotionResponseError",
	"NotionTimeoutError",
	"NotionWriteError",
	"PageCreateResult",
	"PageWriterPort",
	"StatementParseError",
	"StatementReaderPort",
]
