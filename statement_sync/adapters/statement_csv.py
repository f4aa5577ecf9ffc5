"""CSV statement reader for the bank's fixed export layout."""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Final, Iterator

from statement_sync.domain import (
    RawRow,
    RawRowValue,
    Transaction,
    TransactionChannel,
    domain_classify_channel,
    domain_normalize_header,
    domain_parse_amount,
    domain_rewrite_statement_date,
)

from .errors import StatementParseError
from .interfaces import StatementReaderPort

logger = logging.getLogger(__name__)


class CsvStatementReader(StatementReaderPort):
    """Reader turning a comma-delimited bank statement into transactions."""

    _DATE_COLUMN: Final[str] = "Date"
    _NARRATION_COLUMN: Final[str] = "Narration"
    _DEBIT_COLUMN: Final[str] = "DebitAmount"
    _CREDIT_COLUMN: Final[str] = "CreditAmount"
    _AMOUNT_COLUMNS: Final[frozenset[str]] = frozenset({_DEBIT_COLUMN, _CREDIT_COLUMN})
    _VALUE_DATE_COLUMNS: Final[tuple[str, ...]] = ("ValueDate", "ValueDat")
    _CHEQUE_REF_COLUMNS: Final[tuple[str, ...]] = ("ChequeRefNumber", "ChqRefNumber", "Chq.Ref.No.")
    _CLOSING_BALANCE_COLUMN: Final[str] = "ClosingBalance"

    def __init__(
        self,
        classify_channel: Callable[[str], TransactionChannel] = domain_classify_channel,
        encoding: str = "utf-8-sig",
    ):
        """Initialize statement reader.

        Args:
            classify_channel: Narration classifier applied to every row.
            encoding: Text encoding of the statement file.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when encoding is blank.
        """

        if not encoding.strip():
            raise ValueError("encoding must not be blank")

        self._classify_channel = classify_channel
        self._encoding = encoding

    def adapter_read_transactions(self, path: str | Path) -> list[Transaction]:
        """Read every statement row and build classified transactions.

        A corrupt, unreadable or missing file is logged and yields an empty
        list so the import continues with zero transactions.

        Args:
            path: Statement CSV location.

        Returns:
            list[Transaction]: Transactions in file order.

        Raises:
            RuntimeError: This implementation does not raise runtime errors.
        """

        statement_path = Path(path)
        try:
            raw_rows = list(self._adapter_iter_raw_rows(statement_path))
        except StatementParseError as error:
            logger.error("Could not parse statement %s: %s", statement_path, error)
            return []

        return [self._adapter_build_transaction(raw_row) for raw_row in raw_rows]

    def _adapter_iter_raw_rows(self, path: Path) -> Iterator[RawRow]:
        """Yield typed rows from the statement, skipping blank lines.

        Args:
            path: Statement CSV location.

        Returns:
            Iterator[RawRow]: Immutable normalized rows.

        Raises:
            StatementParseError: Raised on malformed CSV or stream I/O failure.
        """

        try:
            with path.open(newline="", encoding=self._encoding) as csv_file:
                header: list[str] | None = None
                for cells in csv.reader(csv_file, strict=True):
                    if not any(cell.strip() for cell in cells):
                        continue
                    if header is None:
                        header = [domain_normalize_header(cell) for cell in cells]
                        logger.info("Detected statement columns: %s", ", ".join(header))
                        continue
                    yield self._adapter_cast_row(header=header, cells=cells)
        except FileNotFoundError as error:
            raise StatementParseError(f"statement file not found: {path}") from error
        except (OSError, UnicodeDecodeError, csv.Error) as error:
            raise StatementParseError(f"statement read failed: {error}") from error

    def _adapter_cast_row(self, header: list[str], cells: list[str]) -> RawRow:
        """Cast one row's cells according to their normalized column names.

        Args:
            header: Normalized column names.
            cells: Raw cell values of one data row.

        Returns:
            RawRow: Read-only mapping of column name to typed value.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        row: dict[str, RawRowValue] = {}
        for column, cell in zip(header, cells):
            if column in self._AMOUNT_COLUMNS:
                row[column] = domain_parse_amount(cell)
            elif column == self._DATE_COLUMN:
                row[column] = domain_rewrite_statement_date(cell.strip())
            else:
                row[column] = cell.strip()
        return MappingProxyType(row)

    def _adapter_build_transaction(self, raw_row: RawRow) -> Transaction:
        """Build one transaction with its derived channel from a typed row.

        Args:
            raw_row: Normalized statement row.

        Returns:
            Transaction: Immutable transaction record.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        narration = self._adapter_text(raw_row, self._NARRATION_COLUMN)
        return Transaction(
            date=self._adapter_text(raw_row, self._DATE_COLUMN),
            narration=narration,
            value_date=self._adapter_text(raw_row, *self._VALUE_DATE_COLUMNS),
            debit_amount=float(raw_row.get(self._DEBIT_COLUMN, 0.0)),
            credit_amount=float(raw_row.get(self._CREDIT_COLUMN, 0.0)),
            cheque_ref_number=self._adapter_text(raw_row, *self._CHEQUE_REF_COLUMNS),
            closing_balance=self._adapter_text(raw_row, self._CLOSING_BALANCE_COLUMN),
            mode=self._classify_channel(narration),
            source_row=raw_row,
        )

    @staticmethod
    def _adapter_text(raw_row: RawRow, *columns: str) -> str:
        for column in columns:
            if column in raw_row:
                return str(raw_row[column])
        return ""
