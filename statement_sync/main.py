"""Main module entrypoint for command-line statement imports.

This module loads startup configuration, configures logging and runs one
statement import. The process exits with code 1 when the import fails.
"""

import argparse
import asyncio
import logging
from typing import Sequence

from statement_sync.bootstrap import bootstrap_run_statement_import
from statement_sync.config import config_configure_logging, config_load_settings

logger = logging.getLogger(__name__)


def main_parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Optional argument list; defaults to `sys.argv[1:]`.

    Returns:
        argparse.Namespace: Parsed arguments.

    Raises:
        SystemExit: Raised by argparse on invalid arguments.
    """

    argument_parser = argparse.ArgumentParser(
        description="Import a bank statement CSV into a Notion transactions database"
    )
    argument_parser.add_argument(
        "--csv-path",
        dest="csv_path",
        type=str,
        help="Statement CSV path; defaults to STATEMENT_CSV_PATH or `transactions.csv`",
    )
    argument_parser.add_argument(
        "--batch-size",
        dest="batch_size",
        type=int,
        help="Maximum concurrent create requests per batch; defaults to UPLOAD_BATCH_SIZE or 10",
    )
    argument_parser.add_argument(
        "--dry-run",
        dest="dry_run",
        action="store_true",
        help="Map and log page payloads without creating pages",
    )
    argument_parser.add_argument(
        "--log-level",
        dest="log_level",
        type=str,
        help="Logging level override, e.g. DEBUG",
    )
    return argument_parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    """Run one statement import with validated startup configuration.

    Args:
        argv: Optional argument list; defaults to `sys.argv[1:]`.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        SystemExit: Raised with code 1 when the import fails.
    """

    parsed_arguments = main_parse_arguments(argv)
    settings = config_load_settings()
    config_configure_logging(parsed_arguments.log_level or settings.log_level)

    execution_result = asyncio.run(
        bootstrap_run_statement_import(
            settings=settings,
            statement_path=parsed_arguments.csv_path,
            batch_size=parsed_arguments.batch_size,
            dry_run=parsed_arguments.dry_run,
        )
    )
    if execution_result.status != "success":
        logger.error("Statement import finished with status=%s", execution_result.status)
        raise SystemExit(1)

    logger.info(
        "Statement import completed: %d transactions, %d pages created",
        execution_result.transaction_count,
        execution_result.uploaded_count,
    )


if __name__ == "__main__":
    main()
