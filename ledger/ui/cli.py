"""
Command-line interface for the market dashboard.

Handles argument parsing, logging setup and launching the dashboard
application.
"""

import argparse
import logging
import sys
from dataclasses import replace

from ledger.core.config import DEFAULT_CONFIG, DashboardConfig

logger = logging.getLogger("cli")


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(description="The Iron Ledger - terminal market dashboard")
    parser.add_argument(
        "--seed", "-s", type=int, default=None, help="Random seed for reproducible quotes"
    )
    parser.add_argument(
        "--currency-symbol",
        type=str,
        default=DEFAULT_CONFIG.currency_symbol,
        help=f"Currency symbol shown after prices (default: {DEFAULT_CONFIG.currency_symbol})",
    )
    parser.add_argument(
        "--currency-name",
        type=str,
        default=DEFAULT_CONFIG.currency_name_plural,
        help=f"Plural currency name (default: {DEFAULT_CONFIG.currency_name_plural})",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=DEFAULT_CONFIG.log_file,
        help=f"Log file path (default: {DEFAULT_CONFIG.log_file})",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=DEFAULT_CONFIG.log_level,
        help=f"Log level (default: {DEFAULT_CONFIG.log_level})",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> DashboardConfig:
    """Override the default config with command-line values."""
    return replace(
        DEFAULT_CONFIG,
        seed=args.seed,
        currency_symbol=args.currency_symbol,
        currency_name_plural=args.currency_name,
        log_file=args.log_file,
        log_level=args.log_level,
    )


def run_cli(argv: list[str] | None = None) -> None:
    """Parse arguments and run the dashboard until the user quits."""
    from ledger.market import build_app_state
    from ledger.ui.dashboard import IronLedgerDashboard, configure_logging

    args = create_parser().parse_args(argv)
    config = config_from_args(args)
    configure_logging(config.log_file, config.log_level)

    app_state = build_app_state(config)
    app = IronLedgerDashboard(app_state, config)
    app.run()

    # Textual has already restored the terminal; a draw or input failure is fatal
    if app.return_code:
        logger.error(f"Dashboard terminated abnormally (code {app.return_code})")
        sys.exit(app.return_code)
    logger.info("Dashboard closed")


if __name__ == "__main__":
    run_cli()
