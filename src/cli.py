# src/cli.py
import argparse
import src.config as config # For default settings
from src.processing.year_filter import normalize_tax_year


def _tax_year(value: str) -> int:
    try:
        return normalize_tax_year(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def _positive_seconds(value: str) -> float:
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid timeout: {value!r}")
    if seconds <= 0:
        raise argparse.ArgumentTypeError(f"timeout must be positive, got {value}")
    return seconds


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Lido stETH staking reward tax report (Blockpit compatible CSV)")

    # Rewards API query
    parser.add_argument("--address", default="", help="Address of the wallet you wish to generate a Blockpit compatible CSV for.")
    parser.add_argument("--currency", default=config.DEFAULT_CURRENCY, help="Currency for the API's fiat figures (display only).")
    parser.add_argument("--archive-rate", dest="archive_rate", default=config.ARCHIVE_RATE, help="Forwarded verbatim to the rewards API as archiveRate.")
    parser.add_argument("--only-rewards", dest="only_rewards", default=config.ONLY_REWARDS, help="Forwarded verbatim to the rewards API as onlyRewards.")
    parser.add_argument("--lido-api-url", dest="lido_api_url", default=config.LIDO_API_URL, help="Base URL of the Lido rewards API.")
    parser.add_argument("--timeout", type=_positive_seconds, default=config.REQUEST_TIMEOUT_SECONDS, help="Request timeout in seconds.")

    # Report options
    parser.add_argument("--year", type=_tax_year, default=config.TAX_YEAR, help="The tax year you want to get a CSV for.")
    parser.add_argument("--out", type=str, default=config.OUTPUT_FILE_PATH, help="Output CSV file. Defaults to '<year>-report.csv'.")
    parser.add_argument("--integration", default=config.INTEGRATION_NAME, help="Value of the 'Integration Name' column.")
    parser.add_argument("--label", default=config.LABEL, help="Value of the 'Label' column.")
    parser.add_argument("--asset", default=config.ASSET_SYMBOL, help="Value of the 'Incoming Asset' column.")
    parser.add_argument("--comment", default=config.COMMENT, help="Value of the 'Comment (optional)' column.")
    return parser


def parse_arguments(argv=None):
    """Parses command line arguments for the application."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.address or not args.address.strip():
        parser.error("--address is required and cannot be empty")
    args.address = args.address.strip()

    if not args.out:
        args.out = config.OUTPUT_FILE_NAME_TEMPLATE.format(tax_year=args.year)

    return args
