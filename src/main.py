# src/main.py
import logging
import sys

# Configuration and CLI
import src.config as config
from src.cli import parse_arguments

# Core pipeline runner
from src.pipeline_runner import run_report_pipeline, ReportOutput
from src.domain.errors import RewardReportError
from src.domain.report import ReportParameters

# Reporting
from src.reporting.console_reporter import print_report_summary

logger = logging.getLogger(__name__)


def setup_logging():
    """Configures root logging for command line runs."""
    logging.basicConfig(level=logging.INFO, format=config.LOG_FORMAT)


def main_application(argv=None) -> int:
    """
    Main application entry point.
    Parses arguments, runs the report pipeline and prints a summary.
    Returns the process exit status.
    """
    args = parse_arguments(argv)
    setup_logging()

    logger.info("Starting Lido reward report...")

    parameters = ReportParameters(
        tax_year=args.year,
        integration_name=args.integration,
        label=args.label,
        incoming_asset=args.asset,
        comment=args.comment,
        token_decimals=config.TOKEN_DECIMALS,
        output_path=args.out
    )

    try:
        output: ReportOutput = run_report_pipeline(
            address=args.address,
            parameters=parameters,
            currency=args.currency,
            archive_rate=args.archive_rate,
            only_rewards=args.only_rewards,
            api_url=args.lido_api_url,
            request_timeout_seconds=args.timeout
        )
    except RewardReportError as e:
        logger.critical(f"Report run failed while {e.describe()}")
        return 1
    except Exception as e:
        logger.critical(f"Report run failed with unexpected error: {e}")
        logger.debug("Traceback of the unexpected error:", exc_info=True)
        return 1

    print_report_summary(output.report, parameters, output.output_path, output.api_response)
    logger.info(f"Done. Report written to {output.output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main_application())
