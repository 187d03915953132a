# src/reporting/console_reporter.py
import logging
from decimal import Decimal
from typing import Optional

from src.domain.report import RewardReport, ReportParameters
from src.parsers.raw_models import RawLidoApiResponse

logger = logging.getLogger(__name__)


def _fmt_amount(val: Decimal, decimals: int) -> str:
    """Plain fixed-point rendering, never exponent notation."""
    if val.is_zero():
        return format(Decimal(0).scaleb(-decimals), "f")
    return format(val, "f")


def print_report_summary(
    report: RewardReport,
    parameters: ReportParameters,
    output_path: str,
    api_response: Optional[RawLidoApiResponse] = None
):
    """Prints the end-of-run summary. All amounts in the report asset's unit."""
    logger.info(f"Generating console summary for tax year {report.tax_year}...")
    print(f"\n--- {parameters.integration_name} Reward Report for Year {report.tax_year} ---")
    print(f"  Output file: {output_path}")
    print(f"  Events received: {report.total_events}")
    print(f"  Events in {report.tax_year}: {report.events_in_year}")
    print(f"  Events outside {report.tax_year}: {report.events_outside_year}")
    print(f"  Rows written: {len(report.rows)}")
    print(f"  Total {parameters.incoming_asset} rewards: {_fmt_amount(report.total_incoming_amount, parameters.token_decimals)}")

    if report.negative_amount_events:
        print(f"  Negative reward amounts (reported as-is): {len(report.negative_amount_events)}")

    if report.skipped_events:
        print(f"\n  WARNING: {len(report.skipped_events)} events were skipped because their reward amount could not be parsed:")
        for skipped in report.skipped_events:
            print(f"    #{skipped.source_index} blockTime={skipped.block_timestamp} id={skipped.event_id or '-'} raw={skipped.raw_value!r}")

    if api_response is not None and api_response.totals is not None:
        # API side totals cover all years, shown for cross-checking only
        print(f"\n  API totals (all years): {api_response.totals.eth_rewards or '-'} (raw), "
              f"{api_response.totals.currency_rewards or '-'} (currency)")
        if api_response.average_apr:
            print(f"  API average APR: {api_response.average_apr}")
