# src/engine/report_generator.py
import logging
from decimal import Decimal, Context, MAX_EMAX, MAX_PREC, MIN_EMIN
from typing import List, Sequence

from src.domain.enums import SkipReason
from src.domain.errors import InvalidRawAmountError
from src.domain.events import RewardEvent
from src.domain.report import ReportParameters, RewardReport, SkippedEvent
from src.processing.amount_converter import raw_amount_to_decimal, is_negative_raw_amount
from src.processing.year_filter import filter_date_for_year, timestamp_to_utc
from src.reporting.row_assembler import REPORT_HEADERS, assemble_row

logger = logging.getLogger(__name__)

# Additions only, so an unbounded precision keeps the running total exact
_TOTALS_CONTEXT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)


def _validate_timestamps(events: Sequence[RewardEvent]) -> None:
    """
    Fail-fast pass over the whole batch: a single bad timestamp aborts the run
    before any row is assembled.
    """
    for event in events:
        timestamp_to_utc(event.block_timestamp)


def generate_reward_report(events: Sequence[RewardEvent], parameters: ReportParameters) -> RewardReport:
    """
    Builds the tax report rows for parameters.tax_year.

    Events are scanned in input order; an event yields a row iff its UTC calendar
    year equals the tax year and its raw amount is a base-10 integer. Malformed
    amounts are logged, recorded in skipped_events and produce no row.
    Negative amounts are converted as-is and flagged.

    Raises InvalidTimestampError (fatal) if any event's timestamp is unusable.
    """
    logger.info(f"Generating reward report for tax year {parameters.tax_year} from {len(events)} events...")
    _validate_timestamps(events)

    report = RewardReport(tax_year=parameters.tax_year, header=REPORT_HEADERS, total_events=len(events))
    amounts: List[Decimal] = []

    for event in events:
        report_date = filter_date_for_year(event.block_timestamp, parameters.tax_year)
        if report_date is None:
            continue
        report.events_in_year += 1

        try:
            amount = raw_amount_to_decimal(event.reward_amount_raw, parameters.token_decimals)
        except InvalidRawAmountError as e:
            logger.warning(f"Skipping event {event.describe()}: could not parse reward amount {event.reward_amount_raw!r} ({e}). No row written for it.")
            report.skipped_events.append(SkippedEvent(
                source_index=event.source_index,
                block_timestamp=event.block_timestamp,
                raw_value=event.reward_amount_raw,
                reason=SkipReason.MALFORMED_REWARD_AMOUNT,
                event_id=event.event_id
            ))
            continue

        if is_negative_raw_amount(event.reward_amount_raw):
            logger.warning(f"Data integrity: event {event.describe()} has a negative reward amount {event.reward_amount_raw}. Reporting it as {amount:f}.")
            report.negative_amount_events.append(event.source_index)

        report.rows.append(assemble_row(report_date, format(amount, "f"), parameters))
        amounts.append(amount)

    total = Decimal('0')
    for amount in amounts:
        total = _TOTALS_CONTEXT.add(total, amount)
    report.total_incoming_amount = total

    logger.info(
        f"Report for {parameters.tax_year}: {len(report.rows)} rows, "
        f"{report.events_outside_year} events outside the tax year, "
        f"{len(report.skipped_events)} skipped, {len(report.negative_amount_events)} negative."
    )
    if report.skipped_events:
        logger.warning(f"{len(report.skipped_events)} reward events in {parameters.tax_year} were skipped because of malformed amounts. Review the log before filing.")
    return report
