# src/reporting/row_assembler.py
from typing import Tuple

from src.domain.report import ReportParameters, ReportRow

# Column order of the Blockpit manual import template, do not reorder
REPORT_HEADERS: Tuple[str, ...] = (
    "Date (UTC)",
    "Integration Name",
    "Label",
    "Outgoing Asset",
    "Outgoing Amount",
    "Incoming Asset",
    "Incoming Amount",
    "Fee Asset (optional)",
    "Fee Amount (optional)",
    "Comment (optional)",
    "Trx. ID (optional)",
)


def assemble_row(report_date: str, incoming_amount: str, parameters: ReportParameters) -> ReportRow:
    """Builds the CSV row for one qualifying reward. Pure, no I/O."""
    return ReportRow(
        date=report_date,
        integration_name=parameters.integration_name,
        label=parameters.label,
        incoming_asset=parameters.incoming_asset,
        incoming_amount=incoming_amount,
        comment=parameters.comment,
    )
