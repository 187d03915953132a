# src/reporting/csv_writer.py
import csv
import logging
import os

from src.domain.enums import ReportStage
from src.domain.errors import ReportWriteError
from src.domain.report import RewardReport

logger = logging.getLogger(__name__)


def default_output_path(tax_year: int, template: str = "{tax_year}-report.csv") -> str:
    """'<year>-report.csv' relative to the current working directory."""
    return template.format(tax_year=tax_year)


def write_report_csv(output_path: str, report: RewardReport, encoding: str = 'utf-8') -> int:
    """
    Writes the header and all report rows, in generation order, to output_path.
    The header is always written, also when there are no rows.
    Returns the number of data rows written.
    """
    logger.info(f"Writing data to {output_path}")
    output_dir = os.path.dirname(output_path)
    try:
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)
        csvfile = open(output_path, mode='w', encoding=encoding, newline='')
    except OSError as e:
        raise ReportWriteError(f"Could not open {output_path}: {e}", stage=ReportStage.CREATE_FILE, path=output_path) from e

    rows_written = 0
    with csvfile:
        writer = csv.writer(csvfile, lineterminator='\n')
        try:
            writer.writerow(report.header)
        except (OSError, csv.Error) as e:
            raise ReportWriteError(f"Could not write CSV header to {output_path}: {e}", stage=ReportStage.WRITE_ROW, path=output_path) from e

        for row in report.rows:
            fields = row.to_csv_fields()
            if len(fields) != len(report.header):
                raise ReportWriteError(
                    f"Row for {row.date} has {len(fields)} fields, header has {len(report.header)}",
                    stage=ReportStage.WRITE_ROW, path=output_path
                )
            try:
                writer.writerow(fields)
            except (OSError, csv.Error) as e:
                raise ReportWriteError(f"Could not write row for {row.date} to {output_path}: {e}", stage=ReportStage.WRITE_ROW, path=output_path) from e
            rows_written += 1

    logger.info(f"Wrote {rows_written} rows to {output_path}.")
    return rows_written
