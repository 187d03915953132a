# src/domain/report.py
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional, Tuple

import src.config as config

from .enums import SkipReason

REPORT_COLUMN_COUNT = 11


@dataclass(frozen=True)
class ReportParameters:
    """Constant report settings for one run. Passed explicitly into the generator."""
    tax_year: int
    integration_name: str = config.INTEGRATION_NAME
    label: str = config.LABEL
    incoming_asset: str = config.ASSET_SYMBOL
    comment: str = config.COMMENT
    token_decimals: int = config.TOKEN_DECIMALS
    output_path: Optional[str] = None

    def __post_init__(self):
        if isinstance(self.tax_year, bool) or not isinstance(self.tax_year, int):
            raise TypeError(f"ReportParameters.tax_year must be an int, got {type(self.tax_year)}")
        if not 1 <= self.tax_year <= 9999:
            raise ValueError(f"ReportParameters.tax_year must be a 4-digit year, got {self.tax_year}")
        if self.token_decimals < 0:
            raise ValueError(f"ReportParameters.token_decimals cannot be negative: {self.token_decimals}")


@dataclass(frozen=True)
class ReportRow:
    """One line of the tax CSV. Fields that do not apply to staking income stay empty."""
    date: str
    integration_name: str
    label: str
    incoming_asset: str
    incoming_amount: str
    comment: str
    outgoing_asset: str = ""
    outgoing_amount: str = ""
    fee_asset: str = ""
    fee_amount: str = ""
    transaction_id: str = ""

    def to_csv_fields(self) -> List[str]:
        """Fields in header order, always REPORT_COLUMN_COUNT entries."""
        return [
            self.date,
            self.integration_name,
            self.label,
            self.outgoing_asset,
            self.outgoing_amount,
            self.incoming_asset,
            self.incoming_amount,
            self.fee_asset,
            self.fee_amount,
            self.comment,
            self.transaction_id,
        ]


@dataclass(frozen=True)
class SkippedEvent:
    source_index: int
    block_timestamp: int
    raw_value: str
    reason: SkipReason
    event_id: Optional[str] = None


@dataclass
class RewardReport:
    tax_year: int
    header: Tuple[str, ...]
    rows: List[ReportRow] = field(default_factory=list)
    total_events: int = 0
    events_in_year: int = 0
    skipped_events: List[SkippedEvent] = field(default_factory=list)
    negative_amount_events: List[int] = field(default_factory=list) # source_index of each event
    total_incoming_amount: Decimal = Decimal('0')

    @property
    def events_outside_year(self) -> int:
        return self.total_events - self.events_in_year
