# src/domain/errors.py
from typing import Any, Optional

from .enums import ReportStage


class RewardReportError(Exception):
    """Base class for every error that aborts a report run."""

    def __init__(self, message: str, stage: ReportStage):
        super().__init__(message)
        self.stage = stage

    def describe(self) -> str:
        return f"{self.stage.value}: {self}"


class RewardsApiError(RewardReportError):
    """Request construction, transport, HTTP status or payload decoding failed."""

    def __init__(self, message: str, stage: ReportStage = ReportStage.FETCH, status_code: Optional[int] = None):
        super().__init__(message, stage)
        self.status_code = status_code


class InvalidTimestampError(RewardReportError, ValueError):
    """An event's block time is missing or not a base-10 integer. Fatal for the whole batch."""

    def __init__(self, message: str, value: Any = None):
        super().__init__(message, ReportStage.FILTER)
        self.value = value


class ReportWriteError(RewardReportError):
    """The output CSV could not be created or written."""

    def __init__(self, message: str, stage: ReportStage = ReportStage.WRITE_ROW, path: Optional[str] = None):
        super().__init__(message, stage)
        self.path = path


class InvalidRawAmountError(ValueError):
    """
    A raw reward amount is not a base-10 integer.
    Recoverable: the report generator skips the event and carries on.
    """

    def __init__(self, message: str, raw_value: Any = None):
        super().__init__(message)
        self.raw_value = raw_value
        self.stage = ReportStage.CONVERT
