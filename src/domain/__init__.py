# This file can be empty or used to make imports easier.

# Example (optional):
# from .events import RewardEvent
# from .report import ReportParameters, ReportRow, RewardReport, SkippedEvent
# from .enums import ReportStage
# from .errors import RewardReportError, RewardsApiError, InvalidTimestampError, InvalidRawAmountError, ReportWriteError
