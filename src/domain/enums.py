# src/domain/enums.py
from enum import Enum


class ReportStage(Enum):
    """Pipeline stage a failure is attributed to. The value is used in user facing messages."""
    BUILD_REQUEST = "building rewards API request"
    FETCH = "fetching reward history"
    DECODE = "decoding rewards API response"
    FILTER = "filtering events by tax year"
    CONVERT = "converting reward amount"
    CREATE_FILE = "creating CSV file"
    WRITE_ROW = "writing CSV row"


class SkipReason(Enum):
    """Why a qualifying event produced no report row."""
    MALFORMED_REWARD_AMOUNT = "reward amount is not a base-10 integer"
