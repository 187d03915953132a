"""
Test Support Module

This module consolidates the shared test infrastructure:
- Mock reward event providers
- API payload builders
- HTTP response helpers
"""

from tests.support.mock_providers import MockRewardEventProvider
from tests.support.payloads import (
    make_api_payload,
    make_event_dict,
    make_http_response,
    read_csv_rows,
    utc_ts,
)

__all__ = [
    "MockRewardEventProvider",
    "make_api_payload",
    "make_event_dict",
    "make_http_response",
    "read_csv_rows",
    "utc_ts",
]
