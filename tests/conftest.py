# tests/conftest.py
import pytest
import tempfile
import os

from src import config as app_config
from src.domain.report import ReportParameters
from tests.support.mock_providers import MockRewardEventProvider
from tests.support.payloads import make_api_payload, make_event_dict, utc_ts


@pytest.fixture
def temp_data_dir():
    """
    Creates a temporary directory for test output files.
    Yields the path to this directory.
    Cleans up the directory after the test.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def report_parameters_2023(temp_data_dir):
    """Default report columns for 2023, writing into the temp directory."""
    return ReportParameters(
        tax_year=2023,
        integration_name=app_config.INTEGRATION_NAME,
        label=app_config.LABEL,
        incoming_asset=app_config.ASSET_SYMBOL,
        comment=app_config.COMMENT,
        token_decimals=app_config.TOKEN_DECIMALS,
        output_path=os.path.join(temp_data_dir, "2023-report.csv"),
    )


@pytest.fixture
def three_year_payload():
    """
    Events spanning 2022..2024 including both 2023 year boundaries, in
    deliberately non-chronological order.
    """
    return make_api_payload([
        make_event_dict(utc_ts(2023, 6, 1), "1000000000000000000", event_id="mid-2023"),
        make_event_dict(utc_ts(2022, 12, 31, 23, 59, 59), "1", event_id="last-second-2022"),
        make_event_dict(utc_ts(2023, 1, 1, 0, 0, 0), "2", event_id="first-second-2023"),
        make_event_dict(utc_ts(2024, 1, 1, 0, 0, 0), "3", event_id="first-second-2024"),
        make_event_dict(utc_ts(2023, 12, 31, 23, 59, 59), "4", event_id="last-second-2023"),
        make_event_dict(utc_ts(2022, 6, 15, 12), "5", event_id="mid-2022"),
        make_event_dict(1700000000, "1234567890123456789", event_id="nov-2023"),
        make_event_dict(utc_ts(2024, 3, 1), "6", event_id="mid-2024"),
    ])


@pytest.fixture
def mock_provider_factory():
    """Returns a callable building a MockRewardEventProvider for a payload or an error."""
    def _factory(payload=None, error=None):
        return MockRewardEventProvider(payload=payload, error=error)
    return _factory
