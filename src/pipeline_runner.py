# src/pipeline_runner.py
import logging
from typing import List, Optional

# Configuration
import src.config as config

# Domain objects
from src.domain.events import RewardEvent
from src.domain.report import ReportParameters, RewardReport

# Core components
from src.parsers.domain_event_factory import DomainEventFactory
from src.parsers.raw_models import RawLidoApiResponse
from src.engine.report_generator import generate_reward_report
from src.reporting.csv_writer import write_report_csv, default_output_path
from src.utils.rewards_provider import LidoRewardsApiProvider, RewardEventProvider

logger = logging.getLogger(__name__)


class ReportOutput:
    """
    Encapsulates the results of one report run.
    """
    def __init__(self,
                 report: RewardReport,
                 reward_events: List[RewardEvent],
                 api_response: RawLidoApiResponse,
                 output_path: str,
                 rows_written: int):
        self.report = report
        self.reward_events = reward_events
        self.api_response = api_response
        self.output_path = output_path
        self.rows_written = rows_written


def run_report_pipeline(
    address: str,
    parameters: ReportParameters,
    currency: str = config.DEFAULT_CURRENCY,
    archive_rate: str = config.ARCHIVE_RATE,
    only_rewards: str = config.ONLY_REWARDS,
    api_url: str = config.LIDO_API_URL,
    request_timeout_seconds: float = config.REQUEST_TIMEOUT_SECONDS,
    custom_event_provider: Optional[RewardEventProvider] = None # For testing without network
) -> ReportOutput:
    """
    Fetch -> build events -> generate rows -> write CSV, strictly in that order.
    The output file is only opened once all rows exist in memory, so a failing
    fetch or a malformed timestamp leaves no file behind.
    Any RewardReportError propagates to the caller.
    """
    if not address:
        raise ValueError("A wallet address is required.")

    if custom_event_provider:
        event_provider = custom_event_provider
        logger.info("Using custom reward event provider.")
    else:
        event_provider = LidoRewardsApiProvider(
            api_url_override=api_url,
            request_timeout_seconds_override=request_timeout_seconds
        )

    api_response = event_provider.fetch_reward_history(
        address=address,
        currency=currency,
        archive_rate=archive_rate,
        only_rewards=only_rewards
    )

    reward_events = DomainEventFactory().create_reward_events(api_response.events)

    report = generate_reward_report(reward_events, parameters)

    output_path = parameters.output_path or default_output_path(parameters.tax_year, config.OUTPUT_FILE_NAME_TEMPLATE)
    rows_written = write_report_csv(output_path, report)

    return ReportOutput(
        report=report,
        reward_events=reward_events,
        api_response=api_response,
        output_path=output_path,
        rows_written=rows_written
    )
