# src/utils/rewards_provider.py
import logging
from typing import Any, Dict, Optional

import requests
from pydantic import ValidationError

import src.config as config

from src.domain.enums import ReportStage
from src.domain.errors import RewardsApiError
from src.parsers.raw_models import RawLidoApiResponse

logger = logging.getLogger(__name__)

# Default constants if not overridden by constructor arguments
DEFAULT_LIDO_API_URL = config.LIDO_API_URL
DEFAULT_REQUEST_TIMEOUT_SECONDS = config.REQUEST_TIMEOUT_SECONDS


class RewardEventProvider:
    """
    Base class for reward history sources.
    Defines the interface for fetching a wallet's reward events.
    """
    def fetch_reward_history(self, address: str, currency: str, archive_rate: str, only_rewards: str) -> RawLidoApiResponse:
        """
        Returns the decoded reward history for a wallet.
        archive_rate and only_rewards are string booleans ("true"/"false") forwarded as-is.
        Implementations raise RewardsApiError on any failure.
        """
        raise NotImplementedError("Subclasses must implement fetch_reward_history")


class LidoRewardsApiProvider(RewardEventProvider):
    def __init__(self,
                 api_url_override: Optional[str] = None,
                 request_timeout_seconds_override: Optional[float] = None,
                 session: Optional[requests.Session] = None):
        super().__init__()
        self.api_url = api_url_override or DEFAULT_LIDO_API_URL
        self.request_timeout_seconds = request_timeout_seconds_override or DEFAULT_REQUEST_TIMEOUT_SECONDS
        self.session = session or requests.Session()

    @staticmethod
    def build_query_params(address: str, currency: str, archive_rate: str, only_rewards: str) -> Dict[str, str]:
        return {
            "address": address,
            "currency": currency,
            "archiveRate": archive_rate,
            "onlyRewards": only_rewards,
        }

    def _get(self, params: Dict[str, str]) -> requests.Response:
        try:
            request = requests.Request("GET", self.api_url, params=params, headers={'Accept': 'application/json'})
            prepared = self.session.prepare_request(request)
        except (requests.exceptions.MissingSchema, requests.exceptions.InvalidSchema,
                requests.exceptions.InvalidURL, ValueError) as e:
            raise RewardsApiError(f"Invalid rewards API URL '{self.api_url}': {e}", stage=ReportStage.BUILD_REQUEST) from e

        logger.debug(f"Requesting reward history from URL: {prepared.url}")
        try:
            # Not streamed, the body is fully buffered before decoding
            response = self.session.send(prepared, timeout=self.request_timeout_seconds)
        except requests.exceptions.Timeout as e:
            raise RewardsApiError(f"Request to {self.api_url} timed out after {self.request_timeout_seconds}s", stage=ReportStage.FETCH) from e
        except requests.exceptions.ConnectionError as e:
            raise RewardsApiError(f"Could not connect to {self.api_url}: {e}", stage=ReportStage.FETCH) from e
        except requests.exceptions.RequestException as e:
            raise RewardsApiError(f"Request to {self.api_url} failed: {e}", stage=ReportStage.FETCH) from e

        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as http_err:
            response_text = response.text[:200] if response.text else "No response body"
            raise RewardsApiError(
                f"Rewards API returned HTTP {response.status_code} for {self.api_url}. Response: {response_text}",
                stage=ReportStage.FETCH,
                status_code=response.status_code
            ) from http_err
        if not 200 <= response.status_code < 300:
            # raise_for_status() lets 1xx/3xx through (e.g. a 304 or a 300 without Location)
            raise RewardsApiError(
                f"Rewards API returned unexpected HTTP {response.status_code} for {self.api_url}",
                stage=ReportStage.FETCH,
                status_code=response.status_code
            )
        return response

    def _decode(self, response: requests.Response) -> RawLidoApiResponse:
        try:
            data: Any = response.json()
        except ValueError as e: # requests' JSONDecodeError subclasses ValueError
            raise RewardsApiError(f"Response body is not valid JSON: {e}. Response snippet: {response.text[:200]}", stage=ReportStage.DECODE) from e

        if not isinstance(data, dict):
            raise RewardsApiError(f"Expected a JSON object, got {type(data).__name__}. Response snippet: {str(data)[:200]}", stage=ReportStage.DECODE)

        try:
            return RawLidoApiResponse.model_validate(data)
        except ValidationError as e:
            raise RewardsApiError(f"Response does not match the rewards schema: {e.errors()}", stage=ReportStage.DECODE) from e

    def fetch_reward_history(self, address: str, currency: str, archive_rate: str, only_rewards: str) -> RawLidoApiResponse:
        params = self.build_query_params(address, currency, archive_rate, only_rewards)
        logger.info(f"Fetching reward history for {address} from {self.api_url} (currency={currency}, archiveRate={archive_rate}, onlyRewards={only_rewards})")
        response = self._get(params)
        decoded = self._decode(response)
        logger.info(f"Rewards API returned {len(decoded.events)} events (totalItems={decoded.total_items}).")
        return decoded
