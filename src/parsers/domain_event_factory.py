# src/parsers/domain_event_factory.py
import logging
from typing import List, Sequence

from src.domain.events import RewardEvent
from src.domain.errors import InvalidTimestampError
from src.processing.year_filter import parse_block_timestamp
from .raw_models import RawRewardEvent

logger = logging.getLogger(__name__)


class DomainEventFactory:
    """Turns decoded API records into immutable RewardEvent objects."""

    def create_reward_event(self, raw_event: RawRewardEvent, source_index: int) -> RewardEvent:
        try:
            block_timestamp = parse_block_timestamp(raw_event.block_time)
        except InvalidTimestampError as e:
            err_msg = f"Event #{source_index} (id={raw_event.event_id}, block={raw_event.block}): {e}"
            logger.error(err_msg)
            raise InvalidTimestampError(err_msg, value=raw_event.block_time) from e

        return RewardEvent(
            block_timestamp,
            raw_event.rewards if raw_event.rewards is not None else "",
            source_index=source_index,
            event_id=raw_event.event_id,
            block=raw_event.block,
            log_index=raw_event.log_index,
            event_type=raw_event.type,
            apr=raw_event.apr,
            balance=raw_event.balance,
            change=raw_event.change,
            currency_change=raw_event.currency_change,
            total_pooled_ether_before=raw_event.total_pooled_ether_before,
            total_pooled_ether_after=raw_event.total_pooled_ether_after,
            total_shares_before=raw_event.total_shares_before,
            total_shares_after=raw_event.total_shares_after,
            report_shares=raw_event.report_shares,
            epoch_days=raw_event.epoch_days,
            epoch_full_days=raw_event.epoch_full_days,
        )

    def create_reward_events(self, raw_events: Sequence[RawRewardEvent]) -> List[RewardEvent]:
        """
        Converts the whole batch, preserving payload order.
        A single malformed block time aborts the batch with InvalidTimestampError,
        before any event reaches the report generator.
        """
        reward_events = [self.create_reward_event(raw_event, idx) for idx, raw_event in enumerate(raw_events)]
        logger.info(f"Created {len(reward_events)} reward events from {len(raw_events)} raw API records.")
        return reward_events
