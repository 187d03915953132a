# src/domain/events.py
from dataclasses import dataclass, KW_ONLY
from typing import Optional


@dataclass(frozen=True)
class RewardEvent:
    """
    One on-chain reward distribution as reported by the rewards API.
    Decoded once from the source payload and never mutated afterwards.
    """
    # Positional, non-default arguments
    block_timestamp: int # Unix seconds, UTC
    reward_amount_raw: str # Base-10 integer in the token's smallest unit, may be malformed

    # Keyword-only arguments, passthrough fields not used for the report itself
    _: KW_ONLY
    source_index: int = 0 # Position in the decoded payload, used to identify the event in diagnostics
    event_id: Optional[str] = None
    block: Optional[str] = None
    log_index: Optional[str] = None
    event_type: Optional[str] = None # e.g. "reward", "transfer"
    apr: Optional[str] = None
    balance: Optional[str] = None
    change: Optional[str] = None
    currency_change: Optional[str] = None
    total_pooled_ether_before: Optional[str] = None
    total_pooled_ether_after: Optional[str] = None
    total_shares_before: Optional[str] = None
    total_shares_after: Optional[str] = None
    report_shares: Optional[str] = None
    epoch_days: Optional[str] = None
    epoch_full_days: Optional[str] = None

    def __post_init__(self):
        if isinstance(self.block_timestamp, bool) or not isinstance(self.block_timestamp, int):
            raise TypeError(f"RewardEvent.block_timestamp must be an int, got {type(self.block_timestamp)}")
        if self.reward_amount_raw is None:
            # Frozen dataclass, bypass __setattr__ to normalize missing amounts
            object.__setattr__(self, "reward_amount_raw", "")

    def describe(self) -> str:
        """Short identification used in log lines."""
        parts = [f"#{self.source_index}", f"blockTime={self.block_timestamp}"]
        if self.event_id:
            parts.append(f"id={self.event_id}")
        if self.block:
            parts.append(f"block={self.block}")
        return " ".join(parts)
