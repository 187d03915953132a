# src/parsers/raw_models.py
from typing import Optional, Any, List
from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.utils.type_utils import optional_str


class RawBaseRecord(BaseModel):
    # The API adds fields over time, anything we don't model is ignored
    model_config = ConfigDict(extra='ignore', populate_by_name=True)


class RawRewardEvent(RawBaseRecord):
    # Fields are named after the Lido rewards API JSON keys, using Field(alias=...)
    apr: Optional[str] = Field(None, alias="apr")
    block: Optional[str] = Field(None, alias="block")
    block_time: Optional[str] = Field(None, alias="blockTime") # Unix seconds, sent as string (sometimes as number)
    event_id: Optional[str] = Field(None, alias="id")
    log_index: Optional[str] = Field(None, alias="logIndex")
    total_pooled_ether_after: Optional[str] = Field(None, alias="totalPooledEtherAfter")
    total_pooled_ether_before: Optional[str] = Field(None, alias="totalPooledEtherBefore")
    total_shares_after: Optional[str] = Field(None, alias="totalSharesAfter")
    total_shares_before: Optional[str] = Field(None, alias="totalSharesBefore")
    epoch_days: Optional[str] = Field(None, alias="epochDays")
    epoch_full_days: Optional[str] = Field(None, alias="epochFullDays")
    type: Optional[str] = Field(None, alias="type") # e.g. "reward"
    report_shares: Optional[str] = Field(None, alias="reportShares")
    balance: Optional[str] = Field(None, alias="balance")
    rewards: Optional[str] = Field(None, alias="rewards") # Raw integer in wei-like units (18 decimals)
    change: Optional[str] = Field(None, alias="change")
    currency_change: Optional[str] = Field(None, alias="currencyChange")

    @field_validator('block_time', 'rewards', mode='before')
    @classmethod
    def keep_raw_scalar(cls, v: Any) -> Any:
        # Numbers are turned into their text form, validity is decided downstream.
        # Strings are kept verbatim (no strip) so malformed values stay visible.
        if isinstance(v, bool):
            return str(v).lower()
        if isinstance(v, (int, float)):
            return str(v)
        return v

    @field_validator('apr', 'block', 'event_id', 'log_index', 'total_pooled_ether_after',
                     'total_pooled_ether_before', 'total_shares_after', 'total_shares_before',
                     'epoch_days', 'epoch_full_days', 'type', 'report_shares', 'balance',
                     'change', 'currency_change', mode='before')
    @classmethod
    def normalize_passthrough(cls, v: Any) -> Optional[str]:
        if isinstance(v, (dict, list)):
            return str(v)
        return optional_str(v)


class RawTotals(RawBaseRecord):
    eth_rewards: Optional[str] = Field(None, alias="ethRewards")
    currency_rewards: Optional[str] = Field(None, alias="currencyRewards")

    @field_validator('eth_rewards', 'currency_rewards', mode='before')
    @classmethod
    def normalize_totals(cls, v: Any) -> Optional[str]:
        return optional_str(v)


class RawStEthCurrencyPrice(RawBaseRecord):
    eth: Optional[float] = Field(None, alias="eth")
    usd: Optional[float] = Field(None, alias="usd")


class RawLidoApiResponse(RawBaseRecord):
    totals: Optional[RawTotals] = Field(None, alias="totals")
    average_apr: Optional[str] = Field(None, alias="averageApr")
    events: List[RawRewardEvent] = Field(default_factory=list, alias="events")
    steth_currency_price: Optional[RawStEthCurrencyPrice] = Field(None, alias="stEthCurrencyPrice")
    eth_to_steth_ratio: Optional[float] = Field(None, alias="ethToStEthRatio")
    total_items: Optional[int] = Field(None, alias="totalItems")

    @field_validator('average_apr', mode='before')
    @classmethod
    def normalize_average_apr(cls, v: Any) -> Optional[str]:
        return optional_str(v)

    @field_validator('events', mode='before')
    @classmethod
    def null_events_as_empty(cls, v: Any) -> Any:
        return [] if v is None else v
