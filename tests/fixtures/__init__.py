"""
Test Fixtures Module

YAML-based report scenarios (reward_scenarios.yaml):
- Each scenario lists raw API events, the tax year and the expected CSV rows
- Human-readable, git-diff friendly
- Use load_reward_scenarios() to parse

Raw amounts and expected amounts are kept as strings throughout; they must
never pass through YAML's float handling.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field
import yaml


FIXTURES_DIR = Path(__file__).parent


@dataclass
class ScenarioEvent:
    """Parsed input event from YAML."""
    block_time: Any
    rewards: Optional[str]
    event_id: Optional[str] = None


@dataclass
class ExpectedRow:
    """Parsed expected CSV row (only the columns that vary)."""
    date: str
    amount: str


@dataclass
class RewardScenario:
    """A single report scenario parsed from YAML."""
    id: str
    description: str
    tax_year: int
    events: List[ScenarioEvent]
    expected_rows: List[ExpectedRow]
    expected_skipped: int = 0
    expected_negative: int = 0
    expected_total: Optional[str] = None
    notes: Optional[str] = None
    tags: List[str] = field(default_factory=list)


def load_yaml_fixture(filename: str) -> Dict[str, Any]:
    """Load a YAML fixture file from the fixtures directory."""
    with open(FIXTURES_DIR / filename, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f)


def _parse_event(event_dict: Dict) -> ScenarioEvent:
    rewards = event_dict.get("rewards")
    return ScenarioEvent(
        block_time=event_dict.get("block_time"),
        rewards=rewards if rewards is None else str(rewards),
        event_id=event_dict.get("id"),
    )


def _parse_expected_row(row_dict: Dict) -> ExpectedRow:
    return ExpectedRow(date=str(row_dict["date"]), amount=str(row_dict["amount"]))


def parse_reward_scenarios(fixture_data: Dict[str, Any]) -> List[RewardScenario]:
    scenarios = []
    for scenario in fixture_data.get("scenarios", []):
        scenarios.append(RewardScenario(
            id=scenario["id"],
            description=scenario.get("description", ""),
            tax_year=int(scenario["tax_year"]),
            events=[_parse_event(e) for e in scenario.get("events") or []],
            expected_rows=[_parse_expected_row(r) for r in scenario.get("expected_rows") or []],
            expected_skipped=int(scenario.get("expected_skipped", 0)),
            expected_negative=int(scenario.get("expected_negative", 0)),
            expected_total=str(scenario["expected_total"]) if "expected_total" in scenario else None,
            notes=scenario.get("notes"),
            tags=list(scenario.get("tags") or []),
        ))
    return scenarios


def load_reward_scenarios(filename: str = "reward_scenarios.yaml") -> List[RewardScenario]:
    return parse_reward_scenarios(load_yaml_fixture(filename))
