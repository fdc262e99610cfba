"""
Game configuration settings.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class GameConfig:
    """Configuration for a Whale-opoly session."""

    starting_cash: int = 1500
    go_salary: int = 200
    jail_fine: int = 50
    mortgage_interest_rate: float = 0.10

    jail_turns: int = 3
    max_development: int = 5

    activity_limit: int = 25
    roll_delay_seconds: float = 0.42

    seed: Optional[int] = None
