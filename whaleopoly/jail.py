"""
Jail countdown tracking.
"""

from typing import Dict, Iterable


class JailTracker:
    """
    Per-player count of forced turns remaining in jail.

    0 means free; entering jail always resets the count to the full sentence.
    """

    def __init__(self, player_ids: Iterable[str], sentence: int = 3):
        self.sentence = sentence
        self.turns: Dict[str, int] = {pid: 0 for pid in player_ids}

    def is_jailed(self, player_id: str) -> bool:
        return self.turns[player_id] > 0

    def remaining(self, player_id: str) -> int:
        return self.turns[player_id]

    def jail(self, player_id: str) -> None:
        self.turns[player_id] = self.sentence

    def release(self, player_id: str) -> None:
        self.turns[player_id] = 0

    def tick(self) -> None:
        """Count down every jailed player by one turn, floored at zero."""
        for pid, remaining in self.turns.items():
            if remaining > 0:
                self.turns[pid] = remaining - 1
