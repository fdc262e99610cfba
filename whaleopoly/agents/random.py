"""Random agent that picks uniformly among legal actions."""

import random
from typing import List

from whaleopoly.game import GameState
from whaleopoly.rules import Action, ActionType

from whaleopoly.agents.base import Agent


class RandomAgent(Agent):
    """Picks a random legal action, but never draws a card by choice."""

    def __init__(self, player_id: str, name: str, seed: int = 0):
        super().__init__(player_id, name)
        self.rng = random.Random(f"{seed}:{player_id}")

    def choose_action(self, game: GameState, legal_actions: List[Action]) -> Action:
        choices = [a for a in legal_actions if a.action_type != ActionType.DRAW_CARD]
        return self.rng.choice(choices or legal_actions)
