"""Seat policies that drive a Whale-opoly engine."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional

from whaleopoly.rules import Action, ActionType

if TYPE_CHECKING:
    from whaleopoly.game import GameState
    from whaleopoly.player import PlayerState


class Agent(ABC):
    """
    Decision policy for one seat ("P1".."P4").

    An agent is handed a detached copy of the game and the actions the rules
    allow right now; it picks one and never touches the game itself.
    """

    def __init__(self, player_id: str, name: str):
        self.player_id = player_id
        self.name = name

    def own_state(self, game: "GameState") -> "PlayerState":
        return game.players[self.player_id]

    def is_jailed(self, game: "GameState") -> bool:
        return game.jail.is_jailed(self.player_id)

    @staticmethod
    def find_action(legal_actions: List[Action], action_type: ActionType) -> Optional[Action]:
        """First offered action of a kind, or None."""
        for action in legal_actions:
            if action.action_type == action_type:
                return action
        return None

    @abstractmethod
    def choose_action(self, game: "GameState", legal_actions: List[Action]) -> Action:
        """Pick one of ``legal_actions``; an open card always offers only APPLY_CARD."""
