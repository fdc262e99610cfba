"""
Player identity and per-seat state.
"""

from typing import List


class Player:
    """
    Seat identity: id, display name and token color.
    Immutable for the session.
    """

    def __init__(self, player_id: str, name: str, color: str):
        self.player_id = player_id
        self.name = name
        self.color = color

    def __repr__(self) -> str:
        return f"Player(id='{self.player_id}', name='{self.name}')"


class PlayerState:
    """Mutable per-seat state: cash, position and held jail passes."""

    def __init__(self, player: Player, starting_cash: int):
        self.player_id = player.player_id
        self.name = player.name
        self.color = player.color
        self.cash = starting_cash
        self.position = 0
        self.jail_release_tokens = 0

    def __repr__(self) -> str:
        return (
            f"PlayerState(id='{self.player_id}', name='{self.name}', "
            f"cash={self.cash}, position={self.position})"
        )


def default_players() -> List[Player]:
    """The four canonical seats."""
    return [
        Player("P1", "Blue", "#4da3ff"),
        Player("P2", "Red", "#ff6b6b"),
        Player("P3", "Green", "#3ecf8e"),
        Player("P4", "Yellow", "#ffd166"),
    ]
