"""
Whale-opoly Rules Engine

A deterministic, replayable implementation of the Whale-opoly board game rules.
"""

from .config import GameConfig
from .board import Board
from .player import Player, PlayerState, default_players
from .game import GameState, TurnPhase, create_game
from .rules import Action, ActionResult, ActionType, apply_action, get_legal_actions
from .engine import GameEngine
from .remote import HttpRemoteAuthority, RemoteAuthority

__all__ = [
    "GameConfig",
    "Board",
    "Player",
    "PlayerState",
    "default_players",
    "GameState",
    "TurnPhase",
    "create_game",
    "Action",
    "ActionResult",
    "ActionType",
    "apply_action",
    "get_legal_actions",
    "GameEngine",
    "HttpRemoteAuthority",
    "RemoteAuthority",
]
