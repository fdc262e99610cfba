"""Shared test fixtures for Whale-opoly tests."""

import pytest
from whaleopoly.config import GameConfig
from whaleopoly.game import create_game
from whaleopoly.player import default_players


@pytest.fixture
def game_config():
    """Default game configuration with fixed seed for reproducibility."""
    return GameConfig(seed=42)


@pytest.fixture
def four_players():
    """The four canonical seats."""
    return default_players()


@pytest.fixture
def game(game_config, four_players):
    """Fresh game with fixed seed; Blue (P1) to play."""
    return create_game(game_config, four_players)


def give(game, player_id, *positions):
    """Hand tiles straight to a player without charging them."""
    for position in positions:
        game.ledger.transfer(position, player_id)
