"""
Tests for dice, movement and the turn sequence.
"""

import pytest
from whaleopoly.activity import EventType
from whaleopoly.exceptions import InvalidActionError
from whaleopoly.game import GameState, TurnPhase, create_game
from whaleopoly.player import Player
from whaleopoly.rules import Action, ActionType, apply_action, get_legal_actions


def dice_for(total):
    return (1, total - 1) if total <= 7 else (total - 6, 6)


def test_initial_state(game):
    assert game.turn_number == 0
    assert game.get_current_player().player_id == "P1"
    assert game.phase == TurnPhase.AWAITING_ROLL
    for state in game.players.values():
        assert state.cash == 1500
        assert state.position == 0
        assert state.jail_release_tokens == 0
    assert game.ledger.owned_by("P1") == []


def test_game_needs_four_seats(game_config):
    with pytest.raises(ValueError):
        GameState(game_config, [Player("P1", "Blue", "#4da3ff")])


@pytest.mark.parametrize("start", [0, 28, 33, 38, 39])
@pytest.mark.parametrize("total", range(2, 13))
def test_movement_wraps_and_pays_on_passing_start(start, total):
    game = create_game()
    blue = game.players["P1"]
    blue.position = start

    apply_action(game, Action(ActionType.ROLL_DICE, dice=dice_for(total)))

    expected = (start + total) % 40
    if expected == 30:
        expected = 10
    assert blue.position == expected
    passed = [e for e in game.activity.entries if e.event_type == EventType.PASS_GO]
    assert len(passed) == (1 if start + total >= 40 else 0)


def test_pass_start_onto_chest(game):
    """From tile 35 a 7 wraps to tile 2: salary, then a card awaits."""
    blue = game.players["P1"]
    blue.position = 35

    assert apply_action(game, Action(ActionType.ROLL_DICE, dice=(3, 4))).ok

    assert blue.position == 2
    assert blue.cash == 1700
    assert game.pending_card is not None
    assert game.phase == TurnPhase.AWAITING_CARD

    rejected = apply_action(game, Action(ActionType.ROLL_DICE, dice=(1, 1)))
    assert rejected.reason == "Resolve card"
    assert blue.position == 2

    assert apply_action(game, Action(ActionType.APPLY_CARD)).ok
    assert game.pending_card is None
    assert apply_action(game, Action(ActionType.ROLL_DICE, dice=(1, 1))).ok


def test_landing_on_tax(game):
    apply_action(game, Action(ActionType.ROLL_DICE, dice=(1, 3)))
    assert game.players["P1"].position == 4
    assert game.players["P1"].cash == 1400


def test_dice_out_of_range(game):
    with pytest.raises(InvalidActionError):
        game.roll_dice((0, 7))
    assert game.last_dice is None


def test_supplied_bad_dice_are_rejected(game):
    """A bad pair comes back as a rejection, not an exception."""
    result = apply_action(game, Action(ActionType.ROLL_DICE, dice=(0, 7)))

    assert result.reason == "Bad dice"
    assert not game.has_rolled
    assert game.players["P1"].position == 0
    assert game.activity.entries[0].event_type == EventType.REJECTED


def test_local_roll_is_seeded(game_config):
    first = create_game(game_config)
    second = create_game(game_config)
    assert first.roll_dice() == second.roll_dice()
    assert all(1 <= d <= 6 for d in first.last_dice)


def test_end_turn_rotates_seats(game):
    order = []
    for _ in range(5):
        order.append(game.get_current_player().player_id)
        assert apply_action(game, Action(ActionType.END_TURN)).ok
    assert order == ["P1", "P2", "P3", "P4", "P1"]
    assert game.turn_number == 5


def test_end_turn_before_rolling_is_allowed(game):
    assert apply_action(game, Action(ActionType.END_TURN)).ok
    assert game.players["P1"].position == 0


def test_end_turn_resets_roll(game):
    apply_action(game, Action(ActionType.ROLL_DICE, dice=(2, 3)))
    assert game.phase == TurnPhase.TURN_READY
    apply_action(game, Action(ActionType.END_TURN))
    assert not game.has_rolled
    assert game.phase == TurnPhase.AWAITING_ROLL


def test_acting_out_of_turn_is_rejected(game):
    result = apply_action(game, Action(ActionType.ROLL_DICE, dice=(1, 2)), "P2")
    assert result.reason == "Not your turn"
    assert game.players["P2"].position == 0
    assert get_legal_actions(game, "P2") == []


def test_buy_offered_on_unowned_tile(game):
    apply_action(game, Action(ActionType.ROLL_DICE, dice=(2, 3)))

    assert Action(ActionType.BUY_PROPERTY, position=5) in get_legal_actions(game)
    assert apply_action(game, Action(ActionType.BUY_PROPERTY)).ok
    assert game.ledger.owner_of(5) == "P1"
    assert game.players["P1"].cash == 1300


def test_activity_newest_first(game):
    apply_action(game, Action(ActionType.ROLL_DICE, dice=(2, 3)))
    apply_action(game, Action(ActionType.END_TURN))

    assert game.activity.entries[0].event_type == EventType.END_TURN
    assert game.activity.entries[-1].event_type == EventType.DICE_ROLL
