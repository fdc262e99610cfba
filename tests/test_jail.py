"""
Tests specifically for jail mechanics.
"""

from whaleopoly.jail import JailTracker
from whaleopoly.rules import Action, ActionType, apply_action, get_legal_actions


def test_tracker_countdown():
    tracker = JailTracker(["A", "B"], sentence=3)
    tracker.jail("A")
    assert tracker.is_jailed("A")
    assert not tracker.is_jailed("B")

    for _ in range(5):
        tracker.tick()

    assert tracker.remaining("A") == 0
    assert tracker.remaining("B") == 0


def test_landing_on_go_to_jail(game):
    blue = game.players["P1"]
    blue.position = 25

    apply_action(game, Action(ActionType.ROLL_DICE, dice=(2, 3)))

    assert blue.position == 10
    assert game.jail.remaining("P1") == 3
    assert blue.cash == 1500


def test_jailed_player_cannot_roll(game):
    game.send_to_jail("P1")

    result = apply_action(game, Action(ActionType.ROLL_DICE, dice=(1, 1)))

    assert result.reason == "Blue is in Jail"
    assert game.players["P1"].position == 10
    assert ActionType.ROLL_DICE not in [a.action_type for a in get_legal_actions(game)]


def test_jail_resets_sentence(game):
    game.jail.turns["P1"] = 1
    game.send_to_jail("P1")
    assert game.jail.remaining("P1") == 3


def test_pay_bail(game):
    game.send_to_jail("P1")

    assert apply_action(game, Action(ActionType.PAY_BAIL)).ok

    assert game.players["P1"].cash == 1450
    assert not game.jail.is_jailed("P1")
    # Free to roll the same turn
    assert apply_action(game, Action(ActionType.ROLL_DICE, dice=(1, 2))).ok
    assert game.players["P1"].position == 13


def test_bail_rejections(game):
    result = apply_action(game, Action(ActionType.PAY_BAIL))
    assert result.reason == "Not in Jail"

    game.send_to_jail("P1")
    game.players["P1"].cash = 20
    result = apply_action(game, Action(ActionType.PAY_BAIL))

    assert result.reason == "Need $50"
    assert game.players["P1"].cash == 20
    assert game.jail.is_jailed("P1")


def test_use_jail_pass(game):
    blue = game.players["P1"]
    game.send_to_jail("P1")

    assert apply_action(game, Action(ActionType.USE_JAIL_PASS)).reason == "No Jail Pass"

    blue.jail_release_tokens = 1
    assert apply_action(game, Action(ActionType.USE_JAIL_PASS)).ok
    assert blue.jail_release_tokens == 0
    assert blue.cash == 1500
    assert not game.jail.is_jailed("P1")


def test_legal_actions_in_jail(game):
    game.send_to_jail("P1")
    game.players["P1"].jail_release_tokens = 1

    kinds = [a.action_type for a in get_legal_actions(game)]

    assert ActionType.PAY_BAIL in kinds
    assert ActionType.USE_JAIL_PASS in kinds
    assert kinds[-1] == ActionType.END_TURN


def test_end_turn_counts_down_every_prisoner(game):
    """Jail countdowns drop for all jailed players at each turn end."""
    game.send_to_jail("P2")
    game.send_to_jail("P3")
    game.jail.turns["P3"] = 1

    apply_action(game, Action(ActionType.END_TURN))

    assert game.jail.remaining("P2") == 2
    assert game.jail.remaining("P3") == 0
    assert game.jail.remaining("P1") == 0


def test_sentence_served_after_three_turn_ends(game):
    game.send_to_jail("P1")
    for _ in range(3):
        game.end_turn()
    assert not game.jail.is_jailed("P1")
