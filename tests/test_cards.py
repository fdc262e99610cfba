"""
Tests for card decks and card effects.
"""

import random

import pytest
from whaleopoly.cards import Card, CardType, DeckType, create_chance_deck, create_chest_deck
from whaleopoly.exceptions import InvalidActionError
from whaleopoly.rules import Action, ActionType, apply_action, get_legal_actions

from conftest import give


def make_card(card_type, **kwargs):
    return Card("t1", DeckType.CHANCE, "Test", "Test card", card_type, **kwargs)


def test_decks_start_with_twelve_cards():
    assert len(create_chance_deck()) == 12
    assert len(create_chest_deck()) == 12


def test_shuffle_is_seeded():
    first = [c.card_id for c in create_chance_deck(random.Random(7)).cards]
    second = [c.card_id for c in create_chance_deck(random.Random(7)).cards]
    assert first == second
    assert sorted(first) == sorted(c.card_id for c in create_chance_deck().cards)


def test_draw_requeues_card_at_bottom():
    deck = create_chest_deck()
    card = deck.draw()

    assert card.card_id == "h1"
    assert len(deck) == 12
    assert deck.cards[-1] is card


def test_keepable_card_leaves_deck():
    """Get Out of Jail Free is withdrawn and never drawn again."""
    deck = create_chance_deck()
    drawn = [deck.draw() for _ in range(6)]

    assert drawn[-1].card_id == "c6"
    assert len(deck) == 11
    assert deck.withdrawn == [drawn[-1]]

    later = [deck.draw().card_id for _ in range(22)]
    assert "c6" not in later
    assert len(deck) == 11


def test_deck_length_constant_without_keepables():
    deck = create_chest_deck()
    for _ in range(3):
        deck.draw()
    assert len(deck) == 12


def test_cannot_draw_twice(game):
    game.draw_card(DeckType.CHANCE)
    with pytest.raises(InvalidActionError) as exc_info:
        game.draw_card(DeckType.CHEST)
    assert exc_info.value.reason == "Resolve card"


def test_explicit_draw_needs_card_tile(game):
    result = apply_action(game, Action(ActionType.DRAW_CARD))
    assert result.reason == "No card to draw"

    game.players["P1"].position = 7
    assert apply_action(game, Action(ActionType.DRAW_CARD, deck=DeckType.CHEST)).reason == "No card to draw"
    assert apply_action(game, Action(ActionType.DRAW_CARD, deck=DeckType.CHANCE)).ok
    assert game.pending_card.deck == DeckType.CHANCE


def test_apply_without_card_is_rejected(game):
    assert apply_action(game, Action(ActionType.APPLY_CARD)).reason == "No card to apply"


def test_money_card(game):
    blue = game.players["P1"]
    before = len(game.activity)

    game.execute_card(make_card(CardType.MONEY, amount=-50), "P1")

    assert blue.cash == 1450
    assert len(game.activity) == before + 1
    assert game.activity.entries[0].severity.value == "warn"


def test_advance_to_start_pays_when_wrapping(game):
    blue = game.players["P1"]
    blue.position = 35

    game.execute_card(make_card(CardType.MOVE, target_position=0, pass_go=True), "P1")

    assert blue.position == 0
    assert blue.cash == 1700


def test_advance_to_start_from_start_pays_nothing(game):
    game.execute_card(make_card(CardType.MOVE, target_position=0, pass_go=True), "P1")
    assert game.players["P1"].cash == 1500


def test_relative_move_backwards_wraps(game):
    blue = game.players["P1"]
    blue.position = 1

    game.execute_card(make_card(CardType.MOVE_REL, delta=-2), "P1")

    assert blue.position == 39
    assert blue.cash == 1500


def test_card_move_does_not_resolve_tile(game):
    """Moving onto a tax tile by card charges nothing."""
    blue = game.players["P1"]
    blue.position = 1

    game.execute_card(make_card(CardType.MOVE_REL, delta=3), "P1")

    assert blue.position == 4
    assert blue.cash == 1500
    assert game.pending_card is None


def test_goto_jail_card(game):
    blue = game.players["P1"]
    blue.position = 22
    game.jail.turns["P1"] = 1

    game.execute_card(make_card(CardType.GOTO_JAIL), "P1")

    assert blue.position == 10
    assert game.jail.remaining("P1") == 3


def test_jail_pass_card(game):
    game.execute_card(make_card(CardType.JAIL_PASS, keep=True), "P1")
    game.execute_card(make_card(CardType.JAIL_PASS, keep=True), "P1")
    assert game.players["P1"].jail_release_tokens == 2


def test_collect_from_each(game):
    game.execute_card(make_card(CardType.COLLECT_EACH, amount=10), "P1")

    assert game.players["P1"].cash == 1530
    for pid in ("P2", "P3", "P4"):
        assert game.players[pid].cash == 1490


def test_pay_each_credits_the_others(game):
    game.execute_card(make_card(CardType.PAY_EACH, amount=50), "P1")

    assert game.players["P1"].cash == 1350
    for pid in ("P2", "P3", "P4"):
        assert game.players[pid].cash == 1550


def test_nearest_rail_wraps_without_salary(game):
    blue = game.players["P1"]
    blue.position = 36

    game.execute_card(make_card(CardType.NEAREST_RAIL), "P1")

    assert blue.position == 5
    assert blue.cash == 1500


def test_nearest_utility(game):
    blue = game.players["P1"]
    blue.position = 22
    game.execute_card(make_card(CardType.NEAREST_UTILITY), "P1")
    assert blue.position == 28


def test_repair_counts_every_building_on_board(game):
    give(game, "P1", 1, 3)
    give(game, "P2", 6, 8, 9)
    game.ledger.get(1).level = 2
    game.ledger.get(3).level = 5
    game.ledger.get(6).level = 1

    game.execute_card(make_card(CardType.REPAIR, per_house=25, per_hotel=100), "P1")

    assert game.players["P1"].cash == 1500 - (3 * 25 + 100)
    assert game.players["P2"].cash == 1500


def test_pending_card_blocks_until_applied(game):
    game.players["P1"].position = 7
    apply_action(game, Action(ActionType.DRAW_CARD))

    assert get_legal_actions(game) == [Action(ActionType.APPLY_CARD)]
    assert apply_action(game, Action(ActionType.END_TURN)).reason == "Resolve card"
    assert apply_action(game, Action(ActionType.APPLY_CARD)).ok
    assert game.pending_card is None
