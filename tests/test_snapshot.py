"""
Tests for the public game snapshot.
"""

import json

from whaleopoly.cards import DeckType
from whaleopoly.snapshot import build_snapshot, serialize_snapshot

from conftest import give


def test_initial_snapshot(game):
    snap = serialize_snapshot(game)

    assert snap["turn_number"] == 0
    assert snap["current_player_id"] == "P1"
    assert snap["phase"] == "awaiting_roll"
    assert snap["last_dice"] is None
    assert [p["name"] for p in snap["players"]] == ["Blue", "Red", "Green", "Yellow"]
    assert snap["players"][0]["color"] == "#4da3ff"
    assert len(snap["properties"]) == 28
    assert snap["decks"]["chance"] == {"cards_remaining": 12, "withdrawn": 0}
    assert snap["pending_card"] is None
    json.dumps(snap)


def test_snapshot_hides_deck_order(game):
    """Only deck sizes are published, never which card is next."""
    text = json.dumps(serialize_snapshot(game))
    for card_id in [f"c{i}" for i in range(1, 13)] + [f"h{i}" for i in range(1, 13)]:
        assert f'"{card_id}"' not in text


def test_snapshot_reflects_ownership_and_jail(game):
    give(game, "P2", 1, 3)
    game.ledger.get(1).level = 2
    game.ledger.get(3).is_mortgaged = True
    game.send_to_jail("P4")

    dto = build_snapshot(game)
    by_position = {p.position: p for p in dto.properties}

    assert by_position[1].owner_id == "P2"
    assert by_position[1].level == 2
    assert by_position[1].color_group == "lightblue"
    assert by_position[3].mortgaged
    assert by_position[5].color_group is None
    assert dto.players[3].jail_turns == 3
    assert dto.players[3].position == 10


def test_snapshot_shows_pending_card(game):
    game.draw_card(DeckType.CHEST)
    dto = build_snapshot(game)

    assert dto.phase == "awaiting_card"
    assert dto.pending_card.deck == "chest"
    assert dto.pending_card.card_id.startswith("h")
    assert dto.activity[0].title == dto.pending_card.title
