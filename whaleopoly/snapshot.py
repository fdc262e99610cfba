"""
Public snapshot serialization of GameState.

Produces a sanitized, UI-friendly view of the current game without
exposing hidden information (e.g., deck order).
"""

from __future__ import annotations

from typing import Any, Dict, List

from whaleopoly.game import GameState
from whaleopoly.schemas import (
    ActivityEntryDTO,
    DeckDTO,
    PendingCardDTO,
    PlayerDTO,
    PropertyDTO,
    SnapshotDTO,
)
from whaleopoly.spaces import PropertySpace


def build_snapshot(game: GameState) -> SnapshotDTO:
    """Build the typed snapshot model for a GameState.

    The snapshot includes:
    - turn number, active player and turn phase
    - players with public info (cash, position, jail countdown, passes)
    - every purchasable tile with owner, level and mortgage flag
    - deck sizes only, never their order
    - the open card, if any, and the activity feed
    """
    players: List[PlayerDTO] = []
    for seat in game.seats:
        state = game.players[seat.player_id]
        players.append(
            PlayerDTO(
                player_id=state.player_id,
                name=state.name,
                color=state.color,
                cash=state.cash,
                position=state.position,
                jail_turns=game.jail.remaining(state.player_id),
                jail_passes=state.jail_release_tokens,
            )
        )

    properties: List[PropertyDTO] = []
    for position, entry in game.ledger:
        space = game.board.get_space(position)
        properties.append(
            PropertyDTO(
                position=position,
                name=space.name,
                owner_id=entry.owner_id,
                level=entry.level,
                mortgaged=entry.is_mortgaged,
                color_group=space.color_group if isinstance(space, PropertySpace) else None,
            )
        )

    pending = None
    if game.pending_card is not None:
        card = game.pending_card
        pending = PendingCardDTO(
            card_id=card.card_id,
            deck=card.deck.value,
            title=card.title,
            text=card.text,
            keep=card.keep,
        )

    return SnapshotDTO(
        turn_number=game.turn_number,
        current_player_id=game.get_current_player().player_id,
        phase=game.phase.value,
        last_dice=list(game.last_dice) if game.last_dice else None,
        players=players,
        properties=properties,
        decks={
            deck_type.value: DeckDTO(cards_remaining=len(deck), withdrawn=len(deck.withdrawn))
            for deck_type, deck in game.decks.items()
        },
        pending_card=pending,
        activity=[
            ActivityEntryDTO(severity=e.severity.value, title=e.title, body=e.body, time=e.timestamp)
            for e in game.activity.get_entries()
        ],
    )


def serialize_snapshot(game: GameState) -> Dict[str, Any]:
    """Serialize a GameState into a public, stable JSON dict."""
    return build_snapshot(game).model_dump()
