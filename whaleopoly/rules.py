"""
High-level rules API for controlling game flow.
This module provides the public interface for game actions and legal move detection.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional

from whaleopoly.activity import EventType, Severity
from whaleopoly.cards import DeckType
from whaleopoly.exceptions import InvalidActionError
from whaleopoly.game import GameState
from whaleopoly.spaces import SpaceType

logger = logging.getLogger(__name__)


class ActionType(Enum):
    """Types of actions a player can take."""

    ROLL_DICE = "roll_dice"
    BUY_PROPERTY = "buy_property"
    BUILD = "build"
    MORTGAGE_PROPERTY = "mortgage_property"
    UNMORTGAGE_PROPERTY = "unmortgage_property"
    DRAW_CARD = "draw_card"
    APPLY_CARD = "apply_card"
    PAY_BAIL = "pay_bail"
    USE_JAIL_PASS = "use_jail_pass"
    END_TURN = "end_turn"


CARD_DECKS = {SpaceType.CHANCE: DeckType.CHANCE, SpaceType.CHEST: DeckType.CHEST}


class Action:
    """Represents a game action that can be taken."""

    def __init__(self, action_type: ActionType, **params: Any):
        self.action_type = action_type
        self.params = params

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Action):
            return NotImplemented
        return self.action_type == other.action_type and self.params == other.params

    def __repr__(self) -> str:
        return f"Action({self.action_type.value}, {self.params})"


@dataclass
class ActionResult:
    """Outcome of an action: success, or the reason it was rejected."""

    ok: bool
    reason: Optional[str] = None

    def __bool__(self) -> bool:
        return self.ok


def get_legal_actions(game_state: GameState, player_id: Optional[str] = None) -> List[Action]:
    """
    Get all legal actions available to a player.

    Args:
        game_state: Current game state
        player_id: Player to get actions for (defaults to the active player)

    Returns:
        List of legal Action objects; empty when it is not this player's turn
    """
    player = game_state.get_current_player()
    if player_id is not None and player_id != player.player_id:
        return []

    # An open card must be applied before anything else
    if game_state.pending_card is not None:
        return [Action(ActionType.APPLY_CARD)]

    actions: List[Action] = []

    if game_state.jail.is_jailed(player.player_id):
        if player.cash >= game_state.config.jail_fine:
            actions.append(Action(ActionType.PAY_BAIL))
        if player.jail_release_tokens > 0:
            actions.append(Action(ActionType.USE_JAIL_PASS))
    else:
        actions.append(Action(ActionType.ROLL_DICE))

    space = game_state.board.get_space(player.position)
    if space.space_type in CARD_DECKS:
        actions.append(Action(ActionType.DRAW_CARD, deck=CARD_DECKS[space.space_type]))

    purchasable = game_state.board.get_purchasable_space(player.position)
    if purchasable is not None:
        entry = game_state.ledger.get(player.position)
        if not entry.is_owned() and player.cash >= purchasable.price:
            actions.append(Action(ActionType.BUY_PROPERTY, position=player.position))

    actions.extend(_get_property_management_actions(game_state, player.player_id))
    actions.append(Action(ActionType.END_TURN))
    return actions


def _get_property_management_actions(game_state: GameState, player_id: str) -> List[Action]:
    """Get actions related to building and mortgaging."""
    actions: List[Action] = []
    player = game_state.players[player_id]
    ledger = game_state.ledger

    for position in sorted(ledger.owned_by(player_id)):
        entry = ledger.get(position)
        space = game_state.board.get_purchasable_space(position)

        prop = game_state.board.get_property_space(position)
        if (
            prop is not None
            and ledger.has_monopoly(position)
            and entry.level < ledger.max_level
            and player.cash >= prop.get_build_cost(entry.level)
        ):
            actions.append(Action(ActionType.BUILD, position=position))

        if not entry.is_mortgaged:
            actions.append(Action(ActionType.MORTGAGE_PROPERTY, position=position))
        elif player.cash >= ledger.unmortgage_cost(space):
            actions.append(Action(ActionType.UNMORTGAGE_PROPERTY, position=position))

    return actions


def apply_action(game_state: GameState, action: Action, player_id: Optional[str] = None) -> ActionResult:
    """
    Apply an action to the game state.

    This is the main interface for executing moves. Rule violations never
    escape: they come back as a failed ActionResult and a warning in the
    activity feed.

    Args:
        game_state: Current game state
        action: Action to apply
        player_id: Player executing the action (optional, defaults to current player)

    Returns:
        ActionResult with ok=True, or ok=False and the rejection reason
    """
    if player_id is None:
        player_id = game_state.get_current_player().player_id

    try:
        _dispatch(game_state, action, player_id)
    except InvalidActionError as e:
        logger.debug("Rejected %s for %s: %s", action, player_id, e.reason)
        game_state.log(
            Severity.WARN, e.reason, e.detail,
            event_type=EventType.REJECTED, player_id=player_id, action=action.action_type.value,
        )
        return ActionResult(False, e.reason)
    return ActionResult(True)


def _dispatch(game_state: GameState, action: Action, player_id: str) -> None:
    kind = action.action_type
    params = action.params

    if kind == ActionType.ROLL_DICE:
        if player_id != game_state.get_current_player().player_id:
            raise InvalidActionError("Not your turn")
        die1, die2 = game_state.roll_dice(params.get("dice"))
        new_position = game_state.move_player(player_id, die1 + die2)
        resolve_landing(game_state, player_id, new_position)

    elif kind == ActionType.BUY_PROPERTY:
        position = params.get("position", game_state.players[player_id].position)
        game_state.buy_property(player_id, position)

    elif kind == ActionType.BUILD:
        game_state.build(player_id, params["position"])

    elif kind == ActionType.MORTGAGE_PROPERTY:
        game_state.mortgage(player_id, params["position"])

    elif kind == ActionType.UNMORTGAGE_PROPERTY:
        game_state.unmortgage(player_id, params["position"])

    elif kind == ActionType.DRAW_CARD:
        _draw_from_current_tile(game_state, player_id, params.get("deck"))

    elif kind == ActionType.APPLY_CARD:
        game_state.apply_pending_card()

    elif kind == ActionType.PAY_BAIL:
        game_state.pay_bail(player_id)

    elif kind == ActionType.USE_JAIL_PASS:
        game_state.use_jail_release_token(player_id)

    elif kind == ActionType.END_TURN:
        if player_id != game_state.get_current_player().player_id:
            raise InvalidActionError("Not your turn")
        game_state.end_turn()

    else:
        raise InvalidActionError("Unknown action", str(kind))


def _draw_from_current_tile(game_state: GameState, player_id: str, deck: Optional[DeckType]) -> None:
    """Explicit draw by a player standing on a card tile."""
    if player_id != game_state.get_current_player().player_id:
        raise InvalidActionError("Not your turn")
    space = game_state.board.get_space(game_state.players[player_id].position)
    tile_deck = CARD_DECKS.get(space.space_type)
    if tile_deck is None or (deck is not None and DeckType(deck) != tile_deck):
        raise InvalidActionError("No card to draw", space.name)
    game_state.draw_card(tile_deck)


def resolve_landing(game_state: GameState, player_id: str, position: int) -> None:
    """
    Resolve the effects of landing on a tile.

    Card tiles open a card, tax and jail tiles apply at once, and owned tiles
    settle rent. Unowned tiles wait for an explicit purchase.
    """
    space = game_state.board.get_space(position)

    if space.space_type in CARD_DECKS:
        game_state.draw_card(CARD_DECKS[space.space_type])

    elif space.space_type == SpaceType.TAX:
        game_state.pay_tax(player_id, space.amount)

    elif space.space_type == SpaceType.GO_TO_JAIL:
        game_state.send_to_jail(player_id)

    elif space.is_purchasable:
        game_state.pay_rent(player_id, position)

    # Start, Jail (visiting) and Free Stop: nothing happens
