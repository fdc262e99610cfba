"""
GameEngine: the single-writer handle a UI or adapter drives.

Wraps a GameState with the action entry points, read-only snapshots and the
optional remote authority.
"""

from __future__ import annotations

import asyncio
import copy
import logging
from typing import Any, Dict, List, Optional, Tuple

import httpx

from whaleopoly.cards import DeckType
from whaleopoly.config import GameConfig
from whaleopoly.exceptions import InvalidActionError, RemoteAuthorityError
from whaleopoly.game import GameState, create_game
from whaleopoly.player import Player
from whaleopoly.remote import HttpRemoteAuthority, RemoteAuthority
from whaleopoly.rules import Action, ActionResult, ActionType, apply_action, get_legal_actions
from whaleopoly.settings import RemoteAuthoritySettings, get_remote_settings
from whaleopoly.snapshot import serialize_snapshot

logger = logging.getLogger(__name__)


class GameEngine:
    """Use-case facade over one game session."""

    def __init__(
        self,
        state: Optional[GameState] = None,
        remote: Optional[RemoteAuthority] = None,
        game_id: int = 0,
        config: Optional[GameConfig] = None,
        players: Optional[List[Player]] = None,
    ):
        """
        Args:
            state: Existing session to take ownership of; a new one is created if omitted.
            remote: Optional authority consulted for rolls and purchases.
            game_id: Identifier of this session at the authority.
            config: Rules for a newly created session.
            players: Seats for a newly created session.
        """
        self._state: GameState = state or create_game(config, players)
        self.config = self._state.config
        self.remote = remote
        self.game_id = game_id

    @classmethod
    def from_settings(
        cls,
        settings: Optional[RemoteAuthoritySettings] = None,
        client: Optional[httpx.Client] = None,
        state: Optional[GameState] = None,
        config: Optional[GameConfig] = None,
        players: Optional[List[Player]] = None,
    ) -> "GameEngine":
        """
        Build an engine wired to the authority named in the environment.

        Without a configured base URL the engine plays purely locally.
        """
        settings = settings or get_remote_settings()
        remote = HttpRemoteAuthority.from_settings(settings, client)
        if remote is not None:
            logger.info("Using remote authority %s for game %d", settings.remote_base_url, settings.game_id)
        return cls(state, remote=remote, game_id=settings.game_id, config=config, players=players)

    # Queries

    def get_state(self) -> GameState:
        """Return a detached copy of the current state."""
        return copy.deepcopy(self._state)

    def snapshot(self) -> Dict[str, Any]:
        return serialize_snapshot(self._state)

    def legal_actions(self) -> List[Action]:
        return get_legal_actions(self._state)

    # Actions

    def roll(self) -> ActionResult:
        """Roll and resolve the landing tile in one step."""
        dice, rejected = self._prepare_roll()
        if rejected is not None:
            return rejected
        return self._apply(Action(ActionType.ROLL_DICE, dice=dice))

    async def roll_async(self) -> ActionResult:
        """
        Roll, wait out the presentation delay, then commit the movement.

        The delay only lets the caller animate the dice; the committed result
        does not depend on it.
        """
        dice, rejected = self._prepare_roll()
        if rejected is not None:
            return rejected
        await asyncio.sleep(self.config.roll_delay_seconds)
        return self._apply(Action(ActionType.ROLL_DICE, dice=dice))

    def apply(self, action: Action) -> ActionResult:
        """Route a legal-action entry to its entry point, so rolls and purchases reach the authority."""
        kind = action.action_type
        if kind == ActionType.ROLL_DICE and "dice" not in action.params:
            return self.roll()
        if kind == ActionType.BUY_PROPERTY:
            return self.buy(action.params.get("position", self._state.get_current_player().position))
        return self._apply(action)

    def buy(self, tile_id: int) -> ActionResult:
        try:
            self._state.check_can_buy(self._current_id(), tile_id)
        except InvalidActionError:
            # Let the rules layer report the rejection
            return self._apply(Action(ActionType.BUY_PROPERTY, position=tile_id))
        self._remote_purchase(tile_id)
        return self._apply(Action(ActionType.BUY_PROPERTY, position=tile_id))

    def build(self, tile_id: int) -> ActionResult:
        return self._apply(Action(ActionType.BUILD, position=tile_id))

    def mortgage(self, tile_id: int) -> ActionResult:
        return self._apply(Action(ActionType.MORTGAGE_PROPERTY, position=tile_id))

    def unmortgage(self, tile_id: int) -> ActionResult:
        return self._apply(Action(ActionType.UNMORTGAGE_PROPERTY, position=tile_id))

    def draw_card(self, deck: Optional[DeckType] = None) -> ActionResult:
        return self._apply(Action(ActionType.DRAW_CARD, deck=deck))

    def apply_pending_card(self) -> ActionResult:
        return self._apply(Action(ActionType.APPLY_CARD))

    def pay_bail(self) -> ActionResult:
        return self._apply(Action(ActionType.PAY_BAIL))

    def use_jail_release_token(self) -> ActionResult:
        return self._apply(Action(ActionType.USE_JAIL_PASS))

    def end_turn(self) -> ActionResult:
        return self._apply(Action(ActionType.END_TURN))

    # Helpers

    def _current_id(self) -> str:
        return self._state.get_current_player().player_id

    def _apply(self, action: Action) -> ActionResult:
        return apply_action(self._state, action, self._current_id())

    def _prepare_roll(self) -> Tuple[Optional[Tuple[int, int]], Optional[ActionResult]]:
        """Check the roll is allowed, then pick dice: remote if it answers, local otherwise."""
        try:
            self._state.check_can_roll()
        except InvalidActionError:
            return None, self._apply(Action(ActionType.ROLL_DICE))
        dice = self._remote_roll()
        if dice is None:
            rng = self._state.rng
            dice = (rng.randint(1, 6), rng.randint(1, 6))
        return dice, None

    def _remote_roll(self) -> Optional[Tuple[int, int]]:
        if self.remote is None:
            return None
        try:
            dice = self.remote.remote_roll(self.game_id)
        except RemoteAuthorityError as e:
            logger.warning("Remote roll unavailable, rolling locally: %s", e)
            return None
        if dice is None:
            return None
        d1, d2 = dice
        if not (1 <= d1 <= 6 and 1 <= d2 <= 6):
            logger.warning("Remote roll out of range %s, rolling locally", dice)
            return None
        return d1, d2

    def _remote_purchase(self, tile_id: int) -> None:
        """Submit the purchase to the authority; an unconfirmed purchase still completes locally."""
        if self.remote is None:
            return
        try:
            confirmed = self.remote.remote_purchase(self.game_id, tile_id)
        except RemoteAuthorityError as e:
            logger.warning("Remote purchase unavailable, buying locally: %s", e)
            return
        if confirmed is True:
            logger.debug("Remote confirmed purchase of tile %d", tile_id)
        else:
            logger.warning("Remote did not confirm purchase of tile %d (%r), buying locally", tile_id, confirmed)
