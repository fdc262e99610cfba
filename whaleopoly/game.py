"""
Main game engine and state management.
"""

import logging
import random
from enum import Enum
from typing import Dict, List, Optional, Tuple

from whaleopoly.activity import ActivityLog, EventType, Severity
from whaleopoly.board import BOARD_SIZE, JAIL_POSITION, Board
from whaleopoly.cards import Card, CardType, Deck, DeckType, create_chance_deck, create_chest_deck
from whaleopoly.config import GameConfig
from whaleopoly.exceptions import InvalidActionError
from whaleopoly.jail import JailTracker
from whaleopoly.ledger import PropertyLedger
from whaleopoly.player import Player, PlayerState, default_players
from whaleopoly.rent import calculate_rent
from whaleopoly.spaces import SpaceType

logger = logging.getLogger(__name__)

SEAT_COUNT = 4


class TurnPhase(Enum):
    """Where the active player is within their turn."""

    AWAITING_ROLL = "awaiting_roll"
    AWAITING_CARD = "awaiting_card"
    TURN_READY = "turn_ready"


def _money(amount: int) -> str:
    return f"{'+' if amount >= 0 else '-'}${abs(amount)}"


class GameState:
    """
    Represents the complete state of a Whale-opoly session.

    Every mutating method either applies fully or raises InvalidActionError
    before touching anything.
    """

    def __init__(self, config: GameConfig, players: List[Player]):
        if len(players) != SEAT_COUNT:
            raise ValueError(f"Whale-opoly seats exactly {SEAT_COUNT} players, got {len(players)}")

        self.config = config
        self.board = Board()
        self.activity = ActivityLog(config.activity_limit)

        self.rng = random.Random(config.seed)

        self.seats: List[Player] = list(players)
        self.players: Dict[str, PlayerState] = {
            p.player_id: PlayerState(p, config.starting_cash) for p in players
        }

        self.ledger = PropertyLedger(self.board, config.mortgage_interest_rate, config.max_development)
        self.jail = JailTracker(self.players.keys(), config.jail_turns)

        self.decks: Dict[DeckType, Deck] = {
            DeckType.CHANCE: create_chance_deck(self.rng),
            DeckType.CHEST: create_chest_deck(self.rng),
        }

        self.current_index = 0
        self.turn_number = 0
        self.last_dice: Optional[Tuple[int, int]] = None
        self.has_rolled = False
        self.pending_card: Optional[Card] = None

    @property
    def chance_deck(self) -> Deck:
        return self.decks[DeckType.CHANCE]

    @property
    def chest_deck(self) -> Deck:
        return self.decks[DeckType.CHEST]

    @property
    def last_roll_total(self) -> int:
        return sum(self.last_dice) if self.last_dice else 0

    @property
    def phase(self) -> TurnPhase:
        if self.pending_card is not None:
            return TurnPhase.AWAITING_CARD
        if self.has_rolled:
            return TurnPhase.TURN_READY
        return TurnPhase.AWAITING_ROLL

    def get_current_player(self) -> PlayerState:
        """Get the player whose turn it is."""
        return self.players[self.seats[self.current_index].player_id]

    def get_other_players(self, player_id: str) -> List[PlayerState]:
        return [self.players[p.player_id] for p in self.seats if p.player_id != player_id]

    def log(self, severity: Severity, title: str, body: str = "", **kwargs) -> None:
        self.activity.log(severity, title, body, **kwargs)

    # Preconditions

    def _require_no_pending_card(self) -> None:
        if self.pending_card is not None:
            raise InvalidActionError("Resolve card", "Apply first")

    def _require_active(self, player_id: str) -> PlayerState:
        current = self.get_current_player()
        if current.player_id != player_id:
            raise InvalidActionError("Not your turn", current.name)
        return current

    def check_can_roll(self) -> PlayerState:
        """Raise unless the active player may roll now."""
        self._require_no_pending_card()
        player = self.get_current_player()
        if self.jail.is_jailed(player.player_id):
            raise InvalidActionError(f"{player.name} is in Jail", "Pay bail or use pass")
        return player

    def check_can_buy(self, player_id: str, position: int) -> None:
        """Raise unless the player may buy the tile now."""
        self._require_no_pending_card()
        player = self._require_active(player_id)
        space = self.board.get_purchasable_space(position)
        if space is None:
            raise InvalidActionError("Not purchasable", self.board.get_space(position).name)
        if self.ledger.get(position).is_owned():
            raise InvalidActionError("Owned already", space.name)
        if player.cash < space.price:
            raise InvalidActionError("Need funds", f"${space.price}")

    # Dice and movement

    def roll_dice(self, dice: Optional[Tuple[int, int]] = None) -> Tuple[int, int]:
        """
        Roll two dice, or adopt an externally supplied pair.
        Updates game state with the roll.
        """
        player = self.check_can_roll()
        if dice is None:
            dice = (self.rng.randint(1, 6), self.rng.randint(1, 6))
        die1, die2 = dice
        if not (1 <= die1 <= 6 and 1 <= die2 <= 6):
            raise InvalidActionError("Bad dice", f"{die1} + {die2}")

        self.last_dice = (die1, die2)
        self.has_rolled = True
        logger.debug("%s rolled %d + %d", player.name, die1, die2)
        self.log(
            Severity.INFO,
            f"{player.name} rolled {die1 + die2}",
            f"{die1} + {die2}",
            event_type=EventType.DICE_ROLL,
            player_id=player.player_id,
        )
        return self.last_dice

    def move_player(self, player_id: str, steps: int) -> int:
        """
        Move a player forward by the specified number of tiles.
        Credits the go salary when the unwrapped position reaches the board size.
        Returns the new position.
        """
        player = self.players[player_id]
        old_position = player.position
        unwrapped = old_position + steps
        player.position = unwrapped % BOARD_SIZE

        if unwrapped >= BOARD_SIZE:
            self._collect_go(player_id)

        logger.debug("%s moved %d -> %d", player.name, old_position, player.position)
        return player.position

    def move_player_to(self, player_id: str, position: int, collect_go: bool = False) -> None:
        """Move a player to a specific tile, crediting go salary on wrap if asked."""
        player = self.players[player_id]
        old_position = player.position
        player.position = position % BOARD_SIZE

        if collect_go and old_position > player.position:
            self._collect_go(player_id)

    def _collect_go(self, player_id: str) -> None:
        """Player collects the go salary."""
        player = self.players[player_id]
        player.cash += self.config.go_salary
        self.log(
            Severity.GOOD,
            f"{player.name} passed Start",
            _money(self.config.go_salary),
            event_type=EventType.PASS_GO,
            player_id=player_id,
        )

    # Jail

    def send_to_jail(self, player_id: str) -> None:
        """Send a player to jail, resetting the sentence to the full length."""
        player = self.players[player_id]
        player.position = JAIL_POSITION
        self.jail.jail(player_id)
        self.log(
            Severity.WARN,
            f"{player.name} went to Jail",
            f"{self.config.jail_turns} turns or ${self.config.jail_fine}",
            event_type=EventType.GO_TO_JAIL,
            player_id=player_id,
        )

    def pay_bail(self, player_id: str) -> None:
        player = self._require_active(player_id)
        if not self.jail.is_jailed(player_id):
            raise InvalidActionError("Not in Jail", player.name)
        if player.cash < self.config.jail_fine:
            raise InvalidActionError(f"Need ${self.config.jail_fine}")

        player.cash -= self.config.jail_fine
        self.jail.release(player_id)
        self.log(
            Severity.GOOD, "Bail paid", "Freed",
            event_type=EventType.JAIL_RELEASE, player_id=player_id, method="bail",
        )

    def use_jail_release_token(self, player_id: str) -> None:
        player = self._require_active(player_id)
        if not self.jail.is_jailed(player_id):
            raise InvalidActionError("Not in Jail", player.name)
        if player.jail_release_tokens <= 0:
            raise InvalidActionError("No Jail Pass", player.name)

        player.jail_release_tokens -= 1
        self.jail.release(player_id)
        self.log(
            Severity.GOOD, "Jail Pass used", "Freed from Jail",
            event_type=EventType.JAIL_RELEASE, player_id=player_id, method="pass",
        )

    # Property ledger

    def buy_property(self, player_id: str, position: int) -> int:
        """Active player buys an unowned tile. Returns the price paid."""
        self.check_can_buy(player_id, position)
        player = self.players[player_id]
        price = self.ledger.buy(player, position)
        space = self.board.get_space(position)
        logger.info("%s bought %s for %d", player.name, space.name, price)
        self.log(
            Severity.GOOD, "Bought", f"{space.name} ${price}",
            event_type=EventType.PURCHASE, player_id=player_id, position=position,
        )
        return price

    def build(self, player_id: str, position: int) -> int:
        """Active player adds a house (or the hotel). Returns the cost paid."""
        self._require_no_pending_card()
        player = self._require_active(player_id)
        cost = self.ledger.build(player, position)
        entry = self.ledger.get(position)
        hotel = entry.has_hotel()
        self.log(
            Severity.GOOD,
            "Hotel built" if hotel else "House built",
            _money(-cost),
            event_type=EventType.BUILD_HOTEL if hotel else EventType.BUILD_HOUSE,
            player_id=player_id,
            position=position,
            level=entry.level,
        )
        return cost

    def mortgage(self, player_id: str, position: int) -> int:
        player = self._require_active(player_id)
        value = self.ledger.mortgage(player, position)
        self.log(
            Severity.INFO, "Mortgaged", _money(value),
            event_type=EventType.MORTGAGE, player_id=player_id, position=position,
        )
        return value

    def unmortgage(self, player_id: str, position: int) -> int:
        player = self._require_active(player_id)
        cost = self.ledger.unmortgage(player, position)
        self.log(
            Severity.INFO, "Unmortgaged", _money(-cost),
            event_type=EventType.UNMORTGAGE, player_id=player_id, position=position,
        )
        return cost

    def transfer_property(self, position: int, new_owner_id: Optional[str]) -> None:
        """Force a tile to a new owner, outside of normal purchase."""
        if new_owner_id is not None and new_owner_id not in self.players:
            raise InvalidActionError("Unknown player", new_owner_id)
        previous = self.ledger.transfer(position, new_owner_id)
        space = self.board.get_space(position)
        target = self.players[new_owner_id].name if new_owner_id else "Bank"
        self.log(
            Severity.INFO, "Transferred", f"{space.name} to {target}",
            event_type=EventType.TRANSFER, player_id=previous, position=position,
        )

    # Payments

    def calculate_rent(self, position: int, occupant_id: Optional[str] = None) -> int:
        return calculate_rent(self.board, self.ledger, position, occupant_id, self.last_roll_total)

    def pay_rent(self, payer_id: str, position: int) -> int:
        """
        Settle rent owed by the occupant of a tile.
        Balances may go negative; there is no bankruptcy step.
        """
        rent = self.calculate_rent(position, payer_id)
        if rent == 0:
            return 0

        owner_id = self.ledger.owner_of(position)
        payer = self.players[payer_id]
        owner = self.players[owner_id]
        payer.cash -= rent
        owner.cash += rent
        self.log(
            Severity.INFO,
            f"{payer.name} paid rent",
            f"-${rent} to {owner.name}",
            event_type=EventType.RENT_PAYMENT,
            player_id=payer_id,
            owner=owner_id,
            amount=rent,
        )
        return rent

    def pay_tax(self, player_id: str, amount: int) -> None:
        player = self.players[player_id]
        player.cash -= amount
        self.log(
            Severity.WARN, f"{player.name} paid Tax", _money(-amount),
            event_type=EventType.TAX_PAYMENT, player_id=player_id,
        )

    # Cards

    def draw_card(self, deck_type: DeckType) -> Card:
        """Draw the front card of a deck and hold it open for application."""
        self._require_no_pending_card()
        card = self.decks[deck_type].draw()
        self.pending_card = card
        self.log(
            Severity.INFO, card.title, card.text,
            event_type=EventType.CARD_DRAW,
            player_id=self.get_current_player().player_id,
            card_id=card.card_id,
        )
        return card

    def apply_pending_card(self) -> Card:
        """Execute the open card against the active player and close it."""
        card = self.pending_card
        if card is None:
            raise InvalidActionError("No card to apply")
        self.execute_card(card, self.get_current_player().player_id)
        self.pending_card = None
        return card

    def execute_card(self, card: Card, player_id: str) -> None:
        """Execute one card effect. Card moves do not resolve the landing tile."""
        player = self.players[player_id]
        kind = card.card_type
        details = {"event_type": EventType.CARD_EFFECT, "player_id": player_id, "card_id": card.card_id}

        if kind == CardType.MONEY:
            player.cash += card.amount
            severity = Severity.GOOD if card.amount >= 0 else Severity.WARN
            self.log(severity, card.title, _money(card.amount), **details)

        elif kind == CardType.MOVE:
            self.move_player_to(player_id, card.target_position, collect_go=card.pass_go)
            self.log(Severity.INFO, card.title, card.text, **details)

        elif kind == CardType.MOVE_REL:
            self.move_player_to(player_id, player.position + card.delta)
            self.log(Severity.INFO, card.title, card.text, **details)

        elif kind == CardType.GOTO_JAIL:
            player.position = JAIL_POSITION
            self.jail.jail(player_id)
            self.log(
                Severity.WARN, "Jail", f"{self.config.jail_turns} turns or pay ${self.config.jail_fine}",
                **details,
            )

        elif kind == CardType.JAIL_PASS:
            player.jail_release_tokens += 1
            self.log(Severity.GOOD, "Jail Pass acquired", "Stored until needed", **details)

        elif kind == CardType.COLLECT_EACH:
            others = self.get_other_players(player_id)
            for other in others:
                other.cash -= card.amount
            player.cash += card.amount * len(others)
            self.log(Severity.GOOD, card.title, f"+${card.amount} from each", **details)

        elif kind == CardType.PAY_EACH:
            others = self.get_other_players(player_id)
            for other in others:
                other.cash += card.amount
            player.cash -= card.amount * len(others)
            self.log(Severity.WARN, card.title, f"-${card.amount} to each", **details)

        elif kind == CardType.NEAREST_RAIL:
            target = self.board.find_nearest(player.position, SpaceType.RAILROAD)
            self.move_player_to(player_id, target)
            self.log(Severity.INFO, card.title, f"Moved to Rail {target}", **details)

        elif kind == CardType.NEAREST_UTILITY:
            target = self.board.find_nearest(player.position, SpaceType.UTILITY)
            self.move_player_to(player_id, target)
            self.log(Severity.INFO, card.title, f"Moved to Utility {target}", **details)

        elif kind == CardType.REPAIR:
            houses, hotels = self.ledger.development_totals()
            cost = houses * card.per_house + hotels * card.per_hotel
            player.cash -= cost
            self.log(Severity.WARN, card.title, f"-${cost}", **details)

        else:
            raise ValueError(f"Unhandled card type: {kind}")

    # Turn flow

    def end_turn(self) -> None:
        """
        Pass play to the next seat.
        Every jailed player's countdown drops by one, not just the active one's.
        """
        self._require_no_pending_card()
        player = self.get_current_player()
        self.current_index = (self.current_index + 1) % len(self.seats)
        self.turn_number += 1
        self.has_rolled = False
        self.jail.tick()
        nxt = self.get_current_player()
        logger.info("Turn %d: %s -> %s", self.turn_number, player.name, nxt.name)
        self.log(
            Severity.INFO, "Turn ended", f"{nxt.name} to play",
            event_type=EventType.END_TURN, player_id=player.player_id,
        )


def create_game(config: Optional[GameConfig] = None, players: Optional[List[Player]] = None) -> GameState:
    """Create a new session with canonical starting cash and positions."""
    return GameState(config or GameConfig(), players or default_players())
