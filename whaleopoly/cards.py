"""
Chance and community Chest card system.
"""

import random
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Deque, List, Optional


class DeckType(Enum):
    """The two themed decks."""

    CHANCE = "chance"
    CHEST = "chest"


class CardType(Enum):
    """Types of card effects."""

    MONEY = "money"
    MOVE = "move"
    MOVE_REL = "move_rel"
    GOTO_JAIL = "goto_jail"
    JAIL_PASS = "jail_pass"
    COLLECT_EACH = "collect_each"
    PAY_EACH = "pay_each"
    NEAREST_RAIL = "nearest_rail"
    NEAREST_UTILITY = "nearest_utility"
    REPAIR = "repair"


@dataclass(frozen=True)
class Card:
    """Represents a Chance or Chest card."""

    card_id: str
    deck: DeckType
    title: str
    text: str
    card_type: CardType
    amount: int = 0  # MONEY (signed), COLLECT_EACH, PAY_EACH
    target_position: Optional[int] = None  # MOVE
    pass_go: bool = False  # MOVE
    delta: int = 0  # MOVE_REL
    per_house: int = 0  # REPAIR
    per_hotel: int = 0  # REPAIR
    keep: bool = False

    def __repr__(self) -> str:
        return f"Card('{self.card_id}', '{self.title}')"


class Deck:
    """
    A circular deck of cards.

    Drawing takes the front card and puts it straight back at the bottom,
    except for keepable cards, which leave the deck for good.
    """

    def __init__(self, deck_type: DeckType, cards: List[Card], rng: Optional[random.Random] = None):
        self.deck_type = deck_type
        ordered = list(cards)
        if rng is not None:
            rng.shuffle(ordered)
        self.cards: Deque[Card] = deque(ordered)
        self.withdrawn: List[Card] = []

    def draw(self) -> Card:
        """Draw the front card, requeueing it unless it is keepable."""
        if not self.cards:
            raise IndexError(f"{self.deck_type.value} deck is empty")
        card = self.cards.popleft()
        if card.keep:
            self.withdrawn.append(card)
        else:
            self.cards.append(card)
        return card

    def peek(self) -> Optional[Card]:
        return self.cards[0] if self.cards else None

    def __len__(self) -> int:
        return len(self.cards)


def create_chance_deck(rng: Optional[random.Random] = None) -> Deck:
    """Create the standard Chance deck."""
    chance = DeckType.CHANCE
    cards = [
        Card("c1", chance, "Advance to Start", "Collect $200", CardType.MOVE, target_position=0, pass_go=True),
        Card("c2", chance, "Bank error", "Collect $75", CardType.MONEY, amount=75),
        Card("c3", chance, "Pay fine", "Pay $50", CardType.MONEY, amount=-50),
        Card("c4", chance, "Speeding fine", "Pay $15", CardType.MONEY, amount=-15),
        Card("c5", chance, "Go to Jail", "Go directly to Jail", CardType.GOTO_JAIL),
        Card("c6", chance, "Get Out of Jail Free", "Keep until needed", CardType.JAIL_PASS, keep=True),
        Card("c7", chance, "Advance 3", "Move forward 3 tiles", CardType.MOVE_REL, delta=3),
        Card("c8", chance, "Go Back 2", "Move back 2 tiles", CardType.MOVE_REL, delta=-2),
        Card("c9", chance, "Nearest Rail", "Advance to nearest rail & pay rent", CardType.NEAREST_RAIL),
        Card("c10", chance, "Nearest Utility", "Advance to nearest utility", CardType.NEAREST_UTILITY),
        Card(
            "c11", chance, "Repairs", "Pay $25 per house / $100 per hotel",
            CardType.REPAIR, per_house=25, per_hotel=100,
        ),
        Card("c12", chance, "Collect from each", "Collect $10 from each player", CardType.COLLECT_EACH, amount=10),
    ]
    return Deck(chance, cards, rng)


def create_chest_deck(rng: Optional[random.Random] = None) -> Deck:
    """Create the standard community Chest deck."""
    chest = DeckType.CHEST
    cards = [
        Card("h1", chest, "Consulting fee", "Collect $25", CardType.MONEY, amount=25),
        Card("h2", chest, "Doctor fee", "Pay $50", CardType.MONEY, amount=-50),
        Card("h3", chest, "Tax refund", "Collect $20", CardType.MONEY, amount=20),
        Card("h4", chest, "Get Out of Jail Free", "Keep until needed", CardType.JAIL_PASS, keep=True),
        Card("h5", chest, "Advance to Start", "Collect $200", CardType.MOVE, target_position=0, pass_go=True),
        Card("h6", chest, "Birthday", "Collect $10 from each player", CardType.COLLECT_EACH, amount=10),
        Card("h7", chest, "School fees", "Pay $50", CardType.MONEY, amount=-50),
        Card("h8", chest, "Hospital fees", "Pay $100", CardType.MONEY, amount=-100),
        Card("h9", chest, "You inherit", "Collect $100", CardType.MONEY, amount=100),
        Card("h10", chest, "Charity donation", "Pay $20", CardType.MONEY, amount=-20),
        Card(
            "h11", chest, "Repair assets", "Pay $40 per house / $115 per hotel",
            CardType.REPAIR, per_house=40, per_hotel=115,
        ),
        Card("h12", chest, "Move forward 1", "Advance 1 tile", CardType.MOVE_REL, delta=1),
    ]
    return Deck(chest, cards, rng)
