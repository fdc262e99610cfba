"""
Property ownership, development and mortgage ledger.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from whaleopoly.board import Board
from whaleopoly.exceptions import InvalidActionError
from whaleopoly.player import PlayerState
from whaleopoly.spaces import PurchasableSpace

HOTEL_LEVEL = 5


@dataclass
class PropertyEntry:
    """Tracks ownership state of a purchasable tile."""

    owner_id: Optional[str] = None
    level: int = 0
    is_mortgaged: bool = False

    def is_owned(self) -> bool:
        """Check if the tile is owned by any player."""
        return self.owner_id is not None

    def has_hotel(self) -> bool:
        """Check if the tile has a hotel (represented as level 5)."""
        return self.level == HOTEL_LEVEL


class PropertyLedger:
    """
    Ownership table for every purchasable tile on the board.

    Mutating operations validate their preconditions and raise
    InvalidActionError with a player-facing reason when they do not hold.
    """

    def __init__(self, board: Board, interest_rate: float = 0.10, max_level: int = HOTEL_LEVEL):
        self.board = board
        self.interest_rate = interest_rate
        self.max_level = max_level
        self.entries: Dict[int, PropertyEntry] = {
            position: PropertyEntry() for position in board.get_purchasable_positions()
        }

    def get(self, position: int) -> Optional[PropertyEntry]:
        return self.entries.get(position)

    def owner_of(self, position: int) -> Optional[str]:
        entry = self.entries.get(position)
        return entry.owner_id if entry else None

    def owned_by(self, player_id: str) -> List[int]:
        return [pos for pos, entry in self.entries.items() if entry.owner_id == player_id]

    def __iter__(self) -> Iterator[Tuple[int, PropertyEntry]]:
        return iter(sorted(self.entries.items()))

    # Queries

    def has_monopoly(self, position: int) -> bool:
        """
        True iff every tile in this tile's color group has the same owner.

        Mortgages do not break a monopoly; tiles without a color group never
        form one.
        """
        space = self.board.get_property_space(position)
        if space is None:
            return False
        owners = {self.entries[pos].owner_id for pos in self.board.get_color_group(space.color_group)}
        return len(owners) == 1 and None not in owners

    def count_owned(self, player_id: str, positions: List[int]) -> int:
        return sum(1 for pos in positions if self.entries[pos].owner_id == player_id)

    def railroads_owned(self, player_id: str) -> int:
        return self.count_owned(player_id, self.board.get_all_railroads())

    def utilities_owned(self, player_id: str) -> int:
        return self.count_owned(player_id, self.board.get_all_utilities())

    def development_totals(self) -> Tuple[int, int]:
        """Return (houses, hotels) standing on the whole board."""
        houses = sum(e.level for e in self.entries.values() if 0 < e.level < HOTEL_LEVEL)
        hotels = sum(1 for e in self.entries.values() if e.level == HOTEL_LEVEL)
        return houses, hotels

    def unmortgage_cost(self, space: PurchasableSpace) -> int:
        """Mortgage value plus interest, truncated to whole currency."""
        return int(space.mortgage_value * (1 + self.interest_rate))

    def _purchasable(self, position: int) -> Tuple[PurchasableSpace, PropertyEntry]:
        space = self.board.get_purchasable_space(position)
        if space is None:
            raise InvalidActionError("Not purchasable", self.board.get_space(position).name)
        return space, self.entries[position]

    def _owned_by(self, player: PlayerState, position: int) -> Tuple[PurchasableSpace, PropertyEntry]:
        space, entry = self._purchasable(position)
        if entry.owner_id != player.player_id:
            raise InvalidActionError("Not owner", space.name)
        return space, entry

    # Mutations

    def buy(self, player: PlayerState, position: int) -> int:
        """Assign an unowned tile to the player. Returns the price paid."""
        space, entry = self._purchasable(position)
        if entry.is_owned():
            raise InvalidActionError("Owned already", space.name)
        if player.cash < space.price:
            raise InvalidActionError("Need funds", f"${space.price}")

        player.cash -= space.price
        entry.owner_id = player.player_id
        return space.price

    def build(self, player: PlayerState, position: int) -> int:
        """Add one development level. Returns the cost paid."""
        space = self.board.get_property_space(position)
        if space is None:
            raise InvalidActionError("Cannot build here", self.board.get_space(position).name)
        entry = self.entries[position]
        if entry.owner_id != player.player_id:
            raise InvalidActionError("Not owner", space.name)
        if not self.has_monopoly(position):
            raise InvalidActionError("Need set", space.color_group)
        if entry.level >= self.max_level:
            raise InvalidActionError("Max built", space.name)

        cost = space.get_build_cost(entry.level)
        if player.cash < cost:
            raise InvalidActionError("Need funds", f"${cost}")

        player.cash -= cost
        entry.level += 1
        return cost

    def mortgage(self, player: PlayerState, position: int) -> int:
        """Mortgage a tile. Returns the cash advanced."""
        space, entry = self._owned_by(player, position)
        if entry.is_mortgaged:
            raise InvalidActionError("Already mortgaged", space.name)

        value = space.mortgage_value
        player.cash += value
        entry.is_mortgaged = True
        return value

    def unmortgage(self, player: PlayerState, position: int) -> int:
        """Lift a mortgage. Returns the cost paid including interest."""
        space, entry = self._owned_by(player, position)
        if not entry.is_mortgaged:
            raise InvalidActionError("Not mortgaged", space.name)

        cost = self.unmortgage_cost(space)
        if player.cash < cost:
            raise InvalidActionError("Need funds", f"${cost}")

        player.cash -= cost
        entry.is_mortgaged = False
        return cost

    def transfer(self, position: int, new_owner_id: Optional[str]) -> Optional[str]:
        """
        Force ownership of a tile to another player (or back to the bank).

        Development level and mortgage flag move with the tile.
        Returns the previous owner.
        """
        space, entry = self._purchasable(position)
        previous = entry.owner_id
        entry.owner_id = new_owner_id
        if new_owner_id is None:
            entry.level = 0
            entry.is_mortgaged = False
        return previous

