"""
Rent calculation for property, railroad and utility tiles.
"""

from typing import Optional

from whaleopoly.board import Board
from whaleopoly.ledger import PropertyLedger
from whaleopoly.spaces import PropertySpace, RailroadSpace, UtilitySpace

RAILROAD_RENTS = (0, 25, 50, 100, 200)
DEFAULT_DICE_TOTAL = 7


def property_rent(price: int, level: int) -> int:
    """Rent on an ordinary property: 10% of price (at least 10) plus 10 per level."""
    return max(10, price // 10) + level * 10


def railroad_rent(railroads_owned: int) -> int:
    return RAILROAD_RENTS[railroads_owned]


def utility_rent(utilities_owned: int, dice_total: Optional[int]) -> int:
    """
    Rent on a utility: 10x the dice with both utilities owned, 4x otherwise.

    Uses the most recent dice total at settlement time, never a fresh roll.
    """
    if not dice_total:
        dice_total = DEFAULT_DICE_TOTAL
    multiplier = 10 if utilities_owned == 2 else 4
    return multiplier * max(2, dice_total)


def calculate_rent(
    board: Board,
    ledger: PropertyLedger,
    position: int,
    occupant_id: Optional[str] = None,
    dice_total: Optional[int] = None,
) -> int:
    """
    Calculate the rent owed for landing on a tile.

    Args:
        board: The board the ledger describes
        ledger: Current ownership state
        position: Tile being settled
        occupant_id: Player standing on the tile; no rent is owed to oneself
        dice_total: Most recent dice total (needed for utilities)

    Returns:
        Rent amount, 0 for unowned, mortgaged or self-owned tiles
    """
    entry = ledger.get(position)
    if entry is None or not entry.is_owned() or entry.is_mortgaged:
        return 0
    if occupant_id is not None and entry.owner_id == occupant_id:
        return 0

    space = board.get_space(position)
    if isinstance(space, RailroadSpace):
        return railroad_rent(ledger.railroads_owned(entry.owner_id))
    if isinstance(space, UtilitySpace):
        return utility_rent(ledger.utilities_owned(entry.owner_id), dice_total)
    if isinstance(space, PropertySpace):
        return property_rent(space.price, entry.level)
    return 0
