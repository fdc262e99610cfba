from typing import Dict, List, Optional

from whaleopoly.exceptions import InvalidActionError
from whaleopoly.spaces import (
    Space,
    SpaceType,
    StartSpace,
    PropertySpace,
    PurchasableSpace,
    RailroadSpace,
    UtilitySpace,
    TaxSpace,
    ChanceSpace,
    ChestSpace,
    JailSpace,
    GoToJailSpace,
    FreeStopSpace,
)

BOARD_SIZE = 40
JAIL_POSITION = 10
GO_TO_JAIL_POSITION = 30


class Board:
    """The Whale-opoly board with 40 tiles."""

    def __init__(self):
        self.spaces: List[Space] = self._create_standard_board()
        self.color_groups: Dict[str, List[int]] = self._build_color_groups()

    def _create_standard_board(self) -> List[Space]:
        """Create the 40-tile ocean board."""
        return [
            # Bottom row (0-10)
            StartSpace(0),
            PropertySpace("Reef Row", 1, 60, "lightblue", "#9ad0f5", 50),
            ChestSpace(2),
            PropertySpace("Coral Cove", 3, 60, "lightblue", "#9ad0f5", 50),
            TaxSpace("Tax", 4),
            RailroadSpace("Harbor Rail", 5),
            PropertySpace("Kelp Keys", 6, 100, "green", "#c7e59f", 50),
            ChanceSpace(7),
            PropertySpace("Tide Terrace", 8, 100, "green", "#c7e59f", 50),
            PropertySpace("Lagoon Lane", 9, 120, "green", "#c7e59f", 50),
            JailSpace(JAIL_POSITION),
            # Left side (11-20)
            PropertySpace("Pearl Plaza", 11, 140, "purple", "#d9a4f3", 100),
            UtilitySpace("Power Plant", 12),
            PropertySpace("Shell Square", 13, 140, "purple", "#d9a4f3", 100),
            PropertySpace("Trident Trail", 14, 160, "purple", "#d9a4f3", 100),
            RailroadSpace("Mariner Rail", 15),
            PropertySpace("Barnacle Blvd", 16, 180, "orange", "#f6d47c", 100),
            ChestSpace(17),
            PropertySpace("Seagrass St", 18, 180, "orange", "#f6d47c", 100),
            PropertySpace("Whale Way", 19, 200, "orange", "#f6d47c", 100),
            FreeStopSpace(20),
            # Top row (21-30)
            PropertySpace("Anchor Ave", 21, 220, "teal", "#7fc9b0", 150),
            ChanceSpace(22),
            PropertySpace("Current Ct", 23, 220, "teal", "#7fc9b0", 150),
            PropertySpace("Harpoon Hwy", 24, 240, "teal", "#7fc9b0", 150),
            RailroadSpace("Seafarer Rail", 25),
            PropertySpace("Driftwood Dr", 26, 260, "salmon", "#e7a592", 150),
            PropertySpace("Gull Grove", 27, 260, "salmon", "#e7a592", 150),
            UtilitySpace("Water Works", 28),
            PropertySpace("Marlin Meadows", 29, 280, "salmon", "#e7a592", 150),
            GoToJailSpace(GO_TO_JAIL_POSITION),
            # Right side (31-39)
            PropertySpace("Siren St", 31, 300, "blue", "#7fb2f0", 200),
            PropertySpace("Net Nook", 32, 300, "blue", "#7fb2f0", 200),
            ChestSpace(33),
            PropertySpace("Kraken Knoll", 34, 320, "blue", "#7fb2f0", 200),
            RailroadSpace("Deep Rail", 35),
            ChanceSpace(36),
            PropertySpace("Poseidon Pl", 37, 350, "darkblue", "#3aa3e3", 200),
            TaxSpace("Luxury Tax", 38),
            PropertySpace("Leviathan Lp", 39, 400, "darkblue", "#3aa3e3", 200),
        ]

    def _build_color_groups(self) -> Dict[str, List[int]]:
        """Build a mapping of color groups to property positions."""
        groups: Dict[str, List[int]] = {}
        for space in self.spaces:
            if isinstance(space, PropertySpace):
                groups.setdefault(space.color_group, []).append(space.position)
        return groups

    def get_space(self, position: int) -> Space:
        """Get the tile at the given position; ids outside the board are rejected."""
        if not 0 <= position < BOARD_SIZE:
            raise InvalidActionError("No such tile", str(position))
        return self.spaces[position]

    def get_purchasable_space(self, position: int) -> Optional[PurchasableSpace]:
        """Get a property, railroad or utility tile, or None."""
        space = self.get_space(position)
        return space if isinstance(space, PurchasableSpace) else None

    def get_property_space(self, position: int) -> Optional[PropertySpace]:
        """Get an ordinary property tile, or None if not a property."""
        space = self.get_space(position)
        return space if isinstance(space, PropertySpace) else None

    def get_color_group(self, color: str) -> List[int]:
        """Get all property positions in a color group."""
        return self.color_groups.get(color, [])

    def get_all_railroads(self) -> List[int]:
        return [s.position for s in self.spaces if isinstance(s, RailroadSpace)]

    def get_all_utilities(self) -> List[int]:
        return [s.position for s in self.spaces if isinstance(s, UtilitySpace)]

    def get_purchasable_positions(self) -> List[int]:
        return [s.position for s in self.spaces if isinstance(s, PurchasableSpace)]

    def find_nearest(self, position: int, space_type: SpaceType) -> int:
        """
        Find the next tile of a kind moving forward from a position.

        The starting tile itself is never returned, so a player already on a
        railroad advances to the following one.
        """
        for offset in range(1, BOARD_SIZE + 1):
            pos = (position + offset) % BOARD_SIZE
            if self.spaces[pos].space_type == space_type:
                return pos
        return position

    def find_nearest_railroad(self, position: int) -> int:
        return self.find_nearest(position, SpaceType.RAILROAD)

    def find_nearest_utility(self, position: int) -> int:
        return self.find_nearest(position, SpaceType.UTILITY)
