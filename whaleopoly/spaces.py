"""
Board tile definitions and types.
"""

from dataclasses import dataclass
from enum import Enum


class SpaceType(Enum):
    """Kinds of tiles on the board."""

    START = "corner"
    PROPERTY = "property"
    CHANCE = "chance"
    CHEST = "chest"
    TAX = "tax"
    RAILROAD = "rail"
    UTILITY = "utility"
    GO_TO_JAIL = "gotojail"
    JAIL = "jail"
    FREE_STOP = "free"


PURCHASABLE_TYPES = (SpaceType.PROPERTY, SpaceType.RAILROAD, SpaceType.UTILITY)


@dataclass
class Space:
    """Base class for a board tile."""

    name: str
    position: int
    space_type: SpaceType

    @property
    def is_purchasable(self) -> bool:
        return self.space_type in PURCHASABLE_TYPES

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}', position={self.position})"


@dataclass
class StartSpace(Space):
    """The Start corner; passing it pays the go salary."""

    def __init__(self, position: int = 0):
        super().__init__("Start", position, SpaceType.START)


@dataclass
class PurchasableSpace(Space):
    """A tile that can be bought and mortgaged."""

    price: int

    def __init__(self, name: str, position: int, space_type: SpaceType, price: int):
        super().__init__(name, position, space_type)
        self.price = price

    @property
    def mortgage_value(self) -> int:
        """Cash advanced when mortgaging: half the price, rounded down."""
        return self.price // 2


@dataclass
class PropertySpace(PurchasableSpace):
    """An ordinary property that belongs to a color group and can be developed."""

    color_group: str
    color: str
    house_cost: int

    def __init__(
        self,
        name: str,
        position: int,
        price: int,
        color_group: str,
        color: str,
        house_cost: int,
    ):
        super().__init__(name, position, SpaceType.PROPERTY, price)
        self.color_group = color_group
        self.color = color
        self.house_cost = house_cost

    def get_build_cost(self, current_level: int) -> int:
        """
        Cost of adding one development level.

        Args:
            current_level: Development level before building (0-4)

        Returns:
            The house cost, doubled for the step from 4 houses to a hotel
        """
        if current_level == 4:
            return self.house_cost * 2
        return self.house_cost


@dataclass
class RailroadSpace(PurchasableSpace):
    """A railroad tile."""

    def __init__(self, name: str, position: int, price: int = 200):
        super().__init__(name, position, SpaceType.RAILROAD, price)


@dataclass
class UtilitySpace(PurchasableSpace):
    """A utility tile (Power Plant or Water Works)."""

    def __init__(self, name: str, position: int, price: int = 150):
        super().__init__(name, position, SpaceType.UTILITY, price)


@dataclass
class TaxSpace(Space):
    """A tax tile."""

    amount: int

    def __init__(self, name: str, position: int, amount: int = 100):
        super().__init__(name, position, SpaceType.TAX)
        self.amount = amount


@dataclass
class ChanceSpace(Space):
    """A Chance card tile."""

    def __init__(self, position: int):
        super().__init__("Chance", position, SpaceType.CHANCE)


@dataclass
class ChestSpace(Space):
    """A community Chest card tile."""

    def __init__(self, position: int):
        super().__init__("Chest", position, SpaceType.CHEST)


@dataclass
class JailSpace(Space):
    """The Jail / Just Visiting corner."""

    def __init__(self, position: int = 10):
        super().__init__("Jail | Visiting", position, SpaceType.JAIL)


@dataclass
class GoToJailSpace(Space):
    """The Go To Jail corner."""

    def __init__(self, position: int = 30):
        super().__init__("Go To Jail", position, SpaceType.GO_TO_JAIL)


@dataclass
class FreeStopSpace(Space):
    """The Free Stop corner."""

    def __init__(self, position: int = 20):
        super().__init__("Free Stop", position, SpaceType.FREE_STOP)
