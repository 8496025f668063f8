"""Core game enumerations and timing constants."""

from enum import IntEnum

NUM_POP_TIERS = 5

TICKS_PER_MINUTE = 600
TICKS_PER_SECOND = 10


class PopTier(IntEnum):
    """Population tiers, lowest first."""

    PIONEER = 0
    SETTLER = 1
    CITIZEN = 2
    MERCHANT = 3
    ARISTOCRAT = 4


class Good(IntEnum):
    """Goods and resource types."""

    NONE = 0
    WOOD = 1
    IRON = 2
    GOLD = 3
    WOOL = 4
    SUGAR = 5
    TOBACCO = 6
    CATTLE = 7
    GRAIN = 8
    FLOUR = 9
    TOOLS = 10
    BRICKS = 11
    SWORDS = 12
    MUSKETS = 13
    CANNONS = 14
    FOOD = 15
    CLOTH = 16
    ALCOHOL = 17
    TOBACCO_PRODUCTS = 18
    SPICES = 19
    COCOA = 20
    GRAPES = 21
    STONE = 22
    ORE = 23
    GOLD_ORE = 24
    HIDES = 25
    COTTON = 26
    SILK = 27
    JEWELRY = 28
    CLOTHING = 29
    FISH = 30

    @classmethod
    def from_value(cls, value):
        """Return the good with this numeric value, or NONE if unknown."""
        try:
            return cls(value)
        except ValueError:
            return cls.NONE


class MilitaryUnit(IntEnum):
    """Land military unit kinds."""

    SWORDSMAN = 1
    CAVALRY = 2
    MUSKETEER = 3
    CANNONEER = 4


class ProductionType(IntEnum):
    """Production building type."""

    CRAFT = 1
    PLANTATION = 2
    MINE = 3
    RESIDENCE = 7
    FIRE = 9
    VOLCANO = 10


class Difficulty(IntEnum):
    """Game difficulty level."""

    EASY = 0
    MEDIUM = 1
    HARD = 2