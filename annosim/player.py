"""Player state and economy."""

from dataclasses import dataclass, field
from enum import IntEnum

from annosim.gametypes import NUM_POP_TIERS

MAX_PLAYERS = 7
NUM_DEMAND_CATEGORIES = 8
BANKRUPTCY_THRESHOLD = -1001
BANKRUPTCY_GAME_OVER_TICKS = 40
STARTING_GOLD = 20000


class PlayerState(IntEnum):
    """Control state of a player slot."""

    HUMAN_ACTIVE = 0
    EMPTY = 7
    AI_DEFENDING = 11
    AI_ACTIVE = 12
    AI_ALLIED = 13
    DEFEATED = 14


@dataclass
class DemandSlot:
    """Demand and supply for one demand category."""

    demand: int = 0
    supply: int = 0
    fulfillment_history: list = field(default_factory=lambda: [0, 0, 0, 0])


def _trunc_div(a, b):
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


@dataclass
class Player:
    """A player's settlement and treasury."""

    state: PlayerState = PlayerState.HUMAN_ACTIVE
    gold: int = STARTING_GOLD
    color_index: int = 0
    population: list = field(default_factory=lambda: [0] * NUM_POP_TIERS)
    satisfaction: list = field(default_factory=lambda: [128] * NUM_POP_TIERS)
    tax_rates: list = field(default_factory=lambda: [64] * NUM_POP_TIERS)
    demands: list = field(
        default_factory=lambda: [DemandSlot() for _ in range(NUM_DEMAND_CATEGORIES)]
    )
    building_maintenance: int = 0
    military_maintenance: int = 0
    total_population: int = 0
    bankruptcy_ticks: int = 0
    ai_personality: int = 0

    @classmethod
    def new_human(cls, color_index):
        """A human player with standard starting values."""
        return cls(color_index=color_index)

    @classmethod
    def new_ai(cls, color_index, personality):
        """An active computer player."""
        return cls(
            state=PlayerState.AI_ACTIVE,
            color_index=color_index,
            ai_personality=personality,
        )

    def calculate_income(self):
        """Tax income summed over all tiers."""
        return sum(
            (pop * tax * sat) // (128 * 128)
            for pop, tax, sat in zip(self.population, self.tax_rates, self.satisfaction)
        )

    def calculate_costs(self):
        """Total running costs per tick."""
        return self.building_maintenance + self.military_maintenance

    def net_balance(self):
        """Balance applied per economy tick: (income - costs) / 6."""
        return _trunc_div(self.calculate_income() - self.calculate_costs(), 6)

    def is_bankrupt(self):
        return self.gold < BANKRUPTCY_THRESHOLD

    def is_game_over(self):
        return self.bankruptcy_ticks >= BANKRUPTCY_GAME_OVER_TICKS

    def count_population(self):
        """Sum of population over all tiers."""
        return sum(self.population)