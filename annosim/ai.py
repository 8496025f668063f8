"""Decision-making for computer-controlled players.

Each controller runs on cooldown timers counted in economy ticks, so that a
player does not issue a fresh decision of every kind on every tick.
"""

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum

from annosim.gametypes import NUM_POP_TIERS, Good
from annosim.player import PlayerState

MIN_GOLD_TO_BUILD = 500
MILITARY_MIN_GOLD = 2000
MILITARY_MIN_POPULATION = 100
MILITARY_COOLDOWN_TICKS = 10
BALANCED_MILITARY_POPULATION = 200
TAX_RAISE_SATISFACTION = 96
TAX_RAISE_GOLD_LIMIT = 3000
TAX_LOWER_SATISFACTION = 64
TAX_FLOOR = 32
TAX_CEILING = 96
TAX_STEP = 8
SELL_GOLD_LIMIT = 1000


class AiPersonality(IntEnum):
    """Strategy a computer player follows."""

    ECONOMIC = 0
    MILITARY = 1
    BALANCED = 2


class Difficulty(IntEnum):
    """Computer player difficulty; scales unit counts and build speed."""

    EASY = 0
    MEDIUM = 1
    HARD = 2
    EXPERT = 3


@dataclass(frozen=True)
class BuildPriority:
    """One entry of the construction order."""

    good: Good
    min_population: int
    max_count: int


@dataclass(frozen=True)
class RequestBuild:
    """Ask for a building producing ``good``."""

    good: Good
    priority: int


@dataclass(frozen=True)
class RequestMilitary:
    """Ask for military units to be produced."""

    unit_count: int


@dataclass(frozen=True)
class SetTaxRate:
    """Change the tax rate of a population tier."""

    tier: int
    rate: int


@dataclass(frozen=True)
class SellExcess:
    """Sell surplus warehouse goods for gold."""


ECONOMIC_PRIORITIES = (
    BuildPriority(Good.FOOD, 0, 2),
    BuildPriority(Good.CLOTH, 0, 1),
    BuildPriority(Good.FOOD, 100, 4),
    BuildPriority(Good.CLOTH, 100, 2),
    BuildPriority(Good.ALCOHOL, 200, 2),
    BuildPriority(Good.TOBACCO_PRODUCTS, 300, 1),
    BuildPriority(Good.SPICES, 300, 1),
    BuildPriority(Good.TOOLS, 200, 1),
    BuildPriority(Good.BRICKS, 200, 1),
    BuildPriority(Good.COCOA, 500, 1),
    BuildPriority(Good.JEWELRY, 500, 1),
)

_MILITARY_TARGETS = {
    Difficulty.EASY: 1,
    Difficulty.MEDIUM: 3,
    Difficulty.HARD: 6,
    Difficulty.EXPERT: 12,
}

_BUILD_INTERVALS = {
    Difficulty.EASY: 8,
    Difficulty.MEDIUM: 5,
    Difficulty.HARD: 3,
    Difficulty.EXPERT: 2,
}


@dataclass
class AiController:
    """State of one computer player's decision-making."""

    player_idx: int
    personality: AiPersonality
    difficulty: Difficulty
    build_cooldown: int = 0
    military_cooldown: int = 0
    trade_cooldown: int = 0
    build_phase: int = 0
    buildings_placed: int = 0

    def tick(self, player, buildings, building_defs, warehouses):
        """Run one economy tick and return the actions the player wants to take."""
        if player.state != PlayerState.AI_ACTIVE:
            return []

        self.build_cooldown = max(self.build_cooldown - 1, 0)
        self.military_cooldown = max(self.military_cooldown - 1, 0)
        self.trade_cooldown = max(self.trade_cooldown - 1, 0)

        actions = []
        actions.extend(self._tick_economic(player, buildings, building_defs))
        if self.personality == AiPersonality.MILITARY or (
            self.personality == AiPersonality.BALANCED
            and player.total_population > BALANCED_MILITARY_POPULATION
        ):
            actions.extend(self._tick_military(player))

        actions.extend(self.adjust_taxes(player))
        actions.extend(self.manage_gold(player))
        return actions

    def _tick_economic(self, player, buildings, building_defs):
        if self.build_cooldown > 0:
            return []

        counts = Counter(
            building_defs[b.def_id].output_good
            for b in buildings
            if b.owner == self.player_idx
            and b.active
            and 0 <= b.def_id < len(building_defs)
            and building_defs[b.def_id].output_good != Good.NONE
        )

        total_pop = player.total_population
        for priority in ECONOMIC_PRIORITIES:
            if total_pop < priority.min_population:
                continue
            current = counts[priority.good]
            if current < priority.max_count and player.gold > MIN_GOLD_TO_BUILD:
                self.build_cooldown = self._build_interval()
                return [RequestBuild(priority.good, priority.max_count - current)]
        return []

    def _tick_military(self, player):
        if self.military_cooldown > 0:
            return []
        if player.gold > MILITARY_MIN_GOLD and player.total_population > MILITARY_MIN_POPULATION:
            self.military_cooldown = MILITARY_COOLDOWN_TICKS
            return [RequestMilitary(_MILITARY_TARGETS[self.difficulty])]
        return []

    def adjust_taxes(self, player):
        """Tax changes: raise when content and short of gold, lower when unhappy."""
        actions = []
        for tier in range(NUM_POP_TIERS):
            if player.population[tier] == 0:
                continue
            sat = player.satisfaction[tier]
            current = player.tax_rates[tier]
            if sat > TAX_RAISE_SATISFACTION and player.gold < TAX_RAISE_GOLD_LIMIT:
                new_tax = min(current + TAX_STEP, TAX_CEILING)
            elif sat < TAX_LOWER_SATISFACTION and current > TAX_FLOOR:
                new_tax = current - TAX_STEP
            else:
                continue
            if new_tax != current:
                actions.append(SetTaxRate(tier, new_tax))
        return actions

    def manage_gold(self, player):
        """Ask to sell surplus goods when the treasury runs low."""
        if player.gold < SELL_GOLD_LIMIT:
            return [SellExcess()]
        return []

    def _build_interval(self):
        return _BUILD_INTERVALS[self.difficulty]