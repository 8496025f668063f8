"""Building definitions and placed building instances."""

from dataclasses import dataclass

from annosim.gametypes import Good, ProductionType

MAX_BUILDINGS = 1037


@dataclass
class BuildingDef:
    """Static description of a building type."""

    id: int = 0
    category: int = 0
    width: int = 1
    height: int = 1
    production_type: ProductionType = ProductionType.CRAFT
    kind: str = ""
    prod_kind: str = ""
    radius: int = 0
    output_good: Good = Good.NONE
    input_good_1: Good = Good.NONE
    input_good_2: Good = Good.NONE
    output_rate: int = 0
    input_1_rate: int = 0
    input_2_rate: int = 0
    storage_capacity: int = 0
    cycle_time_ms: int = 0
    carrier_interval_ms: int = 0
    cost_gold: int = 0
    cost_tools: int = 0
    cost_wood: int = 0
    cost_bricks: int = 0
    maintenance_cost: int = 0


@dataclass
class BuildingInstance:
    """A building placed in the world."""

    def_id: int
    island_id: int
    tile_x: int
    tile_y: int
    owner: int
    active: bool = True
    efficiency: int = 0
    input_1_stock: int = 0
    input_2_stock: int = 0
    output_stock: int = 0
    production_timer_ms: int = 0
    total_work: int = 0