"""Figures moving through the world and their action states."""

from dataclasses import dataclass, field
from enum import IntEnum

MAX_FIGURES = 2550


class ActionType(IntEnum):
    """What a figure is currently doing."""

    NONE = 0
    WALKING = 1
    CARRYING_GOODS = 2
    DELIVERING = 3
    SAILING = 4
    COMBAT = 5
    FARMING = 6
    LOADING = 8
    FISHING = 9
    MINING = 10
    BUILDING = 11
    TRADE_ROUTE = 12
    PATROLLING = 13
    SPECIAL_EVENT = 14
    EXPLORING = 15
    SHIP_COMBAT = 16
    ARTILLERY = 17
    RETURNING = 18
    TRADE_SHIP_AI = 0x20
    FREE_TRADER = 0x21
    IDLE = 0x22


@dataclass
class Figure:
    """A figure or entity in the world."""

    action: ActionType = ActionType.NONE
    owner: int = 0
    tile_x: int = 0
    tile_y: int = 0
    speed: int = 0
    direction: int = 0
    target_x: int = 0
    target_y: int = 0
    building_idx: int = 0
    carried_good: int = 0
    carried_amount: int = 0
    health: int = 0
    anim_frame: int = 0
    move_timer_ms: int = 0
    sprite_set: int = 0
    base_sprite: int = 0
    path: list = field(default_factory=list)
    path_idx: int = 0

    def is_active(self):
        return self.action != ActionType.NONE