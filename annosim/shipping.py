"""Trade routes and the ships that sail them."""

from dataclasses import dataclass, field
from enum import Enum

MAX_ROUTE_STOPS = 8
SHIP_CARGO_CAPACITY = 50
DEFAULT_SHIP_SPEED = 2


@dataclass
class RouteStop:
    """One stop of a trade route: a warehouse and what to trade there."""

    island_id: int
    warehouse_x: int
    warehouse_y: int
    load_goods: list = field(default_factory=list)
    unload_goods: list = field(default_factory=list)


@dataclass
class TradeRoute:
    """A sequence of warehouse stops a ship visits in a loop."""

    id: int
    owner: int
    stops: list = field(default_factory=list)
    active: bool = False

    def add_stop(self, stop):
        """Append a stop; stops beyond the maximum are ignored."""
        if len(self.stops) < MAX_ROUTE_STOPS:
            self.stops.append(stop)

    def activate(self):
        """Activate the route if it has at least two stops."""
        if len(self.stops) >= 2:
            self.active = True


class ShipState(Enum):
    """What a trade ship is doing."""

    SAILING = "sailing"
    TRADING = "trading"
    WAITING = "waiting"
    IDLE = "idle"


@dataclass
class TradeShip:
    """A ship carrying goods along a trade route."""

    owner: int
    route_id: int
    world_x: int
    world_y: int
    speed: int = DEFAULT_SHIP_SPEED
    current_stop: int = 0
    state: ShipState = ShipState.IDLE
    cargo: dict = field(default_factory=dict)
    cargo_total: int = 0
    profit: int = 0
    active: bool = True
    path: list = field(default_factory=list)
    path_idx: int = 0

    def cargo_amount(self, good):
        """Amount of a good in the hold."""
        return self.cargo.get(good, 0)

    def load(self, good, amount):
        """Load up to ``amount`` units; return how many fit."""
        if amount < 0:
            raise ValueError("amount must not be negative")
        space = max(SHIP_CARGO_CAPACITY - self.cargo_total, 0)
        loaded = min(amount, space)
        if loaded > 0:
            self.cargo[good] = self.cargo.get(good, 0) + loaded
            self.cargo_total += loaded
        return loaded

    def unload(self, good, amount):
        """Unload up to ``amount`` units; return how many were unloaded."""
        if amount < 0:
            raise ValueError("amount must not be negative")
        if good not in self.cargo:
            return 0
        unloaded = min(amount, self.cargo[good])
        self.cargo[good] -= unloaded
        self.cargo_total -= unloaded
        return unloaded

    def compact_cargo(self):
        """Drop goods of which nothing is left in the hold."""
        self.cargo = {good: amount for good, amount in self.cargo.items() if amount > 0}