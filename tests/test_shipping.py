import pytest

from annosim.gametypes import Good
from annosim.shipping import (
    MAX_ROUTE_STOPS,
    SHIP_CARGO_CAPACITY,
    RouteStop,
    ShipState,
    TradeRoute,
    TradeShip,
)


def _stop(island):
    return RouteStop(island_id=island, warehouse_x=island * 10, warehouse_y=island * 10)


def test_ship_cargo_load_unload():
    ship = TradeShip(0, 0, 0, 0)
    assert ship.load(Good.FOOD, 10) == 10
    assert ship.cargo_total == 10
    assert ship.cargo_amount(Good.FOOD) == 10
    assert ship.unload(Good.FOOD, 5) == 5
    assert ship.cargo_total == 5
    assert ship.load(Good.CLOTH, SHIP_CARGO_CAPACITY) == SHIP_CARGO_CAPACITY - 5


def test_full_ship_loads_nothing():
    ship = TradeShip(0, 0, 0, 0)
    ship.load(Good.FOOD, SHIP_CARGO_CAPACITY)
    assert ship.load(Good.SPICES, 3) == 0
    assert ship.cargo_amount(Good.SPICES) == 0


def test_unload_missing_good_returns_zero():
    ship = TradeShip(0, 0, 0, 0)
    assert ship.unload(Good.COCOA, 4) == 0
    assert ship.cargo_total == 0


def test_unload_is_limited_to_cargo():
    ship = TradeShip(0, 0, 0, 0)
    ship.load(Good.FOOD, 3)
    assert ship.unload(Good.FOOD, 10) == 3
    assert ship.cargo_total == 0


def test_compact_cargo_removes_empty_entries():
    ship = TradeShip(0, 0, 0, 0)
    ship.load(Good.FOOD, 4)
    ship.load(Good.CLOTH, 2)
    ship.unload(Good.FOOD, 4)
    ship.compact_cargo()
    assert ship.cargo == {Good.CLOTH: 2}


def test_negative_load_raises():
    ship = TradeShip(0, 0, 0, 0)
    with pytest.raises(ValueError):
        ship.load(Good.FOOD, -1)


def test_new_ship_defaults():
    ship = TradeShip(1, 3, 7, 8)
    assert ship.state == ShipState.IDLE
    assert ship.speed == 2
    assert ship.active
    assert ship.cargo_total == 0


def test_trade_route_needs_two_stops():
    route = TradeRoute(0, 0)
    route.add_stop(_stop(0))
    route.activate()
    assert not route.active
    route.add_stop(_stop(1))
    route.activate()
    assert route.active


def test_route_stop_limit():
    route = TradeRoute(0, 0)
    for island in range(MAX_ROUTE_STOPS + 3):
        route.add_stop(_stop(island))
    assert len(route.stops) == MAX_ROUTE_STOPS
    assert route.stops[-1].island_id == MAX_ROUTE_STOPS - 1