from annosim.gametypes import Good
from annosim.ocean_map import OceanMap
from annosim.shipping import SHIP_CARGO_CAPACITY, RouteStop, ShipState, TradeRoute, TradeShip
from annosim.trade import (
    BUY_PRICE_PER_UNIT,
    SELL_PRICE_PER_UNIT,
    free_trader_find_trade,
    tick_trade_ship,
)
from annosim.warehouse import Warehouse


def _two_stop_route():
    route = TradeRoute(0, 0)
    route.add_stop(RouteStop(0, 10, 10, [(Good.SPICES, 10)], [Good.FOOD]))
    route.add_stop(RouteStop(1, 20, 20, [(Good.FOOD, 10)], [Good.SPICES]))
    route.activate()
    return route


def _stocked_warehouses():
    wh_a = Warehouse(0, 0, 10, 10)
    wh_b = Warehouse(1, 0, 20, 20)
    wh_a.deposit(Good.SPICES, 20)
    wh_b.deposit(Good.FOOD, 15)
    return [wh_a, wh_b]


def test_trade_route_execution():
    route = _two_stop_route()
    ship = TradeShip(0, 0, 10, 10)
    warehouses = _stocked_warehouses()
    total_gold = sum(tick_trade_ship(ship, route, warehouses, None) for _ in range(100))
    assert ship.profit != 0 or ship.cargo_total > 0 or total_gold != 0
    assert ship.profit == total_gold


def test_first_stop_loads_goods_and_charges_buy_price():
    route = _two_stop_route()
    ship = TradeShip(0, 0, 10, 10)
    warehouses = _stocked_warehouses()
    gold = [tick_trade_ship(ship, route, warehouses, None) for _ in range(3)]
    assert gold == [0, 0, -10 * BUY_PRICE_PER_UNIT]
    assert ship.cargo_amount(Good.SPICES) == 10
    assert warehouses[0].stock(Good.SPICES) == 10
    assert ship.current_stop == 1
    assert ship.state == ShipState.SAILING


def test_second_stop_sells_and_reloads():
    route = _two_stop_route()
    ship = TradeShip(0, 0, 10, 10)
    warehouses = _stocked_warehouses()
    for _ in range(3):
        tick_trade_ship(ship, route, warehouses, None)
    gold = 0
    for _ in range(20):
        gold = tick_trade_ship(ship, route, warehouses, None)
        if ship.current_stop == 0:
            break
    assert (ship.world_x, ship.world_y) == (20, 20)
    assert gold == 10 * SELL_PRICE_PER_UNIT - 10 * BUY_PRICE_PER_UNIT
    assert warehouses[1].stock(Good.SPICES) == 10
    assert ship.cargo_amount(Good.SPICES) == 0
    assert Good.SPICES not in ship.cargo
    assert ship.cargo_amount(Good.FOOD) == 10


def test_inactive_route_does_nothing():
    route = TradeRoute(0, 0)
    route.add_stop(RouteStop(0, 10, 10))
    ship = TradeShip(0, 0, 0, 0)
    assert tick_trade_ship(ship, route, [], None) == 0
    assert ship.state == ShipState.IDLE


def test_waiting_ship_returns_to_trading():
    route = _two_stop_route()
    ship = TradeShip(0, 0, 10, 10, state=ShipState.WAITING)
    assert tick_trade_ship(ship, route, [], None) == 0
    assert ship.state == ShipState.TRADING


def test_ship_follows_ocean_path():
    ocean = OceanMap(20, 20)
    route = TradeRoute(0, 0)
    route.add_stop(RouteStop(0, 3, 0))
    route.add_stop(RouteStop(1, 0, 0))
    route.activate()
    ship = TradeShip(0, 0, 0, 0)

    tick_trade_ship(ship, route, [], ocean)
    assert ship.path == [(1, 0), (2, 0), (3, 0)]
    tick_trade_ship(ship, route, [], ocean)
    assert (ship.world_x, ship.world_y) == (2, 0)
    assert ship.state == ShipState.SAILING
    tick_trade_ship(ship, route, [], ocean)
    assert (ship.world_x, ship.world_y) == (3, 0)
    assert ship.state == ShipState.TRADING
    assert ship.path == []


def test_free_trader_finds_surplus():
    wh_a = Warehouse(0, 0, 10, 10)
    wh_b = Warehouse(1, 0, 20, 20)
    wh_a.deposit(Good.SPICES, 25)
    trade = free_trader_find_trade([wh_a, wh_b], 0)
    assert trade is not None
    from_idx, to_idx, good, _amount = trade
    assert (from_idx, to_idx, good) == (0, 1, Good.SPICES)


def test_free_trader_ignores_small_stock_and_other_owners():
    wh_a = Warehouse(0, 0, 10, 10)
    wh_b = Warehouse(1, 0, 20, 20)
    wh_c = Warehouse(2, 1, 30, 30)
    wh_a.deposit(Good.SPICES, 9)
    wh_c.deposit(Good.FOOD, 25)
    assert free_trader_find_trade([wh_a, wh_b, wh_c], 0) is None


def test_free_trader_caps_amount_at_cargo_capacity():
    wh_a = Warehouse(0, 0, 10, 10)
    wh_b = Warehouse(1, 0, 20, 20)
    wh_a.set_capacity(Good.WOOD, 200)
    wh_a.deposit(Good.WOOD, 100)
    assert free_trader_find_trade([wh_a, wh_b], 0) == (0, 1, Good.WOOD, SHIP_CARGO_CAPACITY)


def test_free_trader_prefers_largest_surplus():
    wh_a = Warehouse(0, 0, 10, 10)
    wh_b = Warehouse(1, 0, 20, 20)
    wh_a.deposit(Good.FOOD, 12)
    wh_a.deposit(Good.CLOTH, 28)
    trade = free_trader_find_trade([wh_a, wh_b], 0)
    assert trade == (0, 1, Good.CLOTH, 23)