"""Trade ships sailing their routes, and the free trader's search for deals."""

from annosim.ocean_map import find_ocean_path
from annosim.shipping import SHIP_CARGO_CAPACITY, ShipState

SELL_PRICE_PER_UNIT = 8
BUY_PRICE_PER_UNIT = 6
FREE_TRADER_MIN_SOURCE = 10
FREE_TRADER_TARGET_SHORTAGE = 5
FREE_TRADER_KEEP = 5


def _sign(value):
    return (value > 0) - (value < 0)


def tick_trade_ship(ship, route, warehouses, ocean_map=None):
    """Advance a ship by one ship tick along its route; return the gold earned or spent.

    With an ocean map the ship follows sea routes, otherwise it sails straight
    towards each stop.
    """
    if not ship.active or not route.active or not route.stops:
        return 0

    gold_delta = 0
    if ship.state == ShipState.IDLE:
        ship.current_stop = 0
        _compute_path_to_stop(ship, route, ocean_map)
        ship.state = ShipState.SAILING
    elif ship.state == ShipState.SAILING:
        _sail(ship, route)
    elif ship.state == ShipState.TRADING:
        gold_delta = _trade(ship, route.stops[ship.current_stop], warehouses)
        ship.compact_cargo()
        ship.current_stop = (ship.current_stop + 1) % len(route.stops)
        _compute_path_to_stop(ship, route, ocean_map)
        ship.state = ShipState.SAILING
    elif ship.state == ShipState.WAITING:
        ship.state = ShipState.TRADING

    ship.profit += gold_delta
    return gold_delta


def _sail(ship, route):
    if ship.path and ship.path_idx < len(ship.path):
        for _ in range(ship.speed):
            if ship.path_idx >= len(ship.path):
                break
            ship.world_x, ship.world_y = ship.path[ship.path_idx]
            ship.path_idx += 1
        if ship.path_idx >= len(ship.path):
            ship.path = []
            ship.path_idx = 0
            ship.state = ShipState.TRADING
        return

    stop = route.stops[ship.current_stop]
    dx = stop.warehouse_x - ship.world_x
    dy = stop.warehouse_y - ship.world_y
    if dx == 0 and dy == 0:
        ship.state = ShipState.TRADING
    elif abs(dx) > abs(dy):
        ship.world_x += _sign(dx) * min(ship.speed, abs(dx))
    else:
        ship.world_y += _sign(dy) * min(ship.speed, abs(dy))


def _trade(ship, stop, warehouses):
    warehouse = next(
        (
            w
            for w in warehouses
            if w.island_id == stop.island_id and w.owner == ship.owner and w.active
        ),
        None,
    )
    if warehouse is None:
        return 0

    gold_delta = 0
    for good in stop.unload_goods:
        amount = ship.cargo_amount(good)
        if amount > 0:
            deposited = warehouse.deposit(good, amount)
            ship.unload(good, deposited)
            gold_delta += deposited * SELL_PRICE_PER_UNIT

    for good, max_amount in stop.load_goods:
        to_load = min(max_amount, warehouse.stock(good))
        if to_load > 0:
            withdrawn = warehouse.withdraw(good, to_load)
            loaded = ship.load(good, withdrawn)
            if loaded < withdrawn:
                warehouse.deposit(good, withdrawn - loaded)
            gold_delta -= loaded * BUY_PRICE_PER_UNIT
    return gold_delta


def _compute_path_to_stop(ship, route, ocean_map):
    """Plan a sea route to the current stop; leave the path empty to sail straight."""
    ship.path = []
    ship.path_idx = 0
    if ocean_map is None or ship.current_stop >= len(route.stops):
        return
    stop = route.stops[ship.current_stop]
    start = ocean_map.nearest_navigable(ship.world_x, ship.world_y)
    goal = ocean_map.nearest_navigable(stop.warehouse_x, stop.warehouse_y)
    if start is None or goal is None:
        return
    path = find_ocean_path(ocean_map, start, goal)
    if path is not None:
        ship.path = path
        ship.path_idx = 0


def free_trader_find_trade(warehouses, ship_owner):
    """Best transfer between two of the owner's warehouses.

    Returns (from_index, to_index, good, amount) for the good with the largest
    surplus that the other warehouse lacks, or None.
    """
    own = [(i, w) for i, w in enumerate(warehouses) if w.owner == ship_owner and w.active]
    best = None
    best_surplus = None
    for i, source in own:
        for j, target in own:
            if i == j:
                continue
            for good, amount, _capacity in source.all_stock():
                if amount < FREE_TRADER_MIN_SOURCE:
                    continue
                if target.stock(good) >= FREE_TRADER_TARGET_SHORTAGE:
                    continue
                surplus = amount - FREE_TRADER_KEEP
                if best_surplus is None or surplus > best_surplus:
                    best_surplus = surplus
                    best = (i, j, good, min(surplus, SHIP_CARGO_CAPACITY))
    return best