"""Carriers moving goods from production buildings to warehouses."""

from annosim.entity import ActionType, Figure
from annosim.gametypes import Good
from annosim.pathfinding import DIRS, find_path
from annosim.warehouse import find_nearest_warehouse

CARRIER_SPEED = 4


def _sign(value):
    return (value > 0) - (value < 0)


def _route(island_maps, island_id, start, goal):
    island_map = next((m for m in island_maps if m.island_id == island_id), None)
    if island_map is not None:
        path = find_path(island_map, start, goal)
        if path is not None:
            return path
    return direct_path(start, goal)


def try_spawn_carrier(building, definition, warehouses, island_maps):
    """Create a carrier taking the building's output to the nearest warehouse.

    Returns the new figure, or None if no carrier is needed or possible.
    The building's output stock is handed over to the carrier.
    """
    if definition.output_good == Good.NONE or definition.storage_capacity == 0:
        return None
    if building.output_stock <= definition.storage_capacity // 2:
        return None

    wh_idx = find_nearest_warehouse(
        warehouses, building.island_id, building.owner, building.tile_x, building.tile_y
    )
    if wh_idx is None:
        return None
    warehouse = warehouses[wh_idx]

    start = (building.tile_x, building.tile_y)
    goal = (warehouse.tile_x, warehouse.tile_y)
    path = _route(island_maps, building.island_id, start, goal)

    amount = building.output_stock
    building.output_stock = 0

    return Figure(
        action=ActionType.CARRYING_GOODS,
        owner=building.owner,
        tile_x=building.tile_x,
        tile_y=building.tile_y,
        target_x=warehouse.tile_x,
        target_y=warehouse.tile_y,
        building_idx=0,
        carried_good=int(definition.output_good),
        carried_amount=amount,
        speed=CARRIER_SPEED,
        path=path,
        path_idx=0,
    )


def step_carrier(figure):
    """Move the carrier one tile; return True once it has reached its target."""
    if figure.speed == 0:
        return False

    if figure.path_idx < len(figure.path):
        nx, ny = figure.path[figure.path_idx]
        figure.direction = direction_from_delta(nx - figure.tile_x, ny - figure.tile_y)
        figure.tile_x = nx
        figure.tile_y = ny
        figure.path_idx += 1
        return figure.path_idx >= len(figure.path)

    dx = figure.target_x - figure.tile_x
    dy = figure.target_y - figure.tile_y
    if dx == 0 and dy == 0:
        return True
    if abs(dx) >= abs(dy):
        figure.tile_x += _sign(dx)
    else:
        figure.tile_y += _sign(dy)
    figure.direction = direction_from_delta(dx, dy)
    return figure.tile_x == figure.target_x and figure.tile_y == figure.target_y


def direction_from_delta(dx, dy):
    """Compass direction 0-7 (N, NE, E, SE, S, SW, W, NW) of a movement delta."""
    try:
        return DIRS.index((_sign(dx), _sign(dy)))
    except ValueError:
        return 0


def handle_arrival(figure, warehouses, buildings, island_maps):
    """Act on a carrier that reached its target; return True if it should despawn."""
    if figure.action == ActionType.CARRYING_GOODS:
        warehouse = next(
            (
                w
                for w in warehouses
                if w.tile_x == figure.target_x and w.tile_y == figure.target_y
            ),
            None,
        )
        if warehouse is not None:
            good = Good.from_value(figure.carried_good)
            figure.carried_amount -= warehouse.deposit(good, figure.carried_amount)

        if not 0 <= figure.building_idx < len(buildings):
            return True

        building = buildings[figure.building_idx]
        start = (figure.tile_x, figure.tile_y)
        goal = (building.tile_x, building.tile_y)
        figure.path = _route(island_maps, building.island_id, start, goal)
        figure.path_idx = 0
        figure.target_x = building.tile_x
        figure.target_y = building.tile_y
        figure.action = ActionType.RETURNING
        figure.carried_good = 0
        figure.carried_amount = 0
        return False

    return True


def direct_path(start, goal):
    """Obstacle-free path from start to goal, diagonal where possible."""
    x, y = start
    gx, gy = goal
    path = []
    while (x, y) != (gx, gy):
        dx = gx - x
        dy = gy - y
        if dx != 0 and dy != 0:
            x += _sign(dx)
            y += _sign(dy)
        elif dx != 0:
            x += _sign(dx)
        else:
            y += _sign(dy)
        path.append((x, y))
    return path