"""A* pathfinding over an island map with 8-directional movement."""

import heapq
import math

COST_ORTHO = 10
COST_DIAG = 14
MAX_ITERATIONS = 10_000
NEAREST_SEARCH_RADIUS = 20

# N, NE, E, SE, S, SW, W, NW
DIRS = ((0, -1), (1, -1), (1, 0), (1, 1), (0, 1), (-1, 1), (-1, 0), (-1, -1))


def find_path(island_map, start, goal):
    """Path from start to goal, excluding start and including the goal.

    If the goal is blocked the nearest walkable tile is used instead.
    Returns None when no path exists.
    """
    start = tuple(start)
    goal = tuple(goal)
    if start == goal:
        return []
    if not island_map.is_walkable(*goal):
        goal = _find_nearest_walkable(island_map, goal)
        if goal is None:
            return None
    return _search(island_map, start, goal)


def _search(island_map, start, goal):
    sx, sy = start
    if not (0 <= sx < island_map.width and 0 <= sy < island_map.height):
        raise ValueError(f"start {start} lies outside the map")

    g_costs = {start: 0}
    came_from = {}
    open_heap = [(_heuristic(start, goal), 0, start)]
    iterations = 0

    while open_heap:
        _, g_cost, pos = heapq.heappop(open_heap)
        iterations += 1
        if iterations > MAX_ITERATIONS:
            return None
        if pos == goal:
            return _reconstruct_path(came_from, start, goal)
        if g_cost > g_costs.get(pos, math.inf):
            continue

        x, y = pos
        for dir_idx, (dx, dy) in enumerate(DIRS):
            nx, ny = x + dx, y + dy
            if not island_map.is_walkable(nx, ny):
                continue
            diagonal = dx != 0 and dy != 0
            if diagonal and not (
                island_map.is_walkable(x + dx, y) and island_map.is_walkable(x, y + dy)
            ):
                continue
            new_g = g_cost + (COST_DIAG if diagonal else COST_ORTHO)
            neighbour = (nx, ny)
            if new_g < g_costs.get(neighbour, math.inf):
                g_costs[neighbour] = new_g
                came_from[neighbour] = dir_idx
                heapq.heappush(
                    open_heap, (new_g + _heuristic(neighbour, goal), new_g, neighbour)
                )
    return None


def _heuristic(a, b):
    """Octile distance, admissible for 8-directional movement."""
    dx = abs(a[0] - b[0])
    dy = abs(a[1] - b[1])
    low, high = min(dx, dy), max(dx, dy)
    return low * COST_DIAG + (high - low) * COST_ORTHO


def _reconstruct_path(came_from, start, goal):
    path = []
    pos = goal
    while pos != start:
        path.append(pos)
        dir_idx = came_from.get(pos)
        if dir_idx is None:
            break
        dx, dy = DIRS[dir_idx]
        pos = (pos[0] - dx, pos[1] - dy)
    path.reverse()
    return path


def _find_nearest_walkable(island_map, pos):
    """Search square rings of growing radius around pos for a walkable tile."""
    px, py = pos
    for radius in range(1, NEAREST_SEARCH_RADIUS):
        for dx in range(-radius, radius + 1):
            for dy in range(-radius, radius + 1):
                if abs(dx) != radius and abs(dy) != radius:
                    continue
                if island_map.is_walkable(px + dx, py + dy):
                    return (px + dx, py + dy)
    return None


def dir_index_to_compass(dir_idx):
    """Compass direction byte for a direction index; the encodings coincide."""
    return dir_idx & 0xFF