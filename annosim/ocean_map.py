"""World ocean map and A* routing for ships."""

import heapq
import math
from dataclasses import dataclass, field

from annosim.pathfinding import COST_DIAG, COST_ORTHO, DIRS

MAX_OCEAN_ITERATIONS = 100_000
NEAREST_SEARCH_RADIUS = 30


@dataclass
class OceanMap:
    """Navigability of every tile in the world: True for open sea.

    A map built without a grid is open sea everywhere.
    """

    width: int
    height: int
    _grid: list = field(default=None, repr=False)

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError("map dimensions must not be negative")
        size = self.width * self.height
        if self._grid is None:
            self._grid = [True] * size
        elif len(self._grid) != size:
            raise ValueError("navigability grid does not match map dimensions")

    def _in_bounds(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def is_navigable(self, x, y):
        """True if the tile lies on the map and is open sea."""
        if not self._in_bounds(x, y):
            return False
        return self._grid[y * self.width + x]

    def is_land(self, x, y):
        """True if the tile lies on the map and is land."""
        if not self._in_bounds(x, y):
            return False
        return not self._grid[y * self.width + x]

    def nearest_navigable(self, x, y):
        """Nearest open-sea tile to a position, searching square rings; None if none."""
        if self.is_navigable(x, y):
            return (x, y)
        for radius in range(1, NEAREST_SEARCH_RADIUS):
            for dy in range(-radius, radius + 1):
                for dx in range(-radius, radius + 1):
                    if abs(dx) != radius and abs(dy) != radius:
                        continue
                    if self.is_navigable(x + dx, y + dy):
                        return (x + dx, y + dy)
        return None


def _heuristic(a, b):
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


def find_ocean_path(ocean_map, start, goal):
    """Sea route from start to goal, excluding start and including the goal.

    Both ends must be open sea. Returns None when no route is found.
    """
    start = tuple(start)
    goal = tuple(goal)
    if start == goal:
        return []
    if not ocean_map.is_navigable(*start) or not ocean_map.is_navigable(*goal):
        return None

    g_costs = {start: 0}
    came_from = {}
    open_heap = [(_heuristic(start, goal), 0, start)]
    iterations = 0

    while open_heap:
        _, g_cost, pos = heapq.heappop(open_heap)
        iterations += 1
        if iterations > MAX_OCEAN_ITERATIONS:
            return None
        if pos == goal:
            return _reconstruct_path(came_from, start, goal)
        if g_cost > g_costs.get(pos, math.inf):
            continue

        x, y = pos
        for dir_idx, (dx, dy) in enumerate(DIRS):
            nx, ny = x + dx, y + dy
            if not ocean_map.is_navigable(nx, ny):
                continue
            diagonal = dx != 0 and dy != 0
            if diagonal and not (
                ocean_map.is_navigable(x + dx, y) and ocean_map.is_navigable(x, y + dy)
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