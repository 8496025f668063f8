"""Warehouse inventory management."""

from dataclasses import dataclass, field

from annosim.gametypes import Good

MAX_GOOD_TYPES = 32
DEFAULT_CAPACITY = 30


@dataclass
class Warehouse:
    """A warehouse on an island holding one player's goods."""

    island_id: int
    owner: int
    tile_x: int
    tile_y: int
    active: bool = True
    _inventory: dict = field(default_factory=dict, repr=False)

    def stock(self, good):
        """Current stock of a good."""
        entry = self._inventory.get(good)
        return entry[0] if entry else 0

    def capacity(self, good):
        """Maximum capacity for a good."""
        entry = self._inventory.get(good)
        return entry[1] if entry else DEFAULT_CAPACITY

    def deposit(self, good, amount):
        """Store up to ``amount`` units; return how many were stored."""
        if amount < 0:
            raise ValueError("amount must not be negative")
        entry = self._inventory.setdefault(good, [0, DEFAULT_CAPACITY])
        deposited = min(amount, max(entry[1] - entry[0], 0))
        entry[0] += deposited
        return deposited

    def withdraw(self, good, amount):
        """Take up to ``amount`` units; return how many were taken."""
        if amount < 0:
            raise ValueError("amount must not be negative")
        entry = self._inventory.get(good)
        if entry is None:
            return 0
        withdrawn = min(amount, entry[0])
        entry[0] -= withdrawn
        return withdrawn

    def set_capacity(self, good, capacity):
        """Set the storage capacity for a good."""
        entry = self._inventory.setdefault(good, [0, capacity])
        entry[1] = capacity

    def all_stock(self):
        """List of (good, stock, capacity) for goods in stock, ordered by good."""
        return sorted(
            ((Good(good), stock, cap) for good, (stock, cap) in self._inventory.items() if stock > 0),
            key=lambda item: int(item[0]),
        )

    def distance_sq(self, x, y):
        """Squared tile distance to a position."""
        dx = self.tile_x - x
        dy = self.tile_y - y
        return dx * dx + dy * dy


def find_nearest_warehouse(warehouses, island_id, owner, tile_x, tile_y):
    """Index of the nearest active warehouse of ``owner`` on the island, or None."""
    candidates = [
        (index, wh)
        for index, wh in enumerate(warehouses)
        if wh.active and wh.island_id == island_id and wh.owner == owner
    ]
    if not candidates:
        return None
    index, _ = min(candidates, key=lambda item: item[1].distance_sq(tile_x, tile_y))
    return index