"""Per-island walkability grid used for routing carriers."""

from dataclasses import dataclass, field


@dataclass
class IslandMap:
    """Walkability of every tile on one island.

    A freshly constructed map has every tile blocked; ``new_open`` builds one
    with every tile walkable.
    """

    island_id: int
    width: int
    height: int
    _walkable: list = field(default=None, repr=False)

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError("map dimensions must not be negative")
        size = self.width * self.height
        if self._walkable is None:
            self._walkable = [False] * size
        elif len(self._walkable) != size:
            raise ValueError("walkability grid does not match map dimensions")

    @classmethod
    def new_open(cls, island_id, width, height):
        """A map on which every tile is walkable."""
        return cls(island_id, width, height, [True] * (width * height))

    def _in_bounds(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def is_walkable(self, x, y):
        """True if the tile exists and can be walked on."""
        if not self._in_bounds(x, y):
            return False
        return self._walkable[y * self.width + x]

    def set_walkable(self, x, y, value):
        """Mark a tile walkable or blocked; positions off the map are ignored."""
        if self._in_bounds(x, y):
            self._walkable[y * self.width + x] = bool(value)