"""Service coverage of marketplaces, warehouses and public buildings."""

from dataclasses import dataclass, field

FULL_SCALE = 128
MAX_PUBLIC_COUNT = 255
PUBLIC_COVERAGE_CAP = 5
RESIDENTIAL_KIND = "WOHNUNG"

MARKET_KINDS = frozenset({"MARKT", "KONTOR"})
PUBLIC_KINDS = frozenset(
    {
        "KIRCHE",
        "KAPELLE",
        "WIRT",
        "SCHULE",
        "HOCHSCHULE",
        "KLINIK",
        "THEATER",
        "BADEHAUS",
        "BRUNNEN",
        "GALGEN",
        "DENKMAL",
        "SCHLOSS",
        "TRIUMPH",
    }
)


@dataclass
class CoverageMap:
    """Which tiles of one island lie in market range, and how many public buildings reach each."""

    island_id: int
    width: int
    height: int
    _market: list = field(default=None, repr=False)
    _public: list = field(default=None, repr=False)

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError("map dimensions must not be negative")
        size = self.width * self.height
        self._market = [False] * size
        self._public = [0] * size

    def _in_bounds(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def is_covered(self, x, y):
        """True if the tile lies within a marketplace or warehouse radius."""
        return self._in_bounds(x, y) and self._market[y * self.width + x]

    def public_coverage_at(self, x, y):
        """Number of public buildings whose radius reaches the tile."""
        if not self._in_bounds(x, y):
            return 0
        return self._public[y * self.width + x]

    def recompute(self, buildings, defs, warehouses):
        """Rebuild coverage from buildings and (tile_x, tile_y, radius) warehouse entries."""
        size = self.width * self.height
        self._market = [False] * size
        self._public = [0] * size

        for wx, wy, radius in warehouses:
            self._apply_radius(wx, wy, radius, market=True, public=False)

        for inst in buildings:
            if inst.island_id != self.island_id or not inst.active:
                continue
            if not 0 <= inst.def_id < len(defs):
                continue
            definition = defs[inst.def_id]
            if definition.radius == 0:
                continue
            is_market = definition.prod_kind in MARKET_KINDS
            is_public = definition.prod_kind in PUBLIC_KINDS
            if is_market or is_public:
                cx = inst.tile_x + definition.width // 2
                cy = inst.tile_y + definition.height // 2
                self._apply_radius(cx, cy, definition.radius, is_market, is_public)

    def _apply_radius(self, cx, cy, radius, market, public):
        """Mark the diamond (Manhattan distance) of tiles around a centre."""
        for dy in range(-radius, radius + 1):
            span = radius - abs(dy)
            ty = cy + dy
            if not 0 <= ty < self.height:
                continue
            for tx in range(max(cx - span, 0), min(cx + span, self.width - 1) + 1):
                idx = ty * self.width + tx
                if market:
                    self._market[idx] = True
                if public:
                    self._public[idx] = min(self._public[idx] + 1, MAX_PUBLIC_COUNT)


def _residences(coverage, buildings, defs):
    for inst in buildings:
        if inst.island_id != coverage.island_id or not inst.active:
            continue
        if not 0 <= inst.def_id < len(defs):
            continue
        if defs[inst.def_id].prod_kind == RESIDENTIAL_KIND:
            yield inst


def compute_market_coverage_ratio(coverage, buildings, defs):
    """Share of the island's residences in market range, on a 0-128 scale."""
    houses = list(_residences(coverage, buildings, defs))
    if not houses:
        return FULL_SCALE
    covered = sum(1 for h in houses if coverage.is_covered(h.tile_x, h.tile_y))
    return min(covered * FULL_SCALE // len(houses), FULL_SCALE)


def compute_public_satisfaction(coverage, buildings, defs):
    """How well the island's residences are served by public buildings, 0-128."""
    houses = list(_residences(coverage, buildings, defs))
    if not houses:
        return FULL_SCALE
    total = sum(
        min(coverage.public_coverage_at(h.tile_x, h.tile_y), PUBLIC_COVERAGE_CAP)
        for h in houses
    )
    return min(total * FULL_SCALE // (len(houses) * PUBLIC_COVERAGE_CAP), FULL_SCALE)