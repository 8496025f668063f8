# annosim

Building blocks for simulating a colonial island-building strategy game:
goods and production chains, warehouses, player finances and population
demand, computer opponents, carriers walking paths on islands, trade ships
sailing sea routes, and service coverage.

It needs Python 3.10 or newer and has no runtime dependencies.

```
pip install .
```

## Modules

- `annosim.gametypes` – enumerations `Good`, `PopTier`, `ProductionType`, `MilitaryUnit`, `Difficulty` and timing constants.
- `annosim.building` – `BuildingDef` (a building type) and `BuildingInstance` (a placed building).
- `annosim.production` – `tick_building` runs a building's production cycle; `needs_carrier` says when its output stock is over half full.
- `annosim.warehouse` – `Warehouse` with `deposit`, `withdraw`, `stock`, `capacity`, `set_capacity`, `all_stock`; `find_nearest_warehouse`.
- `annosim.player` – `Player` with tax income, costs, net balance and bankruptcy checks; `PlayerState`, `DemandSlot`.
- `annosim.population` – `update_population_demands` takes goods from a player's warehouses and updates satisfaction; `tier_for_good`.
- `annosim.economy` – `tick_economy`, `can_grow`, `should_citizens_leave`.
- `annosim.ai` – `AiController.tick` returns a list of actions (`RequestBuild`, `RequestMilitary`, `SetTaxRate`, `SellExcess`) for a computer player.
- `annosim.entity` – `Figure` and its `ActionType`.
- `annosim.island_map`, `annosim.pathfinding` – `IslandMap` walkability grid and 8-directional A* `find_path`.
- `annosim.carrier` – spawning carriers at production buildings, stepping them along their path and handling arrival at a warehouse.
- `annosim.ocean_map` – `OceanMap` and `find_ocean_path` for ships.
- `annosim.shipping` – `RouteStop`, `TradeRoute`, `TradeShip` and its cargo hold.
- `annosim.trade` – `tick_trade_ship` and `free_trader_find_trade`.
- `annosim.coverage` – `CoverageMap` of market and public-building reach, with `compute_market_coverage_ratio` and `compute_public_satisfaction`.

## Examples

Pathfinding on an island:

```python
from annosim.island_map import IslandMap
from annosim.pathfinding import find_path

island = IslandMap.new_open(0, 20, 20)
print(find_path(island, (0, 0), (5, 5)))  # [(1, 1), (2, 2), (3, 3), (4, 4), (5, 5)]
```

A computer player deciding what to do:

```python
from annosim.ai import AiController, AiPersonality, Difficulty
from annosim.player import Player

ai = AiController(1, AiPersonality.ECONOMIC, Difficulty.MEDIUM)
player = Player.new_ai(1, 0)
player.total_population = 50
player.gold = 5000
print(ai.tick(player, [], [], []))  # a RequestBuild for Good.FOOD
```

A trade ship on a two-stop route:

```python
from annosim.gametypes import Good
from annosim.shipping import RouteStop, TradeRoute, TradeShip
from annosim.trade import tick_trade_ship
from annosim.warehouse import Warehouse

home = Warehouse(0, 0, 10, 10)
home.deposit(Good.SPICES, 20)
away = Warehouse(1, 0, 20, 20)

route = TradeRoute(0, 0)
route.add_stop(RouteStop(0, 10, 10, load_goods=[(Good.SPICES, 10)]))
route.add_stop(RouteStop(1, 20, 20, unload_goods=[Good.SPICES]))
route.activate()

ship = TradeShip(0, 0, 10, 10)
gold = sum(tick_trade_ship(ship, route, [home, away]) for _ in range(50))
```

Without an ocean map the ship sails straight towards each stop; pass an
`OceanMap` as the fourth argument to follow sea routes.

## What it does not do

The package has no land or sea combat and no single game-state object that
runs all subsystems on their timers: the caller drives each tick function
itself. It does not read game data or scenario files, and it has no
command-line program or user interface.

## Tests

```
pip install .[test]
pytest
```