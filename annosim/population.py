"""Population demand model tying tiers to warehouse supply."""

from annosim.gametypes import NUM_POP_TIERS, Good, PopTier

TIER_DEMANDS = (
    (Good.FOOD,),
    (Good.FOOD, Good.CLOTH),
    (Good.FOOD, Good.CLOTH, Good.ALCOHOL, Good.TOBACCO_PRODUCTS),
    (Good.FOOD, Good.CLOTH, Good.ALCOHOL, Good.TOBACCO_PRODUCTS, Good.SPICES),
    (
        Good.FOOD,
        Good.CLOTH,
        Good.ALCOHOL,
        Good.TOBACCO_PRODUCTS,
        Good.SPICES,
        Good.COCOA,
    ),
)

CONSUMPTION_PER_100 = (2, 2, 3, 3, 4)

DEMAND_GOODS = (
    Good.FOOD,
    Good.CLOTH,
    Good.ALCOHOL,
    Good.TOBACCO_PRODUCTS,
    Good.SPICES,
    Good.COCOA,
    Good.JEWELRY,
    Good.CLOTHING,
)


def _demand_slot_for_good(good):
    try:
        return DEMAND_GOODS.index(good)
    except ValueError:
        return None


def update_population_demands(player, warehouses, player_id):
    """Compute demand, consume goods from the player's warehouses, update satisfaction."""
    for slot in player.demands:
        slot.demand = 0
        slot.supply = 0

    for tier, (pop, goods) in enumerate(zip(player.population, TIER_DEMANDS)):
        if pop == 0:
            continue
        consumption = max(pop * CONSUMPTION_PER_100[tier] // 100, 1)
        for good in goods:
            slot_idx = _demand_slot_for_good(good)
            if slot_idx is not None:
                player.demands[slot_idx].demand += consumption

    own = [wh for wh in warehouses if wh.active and wh.owner == player_id]

    for slot, good in zip(player.demands, DEMAND_GOODS):
        remaining = slot.demand
        if remaining == 0:
            continue
        supplied = 0
        for wh in own:
            if remaining == 0:
                break
            take = min(remaining, wh.stock(good))
            if take > 0:
                wh.withdraw(good, take)
                supplied += take
                remaining -= take
        slot.supply = supplied

    for tier in range(NUM_POP_TIERS):
        if player.population[tier] == 0:
            player.satisfaction[tier] = 128
            continue
        fulfillments = []
        for good in TIER_DEMANDS[tier]:
            slot_idx = _demand_slot_for_good(good)
            if slot_idx is None:
                continue
            slot = player.demands[slot_idx]
            if slot.demand > 0:
                fulfillments.append(min(slot.supply * 128 // slot.demand, 128))
        if fulfillments:
            avg = sum(fulfillments) // len(fulfillments)
            player.satisfaction[tier] = (avg * 3 + player.satisfaction[tier]) // 4


def tier_for_good(good):
    """The lowest population tier that demands this good, or None."""
    for tier, goods in zip(PopTier, TIER_DEMANDS):
        if good in goods:
            return tier
    return None