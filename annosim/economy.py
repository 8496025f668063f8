"""Population happiness and treasury updates per economy tick."""

from annosim.gametypes import NUM_POP_TIERS

ECONOMY_TICK_MS = 9999
LEAVE_THRESHOLD = 0x4C
GROWTH_THRESHOLD = 96
FULFILLMENT_SCALE = 128
SATISFACTION_DECAY_NUM = 15
SATISFACTION_DECAY_DEN = 16


def tick_economy(player):
    """Advance a player's economy by one tick."""
    for slot in player.demands:
        if slot.demand > 0:
            fulfillment = min(slot.supply * FULFILLMENT_SCALE // slot.demand, FULFILLMENT_SCALE)
            slot.fulfillment_history = [fulfillment] + list(slot.fulfillment_history[:3])

    for tier in range(NUM_POP_TIERS):
        if player.population[tier] > 0:
            player.satisfaction[tier] = (
                player.satisfaction[tier] * SATISFACTION_DECAY_NUM // SATISFACTION_DECAY_DEN
            )

    player.gold += player.net_balance()

    if player.is_bankrupt():
        player.bankruptcy_ticks += 1
    else:
        player.bankruptcy_ticks = 0

    player.total_population = player.count_population()


def can_grow(player, tier):
    """True if a tier is satisfied enough for its houses to upgrade."""
    if not 0 <= tier < NUM_POP_TIERS:
        return False
    return player.satisfaction[tier] >= GROWTH_THRESHOLD


def should_citizens_leave(player, tier):
    """True if a tier is so unhappy that citizens leave."""
    if not 0 <= tier < NUM_POP_TIERS:
        return False
    return player.satisfaction[tier] < LEAVE_THRESHOLD