from annosim.player import (
    BANKRUPTCY_GAME_OVER_TICKS,
    BANKRUPTCY_THRESHOLD,
    NUM_DEMAND_CATEGORIES,
    Player,
    PlayerState,
)


def test_new_human_defaults():
    player = Player.new_human(3)
    assert player.state == PlayerState.HUMAN_ACTIVE
    assert player.gold == 20000
    assert player.color_index == 3
    assert player.tax_rates == [64] * 5
    assert player.satisfaction == [128] * 5
    assert len(player.demands) == NUM_DEMAND_CATEGORIES


def test_new_ai_sets_state_and_personality():
    player = Player.new_ai(2, 1)
    assert player.state == PlayerState.AI_ACTIVE
    assert player.ai_personality == 1
    assert player.gold == Player.new_human(2).gold


def test_players_do_not_share_lists():
    a = Player.new_human(0)
    b = Player.new_human(1)
    a.population[0] = 10
    a.demands[0].demand = 5
    assert b.population[0] == 0
    assert b.demands[0].demand == 0


def test_income_full_tax_and_satisfaction():
    player = Player.new_human(0)
    player.population[0] = 100
    player.tax_rates[0] = 128
    player.satisfaction[0] = 128
    assert player.calculate_income() == 100


def test_income_zero_without_population():
    assert Player.new_human(0).calculate_income() == 0


def test_costs_and_net_balance():
    player = Player.new_human(0)
    player.building_maintenance = 4
    player.military_maintenance = 2
    assert player.calculate_costs() == 6
    assert player.net_balance() == -1


def test_net_balance_truncates_toward_zero():
    player = Player.new_human(0)
    player.building_maintenance = 7
    assert player.net_balance() == -1


def test_bankruptcy_threshold():
    player = Player.new_human(0)
    player.gold = BANKRUPTCY_THRESHOLD
    assert not player.is_bankrupt()
    player.gold = BANKRUPTCY_THRESHOLD - 1
    assert player.is_bankrupt()


def test_game_over_after_sustained_bankruptcy():
    player = Player.new_human(0)
    player.bankruptcy_ticks = BANKRUPTCY_GAME_OVER_TICKS - 1
    assert not player.is_game_over()
    player.bankruptcy_ticks = BANKRUPTCY_GAME_OVER_TICKS
    assert player.is_game_over()


def test_count_population():
    player = Player.new_human(0)
    player.population = [10, 20, 0, 5, 1]
    assert player.count_population() == sum([10, 20, 0, 5, 1])