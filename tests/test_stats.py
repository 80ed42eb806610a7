import pytest

from dungeon_explorer.models import Stats


def test_create_sets_current_and_base_values():
    stats = Stats.create(30, 5, speed=1, level=1, is_player=True)
    assert stats.max_health == 30
    assert stats.current_health == 30
    assert stats.attack == 5
    assert stats.speed == 1
    assert stats.level == 1
    assert stats.xp == 0
    assert stats.base_health == 30
    assert stats.base_attack == 5


@pytest.mark.parametrize("start", [0, 1, 15, 30])
@pytest.mark.parametrize("delta", [-1000, -31, -1, 0, 1, 29, 1000])
def test_current_health_stays_within_bounds(start, delta):
    stats = Stats.create(30, 5)
    stats.current_health = start
    stats.modify_current_health(delta)
    assert 0 <= stats.current_health <= stats.max_health


def test_modifiers_clamp_at_zero():
    stats = Stats.create(30, 5, speed=1.0, level=1)
    stats.modify_max_health(-1000)
    stats.modify_attack(-1000)
    stats.modify_speed(-1000)
    stats.modify_level(-1000)
    stats.modify_xp(-1000)
    assert (stats.max_health, stats.attack, stats.speed, stats.level, stats.xp) == (0, 0, 0, 0, 0)


def test_lowering_max_health_pulls_current_health_down():
    stats = Stats.create(30, 5)
    stats.modify_max_health(-10)
    assert stats.max_health == 20
    assert stats.current_health == 20


def test_modifiers_add_delta():
    stats = Stats.create(30, 5, speed=1.0, level=1)
    stats.modify_max_health(5)
    stats.modify_current_health(5)
    stats.modify_attack(5)
    stats.modify_speed(1)
    stats.modify_level(5)
    assert stats.max_health == 35
    assert stats.current_health == 35
    assert stats.attack == 10
    assert stats.speed == 2
    assert stats.level == 6


def test_large_xp_gain_levels_up_repeatedly():
    stats = Stats.create(30, 5, level=1, is_player=True)
    gained = stats.modify_xp(5)
    # level 1 costs 1 XP, level 2 costs 2, leaving 2 XP short of level 4
    assert gained == 2
    assert stats.level == 3
    assert stats.xp == 2


def test_level_up_grows_stats_from_base_values_and_heals():
    stats = Stats.create(30, 10, level=1, is_player=True)
    stats.modify_current_health(-20)
    stats.modify_xp(1)
    assert stats.level == 2
    assert stats.max_health == 30 + 30 * 2 // 10
    assert stats.attack == 10 + 10 * 2 // 10
    assert stats.current_health == stats.max_health


@pytest.mark.parametrize("parts", [[7], [1, 6], [3, 3, 1], [1, 1, 1, 1, 1, 1, 1], [2, 5]])
def test_xp_split_across_calls_gives_same_result(parts):
    whole = Stats.create(30, 5, level=1, is_player=True)
    whole.modify_xp(7)
    split = Stats.create(30, 5, level=1, is_player=True)
    for part in parts:
        split.modify_xp(part)
    assert (split.level, split.xp) == (whole.level, whole.xp)
    assert (split.max_health, split.attack) == (whole.max_health, whole.attack)


def test_monster_xp_accumulates_without_levelling():
    stats = Stats.create(20, 6, level=2)
    assert stats.modify_xp(50) == 0
    assert stats.level == 2
    assert stats.xp == 50
    stats.modify_xp(-100)
    assert stats.xp == 0
    assert stats.level == 2
