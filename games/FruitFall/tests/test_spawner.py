"""
Tests for HazardSpawner timing, speed multiplier and difficulty ramp.
"""
import random

import pytest

from models import Resolution
from models.fruitfall import HazardType
from games.FruitFall import config
from games.FruitFall.entity import Appearance
from games.FruitFall.entities import Hazard
from games.FruitFall.spawner import HazardSpawner


PLAYFIELD = Resolution(width=800, height=500)


@pytest.fixture
def spawner():
    return HazardSpawner(PLAYFIELD, rng=random.Random(99))


def falling(speed_y):
    return Hazard(PLAYFIELD, HazardType.FRUIT, 0, 0, 40, 40, speed_y, Appearance((1, 2, 3)))


# =============================================================================
# Timing
# =============================================================================

class TestDropTiming:
    """Test interval-gated drops."""

    def test_base_intervals(self, spawner):
        assert spawner.interval(HazardType.FRUIT) == pytest.approx(1.2)
        assert spawner.interval(HazardType.BOMB) == pytest.approx(3.0)

    def test_interval_is_base_over_multiplier(self, spawner):
        spawner.adjust_speed(1.0)
        assert spawner.interval(HazardType.FRUIT) == pytest.approx(1.2 / 2.0)
        assert spawner.interval(HazardType.BOMB) == pytest.approx(3.0 / 2.0)

    def test_drop_requires_interval_strictly_exceeded(self, spawner):
        spawner.drop(HazardType.FRUIT, 10.0)
        assert not spawner.should_drop(HazardType.FRUIT, 10.0 + 1.0)
        assert not spawner.should_drop(HazardType.FRUIT, 10.0 + 1.2)
        assert spawner.should_drop(HazardType.FRUIT, 10.0 + 1.21)

    def test_kinds_have_independent_timers(self, spawner):
        spawner.drop(HazardType.FRUIT, 10.0)
        assert spawner.should_drop(HazardType.BOMB, 10.0)
        assert not spawner.should_drop(HazardType.FRUIT, 10.5)

    def test_drop_creates_hazard_of_kind(self, spawner):
        bomb = spawner.drop(HazardType.BOMB, 5.0)
        assert bomb.kind == HazardType.BOMB
        assert bomb.y == -40

    def test_drop_speed_uses_multiplier(self, spawner):
        spawner.adjust_speed(2.0)
        for i in range(50):
            fruit = spawner.drop(HazardType.FRUIT, float(i))
            assert 2.0 * 3.0 <= fruit.speed_y < 5.0 * 3.0


# =============================================================================
# Speed multiplier
# =============================================================================

class TestAdjustSpeed:
    """Test multiplier clamping and live hazard rescaling."""

    def test_step_up(self, spawner):
        assert spawner.adjust_speed(0.2) == pytest.approx(1.2)
        assert spawner.speed_multiplier == pytest.approx(1.2)

    @pytest.mark.parametrize("delta", [2.5, 5.0, 100.0])
    def test_clamped_at_max(self, spawner, delta):
        assert spawner.adjust_speed(delta) == config.MAX_SPEED_MULTIPLIER

    @pytest.mark.parametrize("delta", [-0.6, -1.0, -100.0])
    def test_clamped_at_min(self, spawner, delta):
        assert spawner.adjust_speed(delta) == config.MIN_SPEED_MULTIPLIER

    def test_many_steps_stay_in_range(self, spawner):
        rng = random.Random(0)
        for _ in range(500):
            value = spawner.adjust_speed(rng.choice([-0.2, 0.2, 0.1]))
            assert config.MIN_SPEED_MULTIPLIER <= value <= config.MAX_SPEED_MULTIPLIER

    def test_live_hazards_scale_by_ratio(self, spawner):
        hazards = [falling(2.0), falling(4.5)]
        spawner.adjust_speed(0.5)  # 1.0 -> 1.5
        assert hazards[0].speed_y == 2.0  # not passed in
        spawner.adjust_speed(0.5, hazards)  # 1.5 -> 2.0
        assert hazards[0].speed_y == pytest.approx(2.0 * 2.0 / 1.5)
        assert hazards[1].speed_y == pytest.approx(4.5 * 2.0 / 1.5)

    def test_clamped_change_uses_clamped_ratio(self, spawner):
        spawner.adjust_speed(1.5)  # 2.5
        hazard = falling(5.0)
        spawner.adjust_speed(1.0, [hazard])  # clamps to 3.0
        assert hazard.speed_y == pytest.approx(5.0 * 3.0 / 2.5)

    def test_no_change_at_bound_leaves_hazards(self, spawner):
        spawner.adjust_speed(-10)
        hazard = falling(3.0)
        spawner.adjust_speed(-0.2, [hazard])
        assert hazard.speed_y == 3.0

    def test_reset_restores_base(self, spawner):
        spawner.adjust_speed(1.2)
        spawner.drop(HazardType.FRUIT, 50.0)
        spawner.reset()
        assert spawner.speed_multiplier == config.BASE_SPEED_MULTIPLIER
        assert spawner.interval(HazardType.FRUIT) == pytest.approx(1.2)
        assert spawner.should_drop(HazardType.FRUIT, 50.0)


# =============================================================================
# Difficulty ramp
# =============================================================================

class TestDifficultyRamp:
    """Test automatic speed-up over time."""

    def test_no_ramp_before_interval(self, spawner):
        spawner.start_ramp(100.0)
        assert not spawner.update_difficulty(104.9)
        assert spawner.speed_multiplier == 1.0

    def test_ramps_after_interval(self, spawner):
        spawner.start_ramp(100.0)
        assert spawner.update_difficulty(105.0)
        assert spawner.speed_multiplier == pytest.approx(1.1)

    def test_ramp_baseline_moves(self, spawner):
        spawner.start_ramp(100.0)
        spawner.update_difficulty(105.0)
        assert not spawner.update_difficulty(109.0)
        assert spawner.update_difficulty(110.0)
        assert spawner.speed_multiplier == pytest.approx(1.2)

    def test_ramp_rescales_live_hazards(self, spawner):
        spawner.start_ramp(0.0)
        hazard = falling(2.2)
        spawner.update_difficulty(5.0, [hazard])
        assert hazard.speed_y == pytest.approx(2.2 * 1.1)

    def test_ramp_stops_at_max(self, spawner):
        spawner.adjust_speed(5.0)
        spawner.start_ramp(0.0)
        assert not spawner.update_difficulty(50.0)
        assert spawner.speed_multiplier == config.MAX_SPEED_MULTIPLIER
