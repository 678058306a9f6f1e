"""Tests for AnimationClock"""

import pytest

from src.swimlib.core import AnimationClock
from src.swimlib.config.settings import SPEED


def test_clock_scales_elapsed_time():
    clock = AnimationClock()
    assert clock.speed == SPEED

    clock.tick(0.5)
    clock.tick(0.5)

    assert clock.elapsed == pytest.approx(1.0)
    assert clock.time == pytest.approx(SPEED)


def test_clock_ignores_negative_delta():
    """Time never runs backwards"""
    clock = AnimationClock(speed=1.0)
    clock.tick(1.0)
    clock.tick(-0.5)
    clock.tick(0.0)

    assert clock.time == 1.0


def test_paused_clock_holds_time():
    clock = AnimationClock(speed=2.0)
    clock.tick(1.0)
    clock.paused = True
    clock.tick(3.0)

    assert clock.time == 2.0


def test_speed_clamped_and_reset():
    clock = AnimationClock(speed=1.0)
    clock.speed = -2.0
    assert clock.speed == 0.0

    clock.tick(1.0)
    clock.reset()
    assert clock.elapsed == 0.0


def test_speed_change_never_rewinds_time():
    """A slower speed only slows later ticks"""
    clock = AnimationClock(speed=1.5)
    before = clock.tick(10.0)

    clock.speed = 1.0
    after = clock.tick(1 / 60)

    assert before == 15.0
    assert after == pytest.approx(15.0 + 1 / 60)
    assert after > before

    clock.reset()
    assert clock.time == 0.0
