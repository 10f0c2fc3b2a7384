from __future__ import annotations

import pytest

from config import GRAVITY, JUMP_FORCE
from track.entities import Character
from track.physics import JumpPhysics


def test_start_jump_sets_velocity_once() -> None:
    physics = JumpPhysics()
    c = Character()

    assert physics.start_jump(c) is True
    assert c.is_jumping
    assert c.vertical_velocity == JUMP_FORCE

    physics.step(c)
    velocity = c.vertical_velocity
    # re-triggering while airborne changes nothing
    assert physics.start_jump(c) is False
    assert c.vertical_velocity == velocity


def test_arc_lands_on_ground_within_analytic_flight_time() -> None:
    physics = JumpPhysics()
    c = Character()
    physics.start_jump(c)

    landed_at = None
    for step in range(1, physics.flight_steps + 1):
        if physics.step(c):
            landed_at = step
            break

    assert landed_at is not None
    assert landed_at >= physics.flight_steps - 1
    assert c.vertical_position == pytest.approx(0.0)
    assert c.vertical_velocity == 0.0
    assert c.is_jumping is False


def test_peak_is_bounded_by_closed_form() -> None:
    physics = JumpPhysics()
    c = Character()
    physics.start_jump(c)

    peak = 0.0
    while c.is_jumping:
        physics.step(c)
        peak = max(peak, c.vertical_position)

    closed = JUMP_FORCE**2 / (2 * GRAVITY)
    assert physics.peak_height == pytest.approx(closed)
    assert closed - JUMP_FORCE <= peak <= closed


def test_same_ratio_gives_same_flight_time() -> None:
    assert JumpPhysics(gravity=1.5, jump_force=20).flight_steps == JumpPhysics(gravity=3.0, jump_force=40).flight_steps


def test_advance_stops_after_landing() -> None:
    physics = JumpPhysics()
    c = Character()
    physics.start_jump(c)
    physics.advance(c, 500)

    assert c.is_jumping is False
    assert c.vertical_position == 0.0


def test_step_on_ground_is_noop() -> None:
    physics = JumpPhysics()
    c = Character()
    assert physics.step(c) is False
    assert c.vertical_position == 0.0
    assert c.vertical_velocity == 0.0
