"""Tests for easing curves and the per-phase computation functions."""

import math

import numpy as np
import pytest

from splashview.easing import decelerate, linear, make_overshoot, overshoot
from splashview.phases import (
    PhaseKind,
    hole_radius,
    merge_ring_radius,
    phase_fraction,
    rotation_angle,
    singular_circle_radius,
)


def test_overshoot_endpoints_and_peak():
    assert overshoot(0.0) == pytest.approx(0.0)
    assert overshoot(1.0) == pytest.approx(1.0)

    samples = np.array([overshoot(t) for t in np.linspace(0.0, 1.0, 201)])
    assert samples.max() > 1.5
    assert samples.min() >= -1e-12


def test_make_overshoot_uses_tension():
    assert make_overshoot(0.0)(0.5) == pytest.approx(overshoot(0.5, tension=0.0))
    assert make_overshoot(6.0)(0.5) == pytest.approx(overshoot(0.5))


def test_decelerate_is_monotonic_fast_start():
    samples = np.array([decelerate(t) for t in np.linspace(0.0, 1.0, 101)])
    assert samples[0] == 0.0
    assert samples[-1] == pytest.approx(1.0)
    assert np.all(np.diff(samples) >= 0.0)
    # more than half way after a quarter of the time
    assert decelerate(0.25) > 0.4
    assert decelerate(0.5, factor=2.0) == pytest.approx(1.0 - 0.5 ** 4)


def test_easing_inputs_are_clamped():
    assert linear(-1.0) == 0.0
    assert linear(2.0) == 1.0
    assert decelerate(3.0) == pytest.approx(1.0)
    assert overshoot(-0.5) == pytest.approx(0.0)


def test_rotation_angle_wraps():
    assert rotation_angle(0.0, 1.2) == 0.0
    assert rotation_angle(0.3, 1.2) == pytest.approx(math.pi / 2)
    assert rotation_angle(0.6, 1.2) == pytest.approx(math.pi)
    assert rotation_angle(1.2, 1.2) == pytest.approx(0.0)
    assert rotation_angle(1.5, 1.2) == pytest.approx(math.pi / 2)

    for elapsed in np.linspace(0.0, 20.0, 997):
        angle = rotation_angle(elapsed, 1.2)
        assert 0.0 <= angle < 2 * math.pi


def test_rotation_angle_zero_period():
    assert rotation_angle(5.0, 0.0) == 0.0


def test_merge_ring_radius_collapses_to_zero():
    assert merge_ring_radius(0.0, 0.6, 30.0) == pytest.approx(30.0)
    assert merge_ring_radius(0.6, 0.6, 30.0) == 0.0
    assert merge_ring_radius(0.9, 0.6, 30.0) == 0.0
    # ring bulges outward before snapping in
    assert merge_ring_radius(0.3, 0.6, 30.0) > 30.0


def test_merge_ring_radius_zero_duration():
    assert merge_ring_radius(0.0, 0.0, 30.0) == 0.0


def test_singular_circle_radius_matches_merge_shape():
    for elapsed in (0.0, 0.1, 0.2, 0.3):
        assert singular_circle_radius(elapsed, 0.3, 6.0) == pytest.approx(
            merge_ring_radius(elapsed, 0.3, 6.0))
    assert singular_circle_radius(0.3, 0.3, 6.0) == 0.0
    assert singular_circle_radius(0.0, 0.0, 6.0) == 0.0


def test_hole_radius_grows_to_max():
    max_radius = math.hypot(300, 300)
    radii = [hole_radius(t, 0.9, max_radius) for t in np.linspace(0.0, 1.2, 61)]
    assert radii[0] == 0.0
    assert np.all(np.diff(radii) >= 0.0)
    assert radii[-1] == max_radius
    assert hole_radius(0.9, 0.9, max_radius) == max_radius


def test_hole_radius_zero_duration():
    assert hole_radius(0.0, 0.0, 100.0) == 100.0


def test_phase_fraction():
    assert phase_fraction(0.25, 1.0) == 0.25
    assert phase_fraction(2.0, 1.0) == 1.0
    assert phase_fraction(0.0, 0.0) == 1.0


def test_phase_order():
    assert PhaseKind.ROTATING.next is PhaseKind.MERGING
    assert PhaseKind.MERGING.next is PhaseKind.SINGULAR
    assert PhaseKind.SINGULAR.next is PhaseKind.EXPANDING
    assert PhaseKind.EXPANDING.next is None
