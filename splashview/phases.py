"""Phase variants and the pure functions that compute draw parameters for them."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .easing import Easing, decelerate, linear, make_overshoot, overshoot
from .state import TWO_PI


class PhaseKind(Enum):
    """Visual phases, in the only order they can occur."""
    ROTATING = 0
    MERGING = 1
    SINGULAR = 2
    EXPANDING = 3

    @property
    def next(self) -> Optional['PhaseKind']:
        """Phase that follows this one, None after EXPANDING."""
        order = list(PhaseKind)
        index = order.index(self) + 1
        return order[index] if index < len(order) else None


def phase_fraction(elapsed: float, duration: float) -> float:
    """
    Normalized progress through a time-bounded phase.

    A zero or negative duration counts as already complete.
    """
    if duration <= 0.0:
        return 1.0
    return max(0.0, min(1.0, elapsed / duration))


def is_complete(elapsed: float, duration: float) -> bool:
    return duration <= 0.0 or elapsed >= duration


def rotation_angle(elapsed: float, period: float) -> float:
    """Ring angle in [0, 2*pi) after `elapsed` seconds of rotation."""
    if period <= 0.0:
        return 0.0
    angle = ((elapsed / period) % 1.0) * TWO_PI
    return 0.0 if angle >= TWO_PI else angle


def merge_ring_radius(elapsed: float, duration: float, base_radius: float,
                      easing: Easing = overshoot) -> float:
    """
    Ring radius while the circles collapse into the center.

    The eased value is returned unclamped; it is exactly 0 once the phase is
    complete.
    """
    if is_complete(elapsed, duration):
        return 0.0
    return base_radius * easing(1.0 - phase_fraction(elapsed, duration))


def singular_circle_radius(elapsed: float, duration: float, base_radius: float,
                           easing: Easing = overshoot) -> float:
    """Radius of the single merged circle as it shrinks away."""
    if is_complete(elapsed, duration):
        return 0.0
    return base_radius * easing(1.0 - phase_fraction(elapsed, duration))


def hole_radius(elapsed: float, duration: float, max_radius: float,
                easing: Easing = decelerate) -> float:
    """Radius of the transparent hole, reaching max_radius at the end."""
    if is_complete(elapsed, duration):
        return max_radius
    return max_radius * easing(phase_fraction(elapsed, duration))


@dataclass
class Phase:
    """
    The active phase and its phase-local state.

    Each phase keeps its own elapsed counter and easing; the start values
    are whatever the draw state held when the phase was entered.
    """
    kind: PhaseKind
    duration: float  # Seconds; rotation uses it as its period
    easing: Easing
    elapsed: float = 0.0
    start_angle: float = 0.0
    start_radius: float = 0.0

    @property
    def is_time_bounded(self) -> bool:
        return self.kind is not PhaseKind.ROTATING

    @property
    def complete(self) -> bool:
        return self.is_time_bounded and is_complete(self.elapsed, self.duration)


def rotating_phase(config) -> Phase:
    return Phase(PhaseKind.ROTATING, config.rotation_duration, linear,
                 start_radius=config.base_ring_radius)


def merging_phase(config, start_angle: float, start_radius: float) -> Phase:
    return Phase(PhaseKind.MERGING, config.merge_duration,
                 make_overshoot(config.overshoot_tension),
                 start_angle=start_angle, start_radius=start_radius)


def singular_phase(config, start_radius: float) -> Phase:
    return Phase(PhaseKind.SINGULAR, config.singular_duration,
                 make_overshoot(config.overshoot_tension),
                 start_radius=start_radius)


def expanding_phase(config) -> Phase:
    return Phase(PhaseKind.EXPANDING, config.expand_duration, decelerate)
