"""Easing curves mapping normalized time in [0, 1] to an eased fraction."""

from functools import partial
from typing import Callable

Easing = Callable[[float], float]


def _clamp01(t: float) -> float:
    return max(0.0, min(1.0, t))


def linear(t: float) -> float:
    """Identity curve."""
    return _clamp01(t)


def overshoot(t: float, tension: float = 6.0) -> float:
    """
    Overshoot curve: passes 1.0, peaks, and settles back on 1.0 at t=1.

    With tension 6 the peak is about 1.65 near t=0.43. Evaluated in reverse
    (1 - progress) it produces the outward bulge before the snap to 0.
    """
    u = _clamp01(t) - 1.0
    return u * u * ((tension + 1.0) * u + tension) + 1.0


def decelerate(t: float, factor: float = 1.0) -> float:
    """Fast start, slow finish."""
    t = _clamp01(t)
    if factor == 1.0:
        return 1.0 - (1.0 - t) * (1.0 - t)
    return 1.0 - (1.0 - t) ** (2.0 * factor)


def make_overshoot(tension: float) -> Easing:
    """Overshoot curve with a fixed tension."""
    return partial(overshoot, tension=tension)
