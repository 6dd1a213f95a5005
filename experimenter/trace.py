"""Headless tracing of a splash run at a fixed time step."""

from dataclasses import dataclass, field, replace
from typing import List, Optional, Tuple

import numpy as np

from splashview import SplashConfig, SplashView, create_default_config


@dataclass
class Trace:
    """Draw state sampled after every tick of a run."""
    time: np.ndarray
    phase: List[str]
    angle: np.ndarray
    ring_radius: np.ndarray
    circle_radius: np.ndarray
    hole_radius: np.ndarray
    transitions: List[Tuple[float, str]] = field(default_factory=list)  # (time, phase entered)

    def __len__(self):
        return len(self.time)


def trace_run(config: Optional[SplashConfig] = None, size: tuple = (300, 300),
              dt: float = 1.0 / 60.0, disappear_at: float = 1.2,
              max_time: float = 30.0) -> Trace:
    """
    Drive a splash view without a surface and record its draw state.

    Args:
        config: Splash configuration, defaults to create_default_config()
        size: View size (width, height)
        dt: Fixed tick length in seconds
        disappear_at: Time at which the disappear request is made
        max_time: Upper bound on simulated time

    Returns:
        Trace of the run
    """
    if config is None:
        config = create_default_config()
    if dt <= 0.0:
        raise ValueError(f"dt must be positive, got {dt}")

    # no host to detach from
    view = SplashView(replace(config, remove_from_parent_on_end=False))
    view.on_resize(*size)
    view.start()

    times, phases = [], []
    angles, rings, circles, holes = [], [], [], []
    transitions = [(0.0, view.phase.name)]

    def record_transition(time, last):
        current = view.phase
        if current is not last:
            transitions.append((time, current.name if current is not None else "DONE"))
        return current

    t = 0.0
    requested = False
    last = view.phase
    while t < max_time and not view.is_finished:
        if not requested and t >= disappear_at:
            requested = view.request_disappear()
            last = record_transition(t, last)

        ticked = view.phase
        view.tick(dt)
        t += dt
        last = record_transition(t, last)

        state = view.draw_state
        times.append(t)
        phases.append(ticked.name)
        angles.append(state.angle)
        rings.append(state.ring_radius)
        circles.append(state.circle_radius)
        holes.append(state.hole_radius)

    return Trace(
        time=np.asarray(times),
        phase=phases,
        angle=np.asarray(angles),
        ring_radius=np.asarray(rings),
        circle_radius=np.asarray(circles),
        hole_radius=np.asarray(holes),
        transitions=transitions,
    )
