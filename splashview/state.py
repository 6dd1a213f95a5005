"""Draw state and view geometry shared by the state machine and renderer."""

import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .config import Color

TWO_PI = 2.0 * math.pi


@dataclass
class DrawState:
    """Mutable per-frame draw parameters. Exactly one instance per run."""
    angle: float = 0.0  # Ring rotation (rad), kept in [0, 2*pi)
    ring_radius: float = 0.0  # Distance of circle centers from the view center
    circle_radius: float = 0.0  # Radius of each drawn circle
    hole_radius: float = 0.0  # Radius of the transparent hole, 0 = opaque background
    single_color: Color = (0, 0, 0)  # Color of the merged circle

    def set_angle(self, angle: float):
        """Store angle wrapped into [0, 2*pi)."""
        angle = math.fmod(angle, TWO_PI)
        if angle < 0.0:
            angle += TWO_PI
        if angle >= TWO_PI:
            angle = 0.0
        self.angle = angle

    def set_ring_radius(self, radius: float):
        self.ring_radius = max(0.0, radius)

    def set_circle_radius(self, radius: float):
        self.circle_radius = max(0.0, radius)

    def set_hole_radius(self, radius: float):
        self.hole_radius = max(0.0, radius)


@dataclass(frozen=True)
class ViewGeometry:
    """Size-derived values, recomputed only when the view is resized."""
    width: float
    height: float
    center_x: float
    center_y: float
    diagonal: float  # Largest hole radius needed to clear the whole view
    center: Tuple[float, float]

    @classmethod
    def from_size(cls, width: float, height: float) -> 'ViewGeometry':
        width = max(0.0, float(width))
        height = max(0.0, float(height))
        return cls(
            width=width,
            height=height,
            center_x=width / 2.0,
            center_y=height / 2.0,
            diagonal=float(np.hypot(width, height)),
            center=(width / 2.0, height / 2.0),
        )
