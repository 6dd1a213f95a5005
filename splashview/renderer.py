"""Frame renderer - turns the draw state into draw calls on a surface."""

import math
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np

from .config import Color, SplashConfig
from .phases import PhaseKind
from .state import TWO_PI, DrawState, ViewGeometry

Point = Tuple[float, float]


class Surface(ABC):
    """Drawing surface the renderer targets."""

    @abstractmethod
    def fill(self, color: Color):
        """Fill the entire surface with a color."""
        pass

    @abstractmethod
    def draw_circle(self, center: Point, radius: float, color: Color):
        """Draw a filled circle."""
        pass

    @abstractmethod
    def draw_ring(self, center: Point, radius: float, stroke_width: float, color: Color):
        """
        Draw a stroked circle.

        Args:
            center: Circle center
            radius: Radius of the middle of the stroke
            stroke_width: Width of the stroke, centered on radius
            color: Stroke color
        """
        pass


class FrameRenderer:
    """
    Issues the draw calls for one frame.

    Slot angles and colors are computed once at construction; drawing a frame
    reads the draw state and geometry without building new primitives.
    """

    def __init__(self, config: SplashConfig):
        self.config = config
        self.background_color = config.background_color
        self.colors = config.palette
        num_circles = len(self.colors)
        if num_circles:
            self.slot_angles = tuple(np.arange(num_circles) * (TWO_PI / num_circles))
        else:
            self.slot_angles = ()

    def render(self, surface: Surface, geometry: ViewGeometry,
               kind: Optional[PhaseKind], state: DrawState):
        """
        Draw one frame.

        Args:
            surface: Target surface
            geometry: Current view geometry
            kind: Active phase, None before the animation starts
            state: Current draw state
        """
        self._draw_background(surface, geometry, state)

        if kind is PhaseKind.ROTATING or kind is PhaseKind.MERGING:
            self._draw_circles(surface, geometry, state)
        elif kind is PhaseKind.SINGULAR:
            self._draw_single_circle(surface, geometry, state)

    def _draw_background(self, surface: Surface, geometry: ViewGeometry, state: DrawState):
        if state.hole_radius > 0.0:
            # zero width once the hole covers the whole view
            stroke_width = max(0.0, geometry.diagonal - state.hole_radius)
            radius = state.hole_radius + stroke_width / 2.0
            surface.draw_ring(geometry.center, radius, stroke_width, self.background_color)
        else:
            surface.fill(self.background_color)

    def _draw_circles(self, surface: Surface, geometry: ViewGeometry, state: DrawState):
        cx, cy = geometry.center_x, geometry.center_y
        ring_radius = state.ring_radius
        for slot_angle, color in zip(self.slot_angles, self.colors):
            angle = state.angle + slot_angle
            x = cx + ring_radius * math.sin(angle)
            y = cy - ring_radius * math.cos(angle)
            surface.draw_circle((x, y), state.circle_radius, color)

    def _draw_single_circle(self, surface: Surface, geometry: ViewGeometry, state: DrawState):
        surface.draw_circle(geometry.center, state.circle_radius, state.single_color)
