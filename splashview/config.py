"""Configuration parameters for the splash view."""

from dataclasses import dataclass, field
from typing import Optional, Tuple

Color = Tuple[int, int, int]

COLOR_ORANGE: Color = (255, 150, 0)
COLOR_AQUA: Color = (2, 209, 172)
COLOR_YELLOW: Color = (255, 210, 0)
COLOR_BLUE: Color = (0, 198, 255)
COLOR_GREEN: Color = (0, 224, 153)
COLOR_PINK: Color = (255, 56, 145)

DEFAULT_PALETTE: Tuple[Color, ...] = (
    COLOR_ORANGE, COLOR_AQUA, COLOR_YELLOW, COLOR_BLUE, COLOR_GREEN, COLOR_PINK
)
DEFAULT_BACKGROUND_COLOR: Color = (238, 236, 226)
DEFAULT_ROTATION_RADIUS = 30.0  # du
DEFAULT_CIRCLE_RADIUS = 6.0  # du
DEFAULT_ROTATION_DURATION = 1.2  # seconds


def _clamp_color(color) -> Color:
    return tuple(max(0, min(255, int(c))) for c in color[:3])


@dataclass(frozen=True)
class SplashConfig:
    """Configuration for one splash animation run."""

    # Geometry (density-independent units, scaled by density)
    rotation_radius: float = DEFAULT_ROTATION_RADIUS  # Radius of the ring the circles sit on
    circle_radius: float = DEFAULT_CIRCLE_RADIUS  # Radius of each colored circle
    density: float = 1.0  # Pixels per density-independent unit

    # Colors
    background_color: Color = DEFAULT_BACKGROUND_COLOR
    palette: Tuple[Color, ...] = field(default_factory=lambda: DEFAULT_PALETTE)  # Slot order around the ring
    merged_color: Optional[Color] = None  # Color of the single merged circle (first palette color if None)

    # Phase durations (seconds)
    rotation_duration: float = DEFAULT_ROTATION_DURATION  # Period of one full revolution
    merge_duration: Optional[float] = None  # Defaults to rotation_duration / 2
    singular_duration: Optional[float] = None  # Defaults to rotation_duration / 4
    expand_duration: Optional[float] = None  # Defaults to rotation_duration * 3 / 4

    # Easing
    overshoot_tension: float = 6.0  # Tension of the merge/singular overshoot curve

    # Lifecycle
    remove_from_parent_on_end: bool = True  # Ask the host to detach the view once the hole is fully open
    debug: bool = __debug__  # Emit diagnostics for non-fatal problems

    def __post_init__(self):
        """Validate and adjust configuration."""
        # frozen dataclass, so adjust through object.__setattr__
        set_ = object.__setattr__

        set_(self, 'rotation_radius', max(0.0, float(self.rotation_radius)))
        set_(self, 'circle_radius', max(0.0, float(self.circle_radius)))
        set_(self, 'density', max(0.0, float(self.density)))
        set_(self, 'rotation_duration', max(0.0, float(self.rotation_duration)))
        set_(self, 'overshoot_tension', max(0.0, float(self.overshoot_tension)))

        set_(self, 'background_color', _clamp_color(self.background_color))
        set_(self, 'palette', tuple(_clamp_color(c) for c in self.palette))

        if self.merged_color is None:
            merged = self.palette[0] if self.palette else self.background_color
        else:
            merged = _clamp_color(self.merged_color)
        set_(self, 'merged_color', merged)

        # Durations left unset are derived from the rotation period
        derived = {
            'merge_duration': self.rotation_duration / 2,
            'singular_duration': self.rotation_duration / 4,
            'expand_duration': self.rotation_duration * 3 / 4,
        }
        for name, default in derived.items():
            value = getattr(self, name)
            set_(self, name, default if value is None else max(0.0, float(value)))

    @property
    def base_ring_radius(self) -> float:
        """Ring radius in pixels."""
        return self.rotation_radius * self.density

    @property
    def base_circle_radius(self) -> float:
        """Circle radius in pixels."""
        return self.circle_radius * self.density

    @property
    def disappear_duration(self) -> float:
        """Total length of the merge, singular and expand phases."""
        return self.merge_duration + self.singular_duration + self.expand_duration


def create_default_config(density: float = 1.0, **overrides) -> SplashConfig:
    """
    Create default splash configuration.

    Args:
        density: Pixels per density-independent unit of the target display
        **overrides: Any SplashConfig field to override

    Returns:
        Default SplashConfig
    """
    values = dict(
        rotation_radius=DEFAULT_ROTATION_RADIUS,
        circle_radius=DEFAULT_CIRCLE_RADIUS,
        density=density,
        background_color=DEFAULT_BACKGROUND_COLOR,
        palette=DEFAULT_PALETTE,
        rotation_duration=DEFAULT_ROTATION_DURATION,
        remove_from_parent_on_end=True,
    )
    values.update(overrides)
    return SplashConfig(**values)
