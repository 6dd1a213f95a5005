"""SplashView interface - the embeddable splash element."""

import warnings
from typing import Optional

from .config import SplashConfig, create_default_config
from .listener import SplashListener
from .phases import PhaseKind
from .renderer import FrameRenderer, Surface
from .state import DrawState, ViewGeometry
from .state_machine import SplashStateMachine, external_stacklevel


class SplashView:
    """
    Splash element hosted inside a container.

    Coordinates:
    - SplashStateMachine (phases and draw state)
    - FrameRenderer (draw calls onto a Surface)
    - Host container (parent, asked to remove the view at the end)
    - Logger (optional)

    Driven from outside through on_resize(), tick() and render(); any time
    driver can call these (game loop, asyncio loop, offline tracer).
    """

    def __init__(self, config: Optional[SplashConfig] = None,
                 surface: Optional[Surface] = None, parent=None, logger=None) -> None:
        """
        Initialize splash view.

        Args:
            config: Configuration object, defaults to create_default_config()
            surface: Surface to draw on, can be attached later
            parent: Host container holding this view
            logger: Logger for configuration and phase transitions
        """
        self.config = config if config is not None else create_default_config()
        self.surface = surface
        self.parent = parent
        self.logger = logger

        self.renderer = FrameRenderer(self.config)
        self.machine = SplashStateMachine(
            self.config,
            render=self.render,
            detach=self.detach_from_parent,
            logger=logger
        )
        self.geometry: Optional[ViewGeometry] = None
        self.frame_count = 0

    @property
    def phase(self) -> Optional[PhaseKind]:
        return self.machine.kind

    @property
    def draw_state(self) -> DrawState:
        return self.machine.state

    @property
    def is_running(self) -> bool:
        return self.machine.is_running

    @property
    def is_finished(self) -> bool:
        return self.machine.finished

    def on_resize(self, width: float, height: float):
        """
        Update size-derived geometry.

        Args:
            width: View width in pixels
            height: View height in pixels
        """
        if self.geometry is not None and (self.geometry.width, self.geometry.height) == (width, height):
            return
        self.geometry = ViewGeometry.from_size(width, height)
        self.machine.max_hole_radius = self.geometry.diagonal

    def start(self, listener: Optional[SplashListener] = None) -> bool:
        """Start rotating. Ignored if already started."""
        if self.machine.started:
            return False
        if self.logger:
            self.logger.log_config(self.config)
        return self.machine.start(listener)

    def request_disappear(self) -> bool:
        """Collapse the ring and open the hole, then remove the view."""
        return self.machine.request_disappear()

    def tick(self, dt: float) -> bool:
        """Advance the animation. Returns True if a redraw is needed."""
        return self.machine.tick(dt)

    def step(self, dt: float) -> bool:
        """Tick and, when needed, draw a frame."""
        redraw = self.tick(dt)
        if redraw:
            self.render()
        return redraw

    def render(self) -> bool:
        """
        Draw the current frame onto the surface.

        Returns:
            Whether a frame was drawn
        """
        if self.surface is None or self.geometry is None or self.machine.finished:
            return False
        try:
            self.renderer.render(self.surface, self.geometry, self.machine.kind, self.machine.state)
        except Exception as exc:
            warnings.warn(
                f"{self.__class__.__name__} failed to draw a frame: {exc!r}",
                RuntimeWarning,
                stacklevel=external_stacklevel()
            )
            return False
        self.frame_count += 1
        return True

    def detach_from_parent(self) -> bool:
        """
        Ask the host container to remove this view.

        Returns:
            Whether the view was removed
        """
        parent = self.parent
        remove_view = getattr(parent, 'remove_view', None)
        if parent is None or not callable(remove_view):
            if self.config.debug:
                warnings.warn(
                    "splash view not removed after animation ended because no "
                    "host that can remove views was found",
                    RuntimeWarning,
                    stacklevel=external_stacklevel()
                )
            return False
        remove_view(self)
        self.parent = None
        return True
