"""Pygame animator - hosts a splash view on top of window content."""

from typing import Callable, List, Optional

import pygame

from splashview import SplashHost, SplashView
from splashview.config import SplashConfig, create_default_config
from splashview.renderer import Surface


class PygameSurface(Surface):
    """Surface adapter drawing onto a pygame.Surface."""

    def __init__(self, target: pygame.Surface):
        self.target = target

    def fill(self, color):
        self.target.fill(color)

    def draw_circle(self, center, radius, color):
        if radius <= 0.0:
            return
        pygame.draw.circle(self.target, color, center, radius)

    def draw_ring(self, center, radius, stroke_width, color):
        # pygame grows the stroke inward from the outer edge
        outer = radius + stroke_width / 2.0
        width = min(int(round(stroke_width)), int(outer))
        if width <= 0:
            return
        pygame.draw.circle(self.target, color, center, outer, width)


class PygameHost(SplashHost):
    """Window-level container: draws content, then the views stacked on top."""

    def __init__(self, draw_content: Optional[Callable[[pygame.Surface], None]] = None):
        self.views: List[SplashView] = []
        self.draw_content = draw_content

    def add_view(self, view: SplashView):
        self.views.append(view)
        view.parent = self

    def remove_view(self, view):
        if view in self.views:
            self.views.remove(view)

    def step(self, screen: pygame.Surface, dt: float):
        """Draw content and advance every hosted view by dt."""
        if self.draw_content is not None:
            self.draw_content(screen)
        for view in list(self.views):
            view.step(dt)


class PygameAnimator:
    """Pygame window running a splash view over placeholder content."""

    def __init__(self, config: Optional[SplashConfig] = None,
                 window_size: tuple = (480, 800), fps: float = 60.0, logger=None):
        """
        Initialize animator.

        Args:
            config: Splash configuration
            window_size: Window size (width, height)
            fps: Target frame rate
            logger: Optional Logger passed to the view
        """
        self.config = config if config is not None else create_default_config()
        self.window_size = window_size
        self.fps = fps
        self.logger = logger

        self.colors = {
            'content': (32, 36, 48),
            'card': (58, 64, 82),
            'text': (235, 235, 235),
            'hint': (150, 150, 150),
        }

        self.running = False
        self.screen = None
        self.view: Optional[SplashView] = None
        self.host: Optional[PygameHost] = None

    def start(self):
        # Initialize Pygame
        pygame.init()
        self.screen = pygame.display.set_mode(self.window_size)
        pygame.display.set_caption("Splash View")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, 32)
        self.small_font = pygame.font.Font(None, 20)

        self.host = PygameHost(draw_content=self._draw_content)
        self.view = SplashView(self.config, surface=PygameSurface(self.screen), logger=self.logger)
        self.host.add_view(self.view)
        self.view.on_resize(*self.window_size)
        self.running = True

    def _draw_text(self, text: str, pos: tuple, font=None, color=None):
        """Draw text on screen."""
        if font is None:
            font = self.font
        if color is None:
            color = self.colors['text']
        text_surface = font.render(text, True, color)
        self.screen.blit(text_surface, pos)

    def _draw_content(self, screen: pygame.Surface):
        """Placeholder app content revealed by the hole."""
        screen.fill(self.colors['content'])
        width, height = self.window_size
        margin = 24
        card_height = 96
        for i in range(int(height // (card_height + margin))):
            top = margin + i * (card_height + margin)
            pygame.draw.rect(screen, self.colors['card'],
                             (margin, top, width - 2 * margin, card_height), border_radius=8)
            self._draw_text(f"Story {i + 1}", (margin + 16, top + 16))
        self._draw_text("ESC/Q: Quit", (margin, height - 24), self.small_font, self.colors['hint'])

    def handle_events(self) -> bool:
        """Handle pygame events. Returns True if should continue."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE or event.key == pygame.K_q:
                    return False
                elif event.key == pygame.K_SPACE:
                    self.view.request_disappear()
        return True

    def run(self, disappear_after: Optional[float] = 2.4, linger: float = 1.0, listener=None):
        """
        Run until the splash has finished and `linger` seconds have passed.

        Args:
            disappear_after: Seconds of rotation before disappearing, None to wait for SPACE
            linger: Seconds to keep showing content after the view is removed
            listener: Optional SplashListener
        """
        if not self.running:
            self.start()
        self.view.start(listener)

        elapsed = 0.0
        finished_at = None
        while self.running:
            if not self.handle_events():
                break

            dt = self.clock.tick(self.fps) / 1000.0
            elapsed += dt
            if disappear_after is not None and elapsed >= disappear_after:
                self.view.request_disappear()

            self.host.step(self.screen, dt)
            pygame.display.flip()

            if self.view.is_finished:
                if finished_at is None:
                    finished_at = elapsed
                elif elapsed - finished_at >= linger:
                    break

        if self.logger:
            self.logger.log_final(self.view)

    def finish(self):
        """Close the window."""
        self.running = False
        pygame.quit()
