"""Frame loop - drives a splash view from an asyncio event loop."""

import asyncio
import time
from typing import Callable, Optional

from .splash import SplashView


class SplashLoop:
    """
    Time driver for a splash view.

    Ticks and renders the view at a configurable frame rate using measured
    wall-clock time between frames. Stops by itself once the view finishes.
    """

    def __init__(self, view: SplashView,
                 frame_callback: Optional[Callable[[SplashView], bool]] = None,
                 fps: float = 60.0,
                 underlay: Optional[Callable[[], None]] = None,
                 clock: Callable[[], float] = time.perf_counter):
        """
        Initialize frame loop.

        Args:
            view: SplashView to drive
            frame_callback: Called after every frame. Should return False to quit.
            fps: Frame rate (10-100)
            underlay: Draws whatever lies beneath the view, called before each frame
            clock: Monotonic time source in seconds
        """
        self.view = view
        self.frame_callback = frame_callback
        self.underlay = underlay
        self.clock = clock
        self.fps = max(10.0, min(100.0, fps))
        self.frame_period = 1.0 / self.fps

        self.running = False
        self._task: Optional[asyncio.Task] = None

    @property
    def is_running(self) -> bool:
        """Check if the loop is running."""
        return self.running

    async def _frame_loop(self):
        """Main frame loop."""
        last = self.clock()
        while self.running:
            now = self.clock()
            dt = now - last
            last = now

            if self.underlay is not None:
                self.underlay()
            self.view.step(dt)

            if self.frame_callback is not None and self.frame_callback(self.view) is False:
                self.running = False
                break

            if self.view.is_finished:
                self.running = False
                break

            # Wait for next frame
            await asyncio.sleep(self.frame_period)

    def start(self) -> bool:
        """
        Start driving the view.

        Returns:
            False if the loop is already running or the view has finished
        """
        if self.running or self.view.is_finished:
            return False
        self.running = True
        self._task = asyncio.create_task(self._frame_loop())
        return True

    def stop(self):
        """Stop driving the view, leaving it in its current phase."""
        self.running = False
        if self._task is not None and not self._task.done():
            self._task.cancel()

    async def wait_for_stop(self) -> bool:
        """
        Wait for the loop to stop.

        Returns:
            Whether the view ran to the end of its animation
        """
        if self._task is not None:
            try:
                await self._task
            except asyncio.CancelledError:
                pass
        return self.view.is_finished


async def run_splash(view: SplashView, disappear_after: Optional[float] = None,
                     fps: float = 60.0, listener=None):
    """
    Run a splash view to completion.

    Args:
        view: SplashView with size and surface already set
        disappear_after: Seconds of rotation before the disappear request, None to wait for an external request
        fps: Frame rate
        listener: Optional SplashListener
    """
    view.start(listener)
    loop = SplashLoop(view, fps=fps)
    loop.start()
    try:
        if disappear_after is not None:
            await asyncio.sleep(disappear_after)
            view.request_disappear()
        await loop.wait_for_stop()
    finally:
        loop.stop()
    if view.logger:
        view.logger.log_final(view)
