"""Observer and host interfaces the splash view talks to."""

from abc import ABC, abstractmethod


class SplashListener:
    """
    Observer of one splash run.

    Receives exactly one on_start, zero or more on_update calls while the
    disappear sequence runs, and exactly one on_end. All methods default to
    no-ops so subclasses only override what they need.
    """

    def on_start(self):
        """Called on the first tick after start()."""
        pass

    def on_update(self, fraction: float):
        """
        Called on every tick of the disappear sequence.

        Args:
            fraction: Elapsed disappear time over its total duration. Can
                exceed 1.0 on the final tick.
        """
        pass

    def on_end(self):
        """Called once after the view has asked its host to detach it."""
        pass


class SplashHost(ABC):
    """Container that can detach a splash view it holds."""

    @abstractmethod
    def remove_view(self, view):
        """
        Detach a child view.

        Args:
            view: The view to remove
        """
        pass
