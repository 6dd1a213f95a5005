"""Demo script for the splash view with optional animation."""

import sys
from splashview import SplashListener, create_default_config
from splashview.logger import Logger
from animator import PygameAnimator
from experimenter import trace_run
from experimenter.plotter import plot_trace


class PrintingListener(SplashListener):
    """Listener that reports the splash lifecycle on stdout."""

    def __init__(self):
        self.updates = 0

    def on_start(self):
        print("Splash started")

    def on_update(self, fraction: float):
        self.updates += 1
        if self.updates % 10 == 0:
            print(f"  disappearing: {fraction:6.1%}")

    def on_end(self):
        print(f"Splash ended after {self.updates} updates")


def main(headless: bool = False):
    """Run demo with optional animation."""
    print("=" * 60)
    print("Splash View Demo")
    print("=" * 60)

    config = create_default_config(density=2.0)

    if headless:
        print("\nRunning in headless mode (trace + plot)...")
        trace = trace_run(config, size=(480, 800), disappear_at=2.4)
        for time, name in trace.transitions:
            print(f"  {time:6.3f}s  {name}")
        plot_trace(trace, "splash_trace.png")
        print("\nSaved splash_trace.png")
        return

    print("\nRunning with animation...")
    print("Controls:")
    print("  SPACE: Disappear now")
    print("  ESC or Q: Quit")
    print("=" * 60)

    animator = PygameAnimator(config, window_size=(480, 800), fps=60, logger=Logger())
    try:
        animator.run(disappear_after=2.4, listener=PrintingListener())
    except KeyboardInterrupt:
        print("\nAnimation interrupted by user.")
    finally:
        animator.finish()
        print("\nAnimation closed.")


if __name__ == "__main__":
    main(headless="--headless" in sys.argv)
