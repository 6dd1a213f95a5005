from .config import SplashConfig


class Logger:
    """
    Interface for logging.
    """

    def __init__(self, prefix: str = "splash"):
        self.prefix = prefix

    def log_config(self, config: SplashConfig):
        print("\nConfiguration:")
        print(f"  Ring radius: {config.base_ring_radius:.1f}px")
        print(f"  Circle radius: {config.base_circle_radius:.1f}px")
        print(f"  Colors: {len(config.palette)}")
        print(f"  Rotation period: {config.rotation_duration}s")
        print(f"  Merge/singular/expand: {config.merge_duration}s / "
              f"{config.singular_duration}s / {config.expand_duration}s")

    def log_transition(self, old_phase, new_phase, time: float):
        """Log a phase change."""
        old_name = old_phase.name if old_phase is not None else "IDLE"
        new_name = new_phase.name if new_phase is not None else "DONE"
        print(f"[{self.prefix}] {time:8.3f}s  {old_name} -> {new_name}")

    def log_final(self, view):
        print("\n" + "=" * 60)
        print("Final Statistics:")
        print(f"  Animation time: {view.machine.total_time:.2f}s")
        print(f"  Total ticks: {view.machine.tick_count}")
        print(f"  Frames drawn: {view.frame_count}")
        print(f"  Detached: {view.parent is None}")
        print("=" * 60)
