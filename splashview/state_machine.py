"""Animation state machine driving the splash phases."""

import inspect
import os
import warnings
from typing import Callable, List, Optional

from .config import SplashConfig
from .listener import SplashListener
from .phases import (
    Phase,
    PhaseKind,
    expanding_phase,
    hole_radius,
    merge_ring_radius,
    merging_phase,
    rotating_phase,
    rotation_angle,
    singular_circle_radius,
    singular_phase,
)
from .state import DrawState

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))


def external_stacklevel() -> int:
    """
    Stack level of the first frame outside this package.

    Meant to be called as the `stacklevel` argument of `warnings.warn`, so
    that the warning points at the code that drove the view.
    """
    level = 1
    frame = inspect.currentframe().f_back
    while frame is not None and os.path.dirname(os.path.abspath(frame.f_code.co_filename)) == _PACKAGE_DIR:
        level += 1
        frame = frame.f_back
    return level


class SplashStateMachine:
    """
    Owns the active phase and the draw state.

    Phases only move forward: ROTATING -> MERGING -> SINGULAR -> EXPANDING,
    after which the machine renders a last frame, asks for detachment,
    notifies the listener and goes inert. Rotation repeats forever until
    request_disappear() is called.
    """

    def __init__(self, config: SplashConfig,
                 render: Optional[Callable[[], object]] = None,
                 detach: Optional[Callable[[], object]] = None,
                 logger=None):
        """
        Initialize state machine.

        Args:
            config: Configuration object
            render: Called to draw the final frame when the animation ends
            detach: Called to remove the view from its host when the animation ends
            logger: Optional Logger for phase transitions
        """
        self.config = config
        self.logger = logger
        self._render = render
        self._detach = detach

        self.state = DrawState(single_color=config.merged_color)
        self.phase: Optional[Phase] = None
        self.history: List[PhaseKind] = []
        self.listener: Optional[SplashListener] = None
        self.max_hole_radius = 0.0

        self.started = False
        self.finished = False
        self.total_time = 0.0
        self.tick_count = 0

        self._start_pending = False
        self._disappear_pending = False
        self._disappear_elapsed = 0.0
        self._in_tick = False

        self._updaters = {
            PhaseKind.ROTATING: self._update_rotating,
            PhaseKind.MERGING: self._update_merging,
            PhaseKind.SINGULAR: self._update_singular,
            PhaseKind.EXPANDING: self._update_expanding,
        }

    @property
    def kind(self) -> Optional[PhaseKind]:
        """Active phase kind, None before start and after the end."""
        return self.phase.kind if self.phase is not None else None

    @property
    def is_running(self) -> bool:
        return self.phase is not None

    def start(self, listener: Optional[SplashListener] = None) -> bool:
        """
        Begin rotating.

        The listener's on_start is delivered on the next tick so that the
        caller's current layout/draw pass completes first.

        Returns:
            False if the machine was already started
        """
        if self.started:
            return False
        self.started = True
        self.listener = listener
        self._start_pending = True

        state = self.state
        state.set_angle(0.0)
        state.set_ring_radius(self.config.base_ring_radius)
        state.set_circle_radius(self.config.base_circle_radius)
        state.set_hole_radius(0.0)
        state.single_color = self.config.merged_color
        self._enter(rotating_phase(self.config))

        if self._disappear_pending:
            self._begin_disappear()
        return True

    def request_disappear(self) -> bool:
        """
        Leave the rotation and run the disappear sequence.

        Accepted while rotating, or before start (applied when started).

        Returns:
            Whether the request was accepted
        """
        if self.finished:
            return False
        if not self.started:
            self._disappear_pending = True
            return True
        if self.kind is not PhaseKind.ROTATING:
            return False
        self._begin_disappear()
        return True

    def tick(self, dt: float) -> bool:
        """
        Advance the active phase.

        Args:
            dt: Seconds since the previous tick, negative values count as 0

        Returns:
            True if a redraw is needed
        """
        if self.phase is None or self._in_tick:
            return False

        self._in_tick = True
        try:
            dt = max(0.0, dt)
            self.tick_count += 1
            self.total_time += dt

            if self._start_pending:
                self._start_pending = False
                self._notify('on_start')

            phase = self.phase
            phase.elapsed += dt
            self._updaters[phase.kind](phase)

            if phase.is_time_bounded:
                self._disappear_elapsed += dt
                self._notify('on_update', self.disappear_fraction)

            if phase.complete:
                next_kind = phase.kind.next
                if next_kind is None:
                    self._finish()
                    return False
                self._enter(self._build_phase(next_kind))
            return True
        finally:
            self._in_tick = False

    @property
    def disappear_fraction(self) -> float:
        """Disappear time so far over its configured total; can exceed 1.0."""
        total = self.config.disappear_duration
        if total <= 0.0:
            return 1.0
        return self._disappear_elapsed / total

    def _update_rotating(self, phase: Phase):
        if phase.duration > 0.0:
            phase.elapsed %= phase.duration
        self.state.set_angle(rotation_angle(phase.elapsed, phase.duration))

    def _update_merging(self, phase: Phase):
        self.state.set_ring_radius(
            merge_ring_radius(phase.elapsed, phase.duration, phase.start_radius, phase.easing))

    def _update_singular(self, phase: Phase):
        self.state.set_circle_radius(
            singular_circle_radius(phase.elapsed, phase.duration, phase.start_radius, phase.easing))

    def _update_expanding(self, phase: Phase):
        self.state.set_hole_radius(
            hole_radius(phase.elapsed, phase.duration, self.max_hole_radius, phase.easing))

    def _build_phase(self, kind: PhaseKind) -> Phase:
        """Construct the phase following a completed one from the current draw state."""
        config = self.config
        state = self.state
        if kind is PhaseKind.MERGING:
            return merging_phase(config, state.angle, state.ring_radius)
        if kind is PhaseKind.SINGULAR:
            state.single_color = config.merged_color
            return singular_phase(config, state.circle_radius)
        if kind is PhaseKind.EXPANDING:
            return expanding_phase(config)
        raise ValueError(f"{kind} is not entered by completing a phase")

    def _begin_disappear(self):
        self._disappear_pending = False
        self._disappear_elapsed = 0.0
        self._enter(self._build_phase(PhaseKind.MERGING))

    def _enter(self, phase: Phase):
        old_kind = self.kind
        self.phase = phase
        self.history.append(phase.kind)
        if self.logger:
            self.logger.log_transition(old_kind, phase.kind, self.total_time)

    def _finish(self):
        """Final frame, detach, end notification; then inert."""
        if self._render is not None:
            self._call(self._render, "final render")
        if self.config.remove_from_parent_on_end and self._detach is not None:
            self._call(self._detach, "detach")
        self._notify('on_end')

        old_kind = self.kind
        self.phase = None
        self.finished = True
        if self.logger:
            self.logger.log_transition(old_kind, None, self.total_time)

    def _notify(self, method: str, *args):
        callback = getattr(self.listener, method, None)
        if callback is not None:
            self._call(callback, f"listener {method}", *args)

    def _call(self, callback, what: str, *args):
        try:
            callback(*args)
        except Exception as exc:
            warnings.warn(
                f"{self.__class__.__name__} ignored error in {what}: {exc!r}",
                RuntimeWarning,
                stacklevel=external_stacklevel()
            )
