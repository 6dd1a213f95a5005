"""Tests for the asyncio frame loop driver."""

import asyncio

from splashview import PhaseKind, SplashView, create_default_config
from splashview.loop import SplashLoop, run_splash


class StepClock:
    """Fake clock advancing a fixed amount per reading."""

    def __init__(self, step: float):
        self.step = step
        self.now = 0.0

    def __call__(self) -> float:
        self.now += self.step
        return self.now


def _short_config():
    return create_default_config(merge_duration=0.125, singular_duration=0.125, expand_duration=0.125)


def test_loop_runs_view_to_completion(host, surface):
    view = SplashView(_short_config(), surface=surface, parent=host)
    view.on_resize(100, 100)
    underlays = []

    async def scenario():
        view.start()
        view.request_disappear()
        loop = SplashLoop(view, fps=100, clock=StepClock(0.0625),
                          underlay=lambda: underlays.append(True))
        assert loop.start() is True
        assert loop.start() is False
        finished = await loop.wait_for_stop()
        return loop, finished

    loop, finished = asyncio.run(scenario())

    assert finished is True
    assert view.is_finished
    assert not loop.is_running
    assert host.removed == [view]
    # 2 ticks per phase at 0.0625s each
    assert view.machine.tick_count == 6
    assert len(underlays) == 6


def test_frame_callback_can_stop_loop(surface):
    view = SplashView(_short_config(), surface=surface)
    view.on_resize(100, 100)
    frames = []

    def frame_callback(_view):
        frames.append(_view.phase)
        return len(frames) < 3

    async def scenario():
        view.start()
        loop = SplashLoop(view, frame_callback=frame_callback, fps=100, clock=StepClock(0.01))
        loop.start()
        return await loop.wait_for_stop()

    assert asyncio.run(scenario()) is False

    assert frames == [PhaseKind.ROTATING] * 3
    assert not view.is_finished
    assert view.frame_count == 3


def test_fps_is_clamped():
    view = SplashView()
    assert SplashLoop(view, fps=500).fps == 100.0
    assert SplashLoop(view, fps=1).fps == 10.0
    assert SplashLoop(view, fps=50).frame_period == 0.02


def test_run_splash_finishes(host):
    config = create_default_config(merge_duration=0.05, singular_duration=0.05, expand_duration=0.05)
    view = SplashView(config, parent=host)
    view.on_resize(100, 100)

    asyncio.run(run_splash(view, disappear_after=0.05, fps=100))

    assert view.is_finished
    assert host.removed == [view]


def test_finished_view_is_not_restarted(host):
    config = create_default_config(merge_duration=0.0, singular_duration=0.0, expand_duration=0.0)
    view = SplashView(config, parent=host)
    view.on_resize(100, 100)
    view.start()
    view.request_disappear()
    while not view.is_finished:
        view.tick(0.0)

    async def scenario():
        loop = SplashLoop(view)
        started = loop.start()
        loop.stop()
        return started, await loop.wait_for_stop()

    assert asyncio.run(scenario()) == (False, True)


def test_stop_cancels_running_loop(surface):
    view = SplashView(_short_config(), surface=surface)
    view.on_resize(100, 100)

    async def scenario():
        view.start()
        loop = SplashLoop(view, fps=100)
        loop.start()
        await asyncio.sleep(0.05)
        loop.stop()
        finished = await loop.wait_for_stop()
        return loop, finished

    loop, finished = asyncio.run(scenario())

    assert finished is False
    assert not loop.is_running
    assert view.phase is PhaseKind.ROTATING
