"""Tests for the console logger."""

from splashview import SplashView
from splashview.logger import Logger

DT = 0.125


def _run_logged(config, host):
    view = SplashView(config, parent=host, logger=Logger(prefix="test"))
    view.on_resize(300, 300)
    view.start()
    view.request_disappear()
    while not view.is_finished:
        view.step(DT)
    return view


def test_logs_every_transition(fast_config, host, capsys):
    _run_logged(fast_config, host)
    lines = [line for line in capsys.readouterr().out.splitlines() if line.startswith("[test]")]

    assert [line.split("s  ", 1)[1] for line in lines] == [
        "IDLE -> ROTATING",
        "ROTATING -> MERGING",
        "MERGING -> SINGULAR",
        "SINGULAR -> EXPANDING",
        "EXPANDING -> DONE",
    ]
    # 4 merge + 2 singular + 4 expand ticks
    assert lines[-1] == "[test]    1.250s  EXPANDING -> DONE"


def test_logs_config_on_start(fast_config, host, capsys):
    view = SplashView(fast_config, parent=host, logger=Logger())
    view.start()
    assert view.start() is False

    out = capsys.readouterr().out
    assert out.count("Configuration:") == 1
    assert "Ring radius: 30.0px" in out
    assert "Merge/singular/expand: 0.5s / 0.25s / 0.5s" in out


def test_log_final(fast_config, host, capsys):
    view = _run_logged(fast_config, host)
    view.logger.log_final(view)

    out = capsys.readouterr().out
    assert "Animation time: 1.25s" in out
    assert "Total ticks: 10" in out
    assert "Detached: True" in out
