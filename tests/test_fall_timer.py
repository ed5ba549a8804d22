import pytest

from puyo_rl.game.timer import FallTimer


def test_stopped_timer_ignores_time():
    timer = FallTimer(1000)
    assert not timer.running
    assert timer.advance(10_000) == 0


def test_ticks_at_fixed_cadence():
    timer = FallTimer(500)
    timer.start()
    assert timer.advance(499) == 0
    assert timer.advance(1) == 1
    assert timer.advance(1250) == 2
    assert timer.advance(250) == 1


def test_restart_begins_fresh_interval():
    timer = FallTimer(1000)
    timer.start()
    timer.advance(900)
    timer.stop()
    timer.start()
    assert timer.advance(900) == 0
    assert timer.advance(100) == 1


def test_start_while_running_keeps_progress():
    timer = FallTimer(1000)
    timer.start()
    timer.advance(900)
    timer.start()
    assert timer.advance(100) == 1


def test_interval_must_be_positive():
    with pytest.raises(ValueError):
        FallTimer(0)
