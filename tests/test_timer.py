import pytest

from cubeworks.utils.timer import Timer


class FakeNow:
    def __init__(self, value: float = 0.0) -> None:
        self.value = value

    def __call__(self) -> float:
        return self.value


def test_fresh_timer_reports_nothing_elapsed():
    timer = Timer(FakeNow(42.0))
    assert timer.elapsed_seconds() == 0.0
    assert timer.is_running is False


def test_running_timer_measures_up_to_now():
    now = FakeNow(1.0)
    timer = Timer(now)
    timer.start()
    now.value = 3.5
    assert timer.is_running is True
    assert timer.elapsed_seconds() == pytest.approx(2.5)
    assert timer.elapsed_milliseconds() == pytest.approx(2500.0)


def test_stopped_timer_is_frozen():
    now = FakeNow(10.0)
    timer = Timer(now)
    timer.start()
    now.value = 12.0
    timer.stop()
    now.value = 100.0
    assert timer.elapsed_seconds() == pytest.approx(2.0)
    assert timer.is_running is False


def test_restart_resets_the_start_point():
    now = FakeNow(0.0)
    timer = Timer(now)
    timer.start()
    now.value = 5.0
    timer.start()
    now.value = 6.0
    assert timer.elapsed_seconds() == pytest.approx(1.0)


def test_milliseconds_match_seconds():
    now = FakeNow(0.0)
    timer = Timer(now)
    timer.start()
    now.value = 0.25
    timer.stop()
    assert timer.elapsed_milliseconds() == pytest.approx(timer.elapsed_seconds() * 1000)