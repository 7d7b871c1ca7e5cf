"""Tests for timers.py - stopwatch state and time formatting."""

from datetime import datetime

import pytest

from taskdeck.timers import Stopwatch, format_clock, format_stopwatch, local_timestamp


class TestFormatStopwatch:
    """Tests for format_stopwatch function."""

    @pytest.mark.parametrize(
        "seconds, expected",
        [
            (0, "00:00"),
            (9, "00:09"),
            (65, "01:05"),
            (3599, "59:59"),
            (3600, "60:00"),
            (6001, "100:01"),
        ],
    )
    def test_format(self, seconds: int, expected: str) -> None:
        assert format_stopwatch(seconds) == expected

    def test_negative_raises(self) -> None:
        with pytest.raises(ValueError):
            format_stopwatch(-1)


class TestClockFormatting:
    """Tests for format_clock and local_timestamp."""

    def test_format_clock_uses_locale_time(self) -> None:
        moment = datetime(2026, 10, 18, 14, 5, 9)
        assert format_clock(moment) == moment.strftime("%X")

    def test_local_timestamp_has_date_and_time(self) -> None:
        moment = datetime(2026, 10, 18, 14, 5, 9)
        assert local_timestamp(moment) == f"{moment:%x}, {moment:%X}"

    def test_defaults_to_now(self) -> None:
        assert format_clock()
        assert local_timestamp()


class TestStopwatch:
    """Tests for the Stopwatch state machine."""

    def test_initial_state(self) -> None:
        sw = Stopwatch()

        assert sw.elapsed == 0
        assert sw.running is False
        assert sw.display == "00:00"

    def test_ticks_ignored_while_stopped(self) -> None:
        sw = Stopwatch()

        sw.tick()

        assert sw.elapsed == 0

    def test_start_ticks_pause(self) -> None:
        sw = Stopwatch()

        assert sw.start() is True
        for _ in range(65):
            sw.tick()
        assert sw.pause() is True
        sw.tick()

        assert sw.elapsed == 65
        assert sw.running is False
        assert sw.display == "01:05"

    def test_start_twice_reports_no_change(self) -> None:
        sw = Stopwatch()
        sw.start()

        assert sw.start() is False
        assert sw.running is True

    def test_pause_when_stopped_reports_no_change(self) -> None:
        assert Stopwatch().pause() is False

    def test_resume_keeps_elapsed(self) -> None:
        sw = Stopwatch()
        sw.start()
        sw.tick()
        sw.pause()
        sw.start()
        sw.tick()

        assert sw.elapsed == 2

    @pytest.mark.parametrize("running", [True, False])
    def test_reset_from_any_state(self, running: bool) -> None:
        sw = Stopwatch()
        sw.start()
        sw.tick()
        sw.tick()
        if not running:
            sw.pause()

        sw.reset()

        assert sw.elapsed == 0
        assert sw.running is False
