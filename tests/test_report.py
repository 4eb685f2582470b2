import io
import signal

import pytest

from fillit.tester.report import escape, format_duration, report
from fillit.tester.tasks import UnitTest


def _tests():
    return [
        UnitTest("a", "m1", duration=0.1, output="x\n"),
        UnitTest("b", "m1", duration=0.2, output="y\n"),
        UnitTest("a", "m2", duration=0.3, output="error\n"),
        UnitTest(
            "b", "m2", duration=0.4, output="error\n",
            err=True, returncode=-signal.SIGSEGV,
        ),
    ]


def test_format_seconds():
    assert format_duration(1.5) == "1.5s"


def test_format_milliseconds():
    assert format_duration(0.0025) == "2.5ms"


def test_format_microseconds():
    assert format_duration(0.0000005) == "0.5us"


@pytest.mark.parametrize("value", [3.0, 0.04, 0.00002])
def test_format_units(value):
    text = format_duration(value)
    if value >= 1:
        assert text.endswith("s") and not text.endswith("ms")
    elif value >= 0.001:
        assert text.endswith("ms")
    else:
        assert text.endswith("us")


def test_escape_removes_separators():
    name = "./map/a b_c.fillit"
    escaped = escape(name)
    assert "/" not in escaped and " " not in escaped
    assert len(escaped) == len(name)
    assert escape("plain") == "plain"


def test_report_counts_and_logs(tmp_path):
    out = io.StringIO()
    summary = report(_tests(), 3, tmp_path, 1.0, 4, out)
    assert summary.diffs == 1
    first, second = summary.players
    assert first.binary == "a" and second.binary == "b"
    assert first.minimum == 0.1 and first.maximum == 0.3
    assert first.total == pytest.approx(0.4)
    assert first.average == pytest.approx(0.2)
    assert (first.crashes, second.crashes) == (0, 1)
    assert (first.error_outputs, second.error_outputs) == (1, 1)
    text = out.getvalue()
    assert "2 map(s) of size 3 generated in ./map" in text
    assert "WORK_TIMEOUT set to 1s ; 4 programs running in parallel" in text
    assert "\033[41m1 diffs\033[0m" in text
    diff = (tmp_path / "DIFF_m1.txt").read_text()
    assert "a output:" in diff and "-x" in diff and "+y" in diff
    crashes = list(tmp_path.glob("CRASH_*_b.txt"))
    assert len(crashes) == 1
    assert 'over: "m2"' in crashes[0].read_text()


def test_timeouts_are_not_diffs(tmp_path):
    tests = [
        UnitTest("a", "m", duration=1.0, output="x\n", timed_out=True),
        UnitTest("b", "m", duration=0.1, output="y\n"),
    ]
    summary = report(tests, 1, tmp_path, 1.0, 1, io.StringIO())
    assert summary.diffs == 0
    assert summary.players[0].timeouts == 1
    assert list(tmp_path.iterdir()) == []


def test_report_rejects_unpaired(tmp_path):
    with pytest.raises(ValueError):
        report([UnitTest("a", "m")], 1, tmp_path, 1.0, 1, io.StringIO())
    with pytest.raises(ValueError):
        report([], 1, tmp_path, 1.0, 1, io.StringIO())