"""Tests for amida.layout and amida.geometry."""

import pytest

from amida.geometry import HorizontalLine, VerticalLine
from amida.layout import (
    DEFAULT_LINE_COUNT,
    InvalidLineCount,
    generate,
    spacing,
)


# ── geometry ─────────────────────────────────────────────────────────

def test_verticals_compare_by_identity():
    a = VerticalLine(position=10.0)
    b = VerticalLine(position=10.0)
    assert a == a
    assert a != b
    assert len({a, b}) == 2


def test_rungs_are_immutable():
    a, b = VerticalLine(10.0), VerticalLine(20.0)
    rung = HorizontalLine(start=a, end=b, position=5.0)
    with pytest.raises(AttributeError):
        rung.position = 6.0  # type: ignore[misc]


# ── generate ─────────────────────────────────────────────────────────

def test_four_lines_over_100():
    lines = generate(4, 100.0)
    assert [line.position for line in lines] == [20.0, 40.0, 60.0, 80.0]


def test_margin_equals_spacing():
    lines = generate(3, 100.0)
    step = spacing(3, 100.0)
    assert lines[0].position == pytest.approx(step)
    assert 100.0 - lines[-1].position == pytest.approx(step)


def test_single_line_is_centred():
    (line,) = generate(1, 50.0)
    assert line.position == 25.0


def test_each_call_creates_a_new_batch():
    first = generate(3, 100.0)
    second = generate(3, 100.0)
    assert all(a is not b for a, b in zip(first, second))


@pytest.mark.parametrize("count", [0, -1])
def test_non_positive_count_rejected(count):
    with pytest.raises(InvalidLineCount) as excinfo:
        generate(count, 100.0)
    assert excinfo.value.count == count


def test_invalid_count_is_a_value_error():
    with pytest.raises(ValueError):
        generate(0, 100.0)


def test_non_positive_span_rejected():
    with pytest.raises(ValueError):
        generate(3, 0.0)


def test_default_line_count():
    assert DEFAULT_LINE_COUNT == 5
