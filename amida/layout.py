"""Evenly spaced vertical lines for a new lottery."""

from __future__ import annotations

from amida.geometry import VerticalLine

DEFAULT_LINE_COUNT = 5
DEFAULT_SPAN = 600.0


class InvalidLineCount(ValueError):
    """Raised when a lottery is requested with no lines."""

    def __init__(self, count: int):
        super().__init__(f"Line count must be positive, got {count}")
        self.count = count


def spacing(count: int, span: float) -> float:
    """Distance between neighbouring lines (and the margin on both ends)."""
    return span / (count + 1)


def generate(count: int, span: float) -> list[VerticalLine]:
    """Place *count* lines at ``span / (count + 1) * i`` for ``i = 1..count``.

    Pure: the caller must drop any rungs tied to a previous batch.
    """
    if count <= 0:
        raise InvalidLineCount(count)
    if span <= 0:
        raise ValueError(f"Span must be positive, got {span}")

    step = spacing(count, span)
    return [VerticalLine(position=step * i) for i in range(1, count + 1)]
