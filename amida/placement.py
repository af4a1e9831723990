"""Map a click to the gap between two adjacent verticals."""

from __future__ import annotations

import logging
from typing import Sequence

from amida.geometry import HorizontalLine, VerticalLine

logger = logging.getLogger(__name__)


def locate(
    click_position: float,
    verticals: Sequence[VerticalLine],
) -> tuple[int, int] | None:
    """Return the index pair ``(i, i + 1)`` whose gap contains *click_position*.

    The click must lie strictly between the two lines. Clicks left of the
    first line, right of the last one, or exactly on a line give ``None``.
    """
    for i in range(len(verticals) - 1):
        left, right = verticals[i], verticals[i + 1]
        if left.position < click_position < right.position:
            return i, i + 1

    logger.debug("Click at %s falls outside every gap", click_position)
    return None


def make_rung(
    pair: tuple[int, int],
    verticals: Sequence[VerticalLine],
    y: float,
) -> HorizontalLine:
    """Build the rung for a pair returned by :func:`locate`."""
    i, j = pair
    return HorizontalLine(start=verticals[i], end=verticals[j], position=y)
