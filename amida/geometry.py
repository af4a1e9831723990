"""Vertical lines and rungs of a ghost-leg lottery."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, eq=False)
class VerticalLine:
    """One of the N lottery lines.

    Compared by identity only: two lines at the same coordinate are still
    different slots.
    """

    position: float  # along the layout (x) axis


@dataclass(frozen=True)
class HorizontalLine:
    """A rung between two adjacent verticals of the current batch."""

    start: VerticalLine  # left slot
    end: VerticalLine  # right slot, index of start + 1
    position: float  # along the orthogonal (y) axis, top is smaller
