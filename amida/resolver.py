"""Resolve a ladder into the permutation of start labels.

Each start slot is traced top to bottom through the rungs, ordered by
their vertical position. Slots are tracked as integer indices into the
vertical batch and rungs are matched to slots by object identity, so
lines that happen to share a coordinate never get confused.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from amida.geometry import HorizontalLine, VerticalLine


class StaleReferenceViolation(RuntimeError):
    """A rung points at a vertical line outside the current batch."""


def _sorted_rungs(rungs: Iterable[HorizontalLine]) -> list[HorizontalLine]:
    # sorted() is stable: equal positions keep insertion order
    return sorted(rungs, key=lambda r: r.position)


def _rung_slots(
    verticals: Sequence[VerticalLine],
    rungs: list[HorizontalLine],
) -> list[tuple[int, int]]:
    """Translate each rung into the (start, end) slot indices it joins."""
    index_of = {line: idx for idx, line in enumerate(verticals)}
    slots: list[tuple[int, int]] = []
    for rung in rungs:
        start = index_of.get(rung.start)
        end = index_of.get(rung.end)
        if start is None or end is None:
            raise StaleReferenceViolation(
                f"Rung at y={rung.position} references a vertical line "
                "that is not part of the current batch"
            )
        slots.append((start, end))
    return slots


def _walk(start_index: int, slots: list[tuple[int, int]]) -> list[int]:
    path = [start_index]
    current = start_index
    for start, end in slots:
        if current == start:
            current += 1  # right
        elif current == end:
            current -= 1  # left
        else:
            continue
        path.append(current)
    return path


def trace(
    start_index: int,
    verticals: Sequence[VerticalLine],
    rungs: Iterable[HorizontalLine],
) -> list[int]:
    """Slots visited by the label starting at *start_index*.

    The first entry is the start slot; one entry follows for every rung
    that deflects the path, so the last entry is the end slot.
    """
    if not 0 <= start_index < len(verticals):
        raise IndexError(f"Start index {start_index} out of range")
    slots = _rung_slots(verticals, _sorted_rungs(rungs))
    return _walk(start_index, slots)


def resolve(
    verticals: Sequence[VerticalLine],
    rungs: Iterable[HorizontalLine],
) -> list[int]:
    """Compute the permutation induced by *rungs* over *verticals*.

    Returns a list of length N where entry ``j`` is the 1-based start label
    that ends at slot ``j``. Raises :class:`StaleReferenceViolation` when a
    rung belongs to another vertical batch.
    """
    slots = _rung_slots(verticals, _sorted_rungs(rungs))

    out: list[int | None] = [None] * len(verticals)
    for i in range(len(verticals)):
        end = _walk(i, slots)[-1]
        assert out[end] is None, f"slot {end} reached twice"
        out[end] = i + 1

    return out  # type: ignore[return-value]
