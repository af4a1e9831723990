"""Lottery session — owns the verticals, the rungs and the current result."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol

from amida.geometry import HorizontalLine, VerticalLine
from amida.layout import generate
from amida.placement import locate, make_rung
from amida.resolver import resolve

logger = logging.getLogger(__name__)


# ── Structured types ────────────────────────────────────────────────

@dataclass
class SessionEvent:
    """Record of a single operation on a session."""

    action: str  # "new_lottery" | "add_rung" | "remove_last_rung" | "clear_rungs"
    args: dict
    changed: bool
    result_before: list[int]
    result_after: list[int]
    rung_count: int
    rung: HorizontalLine | None = None


# ── Observer ────────────────────────────────────────────────────────

class SessionObserver(Protocol):
    """Receives an event after every session operation."""

    def on_event(self, event: SessionEvent) -> None: ...


@dataclass
class ListObserver:
    """Default observer — collects events into a list."""

    events: list[SessionEvent] = field(default_factory=list)

    def on_event(self, event: SessionEvent) -> None:
        self.events.append(event)


# ── Session ─────────────────────────────────────────────────────────

class LotterySession:
    """Holds one lottery and keeps its result in step with every change.

    Each mutating method swaps state in one step and re-resolves the whole
    ladder before returning, so callers never see rungs from one batch next
    to a result computed from another.
    """

    def __init__(self, observer: SessionObserver | None = None):
        self.observer = observer or ListObserver()
        self._verticals: tuple[VerticalLine, ...] = ()
        self._rungs: list[HorizontalLine] = []
        self._result: list[int] = []
        self._span = 0.0

    # ── queries ─────────────────────────────────────────────────────

    @property
    def span(self) -> float:
        return self._span

    def current_verticals(self) -> tuple[VerticalLine, ...]:
        return self._verticals

    def current_rungs(self) -> tuple[HorizontalLine, ...]:
        return tuple(self._rungs)

    def current_result(self) -> list[int]:
        return list(self._result)

    # ── mutations ───────────────────────────────────────────────────

    def new_lottery(self, count: int, span: float) -> None:
        """Replace the verticals with a fresh batch and drop all rungs.

        Raises :class:`~amida.layout.InvalidLineCount` before touching any
        state when *count* is not positive.
        """
        verticals = tuple(generate(count, span))
        before = self.current_result()

        self._verticals = verticals
        self._rungs = []
        self._span = span
        self._recompute()

        logger.info("New lottery with %d lines over span %s", count, span)
        self._emit("new_lottery", {"count": count, "span": span}, True, before)

    def add_rung(self, x: float, y: float) -> HorizontalLine | None:
        """Place a rung at the gap containing *x*, at height *y*.

        Returns the new rung, or ``None`` when *x* misses every gap.
        """
        before = self.current_result()
        pair = locate(x, self._verticals)
        if pair is None:
            self._emit("add_rung", {"x": x, "y": y}, False, before)
            return None

        rung = make_rung(pair, self._verticals, y)
        self._rungs.append(rung)
        self._recompute()

        logger.debug("Rung %d placed between lines %d and %d at y=%s",
                     len(self._rungs), pair[0] + 1, pair[1] + 1, y)
        self._emit("add_rung", {"x": x, "y": y}, True, before, rung)
        return rung

    def remove_last_rung(self) -> HorizontalLine | None:
        """Step back: drop the most recently placed rung, if any."""
        before = self.current_result()
        if not self._rungs:
            self._emit("remove_last_rung", {}, False, before)
            return None

        rung = self._rungs.pop()
        self._recompute()

        logger.debug("Removed rung at y=%s, %d left", rung.position, len(self._rungs))
        self._emit("remove_last_rung", {}, True, before, rung)
        return rung

    def clear_rungs(self) -> None:
        """Drop every rung; the result becomes the identity permutation."""
        before = self.current_result()
        changed = bool(self._rungs)
        self._rungs = []
        self._recompute()

        logger.debug("Cleared rungs")
        self._emit("clear_rungs", {}, changed, before)

    # ── internals ───────────────────────────────────────────────────

    def _recompute(self) -> None:
        self._result = resolve(self._verticals, self._rungs)

    def _emit(
        self,
        action: str,
        args: dict,
        changed: bool,
        before: list[int],
        rung: HorizontalLine | None = None,
    ) -> None:
        self.observer.on_event(SessionEvent(
            action=action,
            args=args,
            changed=changed,
            result_before=before,
            result_after=self.current_result(),
            rung_count=len(self._rungs),
            rung=rung,
        ))
