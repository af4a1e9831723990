"""Export a session to JSON for an external renderer, and load it back."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from amida.session import LotterySession, SessionObserver

logger = logging.getLogger(__name__)


def session_snapshot(session: LotterySession) -> dict:
    """Return the session state as plain JSON-safe data.

    Rungs reference verticals by index and keep insertion order.
    """
    verticals = session.current_verticals()
    index_of = {line: idx for idx, line in enumerate(verticals)}
    rungs = [
        {
            "start": index_of[rung.start],
            "end": index_of[rung.end],
            "position": rung.position,
        }
        for rung in session.current_rungs()
    ]
    return {
        "span": session.span,
        "verticals": [line.position for line in verticals],
        "rungs": rungs,
        "result": session.current_result(),
    }


def write_snapshot(session: LotterySession, path: Path | str) -> Path:
    """Write :func:`session_snapshot` as indented JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(session_snapshot(session), indent=2))
    logger.debug("Snapshot written to %s", path)
    return path


def load_snapshot(
    data: dict,
    observer: SessionObserver | None = None,
) -> LotterySession:
    """Rebuild a session from a snapshot dict.

    The lottery is regenerated from the line count and span, then each rung
    is replayed as a click in the middle of its gap. Raises ``ValueError``
    for malformed data.
    """
    try:
        count = len(data["verticals"])
        span = float(data["span"])
        rungs = list(data.get("rungs", []))
    except (KeyError, TypeError) as exc:
        raise ValueError(f"Malformed snapshot: {exc}") from exc

    session = LotterySession(observer=observer)
    session.new_lottery(count, span)
    verticals = session.current_verticals()

    for entry in rungs:
        try:
            start, end = int(entry["start"]), int(entry["end"])
            y = float(entry["position"])
        except (KeyError, TypeError) as exc:
            raise ValueError(f"Malformed rung entry {entry!r}") from exc
        if end != start + 1 or not 0 <= start < count - 1:
            raise ValueError(f"Rung between lines {start} and {end} is not an adjacent pair")
        x = (verticals[start].position + verticals[end].position) / 2
        session.add_rung(x, y)

    return session


def read_snapshot(path: Path | str, observer: SessionObserver | None = None) -> LotterySession:
    """Load a session from a JSON file written by :func:`write_snapshot`."""
    try:
        data = json.loads(Path(path).read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"{path} is not valid JSON: {exc}") from exc
    return load_snapshot(data, observer=observer)
