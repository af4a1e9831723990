"""Draw a lottery ladder to a PNG."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

import matplotlib
matplotlib.use("Agg")  # non-interactive backend

import matplotlib.pyplot as plt

from amida.geometry import HorizontalLine, VerticalLine

if TYPE_CHECKING:
    from amida.session import LotterySession

logger = logging.getLogger(__name__)

DEFAULT_HEIGHT = 400.0
MARGIN = 50.0  # blank band above and below the verticals
LABEL_OFFSET = 30.0  # label distance from the top/bottom edge


def draw_lottery(
    verticals: Sequence[VerticalLine],
    rungs: Sequence[HorizontalLine],
    result: Sequence[int],
    output_path: str = "amida.png",
    height: float = DEFAULT_HEIGHT,
    span: float | None = None,
    title: str = "Amidakuji",
) -> str:
    """Render the ladder in canvas coordinates (y grows downward).

    Start labels ``1..N`` run along the top and *result* along the bottom.
    Returns the path to the saved PNG.
    """
    if len(result) != len(verticals):
        raise ValueError(
            f"Result has {len(result)} entries for {len(verticals)} lines"
        )
    if span is None:
        span = (verticals[-1].position + verticals[0].position) if verticals else 1.0

    fig, ax = plt.subplots(figsize=(max(4, span / 100), max(3, height / 100)))

    for index, line in enumerate(verticals):
        ax.plot([line.position, line.position], [MARGIN, height - MARGIN],
                color="black", linewidth=1.5)
        ax.text(line.position, LABEL_OFFSET, f"{index + 1}",
                ha="center", va="center", fontsize=12)
        ax.text(line.position, height - LABEL_OFFSET, f"{result[index]}",
                ha="center", va="center", fontsize=12, fontweight="bold")

    for rung in rungs:
        ax.plot([rung.start.position, rung.end.position], [rung.position, rung.position],
                color="#4A90D9", linewidth=1.5)

    ax.set_xlim(0, span)
    ax.set_ylim(height, 0)  # canvas origin is top-left
    ax.set_title(title, fontsize=14, fontweight="bold")
    ax.axis("off")

    plt.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)

    logger.debug("Drew %d lines and %d rungs to %s",
                 len(verticals), len(rungs), output_path)
    return output_path


def draw_session(
    session: LotterySession,
    output_path: str = "amida.png",
    height: float = DEFAULT_HEIGHT,
) -> str:
    """Render the current state of *session*."""
    return draw_lottery(
        session.current_verticals(),
        session.current_rungs(),
        session.current_result(),
        output_path=output_path,
        height=height,
        span=session.span or None,
    )
