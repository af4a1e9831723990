"""CLI entry point: python -m amida {resolve,draw,export}."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from amida.export import read_snapshot, session_snapshot, write_snapshot
from amida.layout import DEFAULT_LINE_COUNT, DEFAULT_SPAN, InvalidLineCount
from amida.render import DEFAULT_HEIGHT, draw_session
from amida.session import LotterySession

logger = logging.getLogger("amida")


def _parse_rung(value: str) -> tuple[float, float]:
    """Parse an ``X,Y`` click coordinate."""
    try:
        x, y = (float(part) for part in value.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected X,Y but got {value!r}")
    return x, y


def _build_session(args: argparse.Namespace) -> LotterySession:
    """Create the lottery, place the requested rungs, then step back."""
    if args.load:
        session = read_snapshot(args.load)
    else:
        session = LotterySession()
        session.new_lottery(args.lines, args.span)

    for x, y in args.rung or []:
        if session.add_rung(x, y) is None:
            logger.warning("Click at x=%s misses every gap, ignored", x)

    for _ in range(args.undo):
        session.remove_last_rung()

    return session


# ── resolve ─────────────────────────────────────────────────────────

def cmd_resolve(session: LotterySession, args: argparse.Namespace) -> None:
    """Print start labels above the labels they end up under."""
    result = session.current_result()
    width = max(len(str(len(result))), 1)
    print("start: " + " ".join(f"{i + 1:>{width}}" for i in range(len(result))))
    print("end:   " + " ".join(f"{r:>{width}}" for r in result))
    print(f"({len(session.current_rungs())} rungs)")


# ── draw ────────────────────────────────────────────────────────────

def cmd_draw(session: LotterySession, args: argparse.Namespace) -> None:
    out = args.output or "amida.png"
    draw_session(session, output_path=out, height=args.height)
    print(f"Ladder saved to {out}")


# ── export ──────────────────────────────────────────────────────────

def cmd_export(session: LotterySession, args: argparse.Namespace) -> None:
    if args.output:
        path = write_snapshot(session, args.output)
        print(f"Snapshot saved to {path}")
    else:
        print(json.dumps(session_snapshot(session), indent=2))


# ── main ─────────────────────────────────────────────────────────────

COMMANDS = {
    "resolve": cmd_resolve,
    "draw": cmd_draw,
    "export": cmd_export,
}


def main() -> None:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--lines", type=int, default=DEFAULT_LINE_COUNT,
                        help=f"Number of vertical lines (default {DEFAULT_LINE_COUNT})")
    common.add_argument("--span", type=float, default=DEFAULT_SPAN,
                        help=f"Width of the drawing area (default {DEFAULT_SPAN:g})")
    common.add_argument("--rung", type=_parse_rung, action="append", metavar="X,Y",
                        help="Click position of a rung; repeat in placement order")
    common.add_argument("--undo", type=int, default=0, help="Remove the last N rungs")
    common.add_argument("--load", help="Start from a snapshot JSON instead of --lines/--span")
    common.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    parser = argparse.ArgumentParser(
        prog="amida",
        description="Ghost-leg lottery (amidakuji) resolver",
    )
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("resolve", parents=[common], help="Print the lottery result")

    p_draw = sub.add_parser("draw", parents=[common], help="Draw the ladder to a PNG")
    p_draw.add_argument("--output", "-o", help="Output PNG path")
    p_draw.add_argument("--height", type=float, default=DEFAULT_HEIGHT,
                        help=f"Canvas height (default {DEFAULT_HEIGHT:g})")

    p_export = sub.add_parser("export", parents=[common], help="Export the lottery as JSON")
    p_export.add_argument("--output", "-o", help="Output JSON path (stdout if omitted)")

    args = parser.parse_args()
    if args.command not in COMMANDS:
        parser.print_help()
        return

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        session = _build_session(args)
    except InvalidLineCount as exc:
        print(str(exc), file=sys.stderr)
        sys.exit(1)
    except (OSError, ValueError) as exc:
        print(f"Cannot build lottery: {exc}", file=sys.stderr)
        sys.exit(1)

    COMMANDS[args.command](session, args)


if __name__ == "__main__":
    main()
