from __future__ import annotations

import argparse
import logging

from tictactoe.app.controller_local import LocalController, LocalConfig


def run_local(cfg: LocalConfig) -> None:
    ctrl = LocalController(config=cfg)
    logging.getLogger(__name__).info("LocalController initialized")
    ctrl.run()


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Two-player tic-tac-toe with time travel.")
    ap.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    ap.add_argument(
        "--descending",
        action="store_true",
        help="Show the move list newest first",
    )
    ap.add_argument(
        "--announce-draw",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Show 'Draw' on a full board with no winner (default: False)",
    )
    ap.add_argument(
        "--no-clear",
        action="store_true",
        help="Do not clear the terminal between frames",
    )
    return ap


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cfg = LocalConfig(
        announce_draw=args.announce_draw,
        descending=args.descending,
        clear_screen=not args.no_clear,
    )
    run_local(cfg)


if __name__ == "__main__":
    main()
