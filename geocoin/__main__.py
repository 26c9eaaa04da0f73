"""Entry point: ``python -m geocoin``.

Supports two modes:
  - ``python -m geocoin``            → Launch FastAPI server
  - ``python -m geocoin cli``        → Headless session driven by a move script
"""

from __future__ import annotations

import argparse
import logging

logger = logging.getLogger(__name__)

_MOVE_CODES = {"N": "north", "S": "south", "E": "east", "W": "west"}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Deterministic Location-Grid Coin Caches")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI server (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.add_argument("--seed", type=int, default=0)
    srv.add_argument("--storage", type=str, default="geocoin_state.json")
    srv.add_argument("--autosave", type=float, default=10.0, help="Seconds between automatic saves")
    srv.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    # --- Headless CLI mode ---
    cli = sub.add_parser("cli", help="Run a headless session")
    cli.add_argument("--seed", type=int, default=0)
    cli.add_argument("--storage", type=str, default="geocoin_state.json")
    cli.add_argument("--moves", type=str, default="", help="Move script, e.g. NNEEW")
    cli.add_argument("--collect", action="store_true", help="Empty every visible cache after moving")
    cli.add_argument("--fresh", action="store_true", help="Reset saved state before playing")
    cli.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    return parser


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from geocoin.api.app import create_app
    from geocoin.config import WorldConfig

    config = WorldConfig(
        oracle_seed=args.seed,
        storage_path=args.storage,
        autosave_interval_seconds=args.autosave,
        log_level=args.log_level,
    )
    app = create_app(config)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


def _run_cli(args: argparse.Namespace) -> None:
    from geocoin.config import WorldConfig
    from geocoin.core.enums import Direction
    from geocoin.engine.commands import Collect, Move, Reset, Save
    from geocoin.engine.controller import GameController
    from geocoin.systems.storage import JsonFileStore
    from geocoin.utils.logging import setup_logging

    config = WorldConfig(oracle_seed=args.seed, storage_path=args.storage, log_level=args.log_level)
    setup_logging(config.log_level)

    controller = GameController(config, JsonFileStore(config.storage_path))
    if args.fresh:
        controller.dispatch(Reset())
    else:
        controller.start_session()

    for code in args.moves.upper():
        if code not in _MOVE_CODES:
            logger.warning("Skipping unknown move %r", code)
            continue
        result = controller.dispatch(Move(Direction(_MOVE_CODES[code])))
        logger.info(result.message)

    if args.collect:
        for view in controller.visible_caches():
            while controller.dispatch(Collect(view.key)).ok:
                pass

    for view in controller.visible_caches():
        logger.info("%s %s", view.describe(), ", ".join(view.labels()))
    logger.info(controller.world.player.inventory.summary())

    controller.dispatch(Save())
    logger.info("Done. State written to %s", config.storage_path)


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Default to serve mode if no subcommand given
    if args.command is None or args.command == "serve":
        if args.command is None:
            args = parser.parse_args(["serve"])
        _run_server(args)
    elif args.command == "cli":
        _run_cli(args)


if __name__ == "__main__":
    main()
