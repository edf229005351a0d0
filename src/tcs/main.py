"""Entry-point for launching the CLI application."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from .presentation.cli.app import main as cli_main
from .presentation.cli.config import load_config, save_config
from .presentation.cli.render import debug_enabled

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tcs", description="Turn-based text combat simulator")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed (prompted when omitted)")
    parser.add_argument("--name", default=None, help="Player name (prompted when omitted)")
    parser.add_argument("--config", type=Path, default=None, help="Path to a CLI options JSON file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log engine decisions at debug level")

    options = parser.add_argument_group("options", "Saved to the options file before the game starts")
    options.add_argument("--text-mode", choices=("instant", "step"), default=None, help="Pause for Enter between phases")
    options.add_argument("--action-delay", type=float, default=None, help="Seconds to wait after each action")
    options.add_argument("--color", action=argparse.BooleanOptionalAction, default=None, help="Colored output")
    return parser


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose or debug_enabled() else logging.WARNING
    logging.basicConfig(level=level, format=_LOG_FORMAT)


def persist_options(args: argparse.Namespace) -> None:
    """Write any option flags given on the command line to the options file."""
    updates = {
        "text_display_mode": args.text_mode,
        "action_delay": args.action_delay,
        "color": args.color,
    }
    updates = {key: value for key, value in updates.items() if value is not None}
    if not updates:
        return
    config = load_config(args.config)
    config.update(updates)
    save_config(config, args.config)
    logger.debug("Saved options: %s", sorted(updates))


def main(argv: Sequence[str] | None = None) -> None:
    """Run the CLI presentation layer."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    persist_options(args)
    cli_main(seed=args.seed, player_name=args.name, config_path=args.config)


if __name__ == "__main__":
    main()
