"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from chesslang.shell.repl import Shell
from chesslang.shell.settings import DEFAULT_PROMPT, ShellSettings

_LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chesslang",
        description="Interactive shell for a simplified chessboard.",
    )
    parser.add_argument(
        "--script",
        metavar="PATH",
        default=None,
        help="read commands from PATH instead of standard input",
    )
    parser.add_argument(
        "--no-board",
        action="store_true",
        help="do not print the board after each command",
    )
    parser.add_argument("--prompt", default=DEFAULT_PROMPT, help="input prompt")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="logging level for diagnostics on stderr (default: %(default)s)",
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> ShellSettings:
    return ShellSettings(
        prompt=args.prompt,
        show_board=not args.no_board,
        log_level=args.log_level,
    )


def run_application(argv: list[str] | None = None) -> int:
    """Parse *argv*, configure logging and run the shell to completion."""
    args = _build_parser().parse_args(argv)
    settings = settings_from_args(args)
    logging.basicConfig(
        level=settings.log_level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.script is None:
        Shell(sys.stdin, sys.stdout, settings).run()
        return 0

    _LOGGER.info("Running script %s", args.script)
    with open(args.script, encoding="utf-8") as script:
        Shell(script, sys.stdout, settings).run()
    return 0


def main() -> None:
    """Launch the ChessLang shell."""
    sys.exit(run_application())


if __name__ == "__main__":
    main()
