"""Command-line front door for jqlive.

Parses CLI options, verifies the engine is installed, loads the document,
then runs the interactive session. The final filter is printed to stdout so
it can be reused, e.g. ``jq "$(jqlive data.json)" data.json``.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from . import __version__
from .config import Settings, load_config, resolve_settings
from .controller import Controller
from .document import DocumentReadError, read_document
from .engine import COLOR_MODES, EngineNotFoundError, JqEngine, find_engine
from .help import render_full_help
from .keys import default_keymap
from .logs import configure_logging
from .loop import RuntimeLoopTiming, run_main_loop
from .terminal import SessionError, TerminalController, open_input_fd
from .theme import available_theme_names, resolve_theme

logger = logging.getLogger(__name__)

PROG = "jqlive"


def _fatal(message: object) -> SystemExit:
    return SystemExit(f"{PROG}: {message}")


def build_parser() -> argparse.ArgumentParser:
    epilog = "keys:\n" + "\n".join(f"  {row}" for row in render_full_help(default_keymap()))
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Explore a JSON document interactively with jq filters.",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "files",
        nargs="*",
        metavar="file",
        help="Files to concatenate into the document. Reads stdin when omitted.",
    )
    parser.add_argument("--engine", default=None, help="Engine binary to run (default: jq).")
    parser.add_argument(
        "--color",
        choices=COLOR_MODES,
        default=None,
        help="Result coloring: engine colors, Pygments highlighting, or none.",
    )
    parser.add_argument("--no-color", action="store_true", help="Same as --color none.")
    parser.add_argument("--style", default=None, help="Pygments style name (for --color pygments).")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--log-file", default=None, help="Write debug logs to this file.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run_session(document: str, settings: Settings, engine_binary: str) -> str:
    """Run the interactive session and return the final query expression."""
    engine = JqEngine(engine_binary, color_mode=settings.color, style=settings.style)
    controller = Controller(
        document,
        engine,
        theme=resolve_theme(settings.theme, no_color=settings.no_color),
    )
    input_fd, owns_fd = open_input_fd(sys.stdin.fileno())
    try:
        terminal = TerminalController(input_fd, sys.stderr.fileno())
        run_main_loop(controller, terminal, RuntimeLoopTiming())
    finally:
        if owns_fd:
            os.close(input_fd)
    return controller.query_expression()


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, run the session and print the final expression.

    Fatal conditions (missing engine, unreadable input, terminal failure)
    exit non-zero with a one-line diagnostic on stderr.
    """
    args = build_parser().parse_args(argv)
    settings = resolve_settings(args, load_config())
    try:
        configure_logging(settings.log_file)
    except OSError as exc:
        raise _fatal(f"cannot open log file {settings.log_file}: {exc.strerror or exc}") from None
    logger.debug("starting with %s", settings)

    try:
        engine_binary = find_engine(settings.engine)
    except EngineNotFoundError as exc:
        raise _fatal(exc) from None

    try:
        document = read_document(args.files, sys.stdin.buffer)
    except DocumentReadError as exc:
        raise _fatal(exc) from None
    except KeyboardInterrupt:
        raise SystemExit(130) from None

    try:
        expression = run_session(document, settings, engine_binary)
    except SessionError as exc:
        raise _fatal(exc) from None

    logger.debug("exiting with expression %r", expression)
    sys.stdout.write(expression + "\n")
    sys.stdout.flush()


if __name__ == "__main__":
    main()
