from __future__ import annotations

import argparse
import locale
import logging
import sys
from typing import Callable, Optional

from file_manager.entities.command import parse_command
from file_manager.entities.session import CommandResult, ResultStatus, Session
from file_manager.ports.console.renderer_port import RendererPort
from file_manager.use_cases.dispatcher import CommandDispatcher

logger = logging.getLogger(__name__)


def parse_username(argv: Optional[list[str]], default: str) -> str:
    """Read ``--username=<name>``; anything missing or empty falls back to ``default``."""
    parser = argparse.ArgumentParser(
        prog="file-manager",
        allow_abbrev=False,
        add_help=False,
        description="Interactive file manager rooted at your home directory.",
    )
    parser.add_argument(
        "--username",
        nargs="?",
        default=None,
        help="Name used in the welcome and farewell messages",
    )
    # Unknown flags are ignored rather than rejected.
    args, _ = parser.parse_known_args(argv)
    username = (args.username or "").strip()
    return username or default


def run_session(
    session: Session,
    dispatcher: CommandDispatcher,
    renderer: RendererPort,
    read_line: Callable[[], str] = input,
) -> int:
    """
    Read, dispatch and re-render until ``.exit``, end of input or Ctrl+C.

    Each line is processed to completion before the next one is read.

    Returns:
        Process exit status (always 0)
    """
    renderer.welcome(session.username)
    renderer.current_directory(session.cursor.render())

    try:
        while True:
            try:
                line = read_line()
            except EOFError:
                break

            logger.debug(f"Received command: {line!r}")
            try:
                result = dispatcher.dispatch(session, parse_command(line))
            except Exception as e:
                logger.exception("Unexpected error while running command")
                renderer.error(f"Operation failed: {e}")
                result = CommandResult.ok()

            if result.status is ResultStatus.EXIT:
                break
            renderer.current_directory(session.cursor.render())
    except KeyboardInterrupt:
        logger.info("Interrupted, closing session")

    renderer.farewell(session.username)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    from file_manager.container import container

    settings = container.settings
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        logger.warning(f"Falling back to default collation: {e}")

    username = parse_username(argv, settings.default_username)
    session = container.create_session(username)
    return run_session(session, container.get_dispatcher(), container.get_renderer())


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
