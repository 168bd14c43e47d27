# -*- coding: utf-8 -*-
"""
Entry point for previewing messages.

Orchestrates: logging, settings, container, theme check, message rendering.
Prints the alert HTML for one message to stdout.

Run with: python -m dbadmin.main --level error "Table [em]users[/em] is locked"

Notebook usage:
    from dbadmin.main import run
    html = run(["--level", "success", "Done"])
"""
from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

import structlog

from dbadmin.config import get_settings
from dbadmin.DI import Container
from dbadmin.exceptions import MissingRequiredConfigError
from dbadmin.logging.config import configure_logging
from dbadmin.messages import MessageLevel


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="dbadmin", description="Render a message as alert HTML.")
    parser.add_argument("text", help="Message text; BB-code markup is decoded.")
    parser.add_argument(
        "--level",
        choices=[level.level_name for level in MessageLevel],
        default=MessageLevel.NOTICE.level_name,
    )
    parser.add_argument("--param", action="append", default=[], help="Parameter for %%s placeholders.")
    parser.add_argument("--raw", action="store_true", help="Skip the translation catalog.")
    return parser.parse_args(argv)


def run(argv: Sequence[str] | None = None) -> str:
    """Render the message described by argv and return its HTML."""
    configure_logging()
    logger = structlog.get_logger("main")
    settings = get_settings()
    args = _parse_args(argv)

    container = Container()
    theme_manager = container.theme_manager()
    if not theme_manager.themes_fs_dir.is_dir():
        logger.error(
            "main_missing_themes_dir",
            themes_fs_dir=str(theme_manager.themes_fs_dir),
        )
        raise MissingRequiredConfigError("THEME__THEMES_FS_DIR")

    theme = theme_manager.get_fallback_theme()
    formatter = container.message_formatter()
    message = formatter.create(MessageLevel[args.level.upper()], args.text, raw=args.raw)
    for param in args.param:
        message.add_param(param)

    logger.info(
        "main_message_rendered",
        message_level=args.level,
        theme_id=theme.id,
        version_series=settings.app.version_series,
    )
    return message.get_display()


def main() -> None:
    sys.stdout.write(run() + "\n")


__all__ = ["run", "main"]

if __name__ == "__main__":
    main()
