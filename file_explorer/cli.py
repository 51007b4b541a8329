import argparse
import logging
import os
import sys
from typing import Optional

from file_explorer.container import DependencyContainer
from file_explorer.exceptions import ConfigurationError


def _configure_logging(level: str, log_file: Optional[str]) -> None:
    logging.basicConfig(
        level=logging.getLevelName(level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        filename=log_file,
        errors="backslashreplace",
    )


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="file-explorer",
        description="Interactive shell to browse, copy, move, delete and chmod local files.",
    )
    parser.add_argument(
        "--start-dir",
        default=None,
        help="Initial directory (default: FILE_EXPLORER_START_DIR or the current directory)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Log level (default: FILE_EXPLORER_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )
    args = parser.parse_args(argv)

    # Settings read the environment (and .env) on import
    try:
        from file_explorer.config.settings import Settings

        settings = Settings()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    _configure_logging(args.log_level or settings.log_level, settings.log_file)

    start_dir = args.start_dir or settings.start_directory
    if start_dir and not os.path.isdir(start_dir):
        print(f"Not a directory: {start_dir}", file=sys.stderr)
        return 2

    container = DependencyContainer(
        start_directory=start_dir, color=settings.color and not args.no_color
    )
    return container.get_shell().run()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
