"""CLI entry point for ticklist."""

import argparse
from pathlib import Path

from . import __version__
from .config import Settings
from .logging import setup_logging
from .models import FilterMode


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="ticklist",
        description="Terminal task list with due dates, priorities and filters",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory holding the saved task list (default: ~/.local/share/ticklist)",
    )
    parser.add_argument(
        "--list",
        nargs="?",
        const=FilterMode.ALL.value,
        default=None,
        choices=[mode.value for mode in FilterMode],
        metavar="FILTER",
        help="Print tasks (all, active or completed) and exit instead of starting the TUI",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args()


def main() -> None:
    """Main entry point."""
    args = parse_args()

    # Build settings from CLI args
    settings_kwargs: dict = {}
    if args.data_dir:
        settings_kwargs["data_dir"] = args.data_dir
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file

    settings = Settings(**settings_kwargs)

    setup_logging(settings.verbose, settings.log_file)

    if args.list is not None:
        from .cli import output
        from .cli.listing import run_list
        from .repositories import FilesystemMedium
        from .services import TaskStore

        medium = FilesystemMedium(settings.data_dir)
        ok, reason = medium.validate()
        if not ok:
            output.error(reason or "Data directory unavailable")
            raise SystemExit(1)

        store = TaskStore(medium, settings.storage_key)
        raise SystemExit(run_list(store, args.list))

    # Import here so --list does not pull in textual
    from .app import run

    run(settings)


if __name__ == "__main__":
    main()
