"""CLI entry point for tasklist."""

import argparse
from pathlib import Path

from .config import Settings
from .logging import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="tasklist",
        description="Terminal task list with status, priority, filter and search",
    )
    parser.add_argument(
        "--data-file",
        type=Path,
        default=None,
        help="Path to the storage file (default: ~/.local/share/tasklist/storage.yaml)",
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
        version="%(prog)s 0.1.0",
    )
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    """Build settings from CLI args, leaving unset flags to env/defaults."""
    settings_kwargs: dict = {}
    if args.data_file:
        settings_kwargs["data_file"] = args.data_file
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file
    return Settings(**settings_kwargs)


def main() -> None:
    """Main entry point."""
    settings = build_settings(parse_args())

    setup_logging(settings.verbose, settings.log_file)

    # Import here so --help/--version stay fast
    from .app import run

    run(settings)


if __name__ == "__main__":
    main()
