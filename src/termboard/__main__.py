"""CLI entry point for termboard."""

import argparse
from pathlib import Path

from . import __version__
from .config import Settings
from .logging import setup_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="termboard",
        description="Terminal Kanban board for personal task tracking",
    )
    parser.add_argument(
        "--project-root",
        type=Path,
        default=None,
        help="Path to directory containing termboard.yml (default: current directory)",
    )
    parser.add_argument(
        "--board-file",
        type=Path,
        default=None,
        help="Path to the JSON board file (overrides termboard.yml)",
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

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.add_parser("init", help="Generate default termboard.yml and exit")

    add = subparsers.add_parser("add", help="Add a task")
    add.add_argument("title", help="Task title")
    add.add_argument("-d", "--description", default=None, help="Task description")
    add.add_argument(
        "-t", "--tag", action="append", default=[], dest="tags", help="Tag (repeatable)"
    )
    add.add_argument("--due", default=None, help="Due date (YYYY-MM-DD)")
    add.add_argument("-s", "--status", default=None, help="Column name (default: first column)")

    subparsers.add_parser("show", help="Print the board")
    subparsers.add_parser("list", help="List all tasks")
    subparsers.add_parser("tags", help="List all tags")
    subparsers.add_parser("stats", help="Show task counts per column")

    export = subparsers.add_parser("export", help="Export the board to CSV")
    export.add_argument("path", nargs="?", type=Path, default=None, help="CSV file path")

    import_ = subparsers.add_parser("import", help="Replace the board with a CSV file")
    import_.add_argument("path", nargs="?", type=Path, default=None, help="CSV file path")

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)

    # Build settings from CLI args
    settings_kwargs: dict = {}
    if args.project_root:
        settings_kwargs["project_root"] = args.project_root
    if args.board_file:
        settings_kwargs["board_file"] = args.board_file
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file

    settings = Settings(**settings_kwargs)

    setup_logging(settings.verbose, settings.log_file)

    if args.command == "init":
        from .cli.init import run_init

        raise SystemExit(run_init(settings.project_root))

    if args.command is not None:
        raise SystemExit(run_command(args, settings))

    # Import here to avoid loading Textual for subcommands
    from .app import run

    run(settings)


def run_command(args: argparse.Namespace, settings: Settings) -> int:
    """Dispatch a board subcommand."""
    from .cli import commands
    from .cli.output import error, warning
    from .repositories import JsonBoardRepository
    from .services import BoardService, ConfigService

    config_service = ConfigService(settings.project_root, settings.board_file)
    config_service.get_config()
    if config_service.has_config_error:
        warning(config_service.config_error)
    board_service = BoardService(JsonBoardRepository(config_service.board_file), config_service)

    if args.command == "add":
        return commands.run_add(
            board_service,
            args.title,
            description=args.description,
            tags=args.tags,
            due=args.due,
            status=args.status,
        )
    if args.command == "show":
        return commands.run_show(board_service)
    if args.command == "list":
        return commands.run_list(board_service)
    if args.command == "tags":
        return commands.run_tags(board_service)
    if args.command == "stats":
        return commands.run_stats(board_service)
    if args.command == "export":
        return commands.run_export(board_service, args.path or config_service.csv_file)
    if args.command == "import":
        return commands.run_import(board_service, args.path or config_service.csv_file)

    error(f"Unknown command: {args.command}")
    return 2


if __name__ == "__main__":
    main()
