"""Command-line interface for the Sealed Pool Creator."""

import argparse
import logging
import sys
from typing import Optional

from pydantic import ValidationError
from pydantic_settings import SettingsError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from sealed_pool_creator import __version__
from sealed_pool_creator.config import Settings
from sealed_pool_creator.core import SealedPoolCreator

console = Console()


def setup_logging(verbose: bool = False, level: str = "INFO") -> None:
    """Set up logging configuration."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        description="Generate random Netrunner sealed pools for Corp and Runner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--cards-per-deck",
        type=int,
        dest="pool_size",
        help="Number of cards in each pool (default: 75)",
    )
    parser.add_argument(
        "--random-seed",
        type=int,
        dest="seed",
        help="Random seed; re-use it to generate the same pools again",
    )
    parser.add_argument(
        "--cards",
        dest="cards_path",
        help="Path to the card catalog (default: data/cards.json)",
    )
    parser.add_argument(
        "--output-dir",
        help="Directory for the pool files (default: pools)",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        default=None,
        dest="to_stdout",
        help="Print the pools instead of writing files",
    )
    parser.add_argument(
        "--exclude-type",
        action="append",
        dest="exclude_type_codes",
        metavar="TYPE_CODE",
        help="Exclude cards of this type code (repeatable, replaces defaults)",
    )
    parser.add_argument(
        "--exclude-set",
        action="append",
        dest="exclude_set_codes",
        metavar="SET_CODE",
        help="Exclude cards from this set code (repeatable, replaces defaults)",
    )
    parser.add_argument(
        "--exclude-cycle",
        action="append",
        type=int,
        dest="exclude_cycle_numbers",
        metavar="CYCLE",
        help="Exclude cards from this cycle number (repeatable, replaces defaults)",
    )

    return parser


SETTING_ARGS = (
    "pool_size",
    "seed",
    "cards_path",
    "output_dir",
    "to_stdout",
    "exclude_type_codes",
    "exclude_set_codes",
    "exclude_cycle_numbers",
)


def load_settings(args: argparse.Namespace) -> Settings:
    """Build settings, letting command-line values override the environment."""
    overrides = {
        name: getattr(args, name)
        for name in SETTING_ARGS
        if getattr(args, name) is not None
    }
    return Settings(**overrides)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args)
    except (ValidationError, SettingsError) as e:
        console.print(f"[red]✗[/red] Invalid settings: {escape(str(e))}")
        return 1

    setup_logging(args.verbose or settings.debug, settings.log_level)

    result = SealedPoolCreator(settings).run(stream=sys.stdout)
    if not result.ok:
        console.print(f"[red]✗[/red] {escape(str(result.error))}")
        return result.exit_code

    for side, path in result.paths.items():
        console.print(f"[green]✓[/green] {side.value} pool: {escape(str(path))}")
    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
