"""
Flag table CLI Tool

Prints every AppSearch feature flag with its key and value, optionally
with overrides from a YAML configuration file applied.
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config_loader import load_flag_config
from .exceptions import FlagConfigurationError
from .flag_config import FlagConfig
from .flag_keys import FlagName
from .main import Flags

logger = logging.getLogger(__name__)


def build_flag_table(config: FlagConfig) -> Table:
    """Build a rich table describing every flag in the configuration."""
    table = Table(title="AppSearch Feature Flags", show_lines=False)
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Accessor", style="magenta")
    table.add_column("Enabled", justify="center")

    for flag in FlagName:
        value = config.is_enabled(flag)
        table.add_row(flag.key, flag.value, "[green]true[/]" if value else "[red]false[/]")
    return table


def _create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Show AppSearch feature flags",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s
  %(prog)s --config config/flags.yaml
        """,
    )
    parser.add_argument(
        "--config",
        "-c",
        default=None,
        help="YAML file with flag overrides to apply on top of the compiled-in values",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging level. Default: WARNING.",
    )
    return parser


def main(args: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    """Main CLI entry point."""
    if args is None:
        args = sys.argv[1:]

    parsed_args = _create_parser().parse_args(args)

    log_level = getattr(logging, parsed_args.log_level.upper(), logging.WARNING)
    logging.basicConfig(
        level=log_level, format="%(asctime)s - %(levelname)s - %(message)s", force=True
    )

    console = console or Console()

    try:
        config = (
            load_flag_config(parsed_args.config)
            if parsed_args.config
            else FlagConfig.default()
        )
    except FlagConfigurationError as e:
        logger.error(f"Flag configuration error: {e}")
        console.print(f"[red]Flag configuration error:[/] {escape(str(e))}")
        return 2

    Flags.log_current_flags(config)
    console.print(build_flag_table(config))
    return 0


if __name__ == "__main__":
    sys.exit(main())
