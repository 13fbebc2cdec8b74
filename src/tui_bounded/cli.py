"""
tui-bounded CLI - Entry point for the interactive list demo.
"""

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence

from loguru import logger

from tui_bounded.core.config import (
    Config,
    get_log_file_path,
    load_config,
    write_default_config,
)
from tui_bounded.core.output import setup_loguru


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tui-bounded",
        description="Interactive list with bounded, wrap-aware selection",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config.toml (default: ./config.toml or XDG config dir)",
    )
    parser.add_argument(
        "--init-config",
        action="store_true",
        help="Write a default config file and exit",
    )
    parser.add_argument(
        "--items",
        type=int,
        help="Number of generated items (ignored when the config lists items)",
    )
    parser.add_argument(
        "--no-wrap",
        action="store_true",
        help="Clamp at the ends of the list instead of wrapping",
    )
    parser.add_argument(
        "--select",
        type=int,
        help="Initially selected item (0-based)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    return parser


def apply_overrides(config: Config, args: argparse.Namespace) -> Config:
    """Fold command line options into the loaded configuration."""
    ui = config.ui
    if args.items is not None:
        if args.items < 0:
            raise ValueError(f"--items cannot be negative: {args.items}")
        ui = replace(ui, initial_items=args.items)
    if args.no_wrap:
        ui = replace(ui, wrap=False)
    if args.select is not None:
        ui = replace(ui, initial_selection=args.select)

    log_settings = config.logging
    if args.log_level:
        log_settings = replace(log_settings, level=args.log_level)

    return replace(config, ui=ui, logging=log_settings)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the tui-bounded command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.init_config:
        path = write_default_config(args.config)
        print(f"Config file: {path}")
        return 0

    config = load_config(args.config)
    try:
        config = apply_overrides(config, args)
    except ValueError as e:
        parser.error(str(e))

    setup_loguru(get_log_file_path(config), level=config.logging.level)

    # Imported late so --help works without touching the terminal
    from tui_bounded.ui.blessed import Keymap, run_app

    try:
        keymap = Keymap.from_config(config.keys)
    except ValueError as e:
        logger.error(f"Invalid key binding: {e}")
        print(f"Invalid key binding: {e}", file=sys.stderr)
        return 1
    Keymap.set_shared(keymap)

    run_app(config, keymap)
    return 0


if __name__ == "__main__":
    sys.exit(main())
