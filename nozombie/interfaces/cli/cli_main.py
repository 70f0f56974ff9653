#!/usr/bin/env python3
"""
Main CLI entry point with argument parser and command dispatch.
"""

from __future__ import annotations

import argparse

from nozombie.__version__ import __version__
from nozombie.interfaces.cli.commands.list_cli import cmd_list
from nozombie.interfaces.cli.commands.sweep_cli import cmd_sweep


def _add_scan_arguments(s: argparse.ArgumentParser) -> None:
    """Options shared by every command that scans a project."""
    # Flags default to None so only the ones given override config files
    s.add_argument("--path", default=None, help="directory to scan (default: current directory)")
    s.add_argument(
        "--absolute-imports",
        action="store_true",
        default=None,
        help="scan from <cwd>/<baseUrl>; baseUrl comes from --base-url, tsconfig.json or jsconfig.json",
    )
    s.add_argument("--base-url", default=None, help="base directory for absolute imports")
    s.add_argument(
        "--ignore-node-modules",
        action="store_true",
        default=None,
        help="skip directories whose name contains node_modules",
    )
    s.add_argument("--extensions", default=None, help="comma-separated file extensions (default: .js,.jsx,.ts,.tsx)")
    s.add_argument("--verbose", "-v", action="store_true", default=None, help="show advisories, file content and debug logs")
    s.add_argument("--config", default=None, help="YAML config file")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    p = argparse.ArgumentParser(
        prog="nozombie",
        description="nozombie - Find and delete unused React components",
        epilog="Examples:\n"
        "  nozombie list                              # Show unused components\n"
        "  nozombie list --ignore-node-modules        # Skip vendored dependencies\n"
        "  nozombie sweep --path src                  # Confirm each delete under src/\n"
        "  nozombie sweep --absolute-imports --force  # Delete from baseUrl without asking",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    sub = p.add_subparsers(
        dest="cmd",
        title="commands",
        description="Available commands (use 'nozombie <command> --help' for command-specific help)",
    )

    # sweep: find and delete
    s = sub.add_parser("sweep", help="Find unused components and delete them")
    _add_scan_arguments(s)
    s.add_argument("--force", action="store_true", default=None, help="delete without confirmation")
    s.set_defaults(func=cmd_sweep)

    # list: report only
    s = sub.add_parser("list", help="List unused components without deleting anything")
    _add_scan_arguments(s)
    s.set_defaults(func=cmd_list)

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # If no command provided, show help
    if args.cmd is None:
        parser.print_help()
        return 0

    result: int = args.func(args)
    return result


if __name__ == "__main__":
    raise SystemExit(main())
