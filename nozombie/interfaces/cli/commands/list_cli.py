"""
List command: report unused components without touching the tree.
"""

from __future__ import annotations

import argparse

from nozombie.helpers.exceptions import ConfigError, FilesystemReadError
from nozombie.helpers.logging_helper import configure_logging
from nozombie.interfaces.cli.cli_ui import RichProgressReporter, TableDisplay, print_error, print_info, print_success
from nozombie.interfaces.cli.utils import load_run_config
from nozombie.services.zombie_scan_svc import ZombieScanService


def cmd_list(args: argparse.Namespace) -> int:
    """
    Print a table of unused components.

    Exit codes: 0 ok, 1 unreadable tree, 2 bad configuration.
    """
    try:
        config = load_run_config(args)
    except ConfigError as e:
        print_error(f"Configuration error: {e}")
        return 2

    configure_logging(config.verbose)
    service = ZombieScanService(config)

    try:
        if config.verbose:
            advisory = service.root_advisory()
            if advisory:
                print_info(advisory)
        report = service.find_unused(RichProgressReporter())
    except ConfigError as e:
        print_error(f"Configuration error: {e}")
        return 2
    except FilesystemReadError as e:
        print_error(f"Cannot read source tree: {e}")
        return 1

    if not report.unused:
        print_success("No zombie components")
        return 0

    TableDisplay.show_components(report.unused, title=f"Unused components ({len(report.unused)}/{len(report.components)})")
    return 0
