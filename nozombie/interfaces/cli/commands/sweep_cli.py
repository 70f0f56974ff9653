"""
Sweep command: find unused components and delete them.

Forced runs delete without asking; otherwise each file is confirmed
(and shown first when verbose).
"""

from __future__ import annotations

import argparse

from nozombie.helpers.exceptions import ConfigError, FilesystemReadError
from nozombie.helpers.logging_helper import configure_logging
from nozombie.interfaces.cli.cli_ui import (
    RichConfirmer,
    RichProgressReporter,
    console,
    print_error,
    print_info,
    print_success,
    print_warning,
    show_component_content,
    show_deletion_summary,
)
from nozombie.interfaces.cli.utils import load_run_config
from nozombie.services.zombie_scan_svc import ZombieScanService

FAREWELL = "Bye bye!"


def cmd_sweep(args: argparse.Namespace) -> int:
    """
    Find and delete unused components.

    Exit codes: 0 ok, 1 unreadable tree or failed delete, 2 bad configuration.
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

    if config.force and report.unused:
        print_warning(f"Deleting {len(report.unused)} file(s) without confirmation")

    summary = service.delete_unused(report.unused, RichConfirmer(), show_component_content)

    if report.unused:
        show_deletion_summary(summary)
    if not config.force:
        console.print(FAREWELL)

    if not summary.ok:
        print_error(f"{len(summary.failed)} file(s) could not be deleted")
        return 1
    if summary.deleted:
        print_success(f"Deleted {len(summary.deleted)} component file(s)")
    return 0
