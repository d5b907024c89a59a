#!/usr/bin/env python3

"""
This code or file is part of 'BatteryReader' project
copyright (c) 2023-2025 , Aymen Brahim Djelloul, All rights reserved.
use of this source code is governed by MIT License that can be found on the project folder.

    // BatteryReader - list the system batteries and estimate their combined runtime
    // The report goes to stdout, diagnostics go to stderr.

"""

# IMPORTS
import sys
import argparse
from typing import List, Optional

from colorama import Fore, Style, init

from batteryreader import PowerError, battery_report, _AUTHOR, _CAPTION
from batteryreader._core import _Const

# Initialize colorama, without autoreset so the report lines stay plain
init()


class Colors:
    """
    A utility class that defines CLI coloring using 'colorama'
    """

    YELLOW = Fore.YELLOW
    CYAN = Fore.CYAN
    RED = Fore.RED
    BOLD = Style.BRIGHT
    END = Style.RESET_ALL


class BatteryReaderCLI:
    """Print the battery report and the combined runtime estimate"""

    def __init__(self, argv: Optional[List[str]] = None, root: str = _Const.POWER_SUPPLY_PATH) -> None:

        # Get arguments
        self.args = self._parse_arguments(argv)
        self.root = root

    @staticmethod
    def _parse_arguments(argv: Optional[List[str]]) -> argparse.Namespace:
        """Parse command line arguments"""
        parser = argparse.ArgumentParser(
            prog="batteryreader",
            description=f"{_CAPTION} - Battery status and runtime estimation",
            formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        )

        parser.add_argument(
            "-v", "--version",
            action="store_true",
            help="Show application version"
        )

        parser.add_argument(
            "-d", "--dev-mode",
            action="store_true",
            help="Print [DEV] traces of every attribute read on stderr"
        )

        return parser.parse_args(argv)

    def run(self) -> None:
        """Run the CLI tool based on provided arguments"""
        if self.args.version:
            self._display_version()
            return

        # The whole report is built first, a failing read prints nothing
        for line in battery_report(self.root, dev_mode=self.args.dev_mode):
            print(line)

    @staticmethod
    def _display_version() -> None:
        """Display version information"""
        print(f"{Colors.BOLD}Application    : {Colors.END}    {Colors.CYAN}{_CAPTION}{Colors.END}")
        print(f"{Colors.BOLD}Developed by   : {Colors.END}    {_AUTHOR}")


def main(argv: Optional[List[str]] = None, root: str = _Const.POWER_SUPPLY_PATH) -> int:
    """Main function to run the CLI tool"""

    try:
        cli = BatteryReaderCLI(argv, root)
        cli.run()
        return 0

    except KeyboardInterrupt:
        print(f"\n{Colors.YELLOW}Battery reading interrupted.{Colors.END}", file=sys.stderr)
        return 130

    except PowerError as e:
        print(f"{Colors.RED}{e}{Colors.END}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
