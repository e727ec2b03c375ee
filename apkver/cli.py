# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Command-line interface for apkver.

This module provides the `apkver` console script for comparing and
sorting Alpine package version strings.

Commands:

    compare: Print the relation between two versions ("<", "=", ">")
    sort: Print versions oldest first

Example:
    Compare two versions:
        ```bash
        $ apkver compare 1.2.3_rc1 1.2.3
        <
        ```

    Sort versions given as arguments:
        ```bash
        $ apkver sort 1.10 1.2 1.2_alpha
        1.2_alpha
        1.2
        1.10
        ```

    Sort versions from stdin, newest first:
        ```bash
        $ printf '1.0\\n1.0-r1\\n' | apkver sort --reverse
        1.0-r1
        1.0
        ```

    Enable debug output (written to stderr):
        ```bash
        $ apkver compare 1.0 1.0.1 --debug
        ```

Exit Codes:

- 0: Success
- 1: Error (invalid settings file)

Note:
    Settings are read from --config, or from the nearest `.apkver.yaml`
    above the working directory. Command-line flags override settings.

"""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
import sys
import traceback

from apkver.config import Settings, load_settings
from apkver.exceptions import APKVerError
from apkver.logging import get_global_logger, get_logger, set_global_logger
from apkver.versioning import compare_versions, op_string, sort_versions


def _configure(args: argparse.Namespace) -> Settings:
    """Load settings and install the global logger for a command."""
    # Log while loading settings if flags ask for it
    set_global_logger(get_logger(verbose=args.verbose, debug=args.debug))

    settings = load_settings(args.config)
    set_global_logger(
        get_logger(
            verbose=args.verbose or settings.verbose,
            debug=args.debug or settings.debug,
        )
    )
    return settings


def cmd_compare(args: argparse.Namespace, settings: Settings) -> int:
    """Handler for 'apkver compare' command.

    Args:
        args: Parsed command-line arguments containing the two versions.
        settings: Effective settings.

    Returns:
        Exit code (always 0; every pair of strings has a verdict).

    """
    result = compare_versions(args.left, args.right, max_digits=settings.max_digits)
    print(op_string(result))
    return 0


def cmd_sort(args: argparse.Namespace, settings: Settings) -> int:
    """Handler for 'apkver sort' command.

    Reads versions from the command line, or one per line from stdin when
    none are given. Blank lines are skipped.

    Args:
        args: Parsed command-line arguments containing versions and flags.
        settings: Effective settings.

    Returns:
        Exit code (0 for success).

    """
    versions = args.versions
    if not versions:
        versions = [line.strip() for line in sys.stdin if line.strip()]

    get_global_logger().verbose("SORT", f"Sorting {len(versions)} version(s)")
    for v in sort_versions(
        versions, reverse=args.reverse, max_digits=settings.max_digits
    ):
        print(v)
    return 0


def _add_common_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Settings file (default: nearest .apkver.yaml, if any)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show progress and high-level status updates",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Show detailed debugging output (implies --verbose)",
    )


def _package_version() -> str:
    try:
        return version("apkver")
    except PackageNotFoundError:
        from apkver import __version__

        return __version__


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the apkver CLI."""
    parser = argparse.ArgumentParser(
        prog="apkver",
        description="apkver - compare and sort Alpine package versions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"apkver {_package_version()}",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands",
        required=True,
    )

    # 'compare' command
    parser_compare = subparsers.add_parser(
        "compare",
        help="Compare two versions",
        description="Print '<', '=' or '>' for the relation of LEFT to RIGHT.",
    )
    parser_compare.add_argument("left", help="Left-hand version")
    parser_compare.add_argument("right", help="Right-hand version")
    _add_common_flags(parser_compare)
    parser_compare.set_defaults(func=cmd_compare)

    # 'sort' command
    parser_sort = subparsers.add_parser(
        "sort",
        help="Sort versions oldest first",
        description="Sort versions given as arguments, or read one per line from stdin.",
    )
    parser_sort.add_argument("versions", nargs="*", help="Versions to sort")
    parser_sort.add_argument(
        "-r",
        "--reverse",
        action="store_true",
        help="Print newest first",
    )
    _add_common_flags(parser_sort)
    parser_sort.set_defaults(func=cmd_sort)

    return parser


def run(argv: list[str] | None = None) -> int:
    """Parse arguments, run the selected command and return its exit code."""
    args = build_parser().parse_args(argv)

    try:
        settings = _configure(args)
        return args.func(args, settings)
    except APKVerError as err:
        print(f"Error: {err}", file=sys.stderr)
        if args.verbose or args.debug:
            traceback.print_exc()
        return 1


def main() -> None:
    """Main entry point for the apkver CLI.

    This function is registered as the 'apkver' console script in pyproject.toml.
    """
    sys.exit(run())


if __name__ == "__main__":
    main()
