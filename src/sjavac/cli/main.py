# Copyright 2026 SJavac Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the sjavac command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from yachalk import chalk

from sjavac.compiler.interpreter import interpret_file
from sjavac.errors import InterpreterError, SourceError
from sjavac.workspace.config import ConfigError, SJavacConfig, find_config, load_config

# ###############
# Public Interface
# ###############

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_IO_ERROR = 2


def main() -> None:
    """Run the sjavac CLI."""
    parser = argparse.ArgumentParser(
        prog="sjavac",
        description="sjavac - static validator for sJava programs",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Validate sJava source files",
        description=(
            "Check that sJava source files are syntactically and semantically valid. "
            "Exits with 0 if every file is valid, 1 if a file is invalid, and 2 on I/O errors."
        ),
    )
    check_parser.add_argument(
        "path",
        help="An sJava source file, or a directory whose source files are all checked",
    )
    check_parser.add_argument(
        "--config",
        default=None,
        help="Path to a configuration file (default: .sjavac.yaml next to PATH, if present)",
    )
    check_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log validation progress",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "check":
        return _cmd_check(args)
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    target = Path(args.path).resolve()

    if not target.exists():
        print(chalk.red(f"Error: path '{target}' does not exist."), file=sys.stderr)
        return EXIT_IO_ERROR

    config_path = Path(args.config) if args.config is not None else find_config(target)
    try:
        config = load_config(config_path) if config_path is not None else SJavacConfig()
    except ConfigError as exc:
        print(chalk.red(f"Error: {exc}"), file=sys.stderr)
        return EXIT_IO_ERROR

    _setup_logging(args.verbose, config)

    sources = _collect_sources(target, config.source_suffix)
    if not sources:
        print(f"No {config.source_suffix} files found.")
        return EXIT_VALID

    status = EXIT_VALID
    for source in sources:
        status = max(status, _check_file(source, config.encoding))
    return status


def _check_file(source: Path, encoding: str) -> int:
    """Validate one file, print its outcome, and return its exit status."""
    try:
        interpret_file(source, encoding)
    except SourceError as exc:
        print(chalk.red(f"FAIL  {source}"))
        print(chalk.red(f"Error: {exc}"), file=sys.stderr)
        return EXIT_IO_ERROR
    except InterpreterError as exc:
        print(chalk.red(f"FAIL  {source}"))
        print(chalk.red(f"Error: {source}: {exc}"), file=sys.stderr)
        return EXIT_INVALID
    print(chalk.green(f"PASS  {source}"))
    return EXIT_VALID


def _collect_sources(target: Path, suffix: str) -> list[Path]:
    """Return *target* itself, or the sources with *suffix* found under it."""
    if target.is_file():
        return [target]
    return sorted(f for f in target.rglob(f"*{suffix}") if f.is_file())


def _setup_logging(verbose: bool, config: SJavacConfig) -> None:
    """Configure the root logger from the command line and configuration."""
    level = logging.DEBUG if verbose else config.logging_level
    logging.basicConfig(format="{levelname}: {name}: {message}", style="{")
    logging.getLogger().setLevel(level)
