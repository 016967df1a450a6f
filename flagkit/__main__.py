#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

import json
import logging
import argparse
from typing import Sequence
from .command import Command, configure
from .flag import (
    HOUSE_FLAGS,
    JSON_OUTPUT_NAME,
    VERBOSE_NAME,
    Bool,
    Flag,
    add,
    describe,
)
from .registry import value

logger = logging.getLogger(__name__)


class FlagsCommand:
    def name(self) -> str:
        return "flags"

    def help(self) -> str:
        return "List the shared flags available to commands"

    def flags(self) -> Sequence[Flag]:
        return [
            Bool(name=JSON_OUTPUT_NAME, description="Print the flags as JSON"),
        ]

    def run(self, args: argparse.Namespace) -> None:
        descriptions = [describe(constructor()) for constructor in HOUSE_FLAGS]
        logger.debug("Listing %d flags", len(descriptions))
        if value(args, JSON_OUTPUT_NAME):
            print(json.dumps(descriptions, indent=2))
            return
        for d in descriptions:
            shorthand = f"-{d['shorthand']}, " if d["shorthand"] else "    "
            print(
                f"{shorthand}--{d['name']:<16} {d['type']:<12} "
                f"{d['default']!r:<8} {d['description']}"
            )


COMMANDS: list[Command] = [
    FlagsCommand(),
]


def select_command(command_name: str) -> Command:
    for command in COMMANDS:
        if command.name() == command_name:
            return command
    raise ValueError(f"Command {command_name} not found.")


def configure_commands(subparsers: argparse._SubParsersAction) -> None:
    for command in COMMANDS:
        parser = configure(subparsers, command)
        # A bool before the command name would consume the name as its value.
        add(parser, Bool(name=VERBOSE_NAME, description="Enable debug logging"))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="flagkit")
    subparsers = parser.add_subparsers(dest="command", required=True)
    configure_commands(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        format="%(levelname)s:%(message)s",
        level=logging.DEBUG if value(args, VERBOSE_NAME) else logging.INFO,
    )
    try:
        command = select_command(args.command)
        command.run(args)
    except argparse.ArgumentError as e:
        parser.error(e.message)


if __name__ == "__main__":
    main()
