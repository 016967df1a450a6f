# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

from typing import Protocol, Sequence
import argparse

from .flag import Flag, add


class Command(Protocol):
    def name(self) -> str: ...
    def help(self) -> str: ...
    def flags(self) -> Sequence[Flag]: ...
    def run(self, args: argparse.Namespace) -> None: ...


def configure(
    subparsers: argparse._SubParsersAction, command: Command
) -> argparse.ArgumentParser:
    """
    Create the subcommand parser for a command and attach its flags.

    :param subparsers: The subparsers of the root parser.
    :param command: The command to configure.
    :return: The subcommand parser.
    """
    parser = subparsers.add_parser(command.name(), help=command.help())
    add(parser, *command.flags())
    return parser
