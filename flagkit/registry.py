# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

from typing import Any, Sequence
import argparse
import csv
import logging

logger = logging.getLogger(__name__)


def option_strings(name: str, shorthand: str) -> list[str]:
    """
    Build the option strings for a flag.

    :param name: Long flag name, without the leading dashes.
    :param shorthand: One-character alias, or "" for none.
    :return: The option strings to pass to argparse.
    """
    if shorthand != "":
        return [f"-{shorthand}", f"--{name}"]
    return [f"--{name}"]


def dest(name: str) -> str:
    return name.replace("-", "_")


def value(args: argparse.Namespace, name: str) -> Any:
    """
    Read the parsed value of a flag by its name.

    :param args: The namespace returned by parse_args.
    :param name: Long flag name, e.g. "no-deploy".
    :return: The parsed value, or the flag's default.
    """
    return getattr(args, dest(name))


def lookup(parser: argparse.ArgumentParser, name: str) -> argparse.Action:
    """
    Find the action registered for a flag.

    :param parser: The parser the flag was registered on.
    :param name: Long flag name.
    :return: The registered action.
    :raises KeyError: If the parser has no flag with this name.
    """
    long_name = f"--{name}"
    for action in parser._actions:
        if long_name in action.option_strings:
            return action
    raise KeyError(name)


TRUE_VALUES = {"1", "t", "T", "true", "TRUE", "True"}
FALSE_VALUES = {"0", "f", "F", "false", "FALSE", "False"}


def parse_bool(text: str) -> bool:
    """
    Parse the value of a bool flag given as --name=value.

    :param text: The value from the command line.
    :return: The parsed boolean.
    :raises argparse.ArgumentTypeError: If the text is not a boolean literal.
    """
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value: {text!r}")


class StringSliceAction(argparse.Action):
    """
    Collects comma separated values across repeated occurrences of a flag.

    The first occurrence replaces the default; later ones append to it.
    """

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        current = getattr(namespace, self.dest, None)
        if current is None or current is self.default:
            current = []
        else:
            current = list(current)
        try:
            for record in csv.reader([values]):
                current.extend(record)
        except csv.Error as e:
            raise argparse.ArgumentError(self, str(e))
        setattr(namespace, self.dest, current)


def register_bool(
    parser: argparse.ArgumentParser,
    name: str,
    shorthand: str,
    default: bool,
    description: str,
) -> argparse.Action:
    action = parser.add_argument(
        *option_strings(name, shorthand),
        dest=dest(name),
        nargs="?",
        const=True,
        type=parse_bool,
        metavar="BOOL",
        default=default,
        help=description,
    )
    logger.debug("Registered bool flag %s (default: %s)", name, default)
    return action


def register_string(
    parser: argparse.ArgumentParser,
    name: str,
    shorthand: str,
    default: str,
    description: str,
) -> argparse.Action:
    action = parser.add_argument(
        *option_strings(name, shorthand),
        dest=dest(name),
        type=str,
        default=default,
        help=description,
    )
    logger.debug("Registered string flag %s (default: %r)", name, default)
    return action


def register_int(
    parser: argparse.ArgumentParser,
    name: str,
    shorthand: str,
    default: int,
    description: str,
) -> argparse.Action:
    action = parser.add_argument(
        *option_strings(name, shorthand),
        dest=dest(name),
        type=int,
        default=default,
        help=description,
    )
    logger.debug("Registered int flag %s (default: %s)", name, default)
    return action


def register_string_slice(
    parser: argparse.ArgumentParser,
    name: str,
    shorthand: str,
    default: Sequence[str],
    description: str,
) -> argparse.Action:
    action = parser.add_argument(
        *option_strings(name, shorthand),
        dest=dest(name),
        action=StringSliceAction,
        default=list(default),
        help=description,
    )
    logger.debug("Registered string slice flag %s (default: %s)", name, default)
    return action


def set_hidden(parser: argparse.ArgumentParser, name: str, hidden: bool) -> None:
    """
    Hide a registered flag from help output. The flag stays parseable.

    :param parser: The parser the flag was registered on.
    :param name: Long flag name.
    :param hidden: Whether to hide the flag.
    """
    if hidden:
        action = lookup(parser, name)
        action.help = argparse.SUPPRESS
        logger.debug("Hid flag %s", name)
