# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from typing import Any
import argparse

from . import registry

# Flag names are read back by name from parsed arguments; keep them stable.
ACCESS_TOKEN_NAME = "access-token"
VERBOSE_NAME = "verbose"
JSON_OUTPUT_NAME = "json"
LOCAL_ONLY_NAME = "local-only"
ORG_NAME = "org"
APP_NAME_FLAG_NAME = "name"
REGION_NAME = "region"
IMAGE_NAME = "image"
YES_NAME = "yes"
NOW_NAME = "now"
NO_DEPLOY_NAME = "no-deploy"
GENERATE_NAME_FLAG_NAME = "generate-name"
REMOTE_ONLY_NAME = "remote-only"


class Flag(ABC):
    @abstractmethod
    def add_to(self, parser: argparse.ArgumentParser) -> None: ...


def add(parser: argparse.ArgumentParser, *flags: Flag) -> None:
    """
    Register flags on a parser, in order.

    Duplicate names are reported by argparse, not here.

    :param parser: The command parser to add the flags to.
    :param flags: The flags to add.
    """
    for flag in flags:
        flag.add_to(parser)


@dataclass(frozen=True)
class Bool(Flag):
    name: str
    shorthand: str = ""
    description: str = ""
    default: bool = False
    hidden: bool = False

    def add_to(self, parser: argparse.ArgumentParser) -> None:
        registry.register_bool(
            parser, self.name, self.shorthand, self.default, self.description
        )
        registry.set_hidden(parser, self.name, self.hidden)


@dataclass(frozen=True)
class String(Flag):
    name: str
    shorthand: str = ""
    description: str = ""
    default: str = ""
    conf_name: str = ""
    env_name: str = ""
    hidden: bool = False

    def add_to(self, parser: argparse.ArgumentParser) -> None:
        registry.register_string(
            parser, self.name, self.shorthand, self.default, self.description
        )
        registry.set_hidden(parser, self.name, self.hidden)


@dataclass(frozen=True)
class Int(Flag):
    name: str
    shorthand: str = ""
    description: str = ""
    default: int = 0
    hidden: bool = False

    def add_to(self, parser: argparse.ArgumentParser) -> None:
        registry.register_int(
            parser, self.name, self.shorthand, self.default, self.description
        )
        registry.set_hidden(parser, self.name, self.hidden)


@dataclass(frozen=True)
class StringSlice(Flag):
    name: str
    shorthand: str = ""
    description: str = ""
    default: tuple[str, ...] = ()
    conf_name: str = ""
    env_name: str = ""

    def add_to(self, parser: argparse.ArgumentParser) -> None:
        registry.register_string_slice(
            parser, self.name, self.shorthand, self.default, self.description
        )


def describe(flag: Flag) -> dict[str, Any]:
    """
    Describe a flag as a plain dictionary.

    :param flag: The flag to describe.
    :return: The flag's fields, plus its variant under "type".
    """
    fields = asdict(flag)  # type: ignore
    if isinstance(flag, StringSlice):
        fields["default"] = list(flag.default)
    return {"type": type(flag).__name__, **fields}


def org() -> String:
    return String(
        name=ORG_NAME,
        description="The organization to operate on",
    )


def yes() -> Bool:
    return Bool(
        name=YES_NAME,
        shorthand="y",
        description="Accept all confirmations",
    )


def app_name() -> String:
    return String(
        name=APP_NAME_FLAG_NAME,
        description="The name of the application to create",
    )


def region() -> String:
    return String(
        name=REGION_NAME,
        description="The target region for the operation",
    )


def image() -> String:
    return String(
        name=IMAGE_NAME,
        description="The image to deploy",
    )


def now() -> Bool:
    return Bool(
        name=NOW_NAME,
        description="Deploy now without confirmation",
        default=False,
    )


def no_deploy() -> Bool:
    return Bool(
        name=NO_DEPLOY_NAME,
        description="Do not prompt for deployment",
        default=False,
    )


def generate_name() -> Bool:
    return Bool(
        name=GENERATE_NAME_FLAG_NAME,
        description="Always generate a name for the app",
        default=False,
    )


def remote_only() -> Bool:
    return Bool(
        name=REMOTE_ONLY_NAME,
        description="Perform builds on a remote builder instance instead of using the local docker daemon",
        default=True,
    )


HOUSE_FLAGS = [
    org,
    yes,
    app_name,
    region,
    image,
    now,
    no_deploy,
    generate_name,
    remote_only,
]
