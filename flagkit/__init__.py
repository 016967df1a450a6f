# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

from .command import Command, configure
from .flag import Bool, Flag, Int, String, StringSlice, add, describe
from .registry import lookup, value

__all__ = [
    "Bool",
    "Command",
    "Flag",
    "Int",
    "String",
    "StringSlice",
    "add",
    "configure",
    "describe",
    "lookup",
    "value",
]
