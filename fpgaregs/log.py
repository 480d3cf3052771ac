"""
Copyright (c) 2019 Ash Wilding. All rights reserved.

SPDX-License-Identifier: MIT

Diagnostics. Everything goes to stderr; stdout is reserved for the generated
shell assignments.
"""

# Standard Python deps
import sys


_verbosity = 0


def set_verbosity( level:int ) -> None:
    global _verbosity
    _verbosity = level

def is_verbose() -> bool:
    return _verbosity >= 1

def is_debug() -> bool:
    return _verbosity >= 2


def verbose( msg:str="" ) -> None:
    if (is_verbose()):
        print(f"[VERBOSE] {msg if msg else ''}", file=sys.stderr)

def debug( msg:str="" ) -> None:
    if (is_debug()):
        print(f"[DEBUG] {msg if msg else ''}", file=sys.stderr)

def error( msg:str="" ) -> None:
    print(msg, file=sys.stderr)
