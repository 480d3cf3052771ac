"""
Copyright (c) 2019 Ash Wilding. All rights reserved.

SPDX-License-Identifier: MIT
"""

# Standard Python deps
import sys
from typing import Dict, Optional

# Internal deps
from .header import ENCODING


def _mk_assignment( name:str, addr:int ) -> str:
    """
    Generate a register assignment that bash can evaluate.
    """
    return f"{name}=$((0x{addr:X}))\n"


def render( symbols:Dict[str, int], translate:Optional[Dict[str, str]] ) -> str:
    """
    Generate the assignments for all emitted registers, sorted by register
    name.

    args
    ====

        symbols
                    register name to 32-bit address

        translate
                    register name to output name, or None to emit every
                    register under its own name
    """
    string = ""
    for name in sorted(symbols):
        if translate is not None:
            if not name in translate:
                continue
            string += _mk_assignment(translate[name], symbols[name])
        else:
            string += _mk_assignment(name, symbols[name])
    return string


def display( symbols:Dict[str, int], translate:Optional[Dict[str, str]] ) -> None:
    """
    Write the assignments to stdout as the same bytes the names were read as.
    """
    sys.stdout.flush()
    sys.stdout.buffer.write(render(symbols, translate).encode(ENCODING))
    sys.stdout.buffer.flush()
