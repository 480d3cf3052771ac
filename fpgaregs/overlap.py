"""
Copyright (c) 2019 Ash Wilding. All rights reserved.

SPDX-License-Identifier: MIT

Find registers whose 32-bit windows overlap, e.g. two names for the same
address or a misaligned register straddling its neighbour.
"""

# Standard Python deps
from dataclasses import dataclass
from typing import Dict, List

# Internal deps
from . import log

# External deps
from intervaltree import IntervalTree


REGISTER_WIDTH = 4


@dataclass
class Overlap:
    """
    Class representing a pair of overlapping registers.
    """
    first: str              # name sorting first
    first_addr: int
    second: str             # name sorting second
    second_addr: int


def find_overlaps( symbols:Dict[str, int] ) -> List[Overlap]:
    """
    Return every pair of overlapping registers, ordered by the second
    register's name and then the first's.
    """
    ivtree = IntervalTree()
    overlaps = []
    for name in sorted(symbols):
        addr = symbols[name]
        for iv in sorted(ivtree[addr:addr+REGISTER_WIDTH], key=lambda other: other.data):
            o = Overlap(iv.data, iv.begin, name, addr)
            log.verbose(f"register {name} at {hex(addr)} overlaps {iv.data} at {hex(iv.begin)}")
            overlaps.append(o)
        ivtree.addi(addr, addr+REGISTER_WIDTH, name)
    return overlaps
