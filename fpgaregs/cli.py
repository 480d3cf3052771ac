"""
Copyright (c) 2019 Ash Wilding. All rights reserved.

SPDX-License-Identifier: MIT
"""

# Standard Python deps
from typing import List, Optional

# Internal deps
from . import args
from . import config
from . import header
from . import log
from . import output
from . import overlap


def main( argv:Optional[List[str]]=None ) -> int:
    a = args.parse(argv)
    log.set_verbosity(a.verbosity)

    translate = config.read_config(a.config)
    symbols = header.read_header(a.header)

    if log.is_verbose():
        overlap.find_overlaps(symbols)

    output.display(symbols, translate)
    return 0
