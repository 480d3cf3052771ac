"""
Copyright (c) 2019 Ash Wilding. All rights reserved.

SPDX-License-Identifier: MIT

Run fpgaregs.
"""

import sys
if sys.version_info < (3, 8):
    print("fpgaregs requires Python 3.8+", file=sys.stderr)
    sys.exit(1)

try:
    import intervaltree
except ModuleNotFoundError as e:
    print("fpgaregs requires intervaltree: `pip install intervaltree`", file=sys.stderr)
    sys.exit(1)

from fpgaregs.cli import main

sys.exit(main())
