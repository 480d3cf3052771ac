"""
Copyright (c) 2019 Ash Wilding. All rights reserved.

SPDX-License-Identifier: MIT
"""

"""
Split header and config lines into tokens.
"""
from . import tokenizer

"""
Read register names and 32-bit addresses from #define lines in a C header.
"""
from . import header

"""
Read the optional list of registers to output and their output names.
"""
from . import config

"""
Generate shell assignments sorted by register name.
"""
from . import output

"""
Parse the command line and run the conversion.
"""
from . import cli
