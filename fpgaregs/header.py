"""
Copyright (c) 2019 Ash Wilding. All rights reserved.

SPDX-License-Identifier: MIT

Read `#define NAME VALUE` register addresses from a C header into a symbol
table mapping register name to 32-bit address.
"""

# Standard Python deps
import re
import sys
from typing import Dict

# Internal deps
from . import log
from .tokenizer import tokenize, significant


DEFINE = "#define"

U64_MAX = (1 << 64) - 1
U32_MASK = 0xFFFFFFFF

# bytes pass through unchanged and names sort in byte order
ENCODING = "latin-1"

_literal = re.compile(r"[ \t\r\n\v\f]*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")


def parse_literal( text:str ) -> int:
    """
    Convert a C integer constant to an unsigned 64-bit value.

    The base follows the prefix (0x hexadecimal, 0 octal, otherwise decimal)
    and the longest valid prefix of the text is converted, so suffixes such as
    UL are ignored. Text with no leading digits converts to 0. Negative values
    wrap modulo 2**64 and out of range values saturate at 2**64-1.
    """
    x = _literal.match(text)
    if x is None:
        return 0
    sign, digits = x.group(1), x.group(2)

    if digits[:2] in ("0x", "0X"):
        value = int(digits[2:], 16)
    elif digits.startswith("0"):
        value = int(digits, 8)
    else:
        value = int(digits, 10)

    if value > U64_MAX:
        return U64_MAX
    if sign == "-":
        value = -value & U64_MAX
    return value


def read_header( fn:str ) -> Dict[str, int]:
    """
    Build the symbol table from a header file.
    Exits with status 1 if the file cannot be opened.

    args
    ====

        fn
                    path to the header file
    """
    symbols = {}
    try:
        with open(fn, "r", encoding=ENCODING, newline="\n") as header_file:

            """
            Loop through each line in the header file.
            """
            for lineno,line in enumerate(header_file, 1):
                line = significant(line)
                if line is None:
                    continue

                """
                Only lines of exactly `#define NAME VALUE` are of interest.
                """
                token = tokenize(line)
                if len(token) != 3 or token[0] != DEFINE:
                    log.debug(f"{fn}:{lineno}: ignored {line.rstrip()}")
                    continue
                (_, name, literal) = token

                """
                Registers must fit in 32 bits.
                """
                addr = parse_literal(literal)
                if addr >> 32:
                    log.debug(f"{fn}:{lineno}: dropped {name}, {hex(addr)} exceeds 32 bits")
                    continue

                symbols[name] = addr & U32_MASK
                log.debug(f"{fn}:{lineno}: {name}={hex(symbols[name])}")

    except OSError:
        log.error(f"fpgaregs: can't open '{fn}'")
        sys.exit(1)

    log.verbose(f"read {len(symbols)} registers from {fn}")
    return symbols
