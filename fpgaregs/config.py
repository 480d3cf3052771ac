"""
Copyright (c) 2019 Ash Wilding. All rights reserved.

SPDX-License-Identifier: MIT

Read the optional config file listing which registers to emit and what to
call them. Each line is NAME, NAME ALIAS or NAME=ALIAS.
"""

# Standard Python deps
import sys
from typing import Dict, Optional

# Internal deps
from . import log
from .header import ENCODING
from .tokenizer import tokenize, significant


def read_config( fn:Optional[str] ) -> Optional[Dict[str, str]]:
    """
    Build the translation table mapping register name to output name.

    Returns None when no config file is given, meaning every register is
    emitted under its own name. Exits with status 1 if the file cannot be
    opened.

    args
    ====

        fn
                    path to the config file, or None/"" for no config
    """
    if not fn:
        return None

    translate = {}
    try:
        with open(fn, "r", encoding=ENCODING, newline="\n") as config_file:
            for lineno,line in enumerate(config_file, 1):
                line = significant(line.replace("=", " ", 1))
                if line is None:
                    continue

                token = tokenize(line)
                if not token:
                    continue

                # extra tokens past the alias are ignored
                translate[token[0]] = token[1] if len(token) > 1 else token[0]
                log.debug(f"{fn}:{lineno}: {token[0]} -> {translate[token[0]]}")

    except OSError:
        log.error(f"fpgaregs: can't open '{fn}'")
        sys.exit(1)

    log.verbose(f"read {len(translate)} translations from {fn}")
    return translate
