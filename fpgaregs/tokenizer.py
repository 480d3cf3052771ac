"""
Copyright (c) 2019 Ash Wilding. All rights reserved.

SPDX-License-Identifier: MIT

Lexical rules shared by the header and config file readers.
"""

# Standard Python deps
from typing import List, Optional


_WHITESPACE = " \t\r\n\v\f"
_QUOTE = '"'


def tokenize( line:str ) -> List[str]:
    """
    Split a line into whitespace-delimited tokens.

    A double-quoted span at the start of a token is a single token with the
    quotes stripped, so names and values may contain spaces. An unterminated
    quote runs to the end of the line.

    args
    ====

        line
                    raw line of text, with or without its line terminator
    """
    tokens = []
    i = 0
    n = len(line)
    while True:
        while i < n and line[i] in _WHITESPACE:
            i += 1
        if i >= n:
            return tokens

        if line[i] == _QUOTE:
            end = line.find(_QUOTE, i + 1)
            if end < 0:
                tokens.append(line[i+1:].rstrip("\r\n"))
                return tokens
            tokens.append(line[i+1:end])
            i = end + 1
        else:
            start = i
            while i < n and not line[i] in _WHITESPACE:
                i += 1
            tokens.append(line[start:i])


def significant( line:str ) -> Optional[str]:
    """
    Strip leading spaces and tabs from a line.
    Return None if what remains is blank or a // comment.
    """
    line = line.lstrip(" \t")
    if line == "" or line[0] in "\r\n":
        return None
    if line.startswith("//"):
        return None
    return line
