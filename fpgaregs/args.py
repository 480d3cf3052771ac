"""
Copyright (c) 2019 Ash Wilding. All rights reserved.

SPDX-License-Identifier: MIT

Parse command-line arguments. Any switch other than -config and -v is fatal.
"""

# Standard Python deps
import argparse
import re
import sys
from dataclasses import dataclass
from typing import List, Optional, Tuple

# Internal deps
from . import log


DEFAULT_HEADER = "fpga_reg.h"
CONFIG = "-config"

_verbose_flag = re.compile(r"-v+")


@dataclass
class Args:
    header: str             # input header file
    config: str             # config file, "" for none
    verbosity: int          # 0 quiet, 1 verbose, 2 debug


def _invalid( token:str ) -> None:
    log.error(f"invalid argument {token}")
    sys.exit(1)


class _Parser(argparse.ArgumentParser):
    def error( self, message:str ) -> None:
        """
        Report argparse failures in the same terms as an unknown switch.
        """
        x = re.match(r"argument ([^:/]+)", message)
        _invalid(x.group(1) if x else message)


_parser = _Parser(
    prog="fpgaregs",
    description="Convert #define register addresses into shell assignments.",
    add_help=False,
    allow_abbrev=False,
)

_parser.add_argument(
    "header",
    metavar="SRC",
    help=f"input header file (default: {DEFAULT_HEADER})",
    type=str,
    nargs="*",
)

_parser.add_argument(
    CONFIG,
    metavar="CFG",
    help="config file listing the registers to output and their names",
    type=str,
    default="",
)

_parser.add_argument(
    "-v",
    help="-v for verbose, -vv for debug",
    action="count",
    default=0,
)


def _take_config( argv:List[str] ) -> Tuple[List[str], Optional[str]]:
    """
    Walk argv in order, pulling out `-config <path>` pairs and rejecting
    every other switch except -v, -vv, ...

    The token after -config is its value even if it starts with '-'. argparse
    would prefix-match, split on '=' and swallow '--', so it only ever sees
    header names and -v flags.

    args
    ====

        argv
                    command-line arguments without the program name
    """
    rest = []
    config = None
    i = 0
    while i < len(argv):
        token = argv[i]
        if token == CONFIG and i + 1 < len(argv):
            config = argv[i+1]
            i += 2
            continue
        if token.startswith("-") and not _verbose_flag.fullmatch(token):
            _invalid(token)
        rest.append(token)
        i += 1
    return rest, config


def parse( argv:Optional[List[str]]=None ) -> Args:
    """
    Parse the command line; argv defaults to sys.argv[1:].
    """
    rest, config = _take_config(sys.argv[1:] if argv is None else list(argv))

    namespace = argparse.Namespace()
    if config is not None:
        namespace.config = config
    _args = _parser.parse_intermixed_args(rest, namespace)

    """
    The last input file named wins.
    """
    headers = _args.header or []
    return Args(
        header=headers[-1] if headers else DEFAULT_HEADER,
        config=_args.config,
        verbosity=_args.v,
    )
