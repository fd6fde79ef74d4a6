#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: duvlab/main.py

import argparse
import sys
from typing import List, Tuple

from duvlab import __version__
from duvlab.core import config as c
from duvlab.logic.duv import engine
from duvlab.shared.logger import DuvlabArgumentParser

EPILOG = """\
examples:
  duvlab 0,4525 0,4037
      -0.0019
  duvlab 4525 4037             (values above 1 are divided by 10000)
      -0.0019
  duvlab                       (read pairs from standard input)
  4356\t4118
  4377\t4101
      0.0033
      0.0023
"""


def get_duv_parser() -> argparse.ArgumentParser:
    """Create argument parser for the duv command."""
    parser = DuvlabArgumentParser(
        prog="duvlab",
        description=(
            "duvlab: calculate Duv (distance from the Planckian locus) "
            "for CIE 1931 x y chromaticity pairs"
        ),
        epilog=EPILOG,
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )

    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"duvlab {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "values",
        nargs="*",
        metavar="VALUE",
        help=(
            "x y pairs, comma or dot decimal separator;\n"
            "read from standard input when omitted"
        ),
    )
    return parser


def split_argv(argv: List[str]) -> Tuple[List[str], List[str]]:
    """
    Separate parser flags from data. Anything that is not a known flag is
    a value, including negative numbers such as '-0,5'.
    """
    flags = [a for a in argv if a in c.FLAG_ARGS]
    values = [a for a in argv if a not in c.FLAG_ARGS]
    return flags, values


def main(argv: List[str] = None) -> None:
    """Main entry point for duvlab CLI"""
    if argv is None:
        argv = sys.argv[1:]

    flags, values = split_argv(argv)
    parser = get_duv_parser()
    parser.parse_args(flags)

    try:
        engine.run(values)
    except KeyboardInterrupt:
        sys.exit(130)
    sys.exit(0)


if __name__ == "__main__":
    main()
