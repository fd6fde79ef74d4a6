#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: duvlab/shared/sanitizer.py

"""
Input handling for chromaticity values.

Rules (summary):

- Chunks (one command line or one stdin line):
  - Strip surrounding whitespace.
  - Every ',' becomes '.', so "0,4525" and "0.4525" read the same.
  - Split on runs of whitespace (spaces, tabs from spreadsheet pastes).
  - A missing chunk (None) is simply empty.

- Tokens:
  - Optional sign, digits, optional single '.' and digits. Nothing else:
    no exponents, no grouping separators, no 'nan'/'inf' words.
  - A token that fails is reported and dropped; it never aborts the chunk.

- Scale:
  - A value whose magnitude is above 1 is taken as x10^4 and divided by
    10000 ("4525" -> 0.4525). Exactly 1 is kept. Each value is checked
    on its own.
"""

import re
from typing import List, NamedTuple, Optional, Tuple

from duvlab.core import config as c


# Regex: optional sign, then "12", "12.", "12.34" or ".34"
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)")


class ParsedToken(NamedTuple):
    token: str
    value: Optional[float] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def tokenize(chunk: Optional[str]) -> List[str]:
    """Split a raw chunk into numeric tokens, commas already turned into dots."""
    if chunk is None:
        return []
    s = str(chunk).strip().replace(",", ".")
    return [t for t in re.split(r"\s+", s) if t]


def parse_number(token: str) -> float:
    """Parse a dot-separated decimal. Raises ValueError on anything else."""
    if not _DECIMAL_RE.fullmatch(token):
        raise ValueError(f"invalid numeric value: '{_sanitize_for_log(token)}'")
    return float(token)


def normalize_scale(value: float) -> float:
    if abs(value) > c.SCALE_THRESHOLD:
        return value / c.SCALE_DIVISOR
    return value


def parse_token(token: str) -> ParsedToken:
    try:
        value = parse_number(token)
    except ValueError as e:
        return ParsedToken(token, error=str(e))
    return ParsedToken(token, value=normalize_scale(value))


def parse_chunk(chunk: Optional[str]) -> Tuple[List[float], List[str]]:
    """
    Parse every token of a chunk.

    Returns the normalized values in input order and the error messages of
    the tokens that were dropped.
    """
    outcomes = [parse_token(t) for t in tokenize(chunk)]
    values = [o.value for o in outcomes if o.ok]
    errors = [o.error for o in outcomes if not o.ok]
    return values, errors
