#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: duvlab/shared/formatting.py

import math
from decimal import Context, Decimal, ROUND_HALF_UP

from duvlab.core import config as c

_QUANTUM = Decimal(1).scaleb(-c.DUV_PRECISION)
# Wide enough for every finite double at the target precision
_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)


def format_duv(value: float) -> str:
    """
    Render a Duv value with a fixed number of decimals and '.' as separator.

    Rounds half-up on the shortest repr of the float, so 0.00015 gives
    0.0002 even though the nearest double lies slightly below it.
    """
    if math.isnan(value):
        return c.NAN_TEXT
    if math.isinf(value):
        return c.POS_INF_TEXT if value > 0 else c.NEG_INF_TEXT
    rounded = Decimal(repr(float(value))).quantize(_QUANTUM, context=_CONTEXT)
    return f"{rounded:f}"
