#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: duvlab/core/duv.py

"""
Duv: signed distance of a chromaticity from the Planckian locus in CIE 1960 uv.

The locus is approximated by a 6th-degree polynomial in the angle between
the point and a fixed reference point (0.292, 0.24) near the locus. The
result is the distance to the reference point minus the polynomial's
prediction of the locus distance at that angle; positive values lie above
the locus (greenish), negative values below it (pinkish).
"""

import numpy as np

from duvlab.core import config as c
from duvlab.core.conversions import xy_to_uv


def calc_duv_array(x, y) -> np.ndarray:
    """Element-wise Duv for arrays of x and y. Degenerate points give nan/inf."""
    u, v = xy_to_uv(x, y)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        du = u - c.LOCUS_REF_U
        dv = v - c.LOCUS_REF_V
        lfp = np.sqrt(du ** 2 + dv ** 2)
        a = np.arccos(du / lfp)
        lbb = np.polyval(c.LOCUS_COEFFS, a)
        return lfp - lbb


def calc_duv(x: float, y: float) -> float:
    """Duv for a single (x, y) pair."""
    return float(calc_duv_array(x, y))
