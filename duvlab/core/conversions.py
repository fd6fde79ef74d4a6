#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: duvlab/core/conversions.py

from typing import Tuple

import numpy as np

from duvlab.core import config as c


def xy_to_uv(x, y) -> Tuple[np.ndarray, np.ndarray]:
    """
    Convert CIE 1931 (x, y) to CIE 1960 UCS (u, v).

    Accepts scalars or arrays. A zero denominator yields inf/nan
    instead of raising.
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)

    with np.errstate(divide="ignore", invalid="ignore"):
        denom = c.UCS_DENOM_X * x + c.UCS_DENOM_Y * y + c.UCS_DENOM_CONST
        u = (c.UCS_U_NUM * x) / denom
        v = (c.UCS_V_NUM * y) / denom
    return u, v
