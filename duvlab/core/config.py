#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: duvlab/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# CIE 1931 xy -> CIE 1960 UCS uv (Source: CIE 15:2004)
UCS_U_NUM = 4.0                    # Numerator coefficient of x for u
UCS_V_NUM = 6.0                    # Numerator coefficient of y for v
UCS_DENOM_X = -2.0                 # x-coefficient of the shared denominator
UCS_DENOM_Y = 12.0                 # y-coefficient of the shared denominator
UCS_DENOM_CONST = 3.0              # Constant term of the shared denominator

# Planckian locus polynomial fit (Source: https://www.waveformlighting.com/tech/calculate-duv-from-cie-1931-xy-coordinates)
LOCUS_REF_U = 0.292                # u of the reference point the angle is measured from
LOCUS_REF_V = 0.24                 # v of the reference point the angle is measured from
LOCUS_K6 = -0.00616793             # a^6 coefficient
LOCUS_K5 = 0.0893944               # a^5 coefficient
LOCUS_K4 = -0.5179722              # a^4 coefficient
LOCUS_K3 = 1.5317403               # a^3 coefficient
LOCUS_K2 = -2.4243787              # a^2 coefficient
LOCUS_K1 = 1.925865                # a^1 coefficient
LOCUS_K0 = -0.471106               # Constant term

# Highest power first, the order np.polyval expects
LOCUS_COEFFS = (
    LOCUS_K6,
    LOCUS_K5,
    LOCUS_K4,
    LOCUS_K3,
    LOCUS_K2,
    LOCUS_K1,
    LOCUS_K0,
)

# ==========================================
# Input Handling & Output
# ==========================================

SCALE_THRESHOLD = 1.0              # Values with a magnitude above this are treated as scaled by 10^4
SCALE_DIVISOR = 10000.0            # Divisor applied to scaled input ("4525" -> 0.4525)
DUV_PRECISION = 4                  # Digits after the decimal point in printed results

# Spellings for non-finite results
NAN_TEXT = "NaN"
POS_INF_TEXT = "Infinity"
NEG_INF_TEXT = "-Infinity"

# Arguments consumed by the parser; everything else on the command line is data
FLAG_ARGS = ("-h", "--help", "-v", "--version")

# ==========================================
# CLI UI
# ==========================================

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
