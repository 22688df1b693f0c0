"""Spherical geometry utility functions, pure Python with no external deps."""

from __future__ import annotations

import math

DEGREE_TO_RAD = math.pi / 180.0


def angular_distance(ra1_deg: float, dec1_deg: float, ra2_deg: float, dec2_deg: float) -> float:
    """Great-circle separation between two sky positions, in degrees.

    Uses the spherical law of cosines. Inputs are decimal degrees and are not
    range-checked; only their sines and cosines are used.
    """
    ra1 = ra1_deg * DEGREE_TO_RAD
    dec1 = dec1_deg * DEGREE_TO_RAD
    ra2 = ra2_deg * DEGREE_TO_RAD
    dec2 = dec2_deg * DEGREE_TO_RAD

    cos_angle = math.sin(dec1) * math.sin(dec2) + math.cos(dec1) * math.cos(dec2) * math.cos(ra1 - ra2)

    # Rounding can leave cos_angle just outside [-1, 1]
    if cos_angle > 1.0:
        cos_angle = 1.0
    elif cos_angle < -1.0:
        cos_angle = -1.0

    return math.acos(cos_angle) / DEGREE_TO_RAD
