"""Angle reduction and formatting helpers."""

from __future__ import annotations

import math

from approx_ephemeris.constants import DEGREES_PER_CIRCLE, HALF_CIRCLE_DEGREES, TWOPI


def normalize_radians(angle: float) -> float:
    """Reduce an angle to the half-open interval (-pi, pi].

    Parameters:
        angle: Angle in radians (any finite value; NaN passes through).

    Returns:
        Equivalent angle in (-pi, pi].
    """
    reduced = math.pi - (math.pi - angle) % TWOPI
    # Float modulo may return the divisor itself for tiny negative inputs.
    if reduced <= -math.pi:
        reduced += TWOPI
    return reduced


def reduce_degrees(angle_deg: float) -> float:
    """Reduce an angle in degrees to [-180, 180) using a floored modulo."""
    return (angle_deg + HALF_CIRCLE_DEGREES) % DEGREES_PER_CIRCLE - HALF_CIRCLE_DEGREES


def dms_string(
    value: float,
    separator: str,
    ndecimal: int = 3,
) -> str:
    """Format angle as degrees, minutes, seconds.

    Parameters:
        value: Angle in degrees.
        separator: 3-character string for separators (e.g. 'dms' or ':: ').
        ndecimal: 3 or 4 decimal places for seconds.

    Returns:
        Formatted string (e.g. " 12d 30m 45.123s").
    """
    if len(separator) < 3:
        sep1 = sep2 = sep3 = ' '
    else:
        sep1, sep2, sep3 = separator[0], separator[1], separator[2]
    isign = 1 if value >= 0 else -1
    secs = abs(value * 3600.0)
    ntens = 10**ndecimal
    ims = round(secs * ntens)
    isec = ims // ntens
    ims = ims - ntens * isec
    imin = isec // 60
    isec = isec - 60 * imin
    ideg = imin // 60
    imin = imin - 60 * ideg
    ideg = ideg * isign
    if ndecimal == 3:
        frac = f'{ims:03d}'
    else:
        frac = f'{ims:04d}'
    out = f'{ideg:4d}{sep1} {imin:02d}{sep2} {isec:02d}.{frac}{sep3}'
    if isign < 0 and ideg == 0:
        out = out[0:2] + '-' + out[3:]
    return out
