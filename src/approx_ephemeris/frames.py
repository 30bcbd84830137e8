"""Orbital plane -> J2000 ecliptic -> J2000 equatorial (ICRF) rotations.

The ecliptic rotation is the 3-1-3 sequence Rz(Omega) Rx(I) Rz(omega) taking
the perifocal frame (x toward periapsis, z along the orbit normal) into the
ecliptic frame. The equatorial rotation is a single Rx(obliquity).

The y_ecl row differs in sign from the expression printed in some C ports of
the JPL note; that expression is not orthogonal and does not preserve |r|.
"""

from __future__ import annotations

import math
from typing import NamedTuple

import numpy as np

from approx_ephemeris.constants import OBLIQUITY_J2000_DEG
from approx_ephemeris.elements import PropagatedElements


class Position(NamedTuple):
    """Cartesian position in AU."""

    x: float
    y: float
    z: float

    def norm(self) -> float:
        """Distance from the origin (AU)."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)


def rotation_x(angle_deg: float) -> np.ndarray:
    """Matrix rotating a vector by angle_deg about the x axis."""
    c = math.cos(math.radians(angle_deg))
    s = math.sin(math.radians(angle_deg))
    return np.array(
        [
            [1.0, 0.0, 0.0],
            [0.0, c, -s],
            [0.0, s, c],
        ]
    )


def rotation_z(angle_deg: float) -> np.ndarray:
    """Matrix rotating a vector by angle_deg about the z axis."""
    c = math.cos(math.radians(angle_deg))
    s = math.sin(math.radians(angle_deg))
    return np.array(
        [
            [c, -s, 0.0],
            [s, c, 0.0],
            [0.0, 0.0, 1.0],
        ]
    )


def ecliptic_rotation_matrix(
    argument_of_periapsis_deg: float,
    inclination_deg: float,
    node_deg: float,
) -> np.ndarray:
    """Perifocal -> J2000 ecliptic matrix, Rz(Omega) Rx(I) Rz(omega).

    Acting on (x, y, 0) this gives
        x_ecl = (cw cO - sw sO cI) x + (-sw cO - cw sO cI) y
        y_ecl = (cw sO + sw cO cI) x + (-sw sO + cw cO cI) y
        z_ecl = (sw sI) x + (cw sI) y
    """
    return (
        rotation_z(node_deg)
        @ rotation_x(inclination_deg)
        @ rotation_z(argument_of_periapsis_deg)
    )


def equatorial_rotation_matrix(obliquity_deg: float = OBLIQUITY_J2000_DEG) -> np.ndarray:
    """J2000 ecliptic -> J2000 equatorial (ICRF) matrix, Rx(obliquity)."""
    return rotation_x(obliquity_deg)


def orbital_plane_position(a: float, e: float, eccentric_anomaly_rad: float) -> tuple[float, float]:
    """Position in the orbital plane, x toward periapsis (AU).

    Parameters:
        a: Semi-major axis (AU).
        e: Eccentricity (not validated; NaN results for e > 1).
        eccentric_anomaly_rad: Eccentric anomaly (radians).

    Returns:
        (x, y) in AU.
    """
    sqrt_term = math.sqrt(1.0 - e * e) if e * e <= 1.0 else math.nan
    x = a * (math.cos(eccentric_anomaly_rad) - e)
    y = a * sqrt_term * math.sin(eccentric_anomaly_rad)
    return (x, y)


def _apply(matrix: np.ndarray, vector: tuple[float, float, float]) -> Position:
    out = matrix @ np.array(vector, dtype=np.float64)
    return Position(float(out[0]), float(out[1]), float(out[2]))


def orbital_to_ecliptic(xy: tuple[float, float], propagated: PropagatedElements) -> Position:
    """Rotate an orbital-plane position into the J2000 ecliptic frame."""
    matrix = ecliptic_rotation_matrix(
        propagated.argument_of_periapsis,
        propagated.I,
        propagated.Omega,
    )
    return _apply(matrix, (xy[0], xy[1], 0.0))


def ecliptic_to_equatorial(
    position: tuple[float, float, float],
    obliquity_deg: float = OBLIQUITY_J2000_DEG,
) -> Position:
    """Rotate a J2000 ecliptic position into the J2000 equatorial (ICRF) frame."""
    return _apply(equatorial_rotation_matrix(obliquity_deg), (position[0], position[1], position[2]))
