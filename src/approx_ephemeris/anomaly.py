"""Mean, eccentric and true anomaly, and orbital longitude."""

from __future__ import annotations

import math

from approx_ephemeris.angle_utils import normalize_radians, reduce_degrees
from approx_ephemeris.config import SolverConfig
from approx_ephemeris.elements import OrbitalElements, PropagatedElements, propagate_elements
from approx_ephemeris.kepler import solve_kepler


def mean_anomaly_deg(
    elements: OrbitalElements,
    T: float,
    propagated: PropagatedElements | None = None,
) -> float:
    """Mean anomaly at T centuries past J2000, reduced to [-180, 180) degrees.

    Includes the b T^2 + c cos(f T) + s sin(f T) correction, with f T in degrees.
    """
    p = propagated or propagate_elements(elements, T)
    ft = math.radians(elements.f * T)
    mean_anomaly = (
        p.L
        - p.lon_periapsis
        + elements.b * T * T
        + elements.c * math.cos(ft)
        + elements.s * math.sin(ft)
    )
    return reduce_degrees(mean_anomaly)


def eccentric_anomaly(
    elements: OrbitalElements,
    T: float,
    config: SolverConfig | None = None,
    propagated: PropagatedElements | None = None,
) -> float:
    """Eccentric anomaly (radians, (-pi, pi]) at T centuries past J2000."""
    p = propagated or propagate_elements(elements, T)
    mean_anomaly = math.radians(mean_anomaly_deg(elements, T, p))
    return solve_kepler(mean_anomaly, p.e, config)


def true_anomaly_from_eccentric(eccentric_anomaly_rad: float, e: float) -> float:
    """True anomaly (radians, (-pi, pi]) from eccentric anomaly.

    For e >= 1 the square root is undefined and NaN propagates.
    """
    sqrt_term = math.sqrt(1.0 - e * e) if e * e <= 1.0 else math.nan
    nu = math.atan2(
        sqrt_term * math.sin(eccentric_anomaly_rad),
        math.cos(eccentric_anomaly_rad) - e,
    )
    return normalize_radians(nu)


def longitude_from_true_anomaly(true_anomaly_rad: float, lon_periapsis_deg: float) -> float:
    """Orbital longitude lambda = varpi + nu, in (-pi, pi]."""
    return normalize_radians(math.radians(lon_periapsis_deg) + true_anomaly_rad)
