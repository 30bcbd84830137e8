"""Per-date planet geometry from JPL approximate Keplerian elements.

Every function here is a pure function of (elements, days since J2000): the
element record is propagated to the requested date, Kepler's equation is
solved, and the result is derived from that solution. Nothing is cached.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from approx_ephemeris.anomaly import (
    eccentric_anomaly,
    longitude_from_true_anomaly,
    mean_anomaly_deg,
    true_anomaly_from_eccentric,
)
from approx_ephemeris.config import SolverConfig
from approx_ephemeris.elements import (
    OrbitalElements,
    PropagatedElements,
    centuries_since_j2000,
    propagate_elements,
)
from approx_ephemeris.frames import (
    Position,
    ecliptic_to_equatorial,
    orbital_plane_position,
    orbital_to_ecliptic,
)


def _propagate(elements: OrbitalElements, days_since_j2000: float) -> PropagatedElements:
    return propagate_elements(elements, centuries_since_j2000(days_since_j2000))


def eccentric_anomaly_at_date(
    elements: OrbitalElements,
    days_since_j2000: float,
    config: SolverConfig | None = None,
) -> float:
    """Eccentric anomaly (radians, (-pi, pi]) at days_since_j2000."""
    p = _propagate(elements, days_since_j2000)
    return eccentric_anomaly(elements, p.T, config, p)


def true_anomaly_at_date(
    elements: OrbitalElements,
    days_since_j2000: float,
    config: SolverConfig | None = None,
) -> float:
    """True anomaly (radians, (-pi, pi]) at days_since_j2000."""
    p = _propagate(elements, days_since_j2000)
    ecc = eccentric_anomaly(elements, p.T, config, p)
    return true_anomaly_from_eccentric(ecc, p.e)


def longitude_at_date(
    elements: OrbitalElements,
    days_since_j2000: float,
    config: SolverConfig | None = None,
) -> float:
    """Heliocentric orbital longitude (radians, (-pi, pi]) at days_since_j2000.

    This is varpi + nu: measured along the orbit from the J2000 equinox, not
    projected onto the ecliptic.
    """
    p = _propagate(elements, days_since_j2000)
    ecc = eccentric_anomaly(elements, p.T, config, p)
    nu = true_anomaly_from_eccentric(ecc, p.e)
    return longitude_from_true_anomaly(nu, p.lon_periapsis)


def orbital_plane_position_at_date(
    elements: OrbitalElements,
    days_since_j2000: float,
    config: SolverConfig | None = None,
) -> tuple[float, float]:
    """Position (AU) in the orbital plane, x toward periapsis."""
    p = _propagate(elements, days_since_j2000)
    ecc = eccentric_anomaly(elements, p.T, config, p)
    return orbital_plane_position(p.a, p.e, ecc)


def position_ecliptic(
    elements: OrbitalElements,
    days_since_j2000: float,
    config: SolverConfig | None = None,
) -> Position:
    """Heliocentric position (AU) in the J2000 ecliptic frame."""
    p = _propagate(elements, days_since_j2000)
    ecc = eccentric_anomaly(elements, p.T, config, p)
    return orbital_to_ecliptic(orbital_plane_position(p.a, p.e, ecc), p)


def position_equatorial(
    elements: OrbitalElements,
    days_since_j2000: float,
    config: SolverConfig | None = None,
) -> Position:
    """Heliocentric position (AU) in the J2000 equatorial (ICRF) frame."""
    return ecliptic_to_equatorial(position_ecliptic(elements, days_since_j2000, config))


@dataclass(frozen=True)
class BodyState:
    """Everything derived for one body at one date (angles in radians, AU)."""

    days_since_j2000: float
    mean_anomaly: float
    eccentric_anomaly: float
    true_anomaly: float
    longitude: float
    ecliptic: Position
    equatorial: Position

    @property
    def distance(self) -> float:
        """Heliocentric distance (AU)."""
        return self.ecliptic.norm()

    @property
    def ecliptic_latitude(self) -> float:
        """Heliocentric ecliptic latitude (radians)."""
        r = self.distance
        if r == 0.0:
            return 0.0
        return math.asin(max(-1.0, min(1.0, self.ecliptic.z / r)))


def heliocentric_state(
    elements: OrbitalElements,
    days_since_j2000: float,
    config: SolverConfig | None = None,
) -> BodyState:
    """Compute anomalies, longitude and both Cartesian positions from one propagation."""
    p = _propagate(elements, days_since_j2000)
    mean_anomaly = math.radians(mean_anomaly_deg(elements, p.T, p))
    ecc = eccentric_anomaly(elements, p.T, config, p)
    nu = true_anomaly_from_eccentric(ecc, p.e)
    ecliptic = orbital_to_ecliptic(orbital_plane_position(p.a, p.e, ecc), p)
    return BodyState(
        days_since_j2000=days_since_j2000,
        mean_anomaly=mean_anomaly,
        eccentric_anomaly=ecc,
        true_anomaly=nu,
        longitude=longitude_from_true_anomaly(nu, p.lon_periapsis),
        ecliptic=ecliptic,
        equatorial=ecliptic_to_equatorial(ecliptic),
    )
