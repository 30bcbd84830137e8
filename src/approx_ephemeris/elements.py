"""Keplerian element records and their secular propagation to a given epoch."""

from __future__ import annotations

from dataclasses import dataclass

from approx_ephemeris.constants import DAYS_PER_CENTURY


@dataclass(frozen=True)
class OrbitalElements:
    """Osculating elements at J2000 and their linear rates per Julian century.

    Angles are in degrees, the semi-major axis in AU. The b, c, s, f terms are
    the extra mean-anomaly corrections JPL provides for Jupiter through Neptune
    on the long-range table; they are zero everywhere else.
    """

    a: float
    e: float
    I: float  # noqa: E741
    L: float
    lon_periapsis: float
    Omega: float

    adot: float = 0.0
    edot: float = 0.0
    Idot: float = 0.0
    Ldot: float = 0.0
    lon_periapsis_dot: float = 0.0
    Omega_dot: float = 0.0

    b: float = 0.0
    c: float = 0.0
    s: float = 0.0
    f: float = 0.0

    name: str = ''

    @property
    def has_periodic_terms(self) -> bool:
        """True if any of the b, c, s, f corrections is non-zero."""
        return any((self.b, self.c, self.s, self.f))


@dataclass(frozen=True)
class PropagatedElements:
    """Instantaneous elements at T centuries past J2000 (degrees, AU)."""

    T: float
    a: float
    e: float
    I: float  # noqa: E741
    L: float
    lon_periapsis: float
    Omega: float

    @property
    def argument_of_periapsis(self) -> float:
        """omega = longitude of periapsis - longitude of ascending node (degrees)."""
        return self.lon_periapsis - self.Omega


def centuries_since_j2000(days_since_j2000: float) -> float:
    """Convert days past J2000 to Julian centuries past J2000."""
    return days_since_j2000 / DAYS_PER_CENTURY


def propagate_elements(elements: OrbitalElements, T: float) -> PropagatedElements:
    """Apply the secular rates to obtain elements at T centuries past J2000.

    Parameters:
        elements: Element record at J2000.
        T: Julian centuries past J2000 (negative for the past).

    Returns:
        New PropagatedElements; the input record is left untouched.
    """
    return PropagatedElements(
        T=T,
        a=elements.a + elements.adot * T,
        e=elements.e + elements.edot * T,
        I=elements.I + elements.Idot * T,
        L=elements.L + elements.Ldot * T,
        lon_periapsis=elements.lon_periapsis + elements.lon_periapsis_dot * T,
        Omega=elements.Omega + elements.Omega_dot * T,
    )
