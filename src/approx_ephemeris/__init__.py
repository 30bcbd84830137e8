"""Heliocentric planet positions from JPL approximate Keplerian elements.

The package propagates J2000 orbital elements with their secular rates,
solves Kepler's equation, and reports orbital longitude plus Cartesian
positions in the J2000 ecliptic and equatorial (ICRF) frames. Element tables
for 1800-2050 and 3000 BC-3000 AD are included; see
https://ssd.jpl.nasa.gov/planets/approx_pos.html.
"""

from approx_ephemeris.config import DEFAULT_SOLVER_CONFIG, SolverConfig
from approx_ephemeris.elements import OrbitalElements, PropagatedElements, propagate_elements
from approx_ephemeris.frames import Position
from approx_ephemeris.kepler import kepler_residual, solve_kepler
from approx_ephemeris.orbits import (
    BodyState,
    eccentric_anomaly_at_date,
    heliocentric_state,
    longitude_at_date,
    position_ecliptic,
    position_equatorial,
    true_anomaly_at_date,
)
from approx_ephemeris.planets import LONG_RANGE, SHORT_RANGE, ElementSource, get_element_table

__all__: list[str] = [
    'DEFAULT_SOLVER_CONFIG',
    'LONG_RANGE',
    'SHORT_RANGE',
    'BodyState',
    'ElementSource',
    'OrbitalElements',
    'Position',
    'PropagatedElements',
    'SolverConfig',
    'eccentric_anomaly_at_date',
    'get_element_table',
    'heliocentric_state',
    'kepler_residual',
    'longitude_at_date',
    'position_ecliptic',
    'position_equatorial',
    'propagate_elements',
    'solve_kepler',
    'true_anomaly_at_date',
]
