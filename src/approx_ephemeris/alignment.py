"""Heliocentric longitude separations: oppositions and conjunctions.

Two bodies are "aligned" when their heliocentric longitudes coincide and
"opposite" when they differ by 180 degrees. Seen from Earth, an aligned outer
planet is at opposition and an opposite one at solar conjunction; an aligned
inner planet is at inferior conjunction and an opposite one at superior
conjunction.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from scipy.optimize import brentq

from approx_ephemeris.angle_utils import normalize_radians
from approx_ephemeris.config import SolverConfig
from approx_ephemeris.constants import (
    DEFAULT_ALIGNMENT_TOLERANCE_DEG,
    DEFAULT_SEARCH_STEP_DAYS,
)
from approx_ephemeris.orbits import longitude_at_date
from approx_ephemeris.planets.base import ElementSource

logger = logging.getLogger(__name__)

ALIGNED = 'aligned'
OPPOSITE = 'opposite'

# Root refinement tolerance (days).
REFINE_TOLERANCE_DAYS = 1.0e-6


@dataclass(frozen=True)
class Alignment:
    """One alignment event between two bodies."""

    days_since_j2000: float
    kind: str
    separation: float  # body1 - body2 longitude at the event (radians)


def longitude_separation(
    source: ElementSource,
    body1: str,
    body2: str,
    days_since_j2000: float,
    config: SolverConfig | None = None,
) -> float:
    """Longitude of body1 minus longitude of body2, normalized to (-pi, pi]."""
    lon1 = longitude_at_date(source.elements(body1), days_since_j2000, config)
    lon2 = longitude_at_date(source.elements(body2), days_since_j2000, config)
    return normalize_radians(lon1 - lon2)


def is_opposition(separation: float, tolerance_deg: float = DEFAULT_ALIGNMENT_TOLERANCE_DEG) -> bool:
    """True if the separation is within tolerance of zero (Earth vs outer planet)."""
    return abs(normalize_radians(separation)) < math.radians(tolerance_deg)


def is_conjunction(separation: float, tolerance_deg: float = DEFAULT_ALIGNMENT_TOLERANCE_DEG) -> bool:
    """True if the separation is within tolerance of 180 degrees (Earth vs outer planet)."""
    return abs(abs(normalize_radians(separation)) - math.pi) < math.radians(tolerance_deg)


def find_alignments(
    source: ElementSource,
    body1: str,
    body2: str,
    start_days: float,
    stop_days: float,
    step_days: float = DEFAULT_SEARCH_STEP_DAYS,
    config: SolverConfig | None = None,
) -> list[Alignment]:
    """Find the times the two longitudes coincide or differ by 180 degrees.

    The separation is sampled every step_days and each sign change is refined
    with scipy's Brent root finder. The step must be short enough that the
    separation moves by less than 180 degrees per step.

    Parameters:
        source: Element source for both bodies.
        body1, body2: Body specifiers (e.g. 'earth', 'mars').
        start_days, stop_days: Search window (days since J2000).
        step_days: Sampling step (days).
        config: Kepler solver settings.

    Returns:
        Alignment events in time order.

    Raises:
        ValueError: If step_days is not positive or stop_days < start_days.
    """
    if step_days <= 0.0:
        raise ValueError(f'step_days must be positive, got {step_days}')
    if stop_days < start_days:
        raise ValueError('Stop time is before start time')

    def separation(t: float) -> float:
        return longitude_separation(source, body1, body2, t, config)

    def anti_separation(t: float) -> float:
        return normalize_radians(separation(t) - math.pi)

    events: list[Alignment] = []
    t0 = start_days
    s0 = separation(t0)
    while t0 < stop_days:
        t1 = min(t0 + step_days, stop_days)
        s1 = separation(t1)
        if (s0 < 0.0) != (s1 < 0.0):
            if abs(s1 - s0) < math.pi:
                t = float(brentq(separation, t0, t1, xtol=REFINE_TOLERANCE_DAYS))
                events.append(Alignment(t, ALIGNED, separation(t)))
            else:
                t = float(brentq(anti_separation, t0, t1, xtol=REFINE_TOLERANCE_DAYS))
                events.append(Alignment(t, OPPOSITE, separation(t)))
        t0, s0 = t1, s1
    logger.info(
        'Found %d alignment(s) of %s and %s in %.1f days',
        len(events),
        body1,
        body2,
        stop_days - start_days,
    )
    return events
