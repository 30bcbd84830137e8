"""Matplotlib top-down orrery: planet positions and orbits in the J2000 ecliptic plane."""

from __future__ import annotations

import logging

import numpy as np

from approx_ephemeris.config import SolverConfig
from approx_ephemeris.elements import centuries_since_j2000, propagate_elements
from approx_ephemeris.frames import Position, ecliptic_rotation_matrix
from approx_ephemeris.orbits import position_ecliptic
from approx_ephemeris.planets import body_display_name
from approx_ephemeris.planets.base import ElementSource

logger = logging.getLogger(__name__)

ORBIT_SAMPLES = 361


def orbit_track(source: ElementSource, body: str, days_since_j2000: float) -> np.ndarray:
    """Osculating ellipse of body at the given date, shape (3, ORBIT_SAMPLES), ecliptic AU."""
    elements = source.elements(body)
    p = propagate_elements(elements, centuries_since_j2000(days_since_j2000))
    ecc_anomaly = np.linspace(-np.pi, np.pi, ORBIT_SAMPLES)
    xy = np.zeros((3, ORBIT_SAMPLES))
    xy[0] = p.a * (np.cos(ecc_anomaly) - p.e)
    xy[1] = p.a * np.sqrt(1.0 - p.e * p.e) * np.sin(ecc_anomaly)
    return ecliptic_rotation_matrix(p.argument_of_periapsis, p.I, p.Omega) @ xy


def draw_orrery(
    source: ElementSource,
    days_since_j2000: float,
    bodies: list[str] | None = None,
    output_path: str | None = None,
    title: str | None = None,
    config: SolverConfig | None = None,
) -> dict[str, Position]:
    """Plot body positions and orbits seen from ecliptic north. Requires matplotlib.

    Parameters:
        source: Element source.
        days_since_j2000: Date to plot.
        bodies: Body names (default: every body in the source).
        output_path: Image file to write; nothing is saved when None.
        title: Plot title.
        config: Kepler solver settings.

    Returns:
        Ecliptic position of each plotted body, keyed by body name.
    """
    try:
        import matplotlib

        matplotlib.use('Agg')
        import matplotlib.pyplot as plt
    except ImportError:
        raise ImportError('matplotlib is required for draw_orrery') from None

    names = bodies if bodies is not None else source.bodies()
    positions: dict[str, Position] = {}
    fig, ax = plt.subplots(figsize=(8, 8))
    ax.plot([0.0], [0.0], marker='o', color='orange', markersize=10)
    for body in names:
        track = orbit_track(source, body, days_since_j2000)
        pos = position_ecliptic(source.elements(body), days_since_j2000, config)
        positions[body] = pos
        ax.plot(track[0], track[1], linewidth=0.6, color='gray')
        ax.plot([pos.x], [pos.y], marker='o', markersize=4)
        ax.annotate(body_display_name(body), (pos.x, pos.y), fontsize=8)
    ax.set_aspect('equal')
    ax.set_xlabel('X ecliptic (AU)')
    ax.set_ylabel('Y ecliptic (AU)')
    ax.set_title(title or f'Heliocentric positions, J2000 + {days_since_j2000:.2f} d')
    if output_path:
        fig.savefig(output_path)
        logger.info('Wrote orrery plot to %s', output_path)
    plt.close(fig)
    return positions
