"""Kepler's equation M = E - e sin(E), solved for E by Newton-Raphson."""

from __future__ import annotations

import logging
import math

from approx_ephemeris.angle_utils import normalize_radians
from approx_ephemeris.config import DEFAULT_SOLVER_CONFIG, SolverConfig

logger = logging.getLogger(__name__)


def kepler_residual(eccentric_anomaly: float, e: float, mean_anomaly: float) -> float:
    """Return E - e sin(E) - M (radians); zero at the exact solution."""
    return eccentric_anomaly - e * math.sin(eccentric_anomaly) - mean_anomaly


def newton_step(eccentric_anomaly: float, e: float, mean_anomaly: float) -> float:
    """One Newton-Raphson update of E for Kepler's equation.

    Returns NaN when the derivative 1 - e cos(E) vanishes (only possible for e >= 1).
    """
    derivative = 1.0 - e * math.cos(eccentric_anomaly)
    if derivative == 0.0:
        return math.nan
    return eccentric_anomaly - kepler_residual(eccentric_anomaly, e, mean_anomaly) / derivative


def solve_kepler(
    mean_anomaly: float,
    e: float,
    config: SolverConfig | None = None,
) -> float:
    """Solve Kepler's equation for the eccentric anomaly.

    Starts from E0 = M + e sin(M) and iterates until the residual drops below
    ``config.epsilon`` or ``config.max_iterations`` updates have been made.
    Running out of iterations is not an error: the last iterate is returned
    and callers needing a guarantee can check :func:`kepler_residual`.

    Parameters:
        mean_anomaly: Mean anomaly M (radians).
        e: Eccentricity (not validated).
        config: Solver settings; defaults to 1e-6 degrees and 100 iterations.

    Returns:
        Eccentric anomaly E in (-pi, pi], or NaN if the iteration breaks down
        (e >= 1 only).
    """
    cfg = config or DEFAULT_SOLVER_CONFIG
    eccentric_anomaly = mean_anomaly + e * math.sin(mean_anomaly)
    converged = False
    for _ in range(cfg.max_iterations):
        eccentric_anomaly = newton_step(eccentric_anomaly, e, mean_anomaly)
        if not math.isfinite(eccentric_anomaly):
            # Non-finite iterates end the solve as NaN.
            eccentric_anomaly = math.nan
            break
        if abs(kepler_residual(eccentric_anomaly, e, mean_anomaly)) < cfg.epsilon:
            converged = True
            break
    if not converged:
        logger.debug(
            'Kepler solver stopped after %d iterations (M=%r, e=%r, residual=%r)',
            cfg.max_iterations,
            mean_anomaly,
            e,
            kepler_residual(eccentric_anomaly, e, mean_anomaly),
        )
    return normalize_radians(eccentric_anomaly)
