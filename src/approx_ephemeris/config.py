"""Configuration: Kepler solver settings and default paths/tables from environment."""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass

from approx_ephemeris.constants import KEPLER_EPSILON_DEG, KEPLER_MAX_ITERATIONS

logger = logging.getLogger(__name__)

# Element table used when none is given (env var overrides).
DEFAULT_TABLE = 'short'


@dataclass(frozen=True)
class SolverConfig:
    """Newton-Raphson settings for the Kepler solver.

    Attributes:
        epsilon: Convergence threshold on |E - e sin E - M| (radians).
        max_iterations: Iteration budget; the last iterate is returned when exhausted.
    """

    epsilon: float = math.radians(KEPLER_EPSILON_DEG)
    max_iterations: int = KEPLER_MAX_ITERATIONS


DEFAULT_SOLVER_CONFIG = SolverConfig()


def get_solver_config() -> SolverConfig:
    """Return solver settings (KEPLER_EPSILON_DEG / KEPLER_MAX_ITERATIONS env vars or defaults).

    Invalid or non-positive values are logged and ignored.

    Returns:
        SolverConfig instance.
    """
    epsilon = DEFAULT_SOLVER_CONFIG.epsilon
    max_iterations = DEFAULT_SOLVER_CONFIG.max_iterations

    eps_env = os.environ.get('KEPLER_EPSILON_DEG', '').strip()
    if eps_env:
        try:
            value = float(eps_env)
        except ValueError:
            value = -1.0
        if value > 0.0 and math.isfinite(value):
            epsilon = math.radians(value)
        else:
            logger.warning('Ignoring invalid KEPLER_EPSILON_DEG=%r', eps_env)

    iter_env = os.environ.get('KEPLER_MAX_ITERATIONS', '').strip()
    if iter_env:
        try:
            count = int(iter_env)
        except ValueError:
            count = 0
        if count > 0:
            max_iterations = count
        else:
            logger.warning('Ignoring invalid KEPLER_MAX_ITERATIONS=%r', iter_env)

    return SolverConfig(epsilon=epsilon, max_iterations=max_iterations)


def get_default_table() -> str:
    """Return the default element table name (EPHEMERIS_TABLE env var or 'short')."""
    return os.environ.get('EPHEMERIS_TABLE', DEFAULT_TABLE).strip() or DEFAULT_TABLE


def get_leapsecs_path() -> str | None:
    """Return a NAIF LSK path for rms-julian, or None to use its bundled file.

    Returns:
        Path string from JULIAN_LEAPSECS, or None when unset.
    """
    path = os.environ.get('JULIAN_LEAPSECS', '').strip()
    return path or None
