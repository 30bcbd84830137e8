"""Tests for the Kepler solver and angle reduction."""

from __future__ import annotations

import math

import pytest

from approx_ephemeris.angle_utils import normalize_radians, reduce_degrees
from approx_ephemeris.config import DEFAULT_SOLVER_CONFIG, SolverConfig
from approx_ephemeris.kepler import kepler_residual, newton_step, solve_kepler


def test_default_solver_config_matches_jpl_tolerance() -> None:
    """Defaults are 1e-6 degrees (in radians) and 100 iterations."""
    assert DEFAULT_SOLVER_CONFIG.epsilon == pytest.approx(1.0e-6 * math.pi / 180.0)
    assert DEFAULT_SOLVER_CONFIG.max_iterations == 100


@pytest.mark.parametrize('e', [0.0, 0.0167, 0.2056, 0.5, 0.9])
def test_solution_reproduces_mean_anomaly(e: float) -> None:
    """E - e sin(E) gives back M to within the solver tolerance."""
    for i in range(-35, 36):
        mean_anomaly = i * (math.pi - 0.01) / 35.0
        ecc = solve_kepler(mean_anomaly, e)
        assert abs(kepler_residual(ecc, e, mean_anomaly)) < DEFAULT_SOLVER_CONFIG.epsilon + 1e-12


def test_zero_eccentricity_returns_mean_anomaly() -> None:
    """With e = 0 the eccentric anomaly equals the mean anomaly."""
    for mean_anomaly in (-3.0, -1.2, 0.0, 0.4, 2.9):
        assert solve_kepler(mean_anomaly, 0.0) == pytest.approx(mean_anomaly, abs=1e-12)


def test_result_is_normalized() -> None:
    """Mean anomalies outside (-pi, pi] still give E in (-pi, pi]."""
    ecc = solve_kepler(3.0 + 4.0 * math.pi, 0.0)
    assert ecc == pytest.approx(3.0, abs=1e-9)
    for mean_anomaly in (-10.0, -math.pi, math.pi, 7.5, 100.0):
        ecc = solve_kepler(mean_anomaly, 0.3)
        assert -math.pi < ecc <= math.pi


def test_exhausted_budget_returns_last_iterate() -> None:
    """Running out of iterations is silent and returns the last Newton iterate."""
    mean_anomaly, e = 0.5, 0.6
    seed = mean_anomaly + e * math.sin(mean_anomaly)

    assert solve_kepler(mean_anomaly, e, SolverConfig(max_iterations=0)) == pytest.approx(seed)

    one_step = solve_kepler(mean_anomaly, e, SolverConfig(epsilon=0.0, max_iterations=1))
    assert one_step == pytest.approx(newton_step(seed, e, mean_anomaly))


def test_non_convergence_is_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    """An impossible tolerance yields a DEBUG record, not an exception."""
    with caplog.at_level('DEBUG', logger='approx_ephemeris.kepler'):
        ecc = solve_kepler(1.0, 0.1, SolverConfig(epsilon=0.0, max_iterations=5))
    assert math.isfinite(ecc)
    assert any('stopped after 5 iterations' in r.getMessage() for r in caplog.records)


def test_normalize_radians_half_open_interval() -> None:
    """Angles reduce into (-pi, pi]; -pi maps to +pi."""
    assert normalize_radians(math.pi) == pytest.approx(math.pi)
    assert normalize_radians(-math.pi) == pytest.approx(math.pi)
    assert normalize_radians(3.0 * math.pi) == pytest.approx(math.pi)
    assert normalize_radians(0.0) == 0.0
    assert normalize_radians(2.0 * math.pi + 0.25) == pytest.approx(0.25)
    for i in range(-200, 201):
        angle = i * 0.173
        reduced = normalize_radians(angle)
        assert -math.pi < reduced <= math.pi
        assert math.cos(reduced) == pytest.approx(math.cos(angle), abs=1e-9)
        assert math.sin(reduced) == pytest.approx(math.sin(angle), abs=1e-9)


def test_normalize_radians_passes_nan() -> None:
    """NaN is not clamped."""
    assert math.isnan(normalize_radians(math.nan))


def test_reduce_degrees() -> None:
    """Mean anomaly reduction uses a floored modulo into [-180, 180)."""
    assert reduce_degrees(180.0) == -180.0
    assert reduce_degrees(-180.0) == -180.0
    assert reduce_degrees(190.0) == pytest.approx(-170.0)
    assert reduce_degrees(-190.0) == pytest.approx(170.0)
    assert reduce_degrees(540.0) == -180.0
    assert reduce_degrees(-725.0) == pytest.approx(-5.0)


def test_vanishing_derivative_gives_nan() -> None:
    """e = 1 at M = 0 zeroes 1 - e cos(E); the solver returns NaN instead of raising."""
    assert math.isnan(newton_step(0.0, 1.0, 0.0))
    assert math.isnan(solve_kepler(0.0, 1.0))
