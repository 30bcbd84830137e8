"""Tests for orbital-plane, ecliptic and equatorial frame transforms."""

from __future__ import annotations

import math

import numpy as np
import pytest

from approx_ephemeris.elements import PropagatedElements
from approx_ephemeris.frames import (
    Position,
    ecliptic_rotation_matrix,
    ecliptic_to_equatorial,
    equatorial_rotation_matrix,
    orbital_plane_position,
    orbital_to_ecliptic,
)


def _propagated(omega: float, inc: float, node: float) -> PropagatedElements:
    return PropagatedElements(
        T=0.0, a=1.0, e=0.0, I=inc, L=0.0, lon_periapsis=omega + node, Omega=node
    )


@pytest.mark.parametrize(
    ('omega', 'inc', 'node'),
    [(0.0, 0.0, 0.0), (30.0, 10.0, 50.0), (-73.1, 1.85, 49.56), (286.5, 7.0, 48.3)],
)
def test_ecliptic_matrix_is_proper_rotation(omega: float, inc: float, node: float) -> None:
    """R R^T = I and det R = +1."""
    matrix = ecliptic_rotation_matrix(omega, inc, node)
    assert np.allclose(matrix @ matrix.T, np.eye(3), atol=1e-14)
    assert np.linalg.det(matrix) == pytest.approx(1.0)


def test_ecliptic_matrix_matches_closed_form() -> None:
    """Columns 1-2 match the JPL closed-form perifocal -> ecliptic expressions."""
    omega, inc, node = math.radians(40.0), math.radians(12.0), math.radians(75.0)
    cw, sw = math.cos(omega), math.sin(omega)
    ci, si = math.cos(inc), math.sin(inc)
    co, so = math.cos(node), math.sin(node)
    matrix = ecliptic_rotation_matrix(40.0, 12.0, 75.0)
    expected = np.array(
        [
            [cw * co - sw * so * ci, -sw * co - cw * so * ci],
            [cw * so + sw * co * ci, -sw * so + cw * co * ci],
            [sw * si, cw * si],
        ]
    )
    assert np.allclose(matrix[:, :2], expected, atol=1e-14)


def test_zero_angles_are_identity() -> None:
    """With omega = I = Omega = 0 the orbital plane is the ecliptic."""
    pos = orbital_to_ecliptic((0.3, -0.4), _propagated(0.0, 0.0, 0.0))
    assert pos == pytest.approx((0.3, -0.4, 0.0))


def test_inclined_orbit_leaves_ecliptic() -> None:
    """A point 90 degrees past the ascending node sits at z = r sin(I)."""
    pos = orbital_to_ecliptic((1.0, 0.0), _propagated(90.0, 30.0, 0.0))
    assert pos.x == pytest.approx(0.0, abs=1e-15)
    assert pos.y == pytest.approx(math.cos(math.radians(30.0)))
    assert pos.z == pytest.approx(0.5)


def test_equatorial_rotation_tilts_by_obliquity() -> None:
    """Ecliptic +y maps to (0, cos eps, sin eps); x is unchanged."""
    eps = math.radians(23.43928)
    pos = ecliptic_to_equatorial((0.0, 1.0, 0.0))
    assert pos == pytest.approx((0.0, math.cos(eps), math.sin(eps)))
    pos = ecliptic_to_equatorial((2.0, 0.0, 1.0))
    assert pos == pytest.approx((2.0, -math.sin(eps), math.cos(eps)))
    assert np.allclose(
        equatorial_rotation_matrix() @ equatorial_rotation_matrix(-23.43928), np.eye(3)
    )


def test_rotations_preserve_norm() -> None:
    """Ecliptic and equatorial positions keep the orbital-plane distance."""
    xy = orbital_plane_position(1.52, 0.093, 2.2)
    ecl = orbital_to_ecliptic(xy, _propagated(286.5, 1.85, 49.56))
    eq = ecliptic_to_equatorial(ecl)
    assert ecl.norm() == pytest.approx(math.hypot(*xy), rel=1e-14)
    assert eq.norm() == pytest.approx(math.hypot(*xy), rel=1e-14)


def test_orbital_plane_position() -> None:
    """Periapsis at a(1 - e) on +x; E = 90 deg gives (-ae, b)."""
    a, e = 2.0, 0.25
    assert orbital_plane_position(a, e, 0.0) == pytest.approx((1.5, 0.0))
    x, y = orbital_plane_position(a, e, math.pi / 2.0)
    assert x == pytest.approx(-0.5)
    assert y == pytest.approx(a * math.sqrt(1.0 - e * e))
    x, y = orbital_plane_position(a, 1.5, 1.0)
    assert math.isnan(y)


def test_position_is_immutable_tuple() -> None:
    """Position is a named 3-tuple."""
    pos = Position(1.0, 2.0, 2.0)
    assert pos.norm() == 3.0
    assert tuple(pos) == (1.0, 2.0, 2.0)
    with pytest.raises(AttributeError):
        pos.x = 0.0  # type: ignore[misc]
