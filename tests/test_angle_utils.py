"""Tests for degree/minute/second formatting."""

from __future__ import annotations

from approx_ephemeris.angle_utils import dms_string


def test_dms_string() -> None:
    """Degrees, minutes and seconds with the given separators."""
    assert dms_string(12.5125, 'dms') == '  12d 30m 45.000s'
    assert dms_string(-123.25, 'dms') == '-123d 15m 00.000s'
    assert dms_string(1.0, '::', ndecimal=4) == '   1  00  00.0000 '


def test_dms_string_negative_below_one_degree() -> None:
    """The sign is kept when the degree field is zero."""
    assert dms_string(-0.5, 'dms') == '  -0d 30m 00.000s'
