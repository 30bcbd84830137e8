"""Tests for the orrery plot and orbit tracks."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from approx_ephemeris.orbits import position_ecliptic
from approx_ephemeris.planets import LONG_RANGE, SHORT_RANGE
from approx_ephemeris.rendering.orrery import ORBIT_SAMPLES, draw_orrery, orbit_track


def test_orbit_track_spans_periapsis_to_apoapsis() -> None:
    """The sampled ellipse reaches a(1 - e) and a(1 + e) from the Sun."""
    mars = SHORT_RANGE.elements('mars')
    track = orbit_track(SHORT_RANGE, 'mars', 0.0)
    assert track.shape == (3, ORBIT_SAMPLES)
    r = np.linalg.norm(track, axis=0)
    assert r.min() == pytest.approx(mars.a * (1.0 - mars.e), rel=1e-4)
    assert r.max() == pytest.approx(mars.a * (1.0 + mars.e), rel=1e-9)


def test_orbit_track_contains_current_position() -> None:
    """The planet lies on its osculating ellipse."""
    days = 9146.5
    track = orbit_track(LONG_RANGE, 'jupiter', days)
    pos = np.array(position_ecliptic(LONG_RANGE.elements('jupiter'), days))
    distances = np.linalg.norm(track - pos[:, np.newaxis], axis=0)
    assert distances.min() < 0.1


def test_draw_orrery_writes_image(tmp_path: Path) -> None:
    """draw_orrery saves a PNG and returns the plotted positions."""
    pytest.importorskip('matplotlib')
    path = tmp_path / 'orrery.png'
    positions = draw_orrery(SHORT_RANGE, 9146.5, bodies=['em_bary', 'mars'], output_path=str(path))
    assert set(positions) == {'em_bary', 'mars'}
    assert positions['mars'] == position_ecliptic(SHORT_RANGE.elements('mars'), 9146.5)
    assert path.stat().st_size > 0
