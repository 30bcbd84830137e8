"""Tests for julian-based time conversion and parsing."""

from __future__ import annotations

import pytest

from approx_ephemeris import time_utils


def test_ensure_leapsecs_sets_spice_ut_model(monkeypatch: pytest.MonkeyPatch) -> None:
    """Leap-second init selects the SPICE UT model before loading the LSK."""

    calls: list[tuple[str, tuple[object, ...]]] = []

    def _set_ut_model(model: str, future: object = None) -> None:
        del future
        calls.append(('set_ut_model', (model,)))

    def _load_lsk(path: str | None = None) -> None:
        calls.append(('load_lsk', (path,)))

    monkeypatch.setattr('julian.set_ut_model', _set_ut_model)
    monkeypatch.setattr('julian.load_lsk', _load_lsk)
    monkeypatch.setattr('approx_ephemeris.time_utils.get_leapsecs_path', lambda: 'dummy.tls')
    monkeypatch.setattr(time_utils, '_leapsecs_loaded', False)

    time_utils._ensure_leapsecs()

    assert calls[0] == ('set_ut_model', ('SPICE',))
    assert calls[1] == ('load_lsk', ('dummy.tls',))
    assert time_utils._leapsecs_loaded


def test_ensure_leapsecs_falls_back_to_bundled_lsk(monkeypatch: pytest.MonkeyPatch) -> None:
    """An unreadable JULIAN_LEAPSECS file falls back to the bundled kernel."""

    paths: list[str | None] = []

    def _load_lsk(path: str | None = None) -> None:
        paths.append(path)
        if path is not None:
            raise OSError('missing')

    monkeypatch.setattr('julian.set_ut_model', lambda *_args, **_kwargs: None)
    monkeypatch.setattr('julian.load_lsk', _load_lsk)
    monkeypatch.setattr('approx_ephemeris.time_utils.get_leapsecs_path', lambda: '/no/such.tls')
    monkeypatch.setattr(time_utils, '_leapsecs_loaded', False)

    time_utils._ensure_leapsecs()

    assert paths == ['/no/such.tls', None]


def test_days_since_j2000_epoch() -> None:
    """J2000 is 2000-01-01 12:00, i.e. day 0 plus half a day."""
    assert time_utils.days_since_j2000(0, 43200.0) == 0.0
    assert time_utils.days_since_j2000(0, 0.0) == -0.5
    assert time_utils.day_sec_from_days(0.0) == (0, 43200.0)
    assert time_utils.day_sec_from_days(-0.75) == (-1, 64800.0)


def test_days_since_j2000_from_ymd() -> None:
    """Calendar dates convert to days since J2000."""
    assert time_utils.days_since_j2000_from_ymd(2000, 1, 1, 12) == 0.0
    assert time_utils.days_since_j2000_from_ymd(2025, 1, 16) == 9146.5
    assert time_utils.days_since_j2000_from_ymd(1999, 12, 31, 18) == -0.75


def test_format_days() -> None:
    """Days since J2000 format as a UTC timestamp rounded to the second."""
    assert time_utils.format_days(0.0) == '2000-01-01 12:00:00'
    assert time_utils.format_days(9146.5) == '2025-01-16 00:00:00'
    assert time_utils.format_days(-0.5 - 0.2 / 86400.0) == '2000-01-01 00:00:00'
    assert time_utils.format_days(9146.5 + 3723.0 / 86400.0) == '2025-01-16 01:02:03'
    assert tuple(int(v) for v in time_utils.hms_from_sec(3723)) == (1, 2, 3)


def test_parse_days_since_j2000() -> None:
    """UTC strings and J2000+N offsets both parse to days since J2000."""
    assert time_utils.parse_days_since_j2000('2025-01-16 00:00:00') == pytest.approx(9146.5)
    assert time_utils.parse_days_since_j2000('J2000+9146.5') == 9146.5
    assert time_utils.parse_days_since_j2000('j2000 - 10') == -10.0
    assert time_utils.parse_days_since_j2000('not a date') is None


def test_parse_datetime_accepts_iso_z_suffix() -> None:
    """ISO-8601 trailing Z parses as UTC like the same timestamp without Z."""

    with_z = time_utils.parse_datetime('2022-08-18T00:01:47Z')
    without_z = time_utils.parse_datetime('2022-08-18T00:01:47')

    assert with_z is not None
    assert without_z is not None
    assert with_z == without_z


def test_parse_datetime_accepts_year_hms_form() -> None:
    """'YYYY HH:MM:SS' parses as Jan 1 at the given time."""

    compact = time_utils.parse_datetime('1900 01:01:01')
    explicit = time_utils.parse_datetime('1900-01-01 01:01:01')

    assert compact is not None
    assert explicit is not None
    assert compact == explicit


def test_interval_days() -> None:
    """Intervals convert to days; unknown units and zero are rejected."""
    assert time_utils.interval_days(90.0, 'min') == pytest.approx(0.0625)
    assert time_utils.interval_days(6.0, 'hour') == pytest.approx(0.25)
    assert time_utils.interval_days(-2.0, 'Days') == 2.0
    assert time_utils.interval_days(3.0, 'days') == 3.0
    assert time_utils.interval_days(2.0, 'hours') == pytest.approx(2.0 / 24.0)
    assert time_utils.interval_days(1.0, 'minutes') == pytest.approx(1.0 / 1440.0)
    assert time_utils.interval_days(1.0, 'year') == pytest.approx(365.25)
    with pytest.raises(ValueError, match='time_unit'):
        time_utils.interval_days(1.0, 'fortnight')
    with pytest.raises(ValueError, match='non-zero'):
        time_utils.interval_days(0.0, 'day')


def test_year_from_days() -> None:
    """Decimal year is 2000 at the epoch."""
    assert time_utils.year_from_days(0.0) == 2000.0
    assert time_utils.year_from_days(36525.0) == pytest.approx(2100.0)
