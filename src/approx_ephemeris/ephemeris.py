"""Ephemeris table generator: one fixed-width row per time step for one body."""

from __future__ import annotations

import logging
import math
from typing import TextIO

from approx_ephemeris.orbits import heliocentric_state
from approx_ephemeris.params import EphemerisParams
from approx_ephemeris.planets import body_display_name, get_element_table, parse_body
from approx_ephemeris.record import Record
from approx_ephemeris.time_utils import (
    format_days,
    interval_days,
    parse_days_since_j2000,
    year_from_days,
)

logger = logging.getLogger(__name__)

# Hard stop on table length.
MAX_STEPS = 100000

COLUMN_HEADER = (
    'Date (UTC)           Days J2000   Lon (deg)  TrueAn (deg)   R (AU)'
    '      X_ecl       Y_ecl       Z_ecl       X_eq        Y_eq        Z_eq'
)


def _parse_time(label: str, value: str) -> float:
    days = parse_days_since_j2000(value)
    if days is None:
        raise ValueError(f'Invalid {label} time: {value!r}')
    return days


def write_header(params: EphemerisParams, stream: TextIO) -> None:
    """Write the request summary and column header."""
    table = get_element_table(params.table)
    stream.write(f'Body:      {body_display_name(params.body)}\n')
    stream.write(f'Elements:  {table.description}\n')
    stream.write(f'Start:     {params.start_time}\n')
    stream.write(f'Stop:      {params.stop_time}\n')
    stream.write(f'Interval:  {params.interval:g} {params.time_unit}\n')
    stream.write('Frame:     heliocentric, J2000 ecliptic and equatorial (ICRF)\n')
    stream.write('\n')
    stream.write(COLUMN_HEADER + '\n')


def generate_ephemeris(params: EphemerisParams, output: TextIO | None = None) -> int:
    """Generate the ephemeris table and write it to output.

    If output is None, uses params.output. If both are None, nothing is written.

    Returns:
        Number of rows written.

    Raises:
        ValueError: If the body, table or times are invalid, or stop < start.
    """
    out = output or params.output
    if out is None:
        return 0

    body = parse_body(params.body)
    table = get_element_table(params.table)
    elements = table.elements(body)
    start = _parse_time('start', params.start_time)
    stop = _parse_time('stop', params.stop_time)
    if stop < start:
        raise ValueError('Stop time is before start time')
    step = interval_days(params.interval, params.time_unit)
    nsteps = int(math.floor((stop - start) / step + 1.0e-9)) + 1
    if nsteps > MAX_STEPS:
        raise ValueError(f'Too many time steps ({nsteps}); maximum is {MAX_STEPS}')

    for days in (start, stop):
        if not table.covers_year(year_from_days(days)):
            logger.warning(
                '%s is outside the validity window of the %s table (%d to %d)',
                format_days(days),
                table.name,
                table.valid_from_year,
                table.valid_to_year,
            )

    write_header(params, out)
    rec = Record()
    for i in range(nsteps):
        days = start + i * step
        state = heliocentric_state(elements, days, params.solver)
        rec.init()
        rec.append(format_days(days))
        rec.append_number(days, 12, 4)
        rec.append_degrees(state.longitude)
        rec.append_degrees(state.true_anomaly, 12, 6)
        rec.append_number(state.distance, 10, 6)
        for value in (*state.ecliptic, *state.equatorial):
            rec.append_number(value, 11, 6)
        rec.write(out)
    logger.info('Wrote %d ephemeris rows for %s', nsteps, body)
    return nsteps
