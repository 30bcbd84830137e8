"""CLI entry point: approx-ephemeris longitudes|ephemeris|alignments|orrery subcommands."""

from __future__ import annotations

import argparse
import logging
import math
import os
import sys
from typing import NoReturn, TextIO, cast

from approx_ephemeris.alignment import ALIGNED, find_alignments
from approx_ephemeris.angle_utils import dms_string
from approx_ephemeris.config import get_default_table, get_solver_config
from approx_ephemeris.constants import DEFAULT_SEARCH_STEP_DAYS
from approx_ephemeris.ephemeris import generate_ephemeris
from approx_ephemeris.orbits import longitude_at_date, true_anomaly_at_date
from approx_ephemeris.params import (
    DEFAULT_INTERVAL,
    DEFAULT_TIME_UNIT,
    EphemerisParams,
    OrreryParams,
)
from approx_ephemeris.planets import body_display_name, get_element_table, parse_body
from approx_ephemeris.time_utils import (
    days_since_j2000_now,
    format_days,
    parse_days_since_j2000,
)

logger = logging.getLogger(__name__)

INNER_BODIES = ('mercury', 'venus')


def _configure_logging(verbose: bool = False) -> None:
    """Configure logging for CLI (stderr, level from --verbose or APPROX_EPHEMERIS_LOG)."""
    level = logging.DEBUG if verbose else logging.WARNING
    env_level = os.environ.get('APPROX_EPHEMERIS_LOG', '').upper()
    if env_level in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
        level = getattr(logging, env_level)
    logging.basicConfig(
        level=level,
        format='%(levelname)s: %(name)s: %(message)s',
        stream=sys.stderr,
    )
    logging.getLogger('matplotlib').setLevel(logging.WARNING)


def _resolve_time(value: str) -> float:
    """Days since J2000 for a CLI time string; empty means now."""
    if not value.strip():
        return days_since_j2000_now()
    days = parse_days_since_j2000(value)
    if days is None:
        raise ValueError(f'Invalid time: {value!r}')
    return days


def _longitudes_cmd(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    """Print every body's longitude at one time (longitudes subcommand).

    Parameters:
        parser: Argument parser (unused).
        args: Parsed args; time, table.

    Returns:
        Exit code 0 on success, 1 on error.
    """
    del parser
    out: TextIO = sys.stdout
    try:
        days = _resolve_time(args.time)
        table = get_element_table(args.table)
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    config = get_solver_config()
    earth = table.elements('earth')
    nu = true_anomaly_at_date(earth, days, config)
    lon = longitude_at_date(earth, days, config)
    out.write(f'Time:      {format_days(days)} UTC ({days:.6f} days since J2000)\n')
    out.write(f'Elements:  {table.description}\n')
    out.write(f"Earth's true anomaly: {nu:10.6f} rad {math.degrees(nu):11.6f} deg\n")
    out.write(f"Earth's longitude:    {lon:10.6f} rad {math.degrees(lon):11.6f} deg\n")
    out.write('\n')
    for body in table.bodies():
        lon = longitude_at_date(table.elements(body), days, config)
        out.write(
            f'{body_display_name(body):<8} {lon:10.6f} rad {math.degrees(lon):11.6f} deg '
            f'{dms_string(math.degrees(lon), "dms")}\n'
        )
    return 0


def _ephemeris_cmd(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    """Run ephemeris generator (ephemeris subcommand).

    Parameters:
        parser: Argument parser (unused).
        args: Parsed args; body, start, stop, interval, time_unit, table, output.

    Returns:
        Exit code 0 on success, 1 on error.
    """
    del parser
    params = EphemerisParams(
        body=args.body,
        start_time=args.start,
        stop_time=args.stop,
        interval=args.interval,
        time_unit=args.time_unit,
        table=args.table,
        solver=get_solver_config(),
    )
    try:
        if args.output is not None:
            with open(args.output, 'w') as f:
                generate_ephemeris(params, f)
        else:
            generate_ephemeris(params, sys.stdout)
    except (ValueError, OSError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    return 0


def _alignment_label(kind: str, body: str, reference: str) -> str:
    """Observer-facing name of an alignment event seen from the reference body."""
    if reference != 'em_bary':
        return kind
    if body in INNER_BODIES:
        return 'inferior conjunction' if kind == ALIGNED else 'superior conjunction'
    return 'opposition' if kind == ALIGNED else 'conjunction'


def _alignments_cmd(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    """Search for oppositions and conjunctions (alignments subcommand).

    Parameters:
        parser: Argument parser (unused).
        args: Parsed args; body, reference, start, stop, step, table.

    Returns:
        Exit code 0 on success, 1 on error.
    """
    del parser
    try:
        table = get_element_table(args.table)
        start = _resolve_time(args.start)
        stop = _resolve_time(args.stop)
        events = find_alignments(
            table,
            args.reference,
            args.body,
            start,
            stop,
            args.step,
            get_solver_config(),
        )
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    for event in events:
        label = _alignment_label(event.kind, args.body, args.reference)
        print(
            f'{format_days(event.days_since_j2000)} UTC  '
            f'{event.days_since_j2000:12.4f}  {body_display_name(args.body)} {label}  '
            f'(separation {math.degrees(event.separation):9.5f} deg)'
        )
    if not events:
        print('No alignments found.')
    return 0


def _orrery_cmd(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    """Draw the orrery plot (orrery subcommand).

    Parameters:
        parser: Argument parser (unused).
        args: Parsed args; time, table, bodies, output.

    Returns:
        Exit code 0 on success, 1 on error.
    """
    del parser
    from approx_ephemeris.rendering.orrery import draw_orrery

    params = OrreryParams(time=args.time, table=args.table, output_path=args.output)
    if args.bodies:
        params.bodies = list(args.bodies)
    try:
        days = _resolve_time(params.time)
        table = get_element_table(params.table)
        draw_orrery(
            table,
            days,
            bodies=params.bodies,
            output_path=params.output_path,
            title=f'{table.description}: {format_days(days)} UTC',
            config=get_solver_config(),
        )
    except (ValueError, ImportError, OSError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    return 0


def main() -> int:
    """Entry point for approx-ephemeris CLI (longitudes | ephemeris | alignments | orrery).

    Returns:
        Exit code 0 on success, 1 on failure.
    """
    parser = argparse.ArgumentParser(
        prog='approx-ephemeris',
        description='Planet positions from JPL approximate Keplerian elements.',
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    lon_parser = subparsers.add_parser('longitudes', help='Longitude of every planet')
    lon_parser.add_argument(
        '--time', type=str, default='', help='UTC time or J2000+days (default: now)'
    )
    lon_parser.add_argument(
        '--table',
        type=str,
        default=get_default_table(),
        help='Element table: short (1800-2050) or long (3000BC-3000AD); env: EPHEMERIS_TABLE',
    )
    lon_parser.add_argument('-v', '--verbose', action='store_true', help='Show DEBUG logs')
    lon_parser.set_defaults(func=_longitudes_cmd)

    ephem_parser = subparsers.add_parser('ephemeris', help='Generate ephemeris table')
    ephem_parser.add_argument(
        '--body', type=parse_body, required=True, help='Body number (1-8) or name'
    )
    ephem_parser.add_argument('--start', type=str, required=True, help='Start time (UTC)')
    ephem_parser.add_argument('--stop', type=str, required=True, help='Stop time (UTC)')
    ephem_parser.add_argument(
        '--interval', type=float, default=DEFAULT_INTERVAL, help='Time step'
    )
    ephem_parser.add_argument(
        '--time-unit',
        type=str,
        default=DEFAULT_TIME_UNIT,
        choices=['min', 'hour', 'day', 'year'],
    )
    ephem_parser.add_argument('--table', type=str, default=get_default_table())
    ephem_parser.add_argument('-o', '--output', type=str, default=None, help='Output file')
    ephem_parser.add_argument('-v', '--verbose', action='store_true', help='Show DEBUG logs')
    ephem_parser.set_defaults(func=_ephemeris_cmd)

    align_parser = subparsers.add_parser(
        'alignments', help='Find oppositions and conjunctions'
    )
    align_parser.add_argument('--body', type=parse_body, required=True, help='Body to test')
    align_parser.add_argument(
        '--reference', type=parse_body, default='em_bary', help='Reference body (default: earth)'
    )
    align_parser.add_argument('--start', type=str, required=True, help='Start time (UTC)')
    align_parser.add_argument('--stop', type=str, required=True, help='Stop time (UTC)')
    align_parser.add_argument(
        '--step', type=float, default=DEFAULT_SEARCH_STEP_DAYS, help='Search step (days)'
    )
    align_parser.add_argument('--table', type=str, default=get_default_table())
    align_parser.add_argument('-v', '--verbose', action='store_true', help='Show DEBUG logs')
    align_parser.set_defaults(func=_alignments_cmd)

    orrery_parser = subparsers.add_parser('orrery', help='Plot planet positions (matplotlib)')
    orrery_parser.add_argument('--time', type=str, default='', help='UTC time (default: now)')
    orrery_parser.add_argument('--table', type=str, default=get_default_table())
    orrery_parser.add_argument(
        '--bodies', type=parse_body, nargs='*', default=None, help='Bodies to plot'
    )
    orrery_parser.add_argument('-o', '--output', type=str, required=True, help='Image file')
    orrery_parser.add_argument('-v', '--verbose', action='store_true', help='Show DEBUG logs')
    orrery_parser.set_defaults(func=_orrery_cmd)

    args = parser.parse_args()
    _configure_logging(verbose=args.verbose)
    return cast(int, args.func(parser, args))


def cli_main() -> NoReturn:
    """Entry point for console_scripts; calls main() and exits with its return code."""
    sys.exit(main())


if __name__ == '__main__':
    sys.exit(main())
