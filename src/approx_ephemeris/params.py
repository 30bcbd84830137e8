"""Request parameters for the ephemeris generator, orrery and CLI."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TextIO

from approx_ephemeris.config import SolverConfig, get_default_table
from approx_ephemeris.constants import BODY_NAMES

DEFAULT_INTERVAL = 1.0
DEFAULT_TIME_UNIT = 'day'


@dataclass
class EphemerisParams:
    """Parameters for ephemeris table generation."""

    body: str
    start_time: str
    stop_time: str
    interval: float = DEFAULT_INTERVAL
    time_unit: str = DEFAULT_TIME_UNIT
    table: str = field(default_factory=get_default_table)
    solver: SolverConfig | None = None
    output: TextIO | None = None


@dataclass
class OrreryParams:
    """Parameters for the orrery plot."""

    time: str = ''
    table: str = field(default_factory=get_default_table)
    bodies: list[str] = field(default_factory=lambda: list(BODY_NAMES))
    output_path: str | None = None
