"""Planet element sources: the JPL short-range and long-range tables."""

import logging

from approx_ephemeris.constants import BODY_DISPLAY_NAMES, BODY_NAMES
from approx_ephemeris.planets.base import ElementSource, ElementTable, canonical_body_name
from approx_ephemeris.planets.long_range import LONG_RANGE
from approx_ephemeris.planets.short_range import SHORT_RANGE

logger = logging.getLogger(__name__)

# Case-insensitive table specifier -> table
_TABLES: dict[str, ElementTable] = {
    'short': SHORT_RANGE,
    'short-range': SHORT_RANGE,
    'sr': SHORT_RANGE,
    '1800-2050': SHORT_RANGE,
    'long': LONG_RANGE,
    'long-range': LONG_RANGE,
    'lr': LONG_RANGE,
    '3000bc-3000ad': LONG_RANGE,
}


def get_element_table(name: str) -> ElementTable:
    """Return the element table for a specifier such as 'short' or 'long-range'.

    Raises:
        ValueError: If the name is not a known table.
    """
    key = name.strip().lower().replace('_', '-')
    if key in _TABLES:
        return _TABLES[key]
    raise ValueError(f'Unknown element table {name!r}; use one of: ' + ', '.join(_TABLES))


def parse_body(value: str) -> str:
    """Parse a body specifier: number 1-8, name, or alias (e.g. 'earth').

    Parameters:
        value: Body number string or name (case-insensitive).

    Returns:
        Canonical body name (e.g. 'em_bary').

    Raises:
        ValueError: If value is not a known body.
    """
    name = canonical_body_name(value)
    if name in BODY_NAMES:
        return name
    raise ValueError(f'Unknown body {value!r}; use 1-8 or a name: ' + ', '.join(BODY_NAMES))


def body_display_name(body: str) -> str:
    """Return the display name (e.g. 'EM Bary') for a body specifier."""
    name = canonical_body_name(body)
    if name not in BODY_DISPLAY_NAMES:
        logger.warning('No display name for body %r', body)
        return body
    return BODY_DISPLAY_NAMES[name]


__all__ = [
    'LONG_RANGE',
    'SHORT_RANGE',
    'ElementSource',
    'ElementTable',
    'body_display_name',
    'canonical_body_name',
    'get_element_table',
    'parse_body',
]
