"""Fixed constants: epoch, frame obliquity, unit conversions, body names.

Values follow the JPL Solar System Dynamics note "Approximate Positions of
the Planets" (https://ssd.jpl.nasa.gov/planets/approx_pos.html).
"""

import math

# Epoch J2000.0 = 2000-01-01 12:00 (JD 2451545.0)
DAYS_PER_CENTURY = 36525.0
J2000_DAY_OFFSET = 0.5  # days from 2000-01-01 00:00 to the J2000 epoch

# Time: seconds per unit
SECONDS_PER_MINUTE = 60.0
SECONDS_PER_HOUR = 3600.0
SECONDS_PER_DAY = 86400.0
DAYS_PER_YEAR = 365.25

# Angle
DEGREES_PER_CIRCLE = 360.0
HALF_CIRCLE_DEGREES = 180.0
TWOPI = 2.0 * math.pi

# Obliquity of the ecliptic at J2000 (degrees)
OBLIQUITY_J2000_DEG = 23.43928

# Kepler solver defaults: the JPL note suggests a 1e-6 degree tolerance
KEPLER_EPSILON_DEG = 1.0e-6
KEPLER_MAX_ITERATIONS = 100

# Default alignment tolerance (degrees) and search step (days)
DEFAULT_ALIGNMENT_TOLERANCE_DEG = 1.0
DEFAULT_SEARCH_STEP_DAYS = 5.0

# Bodies in heliocentric order; Earth is represented by the Earth-Moon barycenter
BODY_NAMES = (
    'mercury',
    'venus',
    'em_bary',
    'mars',
    'jupiter',
    'saturn',
    'uranus',
    'neptune',
)

BODY_DISPLAY_NAMES: dict[str, str] = {
    'mercury': 'Mercury',
    'venus': 'Venus',
    'em_bary': 'EM Bary',
    'mars': 'Mars',
    'jupiter': 'Jupiter',
    'saturn': 'Saturn',
    'uranus': 'Uranus',
    'neptune': 'Neptune',
}

# Accepted aliases -> canonical body name
BODY_ALIASES: dict[str, str] = {
    'earth': 'em_bary',
    'emb': 'em_bary',
    'em bary': 'em_bary',
    'em-bary': 'em_bary',
    'earth-moon barycenter': 'em_bary',
    'earth_moon_barycenter': 'em_bary',
}

# Planet number (1=Mercury .. 8=Neptune) -> body name
BODY_NUM_TO_NAME: dict[int, str] = {i + 1: name for i, name in enumerate(BODY_NAMES)}
