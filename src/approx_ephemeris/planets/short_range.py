"""JPL Table 1: Keplerian elements and rates, valid 1800 AD - 2050 AD."""

from __future__ import annotations

from approx_ephemeris.elements import OrbitalElements
from approx_ephemeris.planets.base import ElementTable

MERCURY = OrbitalElements(
    name='Mercury',
    a=0.38709927,
    e=0.20563593,
    I=7.00497902,
    L=252.25032350,
    lon_periapsis=77.45779628,
    Omega=48.33076593,
    adot=0.00000037,
    edot=0.00001906,
    Idot=-0.00594749,
    Ldot=149472.67411175,
    lon_periapsis_dot=0.16047689,
    Omega_dot=-0.12534081,
)

VENUS = OrbitalElements(
    name='Venus',
    a=0.72333566,
    e=0.00677672,
    I=3.39467605,
    L=181.97909950,
    lon_periapsis=131.60246718,
    Omega=76.67984255,
    adot=0.00000390,
    edot=-0.00004107,
    Idot=-0.00078890,
    Ldot=58517.81538729,
    lon_periapsis_dot=0.00268329,
    Omega_dot=-0.27769418,
)

EM_BARY = OrbitalElements(
    name='EM Bary',
    a=1.00000261,
    e=0.01671123,
    I=-0.00001531,
    L=100.46457166,
    lon_periapsis=102.93768193,
    Omega=0.0,
    adot=0.00000562,
    edot=-0.00004392,
    Idot=-0.01294668,
    Ldot=35999.37244981,
    lon_periapsis_dot=0.32327364,
    Omega_dot=0.0,
)

MARS = OrbitalElements(
    name='Mars',
    a=1.52371034,
    e=0.09339410,
    I=1.84969142,
    L=-4.55343205,
    lon_periapsis=-23.94362959,
    Omega=49.55953891,
    adot=0.00001847,
    edot=0.00007882,
    Idot=-0.00813131,
    Ldot=19140.30268499,
    lon_periapsis_dot=0.44441088,
    Omega_dot=-0.29257343,
)

JUPITER = OrbitalElements(
    name='Jupiter',
    a=5.20288700,
    e=0.04838624,
    I=1.30439695,
    L=34.39644051,
    lon_periapsis=14.72847983,
    Omega=100.47390909,
    adot=-0.00011607,
    edot=-0.00013253,
    Idot=-0.00183714,
    Ldot=3034.74612775,
    lon_periapsis_dot=0.21252668,
    Omega_dot=0.20469106,
)

SATURN = OrbitalElements(
    name='Saturn',
    a=9.53667594,
    e=0.05386179,
    I=2.48599187,
    L=49.95424423,
    lon_periapsis=92.59887831,
    Omega=113.66242448,
    adot=-0.00125060,
    edot=-0.00050991,
    Idot=0.00193609,
    Ldot=1222.49362201,
    lon_periapsis_dot=-0.41897216,
    Omega_dot=-0.28867794,
)

URANUS = OrbitalElements(
    name='Uranus',
    a=19.18916464,
    e=0.04725744,
    I=0.77263783,
    L=313.23810451,
    lon_periapsis=170.95427630,
    Omega=74.01692503,
    adot=-0.00196176,
    edot=-0.00004397,
    Idot=-0.00242939,
    Ldot=428.48202785,
    lon_periapsis_dot=0.40805281,
    Omega_dot=0.04240589,
)

NEPTUNE = OrbitalElements(
    name='Neptune',
    a=30.06992276,
    e=0.00859048,
    I=1.77004347,
    L=-55.12002969,
    lon_periapsis=44.96476227,
    Omega=131.78422574,
    adot=0.00026291,
    edot=0.00005105,
    Idot=0.00035372,
    Ldot=218.45945325,
    lon_periapsis_dot=-0.32241464,
    Omega_dot=-0.00508664,
)

SHORT_RANGE = ElementTable(
    name='short-range',
    description='JPL Table 1 (1800 AD - 2050 AD)',
    valid_from_year=1800,
    valid_to_year=2050,
    records={
        'mercury': MERCURY,
        'venus': VENUS,
        'em_bary': EM_BARY,
        'mars': MARS,
        'jupiter': JUPITER,
        'saturn': SATURN,
        'uranus': URANUS,
        'neptune': NEPTUNE,
    },
)
