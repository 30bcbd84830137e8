"""JPL Tables 2a/2b: Keplerian elements and rates, valid 3000 BC - 3000 AD.

Jupiter through Neptune carry the Table 2b b, c, s, f mean-anomaly terms.
"""

from __future__ import annotations

from approx_ephemeris.elements import OrbitalElements
from approx_ephemeris.planets.base import ElementTable

MERCURY = OrbitalElements(
    name='Mercury',
    a=0.38709843,
    e=0.20563661,
    I=7.00559432,
    L=252.25166724,
    lon_periapsis=77.45771895,
    Omega=48.33961819,
    adot=0.00000000,
    edot=0.00002123,
    Idot=-0.00590158,
    Ldot=149472.67486623,
    lon_periapsis_dot=0.15940013,
    Omega_dot=-0.12214182,
)

VENUS = OrbitalElements(
    name='Venus',
    a=0.72332102,
    e=0.00676399,
    I=3.39777545,
    L=181.97970850,
    lon_periapsis=131.76755713,
    Omega=76.67261496,
    adot=-0.00000026,
    edot=-0.00005107,
    Idot=0.00043494,
    Ldot=58517.81560260,
    lon_periapsis_dot=0.05679648,
    Omega_dot=-0.27274174,
)

EM_BARY = OrbitalElements(
    name='EM Bary',
    a=1.00000018,
    e=0.01673163,
    I=-0.00054346,
    L=100.46691572,
    lon_periapsis=102.93005885,
    Omega=-5.11260389,
    adot=-0.00000003,
    edot=-0.00003661,
    Idot=-0.01337178,
    Ldot=35999.37306329,
    lon_periapsis_dot=0.31795260,
    Omega_dot=-0.24123856,
)

MARS = OrbitalElements(
    name='Mars',
    a=1.52371243,
    e=0.09336511,
    I=1.85181869,
    L=-4.56813164,
    lon_periapsis=-23.91744784,
    Omega=49.71320984,
    adot=0.00000097,
    edot=0.00009149,
    Idot=-0.00724757,
    Ldot=19140.29934243,
    lon_periapsis_dot=0.45223625,
    Omega_dot=-0.26852431,
)

JUPITER = OrbitalElements(
    name='Jupiter',
    a=5.20248019,
    e=0.04853590,
    I=1.29861416,
    L=34.33479152,
    lon_periapsis=14.27495244,
    Omega=100.29282654,
    adot=-0.00002864,
    edot=0.00018026,
    Idot=-0.00322699,
    Ldot=3034.90371757,
    lon_periapsis_dot=0.18199196,
    Omega_dot=0.13024619,
    b=-0.00012452,
    c=0.06064060,
    s=-0.35635438,
    f=38.35125000,
)

SATURN = OrbitalElements(
    name='Saturn',
    a=9.54149883,
    e=0.05550825,
    I=2.49424102,
    L=50.07571329,
    lon_periapsis=92.86136063,
    Omega=113.63998702,
    adot=-0.00003065,
    edot=-0.00032044,
    Idot=0.00451969,
    Ldot=1222.11494724,
    lon_periapsis_dot=0.54179478,
    Omega_dot=-0.25015002,
    b=0.00025899,
    c=-0.13434469,
    s=0.87320147,
    f=38.35125000,
)

URANUS = OrbitalElements(
    name='Uranus',
    a=19.18797948,
    e=0.04685740,
    I=0.77298127,
    L=314.20276625,
    lon_periapsis=172.43404441,
    Omega=73.96250215,
    adot=-0.00020455,
    edot=-0.00001550,
    Idot=-0.00180155,
    Ldot=428.49512595,
    lon_periapsis_dot=0.09266985,
    Omega_dot=0.05739699,
    b=0.00058331,
    c=-0.97731848,
    s=0.17689245,
    f=7.67025000,
)

NEPTUNE = OrbitalElements(
    name='Neptune',
    a=30.06952752,
    e=0.00895439,
    I=1.77005520,
    L=304.22289287,
    lon_periapsis=46.68158724,
    Omega=131.78635853,
    adot=0.00006447,
    edot=0.00000818,
    Idot=0.00022400,
    Ldot=218.46515314,
    lon_periapsis_dot=0.01009938,
    Omega_dot=-0.00606302,
    b=-0.00041348,
    c=0.68346318,
    s=-0.10162547,
    f=7.67025000,
)

LONG_RANGE = ElementTable(
    name='long-range',
    description='JPL Tables 2a/2b (3000 BC - 3000 AD)',
    valid_from_year=-3000,
    valid_to_year=3000,
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
