"""Element source contract and the table implementation shared by both JPL tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from approx_ephemeris.constants import BODY_ALIASES, BODY_NUM_TO_NAME
from approx_ephemeris.elements import OrbitalElements


def canonical_body_name(value: str) -> str:
    """Normalize a body specifier to its table key.

    Accepts names (case-insensitive), aliases such as 'earth', or planet
    numbers 1-8 (Mercury..Neptune).

    Raises:
        ValueError: If value is a number outside 1-8.
    """
    v = value.strip()
    try:
        num = int(v)
    except ValueError:
        key = ' '.join(v.lower().split())
        return BODY_ALIASES.get(key, key.replace(' ', '_'))
    if num in BODY_NUM_TO_NAME:
        return BODY_NUM_TO_NAME[num]
    raise ValueError(f'body number must be 1-8, got {num}')


@runtime_checkable
class ElementSource(Protocol):
    """Anything that can look up J2000 element records by body name."""

    name: str
    description: str
    valid_from_year: int
    valid_to_year: int

    def bodies(self) -> list[str]: ...

    def elements(self, body: str) -> OrbitalElements: ...


@dataclass(frozen=True)
class ElementTable:
    """Named set of element records with a stated validity window (years AD; negative = BC)."""

    name: str
    description: str
    valid_from_year: int
    valid_to_year: int
    records: dict[str, OrbitalElements] = field(default_factory=dict)

    def bodies(self) -> list[str]:
        """Body names in table order."""
        return list(self.records)

    def elements(self, body: str) -> OrbitalElements:
        """Return the element record for body (name, alias, or number).

        Raises:
            ValueError: If the body is not in this table.
        """
        key = canonical_body_name(body)
        try:
            return self.records[key]
        except KeyError:
            raise ValueError(
                f'Unknown body {body!r} in {self.name} table; use one of: '
                + ', '.join(self.records)
            ) from None

    def covers_year(self, year: float) -> bool:
        """True if year lies inside the table's validity window."""
        return self.valid_from_year <= year <= self.valid_to_year

    def __contains__(self, body: object) -> bool:
        if not isinstance(body, str):
            return False
        try:
            return canonical_body_name(body) in self.records
        except ValueError:
            return False
