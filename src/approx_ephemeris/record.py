"""Fixed-width ephemeris row builder."""

from __future__ import annotations

import math
from typing import TextIO


class Record:
    """Row buffer: fields are joined with a single blank and written as one line."""

    def __init__(self, max_length: int = 512) -> None:
        self._fields: list[str] = []
        self._max_length = max_length

    def init(self) -> None:
        """Clear the row."""
        self._fields = []

    def _length(self) -> int:
        return sum(len(f) for f in self._fields) + max(len(self._fields) - 1, 0)

    def append(self, string: str) -> None:
        """Append a text field; fields past max_length are truncated."""
        remaining = self._max_length - self._length() - (1 if self._fields else 0)
        if remaining <= 0:
            return
        self._fields.append(string[:remaining])

    def append_number(self, value: float, width: int, decimals: int) -> None:
        """Append a right-aligned fixed-point number; NaN is written as 'NaN'."""
        if math.isnan(value):
            self.append(f'{"NaN":>{width}}')
        else:
            self.append(f'{value:{width}.{decimals}f}')

    def append_degrees(self, radians: float, width: int = 11, decimals: int = 6) -> None:
        """Append an angle given in radians, formatted in degrees."""
        self.append_number(math.degrees(radians), width, decimals)

    def write(self, stream: TextIO) -> None:
        """Write the current row (if non-blank) and clear it."""
        line = self.get_line()
        if line:
            stream.write(line + '\n')
        self.init()

    def get_line(self) -> str:
        """Return the current row without writing or clearing it."""
        return ' '.join(self._fields).rstrip()
