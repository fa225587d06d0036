"""Generic header field container.

Holds the raw value instances of one header field in arrival order and
knows nothing about their grammar. Several "Route:" lines and one
comma-joined "Route:" line are both kept as-is; grammar modules decide how
to split them.
"""

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Header:
    """One header field: its name and the raw values seen for it."""

    name: str
    values: tuple[str, ...] = ()

    @classmethod
    def new(cls, name: str) -> "Header":
        return cls(name=name)

    @classmethod
    def from_lines(cls, name: str, lines: Iterable[str]) -> "Header":
        """Build a header from raw message lines.

        Lines of the form ``Name: value`` whose name matches (case-insensitive)
        contribute their value; lines without a header-name prefix are taken
        as bare values. Blank lines are skipped.
        """
        header = cls.new(name)
        for line in lines:
            line = line.strip()
            if not line:
                continue
            prefix, sep, value = line.partition(":")
            if sep and prefix.strip().lower() == name.lower():
                line = value.strip()
            header = header.add_value(line)
        return header

    def add_value(self, value: str) -> "Header":
        """Return a new header with value appended."""
        return Header(name=self.name, values=self.values + (value,))

    @property
    def raw_values(self) -> tuple[str, ...]:
        return self.values

    @property
    def is_empty(self) -> bool:
        return not self.values

    def name_matches(self, name: str) -> bool:
        return self.name.lower() == name.lower()

    def assemble(self) -> str:
        """Render as a single comma-joined header line."""
        return f"{self.name}: {', '.join(self.values)}"

    def assemble_lines(self) -> list[str]:
        """Render one header line per raw value."""
        return [f"{self.name}: {value}" for value in self.values]
