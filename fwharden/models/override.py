"""Data model for a systemd unit override (drop-in) file."""

from dataclasses import dataclass
from typing import List, Tuple

from ..utils.constants import HARDENING_DIRECTIVES, OVERRIDE_SECTION

Directive = Tuple[str, str]


@dataclass(frozen=True)
class OverrideConfig:
    """An ordered block of directives under a single section header.

    Attributes:
        directives: Ordered (key, value) pairs; a key may appear more than once
        section: Section name without brackets (e.g. 'Service')
    """

    directives: Tuple[Directive, ...]
    section: str = OVERRIDE_SECTION

    def __post_init__(self):
        """Validate the override after initialization."""
        if not self.section:
            raise ValueError("Section name cannot be empty")

        for key, value in self.directives:
            if not key or "=" in key or key != key.strip():
                raise ValueError(f"Invalid directive key: {key!r}")
            if "\n" in value:
                raise ValueError(f"Directive {key} value cannot span lines")

    @property
    def header(self) -> str:
        return f"[{self.section}]"

    def lines(self) -> List[str]:
        """Get the directive lines in file order.

        Returns:
            List of 'Key=Value' strings
        """
        return [f"{key}={value}" for key, value in self.directives]

    def render(self) -> str:
        """Render the override file content.

        Returns:
            Section header followed by one 'Key=Value' line per directive
        """
        return "\n".join([self.header] + self.lines()) + "\n"

    def diff(self, other: "OverrideConfig") -> List[Tuple[str, str]]:
        """Compare directive lines with another override.

        Lines only in this override are reported with '-', lines only in
        the other with '+'. Ordering differences alone are not reported.

        Args:
            other: Override to compare against

        Returns:
            List of (marker, line) tuples
        """
        differences = []
        if self.section != other.section:
            differences.append(("-", self.header))
            differences.append(("+", other.header))

        ours = self.lines()
        theirs = other.lines()
        remaining = list(theirs)
        for line in ours:
            if line in remaining:
                remaining.remove(line)
            else:
                differences.append(("-", line))
        for line in remaining:
            differences.append(("+", line))

        return differences

    @classmethod
    def from_text(cls, text: str) -> "OverrideConfig":
        """Parse a rendered override block.

        Args:
            text: File content with exactly one section header

        Returns:
            OverrideConfig instance

        Raises:
            ValueError: If the text is not a single-section key=value block
        """
        section = None
        directives = []

        for number, raw in enumerate(text.splitlines(), start=1):
            line = raw.strip()
            if not line or line.startswith(("#", ";")):
                continue

            if line.startswith("[") and line.endswith("]"):
                if section is not None:
                    raise ValueError(f"Line {number}: unexpected second section {line}")
                section = line[1:-1]
                continue

            if section is None:
                raise ValueError(f"Line {number}: directive before section header")
            if "=" not in line:
                raise ValueError(f"Line {number}: expected Key=Value, got {line!r}")

            key, value = line.split("=", 1)
            directives.append((key.strip(), value.strip()))

        if section is None:
            raise ValueError("Missing section header")

        return cls(directives=tuple(directives), section=section)


HARDENING_OVERRIDE = OverrideConfig(directives=HARDENING_DIRECTIVES)
