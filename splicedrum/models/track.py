"""
Track record data model for .splice patterns.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

# Steps per track record (one bar of sixteenth notes)
STEP_COUNT = 16

# Steps per bar group in the rendered grid
STEPS_PER_GROUP = 4

BAR = "|"
ACTIVE = "x"
INACTIVE = "-"


def render_steps(steps: Sequence[bool]) -> str:
    """
    Render a step sequence as a bar-delimited grid.

    Args:
        steps: Exactly 16 step flags

    Returns:
        Grid string like "|x---|x---|x---|x---|"

    Raises:
        ValueError: If the sequence does not hold 16 steps
    """
    if len(steps) != STEP_COUNT:
        raise ValueError(f"Expected {STEP_COUNT} steps, got {len(steps)}")

    parts = [BAR]
    for index, active in enumerate(steps):
        parts.append(ACTIVE if active else INACTIVE)
        if index % STEPS_PER_GROUP == STEPS_PER_GROUP - 1:
            parts.append(BAR)
    return "".join(parts)


@dataclass(frozen=True)
class TrackRecord:
    """
    One instrument's step sequence.

    Attributes:
        id: Instrument id (0-255, not unique)
        name: Instrument label, raw bytes decoded as latin-1
        steps: 16 step flags, True = active
    """

    id: int
    name: str
    steps: Tuple[bool, ...]

    def __post_init__(self):
        steps = tuple(bool(step) for step in self.steps)
        if len(steps) != STEP_COUNT:
            raise ValueError(f"Track needs {STEP_COUNT} steps, got {len(steps)}")
        object.__setattr__(self, "steps", steps)

    @classmethod
    def from_step_bytes(cls, track_id: int, name: str, raw_steps: bytes) -> "TrackRecord":
        """Build a record from on-disk step bytes (a byte of 1 is active)."""
        return cls(id=track_id, name=name, steps=tuple(b == 1 for b in raw_steps))

    @property
    def active_steps(self) -> int:
        """Number of active steps."""
        return sum(self.steps)

    def render(self) -> str:
        """Render this track's steps as a grid."""
        return render_steps(self.steps)

    def to_line(self) -> str:
        """Format as a display line: "(id) name<TAB>grid"."""
        return f"({self.id}) {self.name}\t{self.render()}"
