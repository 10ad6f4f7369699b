"""Distance constraints linking pairs of simulated points."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class ConstraintType(IntEnum):
    """How a constraint restricts the distance between its two points."""

    MIN = 0
    MAX = 1
    MINMAX = 2


@dataclass
class PhysicConstraint:
    """A constraint between the points at ``indexes`` in an engine."""

    indexes: tuple[int, int] = (0, 0)
    kind: ConstraintType = ConstraintType.MIN
    distance: float = 0.0
    visible: bool = True

    def __post_init__(self) -> None:
        self.indexes = (int(self.indexes[0]), int(self.indexes[1]))
        self.kind = ConstraintType(self.kind)
        self.distance = float(self.distance)

    @property
    def first(self) -> int:
        """Index of the first constrained point."""
        return self.indexes[0]

    @first.setter
    def first(self, index: int) -> None:
        self.indexes = (index, self.indexes[1])

    @property
    def second(self) -> int:
        """Index of the second constrained point."""
        return self.indexes[1]

    @second.setter
    def second(self, index: int) -> None:
        self.indexes = (self.indexes[0], index)