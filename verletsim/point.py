"""Points of the simulation and the vector type they use."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from verletsim.engine import PointEngine

Color = tuple[int, int, int, int]


@dataclass(frozen=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vec2:
        return self * scalar

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)


@dataclass
class UpdateContext:
    """What a point's update callback receives on each step."""

    engine: PointEngine
    mousepos: Vec2
    args: list[Any]
    index: int


OnUpdate = Callable[[UpdateContext], list]


def _no_update(ctx: UpdateContext) -> list:
    return []


@dataclass
class Point:
    """A simulated particle integrated with Verlet steps."""

    pos: Vec2
    radius: float
    is_static: bool = False
    should_collide: bool = True
    friction: float = 0.0
    on_update: OnUpdate = _no_update
    color: Color = (0, 0, 0, 255)
    old_pos: Vec2 = field(init=False)
    acc: Vec2 = field(default_factory=Vec2)
    args: list[Any] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.old_pos = self.pos

    def set_pos(self, pos: Vec2, override_static: bool = False) -> None:
        """Place the point at ``pos`` unless it is static and not overridden."""
        if self.is_static and not override_static:
            return
        self.pos = pos

    def move(self, offset: Vec2, override_static: bool = False) -> None:
        """Shift the point by ``offset``, remembering where it was."""
        if self.is_static and not override_static:
            return
        self.old_pos = self.pos
        self.pos = self.pos + offset

    def add_acc(self, offset: Vec2) -> None:
        """Add ``offset`` to the accumulated acceleration."""
        self.acc = self.acc + offset