"""The simulation engine: points, constraints and rectangular obstacles."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import replace
from enum import IntEnum
from pathlib import Path
from typing import TypeVar

import pygame

from verletsim.constraint import ConstraintType, PhysicConstraint
from verletsim.point import Color, OnUpdate, Point, UpdateContext, Vec2
from verletsim.rectangle import IntRect, Rectangle

GRAVITY = Vec2(0.0, 10.0)
ACC_DAMPING = 0.97

_T = TypeVar("_T")


class Collision(IntEnum):
    """Which side of a rectangle a circle hits."""

    NONE = 0
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4


def circle_rect_collision(rect: IntRect, center: Vec2, radius: float) -> Collision:
    """Return the side of ``rect`` that the circle at ``center`` touches."""
    bx, by = center.x, center.y
    rx, ry = float(rect.left), float(rect.top)
    sx, sy = float(rect.width), float(rect.height)
    distances = [
        abs(by + radius - ry),
        abs(by - radius - (ry + sy)),
        abs(bx + radius - rx),
        abs(bx - radius - (rx + sx)),
    ]
    nearest = min(range(len(distances)), key=distances.__getitem__)
    overlaps = (
        bx + radius > rx
        and bx - radius < rx + sx
        and by + radius > ry
        and by - radius < ry + sy
    )
    if distances[nearest] < radius and overlaps:
        return Collision(nearest + 1)
    return Collision.NONE


def _checked(items: Sequence[_T], index: int, what: str) -> _T:
    if not 0 <= index < len(items):
        raise IndexError(f"{what} index {index} out of range")
    return items[index]


class PointEngine:
    """Holds the simulated points, their constraints and the obstacles."""

    DISTANCE_CONSTRAINT_MIN = ConstraintType.MIN
    DISTANCE_CONSTRAINT_MAX = ConstraintType.MAX
    DISTANCE_CONSTRAINT_MINMAX = ConstraintType.MINMAX

    def __init__(self) -> None:
        self.points: list[Point] = []
        self.constraints: list[PhysicConstraint] = []
        self.rectangles: list[Rectangle] = []

    # Points

    def add_point(
        self,
        pos: Vec2,
        is_static: bool = False,
        should_collide: bool = True,
        radius: float = 1.0,
        friction: float = 0.0,
        color: Color | None = None,
        on_update: OnUpdate | None = None,
    ) -> int:
        """Add a point and return its index."""
        point = Point(pos, radius, is_static, should_collide, friction)
        if color is not None:
            point.color = color
        if on_update is not None:
            point.on_update = on_update
        self.points.append(point)
        return len(self.points) - 1

    def remove_point(self, index: int) -> None:
        """Remove a point, shifting constraint indexes and dropping its constraints.

        Indexes out of range are ignored.
        """
        if not 0 <= index < len(self.points):
            return
        for c in self.constraints:
            if c.first > index:
                c.first -= 1
            if c.second > index:
                c.second -= 1
        self.remove_constraints(index)
        del self.points[index]

    def point(self, index: int) -> Point:
        """The point at ``index`` (the live object, not a copy)."""
        return _checked(self.points, index, "point")

    def point_index_at(self, pos: Vec2) -> int | None:
        """Index of the first point whose disc contains ``pos``, or None."""
        for i, p in enumerate(self.points):
            if (p.pos - pos).length() < p.radius:
                return i
        return None

    def point_count(self) -> int:
        """Number of points."""
        return len(self.points)

    # Constraints

    def add_constraint(
        self,
        i1: int,
        i2: int,
        constraint_type: ConstraintType = ConstraintType.MIN,
        distance: float = 0.0,
        visible: bool | None = None,
    ) -> bool:
        """Link points ``i1`` and ``i2``; return whether a constraint was added.

        A distance of zero means the points' current distance. When
        ``visible`` is given, an existing constraint on the same ordered
        pair prevents a duplicate; when it is omitted the constraint is
        visible and always added.
        """
        p1 = _checked(self.points, i1, "point")
        p2 = _checked(self.points, i2, "point")
        if visible is not None:
            if any(c.indexes == (i1, i2) for c in self.constraints):
                return False
        else:
            visible = True
        if distance == 0:
            distance = (p1.pos - p2.pos).length()
        self.constraints.append(
            PhysicConstraint((i1, i2), ConstraintType(constraint_type), distance, visible)
        )
        return True

    def remove_constraints(self, index: int) -> None:
        """Drop every constraint that involves the point at ``index``."""
        self.constraints = [
            c for c in self.constraints if index not in (c.first, c.second)
        ]

    def constraint(self, index: int) -> PhysicConstraint:
        """A copy of the constraint at ``index``."""
        return replace(_checked(self.constraints, index, "constraint"))

    def constraint_count(self) -> int:
        """Number of constraints."""
        return len(self.constraints)

    # Rectangles

    def add_rectangle(self, rect: IntRect, texture_path: str | Path | None = None) -> None:
        """Add an obstacle rectangle, optionally textured."""
        self.rectangles.append(Rectangle(rect, texture_path))

    def remove_rectangle(self, index: int) -> None:
        """Remove the rectangle at ``index``; out-of-range indexes are ignored."""
        if 0 <= index < len(self.rectangles):
            del self.rectangles[index]

    # Simulation

    def update_point_pos(self, dt: float, mousepos: Vec2) -> None:
        """Advance every point one Verlet step and run its update callback."""
        for index, p in enumerate(self.points):
            curr_pos = p.pos
            curr_old_pos = p.old_pos
            curr_acc = p.acc
            p.add_acc(GRAVITY)
            p.acc = p.acc * ACC_DAMPING
            new_pos = curr_pos * 2.0 - curr_old_pos + curr_acc * dt * dt
            p.old_pos = curr_pos
            p.set_pos(new_pos, False)
            p.args = p.on_update(UpdateContext(self, mousepos, p.args, index))

    def apply_constraints(self, substeps: int) -> None:
        """Relax every constraint ``substeps`` times."""
        for _ in range(substeps):
            for c in self.constraints:
                p1 = self.points[c.first]
                p2 = self.points[c.second]
                direction = p1.pos - p2.pos
                dist = direction.length()
                if dist != 0:
                    direction = direction / dist
                diff = dist - c.distance
                ratio = 1.0 if (p1.is_static or p2.is_static) else 0.5

                if c.kind is ConstraintType.MIN:
                    if dist >= c.distance:
                        continue
                    fixed1 = p2.pos + direction * diff * -ratio
                    fixed2 = p1.pos - direction * diff * ratio
                elif c.kind is ConstraintType.MAX:
                    if dist <= c.distance:
                        continue
                    fixed1 = p2.pos + direction * diff * -ratio
                    fixed2 = p1.pos - direction * diff * ratio
                else:
                    if dist == c.distance:
                        continue
                    fixed1 = p1.pos - direction * diff * ratio
                    fixed2 = p2.pos + direction * diff * ratio
                p1.set_pos(fixed1, False)
                p2.set_pos(fixed2, False)

    def apply_collisions(self, substeps: int) -> None:
        """Resolve point-point and point-rectangle collisions ``substeps`` times."""
        for _ in range(substeps):
            for p_index, p in enumerate(self.points):
                for i, other in enumerate(self.points):
                    if i == p_index or not (p.should_collide and other.should_collide):
                        continue
                    combined = p.radius + other.radius
                    direction = p.pos - other.pos
                    dist = direction.length()
                    if dist == 0 or dist >= combined:
                        continue
                    direction = direction / dist
                    overlap = combined - dist
                    fixed1 = p.pos + direction * (overlap * other.radius / p.radius)
                    fixed2 = other.pos - direction * (overlap * p.radius / other.radius)
                    p.set_pos(fixed1, False)
                    other.set_pos(fixed2, False)

                center = p.pos
                for rectangle in self.rectangles:
                    rect = rectangle.rect
                    hit = circle_rect_collision(rect, center, p.radius)
                    if hit is Collision.UP:
                        p.set_pos(Vec2(p.pos.x, rect.top - p.radius), False)
                        vel = p.old_pos.x - p.pos.x
                        p.acc = Vec2(vel * p.friction, 0.0)
                    elif hit is Collision.RIGHT:
                        p.set_pos(Vec2(rect.right() + p.radius, p.pos.y), False)
                        p.acc = Vec2(0.0, p.acc.y)
                    elif hit is Collision.LEFT:
                        p.set_pos(Vec2(rect.left - p.radius, p.pos.y), False)
                        p.acc = Vec2(0.0, p.acc.y)

    # Drawing

    def display(self, surface: pygame.Surface, color: Color | None = None) -> None:
        """Draw points, visible constraints and rectangles on ``surface``."""
        for p in self.points:
            pygame.draw.circle(surface, p.color, (p.pos.x, p.pos.y), p.radius)
        for c in self.constraints:
            if not c.visible:
                continue
            p1 = self.points[c.first]
            p2 = self.points[c.second]
            pygame.draw.line(surface, p1.color, tuple(p1.pos), tuple(p2.pos))
        for rectangle in self.rectangles:
            rectangle.draw(surface)

    def display_as_rects(self, surface: pygame.Surface, color: Color, width: float) -> None:
        """Draw every constraint as a bar of ``width`` and the rectangles in ``color``."""
        for c in self.constraints:
            start = self.points[c.first].pos
            end = self.points[c.second].pos
            diff = end - start
            dist = diff.length()
            if dist == 0:
                continue
            normal = Vec2(-diff.y, diff.x) * (width / 2.0 / dist)
            corners = [start + normal, end + normal, end - normal, start - normal]
            pygame.draw.polygon(surface, color, [tuple(v) for v in corners])
        for rectangle in self.rectangles:
            r = rectangle.rect
            area = pygame.Rect(r.left, r.top, r.width, r.height)
            if rectangle.texture is not None:
                scaled = pygame.transform.scale(
                    rectangle.texture, (max(r.width, 0), max(r.height, 0))
                )
                surface.blit(scaled, area.topleft)
            else:
                pygame.draw.rect(surface, color, area)