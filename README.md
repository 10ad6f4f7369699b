# verletsim

A small 2D physics engine built on Verlet integration. It simulates circular
point masses that fall under gravity, collide with each other and with static
axis-aligned rectangles, and are held together by distance constraints.
Drawing is done onto a `pygame` surface that you supply.

## Installation

```
pip install .
```

## Modules

- `verletsim.point`
  - `Vec2` – an immutable 2D vector supporting `+`, `-`, `*` and `/` by a
    scalar, unary `-`, iteration (`x, y = v`) and `length()`.
  - `Point` – a point mass with `pos`, `old_pos`, `acc`, `radius`,
    `is_static`, `should_collide`, `friction`, `color` (an RGBA tuple,
    black by default), `args` and an `on_update` callback.
    `set_pos(pos, override_static)` and `move(offset, override_static)` do
    nothing to a static point unless `override_static` is true;
    `add_acc(offset)` adds to the acceleration.
  - `UpdateContext` – what an `on_update` callback receives: the `engine`,
    the `mousepos`, the point's current `args` and its `index`. Whatever the
    callback returns becomes the point's new `args`.
- `verletsim.constraint`
  - `ConstraintType` – `MIN`, `MAX` or `MINMAX` (a rigid link).
  - `PhysicConstraint` – `indexes` (a pair of point indexes, also reachable as
    `first` and `second`), `kind`, `distance` and `visible`.
- `verletsim.rectangle`
  - `IntRect` – an integer rectangle (`left`, `top`, `width`, `height`) with
    `right()` and `bottom()`.
  - `Rectangle` – an obstacle holding an `IntRect` and an optional texture.
    `set_texture(path)` loads an image with pygame and returns whether it
    worked (failures are logged, not raised); `has_texture` tells you the
    result. `draw(surface)` draws the stretched texture, or a white rectangle.
- `verletsim.engine`
  - `PointEngine` – owns the points, constraints and rectangles and steps the
    simulation.
  - `Collision` and `circle_rect_collision(rect, center, radius)` – which side
    (`UP`, `DOWN`, `LEFT`, `RIGHT`, or `NONE`) of a rectangle a circle touches.

## The engine

- `add_point(pos, is_static, should_collide, radius, friction, color, on_update)`
  adds a point and returns its index. All but `pos` have defaults.
- `remove_point(index)` removes a point, drops every constraint that uses it
  and shifts the indexes of the remaining constraints. Out-of-range indexes
  are ignored.
- `add_constraint(i1, i2, constraint_type, distance, visible)` links two
  points. A `distance` of `0` means the points' current distance. When
  `visible` is passed, a constraint already on the same ordered pair
  `(i1, i2)` is not duplicated and `False` is returned; when it is left out the
  constraint is visible and always added. Bad point indexes raise `IndexError`.
- `remove_constraints(index)` drops every constraint involving a point.
- `point(index)` returns the live point; `constraint(index)` returns a copy.
  Both raise `IndexError` for a bad index.
- `point_index_at(pos)` returns the index of the first point whose disc
  contains `pos`, or `None`.
- `point_count()`, `constraint_count()`.
- `add_rectangle(rect, texture_path=None)`, `remove_rectangle(index)` (an
  out-of-range index is ignored).
- `update_point_pos(dt, mousepos)` does one Verlet step for every point and
  runs its `on_update` callback. Gravity is `(0, 10)` and the acceleration is
  damped by `0.97` each step.
- `apply_constraints(substeps)` and `apply_collisions(substeps)` relax the
  constraints and resolve collisions that many times. Landing on top of a
  rectangle sets the point's horizontal acceleration from its velocity and
  `friction`.
- `display(surface, color=None)` draws points, visible constraints (in the
  first point's colour) and rectangles. `color` is accepted but not used.
- `display_as_rects(surface, color, width)` draws every constraint as a filled
  bar of the given width, and untextured rectangles, in `color`.

## Example

```python
import pygame

from verletsim.constraint import ConstraintType
from verletsim.engine import PointEngine
from verletsim.point import Vec2
from verletsim.rectangle import IntRect

white = (255, 255, 255, 255)
engine = PointEngine()
engine.add_point(Vec2(200, 100), is_static=True, should_collide=False,
                 radius=5, friction=0.5, color=white)
engine.add_point(Vec2(260, 100), is_static=False, should_collide=True,
                 radius=5, friction=0.5, color=white)
engine.add_constraint(0, 1, ConstraintType.MINMAX, 0)
engine.add_rectangle(IntRect(0, 400, 640, 40))

pygame.init()
screen = pygame.display.set_mode((640, 480))
clock = pygame.time.Clock()
running = True
while running:
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            running = False
    dt = clock.tick(60) / 1000
    engine.update_point_pos(dt, Vec2(*pygame.mouse.get_pos()))
    engine.apply_constraints(8)
    engine.apply_collisions(8)
    screen.fill((0, 0, 0))
    engine.display(screen)
    pygame.display.flip()
pygame.quit()
```

## What it does not do

The package is a library only. It has no command and opens no window of its
own: creating the pygame display, handling input and running the frame loop
are left to your program, as in the example above. It also has no way to save
or load a scene.

## Running the tests

```
pip install ".[test]"
pytest
```