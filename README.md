# particles

A small interactive animation. A left click releases a burst of five
colourful polygons. Each one spins, shrinks slowly and flies off under
gravity. It is removed once its five-second lifetime has run out.

All motion is done with small 2D matrices. `particles.matrices` provides a
`Matrix` type with addition, multiplication, tolerant comparison and
printing, plus three ready-made transforms: `RotationMatrix`,
`ScalingMatrix` and `TranslationMatrix`.

## Installing

```
pip install .
```

This also installs `pygame`.

## Running

```
particles
```

The command opens a window the size of the desktop. Before the animation
starts it runs a short self-check of the matrix transforms and particle
movements, and prints a score out of 7.

- Left click: release a burst of particles at the pointer.
- Escape, or closing the window: quit.

## Using the pieces

### Matrices

```python
import math
from particles.matrices import Matrix, RotationMatrix, TranslationMatrix

points = Matrix(2, 3)
points[0, 0], points[1, 0] = 1.0, 0.0
points[0, 1], points[1, 1] = 0.0, 1.0
points[0, 2], points[1, 2] = -1.0, 0.0

rotated = RotationMatrix(math.pi / 2) * points
shifted = TranslationMatrix(10, 5, 3) + rotated
print(shifted)
```

Elements are read and written with a `(row, column)` pair; an index outside
the matrix raises `IndexError`. `rows` and `cols` give the shape, and
`copy()` returns an independent `Matrix`. Two matrices compare equal when
they have the same shape and every pair of elements differs by less than
0.001. Adding or multiplying matrices whose shapes do not fit raises
`ValueError`.

### Particles

A `particles.particle.Particle` can be built and stepped without a window,
which is useful for tests. Pass a `random.Random` to make its shape, colour,
spin and speed repeatable:

```python
import random
from particles.particle import Particle

p = Particle((800, 600), 30, (400, 300), random.Random(1))
p.update(1 / 60)
print(p.ttl, p.pixel_points()[:3])
```

`rotate`, `scale` and `translate` move the shape about its centre,
`pixel_points()` returns the window pixels of the centre followed by each
outer point, and `draw(surface)` paints it on a pygame surface.
`self_test(out)` runs the same checks the command runs at start-up, writes
the report to `out` and returns the score.

The helpers `map_pixel_to_coords` and `map_coords_to_pixel` convert between
window pixels and Cartesian coordinates centred on the window with y
pointing up.

### Engine

`particles.engine.Engine` holds the particle list and an off-screen
surface, so it can also be driven without opening a window:

```python
import random
from particles.engine import Engine

engine = Engine((800, 600), random.Random(0))
engine.spawn((400, 300))
engine.update(1 / 60)
surface = engine.draw()
```

`handle_events(events)` applies pygame events (quit, Escape, left click)
and returns whether the engine keeps running. `run()` opens the window and
loops until it is closed.

## Tests

```
pip install .[test]
pytest
```