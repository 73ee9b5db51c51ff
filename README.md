# naviz

Building blocks for animating atoms in neutral-atom quantum computer
visualisations: 2D positions, RGBA colours, interpolation functions and
keyframe timelines. The package has no dependencies beyond the standard
library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `naviz.position`

`Position(x, y)` is an immutable 2D point. Both coordinates default to `0.0`,
and any real number, `fractions.Fraction` included, is stored as a float.
`position * factor` scales a point and `a + b` adds two points.
`as_tuple()` returns the plain `(x, y)` pair.

### `naviz.color`

`Color(r, g, b, a)` is an immutable RGBA colour. Each channel is an integer
in `0..=255`, and any other value raises `ValueError`. A colour can be
iterated, indexed and passed to `len()`, which returns 4.

- `top.over(base)` composites `top` over `base` using integer arithmetic. If
  the resulting alpha is 0, the result is `Color(0, 0, 0, 0)`.
- `color * factor` scales every channel. Results are clamped to `0..=255`,
  and NaN becomes 0.
- `a + b` adds channel by channel and saturates at 255.

### `naviz.to_float`

`to_float(value)` converts any real number, such as a `fractions.Fraction`,
to a float. Any other value is converted through its string form. If that
string is not a valid number, `ValueError` is raised.

### `naviz.interpolator`

Every interpolator has the method
`interpolate(fraction, argument, from_, to)`, where `fraction` is the
normalised progress in `[0, 1]`. Each one also has an `ENDPOINT`, an
`Endpoint.FROM` or `Endpoint.TO`, which gives the value held once the
interpolation has finished. `Endpoint.get(from_, to)` returns the value that
the endpoint selects.

- `Constant`: jumps straight to `to`. The argument sets when the jump
  happens:
  - `None` jumps at the start.
  - `ConstantTransitionPoint.START` returns `to`.
  - `ConstantTransitionPoint.END` returns `from_`.
  - A number jumps once `fraction` reaches it.
- `Linear`: interpolates linearly.
- `Triangle`: goes linearly to `to` in the first half and back to `from_` in
  the second half. Its endpoint is `FROM`.
- `Cubic`: cubic ease-in-out.

Three constant-jerk movement profiles work on floats. Each also has
`duration(argument, from_, to)` and the parameter methods `j0`, `t_total`,
`s0` and `v0`.

- `ConstantJerk`: the argument is the jerk.
- `ConstantJerkFixedMaxVelocity`: the argument is the maximum velocity.
- `ConstantJerkFixedAverageVelocity`: the argument is the average velocity.
  With `None` as the argument, the velocity cancels out and the move's
  duration equals its distance. This is the form to use inside a timeline.

Wrappers that interpolate `Position` values:

- `Diagonal(inner)`: moves along the straight line from `from_` to `to`.
- `ComponentWise(inner)`: interpolates `x` and `y` separately over the same
  duration. The argument is a pair `(argument_x, argument_y)`.
- `ComponentWiseMinTime(inner)`: interpolates `x` and `y` separately, and
  each component takes only the time it needs.

`FixedArgument(argument, interpolator)` always passes the same argument to
the interpolator it wraps.

Helper functions:

- `distance(a, b)`
- `average_velocity_for_2d_move(source, destination, time)`
- `jerk_for_move(from_, to, duration)`
- `jerk_for_diagonal_move(from_, to, duration)`

### `naviz.timeline`

`Keyframe(time, duration=None, argument=None, value=None)` is ordered by its
time alone. A duration of `None` is stored as `0.0`.

`Timeline(default, interpolation_function)` keeps its keyframes sorted by
time:

- `add(keyframe)` inserts a single keyframe.
- `add_all(keyframes)` inserts several keyframes.
- `get(time)` returns the interpolated value at `time`. Before the first
  keyframe it returns `default`.

Both `add` and `add_all` return the timeline, so calls can be chained. Each
accepts a `Keyframe` or one of these tuples:

- `(time, value)`
- `(time, duration, value)`
- `(time, duration, argument, value)`

Any other tuple raises `ValueError`. `keyframes` gives the sorted keyframes,
and `len()` gives how many there are.

A keyframe's value starts at the keyframe's time. It is interpolated for the
keyframe's duration and then held until the next keyframe. If a keyframe
starts while an earlier one is still interpolating, the new keyframe takes
over.

## Example

```python
from naviz.interpolator import ConstantJerkFixedAverageVelocity, Diagonal
from naviz.position import Position
from naviz.timeline import Keyframe, Timeline

path = Timeline(Position(0.0, 0.0), Diagonal(ConstantJerkFixedAverageVelocity()))
path.add(Keyframe(time=1.0, duration=2.0, value=Position(3.0, 4.0)))

path.get(0.5)   # Position(x=0.0, y=0.0): before the first keyframe
path.get(2.0)   # Position(x=1.5, y=2.0): halfway along the move
path.get(10.0)  # Position(x=3.0, y=4.0): the move has finished
```

## What this package does not do

This package provides only the primitives listed above. It does not:

- read machine, style or instruction files;
- build an animation of whole atom arrays from instructions;
- draw frames;
- export video;
- provide a command-line tool.