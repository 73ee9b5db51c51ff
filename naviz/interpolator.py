"""Interpolation functions for animated values.

Every interpolator exposes ``interpolate(fraction, argument, from_, to)``
where ``fraction`` is the normalized progress in ``[0, 1]``. Interpolators
whose duration can be derived from their inputs also expose
``duration(argument, from_, to)``.

Jerk, maximum velocity and average velocity arguments are plain floats.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

from naviz.position import Position


class Endpoint(Enum):
    """Where an interpolation function ends up once it is finished."""

    FROM = "from"
    TO = "to"

    def get(self, from_: Any, to: Any) -> Any:
        """Select ``from_`` or ``to`` depending on this endpoint."""
        return from_ if self is Endpoint.FROM else to


class ConstantTransitionPoint(Enum):
    """When a :class:`Constant` interpolation switches its value."""

    START = "start"
    END = "end"


class Constant:
    """Constant interpolation: jumps from ``from_`` to ``to``.

    The ``argument`` selects the jump point: ``None`` jumps at the start,
    a :class:`ConstantTransitionPoint` jumps at start or end, and a number
    jumps once ``fraction`` reaches it.
    """

    ENDPOINT = Endpoint.TO

    def interpolate(self, fraction: float, argument: Any, from_: Any, to: Any) -> Any:
        if argument is None:
            return to
        if isinstance(argument, ConstantTransitionPoint):
            return to if argument is ConstantTransitionPoint.START else from_
        return to if fraction >= argument else from_


class Linear:
    """Linear interpolation from ``from_`` to ``to``."""

    ENDPOINT = Endpoint.TO

    def interpolate(self, fraction: float, argument: Any, from_: Any, to: Any) -> Any:
        return from_ * (1.0 - fraction) + to * fraction


class Triangle:
    """Goes linearly to ``to`` in the first half and back in the second."""

    ENDPOINT = Endpoint.FROM

    def interpolate(self, fraction: float, argument: Any, from_: Any, to: Any) -> Any:
        fraction *= 2.0
        if fraction >= 1.0:
            fraction = 1.0 - (fraction - 1.0)
        return from_ * (1.0 - fraction) + to * fraction


class Cubic:
    """Cubic ease-in-out interpolation."""

    ENDPOINT = Endpoint.TO

    def interpolate(self, fraction: float, argument: Any, from_: Any, to: Any) -> Any:
        if fraction < 0.5:
            eased = 4.0 * fraction**3
        else:
            eased = 1.0 - (-2.0 * fraction + 2.0) ** 3 / 2.0
        return Linear().interpolate(eased, None, from_, to)


def _constant_jerk_interpolate(
    impl: Any, fraction: float, argument: Any, from_: float, to: float
) -> float:
    """Evaluate ``s(t) = -j0/6 t^3 + v0 t + s0`` over ``[-t_total/2, t_total/2]``.

    The parameter methods of ``impl`` assume ``s_start < s_finish``;
    a move in the other direction is mirrored.
    """
    if from_ > to:
        return -_constant_jerk_interpolate(impl, fraction, argument, -from_, -to)
    if from_ == to:
        return from_
    j0 = impl.j0(argument, from_, to)
    v0 = impl.v0(argument, from_, to)
    s0 = impl.s0(argument, from_, to)
    t = (fraction - 0.5) * impl.t_total(argument, from_, to)
    return -j0 / 6.0 * t**3 + v0 * t + s0


class ConstantJerk:
    """Constant-jerk movement with the jerk given as argument."""

    ENDPOINT = Endpoint.TO

    def j0(self, argument: float, s_start: float, s_finish: float) -> float:
        return argument

    def t_total(self, argument: float, s_start: float, s_finish: float) -> float:
        base = 12.0 * (s_finish - s_start) / self.j0(argument, s_start, s_finish)
        if base < 0:
            return math.nan
        return base ** (1.0 / 3.0)

    def s0(self, argument: float, s_start: float, s_finish: float) -> float:
        return (s_start + s_finish) / 2.0

    def v0(self, argument: float, s_start: float, s_finish: float) -> float:
        j0 = self.j0(argument, s_start, s_finish)
        t_total = self.t_total(argument, s_start, s_finish)
        return j0 * t_total**2 / 8.0

    def interpolate(self, fraction: float, argument: float, from_: float, to: float) -> float:
        return _constant_jerk_interpolate(self, fraction, argument, from_, to)

    def duration(self, argument: float, from_: float, to: float) -> float:
        return self.t_total(argument, from_, to)


class ConstantJerkFixedMaxVelocity:
    """Constant-jerk movement with the maximum velocity given as argument."""

    ENDPOINT = Endpoint.TO

    def j0(self, argument: float, s_start: float, s_finish: float) -> float:
        v0 = self.v0(argument, s_start, s_finish)
        t_total = self.t_total(argument, s_start, s_finish)
        return v0 * 8.0 / t_total**2

    def t_total(self, argument: float, s_start: float, s_finish: float) -> float:
        return 3.0 / 2.0 * (s_finish - s_start) / self.v0(argument, s_start, s_finish)

    def s0(self, argument: float, s_start: float, s_finish: float) -> float:
        return (s_start + s_finish) / 2.0

    def v0(self, argument: float, s_start: float, s_finish: float) -> float:
        return argument

    def interpolate(self, fraction: float, argument: float, from_: float, to: float) -> float:
        return _constant_jerk_interpolate(self, fraction, argument, from_, to)

    def duration(self, argument: float, from_: float, to: float) -> float:
        return self.t_total(argument, from_, to)


class ConstantJerkFixedAverageVelocity:
    """Constant-jerk movement with the average velocity given as argument.

    With ``None`` as argument the average velocity cancels out and the
    move takes exactly its distance as duration; use that form in timelines.
    """

    ENDPOINT = Endpoint.TO

    def j0(self, argument: float | None, s_start: float, s_finish: float) -> float:
        if argument is None:
            return 12.0 / (s_finish - s_start) ** 2
        return 12.0 * argument**3 / (s_finish - s_start) ** 2

    def t_total(self, argument: float | None, s_start: float, s_finish: float) -> float:
        if argument is None:
            return s_finish - s_start
        return (s_finish - s_start) / argument

    def s0(self, argument: float | None, s_start: float, s_finish: float) -> float:
        return (s_start + s_finish) / 2.0

    def v0(self, argument: float | None, s_start: float, s_finish: float) -> float:
        if argument is None:
            return 3.0 / 2.0
        return 3.0 / 2.0 * argument

    def interpolate(
        self, fraction: float, argument: float | None, from_: float, to: float
    ) -> float:
        return _constant_jerk_interpolate(self, fraction, argument, from_, to)

    def duration(self, argument: float | None, from_: float, to: float) -> float:
        return self.t_total(argument, from_, to)


def distance(a: Position, b: Position) -> float:
    """Euclidean distance between two positions."""
    return math.hypot(a.x - b.x, a.y - b.y)


def average_velocity_for_2d_move(source: Position, destination: Position, time: float) -> float:
    """Average velocity of a move from ``source`` to ``destination`` in ``time``."""
    return distance(source, destination) / time


def jerk_for_move(from_: float, to: float, duration: float) -> float:
    """Jerk of a one-dimensional constant-jerk move taking ``duration``."""
    length = abs(to - from_)
    if length <= 0.0:
        return 0.0
    average_velocity = length / duration
    return ConstantJerkFixedAverageVelocity().j0(average_velocity, 0.0, length)


def jerk_for_diagonal_move(from_: Position, to: Position, duration: float) -> float:
    """Jerk of a straight-line move between two positions taking ``duration``."""
    return jerk_for_move(0.0, distance(from_, to), duration)


@dataclass(frozen=True)
class Diagonal:
    """Interpolates a :class:`Position` along the straight line to the target."""

    inner: Any
    ENDPOINT = Endpoint.TO

    def interpolate(self, fraction: float, argument: Any, from_: Position, to: Position) -> Position:
        length = distance(from_, to)
        if length <= 0.0:
            return from_
        axis = ((to.x - from_.x) / length, (to.y - from_.y) / length)
        s = self.inner.interpolate(fraction, argument, 0.0, length)
        return Position(from_.x + axis[0] * s, from_.y + axis[1] * s)

    def duration(self, argument: Any, from_: Position, to: Position) -> float:
        return self.inner.duration(argument, 0.0, distance(from_, to))


def _rescaled(fraction: float, numerator: float, denominator: float) -> float:
    if denominator == 0:
        return 1.0
    return min(fraction * numerator / denominator, 1.0)


@dataclass(frozen=True)
class ComponentWiseMinTime:
    """Interpolates ``x`` and ``y`` separately, each taking only its own time."""

    inner: Any
    ENDPOINT = Endpoint.TO

    def _times(self, argument: Any, from_: Position, to: Position) -> tuple[float, float]:
        tx = self.inner.duration(argument, min(from_.x, to.x), max(from_.x, to.x))
        ty = self.inner.duration(argument, min(from_.y, to.y), max(from_.y, to.y))
        return tx, ty

    def interpolate(self, fraction: float, argument: Any, from_: Position, to: Position) -> Position:
        tx, ty = self._times(argument, from_, to)
        if tx < ty:
            fx, fy = _rescaled(fraction, ty, tx), fraction
        else:
            fx, fy = fraction, _rescaled(fraction, tx, ty)
        x = self.inner.interpolate(fx, argument, from_.x, to.x)
        y = self.inner.interpolate(fy, argument, from_.y, to.y)
        return Position(x, y)

    def duration(self, argument: Any, from_: Position, to: Position) -> float:
        return max(self._times(argument, from_, to))


@dataclass(frozen=True)
class ComponentWise:
    """Interpolates ``x`` and ``y`` separately over the same duration.

    The argument is a pair holding the argument for ``x`` and for ``y``.
    """

    inner: Any
    ENDPOINT = Endpoint.TO

    def interpolate(
        self, fraction: float, argument: tuple[Any, Any], from_: Position, to: Position
    ) -> Position:
        argument_x, argument_y = argument
        x = self.inner.interpolate(fraction, argument_x, from_.x, to.x)
        y = self.inner.interpolate(fraction, argument_y, from_.y, to.y)
        return Position(x, y)


@dataclass(frozen=True)
class FixedArgument:
    """Wraps an interpolator and always passes it the same argument."""

    argument: Any
    interpolator: Any

    @property
    def ENDPOINT(self) -> Endpoint:  # noqa: N802
        return self.interpolator.ENDPOINT

    def interpolate(self, fraction: float, argument: Any, from_: Any, to: Any) -> Any:
        return self.interpolator.interpolate(fraction, self.argument, from_, to)

    def duration(self, argument: Any, from_: Any, to: Any) -> float:
        return self.interpolator.duration(self.argument, from_, to)