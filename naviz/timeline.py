"""Keyframed timelines that interpolate values over time.

A keyframe's value starts at the keyframe's time and is interpolated for
the keyframe's duration, after which it is held until the next keyframe.
A keyframe that starts while an earlier one is still interpolating takes
precedence, so the value jumps to the earlier keyframe's value at its start.
"""

from __future__ import annotations

import bisect
from dataclasses import dataclass
from typing import Any, Iterable

Time = float


@dataclass(frozen=True)
class Keyframe:
    """A single keyframe. Keyframes are ordered by their time alone."""

    time: float
    duration: float | None = None
    argument: Any = None
    value: Any = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "time", float(self.time))
        object.__setattr__(
            self, "duration", 0.0 if self.duration is None else float(self.duration)
        )

    def __lt__(self, other: Keyframe) -> bool:
        if not isinstance(other, Keyframe):
            return NotImplemented
        return self.time < other.time


def _as_keyframe(keyframe: Keyframe | tuple) -> Keyframe:
    """Accept a keyframe or a ``(time, value)``, ``(time, duration, value)``
    or ``(time, duration, argument, value)`` tuple."""
    if isinstance(keyframe, Keyframe):
        return keyframe
    if len(keyframe) == 2:
        time, value = keyframe
        return Keyframe(time, None, None, value)
    if len(keyframe) == 3:
        time, duration, value = keyframe
        return Keyframe(time, duration, None, value)
    if len(keyframe) == 4:
        time, duration, argument, value = keyframe
        return Keyframe(time, duration, argument, value)
    raise ValueError(f"cannot build a keyframe from {keyframe!r}")


class Timeline:
    """Ordered keyframes together with the interpolation function between them."""

    def __init__(self, default: Any, interpolation_function: Any) -> None:
        self.default = default
        self.interpolation_function = interpolation_function
        self._keyframes: list[Keyframe] = []
        self._times: list[float] = []

    @property
    def keyframes(self) -> tuple[Keyframe, ...]:
        """The keyframes, ordered by time."""
        return tuple(self._keyframes)

    def __len__(self) -> int:
        return len(self._keyframes)

    def get(self, time: float) -> Any:
        """The (interpolated) value at ``time``."""
        idx = bisect.bisect_right(self._times, time) - 1
        if idx < 0:
            return self.default
        endpoint = self.interpolation_function.ENDPOINT
        keyframe = self._keyframes[idx]
        to = keyframe.value
        if idx > 0:
            from_ = endpoint.get(self.default, self._keyframes[idx - 1].value)
        else:
            from_ = self.default
        relative = time - keyframe.time
        if relative >= keyframe.duration:
            return endpoint.get(from_, to)
        fraction = relative / keyframe.duration
        return self.interpolation_function.interpolate(
            fraction, keyframe.argument, from_, to
        )

    def add(self, keyframe: Keyframe | tuple) -> Timeline:
        """Insert a keyframe, keeping the timeline ordered."""
        keyframe = _as_keyframe(keyframe)
        idx = bisect.bisect_right(self._times, keyframe.time)
        self._keyframes.insert(idx, keyframe)
        self._times.insert(idx, keyframe.time)
        return self

    def add_all(self, keyframes: Iterable[Keyframe | tuple]) -> Timeline:
        """Insert several keyframes at once."""
        self._keyframes.extend(_as_keyframe(k) for k in keyframes)
        self._keyframes.sort(key=lambda k: k.time)
        self._times = [k.time for k in self._keyframes]
        return self