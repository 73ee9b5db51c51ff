import pytest

from naviz.interpolator import Constant, ConstantTransitionPoint, Linear, Triangle
from naviz.timeline import Keyframe, Timeline


def test_empty_timeline_returns_default():
    timeline = Timeline(3.0, Linear())
    assert timeline.get(100.0) == 3.0


def test_before_first_keyframe_returns_default():
    timeline = Timeline(1.0, Linear()).add((5.0, 2.0, 9.0))
    assert timeline.get(4.0) == 1.0


def test_linear_halfway():
    timeline = Timeline(0.0, Linear()).add((1.0, 2.0, None, 10.0))
    assert timeline.get(2.0) == pytest.approx(5.0)


def test_linear_after_duration_holds_value():
    timeline = Timeline(0.0, Linear()).add((1.0, 2.0, 10.0))
    assert timeline.get(3.0) == 10.0
    assert timeline.get(50.0) == 10.0


def test_zero_duration_jumps_immediately():
    timeline = Timeline(0.0, Linear()).add((1.0, 7.0))
    assert timeline.get(1.0) == 7.0


def test_second_keyframe_starts_from_previous_value():
    timeline = Timeline(0.0, Linear()).add((0.0, 1.0, 4.0)).add((2.0, 2.0, 8.0))
    assert timeline.get(2.0) == pytest.approx(4.0)
    assert timeline.get(4.0) == 8.0


def test_triangle_returns_to_start():
    timeline = Timeline(1.0, Triangle()).add((0.0, 2.0, 5.0))
    assert timeline.get(1.0) == pytest.approx(5.0)
    assert timeline.get(2.0) == 1.0


def test_triangle_second_keyframe_starts_from_default():
    timeline = Timeline(1.0, Triangle()).add((0.0, 1.0, 5.0)).add((3.0, 2.0, 9.0))
    assert timeline.get(3.0) == pytest.approx(1.0)


def test_constant_transition_end_holds_until_done():
    timeline = Timeline(False, Constant()).add((1.0, 2.0, ConstantTransitionPoint.END, True))
    assert timeline.get(2.0) is False
    assert timeline.get(3.0) is True


def test_constant_transition_start_switches_at_once():
    timeline = Timeline(False, Constant()).add((1.0, 2.0, ConstantTransitionPoint.START, True))
    assert timeline.get(1.5) is True


def test_add_returns_timeline_for_chaining():
    timeline = Timeline(0.0, Linear())
    assert timeline.add((1.0, 1.0)) is timeline


def test_add_keeps_order():
    timeline = Timeline(0.0, Linear()).add((3.0, 3.0)).add((1.0, 1.0)).add((2.0, 2.0))
    assert [k.time for k in timeline.keyframes] == [1.0, 2.0, 3.0]


def test_add_all_matches_individual_adds():
    frames = [(3.0, 1.0, 30.0), (1.0, 1.0, 10.0), (2.0, 1.0, 20.0)]
    bulk = Timeline(0.0, Linear()).add_all(frames)
    single = Timeline(0.0, Linear())
    for frame in frames:
        single.add(frame)
    times = [0.5, 1.0, 1.5, 2.25, 3.5, 10.0]
    assert [bulk.get(t) for t in times] == [single.get(t) for t in times]
    assert len(bulk) == len(frames)


def test_keyframe_instances_are_accepted():
    timeline = Timeline(0.0, Linear()).add(Keyframe(1.0, 2.0, None, 6.0))
    assert timeline.get(10.0) == 6.0


def test_keyframe_duration_defaults_to_zero():
    assert Keyframe(1.0, value=2.0).duration == 0.0


def test_keyframes_sort_by_time():
    frames = sorted([Keyframe(2.0, value="b"), Keyframe(1.0, value="a")])
    assert [k.value for k in frames] == ["a", "b"]


def test_invalid_tuple_rejected():
    with pytest.raises(ValueError):
        Timeline(0.0, Linear()).add((1.0,))