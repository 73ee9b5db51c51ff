import pytest

from naviz.color import Color


def test_default_is_transparent_black():
    assert tuple(Color()) == (0, 0, 0, 0)


def test_channels_are_indexable():
    color = Color(1, 2, 3, 4)
    assert [color[i] for i in range(4)] == [1, 2, 3, 4]
    assert len(color) == 4


@pytest.mark.parametrize("channels", [(256, 0, 0, 0), (0, -1, 0, 0), (0, 0, 0, 300)])
def test_out_of_range_channel_rejected(channels):
    with pytest.raises(ValueError):
        Color(*channels)


def test_opaque_over_anything_is_itself():
    top = Color(10, 20, 30, 255)
    base = Color(200, 100, 50, 255)
    assert top.over(base) == top


def test_transparent_over_opaque_is_base():
    base = Color(200, 100, 50, 255)
    assert Color(90, 90, 90, 0).over(base) == base


def test_both_transparent_gives_zero():
    assert Color(5, 6, 7, 0).over(Color(8, 9, 10, 0)) == Color(0, 0, 0, 0)


def test_over_opaque_base_stays_opaque():
    result = Color(255, 0, 0, 128).over(Color(0, 0, 255, 255))
    assert result.a == 255
    assert result.r > 0 and result.b > 0
    assert result.g == 0


def test_multiply_by_one_is_identity():
    color = Color(12, 34, 56, 78)
    assert color * 1.0 == color


def test_multiply_by_zero_is_zero():
    assert Color(12, 34, 56, 78) * 0.0 == Color()


def test_multiply_saturates():
    assert Color(200, 200, 200, 200) * 2.0 == Color(255, 255, 255, 255)


def test_multiply_negative_clamps_to_zero():
    assert Color(200, 10, 10, 10) * -1.0 == Color()


def test_add_saturates():
    assert Color(200, 1, 0, 255) + Color(100, 2, 0, 1) == Color(255, 3, 0, 255)


def test_add_is_commutative():
    a = Color(10, 20, 30, 40)
    b = Color(1, 2, 3, 4)
    assert a + b == b + a