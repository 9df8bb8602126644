import pytest

from sudokit.mathutil import clamp, float_equals, lerp, normalize, remap, wrap


@pytest.mark.parametrize(
    "value,expected",
    [(5.0, 5.0), (-1.0, 0.0), (11.0, 10.0), (0.0, 0.0), (10.0, 10.0)],
)
def test_clamp(value, expected):
    assert clamp(value, 0.0, 10.0) == expected


def test_lerp_endpoints():
    assert lerp(2.0, 8.0, 0.0) == 2.0
    assert lerp(2.0, 8.0, 1.0) == 8.0


def test_lerp_midpoint():
    assert lerp(2.0, 8.0, 0.5) == 5.0


@pytest.mark.parametrize("amount", [0.0, 0.25, 0.5, 0.9, 1.0])
def test_normalize_inverts_lerp(amount):
    value = lerp(-3.0, 7.0, amount)
    assert normalize(value, -3.0, 7.0) == pytest.approx(amount)


def test_normalize_empty_range():
    with pytest.raises(ZeroDivisionError):
        normalize(1.0, 2.0, 2.0)


def test_remap_endpoints():
    assert remap(0.0, 0.0, 10.0, 100.0, 200.0) == 100.0
    assert remap(10.0, 0.0, 10.0, 100.0, 200.0) == 200.0


@pytest.mark.parametrize("value", [-4.0, 0.0, 3.3, 9.0])
def test_remap_round_trip(value):
    mapped = remap(value, -5.0, 10.0, 0.0, 1.0)
    assert remap(mapped, 0.0, 1.0, -5.0, 10.0) == pytest.approx(value)


@pytest.mark.parametrize("value", [-12.5, -1.0, 0.0, 2.0, 7.25, 30.0])
def test_wrap_in_range_and_periodic(value):
    result = wrap(value, 0.0, 5.0)
    assert 0.0 <= result < 5.0
    assert wrap(value + 5.0, 0.0, 5.0) == pytest.approx(result)


def test_wrap_inside_range_unchanged():
    assert wrap(3.0, 1.0, 4.0) == 3.0


def test_float_equals():
    assert float_equals(1.0, 1.0 + 1e-7)
    assert not float_equals(1.0, 1.001)
    assert float_equals(1e9, 1e9 + 100.0)
    assert not float_equals(0.0, 1e-5)