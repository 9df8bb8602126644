import math
from types import SimpleNamespace

import pytest

from sudokit.vector3 import Vector3


def _matrix(values):
    return SimpleNamespace(**{f"m{i}": v for i, v in enumerate(values)})


IDENTITY = _matrix([1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1])


def _near(vec):
    return pytest.approx(vec.to_tuple(), abs=1e-9)


def test_zero_and_one():
    assert Vector3.zero().to_tuple() == (0.0, 0.0, 0.0)
    assert Vector3.one().to_tuple() == (1.0, 1.0, 1.0)


def test_add_sub_round_trip():
    a = Vector3(1.5, -2.0, 3.0)
    b = Vector3(0.25, 4.0, -1.0)
    assert ((a + b) - b).to_tuple() == _near(a)
    assert a - a == Vector3.zero()


def test_negate():
    a = Vector3(1.0, -2.0, 3.0)
    assert -a == Vector3(-1.0, 2.0, -3.0)
    assert a + (-a) == Vector3.zero()


def test_mul_and_div_round_trip():
    a = Vector3(2.0, 3.0, 4.0)
    b = Vector3(5.0, 7.0, 9.0)
    assert ((a * b) / b).to_tuple() == _near(a)
    assert ((a * 3) / 3).to_tuple() == _near(a)
    assert 2 * a == a * 2 == a.scale(2)


def test_add_and_subtract_value():
    a = Vector3(1.0, 2.0, 3.0)
    assert a.add_value(1.0) == a + Vector3.one()
    assert a.add_value(5.0).subtract_value(5.0) == a


def test_cross_product_is_perpendicular():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-4.0, 0.5, 2.0)
    c = a.cross_product(b)
    assert a.dot_product(c) == pytest.approx(0.0)
    assert b.dot_product(c) == pytest.approx(0.0)
    assert b.cross_product(a).to_tuple() == _near(-c)


@pytest.mark.parametrize("vec", [Vector3(1, 2, 3), Vector3(0, 5, 1), Vector3(3, -1, 0.5)])
def test_perpendicular(vec):
    p = vec.perpendicular()
    assert vec.dot_product(p) == pytest.approx(0.0)
    assert p.length() > 0


def test_length_and_distance():
    a = Vector3(1.0, 2.0, 2.0)
    assert a.length() ** 2 == pytest.approx(a.length_sqr())
    b = Vector3(4.0, -1.0, 7.0)
    assert a.distance(b) == pytest.approx((b - a).length())
    assert a.distance_sqr(b) == pytest.approx((b - a).length_sqr())


def test_angle():
    a = Vector3(1.0, 2.0, 3.0)
    assert a.angle(a) == pytest.approx(0.0)
    assert Vector3(1, 0, 0).angle(Vector3(0, 1, 0)) == pytest.approx(math.pi / 2)


def test_normalize():
    assert Vector3(3.0, -4.0, 12.0).normalize().length() == pytest.approx(1.0)
    assert Vector3.zero().normalize() == Vector3.zero()


def test_ortho_normalize():
    first, second = Vector3(2.0, 1.0, 0.5).ortho_normalize(Vector3(0.3, 4.0, -1.0))
    assert first.length() == pytest.approx(1.0)
    assert second.length() == pytest.approx(1.0)
    assert first.dot_product(second) == pytest.approx(0.0)


def test_transform_identity_and_translation():
    a = Vector3(1.0, 2.0, 3.0)
    assert a.transform(IDENTITY) == a
    shift = _matrix([1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 10, 20, 30, 1])
    assert a.transform(shift) == a + Vector3(10, 20, 30)


def test_rotate_by_identity_quaternion():
    a = Vector3(1.0, -2.0, 3.5)
    q = SimpleNamespace(x=0.0, y=0.0, z=0.0, w=1.0)
    assert a.rotate_by_quaternion(q).to_tuple() == _near(a)


def test_rotate_by_axis_angle():
    a = Vector3(1.0, 2.0, 3.0)
    axis = Vector3(0.3, -1.0, 2.0)
    rotated = a.rotate_by_axis_angle(axis, 1.2)
    assert rotated.length() == pytest.approx(a.length())
    assert a.rotate_by_axis_angle(axis, 2 * math.pi).to_tuple() == _near(a)
    assert rotated.rotate_by_axis_angle(axis, -1.2).to_tuple() == _near(a)


def test_lerp_endpoints():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-5.0, 0.0, 9.0)
    assert a.lerp(b, 0.0) == a
    assert a.lerp(b, 1.0).to_tuple() == _near(b)
    assert a.lerp(b, 0.5).distance(a) == pytest.approx(a.lerp(b, 0.5).distance(b))


def test_reflect_twice_is_identity():
    a = Vector3(1.0, -2.0, 0.5)
    n = Vector3(0.2, 1.0, -0.4).normalize()
    assert a.reflect(n).reflect(n).to_tuple() == _near(a)
    assert a.reflect(n).length() == pytest.approx(a.length())


def test_min_max():
    a = Vector3(1.0, 5.0, -2.0)
    b = Vector3(3.0, -1.0, -2.0)
    assert a.min(b) == Vector3(1.0, -1.0, -2.0)
    assert a.max(b) == Vector3(3.0, 5.0, -2.0)


def test_barycenter_reconstructs_point():
    a, b, c = Vector3(0, 0, 0), Vector3(4, 0, 0), Vector3(0, 3, 0)
    p = Vector3(1.0, 1.0, 0.0)
    bary = p.barycenter(a, b, c)
    assert bary.x + bary.y + bary.z == pytest.approx(1.0)
    rebuilt = a * bary.x + b * bary.y + c * bary.z
    assert rebuilt.to_tuple() == _near(p)


def test_barycenter_degenerate_triangle():
    a = Vector3(0, 0, 0)
    with pytest.raises(ZeroDivisionError):
        Vector3(1, 1, 1).barycenter(a, a, a)


def test_unproject_identity():
    p = Vector3(0.25, -0.5, 0.75)
    assert p.unproject(IDENTITY, IDENTITY).to_tuple() == _near(p)


def test_unproject_inverts_translation():
    shift = _matrix([1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 2, 3, 4, 1])
    p = Vector3(1.0, 1.0, 1.0)
    assert p.transform(shift).unproject(IDENTITY, shift).to_tuple() == _near(p)


def test_to_tuple():
    assert Vector3(1.0, 2.0, 3.0).to_tuple() == (1.0, 2.0, 3.0)
    assert tuple(Vector3(1.0, 2.0, 3.0)) == (1.0, 2.0, 3.0)


def test_invert():
    a = Vector3(2.0, -4.0, 0.5)
    assert a.invert().invert().to_tuple() == _near(a)
    with pytest.raises(ZeroDivisionError):
        Vector3(0.0, 1.0, 1.0).invert()


def test_clamp():
    lo, hi = Vector3(-1, -1, -1), Vector3(1, 1, 1)
    assert Vector3(5, -5, 0.5).clamp(lo, hi) == Vector3(1, -1, 0.5)


def test_clamp_value():
    a = Vector3(3.0, 4.0, 12.0)
    assert a.clamp_value(1.0, 2.0).length() == pytest.approx(2.0)
    assert a.clamp_value(20.0, 30.0).length() == pytest.approx(20.0)
    assert a.clamp_value(1.0, 100.0) == a
    assert Vector3.zero().clamp_value(1.0, 2.0) == Vector3.zero()


def test_equals():
    a = Vector3(1.0, 2.0, 3.0)
    assert a.equals(Vector3(1.0 + 1e-9, 2.0, 3.0))
    assert not a.equals(Vector3(1.1, 2.0, 3.0))


def test_refract_same_medium_passes_through():
    v = Vector3(0.0, -1.0, 0.0)
    n = Vector3(0.0, 1.0, 0.0)
    assert v.refract(n, 1.0).to_tuple() == _near(v)


def test_refract_total_internal_reflection():
    v = Vector3(1.0, -1.0, 0.0).normalize()
    n = Vector3(0.0, 1.0, 0.0)
    assert v.refract(n, 2.0) == Vector3.zero()


def test_check_collision_spheres():
    a = Vector3(0.0, 0.0, 0.0)
    assert a.check_collision_spheres(1.0, Vector3(2.0, 0.0, 0.0), 1.0)
    assert not a.check_collision_spheres(1.0, Vector3(3.0, 0.0, 0.0), 1.0)