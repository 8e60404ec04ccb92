import math

import pytest

from corekit.maths import (
    EPSILON,
    M4f,
    V2f,
    V2i,
    V3f,
    V3i,
    V4f,
    V4i,
    todeg,
    torad,
)


SAMPLE = M4f((
    (2.0, 0.5, 0.0, 0.0),
    (1.0, 3.0, 0.25, 0.0),
    (0.0, 1.5, 4.0, 0.0),
    (5.0, -2.0, 7.0, 1.0),
))

IDENTITY_FLAT = [
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
]


def test_angle_conversions():
    assert todeg(math.pi) == pytest.approx(180.0)
    assert torad(180.0) == pytest.approx(math.pi)


@pytest.mark.parametrize("value", [-720.0, -45.5, 0.0, 33.3, 360.0])
def test_angle_round_trip(value):
    assert todeg(torad(value)) == pytest.approx(value)


@pytest.mark.parametrize("cls,a,b", [
    (V2f, (1.5, -2.0), (0.25, 4.0)),
    (V3f, (1.5, -2.0, 3.0), (0.25, 4.0, -1.0)),
    (V4f, (1.5, -2.0, 3.0, 9.0), (0.25, 4.0, -1.0, 2.0)),
    (V2i, (3, -8), (5, 11)),
    (V3i, (3, -8, 2), (5, 11, -6)),
    (V4i, (3, -8, 2, 1), (5, 11, -6, 4)),
])
def test_add_sub_round_trip(cls, a, b):
    va, vb = cls(*a), cls(*b)
    assert (va + vb) - vb == va
    assert va - va == cls.zero()
    assert tuple(va + vb) == tuple(x + y for x, y in zip(a, b))


@pytest.mark.parametrize("cls", [V2f, V3f, V4f, V2i, V3i, V4i])
def test_zero_matches_default(cls):
    assert cls.zero() == cls()
    assert all(c == 0 for c in cls.zero())


def test_componentwise_mul_and_div_float():
    a = V3f(2.0, -6.0, 9.0)
    b = V3f(4.0, 3.0, -0.5)
    assert (a * b) / b == a
    assert tuple(a * b) == (8.0, -18.0, -4.5)


def test_int_division_truncates_toward_zero():
    assert V2i(-7, 7) / V2i(2, 2) == V2i(-3, 3)
    assert V3i(9, -9, 8) / V3i(-4, -4, 2) == V3i(-2, 2, 4)


def test_int_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        V4i(1, 2, 3, 4) / V4i(1, 0, 1, 1)


def test_scale():
    assert V3f(1.0, 2.0, 3.0).scale(2.0) == V3f(2.0, 4.0, 6.0)
    assert V3i(1, -2, 3).scale(3) == V3i(3, -6, 9)
    assert V2i(3, -3).scale(0.5) == V2i(1, -1)


@pytest.mark.parametrize("v", [V2f(3.0, 4.0), V3f(1.0, 2.0, 2.0), V4f(1.0, 1.0, 1.0, 1.0)])
def test_mag_matches_mag_sqrd(v):
    assert v.mag() ** 2 == pytest.approx(v.mag_sqrd())
    assert v.normalised().mag() == pytest.approx(1.0)


def test_int_magnitude():
    assert V2i(3, 4).mag() == 5
    assert V3i(1, 1, 1).mag() == int(math.sqrt(V3i(1, 1, 1).mag_sqrd()))


def test_normalised_zero_raises():
    with pytest.raises(ZeroDivisionError):
        V3f.zero().normalised()


def test_approx_eq_tolerance():
    a = V2f(1.0, 1.0)
    assert a.approx_eq(V2f(1.0 + EPSILON / 2, 1.0))
    assert not a.approx_eq(V2f(1.0 + EPSILON * 4, 1.0))


def test_v4f_approx_eq_ignores_w():
    assert V4f(1.0, 2.0, 3.0, 4.0).approx_eq(V4f(1.0, 2.0, 3.0, 100.0))
    assert not V4f(1.0, 2.0, 3.0, 4.0).approx_eq(V4f(1.0, 2.5, 3.0, 4.0))


def test_cross_is_orthogonal():
    a = V3f(1.0, 2.0, 3.0)
    b = V3f(-4.0, 0.5, 2.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0)
    assert c.dot(b) == pytest.approx(0.0)
    assert b.cross(a) == c.scale(-1.0)


def test_identity_is_neutral():
    assert M4f.identity() * SAMPLE == SAMPLE
    assert SAMPLE * M4f.identity() == SAMPLE
    assert M4f() == M4f.identity()


def test_inverse_round_trip():
    right = SAMPLE * SAMPLE.inverted()
    left = SAMPLE.inverted() * SAMPLE
    right_flat = [e for col in right.m for e in col]
    left_flat = [e for col in left.m for e in col]
    assert right_flat == pytest.approx(IDENTITY_FLAT, abs=1e-9)
    assert left_flat == pytest.approx(IDENTITY_FLAT, abs=1e-9)


def test_singular_inverse_raises():
    with pytest.raises(ZeroDivisionError):
        M4f.diagonal(0.0).inverted()


def test_transpose_twice_is_identity_op():
    assert SAMPLE.transposed().transposed() == SAMPLE
    assert SAMPLE.transposed().m[0][3] == SAMPLE.m[3][0]


def test_bad_shape_raises():
    with pytest.raises(ValueError):
        M4f(((1.0, 0.0), (0.0, 1.0)))


def test_translate_moves_origin():
    m = M4f.identity().translate(V3f(2.0, 3.0, 4.0))
    assert tuple(m.transform(V4f(0.0, 0.0, 0.0, 0.0))) == (2.0, 3.0, 4.0, 1.0)


def test_scale_matrix_matches_vector_mul():
    s = V3f(2.0, -3.0, 0.5)
    p = V3f(1.5, 2.0, -4.0)
    out = M4f.identity().scale(s).transform(V4f(p.x, p.y, p.z, 0.0))
    assert V3f(out.x, out.y, out.z) == p * s


def test_full_rotation_is_identity():
    m = M4f.identity().rotate(2.0 * math.pi, V3f(0.0, 0.0, 1.0))
    flat = [e for col in m.m for e in col]
    assert flat == pytest.approx(IDENTITY_FLAT, abs=1e-9)


def test_rotation_preserves_length():
    m = M4f.identity().rotate(0.7, V3f(0.0, 1.0, 0.0))
    p = V4f(3.0, -1.0, 2.0, 0.0)
    out = m.transform(p)
    assert V3f(out.x, out.y, out.z).mag() == pytest.approx(V3f(p.x, p.y, p.z).mag())


def test_lookat_maps_camera_to_origin():
    camera = V3f(1.0, 2.0, 5.0)
    m = M4f.lookat(camera, V3f(0.0, 0.0, 0.0), V3f(0.0, 1.0, 0.0))
    out = m.transform(V4f(camera.x, camera.y, camera.z, 0.0))
    assert (out.x, out.y, out.z) == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)


def test_perspective_layout():
    m = M4f.perspective(90.0, 2.0, 0.1, 100.0)
    assert m.m[2][3] == -1.0
    assert m.m[0][0] * 2.0 == pytest.approx(m.m[1][1])


def test_orthographic_maps_edges_to_unit_range():
    m = M4f.orthographic(0.0, 800.0, 600.0, 0.0, -1.0, 1.0)
    left_top = m.transform(V4f(0.0, 0.0, 0.0, 0.0))
    right_bottom = m.transform(V4f(800.0, 600.0, 0.0, 0.0))
    assert (left_top.x, left_top.y) == pytest.approx((-1.0, 1.0))
    assert (right_bottom.x, right_bottom.y) == pytest.approx((1.0, -1.0))