import pytest

from plutoengine.mat3 import Mat3
from plutoengine.mat4 import Mat4
from plutoengine.vec4 import Vec4
from plutoengine.vector import Vec3

ROWS = (
    2.0, 1.0, 0.0, 3.0,
    0.0, 1.0, 4.0, 1.0,
    1.0, 0.0, 2.0, 0.5,
    0.0, 3.0, 1.0, 1.0,
)


@pytest.fixture
def a():
    return Mat4(*ROWS)


@pytest.fixture
def b():
    return Mat4(
        1.0, 0.0, 2.0, 0.0,
        -1.0, 3.0, 0.0, 1.0,
        0.0, 1.0, 1.0, 2.0,
        2.0, 0.0, 0.0, 1.0,
    )


def test_scalars_are_given_row_by_row(a):
    for i in range(4):
        for j in range(4):
            assert a[j][i] == ROWS[4 * i + j]


def test_diagonal_determinant():
    d = Mat4.from_rows(
        (2.0, 0.0, 0.0, 0.0),
        (0.0, 3.0, 0.0, 0.0),
        (0.0, 0.0, 4.0, 0.0),
        (0.0, 0.0, 0.0, 5.0),
    )
    assert d.determinant() == pytest.approx(120.0)


def test_identity_determinant():
    assert Mat4.identity().determinant() == pytest.approx(1.0)


def test_inverse_round_trip(a, b):
    assert a * a.inverse() == Mat4.identity()
    assert b.inverse() * b == Mat4.identity()


def test_determinant_is_multiplicative(a, b):
    assert (a * b).determinant() == pytest.approx(a.determinant() * b.determinant())


def test_adjugate_identity(a):
    assert a * a.adjugate() == Mat4(a.determinant())


def test_cofactor_transpose_is_adjugate(b):
    assert b.cofactor().transpose() == b.adjugate()


def test_minor_is_mat3(a):
    m = a.minor(1, 2)
    assert isinstance(m, Mat3)
    assert m == Mat3(
        ROWS[0], ROWS[1], ROWS[3],
        ROWS[8], ROWS[9], ROWS[11],
        ROWS[12], ROWS[13], ROWS[15],
    )


def test_translation_like_product():
    t = Vec4(10.0, 20.0, 30.0, 0.0)
    m = Mat4.identity()
    m[3] = Vec4(t.x, t.y, t.z, 1.0)
    v = Vec4(1.0, 2.0, 3.0, 1.0)
    assert m * v == v + t


def test_matrix_vector_product_uses_columns(a):
    assert a * Vec4(0.0, 0.0, 1.0, 0.0) == a.col(2)


def test_vector_type_mismatch(a):
    with pytest.raises(TypeError):
        a * Vec3(1.0, 2.0, 3.0)


def test_singular_inverse_raises():
    with pytest.raises(ValueError):
        Mat4().inverse()


def test_index_errors(a):
    with pytest.raises(IndexError):
        a[4]
    with pytest.raises(IndexError):
        a.row(4)
    with pytest.raises(IndexError):
        a.minor(0, 4)


def test_divide_by_zero_leaves_matrix_unchanged(a):
    c = Mat4(*ROWS)
    with pytest.raises(ZeroDivisionError):
        c / 0.0
    with pytest.raises(ZeroDivisionError):
        c /= 0.0
    assert c == a
    assert c.values()[:4] == [ROWS[0], ROWS[4], ROWS[8], ROWS[12]]


def test_arithmetic_round_trip(a, b):
    assert (a + b) - b == a
    assert (a * 4.0) / 4.0 == a
    assert -a + a == Mat4()


def test_transpose_swaps_rows_and_columns(a):
    t = a.transpose()
    for i in range(4):
        assert t.col(i) == a.row(i)


def test_gram_schmidt_is_orthonormal(b):
    q = b.gram_schmidt()
    assert q.transpose() * q == Mat4.identity()


def test_equality_with_other_size_is_false():
    assert (Mat4.identity() == Mat3.identity()) is False


def test_wrong_column_type():
    with pytest.raises(TypeError):
        Mat4(Vec3(), Vec3(), Vec3(), Vec3())


def test_values_length_and_order(a):
    values = a.values()
    assert len(values) == 16
    assert values[:4] == [ROWS[0], ROWS[4], ROWS[8], ROWS[12]]