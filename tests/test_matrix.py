import io

import pytest

from tinynet.matrix import Matrix


def _identity(size):
    return Matrix.from_rows([[1 if i == j else 0 for j in range(size)] for i in range(size)])


def test_new_matrix_is_all_zero():
    m = Matrix(2, 3)
    assert m.shape == (2, 3)
    assert m.to_rows() == [[0.0, 0.0, 0.0], [0.0, 0.0, 0.0]]


@pytest.mark.parametrize("rows, cols", [(0, 3), (3, 0), (-1, 2), (2, -5)])
def test_non_positive_dimensions_give_empty_matrix(rows, cols):
    m = Matrix(rows, cols)
    assert m.shape == (0, 0)
    assert m.to_rows() == []


def test_set_and_get_round_trip():
    m = Matrix(3, 2)
    m[2, 1] = 7.25
    m[0, 0] = -1.5
    assert m[2, 1] == 7.25
    assert m[0, 0] == -1.5
    assert m[1, 0] == 0.0


@pytest.mark.parametrize("key", [(3, 0), (0, 2), (5, 5)])
def test_out_of_range_index_raises(key):
    m = Matrix(3, 2)
    with pytest.raises(IndexError):
        m[key] = 1.0
    assert m.to_rows() == [[0.0, 0.0], [0.0, 0.0], [0.0, 0.0]]
    with pytest.raises(IndexError) as excinfo:
        m[key]
    assert excinfo.type is IndexError


def test_from_rows_round_trip():
    rows = [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]
    assert Matrix.from_rows(rows).to_rows() == rows


def test_from_rows_ragged_raises():
    with pytest.raises(ValueError):
        Matrix.from_rows([[1, 2], [3]])


def test_equality_depends_on_shape():
    a = Matrix.from_rows([[1, 2, 3, 4]])
    b = Matrix.from_rows([[1, 2], [3, 4]])
    assert (a == b) is False
    assert a == Matrix.from_rows([[1, 2, 3, 4]])


def test_addition_is_elementwise_and_commutative():
    a = Matrix.from_rows([[1, 2], [3, 4]])
    b = Matrix.from_rows([[10, 20], [30, 40]])
    total = a + b
    assert total == b + a
    for i in range(2):
        for j in range(2):
            assert total[i, j] == a[i, j] + b[i, j]


def test_addition_with_mismatched_shapes_raises():
    with pytest.raises(ValueError):
        Matrix(2, 2) + Matrix(2, 3)


def test_multiplication_by_identity_is_unchanged():
    a = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
    assert _identity(2) @ a == a
    assert a @ _identity(3) == a


def test_multiplication_shape():
    assert (Matrix(2, 3) @ Matrix(3, 4)).shape == (2, 4)


def test_multiplication_with_incompatible_shapes_raises():
    with pytest.raises(ValueError):
        Matrix(2, 3) @ Matrix(2, 3)


def test_transpose_swaps_indices():
    a = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
    t = a.transpose()
    assert t.shape == (3, 2)
    for i in range(2):
        for j in range(3):
            assert t[j, i] == a[i, j]
    assert t.transpose() == a


def test_transpose_of_product():
    a = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
    b = Matrix.from_rows([[7, 8], [9, 10], [11, 12]])
    assert (a @ b).transpose() == b.transpose() @ a.transpose()


def test_apply_changes_matrix_in_place():
    a = Matrix.from_rows([[1, -2], [3, -4]])
    a.apply(abs)
    assert a.to_rows() == [[1.0, 2.0], [3.0, 4.0]]


def test_str_format():
    assert str(Matrix.from_rows([[1, 2.5]])) == "[ 1.000000 2.500000 ]"


def test_display_writes_each_row():
    a = Matrix.from_rows([[1, 2], [3, 4]])
    buffer = io.StringIO()
    a.display(buffer)
    assert buffer.getvalue() == str(a) + "\n"
    assert len(buffer.getvalue().splitlines()) == 2


def test_display_of_empty_matrix_writes_nothing():
    buffer = io.StringIO()
    Matrix(0, 0).display(buffer)
    assert buffer.getvalue() == ""