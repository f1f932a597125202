import io
import logging

import numpy as np
import pytest
from Lattice import DimensionMismatchError, Matrix, NDArray, ShapeError, matmul


@pytest.fixture
def a():
    return Matrix.from_list([[1, 2, 3], [4, 5, 6]])


@pytest.fixture
def b():
    return Matrix.from_list([[7, 8], [9, 10], [11, 12]])


# --- construction ---


def test_square():
    m = Matrix(3)
    assert m.shape == (3, 3)
    assert m.nrow == 3
    assert m.ncol == 3


def test_rank_is_fixed():
    with pytest.raises(ShapeError):
        Matrix((2, 3, 4))
    with pytest.raises(ShapeError):
        Matrix(3, ndim=3)
    with pytest.raises(ShapeError):
        Matrix(NDArray((2, 2, 2)))


def test_empty_rows_cols():
    m = Matrix()
    assert m.nrow == 0
    assert m.ncol == 0
    assert m.ndim == 2


def test_copy_keeps_type(a):
    assert isinstance(a.copy(), Matrix)
    assert isinstance(a.T, Matrix)
    assert isinstance(-a, Matrix)
    assert isinstance(a.move(), Matrix)


# --- print ---


def test_print(capsys):
    Matrix.from_list([[1, 2], [3, 4]]).print()
    assert capsys.readouterr().out == "1\t2\t\n3\t4\t\n"


def test_print_to_file(a):
    out = io.StringIO()
    a.print(file=out)
    assert out.getvalue().splitlines() == ["1\t2\t3\t", "4\t5\t6\t"]


# --- product ---


def test_matmul_correct(a, b):
    c = a @ b
    assert isinstance(c, Matrix)
    assert c.shape == (2, 2)
    assert c.list() == [[58, 64], [139, 154]]


def test_matmul_matches_numpy():
    rng = np.random.default_rng(0)
    x = rng.random((3, 4))
    y = rng.random((4, 5))
    c = matmul(Matrix.from_list(x.tolist()), Matrix.from_list(y.tolist()))
    np.testing.assert_allclose(c.numpy(), x @ y)


def test_matmul_transposed(a):
    identity = Matrix.from_list([[1, 0], [0, 1]])
    c = a.T @ identity
    assert c.list() == [[1, 4], [2, 5], [3, 6]]


def test_matmul_dtype_promotion(a, b):
    c = NDArray(a, dtype=np.float32)
    result = Matrix(c) @ b
    assert result.dtype == np.result_type(np.float32, b.dtype)


def test_matmul_dimension_mismatch(a, caplog):
    with caplog.at_level(logging.ERROR, logger="Lattice.matrix"):
        with pytest.raises(DimensionMismatchError, match="dimension not match"):
            _ = a @ a
    assert "dimension not match" in caplog.text


def test_matmul_non_matrix(a):
    with pytest.raises(TypeError):
        _ = a @ NDArray((3, 2))
