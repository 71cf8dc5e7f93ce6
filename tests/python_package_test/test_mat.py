# coding: utf-8
import ctypes

import numpy as np
import pytest
from scipy import sparse

import lgbm
from lgbm import Layout, MatBuf
from lgbm.basic import _C_API_DTYPE_FLOAT32, _C_API_DTYPE_FLOAT64, _C_API_IS_COL_MAJOR, _C_API_IS_ROW_MAJOR
from lgbm.mat import _c_csc, _c_csr, _c_mat

from .utils import c_pointer_values

def test_col_major_indexing():
    # columns [1, 2, 3] and [4, 5, 6]
    mat = MatBuf([1, 2, 3, 4, 5, 6], nrow=3, ncol=2)
    assert mat.layout is Layout.COL_MAJOR
    assert mat.shape == (3, 2)
    assert len(mat) == 3
    assert mat[0, 1] == 4
    assert mat[2, 0] == 3
    np.testing.assert_array_equal(mat.row(1), [2, 5])
    np.testing.assert_array_equal(mat.col(1), [4, 5, 6])

def test_row_major_indexing():
    mat = MatBuf([1, 2, 3, 4, 5, 6], nrow=3, ncol=2, layout=Layout.ROW_MAJOR)
    assert mat[0, 1] == 2
    assert mat[2, 0] == 5
    np.testing.assert_array_equal(mat.to_numpy(), [[1, 2], [3, 4], [5, 6]])

@pytest.mark.parametrize("nrow, ncol", [(2, 2), (4, 2), (0, 3)])
def test_length_must_match_shape(nrow, ncol):
    with pytest.raises(lgbm.ShapeMismatchError, match="doesn't equal nrow \\* ncol"):
        MatBuf(np.zeros(5), nrow=nrow, ncol=ncol)

def test_values_must_be_1d():
    with pytest.raises(lgbm.ShapeMismatchError, match="must be 1-D"):
        MatBuf(np.zeros((2, 2)), nrow=2, ncol=2)

def test_out_of_range_index():
    mat = MatBuf(np.zeros(6), nrow=2, ncol=3)
    with pytest.raises(IndexError):
        mat[2, 0]
    with pytest.raises(IndexError):
        mat[0, 3]

def test_values_are_read_only():
    mat = MatBuf(np.zeros(4), nrow=2, ncol=2)
    with pytest.raises(ValueError):
        mat.values[0] = 1.0

@pytest.mark.parametrize("dtype, expected", [(np.float32, np.float32), (np.float64, np.float64), (np.int64, np.float32)])
def test_element_types(dtype, expected):
    mat = MatBuf(np.arange(4, dtype=dtype), nrow=2, ncol=2)
    assert mat.dtype == expected

def test_from_rows():
    mat = MatBuf.from_rows([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])
    assert mat.layout is Layout.ROW_MAJOR
    assert mat.shape == (3, 2)
    assert mat[1, 1] == 4.0

def test_from_rows_rejects_ragged_rows():
    with pytest.raises(lgbm.ShapeMismatchError, match="Row 1 has 1 columns, expected 2"):
        MatBuf.from_rows([[1.0, 2.0], [3.0]])

def test_from_array_keeps_memory_order():
    array = np.arange(6, dtype=np.float64).reshape(3, 2)
    c_mat = MatBuf.from_array(array)
    f_mat = MatBuf.from_array(np.asfortranarray(array))
    assert c_mat.layout is Layout.ROW_MAJOR
    assert f_mat.layout is Layout.COL_MAJOR
    assert np.shares_memory(c_mat.values, array)
    np.testing.assert_array_equal(c_mat.to_numpy(), f_mat.to_numpy())

def test_from_array_copies_strided_input():
    array = np.arange(12, dtype=np.float64).reshape(3, 4)[:, ::2]
    with pytest.warns(UserWarning, match="sliced data"):
        mat = MatBuf.from_array(array)
    np.testing.assert_array_equal(mat.to_numpy(), array)

def test_rows_shares_memory():
    mat = MatBuf(np.arange(8, dtype=np.float64), nrow=4, ncol=2, layout=Layout.ROW_MAJOR)
    sub = mat.rows(1, 3)
    assert sub.shape == (2, 2)
    np.testing.assert_array_equal(sub.to_numpy(), [[2, 3], [4, 5]])
    assert np.shares_memory(sub.values, mat.values)
    with pytest.raises(ValueError):
        MatBuf(np.zeros(4), nrow=2, ncol=2).rows(0, 1)

@pytest.mark.parametrize("layout", [Layout.ROW_MAJOR, Layout.COL_MAJOR])
@pytest.mark.parametrize(
    "dtype, ctype, bits, dtype_tag",
    [
        (np.float32, ctypes.c_float, np.uint32, _C_API_DTYPE_FLOAT32),
        (np.float64, ctypes.c_double, np.uint64, _C_API_DTYPE_FLOAT64),
    ],
)
def test_marshalled_buffer_is_bit_identical(rng_fixed_seed, layout, dtype, ctype, bits, dtype_tag):
    dense = rng_fixed_seed.standard_normal((5, 3)).astype(dtype)
    dense[1, 2] = np.nan
    dense[3, 0] = -0.0
    order = "C" if layout is Layout.ROW_MAJOR else "F"
    mat = MatBuf(dense.ravel(order=order), nrow=5, ncol=3, layout=layout)

    args = _c_mat(mat)
    assert args.dtype_tag == dtype_tag
    assert (args.nrow, args.ncol) == (5, 3)
    assert args.is_row_major == (_C_API_IS_ROW_MAJOR if layout is Layout.ROW_MAJOR else _C_API_IS_COL_MAJOR)
    assert args.stride == (3 if layout is Layout.ROW_MAJOR else 5)

    seen = c_pointer_values(args.ptr, ctype, 15)
    if layout is Layout.ROW_MAJOR:
        seen = seen.reshape((5, 3))
    else:
        seen = seen.reshape((5, 3), order="F")
    np.testing.assert_array_equal(seen.view(bits), dense.view(bits))

def test_sparse_arguments():
    dense = np.array([[0.0, 1.5, 0.0], [2.0, 0.0, 3.0]])
    csr_args = _c_csr(sparse.csr_matrix(dense))
    assert (csr_args.num_indptr, csr_args.num_elem, csr_args.num_other) == (3, 3, 3)
    csc_args = _c_csc(sparse.csc_matrix(dense))
    assert (csc_args.num_indptr, csc_args.num_elem, csc_args.num_other) == (4, 3, 2)
    with pytest.raises(TypeError):
        _c_csr(sparse.csc_matrix(dense))
