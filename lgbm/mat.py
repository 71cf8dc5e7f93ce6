# coding: utf-8
"""Dense matrices and their marshalling into native buffer arguments."""

import ctypes
from enum import Enum
from typing import Any, Iterable, NamedTuple, Optional, Sequence, Union

import numpy as np
import scipy.sparse

from .basic import (
    _C_API_IS_COL_MAJOR,
    _C_API_IS_ROW_MAJOR,
    _MAX_INT32,
    _NUMPY_TO_C_API_DTYPE,
    ShapeMismatchError,
    _c_float_array,
    _c_int_array,
    _log_warning,
)
from .compat import pd_DataFrame

__all__ = [
    "Layout",
    "MatBuf",
]


class Layout(Enum):
    """Memory order of the values of a :class:`MatBuf`."""

    ROW_MAJOR = "row_major"
    COL_MAJOR = "col_major"


def _to_float_dtype(array: np.ndarray) -> np.ndarray:
    if array.dtype == np.float32 or array.dtype == np.float64:
        return array
    return array.astype(np.float32)


def _readonly_view(array: np.ndarray) -> np.ndarray:
    view = array.view()
    view.flags.writeable = False
    return view


class MatBuf:
    """Dense matrix with rows for data and columns for features.

    Parameters
    ----------
    values : numpy 1-D array or list of float
        Matrix values, laid out in ``layout`` order.
        float32 and float64 values are kept as is, anything else is converted to float32.
    nrow : int
        Number of rows.
    ncol : int
        Number of columns.
    layout : Layout, optional (default=Layout.COL_MAJOR)
        Memory order of ``values``.
    """

    def __init__(
        self,
        values: Union[np.ndarray, Sequence[float]],
        nrow: int,
        ncol: int,
        layout: Layout = Layout.COL_MAJOR,
    ):
        if not isinstance(layout, Layout):
            raise TypeError(f"layout should be Layout, met {type(layout).__name__}")
        if nrow < 0 or ncol < 0:
            raise ShapeMismatchError(f"Matrix shape ({nrow}, {ncol}) must not be negative")
        array = np.asarray(values)
        if array.ndim != 1:
            raise ShapeMismatchError(f"Matrix values must be 1-D, met shape {array.shape}")
        if len(array) != nrow * ncol:
            raise ShapeMismatchError(
                f"Length of values ({len(array)}) doesn't equal nrow * ncol ({nrow} * {ncol} = {nrow * ncol})"
            )
        array = _to_float_dtype(array)
        if not array.flags.c_contiguous:
            array = np.ascontiguousarray(array)
        self._values = _readonly_view(array)
        self._nrow = nrow
        self._ncol = ncol
        self._layout = layout

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[float]], dtype: "np.typing.DTypeLike" = np.float64) -> "MatBuf":
        """Build a row-major matrix from a sequence of rows of equal length.

        Parameters
        ----------
        rows : iterable of sequences of float
            Matrix rows.
        dtype : numpy dtype, optional (default=np.float64)
            Element type, float32 or float64.

        Returns
        -------
        mat : MatBuf
            Row-major matrix.
        """
        values = []
        ncol: Optional[int] = None
        nrow = 0
        for row in rows:
            row = list(row)
            if ncol is None:
                ncol = len(row)
            elif len(row) != ncol:
                raise ShapeMismatchError(f"Row {nrow} has {len(row)} columns, expected {ncol}")
            values.extend(row)
            nrow += 1
        return cls(np.asarray(values, dtype=dtype), nrow, ncol or 0, Layout.ROW_MAJOR)

    @classmethod
    def from_array(cls, array: Any) -> "MatBuf":
        """Wrap a 2-D numpy array (or pandas DataFrame) without copying it when possible.

        C-contiguous arrays become row-major matrices, F-contiguous ones column-major.
        """
        if isinstance(array, pd_DataFrame):
            array = array.to_numpy()
        array = np.asarray(array)
        if array.ndim != 2:
            raise ShapeMismatchError(f"Input numpy.ndarray must be 2 dimensional, met shape {array.shape}")
        array = _to_float_dtype(array)
        nrow, ncol = array.shape
        if array.flags.c_contiguous:
            return cls(array.reshape(array.size), nrow, ncol, Layout.ROW_MAJOR)
        if array.flags.f_contiguous:
            return cls(array.reshape(array.size, order="F"), nrow, ncol, Layout.COL_MAJOR)
        _log_warning("Usage of np.ndarray subset (sliced data) is not recommended due to it will double the peak memory cost.")
        return cls(np.ascontiguousarray(array).reshape(array.size), nrow, ncol, Layout.ROW_MAJOR)

    @property
    def nrow(self) -> int:
        return self._nrow

    @property
    def ncol(self) -> int:
        return self._ncol

    @property
    def shape(self):
        return (self._nrow, self._ncol)

    @property
    def layout(self) -> Layout:
        return self._layout

    @property
    def dtype(self) -> np.dtype:
        return self._values.dtype

    @property
    def values(self) -> np.ndarray:
        """Read-only flat view of the values in memory order."""
        return self._values

    def _index(self, row: int, col: int) -> int:
        if not 0 <= row < self._nrow:
            raise IndexError(f"index out of bounds: the nrow is {self._nrow} but the row is {row}")
        if not 0 <= col < self._ncol:
            raise IndexError(f"index out of bounds: the ncol is {self._ncol} but the col is {col}")
        if self._layout is Layout.ROW_MAJOR:
            return row * self._ncol + col
        return col * self._nrow + row

    def __getitem__(self, key):
        row, col = key
        return self._values[self._index(row, col)]

    def to_numpy(self) -> np.ndarray:
        """Read-only 2-D view of shape ``(nrow, ncol)``."""
        if self._layout is Layout.ROW_MAJOR:
            return self._values.reshape((self._nrow, self._ncol))
        return self._values.reshape((self._nrow, self._ncol), order="F")

    def row(self, i: int) -> np.ndarray:
        return self.to_numpy()[i]

    def col(self, j: int) -> np.ndarray:
        return self.to_numpy()[:, j]

    def rows(self, start: int, stop: int) -> "MatBuf":
        """Rows ``start`` to ``stop`` of a row-major matrix, sharing its memory."""
        if self._layout is not Layout.ROW_MAJOR:
            raise ValueError("rows() requires a row-major matrix")
        if not 0 <= start <= stop <= self._nrow:
            raise IndexError(f"index out of bounds: the len is {self._nrow} but the range is {start}..{stop}")
        return MatBuf(self._values[start * self._ncol : stop * self._ncol], stop - start, self._ncol, Layout.ROW_MAJOR)

    def __len__(self) -> int:
        return self._nrow

    def __repr__(self) -> str:
        return f"MatBuf(nrow={self._nrow}, ncol={self._ncol}, layout={self._layout.name}, dtype={self.dtype})"


class _MatArgs(NamedTuple):
    ptr: ctypes.c_void_p
    dtype_tag: int
    nrow: int
    ncol: int
    is_row_major: int
    stride: int


def _as_mat(data: Any) -> MatBuf:
    if isinstance(data, MatBuf):
        return data
    return MatBuf.from_array(data)


def _c_mat(mat: MatBuf) -> _MatArgs:
    """Describe a matrix the way ``LGBM_*ForMat`` calls expect it.

    The returned pointer borrows ``mat``'s memory, which must outlive the native call.

    Parameters
    ----------
    mat : MatBuf
        Matrix to pass.

    Returns
    -------
    args : _MatArgs
        Base pointer, element-type tag, shape, layout flag and pitch.
    """
    if mat.nrow > _MAX_INT32 or mat.ncol > _MAX_INT32:
        raise ShapeMismatchError(f"Matrix shape {mat.shape} exceeds the int32 range of the native API")
    is_row_major = mat.layout is Layout.ROW_MAJOR
    return _MatArgs(
        ptr=ctypes.c_void_p(mat.values.ctypes.data),
        dtype_tag=_NUMPY_TO_C_API_DTYPE[mat.dtype],
        nrow=mat.nrow,
        ncol=mat.ncol,
        is_row_major=_C_API_IS_ROW_MAJOR if is_row_major else _C_API_IS_COL_MAJOR,
        stride=mat.ncol if is_row_major else mat.nrow,
    )


class _SparseArgs(NamedTuple):
    ptr_indptr: Any
    indptr_type: int
    ptr_indices: Any
    ptr_data: Any
    data_type: int
    num_indptr: int
    num_elem: int
    num_other: int
    keep_alive: tuple


def _c_compressed(matrix: Any, num_other: int) -> _SparseArgs:
    ptr_indptr, type_ptr_indptr, indptr = _c_int_array(matrix.indptr)
    data = matrix.data
    if data.dtype != np.float32 and data.dtype != np.float64:
        data = data.astype(np.float32)
    ptr_data, type_ptr_data, data = _c_float_array(data)
    indices = matrix.indices.astype(np.int32, copy=False)
    return _SparseArgs(
        ptr_indptr=ptr_indptr,
        indptr_type=type_ptr_indptr,
        ptr_indices=indices.ctypes.data_as(ctypes.POINTER(ctypes.c_int32)),
        ptr_data=ptr_data,
        data_type=type_ptr_data,
        num_indptr=len(matrix.indptr),
        num_elem=len(matrix.data),
        num_other=num_other,
        keep_alive=(indptr, indices, data),
    )


def _c_csr(csr: Any) -> _SparseArgs:
    """Describe a CSR matrix for ``LGBM_*ForCSR`` calls; ``num_other`` is the number of columns."""
    if not scipy.sparse.issparse(csr) or csr.format != "csr":
        raise TypeError(f"Expected scipy.sparse CSR matrix, met {type(csr).__name__}")
    if csr.shape[1] > _MAX_INT32:
        raise ShapeMismatchError(f"CSR matrix has {csr.shape[1]} columns, more than the native API allows")
    return _c_compressed(csr, csr.shape[1])


def _c_csc(csc: Any) -> _SparseArgs:
    """Describe a CSC matrix for ``LGBM_*ForCSC`` calls; ``num_other`` is the number of rows."""
    if not scipy.sparse.issparse(csc) or csc.format != "csc":
        raise TypeError(f"Expected scipy.sparse CSC matrix, met {type(csc).__name__}")
    if csc.shape[0] > _MAX_INT32:
        raise ShapeMismatchError(f"CSC matrix has {csc.shape[0]} rows, more than the native API allows")
    return _c_compressed(csc, csc.shape[0])
