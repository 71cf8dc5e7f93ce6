# coding: utf-8
"""Dataset: one native dataset handle, its fields, and shared ownership of it."""

import ctypes
import threading
from contextlib import nullcontext
from enum import Enum
from pathlib import Path
from typing import Any, Callable, List, Mapping, Optional, Sequence, Set, Union

import numpy as np
import scipy.sparse

from .basic import (
    _C_API_DTYPE_FLOAT32,
    _C_API_DTYPE_FLOAT64,
    _C_API_DTYPE_INT32,
    _C_API_DTYPE_TO_CTYPE,
    _MAX_INT32,
    FieldLengthMismatchError,
    ReleasedHandleError,
    ShapeMismatchError,
    UnsupportedFieldTypeError,
    _c_array,
    _c_array_to_numpy,
    _c_str,
    _ConfigAliases,
    _DatasetHandle,
    _is_1d_list,
    _lib,
    _log_warning,
    _read_string_list,
    _safe_call,
    _SharedHandle,
)
from .compat import pd_DataFrame, pd_Series
from .mat import MatBuf, _as_mat, _c_csc, _c_csr, _c_mat
from .parameters import Parameters, encode

__all__ = [
    "Dataset",
    "Field",
]

_FieldValues = Union[np.ndarray, Sequence[float], pd_Series, pd_DataFrame]


class Field(Enum):
    """Per-row metadata of a :class:`Dataset`.

    ``LABEL`` and ``WEIGHT`` hold one float32 value per row.
    ``INIT_SCORE`` holds one float64 value per row and class, class-major.
    ``GROUP`` holds int32 group sizes which add up to the number of rows.
    """

    LABEL = "label"
    WEIGHT = "weight"
    INIT_SCORE = "init_score"
    GROUP = "group"

    @property
    def c_api_dtype(self) -> int:
        return _FIELD_TYPE_MAPPER[self]

    @property
    def dtype(self) -> "np.typing.DTypeLike":
        return _FIELD_NUMPY_DTYPE[self]

    @classmethod
    def _from_name(cls, field: Union["Field", str]) -> "Field":
        if isinstance(field, Field):
            return field
        try:
            return cls(field)
        except ValueError:
            raise UnsupportedFieldTypeError(f"Unknown field name: {field!r}") from None


_FIELD_TYPE_MAPPER = {
    Field.LABEL: _C_API_DTYPE_FLOAT32,
    Field.WEIGHT: _C_API_DTYPE_FLOAT32,
    Field.INIT_SCORE: _C_API_DTYPE_FLOAT64,
    Field.GROUP: _C_API_DTYPE_INT32,
}

_FIELD_NUMPY_DTYPE = {
    Field.LABEL: np.float32,
    Field.WEIGHT: np.float32,
    Field.INIT_SCORE: np.float64,
    Field.GROUP: np.int32,
}


def _field_to_numpy(values: Any, field: Field) -> np.ndarray:
    """Convert field values to a numpy array of numbers, keeping its dimensions."""
    if isinstance(values, pd_Series):
        values = values.to_numpy()
    elif isinstance(values, pd_DataFrame):
        values = values.to_numpy()
    try:
        array = np.asarray(values)
    except (TypeError, ValueError) as err:
        raise UnsupportedFieldTypeError(f"Cannot convert values of {field.value} to numbers: {err}") from err
    if array.dtype.kind not in "biuf":
        raise UnsupportedFieldTypeError(f"Wrong type({array.dtype}) for {field.value}, it should contain numbers")
    if array.ndim == 2 and array.shape[1] == 1 and field is not Field.INIT_SCORE:
        _log_warning("Converting column-vector to 1d array")
        array = array.ravel()
    return array


def _is_2d_list(data: Any) -> bool:
    return isinstance(data, list) and len(data) > 0 and _is_1d_list(data[0])


class Dataset:
    """Dataset in LightGBM.

    Parameters
    ----------
    data : MatBuf, numpy 2-D array, pandas DataFrame, scipy.sparse, list of lists, list of MatBuf / numpy 2-D arrays, str or pathlib.Path
        Data source of Dataset.
        If str or pathlib.Path, it represents the path to a text file (CSV, TSV, or LibSVM) or a LightGBM Dataset binary file.
    reference : Dataset or None, optional (default=None)
        If this is Dataset for validation, training data should be used as reference.
        The new Dataset reuses the feature binning of ``reference`` and keeps it alive.
    params : dict, Parameters or None, optional (default=None)
        Parameters for Dataset construction.
    label : list, numpy 1-D array, pandas Series or None, optional (default=None)
        Label of the data.
    weight : list, numpy 1-D array, pandas Series or None, optional (default=None)
        Weight for each instance. Weights should be non-negative.
    group : list, numpy 1-D array, pandas Series or None, optional (default=None)
        Group/query sizes for ranking tasks. ``sum(group) = n_samples``.
    init_score : list, numpy 1-D or 2-D array, pandas Series / DataFrame or None, optional (default=None)
        Init score for Dataset.
    feature_name : list of str or None, optional (default=None)
        Feature names. Taken from the columns of a pandas DataFrame when not given.
    """

    def __init__(
        self,
        data: Any,
        reference: Optional["Dataset"] = None,
        params: Optional[Mapping[str, Any]] = None,
        label: Optional[_FieldValues] = None,
        weight: Optional[_FieldValues] = None,
        group: Optional[_FieldValues] = None,
        init_score: Optional[_FieldValues] = None,
        feature_name: Optional[List[str]] = None,
    ):
        if reference is not None and not isinstance(reference, Dataset):
            raise TypeError(f"Reference dataset should be None or Dataset instance, met {type(reference).__name__}")
        self._shared: Optional[_SharedHandle] = None
        self._closed = False
        self._lock = threading.RLock()
        self.reference = reference
        self.params = Parameters(params)
        self.num_class = self.__get_num_class()
        if feature_name is None and isinstance(data, pd_DataFrame):
            feature_name = [str(col) for col in data.columns]

        self.__construct(data, encode(self.params))
        try:
            if feature_name is not None:
                self.set_feature_names(feature_name)
            for field, values in (
                (Field.LABEL, label),
                (Field.WEIGHT, weight),
                (Field.GROUP, group),
                (Field.INIT_SCORE, init_score),
            ):
                if values is not None:
                    self.set_field(field, values)
        except BaseException:
            self.close()
            raise

    @classmethod
    def from_mat(
        cls,
        mat: Union[MatBuf, np.ndarray],
        reference: Optional["Dataset"] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> "Dataset":
        """Create a Dataset from a dense matrix, one row per sample.

        Parameters
        ----------
        mat : MatBuf or numpy 2-D array
            Feature matrix.
        reference : Dataset or None, optional (default=None)
            Dataset whose binning is reused. ``mat`` must have ``reference.num_feature()`` columns.
        params : dict, Parameters or None, optional (default=None)
            Parameters for Dataset construction.

        Returns
        -------
        dataset : Dataset
            The constructed Dataset.
        """
        if not isinstance(mat, (MatBuf, np.ndarray, pd_DataFrame)):
            raise TypeError(f"Expected MatBuf or numpy 2-D array, met {type(mat).__name__}")
        return cls(mat, reference=reference, params=params)

    @classmethod
    def from_mats(
        cls,
        mats: Sequence[Union[MatBuf, np.ndarray]],
        reference: Optional["Dataset"] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> "Dataset":
        """Create a Dataset from several matrices stacked vertically."""
        if not isinstance(mats, (list, tuple)) or not mats:
            raise TypeError("Expected a non-empty list of matrices")
        return cls(list(mats), reference=reference, params=params)

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        reference: Optional["Dataset"] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> "Dataset":
        """Create a Dataset from a CSV, TSV, LibSVM or LightGBM binary file."""
        return cls(Path(path), reference=reference, params=params)

    @classmethod
    def from_csr(
        cls,
        csr: scipy.sparse.csr_matrix,
        reference: Optional["Dataset"] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> "Dataset":
        if not scipy.sparse.issparse(csr) or csr.format != "csr":
            raise TypeError(f"Expected scipy.sparse CSR matrix, met {type(csr).__name__}")
        return cls(csr, reference=reference, params=params)

    @classmethod
    def from_csc(
        cls,
        csc: scipy.sparse.csc_matrix,
        reference: Optional["Dataset"] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> "Dataset":
        if not scipy.sparse.issparse(csc) or csc.format != "csc":
            raise TypeError(f"Expected scipy.sparse CSC matrix, met {type(csc).__name__}")
        return cls(csc, reference=reference, params=params)

    def create_valid(
        self,
        data: Any,
        label: Optional[_FieldValues] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> "Dataset":
        """Create validation data aligned with current Dataset.

        Parameters
        ----------
        data : MatBuf, numpy 2-D array, pandas DataFrame, scipy.sparse, str or pathlib.Path
            Data source of Dataset.
        label : list, numpy 1-D array, pandas Series or None, optional (default=None)
            Label of the data.
        params : dict, Parameters or None, optional (default=None)
            Other parameters for validation Dataset. This Dataset's parameters are used when not given.

        Returns
        -------
        valid : Dataset
            Validation Dataset with reference to self.
        """
        return Dataset(
            data,
            reference=self,
            params=self.params if params is None else params,
            label=label,
        )

    def __get_num_class(self) -> int:
        for alias in _ConfigAliases.get_sorted("num_class"):
            if self.params.get(alias) is not None:
                return int(self.params.get(alias))
        if self.reference is not None:
            return self.reference.num_class
        return 1

    def __check_reference_num_feature(self, ncol: int) -> None:
        if self.reference is not None:
            ref_num_feature = self.reference.num_feature()
            if ncol != ref_num_feature:
                raise ShapeMismatchError(
                    f"Data has {ncol} columns, but the reference Dataset has {ref_num_feature} features"
                )

    def __create(self, create: Callable[[Optional[_DatasetHandle], Any], int]) -> None:
        """Run a native construction call and take ownership of the new handle.

        The reference's token is held for as long as the new native handle lives.
        """
        ref_token = self.reference._acquire() if self.reference is not None else None
        handle = ctypes.c_void_p()
        try:
            with self.reference._lock if self.reference is not None else nullcontext():
                ref_handle = ref_token.handle if ref_token is not None else None
                _safe_call(create(ref_handle, ctypes.byref(handle)))
        except BaseException:
            if ref_token is not None:
                ref_token.release()
            raise
        self._shared = _SharedHandle(
            handle,
            free_func_name="LGBM_DatasetFree",
            kind="Dataset",
            dependencies=[ref_token] if ref_token is not None else None,
        )

    def __construct(self, data: Any, params_str: str) -> None:
        if isinstance(data, (str, Path)):
            self.__init_from_file(data, params_str)
        elif isinstance(data, (MatBuf, np.ndarray, pd_DataFrame)):
            self.__init_from_mat(_as_mat(data), params_str)
        elif scipy.sparse.issparse(data):
            if data.format == "csc":
                self.__init_from_csc(data, params_str)
            else:
                if data.format != "csr":
                    data = scipy.sparse.csr_matrix(data)
                self.__init_from_csr(data, params_str)
        elif isinstance(data, list) and data and all(isinstance(x, (MatBuf, np.ndarray)) for x in data):
            self.__init_from_mats([_as_mat(x) for x in data], params_str)
        elif _is_2d_list(data):
            self.__init_from_mat(MatBuf.from_rows(data), params_str)
        else:
            raise TypeError(f"Cannot initialize Dataset from {type(data).__name__}")

    def __init_from_mat(self, mat: MatBuf, params_str: str) -> None:
        """Initialize data from a dense matrix."""
        self.__check_reference_num_feature(mat.ncol)
        args = _c_mat(mat)
        self.__create(
            lambda ref, out: _lib().LGBM_DatasetCreateFromMat(
                args.ptr,
                ctypes.c_int(args.dtype_tag),
                ctypes.c_int32(args.nrow),
                ctypes.c_int32(args.ncol),
                ctypes.c_int(args.is_row_major),
                _c_str(params_str),
                ref,
                out,
            )
        )

    def __init_from_mats(self, mats: List[MatBuf], params_str: str) -> None:
        """Initialize data from a list of dense matrices."""
        ncol = mats[0].ncol
        layout = mats[0].layout
        dtype = mats[0].dtype
        for mat in mats:
            if mat.ncol != ncol:
                raise ShapeMismatchError("Input matrices must have same number of columns")
            if mat.layout is not layout:
                raise ShapeMismatchError("Input matrices must have same layout")
            if mat.dtype != dtype:
                raise ShapeMismatchError("Input matrices must have same type")
        self.__check_reference_num_feature(ncol)
        all_args = [_c_mat(mat) for mat in mats]
        ptr_data = _c_array(ctypes.c_void_p, [args.ptr for args in all_args])
        layouts = _c_array(ctypes.c_int, [args.is_row_major for args in all_args])
        nrow = np.array([args.nrow for args in all_args], dtype=np.int32)
        self.__create(
            lambda ref, out: _lib().LGBM_DatasetCreateFromMats(
                ctypes.c_int32(len(mats)),
                ptr_data,
                ctypes.c_int(all_args[0].dtype_tag),
                nrow.ctypes.data_as(ctypes.POINTER(ctypes.c_int32)),
                ctypes.c_int32(ncol),
                layouts,
                _c_str(params_str),
                ref,
                out,
            )
        )

    def __init_from_file(self, path: Union[str, Path], params_str: str) -> None:
        """Initialize data from a text or binary file."""
        self.__create(
            lambda ref, out: _lib().LGBM_DatasetCreateFromFile(
                _c_str(str(path)),
                _c_str(params_str),
                ref,
                out,
            )
        )

    def __init_from_csr(self, csr: scipy.sparse.csr_matrix, params_str: str) -> None:
        """Initialize data from a CSR matrix."""
        self.__check_reference_num_feature(csr.shape[1])
        args = _c_csr(csr)
        self.__create(
            lambda ref, out: _lib().LGBM_DatasetCreateFromCSR(
                args.ptr_indptr,
                ctypes.c_int(args.indptr_type),
                args.ptr_indices,
                args.ptr_data,
                ctypes.c_int(args.data_type),
                ctypes.c_int64(args.num_indptr),
                ctypes.c_int64(args.num_elem),
                ctypes.c_int64(args.num_other),
                _c_str(params_str),
                ref,
                out,
            )
        )

    def __init_from_csc(self, csc: scipy.sparse.csc_matrix, params_str: str) -> None:
        """Initialize data from a CSC matrix."""
        self.__check_reference_num_feature(csc.shape[1])
        args = _c_csc(csc)
        self.__create(
            lambda ref, out: _lib().LGBM_DatasetCreateFromCSC(
                args.ptr_indptr,
                ctypes.c_int(args.indptr_type),
                args.ptr_indices,
                args.ptr_data,
                ctypes.c_int(args.data_type),
                ctypes.c_int64(args.num_indptr),
                ctypes.c_int64(args.num_elem),
                ctypes.c_int64(args.num_other),
                _c_str(params_str),
                ref,
                out,
            )
        )

    @property
    def _handle(self) -> ctypes.c_void_p:
        if self._closed or self._shared is None or not self._shared.is_alive:
            raise ReleasedHandleError("Dataset has been closed")
        return self._shared.handle

    def _acquire(self) -> _SharedHandle:
        """Take a new ownership token on the native dataset."""
        if self._closed or self._shared is None:
            raise ReleasedHandleError("Dataset has been closed")
        return self._shared.acquire()

    @property
    def ref_count(self) -> int:
        """Number of owners (this object, Boosters and aligned Datasets) of the native dataset."""
        return 0 if self._shared is None else self._shared.ref_count

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Release this object's ownership of the native dataset.

        The native dataset is freed once no Booster or aligned Dataset uses it any more.
        """
        with self._lock:
            if self._closed or self._shared is None:
                self._closed = True
                return
            self._closed = True
        self._shared.release()

    def __enter__(self) -> "Dataset":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def __del__(self) -> None:
        try:
            self.close()
        except AttributeError:
            pass

    def num_data(self) -> int:
        """Get the number of rows in the Dataset.

        Returns
        -------
        number_of_rows : int
            The number of rows in the Dataset.
        """
        ret = ctypes.c_int(0)
        with self._lock:
            _safe_call(
                _lib().LGBM_DatasetGetNumData(
                    self._handle,
                    ctypes.byref(ret),
                )
            )
        return ret.value

    def num_feature(self) -> int:
        """Get the number of columns (features) in the Dataset.

        Returns
        -------
        number_of_columns : int
            The number of columns (features) in the Dataset.
        """
        ret = ctypes.c_int(0)
        with self._lock:
            _safe_call(
                _lib().LGBM_DatasetGetNumFeature(
                    self._handle,
                    ctypes.byref(ret),
                )
            )
        return ret.value

    def __field_values(self, field: Field, values: Any) -> np.ndarray:
        """Check field values against the Dataset and convert them to the native element type."""
        array = _field_to_numpy(values, field)
        num_data = self.num_data()
        if field is Field.INIT_SCORE:
            expected = num_data * self.num_class
            if array.ndim == 2:
                if array.shape != (num_data, self.num_class):
                    raise FieldLengthMismatchError(
                        f"Shape of init_score {array.shape} doesn't equal (num_data, num_class) = ({num_data}, {self.num_class})"
                    )
                array = array.ravel(order="F")
        elif field is Field.GROUP:
            expected = None
        else:
            expected = num_data
        if array.ndim != 1:
            raise UnsupportedFieldTypeError(f"{field.value} must be 1-D, met shape {array.shape}")

        if field is Field.GROUP:
            if array.dtype.kind == "f" and not np.all(np.equal(np.mod(array, 1), 0)):
                raise UnsupportedFieldTypeError("Group sizes must be integers")
            if np.any(array < 0):
                raise FieldLengthMismatchError("Group sizes must not be negative")
            if np.any(array > _MAX_INT32):
                raise FieldLengthMismatchError("Group size exceeds the int32 range")
            total = int(np.sum(array, dtype=np.int64))
            if total != num_data:
                raise FieldLengthMismatchError(f"Sum of group sizes ({total}) doesn't equal num_data ({num_data})")
        elif len(array) != expected:
            raise FieldLengthMismatchError(f"Length of {field.value} ({len(array)}) doesn't equal expected ({expected})")
        return np.ascontiguousarray(array, dtype=field.dtype)

    def set_field(self, field: Union[Field, str], values: Optional[_FieldValues]) -> "Dataset":
        """Set property into the Dataset.

        Parameters
        ----------
        field : Field or str
            The field to set.
        values : list, numpy array, pandas Series, pandas DataFrame (for init_score) or None
            The data to be set. None clears the field.

        Returns
        -------
        self : Dataset
            Dataset with set property.
        """
        field = Field._from_name(field)
        with self._lock:
            if values is None:
                _safe_call(
                    _lib().LGBM_DatasetSetField(
                        self._handle,
                        _c_str(field.value),
                        None,
                        ctypes.c_int(0),
                        ctypes.c_int(field.c_api_dtype),
                    )
                )
                return self
            data = self.__field_values(field, values)
            ptr_data = data.ctypes.data_as(ctypes.POINTER(_C_API_DTYPE_TO_CTYPE[field.c_api_dtype]))
            _safe_call(
                _lib().LGBM_DatasetSetField(
                    self._handle,
                    _c_str(field.value),
                    ptr_data,
                    ctypes.c_int(len(data)),
                    ctypes.c_int(field.c_api_dtype),
                )
            )
        return self

    def get_field(self, field: Union[Field, str]) -> Optional[np.ndarray]:
        """Get property from the Dataset.

        Parameters
        ----------
        field : Field or str
            The field to read.

        Returns
        -------
        info : numpy array or None
            A copy of the native values, None if the field is not set.
            ``GROUP`` is returned as group sizes and a multi-class ``INIT_SCORE`` with shape (num_data, num_class).
        """
        field = Field._from_name(field)
        tmp_out_len = ctypes.c_int(0)
        out_type = ctypes.c_int(0)
        ret = ctypes.POINTER(ctypes.c_void_p)()
        with self._lock:
            _safe_call(
                _lib().LGBM_DatasetGetField(
                    self._handle,
                    _c_str(field.value),
                    ctypes.byref(tmp_out_len),
                    ctypes.byref(ret),
                    ctypes.byref(out_type),
                )
            )
            if out_type.value != field.c_api_dtype:
                raise UnsupportedFieldTypeError(f"Return type error for get_field: {field.value}")
            # unset fields come back as a null pointer
            if tmp_out_len.value == 0 or not ret:
                return None
            arr = _c_array_to_numpy(cptr=ret, length=tmp_out_len.value, type_data=out_type.value)
            num_data = self.num_data()
        if field is Field.GROUP:
            # the native dataset keeps query boundaries
            return np.diff(arr).astype(np.int32)
        if field is Field.INIT_SCORE and num_data > 0:
            num_classes = arr.size // num_data
            if num_classes > 1:
                arr = arr.reshape((num_data, num_classes), order="F")
        return arr

    def set_label(self, label: Optional[_FieldValues]) -> "Dataset":
        return self.set_field(Field.LABEL, label)

    def set_weight(self, weight: Optional[_FieldValues]) -> "Dataset":
        return self.set_field(Field.WEIGHT, weight)

    def set_init_score(self, init_score: Optional[_FieldValues]) -> "Dataset":
        return self.set_field(Field.INIT_SCORE, init_score)

    def set_group(self, group: Optional[_FieldValues]) -> "Dataset":
        return self.set_field(Field.GROUP, group)

    def get_label(self) -> Optional[np.ndarray]:
        return self.get_field(Field.LABEL)

    def get_weight(self) -> Optional[np.ndarray]:
        return self.get_field(Field.WEIGHT)

    def get_init_score(self) -> Optional[np.ndarray]:
        return self.get_field(Field.INIT_SCORE)

    def get_group(self) -> Optional[np.ndarray]:
        return self.get_field(Field.GROUP)

    def set_feature_names(self, feature_name: Sequence[str]) -> "Dataset":
        """Set feature names.

        Parameters
        ----------
        feature_name : list of str
            Feature names, one per column.

        Returns
        -------
        self : Dataset
            Dataset with set feature names.
        """
        with self._lock:
            num_feature = self.num_feature()
            if len(feature_name) != num_feature:
                raise ShapeMismatchError(
                    f"Length of feature_name({len(feature_name)}) and num_feature({num_feature}) don't match"
                )
            c_feature_name = [_c_str(name) for name in feature_name]
            _safe_call(
                _lib().LGBM_DatasetSetFeatureNames(
                    self._handle,
                    _c_array(ctypes.c_char_p, c_feature_name),
                    ctypes.c_int(len(feature_name)),
                )
            )
        return self

    def get_feature_names(self) -> List[str]:
        """Get the names of columns (features) in the Dataset.

        Returns
        -------
        feature_names : list of str
            The names of columns (features) in the Dataset.
        """
        with self._lock:
            handle = self._handle
            return _read_string_list(
                lambda num, out_len, buffer_len, required_len, buffers: _lib().LGBM_DatasetGetFeatureNames(
                    handle, num, out_len, buffer_len, required_len, buffers
                ),
                self.num_feature(),
            )

    def dump_text(self, filename: Union[str, Path]) -> "Dataset":
        """Save Dataset to a text file.

        This format cannot be loaded back in by LightGBM, but is useful for debugging purposes.

        Parameters
        ----------
        filename : str or pathlib.Path
            Name of the output file.

        Returns
        -------
        self : Dataset
            Returns self.
        """
        with self._lock:
            _safe_call(
                _lib().LGBM_DatasetDumpText(
                    self._handle,
                    _c_str(str(filename)),
                )
            )
        return self

    def get_ref_chain(self, ref_limit: int = 100) -> Set["Dataset"]:
        """Get a chain of Dataset objects.

        Starts with r, then goes to r.reference (if exists),
        then to r.reference.reference, etc.
        until we hit ``ref_limit`` or a reference loop.

        Parameters
        ----------
        ref_limit : int, optional (default=100)
            The limit number of references.

        Returns
        -------
        ref_chain : set of Dataset
            Chain of references of the Datasets.
        """
        head = self
        ref_chain: Set[Dataset] = set()
        while len(ref_chain) < ref_limit:
            if isinstance(head, Dataset):
                ref_chain.add(head)
                if (head.reference is not None) and (head.reference not in ref_chain):
                    head = head.reference
                else:
                    break
            else:
                break
        return ref_chain
