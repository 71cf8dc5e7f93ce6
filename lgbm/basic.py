# coding: utf-8
"""Native library access, error bridge and shared helpers for the LightGBM C API."""

import ctypes
import json
import threading
import warnings
from functools import wraps
from typing import Any, Callable, Dict, List, Optional, Set, Tuple, Union

import numpy as np

from .libpath import find_lib_path

__all__ = [
    "BoosterStateError",
    "FieldLengthMismatchError",
    "InvalidParameterError",
    "LightGBMError",
    "NativeCallError",
    "ReleasedHandleError",
    "SchemaMismatchError",
    "ShapeMismatchError",
    "UnsupportedFieldTypeError",
    "capture_last_error",
    "register_logger",
]

_BoosterHandle = ctypes.c_void_p
_DatasetHandle = ctypes.c_void_p
_ctypes_int_ptr = Union[
    "ctypes._Pointer[ctypes.c_int32]",
    "ctypes._Pointer[ctypes.c_int64]",
]
_ctypes_float_ptr = Union[
    "ctypes._Pointer[ctypes.c_float]",
    "ctypes._Pointer[ctypes.c_double]",
]


class LightGBMError(Exception):
    """Error thrown by LightGBM."""

    pass


class InvalidParameterError(LightGBMError, ValueError):
    """A configuration key or value cannot be passed to the native engine."""

    pass


class ShapeMismatchError(LightGBMError, ValueError):
    """Matrix, dataset or prediction dimensions disagree."""

    pass


class FieldLengthMismatchError(LightGBMError, ValueError):
    """Field values have the wrong length for the Dataset."""

    pass


class UnsupportedFieldTypeError(LightGBMError, TypeError):
    """Field name or field values cannot be converted to the native element type."""

    pass


class SchemaMismatchError(LightGBMError):
    """Validation Dataset was not aligned to the Booster's training Dataset."""

    pass


class BoosterStateError(LightGBMError):
    """Operation is not allowed in the Booster's current state."""

    pass


class ReleasedHandleError(LightGBMError):
    """The native handle behind this object has already been released."""

    pass


class NativeCallError(LightGBMError):
    """The native engine reported a failure.

    Attributes
    ----------
    message : str
        Last error message of the native library, read right after the failing call.
    code : int or None
        Status code returned by the failing call.
    """

    def __init__(self, message: str, code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.code = code


class _DummyLogger:
    def info(self, msg: str) -> None:
        print(msg)  # noqa: T201

    def warning(self, msg: str) -> None:
        warnings.warn(msg, stacklevel=3)


_LOGGER: Any = _DummyLogger()
_INFO_METHOD_NAME = "info"
_WARNING_METHOD_NAME = "warning"


def _has_method(logger: Any, method_name: str) -> bool:
    return callable(getattr(logger, method_name, None))


def register_logger(
    logger: Any,
    info_method_name: str = "info",
    warning_method_name: str = "warning",
) -> None:
    """Register custom logger.

    Parameters
    ----------
    logger : Any
        Custom logger.
    info_method_name : str, optional (default="info")
        Method used to log info messages.
    warning_method_name : str, optional (default="warning")
        Method used to log warning messages.
    """
    if not _has_method(logger, info_method_name) or not _has_method(logger, warning_method_name):
        raise TypeError(f"Logger must provide '{info_method_name}' and '{warning_method_name}' method")

    global _LOGGER, _INFO_METHOD_NAME, _WARNING_METHOD_NAME
    _LOGGER = logger
    _INFO_METHOD_NAME = info_method_name
    _WARNING_METHOD_NAME = warning_method_name


def _normalize_native_string(func: Callable[[str], None]) -> Callable[[str], None]:
    """Join log messages from native library which come by chunks."""
    msg_normalized: List[str] = []

    @wraps(func)
    def wrapper(msg: str) -> None:
        nonlocal msg_normalized
        if msg.strip() == "":
            msg = "".join(msg_normalized)
            msg_normalized = []
            return func(msg)
        else:
            msg_normalized.append(msg)

    return wrapper


def _log_info(msg: str) -> None:
    getattr(_LOGGER, _INFO_METHOD_NAME)(msg)


def _log_warning(msg: str) -> None:
    getattr(_LOGGER, _WARNING_METHOD_NAME)(msg)


@_normalize_native_string
def _log_native(msg: str) -> None:
    getattr(_LOGGER, _INFO_METHOD_NAME)(msg)


def _log_callback(msg: bytes) -> None:
    """Redirect logs from native library into Python."""
    _log_native(str(msg.decode("utf-8")))


def _load_lib() -> ctypes.CDLL:
    """Load LightGBM library."""
    lib_path = find_lib_path()
    lib = ctypes.cdll.LoadLibrary(lib_path[0])
    lib.LGBM_GetLastError.restype = ctypes.c_char_p
    callback = ctypes.CFUNCTYPE(None, ctypes.c_char_p)
    lib.callback = callback(_log_callback)  # type: ignore[attr-defined]
    ret = lib.LGBM_RegisterLogCallback(lib.callback)
    if ret != 0:
        raise NativeCallError(lib.LGBM_GetLastError().decode("utf-8"), ret)
    return lib


# loaded on first use, so that the pure-Python parts of the package import without lib_lightgbm
_LIB: Optional[ctypes.CDLL] = None
_LIB_LOCK = threading.Lock()


def _lib() -> ctypes.CDLL:
    """Get the loaded LightGBM library, loading it on first use."""
    global _LIB
    if _LIB is None:
        with _LIB_LOCK:
            if _LIB is None:
                _LIB = _load_lib()
    return _LIB


def capture_last_error() -> str:
    """Read the last error message of the native library.

    The native error slot is overwritten by the next native call,
    so this has to run right after the call which failed.

    Returns
    -------
    message : str
        The last error message.
    """
    return _lib().LGBM_GetLastError().decode("utf-8")


def _safe_call(ret: int) -> None:
    """Check the return value from C API call.

    Parameters
    ----------
    ret : int
        The return value from C API calls.
    """
    if ret != 0:
        raise NativeCallError(capture_last_error(), ret)


def _is_numeric(obj: Any) -> bool:
    """Check whether object is a number or not, include numpy number, etc."""
    try:
        float(obj)
        return True
    except (TypeError, ValueError):
        # TypeError: obj is not a string or a number
        # ValueError: invalid literal
        return False


def _is_numpy_1d_array(data: Any) -> bool:
    """Check whether data is a numpy 1-D array."""
    return isinstance(data, np.ndarray) and len(data.shape) == 1


def _is_1d_list(data: Any) -> bool:
    """Check whether data is a 1-D list."""
    return isinstance(data, (list, tuple)) and (not data or _is_numeric(data[0]))


def _c_str(string: str) -> ctypes.c_char_p:
    """Convert a Python string to C string."""
    return ctypes.c_char_p(string.encode("utf-8"))


def _c_array(ctype: type, values: List[Any]) -> ctypes.Array:
    """Convert a Python array to C array."""
    return (ctype * len(values))(*values)  # type: ignore[operator]


_MAX_INT32 = (1 << 31) - 1

"""Macro definition of data type in C API of LightGBM"""
_C_API_DTYPE_FLOAT32 = 0
_C_API_DTYPE_FLOAT64 = 1
_C_API_DTYPE_INT32 = 2
_C_API_DTYPE_INT64 = 3

"""Macro definition of matrix layout"""
_C_API_IS_COL_MAJOR = 0
_C_API_IS_ROW_MAJOR = 1

"""Macro definition of prediction type in C API of LightGBM"""
_C_API_PREDICT_NORMAL = 0
_C_API_PREDICT_RAW_SCORE = 1
_C_API_PREDICT_LEAF_INDEX = 2
_C_API_PREDICT_CONTRIB = 3

"""Macro definition of feature importance type"""
_C_API_FEATURE_IMPORTANCE_SPLIT = 0
_C_API_FEATURE_IMPORTANCE_GAIN = 1

"""numpy dtype to C API data type"""
_NUMPY_TO_C_API_DTYPE = {
    np.dtype(np.float32): _C_API_DTYPE_FLOAT32,
    np.dtype(np.float64): _C_API_DTYPE_FLOAT64,
    np.dtype(np.int32): _C_API_DTYPE_INT32,
    np.dtype(np.int64): _C_API_DTYPE_INT64,
}

_C_API_DTYPE_TO_CTYPE = {
    _C_API_DTYPE_FLOAT32: ctypes.c_float,
    _C_API_DTYPE_FLOAT64: ctypes.c_double,
    _C_API_DTYPE_INT32: ctypes.c_int32,
    _C_API_DTYPE_INT64: ctypes.c_int64,
}


def _convert_from_sliced_object(data: np.ndarray) -> np.ndarray:
    """Fix the memory of sliced 1-D object."""
    if isinstance(data, np.ndarray) and not data.flags.c_contiguous:
        _log_warning("Usage of np.ndarray subset (sliced data) is not recommended due to it will double the peak memory cost.")
        return np.copy(data)
    return data


def _c_float_array(data: Any) -> Tuple[_ctypes_float_ptr, int, np.ndarray]:
    """Get pointer of float numpy array / list."""
    if _is_1d_list(data):
        data = np.asarray(data)
    if _is_numpy_1d_array(data):
        data = _convert_from_sliced_object(data)
        assert data.flags.c_contiguous
        ptr_data: _ctypes_float_ptr
        if data.dtype == np.float32:
            ptr_data = data.ctypes.data_as(ctypes.POINTER(ctypes.c_float))
            type_data = _C_API_DTYPE_FLOAT32
        elif data.dtype == np.float64:
            ptr_data = data.ctypes.data_as(ctypes.POINTER(ctypes.c_double))
            type_data = _C_API_DTYPE_FLOAT64
        else:
            raise TypeError(f"Expected np.float32 or np.float64, met type({data.dtype})")
    else:
        raise TypeError(f"Unknown type({type(data).__name__})")
    return (ptr_data, type_data, data)  # return `data` to avoid the temporary copy is freed


def _c_int_array(data: Any) -> Tuple[_ctypes_int_ptr, int, np.ndarray]:
    """Get pointer of int numpy array / list."""
    if _is_1d_list(data):
        data = np.asarray(data)
    if _is_numpy_1d_array(data):
        data = _convert_from_sliced_object(data)
        assert data.flags.c_contiguous
        ptr_data: _ctypes_int_ptr
        if data.dtype == np.int32:
            ptr_data = data.ctypes.data_as(ctypes.POINTER(ctypes.c_int32))
            type_data = _C_API_DTYPE_INT32
        elif data.dtype == np.int64:
            ptr_data = data.ctypes.data_as(ctypes.POINTER(ctypes.c_int64))
            type_data = _C_API_DTYPE_INT64
        else:
            raise TypeError(f"Expected np.int32 or np.int64, met type({data.dtype})")
    else:
        raise TypeError(f"Unknown type({type(data).__name__})")
    return (ptr_data, type_data, data)  # return `data` to avoid the temporary copy is freed


def _c_array_to_numpy(*, cptr: "ctypes._Pointer", length: int, type_data: int) -> np.ndarray:
    """Copy a native array of the given C API data type into a numpy array."""
    ctype = _C_API_DTYPE_TO_CTYPE[type_data]
    typed_ptr = ctypes.cast(cptr, ctypes.POINTER(ctype))
    return np.ctypeslib.as_array(typed_ptr, shape=(length,)).copy()


def _read_string_buffer(call: Callable[[ctypes.c_int64, Any, Any], int]) -> str:
    """Read a string the native library writes into a caller-allocated buffer.

    ``call(buffer_len, out_len_ref, buffer)`` is invoked again with a larger buffer
    when the first one was too small.
    """
    buffer_len = 1 << 20
    tmp_out_len = ctypes.c_int64(0)
    string_buffer = ctypes.create_string_buffer(buffer_len)
    ptr_string_buffer = ctypes.c_char_p(ctypes.addressof(string_buffer))
    _safe_call(call(ctypes.c_int64(buffer_len), ctypes.byref(tmp_out_len), ptr_string_buffer))
    actual_len = tmp_out_len.value
    # if buffer length is not long enough, re-allocate a buffer
    if actual_len > buffer_len:
        string_buffer = ctypes.create_string_buffer(actual_len)
        ptr_string_buffer = ctypes.c_char_p(ctypes.addressof(string_buffer))
        _safe_call(call(ctypes.c_int64(actual_len), ctypes.byref(tmp_out_len), ptr_string_buffer))
    return string_buffer.value.decode("utf-8")


def _read_string_list(call: Callable[..., int], num: int) -> List[str]:
    """Read a list of ``num`` strings through a ``LGBM_*GetFeatureNames``-style call."""
    if num == 0:
        return []
    tmp_out_len = ctypes.c_int(0)
    reserved_string_buffer_size = 255
    required_string_buffer_size = ctypes.c_size_t(0)
    string_buffers = [ctypes.create_string_buffer(reserved_string_buffer_size) for _ in range(num)]
    ptr_string_buffers = (ctypes.c_char_p * num)(*map(ctypes.addressof, string_buffers))  # type: ignore[misc]
    _safe_call(
        call(
            ctypes.c_int(num),
            ctypes.byref(tmp_out_len),
            ctypes.c_size_t(reserved_string_buffer_size),
            ctypes.byref(required_string_buffer_size),
            ptr_string_buffers,
        )
    )
    if num != tmp_out_len.value:
        raise ValueError(f"Length of returned names ({tmp_out_len.value}) doesn't equal with expected ({num})")
    actual_string_buffer_size = required_string_buffer_size.value
    # if buffer length is not long enough, reallocate buffers
    if reserved_string_buffer_size < actual_string_buffer_size:
        string_buffers = [ctypes.create_string_buffer(actual_string_buffer_size) for _ in range(num)]
        ptr_string_buffers = (ctypes.c_char_p * num)(*map(ctypes.addressof, string_buffers))  # type: ignore[misc]
        _safe_call(
            call(
                ctypes.c_int(num),
                ctypes.byref(tmp_out_len),
                ctypes.c_size_t(actual_string_buffer_size),
                ctypes.byref(required_string_buffer_size),
                ptr_string_buffers,
            )
        )
    return [string_buffers[i].value.decode("utf-8") for i in range(num)]


class _ConfigAliases:
    # lazy evaluation to allow import without dynamic library
    aliases: Optional[Dict[str, List[str]]] = None

    @staticmethod
    def _get_all_param_aliases() -> Dict[str, List[str]]:
        aliases_str = _read_string_buffer(
            lambda buffer_len, out_len, buffer: _lib().LGBM_DumpParamAliases(buffer_len, out_len, buffer)
        )
        return json.loads(aliases_str, object_hook=lambda obj: {k: [k] + v for k, v in obj.items()})

    @classmethod
    def get(cls, *args: str) -> Set[str]:
        ret = set()
        for i in args:
            ret.update(cls.get_sorted(i))
        return ret

    @classmethod
    def get_sorted(cls, name: str) -> List[str]:
        if cls.aliases is None:
            cls.aliases = cls._get_all_param_aliases()
        return cls.aliases.get(name, [name])


class _SharedHandle:
    """Reference-counted ownership of one native handle.

    Every owner holds one token. The native object is freed exactly once,
    when the last token is released, and only then are the tokens it holds
    on other handles (its ``dependencies``) released.
    """

    def __init__(
        self,
        handle: ctypes.c_void_p,
        free_func_name: str,
        kind: str,
        dependencies: Optional[List["_SharedHandle"]] = None,
    ):
        self.handle: Optional[ctypes.c_void_p] = handle
        self.kind = kind
        self._free_func_name = free_func_name
        self._dependencies: List[_SharedHandle] = list(dependencies or [])
        self._ref_count = 1
        self._lock = threading.Lock()

    @property
    def ref_count(self) -> int:
        return self._ref_count

    @property
    def is_alive(self) -> bool:
        return self.handle is not None

    def add_dependency(self, token: "_SharedHandle") -> None:
        with self._lock:
            if self.handle is None:
                raise ReleasedHandleError(f"{self.kind} has already been freed")
            self._dependencies.append(token)

    def acquire(self) -> "_SharedHandle":
        with self._lock:
            if self.handle is None:
                raise ReleasedHandleError(f"{self.kind} has already been freed")
            self._ref_count += 1
        return self

    def release(self) -> None:
        with self._lock:
            if self._ref_count == 0:
                raise ReleasedHandleError(f"{self.kind} has no owner left to release")
            self._ref_count -= 1
            if self._ref_count > 0:
                return
            handle = self.handle
            self.handle = None
            dependencies = self._dependencies
            self._dependencies = []
        try:
            _safe_call(getattr(_lib(), self._free_func_name)(handle))
        finally:
            for token in dependencies:
                token.release()
