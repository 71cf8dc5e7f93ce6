# coding: utf-8
import ctypes
from typing import Dict, List, Optional

import numpy as np
import pytest

import lgbm
from lgbm import basic


def _native_lib_available() -> bool:
    try:
        basic._lib()
    except (OSError, lgbm.LightGBMError):
        return False
    return True


requires_native = pytest.mark.skipif(not _native_lib_available(), reason="lib_lightgbm cannot be loaded")


def make_cyclic_features(num_rows: int, num_class: int = 3) -> np.ndarray:
    """One feature column cycling through ``0 .. num_class - 1``."""
    return np.array([[x % num_class] for x in range(num_rows)], dtype=np.float64)


def make_cyclic_labels(num_rows: int, num_class: int = 3) -> np.ndarray:
    return np.array([x % num_class for x in range(num_rows)], dtype=np.float32)


def make_regression(rng, num_rows: int = 200, num_features: int = 4):
    X = rng.uniform(size=(num_rows, num_features))
    y = 2 * X[:, 0] - X[:, 1] + 0.1 * rng.standard_normal(num_rows)
    return X, y


class FakeLib:
    """Scripted stand-in for lib_lightgbm.

    Handles are small integers. Every call is recorded by name, a call listed
    in ``fail`` returns -1 after setting the last error message.
    """

    def __init__(self, num_data: int = 10, num_feature: int = 2, num_class: int = 1):
        self.num_data = num_data
        self.num_feature = num_feature
        self.num_class = num_class
        self.calls: List[str] = []
        self.fail: Dict[str, str] = {}
        self.last_error = b"Everything is fine"
        self.live: Dict[int, str] = {}
        self.freed: List[int] = []
        self.references: Dict[int, Optional[int]] = {}
        self.fields: Dict[str, Optional[np.ndarray]] = {}
        self.layouts: List[int] = []
        self.finish_after: Optional[int] = None
        self.iterations = 0
        self._next_handle = 1

    def _call(self, name: str) -> int:
        self.calls.append(name)
        if name in self.fail:
            self.last_error = self.fail[name].encode("utf-8")
            return -1
        return 0

    def _new_handle(self, kind: str, out) -> int:
        value = self._next_handle
        self._next_handle += 1
        self.live[value] = kind
        out._obj.value = value
        return value

    def _free(self, name: str, handle) -> int:
        ret = self._call(name)
        if ret == 0:
            del self.live[handle.value]
            self.freed.append(handle.value)
        return ret

    def LGBM_GetLastError(self):
        self.calls.append("LGBM_GetLastError")
        return self.last_error

    def LGBM_DatasetCreateFromMat(self, data, data_type, nrow, ncol, is_row_major, params, reference, out):
        ret = self._call("LGBM_DatasetCreateFromMat")
        if ret == 0:
            value = self._new_handle("Dataset", out)
            self.references[value] = None if reference is None else reference.value
            self.num_data = nrow.value
        return ret

    def LGBM_DatasetCreateFromMats(self, nmat, data, data_type, nrow, ncol, layouts, params, reference, out):
        ret = self._call("LGBM_DatasetCreateFromMats")
        if ret == 0:
            value = self._new_handle("Dataset", out)
            self.references[value] = None if reference is None else reference.value
            self.num_data = int(sum(nrow[i] for i in range(nmat.value)))
            self.layouts = [layouts[i] for i in range(nmat.value)]
        return ret

    def LGBM_DatasetGetNumData(self, handle, out):
        out._obj.value = self.num_data
        return self._call("LGBM_DatasetGetNumData")

    def LGBM_DatasetGetNumFeature(self, handle, out):
        out._obj.value = self.num_feature
        return self._call("LGBM_DatasetGetNumFeature")

    def LGBM_DatasetSetField(self, handle, field_name, field_data, num_element, field_type):
        ret = self._call("LGBM_DatasetSetField")
        if ret == 0:
            name = field_name.value.decode("utf-8")
            if field_data is None:
                self.fields[name] = None
            else:
                self.fields[name] = np.ctypeslib.as_array(field_data, shape=(num_element.value,)).copy()
        return ret

    def LGBM_DatasetFree(self, handle):
        return self._free("LGBM_DatasetFree", handle)

    def LGBM_BoosterCreate(self, train_data, parameters, out):
        ret = self._call("LGBM_BoosterCreate")
        if ret == 0:
            self._new_handle("Booster", out)
        return ret

    def LGBM_BoosterAddValidData(self, handle, valid_data):
        return self._call("LGBM_BoosterAddValidData")

    def LGBM_BoosterUpdateOneIter(self, handle, is_finished):
        ret = self._call("LGBM_BoosterUpdateOneIter")
        if ret == 0:
            self.iterations += 1
            is_finished._obj.value = int(self.finish_after is not None and self.iterations >= self.finish_after)
        return ret

    def LGBM_BoosterRollbackOneIter(self, handle):
        ret = self._call("LGBM_BoosterRollbackOneIter")
        if ret == 0:
            self.iterations -= 1
        return ret

    def LGBM_BoosterGetCurrentIteration(self, handle, out):
        out._obj.value = self.iterations
        return self._call("LGBM_BoosterGetCurrentIteration")

    def LGBM_BoosterGetNumFeature(self, handle, out):
        out._obj.value = self.num_feature
        return self._call("LGBM_BoosterGetNumFeature")

    def LGBM_BoosterGetNumClasses(self, handle, out):
        out._obj.value = self.num_class
        return self._call("LGBM_BoosterGetNumClasses")

    def LGBM_BoosterNumModelPerIteration(self, handle, out):
        out._obj.value = self.num_class
        return self._call("LGBM_BoosterNumModelPerIteration")

    def LGBM_BoosterPredictForMat(
        self, handle, data, data_type, nrow, ncol, is_row_major, predict_type, start_iteration, num_iteration,
        parameter, out_len, out_result,
    ):
        ret = self._call("LGBM_BoosterPredictForMat")
        if ret == 0:
            n_preds = nrow.value * self.num_class
            for i in range(n_preds):
                out_result[i] = float(i)
            out_len._obj.value = n_preds
        return ret

    def LGBM_BoosterFree(self, handle):
        return self._free("LGBM_BoosterFree", handle)


def detach_fake_handles(lib: FakeLib) -> None:
    """Forget every handle still owned through ``lib``, so nothing sends it to the real library later."""
    import gc

    for obj in gc.get_objects():
        if isinstance(obj, basic._SharedHandle) and obj.handle is not None and obj.handle.value in lib.live:
            obj.handle = None
            obj._ref_count = 0
            obj._dependencies = []
    for obj in gc.get_objects():
        if isinstance(obj, lgbm.Dataset) and obj._shared is not None and obj._shared.handle is None:
            obj._closed = True
        elif isinstance(obj, lgbm.Booster) and obj._shared is not None and obj._shared.handle is None:
            obj._shared = None


def c_pointer_values(ptr: ctypes.c_void_p, ctype, length: int) -> np.ndarray:
    """Copy ``length`` elements of type ``ctype`` starting at ``ptr``."""
    typed = ctypes.cast(ptr, ctypes.POINTER(ctype))
    return np.ctypeslib.as_array(typed, shape=(length,)).copy()
