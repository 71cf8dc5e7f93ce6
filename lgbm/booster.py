# coding: utf-8
"""Booster: one native booster handle, its training state machine and prediction."""

import ctypes
import json
import threading
from enum import Enum, IntEnum
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

import numpy as np
import scipy.sparse

from .basic import (
    _C_API_FEATURE_IMPORTANCE_GAIN,
    _C_API_FEATURE_IMPORTANCE_SPLIT,
    _C_API_PREDICT_CONTRIB,
    _C_API_PREDICT_LEAF_INDEX,
    _C_API_PREDICT_NORMAL,
    _C_API_PREDICT_RAW_SCORE,
    BoosterStateError,
    NativeCallError,
    ReleasedHandleError,
    SchemaMismatchError,
    ShapeMismatchError,
    _BoosterHandle,
    _c_str,
    _is_1d_list,
    _is_numpy_1d_array,
    _lib,
    _log_warning,
    _read_string_buffer,
    _read_string_list,
    _safe_call,
    _SharedHandle,
)
from .dataset import Dataset
from .mat import MatBuf, _as_mat, _c_csc, _c_csr, _c_mat
from .parameters import Metric, Parameters, encode

__all__ = [
    "Booster",
    "BoosterState",
    "FeatureImportanceType",
    "PredictType",
]

_EvalResultTuple = Tuple[str, str, float, bool]
_CustomEvalFunction = Callable[[np.ndarray, Dataset], Union[Tuple[str, float, bool], List[Tuple[str, float, bool]]]]


class BoosterState(Enum):
    """Training state of a :class:`Booster`.

    ``CONSTRUCTED`` -> ``TRAINING`` -> ``FINISHED`` or ``FAILED``.
    """

    CONSTRUCTED = "constructed"
    TRAINING = "training"
    FINISHED = "finished"
    FAILED = "failed"


class PredictType(IntEnum):
    NORMAL = _C_API_PREDICT_NORMAL
    RAW_SCORE = _C_API_PREDICT_RAW_SCORE
    LEAF_INDEX = _C_API_PREDICT_LEAF_INDEX
    CONTRIB = _C_API_PREDICT_CONTRIB


class FeatureImportanceType(IntEnum):
    SPLIT = _C_API_FEATURE_IMPORTANCE_SPLIT
    GAIN = _C_API_FEATURE_IMPORTANCE_GAIN


_FEATURE_IMPORTANCE_TYPE_MAPPER = {
    "split": FeatureImportanceType.SPLIT,
    "gain": FeatureImportanceType.GAIN,
}


def _importance_type(importance_type: Union[str, FeatureImportanceType]) -> FeatureImportanceType:
    if isinstance(importance_type, FeatureImportanceType):
        return importance_type
    try:
        return _FEATURE_IMPORTANCE_TYPE_MAPPER[importance_type]
    except KeyError:
        raise ValueError(f"importance_type must be 'split' or 'gain', got {importance_type!r}") from None


def _is_higher_better(eval_name: str) -> bool:
    # ranking metrics are reported as e.g. "ndcg@5"
    try:
        return Metric(eval_name.split("@")[0]).is_higher_better
    except ValueError:
        return False


def _gradient_to_numpy(data: Any, name: str) -> np.ndarray:
    """Convert gradient or Hessian to a float32 1-D array, class-major for 2-D input."""
    if isinstance(data, np.ndarray) and data.ndim == 2:
        data = data.ravel(order="F")
    if _is_numpy_1d_array(data) or _is_1d_list(data):
        return np.ascontiguousarray(data, dtype=np.float32)
    raise TypeError(f"Wrong type({type(data).__name__}) for {name}.\nIt should be list or numpy array")


class Booster:
    """Booster in LightGBM.

    Parameters
    ----------
    train_set : Dataset or None, optional (default=None)
        Training dataset. The Booster keeps it alive until it is freed.
    params : dict, Parameters or None, optional (default=None)
        Parameters for Booster. Parameters of ``train_set`` are added to them.
    model_file : str, pathlib.Path or None, optional (default=None)
        Path to the model file.
    model_str : str or None, optional (default=None)
        Model will be loaded from this string.
    """

    def __init__(
        self,
        train_set: Optional[Dataset] = None,
        params: Optional[Mapping[str, Any]] = None,
        model_file: Optional[Union[str, Path]] = None,
        model_str: Optional[str] = None,
    ):
        self._shared: Optional[_SharedHandle] = None
        self._lock = threading.RLock()
        self.params = Parameters(params)
        self.train_set: Optional[Dataset] = None
        self.valid_sets: List[Dataset] = []
        self.name_valid_sets: List[str] = []
        self._train_data_name = "training"
        self.best_iteration = 0
        self.best_score: Dict[str, Dict[str, float]] = {}
        self.__num_dataset = 0
        self.__need_reload_eval_info = True
        self.__name_inner_eval: List[str] = []
        self.__higher_better_inner_eval: List[bool] = []

        if train_set is not None:
            # Training task
            if not isinstance(train_set, Dataset):
                raise TypeError(f"Training data should be Dataset instance, met {type(train_set).__name__}")
            # copy the parameters from train_set
            self.params.update(train_set.params)
            train_token = train_set._acquire()
            handle = ctypes.c_void_p()
            try:
                with train_set._lock:
                    _safe_call(
                        _lib().LGBM_BoosterCreate(
                            train_token.handle,
                            _c_str(encode(self.params)),
                            ctypes.byref(handle),
                        )
                    )
            except BaseException:
                train_token.release()
                raise
            self._shared = _SharedHandle(handle, "LGBM_BoosterFree", "Booster", dependencies=[train_token])
            self.train_set = train_set
            self.__num_dataset = 1
            self._state = BoosterState.CONSTRUCTED
        elif model_file is not None or model_str is not None:
            # Prediction task
            out_num_iterations = ctypes.c_int(0)
            handle = ctypes.c_void_p()
            if model_file is not None:
                _safe_call(
                    _lib().LGBM_BoosterCreateFromModelfile(
                        _c_str(str(model_file)),
                        ctypes.byref(out_num_iterations),
                        ctypes.byref(handle),
                    )
                )
            else:
                _safe_call(
                    _lib().LGBM_BoosterLoadModelFromString(
                        _c_str(model_str),
                        ctypes.byref(out_num_iterations),
                        ctypes.byref(handle),
                    )
                )
            self._shared = _SharedHandle(handle, "LGBM_BoosterFree", "Booster")
            if params:
                _log_warning("Ignoring params argument, using parameters from model file.")
            # a loaded model has no training data, so it can only predict
            self._state = BoosterState.FINISHED
        else:
            raise TypeError("Need at least one training dataset or model file or model string to create Booster instance")

    @classmethod
    def from_file(cls, model_file: Union[str, Path]) -> "Booster":
        """Load a prediction-only Booster from a model file."""
        return cls(model_file=model_file)

    @classmethod
    def from_string(cls, model_str: str) -> "Booster":
        """Load a prediction-only Booster from a model string."""
        return cls(model_str=model_str)

    @property
    def _handle(self) -> _BoosterHandle:
        if self._shared is None or not self._shared.is_alive:
            raise ReleasedHandleError("Booster has been freed")
        return self._shared.handle

    @property
    def state(self) -> BoosterState:
        return self._state

    def free(self) -> None:
        """Free the native booster, then release the Datasets it uses."""
        with self._lock:
            shared = self._shared
            self._shared = None
        if shared is not None:
            shared.release()

    def __enter__(self) -> "Booster":
        return self

    def __exit__(self, *args: Any) -> None:
        self.free()

    def __del__(self) -> None:
        try:
            self.free()
        except AttributeError:
            pass

    def set_train_data_name(self, name: str) -> "Booster":
        """Set the name to the training Dataset.

        Parameters
        ----------
        name : str
            Name for the training Dataset.

        Returns
        -------
        self : Booster
            Booster with set training Dataset name.
        """
        self._train_data_name = name
        return self

    def add_valid_data(self, data: Dataset, name: Optional[str] = None) -> "Booster":
        """Add validation data.

        Parameters
        ----------
        data : Dataset
            Validation data. It must have been created with the training Dataset as (possibly indirect) reference.
        name : str or None, optional (default=None)
            Name of validation data, ``valid_<i>`` if not given.

        Returns
        -------
        self : Booster
            Booster with set validation data.
        """
        if not isinstance(data, Dataset):
            raise TypeError(f"Validation data should be Dataset instance, met {type(data).__name__}")
        with self._lock:
            if self._state not in (BoosterState.CONSTRUCTED, BoosterState.TRAINING):
                raise BoosterStateError(f"Cannot add validation data to a Booster in state {self._state.value}")
            if self.train_set not in data.get_ref_chain():
                raise SchemaMismatchError(
                    "Add validation data failed, validation data should be aligned with the training data (reference=train_set)"
                )
            token = data._acquire()
            try:
                with data._lock:
                    _safe_call(
                        _lib().LGBM_BoosterAddValidData(
                            self._handle,
                            token.handle,
                        )
                    )
                self._shared.add_dependency(token)  # type: ignore[union-attr]
            except BaseException:
                token.release()
                raise
            self.valid_sets.append(data)
            self.name_valid_sets.append(name if name is not None else f"valid_{len(self.valid_sets) - 1}")
            self.__num_dataset += 1
        return self

    def __check_trainable(self) -> None:
        if self._state is BoosterState.FAILED:
            raise BoosterStateError("Cannot train a Booster after a failed training iteration")
        if self._state is BoosterState.FINISHED:
            if self.train_set is None:
                raise BoosterStateError("Cannot train a Booster loaded from a model")
            raise BoosterStateError("Cannot train a Booster which has finished training")

    def __run_iteration(self, call: Callable[[Any], int]) -> bool:
        with self._lock:
            self.__check_trainable()
            is_finished = ctypes.c_int(0)
            with self.train_set._lock:  # type: ignore[union-attr]
                try:
                    _safe_call(call(ctypes.byref(is_finished)))
                except NativeCallError:
                    self._state = BoosterState.FAILED
                    raise
            if is_finished.value == 1:
                self._state = BoosterState.FINISHED
            else:
                self._state = BoosterState.TRAINING
            return is_finished.value == 1

    def update_one_iter(self) -> bool:
        """Update Booster for one iteration.

        Returns
        -------
        is_finished : bool
            True if the native engine has nothing further to learn.
            The Booster accepts no more training calls after that.
        """
        handle = self._handle
        return self.__run_iteration(lambda is_finished: _lib().LGBM_BoosterUpdateOneIter(handle, is_finished))

    def update_one_iter_custom(self, grad: Any, hess: Any) -> bool:
        """Update Booster for one iteration with customized gradient statistics.

        Parameters
        ----------
        grad : list, numpy 1-D array or numpy 2-D array (for multi-class task)
            The value of the first order derivative (gradient) of the loss
            with respect to the elements of score for each sample point.
        hess : list, numpy 1-D array or numpy 2-D array (for multi-class task)
            The value of the second order derivative (Hessian) of the loss
            with respect to the elements of score for each sample point.

        Returns
        -------
        is_finished : bool
            True if the native engine has nothing further to learn.
        """
        grad = _gradient_to_numpy(grad, "gradient")
        hess = _gradient_to_numpy(hess, "hessian")
        with self._lock:
            self.__check_trainable()
            if len(grad) != len(hess):
                raise ShapeMismatchError(f"Lengths of gradient ({len(grad)}) and Hessian ({len(hess)}) don't match")
            num_train_data = self.train_set.num_data()  # type: ignore[union-attr]
            num_class = self.num_model_per_iteration()
            if len(grad) != num_train_data * num_class:
                raise ShapeMismatchError(
                    f"Lengths of gradient ({len(grad)}) and Hessian ({len(hess)}) "
                    f"don't match training data length ({num_train_data}) * "
                    f"number of models per one iteration ({num_class})"
                )
            handle = self._handle
            return self.__run_iteration(
                lambda is_finished: _lib().LGBM_BoosterUpdateOneIterCustom(
                    handle,
                    grad.ctypes.data_as(ctypes.POINTER(ctypes.c_float)),
                    hess.ctypes.data_as(ctypes.POINTER(ctypes.c_float)),
                    is_finished,
                )
            )

    def rollback_one_iter(self) -> "Booster":
        """Rollback one iteration.

        Returns
        -------
        self : Booster
            Booster with rolled back one iteration.
        """
        with self._lock:
            if self._state not in (BoosterState.CONSTRUCTED, BoosterState.TRAINING):
                raise BoosterStateError(f"Cannot rollback a Booster in state {self._state.value}")
            with self.train_set._lock:  # type: ignore[union-attr]
                _safe_call(_lib().LGBM_BoosterRollbackOneIter(self._handle))
        return self

    def __get_int(self, func_name: str) -> int:
        ret = ctypes.c_int(0)
        with self._lock:
            _safe_call(getattr(_lib(), func_name)(self._handle, ctypes.byref(ret)))
        return ret.value

    def current_iteration(self) -> int:
        """Get the index of the current iteration.

        Returns
        -------
        cur_iter : int
            The index of the current iteration.
        """
        return self.__get_int("LGBM_BoosterGetCurrentIteration")

    def num_classes(self) -> int:
        return self.__get_int("LGBM_BoosterGetNumClasses")

    def num_feature(self) -> int:
        """Get number of features.

        Returns
        -------
        num_feature : int
            The number of features.
        """
        return self.__get_int("LGBM_BoosterGetNumFeature")

    def num_model_per_iteration(self) -> int:
        """Get number of models per iteration.

        Returns
        -------
        model_per_iter : int
            The number of models per iteration.
        """
        return self.__get_int("LGBM_BoosterNumModelPerIteration")

    def num_trees(self) -> int:
        """Get number of weak sub-models.

        Returns
        -------
        num_trees : int
            The number of weak sub-models.
        """
        return self.__get_int("LGBM_BoosterNumberOfTotalModel")

    def feature_name(self) -> List[str]:
        """Get names of features.

        Returns
        -------
        result : list of str
            List with names of features.
        """
        with self._lock:
            handle = self._handle
            return _read_string_list(
                lambda num, out_len, buffer_len, required_len, buffers: _lib().LGBM_BoosterGetFeatureNames(
                    handle, num, out_len, buffer_len, required_len, buffers
                ),
                self.num_feature(),
            )

    def feature_importance(
        self,
        importance_type: Union[str, FeatureImportanceType] = "split",
        iteration: Optional[int] = None,
    ) -> np.ndarray:
        """Get feature importances.

        Parameters
        ----------
        importance_type : str or FeatureImportanceType, optional (default="split")
            How the importance is calculated.
            If "split", result contains numbers of times the feature is used in a model.
            If "gain", result contains total gains of splits which use the feature.
        iteration : int or None, optional (default=None)
            Limit number of iterations in the feature importance calculation.
            If None, if the best iteration exists, it is used; otherwise, all trees are used.
            If <= 0, all trees are used (no limits).

        Returns
        -------
        result : numpy array
            Array with feature importances.
        """
        if iteration is None:
            iteration = self.best_iteration
        importance_type_int = _importance_type(importance_type)
        with self._lock:
            result = np.empty(self.num_feature(), dtype=np.float64)
            _safe_call(
                _lib().LGBM_BoosterFeatureImportance(
                    self._handle,
                    ctypes.c_int(iteration),
                    ctypes.c_int(importance_type_int),
                    result.ctypes.data_as(ctypes.POINTER(ctypes.c_double)),
                )
            )
        if importance_type_int == FeatureImportanceType.SPLIT:
            return result.astype(np.int32)
        return result

    def __resolve_num_iteration(self, start_iteration: int, num_iteration: Optional[int]) -> int:
        if num_iteration is None:
            if start_iteration <= 0:
                num_iteration = self.best_iteration
            else:
                num_iteration = -1
        return num_iteration

    def _num_predict_per_row(self, predict_type: PredictType, start_iteration: int, num_iteration: int) -> int:
        """Number of values a prediction yields for one row."""
        if predict_type == PredictType.CONTRIB:
            # one value per feature plus the expected value, for each model of an iteration
            return self.num_model_per_iteration() * (self.num_feature() + 1)
        num_class = self.num_classes()
        if predict_type == PredictType.LEAF_INDEX:
            max_iteration = self.current_iteration()
            start_iteration = min(max(start_iteration, 0), max_iteration)
            used_iterations = max_iteration - start_iteration
            if num_iteration > 0:
                used_iterations = min(used_iterations, num_iteration)
            return num_class * used_iterations
        return num_class

    def calc_num_predict(
        self,
        num_row: int,
        predict_type: PredictType = PredictType.NORMAL,
        start_iteration: int = 0,
        num_iteration: Optional[int] = None,
    ) -> int:
        """Get the size of the prediction result as computed by the native engine.

        Parameters
        ----------
        num_row : int
            Number of rows to predict.
        predict_type : PredictType, optional (default=PredictType.NORMAL)
            What to predict.
        start_iteration : int, optional (default=0)
            Start index of the iteration to predict.
        num_iteration : int or None, optional (default=None)
            Total number of iterations used in the prediction.

        Returns
        -------
        num_predict : int
            Number of predicted values.
        """
        num_iteration = self.__resolve_num_iteration(start_iteration, num_iteration)
        out_len = ctypes.c_int64(0)
        with self._lock:
            _safe_call(
                _lib().LGBM_BoosterCalcNumPredict(
                    self._handle,
                    ctypes.c_int(num_row),
                    ctypes.c_int(PredictType(predict_type)),
                    ctypes.c_int(start_iteration),
                    ctypes.c_int(num_iteration),
                    ctypes.byref(out_len),
                )
            )
        return out_len.value

    def __predict(
        self,
        nrow: int,
        ncol: int,
        predict_type: PredictType,
        start_iteration: int,
        num_iteration: Optional[int],
        fill: Callable[[int, int, Any, Any], int],
    ) -> np.ndarray:
        """Allocate the output, run one native prediction call into it and shape the result."""
        predict_type = PredictType(predict_type)
        with self._lock:
            num_feature = self.num_feature()
            if ncol != num_feature:
                raise ShapeMismatchError(
                    f"The number of features in data ({ncol}) is not the same as it was in training data ({num_feature})."
                )
            num_iteration = self.__resolve_num_iteration(start_iteration, num_iteration)
            num_per_row = self._num_predict_per_row(predict_type, start_iteration, num_iteration)
            n_preds = nrow * num_per_row
            preds = np.empty(n_preds, dtype=np.float64)
            out_num_preds = ctypes.c_int64(0)
            _safe_call(
                fill(
                    start_iteration,
                    num_iteration,
                    ctypes.byref(out_num_preds),
                    preds.ctypes.data_as(ctypes.POINTER(ctypes.c_double)),
                )
            )
        if n_preds != out_num_preds.value:
            raise ShapeMismatchError(f"Wrong length for predict results: expected {n_preds}, got {out_num_preds.value}")
        if predict_type == PredictType.LEAF_INDEX:
            preds = preds.astype(np.int32)
        if num_per_row != 1:
            preds = preds.reshape(nrow, num_per_row)
        return preds

    def predict_for_mat(
        self,
        mat: Union[MatBuf, np.ndarray],
        predict_type: PredictType = PredictType.NORMAL,
        start_iteration: int = 0,
        num_iteration: Optional[int] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> np.ndarray:
        """Make a prediction for a dense matrix.

        Parameters
        ----------
        mat : MatBuf, numpy 2-D array or pandas DataFrame
            Data to predict, one row per sample.
        predict_type : PredictType, optional (default=PredictType.NORMAL)
            What to predict: transformed scores, raw scores, leaf indices or SHAP feature contributions.
        start_iteration : int, optional (default=0)
            Start index of the iteration to predict.
            If <= 0, starts from the first iteration.
        num_iteration : int or None, optional (default=None)
            Total number of iterations used in the prediction.
            If None, if the best iteration exists and start_iteration <= 0, the best iteration is used;
            otherwise, all iterations from ``start_iteration`` are used (no limits).
            If <= 0, all iterations from ``start_iteration`` are used (no limits).
        params : dict, Parameters or None, optional (default=None)
            Other parameters for the prediction.

        Returns
        -------
        result : numpy array
            1-D array with one value per row, or 2-D array of shape (n_rows, n_values_per_row).
        """
        mat = _as_mat(mat)
        args = _c_mat(mat)
        params_str = encode(params)
        return self.__predict(
            mat.nrow,
            mat.ncol,
            predict_type,
            start_iteration,
            num_iteration,
            lambda start, num, out_len, out: _lib().LGBM_BoosterPredictForMat(
                self._handle,
                args.ptr,
                ctypes.c_int(args.dtype_tag),
                ctypes.c_int32(args.nrow),
                ctypes.c_int32(args.ncol),
                ctypes.c_int(args.is_row_major),
                ctypes.c_int(PredictType(predict_type)),
                ctypes.c_int(start),
                ctypes.c_int(num),
                _c_str(params_str),
                out_len,
                out,
            ),
        )

    def predict_for_csr(
        self,
        csr: scipy.sparse.csr_matrix,
        predict_type: PredictType = PredictType.NORMAL,
        start_iteration: int = 0,
        num_iteration: Optional[int] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> np.ndarray:
        """Make a prediction for a CSR matrix, see :meth:`predict_for_mat`."""
        args = _c_csr(csr)
        params_str = encode(params)
        return self.__predict(
            csr.shape[0],
            csr.shape[1],
            predict_type,
            start_iteration,
            num_iteration,
            lambda start, num, out_len, out: _lib().LGBM_BoosterPredictForCSR(
                self._handle,
                args.ptr_indptr,
                ctypes.c_int(args.indptr_type),
                args.ptr_indices,
                args.ptr_data,
                ctypes.c_int(args.data_type),
                ctypes.c_int64(args.num_indptr),
                ctypes.c_int64(args.num_elem),
                ctypes.c_int64(args.num_other),
                ctypes.c_int(PredictType(predict_type)),
                ctypes.c_int(start),
                ctypes.c_int(num),
                _c_str(params_str),
                out_len,
                out,
            ),
        )

    def predict_for_csc(
        self,
        csc: scipy.sparse.csc_matrix,
        predict_type: PredictType = PredictType.NORMAL,
        start_iteration: int = 0,
        num_iteration: Optional[int] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> np.ndarray:
        """Make a prediction for a CSC matrix, see :meth:`predict_for_mat`."""
        args = _c_csc(csc)
        params_str = encode(params)
        return self.__predict(
            csc.shape[0],
            csc.shape[1],
            predict_type,
            start_iteration,
            num_iteration,
            lambda start, num, out_len, out: _lib().LGBM_BoosterPredictForCSC(
                self._handle,
                args.ptr_indptr,
                ctypes.c_int(args.indptr_type),
                args.ptr_indices,
                args.ptr_data,
                ctypes.c_int(args.data_type),
                ctypes.c_int64(args.num_indptr),
                ctypes.c_int64(args.num_elem),
                ctypes.c_int64(args.num_other),
                ctypes.c_int(PredictType(predict_type)),
                ctypes.c_int(start),
                ctypes.c_int(num),
                _c_str(params_str),
                out_len,
                out,
            ),
        )

    def __check_data_idx(self, data_idx: int) -> None:
        if not 0 <= data_idx < self.__num_dataset:
            raise ValueError("Data_idx should be smaller than number of dataset")

    def get_eval_names(self) -> List[str]:
        """Get names of the metrics evaluated for every dataset."""
        self.__get_eval_info()
        return list(self.__name_inner_eval)

    def get_eval(self, data_idx: int) -> np.ndarray:
        """Get metric values for the training (``data_idx=0``) or a validation dataset.

        Parameters
        ----------
        data_idx : int
            0 for the training data, ``i + 1`` for the i-th validation data.

        Returns
        -------
        result : numpy array
            Metric values, in the order of :meth:`get_eval_names`.
        """
        self.__check_data_idx(data_idx)
        self.__get_eval_info()
        num_eval = len(self.__name_inner_eval)
        result = np.empty(num_eval, dtype=np.float64)
        if num_eval == 0:
            return result
        tmp_out_len = ctypes.c_int(0)
        with self._lock:
            _safe_call(
                _lib().LGBM_BoosterGetEval(
                    self._handle,
                    ctypes.c_int(data_idx),
                    ctypes.byref(tmp_out_len),
                    result.ctypes.data_as(ctypes.POINTER(ctypes.c_double)),
                )
            )
        if tmp_out_len.value != num_eval:
            raise ValueError("Wrong length of eval results")
        return result

    def get_num_predict(self, data_idx: int) -> int:
        """Get the number of scores the Booster keeps for the training or a validation dataset."""
        self.__check_data_idx(data_idx)
        out_len = ctypes.c_int64(0)
        with self._lock:
            _safe_call(
                _lib().LGBM_BoosterGetNumPredict(
                    self._handle,
                    ctypes.c_int(data_idx),
                    ctypes.byref(out_len),
                )
            )
        return out_len.value

    def get_predict(self, data_idx: int) -> np.ndarray:
        """Get the current raw scores of the training (``data_idx=0``) or a validation dataset.

        Returns
        -------
        result : numpy array
            Scores, with shape (n_samples, n_classes) for multi-class tasks.
        """
        with self._lock:
            n_preds = self.get_num_predict(data_idx)
            result = np.empty(n_preds, dtype=np.float64)
            tmp_out_len = ctypes.c_int64(0)
            _safe_call(
                _lib().LGBM_BoosterGetPredict(
                    self._handle,
                    ctypes.c_int(data_idx),
                    ctypes.byref(tmp_out_len),
                    result.ctypes.data_as(ctypes.POINTER(ctypes.c_double)),
                )
            )
            num_class = self.num_model_per_iteration()
        if tmp_out_len.value != n_preds:
            raise ValueError(f"Wrong length of predict results for data {data_idx}")
        if num_class > 1:
            num_data = result.size // num_class
            result = result.reshape(num_data, num_class, order="F")
        return result

    def __get_eval_info(self) -> None:
        """Get inner evaluation count and names."""
        if self.__need_reload_eval_info:
            out_num_eval = ctypes.c_int(0)
            with self._lock:
                # Get num of inner evals
                _safe_call(
                    _lib().LGBM_BoosterGetEvalCounts(
                        self._handle,
                        ctypes.byref(out_num_eval),
                    )
                )
                handle = self._handle
                self.__name_inner_eval = _read_string_list(
                    lambda num, out_len, buffer_len, required_len, buffers: _lib().LGBM_BoosterGetEvalNames(
                        handle, num, out_len, buffer_len, required_len, buffers
                    ),
                    out_num_eval.value,
                )
            self.__higher_better_inner_eval = [_is_higher_better(name) for name in self.__name_inner_eval]
            self.__need_reload_eval_info = False

    def __inner_eval(
        self,
        data_name: str,
        data_idx: int,
        feval: Optional[Union[_CustomEvalFunction, List[_CustomEvalFunction]]],
    ) -> List[_EvalResultTuple]:
        """Evaluate training or validation data."""
        result = self.get_eval(data_idx)
        ret = [
            (data_name, name, float(result[i]), self.__higher_better_inner_eval[i])
            for i, name in enumerate(self.__name_inner_eval)
        ]
        if callable(feval):
            feval = [feval]
        if feval is not None:
            if data_idx == 0:
                cur_data = self.train_set
            else:
                cur_data = self.valid_sets[data_idx - 1]
            for eval_function in feval:
                if eval_function is None:
                    continue
                feval_ret = eval_function(self.get_predict(data_idx), cur_data)
                if isinstance(feval_ret, list):
                    for eval_name, val, is_higher_better in feval_ret:
                        ret.append((data_name, eval_name, val, is_higher_better))
                else:
                    eval_name, val, is_higher_better = feval_ret
                    ret.append((data_name, eval_name, val, is_higher_better))
        return ret

    def eval_train(
        self,
        feval: Optional[Union[_CustomEvalFunction, List[_CustomEvalFunction]]] = None,
    ) -> List[_EvalResultTuple]:
        """Evaluate for training data.

        Parameters
        ----------
        feval : callable, list of callable, or None, optional (default=None)
            Customized evaluation function.
            Each evaluation function should accept two parameters: preds, eval_data,
            and return (eval_name, eval_result, is_higher_better) or list of such tuples.

        Returns
        -------
        result : list
            List with (train_dataset_name, eval_name, eval_result, is_higher_better) tuples.
        """
        if self.train_set is None:
            raise BoosterStateError("Booster loaded from a model has no training data")
        return self.__inner_eval(self._train_data_name, 0, feval)

    def eval_valid(
        self,
        feval: Optional[Union[_CustomEvalFunction, List[_CustomEvalFunction]]] = None,
    ) -> List[_EvalResultTuple]:
        """Evaluate for validation data.

        Parameters
        ----------
        feval : callable, list of callable, or None, optional (default=None)
            Customized evaluation function, see :meth:`eval_train`.

        Returns
        -------
        result : list
            List with (validation_dataset_name, eval_name, eval_result, is_higher_better) tuples.
        """
        return [
            item
            for i in range(1, self.__num_dataset)
            for item in self.__inner_eval(self.name_valid_sets[i - 1], i, feval)
        ]

    def save_model(
        self,
        filename: Union[str, Path],
        num_iteration: Optional[int] = None,
        start_iteration: int = 0,
        importance_type: Union[str, FeatureImportanceType] = "split",
    ) -> "Booster":
        """Save Booster to file.

        Parameters
        ----------
        filename : str or pathlib.Path
            Filename to save Booster.
        num_iteration : int or None, optional (default=None)
            Index of the iteration that should be saved.
            If None, if the best iteration exists, it is saved; otherwise, all iterations are saved.
            If <= 0, all iterations are saved.
        start_iteration : int, optional (default=0)
            Start index of the iteration that should be saved.
        importance_type : str or FeatureImportanceType, optional (default="split")
            What type of feature importance should be saved.

        Returns
        -------
        self : Booster
            Returns self.
        """
        if num_iteration is None:
            num_iteration = self.best_iteration
        importance_type_int = _importance_type(importance_type)
        with self._lock:
            _safe_call(
                _lib().LGBM_BoosterSaveModel(
                    self._handle,
                    ctypes.c_int(start_iteration),
                    ctypes.c_int(num_iteration),
                    ctypes.c_int(importance_type_int),
                    _c_str(str(filename)),
                )
            )
        return self

    def model_to_string(
        self,
        num_iteration: Optional[int] = None,
        start_iteration: int = 0,
        importance_type: Union[str, FeatureImportanceType] = "split",
    ) -> str:
        """Save Booster to string.

        Parameters
        ----------
        num_iteration : int or None, optional (default=None)
            Index of the iteration that should be saved.
            If None, if the best iteration exists, it is saved; otherwise, all iterations are saved.
            If <= 0, all iterations are saved.
        start_iteration : int, optional (default=0)
            Start index of the iteration that should be saved.
        importance_type : str or FeatureImportanceType, optional (default="split")
            What type of feature importance should be saved.

        Returns
        -------
        str_repr : str
            String representation of Booster.
        """
        if num_iteration is None:
            num_iteration = self.best_iteration
        importance_type_int = _importance_type(importance_type)
        with self._lock:
            handle = self._handle
            return _read_string_buffer(
                lambda buffer_len, out_len, buffer: _lib().LGBM_BoosterSaveModelToString(
                    handle,
                    ctypes.c_int(start_iteration),
                    ctypes.c_int(num_iteration),
                    ctypes.c_int(importance_type_int),
                    buffer_len,
                    out_len,
                    buffer,
                )
            )

    def dump_model(
        self,
        num_iteration: Optional[int] = None,
        start_iteration: int = 0,
        importance_type: Union[str, FeatureImportanceType] = "split",
        object_hook: Optional[Callable[[Dict[str, Any]], Dict[str, Any]]] = None,
    ) -> Dict[str, Any]:
        """Dump Booster to JSON format.

        Parameters
        ----------
        num_iteration : int or None, optional (default=None)
            Index of the iteration that should be dumped.
            If None, if the best iteration exists, it is dumped; otherwise, all iterations are dumped.
            If <= 0, all iterations are dumped.
        start_iteration : int, optional (default=0)
            Start index of the iteration that should be dumped.
        importance_type : str or FeatureImportanceType, optional (default="split")
            What type of feature importance should be dumped.
        object_hook : callable or None, optional (default=None)
            If not None, ``object_hook`` is a function called while parsing the json
            string returned by the C API.

        Returns
        -------
        json_repr : dict
            JSON format of Booster.
        """
        if num_iteration is None:
            num_iteration = self.best_iteration
        importance_type_int = _importance_type(importance_type)
        with self._lock:
            handle = self._handle
            model_json = _read_string_buffer(
                lambda buffer_len, out_len, buffer: _lib().LGBM_BoosterDumpModel(
                    handle,
                    ctypes.c_int(start_iteration),
                    ctypes.c_int(num_iteration),
                    ctypes.c_int(importance_type_int),
                    buffer_len,
                    out_len,
                    buffer,
                )
            )
        return json.loads(model_json, object_hook=object_hook)
