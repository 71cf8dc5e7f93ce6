# coding: utf-8
"""Training parameters and their encoding into the native ``key=value`` string.

See https://lightgbm.readthedocs.io/en/latest/Parameters.html for the meaning of the options.
"""

from enum import Enum, IntEnum
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union

import numpy as np

from .basic import InvalidParameterError, _is_numeric

__all__ = [
    "Boosting",
    "DataSampleStrategy",
    "DeviceType",
    "Metric",
    "Objective",
    "Parameters",
    "TreeLearner",
    "Verbosity",
    "encode",
]

_RESERVED_CHARS = frozenset(" \t\n\r\v\f=\0")


class _Token(str, Enum):
    """Enumerated option value with a fixed lowercase keyword."""

    def __str__(self) -> str:
        return self.value


class Objective(_Token):
    """Objective function, see ``objective``."""

    REGRESSION = "regression"
    REGRESSION_L1 = "regression_l1"
    HUBER = "huber"
    FAIR = "fair"
    POISSON = "poisson"
    QUANTILE = "quantile"
    MAPE = "mape"
    GAMMA = "gamma"
    TWEEDIE = "tweedie"
    BINARY = "binary"
    MULTICLASS = "multiclass"
    MULTICLASSOVA = "multiclassova"
    CROSS_ENTROPY = "cross_entropy"
    CROSS_ENTROPY_LAMBDA = "cross_entropy_lambda"
    LAMBDARANK = "lambdarank"
    RANK_XENDCG = "rank_xendcg"
    CUSTOM = "custom"


class Boosting(_Token):
    GBDT = "gbdt"
    RF = "rf"
    DART = "dart"
    GOSS = "goss"


class DataSampleStrategy(_Token):
    BAGGING = "bagging"
    GOSS = "goss"


class TreeLearner(_Token):
    SERIAL = "serial"
    FEATURE = "feature"
    DATA = "data"
    VOTING = "voting"


class DeviceType(_Token):
    CPU = "cpu"
    GPU = "gpu"
    CUDA = "cuda"


class Metric(_Token):
    """Evaluation metric, see ``metric``."""

    L1 = "l1"
    L2 = "l2"
    RMSE = "rmse"
    QUANTILE = "quantile"
    MAPE = "mape"
    HUBER = "huber"
    FAIR = "fair"
    POISSON = "poisson"
    GAMMA = "gamma"
    GAMMA_DEVIANCE = "gamma_deviance"
    TWEEDIE = "tweedie"
    NDCG = "ndcg"
    MAP = "map"
    AUC = "auc"
    AVERAGE_PRECISION = "average_precision"
    BINARY_LOGLOSS = "binary_logloss"
    BINARY_ERROR = "binary_error"
    AUC_MU = "auc_mu"
    MULTI_LOGLOSS = "multi_logloss"
    MULTI_ERROR = "multi_error"
    CROSS_ENTROPY = "cross_entropy"
    CROSS_ENTROPY_LAMBDA = "cross_entropy_lambda"
    KULLBACK_LEIBLER = "kullback_leibler"

    @property
    def is_higher_better(self) -> bool:
        return self in _HIGHER_BETTER_METRICS


_HIGHER_BETTER_METRICS = frozenset(
    {
        Metric.NDCG,
        Metric.MAP,
        Metric.AUC,
        Metric.AVERAGE_PRECISION,
        Metric.AUC_MU,
    }
)


class Verbosity(IntEnum):
    """Native log level, see ``verbosity``."""

    FATAL = -1
    ERROR = 0
    INFO = 1
    DEBUG = 2

    def __str__(self) -> str:
        return str(self.value)


_ParamValue = Union[str, int, float, bool, Enum, List[Any], Tuple[Any, ...], None]


def _check_token(token: str, what: str) -> str:
    if not token:
        raise InvalidParameterError(f"Empty parameter {what}")
    bad = sorted(_RESERVED_CHARS.intersection(token))
    if bad:
        raise InvalidParameterError(f"Parameter {what} {token!r} contains reserved characters {bad!r}")
    return token


def _value_to_string(key: str, val: Any) -> str:
    if isinstance(val, Enum):
        return str(val.value)
    if isinstance(val, (bool, np.bool_)):
        return "true" if val else "false"
    if isinstance(val, (str, Path)):
        return str(val)
    if isinstance(val, (int, float, np.number)) or _is_numeric(val):
        return str(val)
    raise InvalidParameterError(f"Unknown type of parameter:{key}, got:{type(val).__name__}")


def _encode_value(key: str, val: Any) -> str:
    if isinstance(val, (list, tuple, set)) or (isinstance(val, np.ndarray) and val.ndim == 1):
        if len(val) == 0:
            return "None"
        return ",".join(_check_token(_value_to_string(key, v), "value") for v in val)
    return _check_token(_value_to_string(key, val), "value")


class Parameters:
    """Ordered collection of parameters passed to the native engine.

    Setting a key which is already present overrides its value
    and keeps its original position.

    Parameters
    ----------
    params : dict, Parameters or None, optional (default=None)
        Initial parameters.
    **kwargs
        Additional parameters, applied after ``params``.
    """

    def __init__(self, params: Optional[Mapping[str, Any]] = None, **kwargs: Any):
        self._data: Dict[str, Any] = {}
        if params is not None:
            self.update(params)
        self.update(kwargs)

    def push(self, key: str, value: _ParamValue) -> "Parameters":
        """Set a parameter.

        Parameters
        ----------
        key : str
            Parameter name.
        value : str, int, float, bool, enum token, list or None
            Parameter value. None values are not passed to the native engine.

        Returns
        -------
        self : Parameters
            Parameters with the new value.
        """
        self._data[key] = value
        return self

    def update(self, other: Mapping[str, Any]) -> "Parameters":
        for key, value in other.items():
            self.push(key, value)
        return self

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def copy(self) -> "Parameters":
        return Parameters(self._data)

    def items(self) -> Iterator[Tuple[str, Any]]:
        return iter(self._data.items())

    def keys(self) -> Iterator[str]:
        return iter(self._data.keys())

    def __setitem__(self, key: str, value: _ParamValue) -> None:
        self.push(key, value)

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Parameters):
            return self._data == other._data
        if isinstance(other, Mapping):
            return self._data == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Parameters({self._data!r})"

    def __str__(self) -> str:
        return encode(self)


def encode(params: Union[Parameters, Mapping[str, Any], None]) -> str:
    """Convert parameters to the ``key1=value1 key2=value2`` string the native engine parses.

    Parameters
    ----------
    params : Parameters, dict or None
        Parameters to encode.

    Returns
    -------
    encoded : str
        Space-delimited ``key=value`` pairs, ``""`` when there is nothing to pass.
    """
    if params is None or not params:
        return ""
    pairs = []
    for key, val in params.items():
        if val is None:
            continue
        if not isinstance(key, str):
            raise InvalidParameterError(f"Parameter names must be strings, got:{type(key).__name__}")
        _check_token(key, "name")
        pairs.append(f"{key}={_encode_value(key, val)}")
    return " ".join(pairs)
