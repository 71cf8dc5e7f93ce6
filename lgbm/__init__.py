# coding: utf-8
"""lgbm, an ownership-checked binding for the LightGBM C API.

Datasets, Boosters and their native handles are shared by reference counting,
so a native object is freed only once nothing uses it any more.
"""

from pathlib import Path

from .basic import (
    BoosterStateError,
    FieldLengthMismatchError,
    InvalidParameterError,
    LightGBMError,
    NativeCallError,
    ReleasedHandleError,
    SchemaMismatchError,
    ShapeMismatchError,
    UnsupportedFieldTypeError,
    capture_last_error,
    register_logger,
)
from .booster import Booster, BoosterState, FeatureImportanceType, PredictType
from .dataset import Dataset, Field
from .mat import Layout, MatBuf
from .parameters import (
    Boosting,
    DataSampleStrategy,
    DeviceType,
    Metric,
    Objective,
    Parameters,
    TreeLearner,
    Verbosity,
    encode,
)

_version_path = Path(__file__).absolute().parent / "VERSION.txt"
if _version_path.is_file():
    __version__ = _version_path.read_text(encoding="utf-8").strip()

__all__ = [
    "Dataset",
    "Field",
    "Booster",
    "BoosterState",
    "PredictType",
    "FeatureImportanceType",
    "MatBuf",
    "Layout",
    "Parameters",
    "encode",
    "Objective",
    "Boosting",
    "DataSampleStrategy",
    "TreeLearner",
    "DeviceType",
    "Metric",
    "Verbosity",
    "register_logger",
    "capture_last_error",
    "LightGBMError",
    "InvalidParameterError",
    "ShapeMismatchError",
    "FieldLengthMismatchError",
    "UnsupportedFieldTypeError",
    "SchemaMismatchError",
    "BoosterStateError",
    "ReleasedHandleError",
    "NativeCallError",
]
