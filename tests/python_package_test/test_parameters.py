# coding: utf-8
from pathlib import Path

import numpy as np
import pytest

import lgbm
from lgbm import Boosting, Metric, Objective, Parameters, Verbosity, encode


def test_encode_joins_pairs_in_insertion_order():
    params = Parameters().push("objective", Objective.MULTICLASS).push("num_class", 3).push("verbosity", -1)
    assert encode(params) == "objective=multiclass num_class=3 verbosity=-1"
    assert str(params) == encode(params)


def test_encode_empty_and_none():
    assert encode(None) == ""
    assert encode({}) == ""
    assert encode(Parameters()) == ""


def test_encode_skips_none_values():
    assert encode({"a": 1, "b": None, "c": "x"}) == "a=1 c=x"


def test_override_keeps_position():
    params = Parameters({"a": 1, "b": 2})
    params["a"] = 5
    assert list(params.keys()) == ["a", "b"]
    assert encode(params) == "a=5 b=2"


@pytest.mark.parametrize(
    "value, expected",
    [
        (True, "true"),
        (False, "false"),
        (np.bool_(True), "true"),
        (0.1, "0.1"),
        (np.float32(0.5), "0.5"),
        (np.int64(7), "7"),
        (Boosting.GOSS, "goss"),
        (Verbosity.FATAL, "-1"),
        (Path("model.txt"), "model.txt"),
        ([Metric.AUC, Metric.BINARY_LOGLOSS], "auc,binary_logloss"),
        ((1, 2, 3), "1,2,3"),
        (np.array([0.5, 1.5]), "0.5,1.5"),
        ([], "None"),
    ],
)
def test_encode_values(value, expected):
    assert encode({"key": value}) == f"key={expected}"


@pytest.mark.parametrize("key", ["", "num leaves", "a=b", "tab\tkey", "nul\0"])
def test_encode_rejects_bad_keys(key):
    with pytest.raises(lgbm.InvalidParameterError):
        encode({key: 1})


@pytest.mark.parametrize("value", ["two words", "a=b", "", ["ok", "not ok"], "line\nbreak"])
def test_encode_rejects_bad_values(value):
    with pytest.raises(lgbm.InvalidParameterError):
        encode({"key": value})


def test_encode_rejects_non_string_keys():
    with pytest.raises(lgbm.InvalidParameterError, match="must be strings"):
        encode({1: "x"})


def test_encode_rejects_unknown_value_types():
    with pytest.raises(lgbm.InvalidParameterError, match="Unknown type of parameter:key"):
        encode({"key": {"nested": 1}})


def test_invalid_parameter_error_is_value_error():
    with pytest.raises(ValueError):
        encode({"a b": 1})


def test_parameters_mapping_behaviour():
    params = Parameters({"learning_rate": 0.1}, num_leaves=31)
    assert len(params) == 2
    assert "num_leaves" in params
    assert params["learning_rate"] == 0.1
    assert params.get("missing", 3) == 3
    assert params == {"learning_rate": 0.1, "num_leaves": 31}

    params_copy = params.copy()
    params_copy["num_leaves"] = 7
    assert params["num_leaves"] == 31

    del params_copy["learning_rate"]
    assert list(params_copy) == ["num_leaves"]
    assert "Parameters(" in repr(params)


def test_tokens_format_as_their_keyword():
    assert str(Objective.REGRESSION_L1) == "regression_l1"
    assert Objective("multiclass") is Objective.MULTICLASS
    assert Objective.BINARY == "binary"


@pytest.mark.parametrize(
    "metric, higher_better",
    [(Metric.AUC, True), (Metric.NDCG, True), (Metric.MAP, True), (Metric.L2, False), (Metric.MULTI_LOGLOSS, False)],
)
def test_metric_direction(metric, higher_better):
    assert metric.is_higher_better is higher_better
