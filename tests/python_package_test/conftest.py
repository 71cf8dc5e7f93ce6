import gc

import numpy as np
import pytest

import lgbm

from .utils import FakeLib, detach_fake_handles


@pytest.fixture(scope="function")
def rng():
    return np.random.default_rng()


@pytest.fixture(scope="function")
def rng_fixed_seed():
    return np.random.default_rng(seed=42)


@pytest.fixture(scope="function")
def fake_lib(monkeypatch):
    """Route every native call of the package to a scripted FakeLib"""
    lib = FakeLib()
    monkeypatch.setattr(lgbm.basic, "_LIB", lib)
    monkeypatch.setattr(lgbm.basic._ConfigAliases, "aliases", {"num_class": ["num_class", "num_classes"]})
    yield lib
    # objects kept alive by tracebacks must not reach the real library once it is restored
    gc.collect()
    detach_fake_handles(lib)


@pytest.fixture(scope="function")
def restore_logger(monkeypatch):
    """Undo register_logger() calls made by a test"""
    for name in ("_LOGGER", "_INFO_METHOD_NAME", "_WARNING_METHOD_NAME"):
        monkeypatch.setattr(lgbm.basic, name, getattr(lgbm.basic, name))
