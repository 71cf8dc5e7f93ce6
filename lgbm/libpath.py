# coding: utf-8
"""Find the path to LightGBM dynamic library files."""

from importlib.util import find_spec
from os import environ
from pathlib import Path
from platform import system
from typing import List

__all__: List[str] = []

LIB_DIR_ENV_VAR = "LIGHTGBM_LIB_DIR"


def _lib_file_name() -> str:
    if system() in ("Windows", "Microsoft"):
        return "lib_lightgbm.dll"
    elif system() == "Darwin":
        return "lib_lightgbm.dylib"
    return "lib_lightgbm.so"


def _candidate_dirs() -> List[Path]:
    curr_path = Path(__file__).absolute()
    dirs = []
    configured = environ.get(LIB_DIR_ENV_VAR)
    if configured:
        dirs.append(Path(configured))
    dirs.extend(
        [
            curr_path.parents[0],
            curr_path.parents[0] / "lib",
            curr_path.parents[0] / "bin",
        ]
    )
    # the lightgbm wheel ships lib_lightgbm next to its Python package;
    # find_spec() locates it without importing (and initializing) that package
    spec = find_spec("lightgbm")
    if spec is not None and spec.submodule_search_locations:
        for location in spec.submodule_search_locations:
            dirs.append(Path(location) / "lib")
            dirs.append(Path(location))
    return dirs


def find_lib_path() -> List[str]:
    """Find the path to LightGBM library files.

    The directory named by the ``LIGHTGBM_LIB_DIR`` environment variable is searched first,
    then this package's directory, then the directory of an installed ``lightgbm`` distribution.

    Returns
    -------
    lib_path: list of str
       List of all found library paths to LightGBM.
    """
    lib_name = _lib_file_name()
    dll_path = [p / lib_name for p in _candidate_dirs()]
    lib_path = [str(p) for p in dll_path if p.is_file()]
    if not lib_path:
        dll_path_joined = "\n".join(map(str, dll_path))
        raise FileNotFoundError(f"Cannot find lightgbm library file in following paths:\n{dll_path_joined}")
    return lib_path
