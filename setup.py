from pathlib import Path

from setuptools import find_packages, setup

_version = (Path(__file__).absolute().parent / "lgbm" / "VERSION.txt").read_text(encoding="utf-8").strip()

setup(
    name="lgbm",
    version=_version,
    description="Ownership-checked Python binding for the LightGBM C API",
    python_requires=">=3.8",
    include_package_data=True,
    packages=find_packages(include=["lgbm", "lgbm.*"]),
    package_data={
        "lgbm": [
            "VERSION.txt",
        ]
    },
    install_requires=[
        "numpy>=1.17.0",
        "scipy",
        # ships lib_lightgbm, which is located without importing the lightgbm package;
        # LGBM_DatasetCreateFromMats takes one layout flag per matrix since 4.7.0
        "lightgbm>=4.7.0",
    ],
    extras_require={
        "pandas": [
            "pandas>=0.24.0",
        ],
        "test": [
            "pytest",
            "pandas>=0.24.0",
        ],
    },
    zip_safe=False,
)
