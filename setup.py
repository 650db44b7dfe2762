"""
Setup script for smith_wilson package.

Pure Python package; sources live under src/python.
"""

from pathlib import Path

from setuptools import find_packages, setup

README = Path(__file__).parent / "README.md"

setup(
    name="smith-wilson",
    version="1.0.0",
    description="Smith-Wilson yield curve interpolation and extrapolation",
    long_description=README.read_text(encoding="utf-8") if README.exists() else "",
    long_description_content_type="text/markdown",
    python_requires=">=3.9",
    package_dir={"": "src/python"},
    packages=find_packages(where="src/python"),
    install_requires=[
        "numpy>=1.24",
        "scipy>=1.10",
        "pandas>=2.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
        "parquet": [
            "pyarrow>=12.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "smith-wilson=smith_wilson.cli:main",
        ],
    },
    zip_safe=False,
)
