"""Setup script for tiebreak."""
from pathlib import Path

from setuptools import find_packages, setup


README = Path(__file__).parent / "README.md"


setup(
    name="tiebreak",
    version="0.1.0",
    description=(
        "Decimal rounding of floats with selectable tie-breaking rules, plus "
        "arithmetic, geometric and harmonic means."
    ),
    long_description=README.read_text() if README.exists() else "",
    long_description_content_type="text/markdown",
    python_requires=">=3.10",
    packages=find_packages(include=["tiebreak", "tiebreak.*"]),
    install_requires=[
        "numpy>=1.22",
        "pandas>=1.4",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
)
