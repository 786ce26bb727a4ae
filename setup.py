# setup.py
from setuptools import setup, find_packages

setup(
    name="coerce-schema",             # the *distribution* name on PyPI
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),  # will find coerce_schema/
    install_requires=["pandas"],      # durations, frame records, frame equality
    python_requires=">=3.9",
    description="Composable checkers that validate and coerce loosely-typed values",
    author="Your Name",
    license="Creative Commons Attribution-NonCommercial-ShareAlike 4.0 International License",
)
