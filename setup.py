"""Build configuration for the lisparser package."""

from setuptools import setup

setup(
    name="lisparser",
    version="0.1.0",
    description="S-expression parser built from composable parser combinators",
    python_requires=">=3.10",
    packages=["lisparser"],
    package_dir={"lisparser": "python/lisparser"},
    package_data={"lisparser": ["py.typed"]},
    extras_require={
        "test": ["pytest", "pytest-benchmark", "pytest-cov"],
    },
)
