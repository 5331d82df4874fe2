"""
setup.py for Showcase.

Sources live under ``src/``; the ``showcase`` console script runs the tour.
"""

from pathlib import Path

from setuptools import find_packages, setup


def read_version() -> str:
    """Read ``__version__`` from the package without importing it."""
    init_file = Path(__file__).parent / "src" / "showcase" / "__init__.py"
    for line in init_file.read_text(encoding="utf-8").splitlines():
        if line.startswith("__version__"):
            return line.split("=", 1)[1].strip().strip("\"'")
    raise RuntimeError(f"__version__ not found in {init_file}")


setup(
    name="showcase",
    version=read_version(),
    description="A small tour of a validated entity, an async delay, a JSON fetch and a factorial",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "click>=8.1",
        "httpx>=0.27",
        "loguru>=0.7",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "showcase=showcase.cli:main",
        ],
    },
)
