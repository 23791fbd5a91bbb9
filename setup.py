from pathlib import Path
from setuptools import find_packages, setup

HERE = Path(__file__).parent


def _read_version() -> str:
    """Read __version__ from the package without importing it."""
    init = HERE / "src" / "filecount" / "__init__.py"
    for line in init.read_text(encoding="utf-8").splitlines():
        if line.startswith("__version__"):
            return line.split("=", 1)[1].strip().strip("'\"")
    raise RuntimeError("__version__ not found in src/filecount/__init__.py")


setup(
    name="filecount",
    version=_read_version(),
    description="Concurrent per-extension file, line and byte counter",
    author="GAHEOS",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages("src"),
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["filecount = filecount.cli:main"]},
)
