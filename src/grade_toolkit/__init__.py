"""Top-level package for the gradebook Grade Computation Engine.

Provides subpackages:
- grade_toolkit.core - immutable models, record validation and serialization
- grade_toolkit.formula - custom grading formula parser and name substitution
- grade_toolkit.grading - CvTE and composite calculators, norms, thresholds
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text()
        except OSError:
            content = ""
        for line in content.splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.3.0"
                return line.split("=")[1].strip().strip('"').strip("'")

    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("grade_toolkit")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__copyright__ = "Copyright 2026 The grade_toolkit Authors"
__all__: list[str] = ["__version__"]
