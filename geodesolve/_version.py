"""
Exposes the version of geodesolve
"""
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

__all__ = ["__version__"]

_VERSION_FILE = Path(__file__).resolve().parents[1] / "VERSION"

try:
    __version__ = version("geodesolve")
except PackageNotFoundError:
    # Source checkout without installed metadata
    __version__ = _VERSION_FILE.read_text(encoding="utf-8").strip() if _VERSION_FILE.exists() else None
