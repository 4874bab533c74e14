"""Conventional-commit branch workflow for git."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("gwf")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
