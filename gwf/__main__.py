"""Allow running gwf as `python -m gwf`."""

from gwf.cli import app

app()
