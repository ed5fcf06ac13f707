"""Entry point for ``python -m datef``."""

from datef.cli import run

run()
