"""Console entry points; see ``setup.py``."""

import sys

from . import demo


def _run(program: str) -> None:
    # Command line arguments are ignored.
    sys.exit(demo.PROGRAMS[program]())


def basic():
    _run("basic")


def with_helper():
    _run("with_helper")


def interface():
    _run("interface")
