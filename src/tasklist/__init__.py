"""tasklist - a terminal task list."""

__version__ = "0.1.0"
