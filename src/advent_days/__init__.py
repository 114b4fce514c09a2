"""Daily puzzle solvers behind a small (day, task) dispatcher."""

__version__ = "0.1.0"
