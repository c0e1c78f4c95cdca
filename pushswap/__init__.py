"""Two-stack sorting puzzle: an instruction generator and a checker."""

__version__ = "1.0.0"