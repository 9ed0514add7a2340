"""Deterministic fixed- and variable-income investment simulator."""

__version__ = "0.1.0"
