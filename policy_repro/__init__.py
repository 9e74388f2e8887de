"""Reproducibility script generation for interactive policy simulations."""

__version__ = "0.1.0"
