"""Solvers for classic programming-puzzle exercises, with a command-line front end."""

__version__ = "0.1.0"