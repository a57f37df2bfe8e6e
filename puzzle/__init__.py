"""Command line front end for the hex chain puzzle solver."""

__version__ = "0.1.0"

__all__ = ["__version__"]
