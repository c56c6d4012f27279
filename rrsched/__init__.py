"""Round-robin CPU scheduling simulator with a command-line report."""

__version__ = "0.1.0"
__all__ = ["__version__"]