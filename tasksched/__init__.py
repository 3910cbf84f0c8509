"""Priority and lottery CPU scheduling simulation with a CSV execution log."""

__version__ = "0.1.0"
__all__ = ["__version__"]