"""Contest problem solvers, a command line front end, and shared data structures."""

__version__ = "0.1.0"
__all__ = ["__version__"]