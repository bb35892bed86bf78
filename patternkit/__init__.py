"""Small, runnable implementations of classic software design patterns."""

__version__ = "0.1.0"