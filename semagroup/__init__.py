"""A thread-safe wait group with an optional concurrency limit, plus usage examples."""

__version__ = "0.1.0"