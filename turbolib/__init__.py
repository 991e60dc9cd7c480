"""Classic data structures, algorithms, threading helpers and object-oriented design patterns."""

__version__ = "0.1.0"