"""Classic data structures and algorithms: arrays, heaps, trees, linked lists, strings and graphs."""

__version__ = "0.1.0"