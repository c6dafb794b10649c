"""Classic data structures and algorithms in plain Python: searching, sorting, linked lists, stacks, queues, heaps, trees, graphs and text patterns."""

__version__ = "0.1.0"