"""Classic data structures and algorithms: trees, heaps, tries, lists, queues, stacks, graphs and more."""

__version__ = "0.1.0"