"""Linked lists, a stack, a search tree, a cache, merge sort, CPU scheduling and restaurant billing."""

__version__ = "0.1.0"