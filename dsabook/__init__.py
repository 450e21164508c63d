"""Singly, doubly and circular linked lists, linked-list algorithms and backtracking generators."""

__version__ = "0.1.0"