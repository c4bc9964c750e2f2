# pathsearch/planning/__init__.py

from .priority_queue import PriorityQueue, Handle

__all__ = ["PriorityQueue", "Handle"]
