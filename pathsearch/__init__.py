# pathsearch/__init__.py

from .types import Position, SearchNode, SearchResult, SearchStats, SearchStatus
from .config import SearchConfig, QueueConfig
from .exceptions import PathSearchError, InvalidInputError, EmptyQueueError, ContractViolationError
from .planning.priority_queue import PriorityQueue, Handle
from .map import SpaceModel, GridModel, GridGenerator
from .planning.planners import AStarSearch, find_path
from .geometry import Triangle, point_in_triangle, points_in_triangle

__version__ = "0.1.0"

__all__ = [
    "Position",
    "SearchNode",
    "SearchResult",
    "SearchStats",
    "SearchStatus",
    "SearchConfig",
    "QueueConfig",
    "PathSearchError",
    "InvalidInputError",
    "EmptyQueueError",
    "ContractViolationError",
    "PriorityQueue",
    "Handle",
    "SpaceModel",
    "GridModel",
    "GridGenerator",
    "AStarSearch",
    "find_path",
    "Triangle",
    "point_in_triangle",
    "points_in_triangle",
]
