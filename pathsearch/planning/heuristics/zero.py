# pathsearch/planning/heuristics/zero.py
from pathsearch.types import Position
from .base import Heuristic

class ZeroHeuristic(Heuristic):
    """
    零启发式 (h=0).
    这将使 A* 退化为 Dijkstra 算法，保证最优性，但搜索效率最低（向四面八方均匀扩散）。
    """
    def estimate(self, current: Position, goal: Position) -> float:
        return 0.0
