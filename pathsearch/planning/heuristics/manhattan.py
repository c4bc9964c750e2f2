# pathsearch/planning/heuristics/manhattan.py
from pathsearch.types import Position
from .base import Heuristic

class ManhattanHeuristic(Heuristic):
    """
    曼哈顿距离 (L1).
    Cost = |dx| + |dy| (+ |dz| ...)
    注意：在允许对角移动的 8-连通栅格中，
    Manhattan (2.0) > Diagonal (1.4)，违反了 Admissibility (h <= true_cost)。
    因此 A* 可能找不到最短路径，但通常能极大加速搜索（贪婪倾向）。
    """
    def estimate(self, current: Position, goal: Position) -> float:
        return float(sum(abs(c - g) for c, g in zip(current, goal)))
