# pathsearch/planning/heuristics/octile.py
from pathsearch.types import Position
from .base import Heuristic

DIAGONAL_COST = 1.4

class OctileHeuristic(Heuristic):
    """
    针对 8-连通栅格地图的精确启发式。
    直行代价为 axis_cost，斜行代价为 diagonal_cost (默认 1.4，和 GridModel 保持一致)。
    如果这里用 sqrt(2) 而模型用 1.4，会高估代价，不再 admissible。
    """
    def __init__(self, diagonal_cost: float = DIAGONAL_COST, axis_cost: float = 1.0):
        self.diagonal_cost = diagonal_cost
        self.axis_cost = axis_cost

    def estimate(self, current: Position, goal: Position) -> float:
        dx = abs(current.x - goal.x)
        dy = abs(current.y - goal.y)
        # 公式: (diag - 2 * axis) * min(dx, dy) + axis * (dx + dy)
        return (self.diagonal_cost - 2 * self.axis_cost) * min(dx, dy) + self.axis_cost * (dx + dy)
