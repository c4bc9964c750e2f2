# pathsearch/planning/costs/step_cost.py
from pathsearch.types import Position
from pathsearch.planning.heuristics.octile import DIAGONAL_COST
from .base import CostFunction

class StepCost(CostFunction):
    """
    栅格基础移动代价。
    沿坐标轴移动代价 axis_cost (1.0)，斜向移动代价 diagonal_cost (1.4, 约等于 sqrt(2))。
    """
    def __init__(self, axis_cost: float = 1.0, diagonal_cost: float = DIAGONAL_COST):
        self.axis_cost = axis_cost
        self.diagonal_cost = diagonal_cost

    def calculate(self, current: Position, next_node: Position) -> float:
        if current.x != next_node.x and current.y != next_node.y:
            return self.diagonal_cost
        return self.axis_cost
