# pathsearch/planning/costs/terrain_cost.py
from pathsearch.types import Position
from .base import CostFunction

class TerrainCost(CostFunction):
    """
    地形代价：利用栅格值表示通行难度。
    值为 1 的格子是普通地面 (无额外代价)，值越大越难走，额外代价 = value - 1。
    """
    def __init__(self, grid_model: "GridModel"):
        self.grid_model = grid_model

    def calculate(self, current: Position, next_node: Position) -> float:
        value = self.grid_model.cell_value(next_node)
        return max(0.0, float(value) - 1.0)
