# pathsearch/planning/costs/__init__.py

from .base import CostFunction
from .step_cost import StepCost
from .terrain_cost import TerrainCost

__all__ = ['CostFunction', 'StepCost', 'TerrainCost']
