# pathsearch/map/grid_map.py
import logging
from typing import Iterable, List, Optional, Sequence, Set

import numpy as np
from scipy.ndimage import label

from pathsearch.types import Position
from pathsearch.map.base import SpaceModel
from pathsearch.planning.heuristics import Heuristic, ManhattanHeuristic
from pathsearch.planning.costs.base import CostFunction
from pathsearch.planning.costs.step_cost import StepCost

logger = logging.getLogger(__name__)

# 8-连通结构元，label() 用它计算连通域，和 neighbors() 的邻接关系一致
_EIGHT_CONNECTED = np.ones((3, 3), dtype=int)


class GridModel(SpaceModel):
    """
    二维栅格搜索空间 (参考实现)

    约定：grid[y, x] <= 0 表示不可通行，任何正值表示可通行。
    - 邻居: 周围 8 个格子 (越界和不可通行的除外)
    - 启发式: 默认 Manhattan (可注入任意 Heuristic)
    - 移动代价: 直行 1，斜行 1.4，再加上可选的加权 CostFunction
    """

    def __init__(self,
                 grid,
                 heuristic: Optional[Heuristic] = None,
                 cost_functions: Optional[List[CostFunction]] = None,
                 weights: Optional[List[float]] = None):
        self._grid = np.asarray(grid)
        if self._grid.ndim != 2:
            raise ValueError(f"Grid must be 2D, got shape {self._grid.shape}")

        self.h_fn = heuristic or ManhattanHeuristic()
        self.step_cost = StepCost()
        self.cost_fns = list(cost_functions or [])
        self.weights = list(weights) if weights is not None else [1.0] * len(self.cost_fns)

        assert len(self.cost_fns) == len(self.weights), "Cost functions and weights mismatch"

        # 连通域标签懒加载，模型只读所以只算一次
        self._labels = None

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]], **kwargs) -> "GridModel":
        """从嵌套列表构建，rows[y][x]"""
        return cls(np.array(rows, dtype=float), **kwargs)

    @classmethod
    def from_ascii(cls, text: str, **kwargs) -> "GridModel":
        """
        从字符画构建，方便写测试:
          '.' -> 1 (普通地面)
          '#' -> 0 (障碍)
          '1'-'9' -> 对应的地形值
        """
        rows = []
        for line in text.strip().splitlines():
            line = line.strip()
            if not line:
                continue
            row = []
            for ch in line:
                if ch == '.':
                    row.append(1)
                elif ch == '#':
                    row.append(0)
                elif ch.isdigit():
                    row.append(int(ch))
                else:
                    raise ValueError(f"Unknown grid character {ch!r}")
            rows.append(row)
        if len({len(r) for r in rows}) > 1:
            raise ValueError("All grid rows must have the same length")
        return cls.from_rows(rows, **kwargs)

    @property
    def data(self) -> np.ndarray:
        return self._grid

    @property
    def width(self) -> int:
        return self._grid.shape[1]

    @property
    def height(self) -> int:
        return self._grid.shape[0]

    def _is_valid_index(self, x: int, y: int) -> bool:
        """内部辅助：检查索引边界"""
        return (0 <= x < self.width) and (0 <= y < self.height)

    def is_passable(self, x: int, y: int) -> bool:
        if not self._is_valid_index(x, y):
            return False  # 越界视为障碍
        return self._grid[y, x] > 0

    def cell_value(self, node: Position):
        return self._grid[node.y, node.x]

    def contains(self, node: Position) -> bool:
        # 只有整数坐标才是格子，0.5 之类的坐标不在定义域内
        return (isinstance(node, Position) and node.dim == 2
                and all(isinstance(c, (int, np.integer)) for c in node.coords)
                and self.is_passable(node.x, node.y))

    # ------------------------------------------------------------------
    # SpaceModel 接口
    # ------------------------------------------------------------------

    def neighbors(self, node: Position) -> List[Position]:
        """
        周围 8 个格子。
        更复杂的模型里邻接关系可以包括跨楼层、跳跃等特殊移动规则。
        """
        result = []
        for y in range(node.y - 1, node.y + 2):
            for x in range(node.x - 1, node.x + 2):
                if x == node.x and y == node.y:
                    continue
                if self.is_passable(x, y):
                    result.append(Position(x, y))
        return result

    def heuristic_estimate(self, node: Position, goal: Position) -> float:
        return self.h_fn.estimate(node, goal)

    def movement_cost(self, a: Position, b: Position) -> float:
        cost = self.step_cost.calculate(a, b)
        # 注入的额外代价 (如地形)
        for fn, w in zip(self.cost_fns, self.weights):
            cost += w * fn.calculate(a, b)
        return cost

    # ------------------------------------------------------------------
    # 可达性分析
    # ------------------------------------------------------------------

    def _component_labels(self) -> np.ndarray:
        if self._labels is None:
            self._labels, n = label(self._grid > 0, structure=_EIGHT_CONNECTED)
            logger.debug("Labelled %d connected components on %dx%d grid", n, self.width, self.height)
        return self._labels

    def reachable_from(self, node: Position) -> Set[Position]:
        """
        与 node 在同一个 8-连通可通行区域内的所有格子 (包含 node 本身)。
        node 不可通行时返回空集合。
        """
        if not self.contains(node):
            return set()
        labels = self._component_labels()
        ys, xs = np.nonzero(labels == labels[node.y, node.x])
        return {Position(int(x), int(y)) for x, y in zip(xs, ys)}

    def is_reachable(self, start: Position, goal: Position) -> bool:
        """O(1) 查表 (首次调用时 O(W*H) 计算连通域)"""
        if not (self.contains(start) and self.contains(goal)):
            return False
        labels = self._component_labels()
        return labels[start.y, start.x] == labels[goal.y, goal.x]

    def path_cost(self, path: Iterable[Position]) -> float:
        """按 movement_cost 累加路径总代价"""
        path = list(path)
        return sum(self.movement_cost(a, b) for a, b in zip(path, path[1:]))
