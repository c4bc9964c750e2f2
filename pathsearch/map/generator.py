# pathsearch/map/generator.py
import logging
from typing import Iterable, Optional

import numpy as np

from pathsearch.types import Position
from pathsearch.map.grid_map import GridModel

logger = logging.getLogger(__name__)


class GridGenerator:
    """
    随机栅格生成器 (用于测试和 benchmark)
    按障碍密度随机撒点，可选地形值范围，并清除关键点 (起点/终点) 附近的障碍。
    不保证起终点连通，需要的话用 GridModel.is_reachable 过滤。
    """

    def __init__(self,
                 obstacle_density: float = 0.1,
                 max_terrain: int = 1,
                 clear_radius: int = 0,
                 seed: Optional[int] = None):
        if not 0.0 <= obstacle_density <= 1.0:
            raise ValueError("obstacle_density must be in [0, 1]")
        if max_terrain < 1:
            raise ValueError("max_terrain must be >= 1")
        self.density = obstacle_density
        self.max_terrain = max_terrain
        self.clear_radius = clear_radius
        self.seed = seed
        # 每个生成器有自己的随机源，不影响全局 np.random 状态
        self._rng = np.random.default_rng(seed)

    def generate(self, width: int, height: int,
                 keep_clear: Iterable[Position] = (), **model_kwargs) -> GridModel:
        # 1. 地形底图 (1 = 普通地面)
        if self.max_terrain > 1:
            grid = self._rng.integers(1, self.max_terrain + 1, size=(height, width))
        else:
            grid = np.ones((height, width), dtype=int)

        # 2. 随机障碍
        obstacle_mask = self._rng.random((height, width)) < self.density
        grid[obstacle_mask] = 0

        # 3. 清除关键点
        for pos in keep_clear:
            self._clear_around(grid, pos)

        logger.debug("Generated %dx%d grid, density=%.2f, obstacles=%d",
                     width, height, self.density, int(np.count_nonzero(grid == 0)))
        return GridModel(grid, **model_kwargs)

    def _clear_around(self, grid: np.ndarray, pos: Position):
        r = self.clear_radius
        height, width = grid.shape
        y_min, y_max = max(0, pos.y - r), min(height, pos.y + r + 1)
        x_min, x_max = max(0, pos.x - r), min(width, pos.x + r + 1)
        region = grid[y_min:y_max, x_min:x_max]
        region[region <= 0] = 1
