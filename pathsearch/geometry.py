# pathsearch/geometry.py
"""
平面几何小工具：点是否在三角形内部。
和搜索引擎没有依赖关系，单独使用。
"""
from dataclasses import dataclass

import numpy as np


def _edge_sign(px, py, ax, ay, bx, by):
    # 叉积 (p - b) x (a - b) 的符号表示 p 在边 a->b 的哪一侧
    return (px - bx) * (ay - by) - (ax - bx) * (py - by)


def point_in_triangle(x1: float, y1: float,
                      x2: float, y2: float,
                      x3: float, y3: float,
                      px: float, py: float) -> bool:
    """
    符号法 (barycentric sign check)
    三条边的叉积同号 -> 点在内部。顶点顺序 (顺时针/逆时针) 都可以。
    严格内部：点落在边上或顶点上返回 False；退化三角形 (三点共线) 恒为 False。
    """
    d1 = _edge_sign(px, py, x1, y1, x2, y2)
    d2 = _edge_sign(px, py, x2, y2, x3, y3)
    d3 = _edge_sign(px, py, x3, y3, x1, y1)
    return (d1 < 0 and d2 < 0 and d3 < 0) or (d1 > 0 and d2 > 0 and d3 > 0)


@dataclass(frozen=True)
class Triangle:
    x1: float
    y1: float
    x2: float
    y2: float
    x3: float
    y3: float

    @property
    def vertices(self) -> np.ndarray:
        """(3, 2) 顶点数组"""
        return np.array([[self.x1, self.y1], [self.x2, self.y2], [self.x3, self.y3]], dtype=float)

    def contains(self, x: float, y: float) -> bool:
        return point_in_triangle(self.x1, self.y1, self.x2, self.y2, self.x3, self.y3, x, y)


def points_in_triangle(triangle: Triangle, points) -> np.ndarray:
    """
    向量化版本
    :param points: (N, 2) 点坐标
    :return: (N,) bool 数组
    """
    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    px, py = pts[:, 0], pts[:, 1]
    t = triangle
    d1 = _edge_sign(px, py, t.x1, t.y1, t.x2, t.y2)
    d2 = _edge_sign(px, py, t.x2, t.y2, t.x3, t.y3)
    d3 = _edge_sign(px, py, t.x3, t.y3, t.x1, t.y1)
    negative = (d1 < 0) & (d2 < 0) & (d3 < 0)
    positive = (d1 > 0) & (d2 > 0) & (d3 > 0)
    return negative | positive
