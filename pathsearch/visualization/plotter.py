# pathsearch/visualization/plotter.py
# 绘图逻辑 (Matplotlib)

from typing import Optional

import matplotlib.pyplot as plt
import numpy as np

from pathsearch.types import SearchResult
from pathsearch.map.grid_map import GridModel
from pathsearch.visualization.observers import ExperimentObserver


def plot_search(model: GridModel,
                result: SearchResult,
                observer: Optional[ExperimentObserver] = None,
                ax=None,
                title: Optional[str] = None):
    """
    把一次栅格搜索画出来：底图 / 已扩展节点 / OpenSet 历史 / 最终路径 / 起终点
    :return: matplotlib Axes
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 8))

    # A. 底图：障碍为黑色，地形值越大越深
    passable = np.where(model.data > 0, model.data, np.nan)
    ax.imshow(model.data <= 0, cmap='Greys', origin='lower', interpolation='nearest')
    if np.any(model.data > 1):
        ax.imshow(passable, cmap='YlOrBr', origin='lower', alpha=0.4, interpolation='nearest')

    # B. 已扩展节点 - 红色小点
    expanded = observer.expanded_nodes if observer is not None else result.closed
    if expanded:
        ax.scatter([p.x for p in expanded], [p.y for p in expanded],
                   c='red', s=6, alpha=0.4, label='Expanded Nodes')

    # C. OpenSet 历史 (可选) - 绿色小点
    if observer is not None and observer.open_set_history:
        op_x = [p[0] for p in observer.open_set_history]
        op_y = [p[1] for p in observer.open_set_history]
        ax.scatter(op_x, op_y, c='green', s=2, alpha=0.3, label='OpenSet History')

    # D. 最终路径 - 蓝色实线
    if result.path:
        path_x = [p.x for p in result.path]
        path_y = [p.y for p in result.path]
        ax.plot(path_x, path_y, 'b-', linewidth=2.0, label=f'Path (cost={result.cost:.2f})')
        ax.plot(path_x[0], path_y[0], 'go', markersize=8, label='Start')
        ax.plot(path_x[-1], path_y[-1], 'rx', markersize=8, label='Goal')

    ax.set_title(title or f"A* search: {result.status.value}")
    ax.set_xlabel("X [cell]")
    ax.set_ylabel("Y [cell]")
    ax.legend(loc='upper right', fontsize='small')
    ax.set_aspect('equal')
    return ax
