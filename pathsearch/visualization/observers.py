# pathsearch/visualization/observers.py
import logging
import time
import os
from typing import Any, List, Tuple, Dict, Optional

from pathsearch.planning.interfaces import ISearchObserver

logger = logging.getLogger(__name__)

_LEVELS = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARN': logging.WARNING,
    'ERROR': logging.ERROR,
}


def _xy(node: Any) -> Tuple[float, float]:
    # Position 取 coords，其他类型按序列处理；一维节点 y 记为 0
    coords = getattr(node, 'coords', node)
    if isinstance(coords, (list, tuple)):
        return coords[0], (coords[1] if len(coords) > 1 else 0)
    return getattr(node, 'x', 0), getattr(node, 'y', 0)


class EfficientObserver(ISearchObserver):
    """
    高效运行模式
    空对象模式 (Null Object Pattern)，除了必要的流程不额外进行信息记录。
    """
    def record_open_set_node(self, node: Any, f: float = 0.0, h: float = 0.0): pass
    def record_current_expansion(self, node: Any): pass
    def record_edge(self, start_node: Any, end_node: Any): pass
    def set_map_info(self, map_info: Any): pass
    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        # 只转发 WARN/ERROR 到模块 logger，其余静默
        if level in ('WARN', 'ERROR'):
            logger.log(_LEVELS[level], message)


class ExperimentObserver(ISearchObserver):
    """
    实验模式
    记录开集、拓展节点、前驱边等关键算法执行内容。
    这些信息主要用于算法的比较和可视化 (Replay)。
    """
    def __init__(self):
        # 存储格式: List[Tuple[x, y, f, h]]
        self.open_set_history: List[Tuple[float, float, float, float]] = []
        # 存储格式: List[Position]，按扩展顺序
        self.expanded_nodes: List[Any] = []
        # 存储格式: List[Tuple[parent, child]]
        self.edges: List[Tuple[Any, Any]] = []
        self.map_info = None

    def record_open_set_node(self, node: Any, f: float = 0.0, h: float = 0.0):
        x, y = _xy(node)
        self.open_set_history.append((x, y, f, h))

    def record_current_expansion(self, node: Any):
        self.expanded_nodes.append(node)

    def record_edge(self, start_node: Any, end_node: Any):
        self.edges.append((start_node, end_node))

    def set_map_info(self, map_info: Any):
        self.map_info = map_info

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        # 实验模式只关心结果和可视化，控制台输出保持简洁
        if level in ('WARN', 'ERROR'):
            logger.log(_LEVELS[level], message)


class DebugObserver(ISearchObserver):
    """
    Debug 模式
    用于详细分析一次搜索为什么效果不好甚至失败。
    将详细日志写入文件，同时保留可视化数据以便对照。
    """
    def __init__(self, log_dir: str = "logs/search_debug"):
        # 复用 ExperimentObserver 的存储，以便 Debug 时也能画图
        self.viz_observer = ExperimentObserver()

        self.log_dir = log_dir
        os.makedirs(self.log_dir, exist_ok=True)

        # 每个会话一个独立的日志文件
        timestamp = time.strftime("%Y%m%d_%H%M%S")
        self.log_file = os.path.join(self.log_dir, f"search_debug_{timestamp}_{id(self):x}.log")

        # 会话 logger 直接构造，不进入 logging 的全局注册表，随 observer 一起回收
        self.logger = logging.Logger(f"{__name__}.session_{timestamp}_{id(self):x}", logging.DEBUG)
        self.logger.propagate = False

        self._handler = logging.FileHandler(self.log_file, encoding='utf-8')
        self._handler.setLevel(logging.DEBUG)
        formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
        self._handler.setFormatter(formatter)
        self.logger.addHandler(self._handler)

        self.logger.info("=== Debug Session Started ===")

    def record_open_set_node(self, node: Any, f: float = 0.0, h: float = 0.0):
        self.viz_observer.record_open_set_node(node, f, h)
        self.logger.debug(f"OpenSet Push: {node} f={f:.3f} h={h:.3f}")

    def record_current_expansion(self, node: Any):
        self.viz_observer.record_current_expansion(node)
        self.logger.debug(f"Expanding: {node}")

    def record_edge(self, start_node: Any, end_node: Any):
        self.viz_observer.record_edge(start_node, end_node)

    def set_map_info(self, map_info: Any):
        self.viz_observer.set_map_info(map_info)
        self.logger.info(f"Map Info set: {map_info}")

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        if payload:
            message = f"{message} | Payload: {payload}"
        self.logger.log(_LEVELS.get(level, logging.INFO), message)

    def close(self):
        """释放文件句柄"""
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)

    # Proxy properties，便于外部工具按 ExperimentObserver 的方式读取
    @property
    def expanded_nodes(self): return self.viz_observer.expanded_nodes
    @property
    def open_set_history(self): return self.viz_observer.open_set_history
    @property
    def edges(self): return self.viz_observer.edges
    @property
    def map_info(self): return self.viz_observer.map_info
