# pathsearch/visualization/__init__.py
# plotter 依赖 matplotlib，按需单独导入

from .observers import EfficientObserver, ExperimentObserver, DebugObserver

__all__ = ["EfficientObserver", "ExperimentObserver", "DebugObserver"]
