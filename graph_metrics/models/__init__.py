"""数据模型层"""

from .graph import GraphStore
from .report import MetricsReport, RankedNode

__all__ = ["GraphStore", "MetricsReport", "RankedNode"]
