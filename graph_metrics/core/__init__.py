"""核心算法层"""

from .calculator import MetricCalculator
from .centrality import CentralityAnalyzer
from .topology import TopologyAnalyzer

__all__ = ["CentralityAnalyzer", "MetricCalculator", "TopologyAnalyzer"]
