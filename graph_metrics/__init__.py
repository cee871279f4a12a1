"""图结构指标分析"""

__version__ = "1.0.0"
