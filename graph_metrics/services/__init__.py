"""业务服务层"""

from .analyzer import GraphAnalysisService

__all__ = ["GraphAnalysisService"]
