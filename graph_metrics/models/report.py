"""分析报告数据模型"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class RankedNode:
    """排名中的单个节点"""
    index: int  # 内部索引
    external_id: int  # 原始节点 ID
    score: float

    def to_dict(self) -> dict:
        """转换为字典"""
        return {
            "index": self.index,
            "external_id": self.external_id,
            "score": self.score
        }


@dataclass
class MetricsReport:
    """单次运行的图指标报告"""
    node_count: int = 0
    edge_count: int = 0
    degree_statistics: Dict[str, float] = field(default_factory=dict)
    degree_distribution: Dict[int, int] = field(default_factory=dict)
    closeness: List[RankedNode] = field(default_factory=list)
    betweenness: List[RankedNode] = field(default_factory=list)
    betweenness_halved: bool = False
    clustering: Dict[int, float] = field(default_factory=dict)
    average_clustering: float = 0.0
    # 最大相对度节点（单节点启发式，并非最稠密子图）
    max_relative_degree_node: Optional[RankedNode] = None
    top_n: int = 5

    def to_dict(self) -> dict:
        """转换为字典（JSON 可序列化）"""
        return {
            "node_count": self.node_count,
            "edge_count": self.edge_count,
            "degree_statistics": self.degree_statistics,
            # JSON 的键只能是字符串
            "degree_distribution": {
                str(degree): count
                for degree, count in sorted(self.degree_distribution.items())
            },
            "closeness": [n.to_dict() for n in self.closeness[:self.top_n]],
            "betweenness": [n.to_dict() for n in self.betweenness[:self.top_n]],
            "betweenness_halved": self.betweenness_halved,
            "clustering": {
                str(index): coef
                for index, coef in sorted(self.clustering.items())[:self.top_n]
            },
            "average_clustering": self.average_clustering,
            "max_relative_degree_node": (
                self.max_relative_degree_node.to_dict()
                if self.max_relative_degree_node else None
            )
        }
