"""指标计算器 - 汇总统计"""

import numpy as np
from typing import Dict, List, Tuple

from graph_metrics.models.graph import GraphStore


class MetricCalculator:
    """对分析结果做汇总统计"""

    @staticmethod
    def degree_statistics(graph: GraphStore) -> Dict[str, float]:
        """
        度数统计

        Args:
            graph: 图

        Returns:
            {"min", "max", "mean", "std"}，空图全部为 0
        """
        if graph.node_count() == 0:
            return {"min": 0.0, "max": 0.0, "mean": 0.0, "std": 0.0}

        degrees = np.array([graph.degree(node) for node in graph.nodes()], dtype=float)
        return {
            "min": float(np.min(degrees)),
            "max": float(np.max(degrees)),
            "mean": float(np.mean(degrees)),
            "std": float(np.std(degrees))
        }

    @staticmethod
    def average_clustering(clustering: Dict[int, float]) -> float:
        """平均聚类系数，空输入为 0"""
        if not clustering:
            return 0.0
        return float(np.mean(list(clustering.values())))

    @staticmethod
    def score_summary(ranking: List[Tuple[int, float]]) -> Dict[str, float]:
        """
        排名得分汇总

        Args:
            ranking: [(节点索引, 得分), ...]

        Returns:
            {"max", "mean"}
        """
        if not ranking:
            return {"max": 0.0, "mean": 0.0}

        scores = np.array([score for _, score in ranking], dtype=float)
        return {"max": float(np.max(scores)), "mean": float(np.mean(scores))}

    @staticmethod
    def top_n(ranking: List[Tuple[int, float]], n: int = 5) -> List[Tuple[int, float]]:
        """取排名前 n 项"""
        if n <= 0:
            return []
        return ranking[:n]
