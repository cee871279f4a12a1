"""中心性分析器 - 接近中心性与 Brandes 介数中心性"""

from collections import deque
from typing import List, Tuple

from graph_metrics.models.graph import GraphStore


def _rank(scores: List[float]) -> List[Tuple[int, float]]:
    """按得分降序排列，得分相同时按节点索引升序"""
    return sorted(enumerate(scores), key=lambda item: (-item[1], item[0]))


class CentralityAnalyzer:
    """中心性分析器，所有方法只读访问图"""

    @staticmethod
    def bfs_distances(graph: GraphStore, source: int) -> List[int]:
        """
        单源最短路径（单位边权，广度优先）

        Args:
            graph: 图
            source: 源节点索引

        Returns:
            到每个节点的距离列表，不可达为 -1
        """
        dist = [-1] * graph.node_count()
        dist[source] = 0
        queue = deque([source])
        while queue:
            v = queue.popleft()
            for w in graph.neighbors(v):
                if dist[w] < 0:
                    dist[w] = dist[v] + 1
                    queue.append(w)
        return dist

    @staticmethod
    def compute_closeness(graph: GraphStore) -> List[Tuple[int, float]]:
        """
        计算接近中心性 (Closeness Centrality)

        closeness(s) = (N - 1) / 可达节点距离之和；孤立节点为 0。
        不可达节点不计入距离和，且分子不针对非连通图修正，
        在碎片化的图上会低估真实接近中心性。

        Args:
            graph: 图

        Returns:
            [(节点索引, 得分), ...]，按得分降序
        """
        n = graph.node_count()
        scores = []
        for s in range(n):
            total = sum(d for d in CentralityAnalyzer.bfs_distances(graph, s) if d > 0)
            scores.append((n - 1) / total if total > 0 else 0.0)
        return _rank(scores)

    @staticmethod
    def compute_betweenness(graph: GraphStore,
                            halve: bool = False) -> List[Tuple[int, float]]:
        """
        Brandes 算法计算介数中心性 (Betweenness Centrality)

        每个源节点做一次广度优先遍历，统计最短路径条数 sigma，
        再按遍历逆序回传依赖值 delta。无向图中每个节点对会在两个方向
        各计算一次，默认返回未减半的原始累加和。

        Args:
            graph: 图
            halve: 是否除以 2（无向图常用约定）

        Returns:
            [(节点索引, 得分), ...]，按得分降序
        """
        n = graph.node_count()
        betweenness = [0.0] * n

        for s in range(n):
            stack = []
            pred = [[] for _ in range(n)]
            sigma = [0.0] * n
            dist = [-1] * n
            sigma[s] = 1.0
            dist[s] = 0

            queue = deque([s])
            while queue:
                v = queue.popleft()
                stack.append(v)
                for w in graph.neighbors(v):
                    if dist[w] < 0:
                        queue.append(w)
                        dist[w] = dist[v] + 1
                    if dist[w] == dist[v] + 1:
                        sigma[w] += sigma[v]
                        pred[w].append(v)

            delta = [0.0] * n
            while stack:
                w = stack.pop()
                for v in pred[w]:
                    delta[v] += (sigma[v] / sigma[w]) * (1.0 + delta[w])
                if w != s:
                    betweenness[w] += delta[w]

        if halve:
            betweenness = [b / 2.0 for b in betweenness]

        return _rank(betweenness)
