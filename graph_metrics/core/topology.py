"""拓扑分析器 - 度分布、局部聚类系数、最大相对度节点"""

from typing import Dict

from graph_metrics.models.graph import GraphStore


class TopologyAnalyzer:
    """拓扑分析器，实现基于邻接关系的图指标"""

    @staticmethod
    def compute_degree_distribution(graph: GraphStore) -> Dict[int, int]:
        """
        计算度分布

        度数按边端点计：自环计 2，重复边按出现次数计。

        Args:
            graph: 图

        Returns:
            {度数: 节点数}
        """
        distribution: Dict[int, int] = {}
        for node in graph.nodes():
            degree = graph.degree(node)
            distribution[degree] = distribution.get(degree, 0) + 1
        return distribution

    @staticmethod
    def compute_local_clustering(graph: GraphStore) -> Dict[int, float]:
        """
        计算局部聚类系数 (Local Clustering Coefficient)

        对每个度数大于 1 的节点，枚举邻居的无序对，统计其中直接相连的对数
        （闭合三角形），除以可能的对数 degree * (degree - 1) / 2。
        度数 <= 1 的节点系数为 0。

        复杂度 O(N * d^2)，对高度数的枢纽节点代价很高。

        Args:
            graph: 图

        Returns:
            {节点索引: 聚类系数}，取值范围 [0, 1]
        """
        clustering: Dict[int, float] = {}
        for node in graph.nodes():
            neighbors = graph.neighbors(node)
            degree = len(neighbors)

            if degree <= 1:
                clustering[node] = 0.0
                continue

            triangles = 0
            for i in range(degree):
                for j in range(i + 1, degree):
                    if graph.contains_edge(neighbors[i], neighbors[j]):
                        triangles += 1

            possible = degree * (degree - 1) // 2
            clustering[node] = triangles / possible
        return clustering

    @staticmethod
    def find_max_relative_degree_node(graph: GraphStore) -> int:
        """
        查找相对度（度数 / 节点数）最大的节点

        这是单节点启发式，不是最稠密子图算法，返回值只表示一个节点。
        严格大于才替换，因此并列时保留最先出现的节点。

        Args:
            graph: 图

        Returns:
            节点索引；空图返回 0
        """
        node_count = graph.node_count()
        best_ratio = 0.0
        best_node = None

        for node in graph.nodes():
            ratio = graph.degree(node) / node_count
            if ratio > best_ratio:
                best_ratio = ratio
                best_node = node

        return best_node if best_node is not None else 0
