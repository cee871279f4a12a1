"""图存储 - 无向无权图的邻接表实现"""

from typing import Dict, Iterable, Iterator, List, Set, Tuple
import networkx as nx


class GraphStore:
    """无向图存储

    外部节点 ID（无符号整数）按首次出现顺序映射为 [0, N) 的连续内部索引。
    自环和重复边按出现次数保存，不做去重。构建完成后只读。
    """

    def __init__(self):
        self._index_of: Dict[int, int] = {}
        self._external_ids: List[int] = []
        self._adjacency: List[List[int]] = []
        self._edges: List[Tuple[int, int]] = []
        self._edge_set: Set[Tuple[int, int]] = set()

    @classmethod
    def build(cls, edges: Iterable[Tuple[int, int]]) -> "GraphStore":
        """
        从节点对序列构建图

        Args:
            edges: 外部节点 ID 对序列 [(u, v), ...]

        Returns:
            构建好的 GraphStore
        """
        graph = cls()
        for source, target in edges:
            a = graph._get_or_add_node(source)
            b = graph._get_or_add_node(target)
            graph._add_edge(a, b)
        return graph

    def _get_or_add_node(self, external_id: int) -> int:
        index = self._index_of.get(external_id)
        if index is None:
            index = len(self._external_ids)
            self._index_of[external_id] = index
            self._external_ids.append(external_id)
            self._adjacency.append([])
        return index

    def _add_edge(self, a: int, b: int):
        self._edges.append((a, b))
        self._edge_set.add((min(a, b), max(a, b)))
        # 自环在 a 的邻接表中出现两次（两个端点）
        self._adjacency[a].append(b)
        self._adjacency[b].append(a)

    def node_count(self) -> int:
        """节点数"""
        return len(self._external_ids)

    def edge_count(self) -> int:
        """边记录数（含重复边和自环）"""
        return len(self._edges)

    def neighbors(self, index: int) -> List[int]:
        """邻居索引列表，保留重复"""
        return self._adjacency[index]

    def contains_edge(self, a: int, b: int) -> bool:
        """任意方向存在边记录即返回 True"""
        return (min(a, b), max(a, b)) in self._edge_set

    def degree(self, index: int) -> int:
        """度数 = 关联的边端点数"""
        return len(self._adjacency[index])

    def nodes(self) -> Iterator[int]:
        return iter(range(len(self._external_ids)))

    def edges(self) -> Iterator[Tuple[int, int]]:
        return iter(self._edges)

    def external_id(self, index: int) -> int:
        """内部索引 -> 外部 ID"""
        return self._external_ids[index]

    def index_of(self, external_id: int) -> int:
        """外部 ID -> 内部索引

        Raises:
            KeyError: 外部 ID 不在图中
        """
        return self._index_of[external_id]

    def to_networkx(self) -> nx.MultiGraph:
        """
        转换为 networkx 多重图

        节点为内部索引，属性 external_id 为外部 ID；每条边记录对应一条边。
        """
        G = nx.MultiGraph()
        for index, external_id in enumerate(self._external_ids):
            G.add_node(index, external_id=external_id)
        G.add_edges_from(self._edges)
        return G

    def __repr__(self) -> str:
        return f"GraphStore(nodes={self.node_count()}, edges={self.edge_count()})"
