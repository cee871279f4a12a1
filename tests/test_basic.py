"""基础功能测试 - 图存储与边文件加载"""

import os
import sys
import tempfile
from pathlib import Path

# 添加项目根目录到路径
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from graph_metrics.models.graph import GraphStore
from graph_metrics.adapters.edge_loader import EdgeLoader


def test_build_assigns_first_seen_indices():
    """测试索引按首次出现顺序分配"""
    graph = GraphStore.build([(10, 20), (20, 30), (5, 10)])
    assert graph.node_count() == 4
    assert graph.edge_count() == 3
    assert [graph.external_id(i) for i in range(4)] == [10, 20, 30, 5]
    assert graph.index_of(30) == 2
    print("[OK] GraphStore index assignment test passed")


def test_neighbors_symmetric():
    """测试邻接关系对称"""
    graph = GraphStore.build([(0, 1), (1, 2)])
    assert graph.neighbors(0) == [1]
    assert sorted(graph.neighbors(1)) == [0, 2]
    assert graph.contains_edge(0, 1)
    assert graph.contains_edge(1, 0)
    assert not graph.contains_edge(0, 2)
    print("[OK] GraphStore symmetric neighbors test passed")


def test_duplicates_and_self_loops_kept():
    """测试重复边与自环按出现次数保存"""
    graph = GraphStore.build([(0, 1), (0, 1), (2, 2)])
    assert graph.edge_count() == 3
    assert graph.degree(0) == 2
    assert graph.neighbors(0) == [1, 1]
    # 自环计两个端点
    assert graph.degree(2) == 2
    assert graph.contains_edge(2, 2)
    for node in graph.nodes():
        assert graph.degree(node) == len(graph.neighbors(node))
    print("[OK] GraphStore multiplicity test passed")


def test_empty_graph():
    """测试空图"""
    graph = GraphStore.build([])
    assert graph.node_count() == 0
    assert graph.edge_count() == 0
    assert list(graph.nodes()) == []
    print("[OK] Empty GraphStore test passed")


def test_to_networkx():
    """测试转换为 networkx 多重图"""
    graph = GraphStore.build([(7, 8), (7, 8), (8, 9)])
    G = graph.to_networkx()
    assert G.number_of_nodes() == 3
    assert G.number_of_edges() == 3
    assert G.nodes[0]["external_id"] == 7
    print("[OK] GraphStore networkx conversion test passed")


def test_parse_lines_skips_malformed():
    """测试非法行被跳过"""
    loader = EdgeLoader()
    lines = [
        "0 1\n",
        "1\t2\n",
        "# comment\n",
        "\n",
        "3 4 5\n",
        "-1 2\n",
        "a b\n",
        "1.5 2\n",
        "4294967295 0\n",
        "4294967296 0\n",
        "  7   8  \n",
    ]
    edges = loader.parse_lines(lines)
    assert edges == [(0, 1), (1, 2), (4294967295, 0), (7, 8)]
    assert loader.skipped_lines == 7
    print("[OK] EdgeLoader malformed line test passed")


def test_load_file():
    """测试从文件加载"""
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "edges.txt")
        with open(path, "w", encoding="utf-8") as f:
            f.write("0 1\n1 2\nbad line\n")
        edges = EdgeLoader().load(path)
    assert edges == [(0, 1), (1, 2)]
    print("[OK] EdgeLoader file test passed")


def test_load_skips_non_utf8_line():
    """测试非 UTF-8 行只跳过该行"""
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "edges.txt")
        with open(path, "wb") as f:
            f.write(b"0 1\n\xff\xfe bad\n1 2\n")
        loader = EdgeLoader()
        edges = loader.load(path)
    assert edges == [(0, 1), (1, 2)]
    assert loader.skipped_lines == 1
    print("[OK] EdgeLoader non-UTF-8 line test passed")


def test_skipped_lines_reset_per_load():
    """测试每次加载重新计数跳过行数"""
    loader = EdgeLoader()
    loader.parse_lines(["0 1\n", "bad\n"])
    loader.parse_lines(["0 1\n", "bad\n"])
    assert loader.skipped_lines == 1
    print("[OK] EdgeLoader skipped counter reset test passed")


def test_parse_line_leading_plus():
    """测试允许一个前导加号"""
    assert EdgeLoader.parse_line("+5 6") == (5, 6)
    assert EdgeLoader.parse_line("5 +6\n") == (5, 6)
    assert EdgeLoader.parse_line("+ 6") is None
    assert EdgeLoader.parse_line("++5 6") is None
    assert EdgeLoader.parse_line("+4294967296 0") is None
    print("[OK] EdgeLoader leading plus test passed")


def test_load_missing_file():
    """测试文件不存在时抛出 RuntimeError"""
    try:
        EdgeLoader().load("/nonexistent/edges.txt")
    except RuntimeError as e:
        assert "edges.txt" in str(e)
    else:
        raise AssertionError("应该抛出 RuntimeError")
    print("[OK] EdgeLoader missing file test passed")


if __name__ == "__main__":
    print("Running basic functionality tests...\n")

    try:
        test_build_assigns_first_seen_indices()
        test_neighbors_symmetric()
        test_duplicates_and_self_loops_kept()
        test_empty_graph()
        test_to_networkx()
        test_parse_lines_skips_malformed()
        test_load_file()
        test_load_skips_non_utf8_line()
        test_skipped_lines_reset_per_load()
        test_parse_line_leading_plus()
        test_load_missing_file()

        print("\n[SUCCESS] All tests passed!")
    except AssertionError as e:
        print(f"\n[FAIL] Test failed: {e}")
        sys.exit(1)
    except Exception as e:
        print(f"\n[ERROR] Test error: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)
