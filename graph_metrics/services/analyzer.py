"""图分析服务 - 加载边文件并依次运行各分析器"""

import logging
import yaml
from pathlib import Path
from typing import Dict, Optional

from graph_metrics.adapters.edge_loader import EdgeLoader
from graph_metrics.core.calculator import MetricCalculator
from graph_metrics.core.centrality import CentralityAnalyzer
from graph_metrics.core.topology import TopologyAnalyzer
from graph_metrics.models.graph import GraphStore
from graph_metrics.models.report import MetricsReport, RankedNode

logger = logging.getLogger(__name__)


class GraphAnalysisService:
    """图分析服务，负责配置、加载与各分析器的调度"""

    def __init__(self, loader: Optional[EdgeLoader] = None,
                 config_path: Optional[str] = None):
        """
        初始化分析服务

        Args:
            loader: 边文件加载器，为 None 时新建
            config_path: 配置文件路径，如果为 None 则使用默认路径
        """
        self.loader = loader or EdgeLoader()
        self.config = self._load_config(config_path)

    def _load_config(self, config_path: Optional[str] = None) -> Dict:
        """加载配置文件"""
        if config_path is None:
            # 默认配置文件路径
            config_path = Path(__file__).parent.parent.parent / "conf" / "config.yaml"
        else:
            config_path = Path(config_path)

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
            if not isinstance(config, dict):
                raise ValueError("配置文件内容必须是映射")
            logger.info(f"配置文件加载成功: {config_path}")
            return config
        except FileNotFoundError:
            logger.warning(f"配置文件不存在: {config_path}，使用默认配置")
            return self._get_default_config()
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error(f"加载配置文件失败: {e}，使用默认配置")
            return self._get_default_config()

    def _get_default_config(self) -> Dict:
        """获取默认配置"""
        return {
            "input": {"path": None},
            "analysis": {
                "degree": True,
                "closeness": True,
                "betweenness": True,
                "clustering": True,
                "density": True
            },
            "betweenness": {"halve": False},
            "report": {"top_n": 5}
        }

    def _section(self, name: str) -> Dict:
        # 空小节（如 "analysis:"）解析为 None
        section = self.config.get(name)
        return section if isinstance(section, dict) else {}

    def _enabled(self, name: str) -> bool:
        return bool(self._section("analysis").get(name, True))

    def run(self, input_path: Optional[str] = None,
            top_n: Optional[int] = None,
            halve_betweenness: Optional[bool] = None) -> MetricsReport:
        """
        主分析流程

        Args:
            input_path: 边文件路径，为 None 时使用配置中的 input.path
            top_n: 报告中显示的排名条数，为 None 时使用配置
            halve_betweenness: 介数中心性是否减半，为 None 时使用配置

        Returns:
            分析报告

        Raises:
            RuntimeError: 未指定边文件或文件读取失败时抛出异常
        """
        if input_path is None:
            input_path = self._section("input").get("path")
        if not input_path:
            raise RuntimeError("未指定边文件，请使用 --input 或在配置中设置 input.path")

        logger.info(f"开始加载边文件: {input_path}")
        edges = self.loader.load(input_path)
        graph = GraphStore.build(edges)

        return self.analyze(graph, top_n=top_n, halve_betweenness=halve_betweenness)

    def analyze(self, graph: GraphStore,
                top_n: Optional[int] = None,
                halve_betweenness: Optional[bool] = None) -> MetricsReport:
        """
        对已构建的图运行所有启用的分析器

        各分析器互不依赖，只读访问图。

        Args:
            graph: 图
            top_n: 报告排名条数
            halve_betweenness: 介数中心性是否减半

        Returns:
            分析报告
        """
        if top_n is None:
            top_n = int(self._section("report").get("top_n", 5))
        if halve_betweenness is None:
            halve_betweenness = bool(self._section("betweenness").get("halve", False))

        logger.info(f"图包含 {graph.node_count()} 个节点和 {graph.edge_count()} 条边")

        report = MetricsReport(
            node_count=graph.node_count(),
            edge_count=graph.edge_count(),
            degree_statistics=MetricCalculator.degree_statistics(graph),
            betweenness_halved=halve_betweenness,
            top_n=top_n
        )

        def ranked(ranking):
            return [RankedNode(i, graph.external_id(i), score) for i, score in ranking]

        # 1. 度分布
        if self._enabled("degree"):
            report.degree_distribution = TopologyAnalyzer.compute_degree_distribution(graph)
            logger.info(f"度分布计算完成，共 {len(report.degree_distribution)} 种度数")

        # 2. 接近中心性
        if self._enabled("closeness"):
            closeness = CentralityAnalyzer.compute_closeness(graph)
            report.closeness = ranked(closeness)
            logger.info("接近中心性计算完成")
            logger.debug(f"接近中心性汇总: {MetricCalculator.score_summary(closeness)}")

        # 3. 介数中心性
        if self._enabled("betweenness"):
            betweenness = CentralityAnalyzer.compute_betweenness(graph, halve=halve_betweenness)
            report.betweenness = ranked(betweenness)
            logger.info(f"介数中心性计算完成 (减半: {halve_betweenness})")
            logger.debug(f"介数中心性汇总: {MetricCalculator.score_summary(betweenness)}")

        # 4. 局部聚类系数
        if self._enabled("clustering"):
            report.clustering = TopologyAnalyzer.compute_local_clustering(graph)
            report.average_clustering = MetricCalculator.average_clustering(report.clustering)
            logger.info(f"局部聚类系数计算完成，平均值 {report.average_clustering:.4f}")

        # 5. 最大相对度节点
        if self._enabled("density") and graph.node_count() > 0:
            node = TopologyAnalyzer.find_max_relative_degree_node(graph)
            ratio = graph.degree(node) / graph.node_count()
            report.max_relative_degree_node = RankedNode(node, graph.external_id(node), ratio)
            logger.info(f"最大相对度节点: {node} (相对度 {ratio:.4f})")

        return report
