"""主入口 - CLI 命令行接口"""

import sys
import json
import logging
import click

from graph_metrics.services.analyzer import GraphAnalysisService


# 配置日志
def setup_logging(level: str = "INFO"):
    """设置日志"""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="[%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )


def print_report(report):
    """以文本格式输出报告"""
    stats = report.degree_statistics

    print("\n" + "="*60)
    print(f"图包含 {report.node_count} 个节点和 {report.edge_count} 条边")
    print("="*60)
    if report.node_count:
        print(f"度数: 最小 {stats['min']:.0f}, 最大 {stats['max']:.0f}, "
              f"平均 {stats['mean']:.2f}, 标准差 {stats['std']:.2f}")

    if report.degree_distribution:
        print("\n度分布:")
        print("-"*60)
        for degree, count in sorted(report.degree_distribution.items()):
            print(f"  度数 {degree}: {count} 个节点")

    if report.closeness:
        print(f"\n接近中心性前 {report.top_n} 名:")
        print("-"*60)
        for rank, node in enumerate(report.closeness[:report.top_n], start=1):
            print(f"  第 {rank} 名: 节点 {node.index} (ID {node.external_id}) "
                  f"接近中心性 {node.score:.4f}")

    if report.betweenness:
        suffix = "（已减半）" if report.betweenness_halved else ""
        print(f"\n介数中心性前 {report.top_n} 名{suffix}:")
        print("-"*60)
        for rank, node in enumerate(report.betweenness[:report.top_n], start=1):
            print(f"  第 {rank} 名: 节点 {node.index} (ID {node.external_id}) "
                  f"介数中心性 {node.score:.4f}")

    if report.clustering:
        print(f"\n前 {report.top_n} 个节点的局部聚类系数:")
        print("-"*60)
        for index, coef in sorted(report.clustering.items())[:report.top_n]:
            print(f"  节点 {index}: {coef:.4f}")
        print(f"  平均聚类系数: {report.average_clustering:.4f}")

    if report.max_relative_degree_node is not None:
        node = report.max_relative_degree_node
        print("\n" + "="*60)
        print(f"最大相对度节点: 节点 {node.index} (ID {node.external_id}) "
              f"相对度 {node.score:.4f}")
    print("="*60 + "\n")


@click.command()
@click.option("--input", "-i", "input_path", help="边文件路径（每行两个节点 ID）")
@click.option("--config", "-c", help="配置文件路径（默认: conf/config.yaml）")
@click.option("--top", "-n", type=click.IntRange(min=0), help="排名显示条数（覆盖 report.top_n）")
@click.option("--halve-betweenness/--no-halve-betweenness", default=None,
              help="介数中心性是否除以 2（无向图约定，未指定时使用配置）")
@click.option("--verbose", "-v", is_flag=True, help="显示详细日志")
@click.option("--output", "-o", type=click.Choice(["text", "json"]), default="text", help="输出格式")
def main(input_path, config, top, halve_betweenness, verbose, output):
    """
    图结构指标分析工具

    读取无向图边文件，计算度分布、接近中心性、介数中心性、
    局部聚类系数以及最大相对度节点。
    """
    # 设置日志级别
    log_level = "DEBUG" if verbose else "INFO"
    setup_logging(log_level)

    logger = logging.getLogger(__name__)

    try:
        service = GraphAnalysisService(config_path=config)
        report = service.run(input_path, top_n=top, halve_betweenness=halve_betweenness)

        # 输出结果
        if output == "json":
            print(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
        else:
            print_report(report)

    except KeyboardInterrupt:
        logger.info("\n用户中断操作")
        sys.exit(130)
    except Exception as e:
        logger.error(f"分析过程中发生错误: {e}", exc_info=verbose)
        sys.exit(1)


if __name__ == "__main__":
    main()
