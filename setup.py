from setuptools import setup, find_packages

setup(
    name="graph_metrics",
    version="1.0.0",
    description="无向图结构指标分析：度分布、接近中心性、介数中心性、局部聚类系数",
    author="Your Name",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy>=1.21.0",
        "networkx>=2.6.0",
        "click>=8.0.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "graph_metrics=graph_metrics.main:main",
        ],
    },
    python_requires=">=3.7",
)
