"""边文件加载器 - 从文本读取节点对"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

logger = logging.getLogger(__name__)

U32_MAX = 2 ** 32 - 1


class EdgeLoader:
    """边列表加载器

    每行两个以空白分隔的无符号 32 位整数，例如 "0 1" 或 "+0 1"。
    不能解析为恰好两个合法整数的行（含非 UTF-8 行）会被跳过。
    """

    def __init__(self):
        self.skipped_lines = 0

    @staticmethod
    def parse_line(line: str) -> Optional[Tuple[int, int]]:
        """
        解析单行

        Args:
            line: 文本行

        Returns:
            (u, v) 节点对；非法行返回 None
        """
        tokens = line.split()
        if len(tokens) != 2:
            return None

        pair = []
        for token in tokens:
            # 允许一个前导 "+"，排除 "-1"、"1.0" 等形式
            digits = token[1:] if token.startswith('+') else token
            if not (digits.isascii() and digits.isdigit()):
                return None
            value = int(digits)
            if value > U32_MAX:
                return None
            pair.append(value)
        return pair[0], pair[1]

    def parse_lines(self, lines: Iterable[Union[str, bytes]]) -> List[Tuple[int, int]]:
        """
        解析多行文本，每次调用重新计数 skipped_lines

        Args:
            lines: 文本行序列，bytes 行按 UTF-8 解码

        Returns:
            节点对列表 [(u, v), ...]
        """
        self.skipped_lines = 0
        edges = []
        for line_no, line in enumerate(lines, start=1):
            if isinstance(line, bytes):
                try:
                    line = line.decode('utf-8')
                except UnicodeDecodeError:
                    self.skipped_lines += 1
                    logger.debug(f"跳过第 {line_no} 行: 非 UTF-8 内容")
                    continue
            pair = self.parse_line(line)
            if pair is None:
                self.skipped_lines += 1
                logger.debug(f"跳过第 {line_no} 行: {line.rstrip()!r}")
                continue
            edges.append(pair)
        return edges

    def load(self, file_path: str) -> List[Tuple[int, int]]:
        """
        从文件加载边列表

        Args:
            file_path: 边文件路径

        Returns:
            节点对列表 [(u, v), ...]

        Raises:
            RuntimeError: 文件不存在或无法读取时抛出异常
        """
        path = Path(file_path)
        try:
            # 二进制读取，逐行解码，坏行只跳过该行
            with open(path, 'rb') as f:
                edges = self.parse_lines(f)
        except FileNotFoundError:
            raise RuntimeError(f"边文件不存在: {path}")
        except OSError as e:
            raise RuntimeError(f"读取边文件失败 ({path}): {e}")

        logger.info(f"从 {path} 读取 {len(edges)} 条边，跳过 {self.skipped_lines} 行")
        return edges
