"""junit-merge - 错误类型

core 层只抛出这些异常（以及 lxml 的 XMLSyntaxError），
由 CLI 统一转换为退出码和单行错误信息。
"""

from __future__ import annotations

from pathlib import Path


class MergeError(Exception):
    """合并过程中的致命错误"""


class UsageError(MergeError):
    """命令行参数错误"""


class MissingPathError(MergeError):
    """命名的源/目标路径不存在"""

    def __init__(self, paths: list[Path]):
        self.paths = paths
        super().__init__(f"no such file: {', '.join(str(p) for p in paths)}")
