"""junit-merge - Merge (合并)

核心组件：
- summary_diff: 汇总计数增量
- file_merger: 单文件合并
- tree_walker: 文件 / 目录遍历与路径映射
"""

from junit_merge.merge.file_merger import MergeStats, merge_file
from junit_merge.merge.summary_diff import SummaryDiff
from junit_merge.merge.tree_walker import (
    FilePair,
    WalkStats,
    iter_file_pairs,
    merge_path,
    merge_paths,
)

__all__ = [
    "MergeStats",
    "merge_file",
    "SummaryDiff",
    "FilePair",
    "WalkStats",
    "iter_file_pairs",
    "merge_path",
    "merge_paths",
]
