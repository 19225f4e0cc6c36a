"""junit-merge - Tree Walker

source 是文件：与 target 一一对应。
source 是目录：遍历其中所有普通文件，用 target 根目录替换 source 根目录得到目标路径。
target 已存在则合并，不存在则复制（update_only 时忽略）。
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from junit_merge.errors import MergeError
from junit_merge.merge.file_merger import merge_file

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilePair:
    source: Path
    target: Path
    target_exists: bool


@dataclass
class WalkStats:
    merged: int = 0
    copied: int = 0
    ignored: int = 0
    replaced: int = 0
    appended: int = 0
    skipped: int = 0

    def add(self, other: "WalkStats") -> None:
        self.merged += other.merged
        self.copied += other.copied
        self.ignored += other.ignored
        self.replaced += other.replaced
        self.appended += other.appended
        self.skipped += other.skipped


def check_pair(source: Path, target: Path) -> None:
    """source / target 的类型必须一致（都是文件或都是目录）"""
    if source.is_dir() and not target.is_dir():
        raise MergeError(f"cannot merge directory {source} into file {target}")
    if not source.is_dir() and target.is_dir():
        raise MergeError(f"cannot merge file {source} into directory {target}")


def iter_file_pairs(source: Path | str, target: Path | str) -> Iterator[FilePair]:
    """按排序后的路径顺序产出 (source 文件, target 文件, target 是否存在)"""
    source = Path(source)
    target = Path(target)

    if not source.is_dir():
        yield FilePair(source, target, target.exists())
        return

    for source_file in sorted(source.rglob("*")):
        if not source_file.is_file():
            continue
        target_file = target / source_file.relative_to(source)
        yield FilePair(source_file, target_file, target_file.exists())


def merge_path(source: Path | str, target: Path | str, update_only: bool = False) -> WalkStats:
    source = Path(source)
    target = Path(target)
    check_pair(source, target)

    stats = WalkStats()
    for pair in iter_file_pairs(source, target):
        if pair.target_exists:
            result = merge_file(pair.source, pair.target, update_only=update_only)
            stats.merged += 1
            stats.replaced += result.replaced
            stats.appended += result.appended
            stats.skipped += result.skipped
        elif update_only:
            logger.debug(f"No target for {pair.source}, ignored (update only)")
            stats.ignored += 1
        else:
            logger.info(f"No target for {pair.source}, copying to {pair.target}")
            pair.target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(pair.source, pair.target)
            stats.copied += 1
    return stats


def merge_paths(sources: Iterable[Path | str], target: Path | str, update_only: bool = False) -> WalkStats:
    """按参数顺序依次合并，后面的 source 覆盖前面的同名 testcase"""
    sources = [Path(s) for s in sources]
    target = Path(target)

    # 先整体校验，避免合并到一半才发现类型不匹配
    for source in sources:
        check_pair(source, target)

    total = WalkStats()
    for source in sources:
        total.add(merge_path(source, target, update_only=update_only))
    return total
