"""junit-merge - File Merger (单文件合并)

把 source 报告里的每个 testcase 合并进 target 报告：
- (classname, name) 相同：用 source 节点替换 target 节点
- target 中没有：追加到 target 的 testsuite（update_only 时跳过）
- 每次替换 / 追加后，把计数增量应用到节点所有 testsuite / testsuites 祖先

短路规则：
- target 为空（或仅空白）：什么都不做
- source 为空（或仅空白）：原样复制 source 覆盖 target
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path

from lxml import etree

from junit_merge.errors import MergeError
from junit_merge.merge.summary_diff import SummaryDiff
from junit_merge.report.document import (
    enclosing_suite,
    identity_of,
    is_blank,
    iter_suites,
    iter_testcases,
    parse_report,
    read_report_text,
    serialize_report,
    summary_ancestors,
)
from junit_merge.report.xpath import match_testcase

logger = logging.getLogger(__name__)


@dataclass
class MergeStats:
    """单个文件的合并结果"""

    replaced: int = 0
    appended: int = 0
    skipped: int = 0
    copied: bool = False  # source 为空，直接复制
    untouched: bool = False  # target 为空，未做任何事


def merge_file(source_path: Path | str, target_path: Path | str, update_only: bool = False) -> MergeStats:
    """把 source_path 合并进 target_path（原地覆盖 target）

    Args:
        source_path: 新结果（如重跑报告），不会被修改
        target_path: 基线报告，合并后整体重写
        update_only: True 时只更新已存在的 testcase，不追加新的

    Returns:
        MergeStats: 替换 / 追加 / 跳过的 testcase 数

    Raises:
        lxml.etree.XMLSyntaxError: 非空但无法解析的报告
        MergeError: 需要追加但 target 中没有任何 testsuite
    """
    source_path = Path(source_path)
    target_path = Path(target_path)
    stats = MergeStats()

    target_text = read_report_text(target_path)
    if is_blank(target_text):
        logger.info(f"Target {target_path} is empty, nothing to merge into")
        stats.untouched = True
        return stats

    source_text = read_report_text(source_path)
    if is_blank(source_text):
        logger.info(f"Source {source_path} is empty, copying over {target_path}")
        shutil.copyfile(source_path, target_path)
        stats.copied = True
        return stats

    source = parse_report(source_text)
    target = parse_report(target_text)

    for node in iter_testcases(source):
        _merge_testcase(node, target, update_only, stats, target_path)

    target_path.write_bytes(serialize_report(target))
    logger.info(
        f"Merged {source_path} -> {target_path}: "
        f"replaced={stats.replaced} appended={stats.appended} skipped={stats.skipped}"
    )
    return stats


def _merge_testcase(
    node: etree._Element,
    target: etree._ElementTree,
    update_only: bool,
    stats: MergeStats,
    target_path: Path,
) -> None:
    classname, name = identity_of(node)
    matches = target.xpath(match_testcase(classname, name))

    diff = SummaryDiff()
    if matches:
        original = matches[0]
        diff.add(node, +1)
        diff.add(original, -1)
        _replace(original, node)
        stats.replaced += 1
        logger.debug(f"Replaced {classname}.{name}")
    elif not update_only:
        # 追加位置依赖 node 在 source 中的父 suite，必须在移动前确定
        suite = _append_target(node, target, target_path)
        diff.add(node, +1)
        _append(suite, node)
        stats.appended += 1
        logger.debug(f"Appended {classname}.{name} to suite {suite.get('name')!r}")
    else:
        stats.skipped += 1
        logger.debug(f"Skipped {classname}.{name} (update only)")
        return

    if diff.is_zero:
        return
    for ancestor in summary_ancestors(node):
        diff.apply_to(ancestor)


def _replace(original: etree._Element, node: etree._Element) -> None:
    parent = original.getparent()
    # lxml 移动节点时 tail 跟着走，保留原位置的缩进
    node.tail = original.tail
    parent.replace(original, node)


def _append(suite: etree._Element, node: etree._Element) -> None:
    if len(suite):
        last = suite[-1]
        node.tail = last.tail
        last.tail = suite.text
    suite.append(node)


def _append_target(node: etree._Element, target: etree._ElementTree, target_path: Path) -> etree._Element:
    """选择追加位置

    优先与 node 在 source 中所属 testsuite 同名的 target testsuite，
    没有同名的就用 target 中第一个 testsuite。
    """
    suites = list(iter_suites(target))
    if not suites:
        classname, name = identity_of(node)
        raise MergeError(f"no <testsuite> in {target_path} to append {classname}.{name} to")

    source_suite = enclosing_suite(node)
    suite_name = source_suite.get("name") if source_suite is not None else None
    if suite_name is not None:
        for suite in suites:
            if suite.get("name") == suite_name:
                return suite
    return suites[0]
