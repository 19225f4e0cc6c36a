"""junit-merge - Report Document

读取、修复、解析、序列化 JUnit XML 报告。

支持格式：
- 单 <testsuite> 格式
- 多 <testsuites> 包装格式
- 嵌套 <testsuite>（部分 runner 会按包/类分层）
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from lxml import etree


class NodeKind(str, Enum):
    """节点分类（按去掉命名空间后的精确标签名，而不是模糊匹配）"""
    SUITE = "suite"
    CONTAINER = "container"
    CASE = "case"
    OTHER = "other"


class Outcome(str, Enum):
    """testcase 结果"""
    PASSED = "passed"
    FAILURE = "failure"
    ERROR = "error"
    SKIPPED = "skipped"


_KINDS = {
    "testsuite": NodeKind.SUITE,
    "testsuites": NodeKind.CONTAINER,
    "testcase": NodeKind.CASE,
}

# 检查顺序即优先级：一个 testcase 最多计入一种结果
_MARKERS = (
    ("failure", Outcome.FAILURE),
    ("error", Outcome.ERROR),
    ("skipped", Outcome.SKIPPED),
)

SUMMARY_KINDS = frozenset({NodeKind.SUITE, NodeKind.CONTAINER})


def read_report_text(path: Path | str) -> str:
    """读取报告文本，非法字节替换为 U+FFFD（永远不会因解码失败）"""
    return Path(path).read_bytes().decode("utf-8-sig", errors="replace")


def is_blank(text: str) -> bool:
    return not text.strip()


def parse_report(text: str) -> etree._ElementTree:
    """解析报告文本

    文本已经解码过，声明里的 encoding 不再可信，统一按 UTF-8 重新编码后解析。
    格式错误时 XMLSyntaxError 直接抛给调用方。
    """
    parser = etree.XMLParser(encoding="utf-8", resolve_entities=False, huge_tree=True)
    root = etree.fromstring(text.encode("utf-8"), parser)  # nosec B320 - local report files
    return root.getroottree()


def serialize_report(tree: etree._ElementTree) -> bytes:
    return etree.tostring(tree, xml_declaration=True, encoding="UTF-8")


def local_name(element: etree._Element) -> str | None:
    """去掉命名空间后的标签名；注释 / 处理指令返回 None"""
    # 注释 / 处理指令的 tag 不是字符串
    if not isinstance(element.tag, str):
        return None
    return etree.QName(element).localname


def classify(element: etree._Element) -> NodeKind:
    return _KINDS.get(local_name(element), NodeKind.OTHER)


def outcome_of(testcase: etree._Element) -> Outcome:
    present = {local_name(child) for child in testcase}
    for tag, outcome in _MARKERS:
        if tag in present:
            return outcome
    return Outcome.PASSED


def identity_of(testcase: etree._Element) -> tuple[str, str]:
    """(classname, name)，缺失属性视为空字符串"""
    return testcase.get("classname", ""), testcase.get("name", "")


def summary_ancestors(element: etree._Element) -> list[etree._Element]:
    """由内向外的 testsuite / testsuites 祖先"""
    return [a for a in element.iterancestors() if classify(a) in SUMMARY_KINDS]


def enclosing_suite(element: etree._Element) -> etree._Element | None:
    for ancestor in element.iterancestors():
        if classify(ancestor) is NodeKind.SUITE:
            return ancestor
    return None


def iter_suites(tree: etree._ElementTree):
    """文档顺序遍历所有 testsuite（含根节点本身）"""
    for element in tree.getroot().iter():
        if classify(element) is NodeKind.SUITE:
            yield element


def iter_testcases(tree: etree._ElementTree) -> list[etree._Element]:
    """文档顺序的 testcase 列表（先物化，后续移动节点不影响遍历）"""
    return [element for element in tree.getroot().iter() if classify(element) is NodeKind.CASE]
