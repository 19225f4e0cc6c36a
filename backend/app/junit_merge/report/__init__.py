"""junit-merge - Report (报告文档)

核心组件：
- document: 读取 / 修复 / 解析 / 序列化 JUnit XML，节点分类
- xpath: 任意属性值 -> XPath 字面量
"""

from junit_merge.report.document import (
    NodeKind,
    Outcome,
    classify,
    outcome_of,
    parse_report,
    read_report_text,
    serialize_report,
)
from junit_merge.report.xpath import match_testcase, xpath_literal

__all__ = [
    "NodeKind",
    "Outcome",
    "classify",
    "outcome_of",
    "parse_report",
    "read_report_text",
    "serialize_report",
    "match_testcase",
    "xpath_literal",
]
