"""junit-merge - Summary Diff

单个 testcase 合并动作（替换 / 追加 / 移除）对汇总计数的净影响。
对每个祖先 testsuite / testsuites 应用同一个 diff，就能保持计数精确，
不需要重新扫描整个子树。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from lxml import etree

from junit_merge.report.document import Outcome, outcome_of

logger = logging.getLogger(__name__)

COUNTERS = ("tests", "failures", "errors", "skipped")

_OUTCOME_COUNTER = {
    Outcome.FAILURE: "failures",
    Outcome.ERROR: "errors",
    Outcome.SKIPPED: "skipped",
}


@dataclass
class SummaryDiff:
    """有符号的计数增量"""

    tests: int = 0
    failures: int = 0
    errors: int = 0
    skipped: int = 0

    @property
    def is_zero(self) -> bool:
        return not any(getattr(self, name) for name in COUNTERS)

    def add(self, testcase: etree._Element, sign: int) -> None:
        """计入（sign=+1）或扣除（sign=-1）一个 testcase"""
        self.tests += sign
        counter = _OUTCOME_COUNTER.get(outcome_of(testcase))
        if counter:
            setattr(self, counter, getattr(self, counter) + sign)

    def apply_to(self, suite: etree._Element) -> None:
        """把增量加到 suite 已有的计数属性上

        报告里没有的计数属性保持缺失，不凭空生成。
        """
        for name in COUNTERS:
            current = suite.get(name)
            if current is None:
                continue
            try:
                value = int(current)
            except ValueError:
                logger.warning(
                    f"Non-integer {name}={current!r} on <{suite.tag} name={suite.get('name')!r}>, left unchanged"
                )
                continue
            suite.set(name, str(value + getattr(self, name)))
