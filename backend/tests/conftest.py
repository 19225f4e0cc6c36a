"""
junit-merge 测试配置

提供构造 / 读取 JUnit 报告的 fixture，并在每个用例后复位日志与配置缓存。
"""
import logging
from pathlib import Path

import pytest
from lxml import etree

from junit_merge.core.config import get_settings
from junit_merge.report.document import outcome_of

COUNTERS = ("tests", "failures", "errors", "skipped")


def render_report(tests: dict[str, str], suite_name: str = "a", counters=COUNTERS) -> bytes:
    """tests: {"classname.name": "passed" | "failure" | "error" | "skipped"}"""
    outcomes = list(tests.values())
    counts = {
        "tests": len(outcomes),
        "failures": outcomes.count("failure"),
        "errors": outcomes.count("error"),
        "skipped": outcomes.count("skipped"),
    }
    suite = etree.Element("testsuite", name=suite_name)
    for counter in counters:
        suite.set(counter, str(counts[counter]))
    for ident, outcome in tests.items():
        classname, _, name = ident.rpartition(".")
        case = etree.SubElement(suite, "testcase", classname=classname, name=name)
        if outcome != "passed":
            etree.SubElement(case, outcome, message=f"{ident} {outcome}")
    return etree.tostring(suite, pretty_print=True, xml_declaration=True, encoding="UTF-8")


@pytest.fixture
def write_report():
    def _write(path: Path, tests: dict[str, str], **kwargs) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(render_report(tests, **kwargs))
        return path

    return _write


@pytest.fixture
def read_results():
    """[(classname.name, outcome)]，文档顺序"""

    def _read(path: Path) -> list[tuple[str, str]]:
        root = etree.fromstring(path.read_bytes())
        return [
            (f"{case.get('classname')}.{case.get('name')}", outcome_of(case).value)
            for case in root.iter("testcase")
        ]

    return _read


@pytest.fixture
def read_counters():
    """第一个匹配元素上的计数属性（缺失的不出现在结果里）"""

    def _read(path: Path, xpath: str = "/*") -> dict[str, int]:
        element = etree.fromstring(path.read_bytes()).getroottree().xpath(xpath)[0]
        return {name: int(element.get(name)) for name in COUNTERS if element.get(name) is not None}

    return _read


@pytest.fixture(autouse=True)
def _reset_logging_and_settings():
    get_settings.cache_clear()
    yield
    logger = logging.getLogger("junit_merge")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    get_settings.cache_clear()
