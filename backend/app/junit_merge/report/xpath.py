"""XPath 字面量转义

XPath 1.0 的字符串字面量没有转义语法：'...' 里不能出现 '，"..." 里不能出现 "。
两种引号都出现时只能拆段后用 concat() 拼接。
"""

from __future__ import annotations

APOS = "'"
QUOT = '"'


def xpath_literal(value: str) -> str:
    """把任意字符串转成与其严格相等的 XPath 表达式

    - 不含单引号：'value'
    - 含单引号但不含双引号："value"
    - 两种都含：按单引号拆段，每段用单引号包裹，段之间插入 "'"，整体套 concat()
    """
    if APOS not in value:
        return f"{APOS}{value}{APOS}"
    if QUOT not in value:
        return f"{QUOT}{value}{QUOT}"

    parts: list[str] = []
    for i, segment in enumerate(value.split(APOS)):
        if i:
            parts.append(f"{QUOT}{APOS}{QUOT}")
        if segment:
            parts.append(f"{APOS}{segment}{APOS}")

    # 同时含两种引号时至少有两段，concat() 的参数个数总是 >= 2
    return f"concat({', '.join(parts)})"


def match_testcase(classname: str, name: str) -> str:
    """按 (classname, name) 定位 testcase 的查询

    string(@attr) 让缺失属性与空字符串等价；local-name() 兼容带默认 xmlns 的报告。
    """
    return (
        "//*[local-name()='testcase'"
        " and "
        f"string(@classname)={xpath_literal(classname)}"
        f" and string(@name)={xpath_literal(name)}"
        "]"
    )
