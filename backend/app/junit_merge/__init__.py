"""junit-merge

把重跑得到的 JUnit XML 报告合并回基线报告，并保持汇总计数一致。
"""

__version__ = "0.3.0"
