from __future__ import annotations

import logging
from pathlib import Path
from typing import List, NoReturn, Optional

import click
import typer
from lxml import etree
from rich.console import Console
from rich.markup import escape
from typer.core import TyperCommand

from junit_merge.core.config import get_settings
from junit_merge.errors import MergeError, MissingPathError, UsageError
from junit_merge.logging_config import setup_logging
from junit_merge.merge.tree_walker import WalkStats, merge_paths

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, help="Merge JUnit XML reports into a target report tree.")

USAGE = "USAGE: junit-merge [--update-only] SOURCE... TARGET"

console = Console(soft_wrap=True, highlight=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False)


# ============================================================
# 小工具：输出
# ============================================================
def _warn(msg: str) -> None:
    err_console.print(f"[yellow][JM][WARN][/yellow] {escape(msg)}")


def _fail(msg: str, code: int = 1) -> NoReturn:
    """
    统一失败出口：
    - stderr 打印单行错误
    - 抛出 typer.Exit(code)
    """
    err_console.print(f"[red][JM][FAIL][/red] {escape(msg)}")
    raise typer.Exit(code)


def run(paths: list[Path], update_only: bool = False) -> WalkStats | None:
    """执行一次合并：最后一个路径是 TARGET，前面都是 SOURCE

    Returns:
        WalkStats；没有 SOURCE 时返回 None

    Raises:
        UsageError: 没有任何路径
        MissingPathError: 任一路径不存在（此时不会改动任何文件）
    """
    if not paths:
        raise UsageError(USAGE)

    *sources, target = paths

    missing = [p for p in paths if not p.exists()]
    if missing:
        raise MissingPathError(missing)

    if not sources:
        _warn(f"no source given, nothing merged into {target}")
        return None

    return merge_paths(sources, target, update_only=update_only)


class MergeCommand(TyperCommand):
    """参数解析错误也走 _fail()：单行信息，退出码 1"""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            _fail(f"{e.format_message()}; {USAGE}")


@app.command(cls=MergeCommand)
def main(
    paths: Optional[List[Path]] = typer.Argument(
        None, metavar="SOURCE... TARGET", help="Source reports (files or directories) followed by the target"
    ),
    update_only: Optional[bool] = typer.Option(
        None,
        "--update-only/--no-update-only",
        help="Only update test cases already in the target, never add new ones (default from JUNIT_MERGE_UPDATE_ONLY)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print merge totals"),
):
    """
    把 SOURCE 报告按顺序合并进 TARGET：
    - 同 (classname, name) 的 testcase 以 SOURCE 为准
    - TARGET 中没有的 testcase 追加（--update-only 时跳过）
    - testsuite 上的 tests/failures/errors/skipped 计数随之更新
    """
    settings = get_settings()
    setup_logging(settings)
    if update_only is None:
        update_only = settings.UPDATE_ONLY

    try:
        stats = run(list(paths or []), update_only=update_only)
    except MergeError as e:
        logger.debug("Merge failed", exc_info=True)
        _fail(str(e))
    except etree.XMLSyntaxError as e:
        _fail(f"malformed XML: {e}")

    if verbose and stats is not None:
        console.print(
            f"[green][JM][OK][/green] files merged={stats.merged} copied={stats.copied} ignored={stats.ignored}; "
            f"testcases replaced={stats.replaced} appended={stats.appended} skipped={stats.skipped}"
        )


if __name__ == "__main__":
    app()
