"""
Integration tests for a complete command invocation.
"""
# 说明：一次完整命令调用流程的集成测试：构造 → 注册 → 解析 → 失败时打印用法并返回非零状态。
# 覆盖：
# - 调用方负责在解析失败时打印用法并以非零状态退出
# - 帮助请求、非法取值与正常路径三种结果
# - 多个 ArgSet 并存时互不影响

from __future__ import annotations

from typing import List

from argreg.core.options import BoolVar, HelpRequested, IntVar, Opt, ParseError, TextVar
from argreg.facade import ArgSet, FlagEngine, with_engine, with_examples, with_printer, with_usage


def run_greet(argv: List[str], out: List[str]) -> int:
    # 模拟一个使用 argreg 的命令入口，返回进程退出码
    engine = FlagEngine("greet", error_handling="continue", output=out.append)
    argset = ArgSet(
        argv,
        with_usage("Usage: greet [options]"),
        with_examples("Examples:\n    greet --name=ada -n 2"),
        with_engine(engine),
        with_printer(out.append),
    )
    name = argset.add_var(TextVar(), "name", "", "world", "Who to greet")
    times = argset.add_opt(Opt(var=IntVar(), default_value=1, description="Repeat count", shorthand_flag="n", longhand_flag="times"))
    shout = argset.add_var(BoolVar(), "shout", "s", False, "Upper-case the greeting")
    try:
        argset.parse()
    except HelpRequested:
        return 0
    except ParseError:
        return 2
    greeting = f"hello {name.value}"
    if shout.value:
        greeting = greeting.upper()
    out.extend(f"{greeting}\n" for _ in range(times.value))
    return 0


def test_successful_invocation() -> None:
    out: List[str] = []
    assert run_greet(["--name=ada", "-n", "2", "-s"], out) == 0
    assert out == ["HELLO ADA\n", "HELLO ADA\n"]


def test_defaults_apply_without_tokens() -> None:
    out: List[str] = []
    assert run_greet([], out) == 0
    assert out == ["hello world\n"]


def test_bad_value_prints_error_then_usage() -> None:
    out: List[str] = []
    assert run_greet(["--times=lots"], out) == 2
    assert "invalid integer value 'lots'" in out[0]
    usage = "".join(out[1:])
    assert usage.startswith("Usage: greet [options]\nOptions:\n")
    assert "--times    Repeat count (default: 1)" in usage
    assert usage.endswith("greet --name=ada -n 2\n")


def test_help_prints_usage_only() -> None:
    out: List[str] = []
    assert run_greet(["--help"], out) == 0
    assert "".join(out).startswith("Usage: greet [options]\n")


def test_independent_argsets_do_not_share_state() -> None:
    left, right = ArgSet(["--mode=a"]), ArgSet(["--mode=b"])
    mode_left = left.add_var(TextVar(), "mode", "m", "", "Mode")
    mode_right = right.add_var(TextVar(), "mode", "m", "", "Mode")
    left.parse()
    right.parse()
    assert (mode_left.value, mode_right.value) == ("a", "b")
