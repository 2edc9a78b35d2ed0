"""
Configuration modifiers applied to an ArgSet at construction or via modify().
"""
# 说明：ArgSet 的配置修饰器，可在构造时传入，也可在解析前通过 ArgSet.modify(...) 追加。
# 职责：
# - with_usage / with_examples：设置用法文本的头部与尾部示例
# - with_engine：替换解析引擎（自带错误处理策略），并把引擎的 usage 钩子指向 ArgSet.get_usage
# - with_printer：替换用法文本的输出函数，便于测试捕获
# 约定：
# - 修饰器的入参在创建时即校验，类型错误抛出 ParamValidationError
# - 已注册选项后再替换引擎会抛出 ModifierError（已绑定的选项无法迁移到新引擎）

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from argreg.core.options.exceptions import ModifierError
from argreg.core.utils.param_validation import ensure, ensure_type, validate_arguments

from .engine import FlagEngine

if TYPE_CHECKING:
    from .argset import ArgSet

Modifier = Callable[["ArgSet"], None]
Printer = Callable[[str], Any]


def _text(label: str) -> Callable[[Any], str]:
    def validator(value: Any) -> str:
        ensure_type(value, (str,), label=label)
        return value

    return validator


def _engine(value: Any) -> FlagEngine:
    ensure_type(value, (FlagEngine,), label="engine")
    return value


def _printer(value: Any) -> Printer:
    ensure(callable(value), "printer must be callable")
    return value


@validate_arguments({"usage": _text("usage")})
def with_usage(usage: str) -> Modifier:
    """Set the header text printed above the options."""

    def apply(argset: "ArgSet") -> None:
        argset._usage = usage

    return apply


@validate_arguments({"examples": _text("examples")})
def with_examples(examples: str) -> Modifier:
    """Set the examples text printed below the options."""

    def apply(argset: "ArgSet") -> None:
        argset._examples = examples

    return apply


@validate_arguments({"engine": _engine})
def with_engine(engine: FlagEngine) -> Modifier:
    """
    Use ``engine`` instead of the ArgSet's private one.

    Mainly useful to pick another error-handling policy or error output.
    The engine's usage hook is pointed at the ArgSet's usage renderer.
    """

    def apply(argset: "ArgSet") -> None:
        if argset.opts and engine is not argset.engine:
            raise ModifierError("cannot replace the engine after options were registered")
        argset._engine = engine
        engine.usage = argset.get_usage

    return apply


@validate_arguments({"printer": _printer})
def with_printer(printer: Printer) -> Modifier:
    """Send usage text to ``printer`` instead of stdout."""

    def apply(argset: "ArgSet") -> None:
        argset._printer = printer

    return apply
