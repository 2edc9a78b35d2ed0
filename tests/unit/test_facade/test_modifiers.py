"""
Unit tests for ArgSet configuration modifiers.
"""
# 说明：with_usage / with_examples / with_engine / with_printer 以及 ArgSet.modify 的单元测试。
# 覆盖：
# - 修饰器在构造时与构造后（modify）均可生效
# - 修饰器入参类型校验与 ModifierError 的包装行为
# - 注册选项后替换引擎被拒绝

import pytest

from argreg.core.options import ModifierError, ParseError, TextVar
from argreg.core.utils import ParamValidationError
from argreg.facade import (
    ArgSet,
    ErrorHandling,
    FlagEngine,
    with_engine,
    with_examples,
    with_printer,
    with_usage,
)


def test_modifiers_at_construction(printer) -> None:
    engine = FlagEngine(error_handling="exit")
    argset = ArgSet(["-x"], with_usage("head"), with_examples("tail"), with_printer(printer), with_engine(engine))
    assert argset.usage == "head"
    assert argset.examples == "tail"
    assert argset.engine is engine
    assert engine.error_handling is ErrorHandling.EXIT_ON_ERROR
    # 引擎的 usage 钩子指向 ArgSet.get_usage
    engine.usage()
    assert printer.text == "head\ntail\n"


def test_modify_after_construction() -> None:
    argset = ArgSet([])
    assert argset.modify(with_usage("later")) is argset
    assert argset.usage == "later"


def test_modifier_arguments_are_validated() -> None:
    with pytest.raises(ParamValidationError):
        with_usage(123)  # type: ignore[arg-type]
    with pytest.raises(ParamValidationError):
        with_engine(object())  # type: ignore[arg-type]
    with pytest.raises(ParamValidationError):
        with_printer("stdout")  # type: ignore[arg-type]


def test_failing_modifier_raises_modifier_error() -> None:
    def broken(argset):
        raise ValueError("boom")

    with pytest.raises(ModifierError, match="boom") as info:
        ArgSet([], broken)
    assert isinstance(info.value, ParseError)
    assert isinstance(info.value.__cause__, ValueError)


def test_engine_cannot_be_replaced_after_registration() -> None:
    argset = ArgSet([])
    argset.add_var(TextVar(), "name", "n", "", "Name")
    with pytest.raises(ModifierError):
        argset.modify(with_engine(FlagEngine()))
    # 重新应用当前引擎是允许的
    argset.modify(with_engine(argset.engine))


def test_each_argset_owns_its_engine() -> None:
    first, second = ArgSet([]), ArgSet([])
    assert first.engine is not second.engine
    first.add_var(TextVar(), "name", "n", "", "Name")
    second.add_var(TextVar(), "name", "n", "", "Name")


def test_arguments_must_be_a_sequence() -> None:
    with pytest.raises(ParamValidationError):
        ArgSet("-a=x")  # type: ignore[arg-type]
    assert ArgSet(("-a",)).arguments == ("-a",)


def test_from_argv(monkeypatch) -> None:
    monkeypatch.setattr("sys.argv", ["prog", "--name=argv"])
    argset = ArgSet.from_argv()
    name = argset.add_var(TextVar(), "name", "", "", "Name")
    argset.parse()
    assert name.value == "argv"
