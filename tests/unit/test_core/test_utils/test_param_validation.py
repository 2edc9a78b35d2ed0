"""
Unit tests for validation helpers and decorators.
"""
# 说明：参数与状态验证工具（ensure / ensure_type / validate_arguments）的单元测试。
# 覆盖：
# - ensure：在条件为真时静默通过，条件为假时抛出指定异常
# - ensure_type：检查值是否属于给定类型集合，否则抛出带 label 的错误
# - ensure_flag_name：标志名不得带前导 "-"，不得包含 "=" 或空白字符；空名视为未设置
# - validate_arguments：按 schema 自动验证函数参数的装饰器行为（成功路径与错误路径）

import pytest

from argreg.core.utils import (
    ParamValidationError,
    ensure,
    ensure_flag_name,
    ensure_type,
    validate_arguments,
)


def test_ensure_passes_and_fails() -> None:
    ensure(True, "should not raise")
    with pytest.raises(ParamValidationError):
        ensure(False, "error")
    with pytest.raises(KeyError):
        ensure(False, "custom", error=KeyError)


def test_ensure_type_checks() -> None:
    ensure_type(5, (int,), label="value")
    with pytest.raises(ParamValidationError, match="value must be instance of int"):
        ensure_type("text", (int,), label="value")


def test_validate_arguments_decorator() -> None:
    def validator(value):
        ensure_type(value, (int,), label="x")
        return value

    @validate_arguments({"x": validator})
    def add_one(x: int) -> int:
        return x + 1

    assert add_one(4) == 5
    assert add_one(x=1) == 2
    with pytest.raises(ParamValidationError):
        add_one("bad")  # type: ignore[arg-type]


@pytest.mark.parametrize("name", ["", "v", "dry-run", "max_depth"])
def test_ensure_flag_name_accepts(name) -> None:
    assert ensure_flag_name(name) == name


@pytest.mark.parametrize("name", ["-v", "--verbose", "a=b", "a b", "tab\there", 3])
def test_ensure_flag_name_rejects(name) -> None:
    with pytest.raises(ParamValidationError):
        ensure_flag_name(name, label="longhand flag")
    with pytest.raises(KeyError):
        ensure_flag_name(name, error=KeyError)
