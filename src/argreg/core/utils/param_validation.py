"""
Reusable validation helpers and decorators.

Responsibilities
  - Lightweight assertions raising a configurable error type.
  - Flag-name checks shared by option registration.
  - A decorator applying per-argument validators before a call.
"""
# 说明：参数验证相关的辅助函数与装饰器，用于在库内部统一进行轻量级参数检查与转换。
# 职责：
# - ParamValidationError：专门用于参数校验失败的异常类型
# - ensure / ensure_type：条件断言与类型检查，失败时抛出可指定类型的错误
# - ensure_flag_name：检查标志名不带前导 '-'，且不含 '=' 与空白字符
# - validate_arguments：根据 schema 为函数参数应用验证/转换逻辑的装饰器（修饰器工厂使用）

from __future__ import annotations

import functools
from typing import Any, Callable, Dict, Mapping, Tuple, Type


class ParamValidationError(ValueError):
    """Raised when parameter validation fails."""


def ensure(condition: bool, message: str, *, error: Type[Exception] = ParamValidationError) -> None:
    # 条件不满足时抛出指定的异常类型（默认使用 ParamValidationError）
    if not condition:
        raise error(message)


def ensure_type(
    value: Any,
    expected: Tuple[type, ...],
    *,
    label: str = "value",
    error: Type[Exception] = ParamValidationError,
) -> None:
    # 检查 value 是否为 expected 集合中的任意类型，否则抛出带字段标签的校验错误
    if not isinstance(value, expected):
        names = ", ".join(t.__name__ for t in expected)
        raise error(f"{label} must be instance of {names}, got {type(value).__name__}")


def ensure_flag_name(
    name: Any,
    *,
    label: str = "flag",
    error: Type[Exception] = ParamValidationError,
) -> str:
    """
    Check a bare flag name and return it unchanged.

    An empty name means "no flag" and passes. Otherwise the name must not start
    with '-', and must not contain '=' or whitespace, since the parser would
    split or misread such tokens.
    """
    ensure_type(name, (str,), label=label, error=error)
    if not name:
        return name
    ensure(not name.startswith("-"), f"{label} '{name}' must not start with '-'", error=error)
    ensure("=" not in name, f"{label} '{name}' must not contain '='", error=error)
    ensure(not any(ch.isspace() for ch in name), f"{label} '{name}' must not contain whitespace", error=error)
    return name


def validate_arguments(schema: Mapping[str, Callable[[Any], Any]]) -> Callable:
    """
    Decorator validating arguments according to callables.

    Each validator receives the argument and should return the (possibly
    transformed) value or raise ParamValidationError.
    """
    # schema：以参数名为键、验证/转换函数为值的映射，用于在调用前统一处理入参

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            mutable = list(args)
            kw: Dict[str, Any] = dict(kwargs)
            for name, validator in schema.items():
                # 以关键字形式传入的参数直接校验
                if name in kw:
                    kw[name] = validator(kw[name])
                    continue
                # schema 中多余的条目忽略
                if name not in func.__code__.co_varnames:
                    continue
                index = func.__code__.co_varnames.index(name)
                # 未显式提供的位置参数（使用默认值）不强制验证
                if index >= len(mutable):
                    continue
                mutable[index] = validator(mutable[index])
            return func(*tuple(mutable), **kw)

        return wrapper

    return decorator
