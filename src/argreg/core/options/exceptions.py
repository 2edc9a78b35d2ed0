"""
Error hierarchy for option registration and argument parsing.

Responsibilities
  - Define shared exception types for registration and parse failures.
  - Carry the offending values so callers can build their own messages.

Usage Context
  - Raised by option registration, the facade's modifiers and the flag engine.

Limitations
  - Exceptions only carry message text and optional context attributes.
"""
# 说明：选项注册与参数解析的异常体系，统一类型不支持、默认值类型不匹配、标志冲突与解析失败等错误。
# 职责：
# - ArgRegError：库内统一基类异常
# - RegistrationError 及其子类：注册阶段的校验失败（继承 ParamValidationError，兼容 ValueError 捕获）
# - ParseError 及其子类：解析阶段失败、帮助请求以及构造期修饰器失败

from __future__ import annotations

from typing import Any, Optional

from argreg.core.utils.param_validation import ParamValidationError


class ArgRegError(Exception):
    """
    Base error type for all argreg failures.

    - Behavior
      - Serves as the common ancestor for registration and parse errors.

    - Usage Notes
      - Catch to handle any argreg error without mixing with unrelated errors.
    """


class RegistrationError(ArgRegError, ParamValidationError):
    """Raised when an option cannot be registered."""


class UnsupportedTypeError(RegistrationError, TypeError):
    """
    Raised when the bound variable is not a text, boolean or integer slot.

    - Configuration
      - var: The rejected object.
    """

    def __init__(self, var: Any, message: Optional[str] = None) -> None:
        super().__init__(
            message or f"var must be a TextVar, BoolVar or IntVar, got {type(var).__name__}"
        )
        self.var = var


class DefaultTypeMismatchError(RegistrationError, TypeError):
    """
    Raised when the default value does not match the bound variable's kind.

    - Configuration
      - default: The offending default value.
      - expected: Name of the expected option kind.
    """

    def __init__(self, default: Any, expected: str) -> None:
        super().__init__(f"default value {default!r} does not match option kind '{expected}'")
        self.default = default
        self.expected = expected


class InvalidFlagError(RegistrationError):
    """Raised when a flag name is malformed (leading dash, '=' or whitespace)."""


class DuplicateFlagError(RegistrationError):
    """
    Raised when a flag name is already claimed by another option.

    - Configuration
      - flag: The conflicting option string, e.g. ``--verbose``.
    """

    def __init__(self, flag: str) -> None:
        super().__init__(f"flag '{flag}' is already registered")
        self.flag = flag


class ParseError(ArgRegError):
    """Raised when the argument tokens cannot be parsed."""


class HelpRequested(ParseError):
    """Raised when -h/--help is given and no option claims it."""

    def __init__(self, message: str = "help requested") -> None:
        super().__init__(message)


class ModifierError(ParseError):
    """Raised when a configuration modifier fails during construction or modify()."""
