"""
Typed output slots that options write into during parsing.

Responsibilities
  - Provide one mutable cell class per option kind (text, boolean, integer).
  - Check whether a default value fits the slot.
  - Convert a raw command-line token into the slot's value type.

Usage Context
  - Callers own the slot and read ``.value`` after parsing.
  - The flag engine writes into the slot in token order.

Limitations
  - Only the three kinds in OptionKind are representable.
"""
# 说明：选项解析结果的输出槽位（调用方持有，解析时原地写入），每种选项种类对应一个强类型槽位类。
# 职责：
# - Var：输出槽位基类，声明 kind / python_type 并提供默认值校验与 token 转换接口
# - TextVar / BoolVar / IntVar：分别实现文本、布尔、整数三种槽位的校验与转换规则
# 约定：
# - 布尔值接受 1/t/T/TRUE/true/True 与 0/f/F/FALSE/false/False
# - 整数按前缀自动识别进制（0x / 0o / 0b），允许下划线分隔
# - bool 是 int 的子类，但 IntVar 不接受 bool 作为默认值

from __future__ import annotations

from typing import Any, ClassVar, Generic, TypeVar

from .kinds import OptionKind

T = TypeVar("T")

_TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


class Var(Generic[T]):
    """
    Mutable cell bound to a registered option.

    - Configuration
      - value: Current value; replaced by the default at registration and by
        parsed tokens during parsing.

    - Behavior
      - accepts(default) tells whether a default matches the slot's kind.
      - convert(token) turns a command-line token into a value or raises ValueError.
    """

    kind: ClassVar[OptionKind]
    python_type: ClassVar[type]

    __slots__ = ("value",)

    def __init__(self, value: T) -> None:
        self.value = value

    def accepts(self, default: Any) -> bool:
        return isinstance(default, self.python_type)

    def convert(self, token: str) -> T:
        raise NotImplementedError

    def set(self, value: T) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


class TextVar(Var[str]):
    """Text slot; any token is accepted verbatim."""

    kind = OptionKind.TEXT
    python_type = str
    __slots__ = ()

    def __init__(self, value: str = "") -> None:
        super().__init__(value)

    def convert(self, token: str) -> str:
        return token


class BoolVar(Var[bool]):
    """Boolean slot; a bare flag means true."""

    kind = OptionKind.BOOLEAN
    python_type = bool
    __slots__ = ()

    def __init__(self, value: bool = False) -> None:
        super().__init__(value)

    def convert(self, token: str) -> bool:
        if token in _TRUE_LITERALS:
            return True
        if token in _FALSE_LITERALS:
            return False
        raise ValueError(f"invalid boolean value {token!r}")


class IntVar(Var[int]):
    """Integer slot; base prefixes 0x/0o/0b are honoured."""

    kind = OptionKind.INTEGER
    python_type = int
    __slots__ = ()

    def __init__(self, value: int = 0) -> None:
        super().__init__(value)

    def accepts(self, default: Any) -> bool:
        return isinstance(default, int) and not isinstance(default, bool)

    def convert(self, token: str) -> int:
        try:
            return int(token.strip(), 0)
        except ValueError:
            raise ValueError(f"invalid integer value {token!r}") from None
