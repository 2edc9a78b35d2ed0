"""
Option descriptor: flag names, default, description and the bound slot.
"""
# 说明：选项描述符数据结构，封装标志名、默认值、描述文本以及调用方持有的输出槽位引用。

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple

from .kind_registry import kind_of
from .kinds import OptionKind
from .variables import Var


@dataclass
class Opt:
    """
    Metadata for one registered option.

    - Configuration
      - var: Caller-owned output slot written during parsing.
      - default_value: Value seeded into ``var`` at registration.
      - description: Human readable help text.
      - shorthand_flag: Short flag name without the leading dash (may be empty).
      - longhand_flag: Long flag name without the leading dashes (may be empty).

    - Usage Notes
      - Pass to ArgSet.add_opt() instead of calling add_var() field by field.
    """

    var: Var
    default_value: Any = None
    description: str = ""
    shorthand_flag: str = ""
    longhand_flag: str = ""

    @property
    def kind(self) -> OptionKind:
        return kind_of(self.var)

    @property
    def flags(self) -> Tuple[str, ...]:
        return tuple(name for name in (self.shorthand_flag, self.longhand_flag) if name)

    @property
    def option_strings(self) -> Tuple[str, ...]:
        # 短标志使用单横线，长标志使用双横线
        strings = []
        if self.shorthand_flag:
            strings.append(f"-{self.shorthand_flag}")
        if self.longhand_flag:
            strings.append(f"--{self.longhand_flag}")
        return tuple(strings)

    @property
    def has_printable_default(self) -> bool:
        return self.default_value is not None and self.default_value != ""
