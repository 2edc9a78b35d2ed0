"""
Option kinds understood by the registry.

The set is closed: every option is text, boolean or integer, and each kind
maps to exactly one bound-variable class (see ``kind_registry``).
"""
# 说明：选项种类枚举，统一内部表示与字符串 value，并支持从常见别名构造。

from __future__ import annotations

import enum

from .exceptions import UnsupportedTypeError

_ALIASES = {
    "str": "text",
    "string": "text",
    "bool": "boolean",
    "int": "integer",
}


class OptionKind(enum.Enum):
    """Supported option kinds."""

    TEXT = "text"
    BOOLEAN = "boolean"
    INTEGER = "integer"

    @classmethod
    def from_str(cls, name: str) -> "OptionKind":
        # 从字符串（大小写不敏感）构造选项种类，支持 str/bool/int 等别名
        normalized = str(name).strip().lower()
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls(normalized)
        except ValueError as exc:
            raise UnsupportedTypeError(name, f"unknown option kind '{name}'") from exc
