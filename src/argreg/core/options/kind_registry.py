"""
Light-weight registry mapping OptionKind to concrete output-slot classes.

Responsibilities
  - Provide a single source of truth for kind lookups.
  - Expose helpers to normalise identifiers and classify bound variables.

Usage Context
  - Use when resolving a kind identifier or a caller's variable to its slot class.
  - Intended to back the var factory and registration validation.

Limitations
  - Only includes kinds registered in VAR_REGISTRY.
"""
# 说明：维护 OptionKind 与输出槽位类映射关系的轻量级注册表模块。
# 职责：
# - 作为选项种类查找与槽位创建的单一事实来源
# - 提供种类标识符的归一化，并对不受支持的绑定变量给出明确错误
# - 暴露注册表快照查询供文档或工具使用

from __future__ import annotations

from typing import Any, Dict, Type

from .exceptions import UnsupportedTypeError
from .kinds import OptionKind
from .variables import BoolVar, IntVar, TextVar, Var

# 集中维护 OptionKind 到具体槽位类的映射表
VAR_REGISTRY: Dict[OptionKind, Type[Var]] = {
    OptionKind.TEXT: TextVar,
    OptionKind.BOOLEAN: BoolVar,
    OptionKind.INTEGER: IntVar,
}


def normalize_kind(kind: str | OptionKind) -> OptionKind:
    """Coerce string or enum to OptionKind, raising on unknown identifiers."""
    if isinstance(kind, OptionKind):
        return kind
    return OptionKind.from_str(str(kind))


def get_var_class(kind: str | OptionKind) -> Type[Var]:
    """Return the slot class registered for the kind identifier."""
    option_kind = normalize_kind(kind)
    if option_kind not in VAR_REGISTRY:
        raise UnsupportedTypeError(kind, f"option kind '{option_kind.value}' not registered")
    return VAR_REGISTRY[option_kind]


def kind_of(var: Any) -> OptionKind:
    # 根据绑定变量的实际类型判定其选项种类，仅接受注册表中声明的槽位类
    """Return the kind of a bound variable or raise UnsupportedTypeError."""
    for option_kind, cls in VAR_REGISTRY.items():
        if isinstance(var, cls):
            return option_kind
    raise UnsupportedTypeError(var)


def registered_kinds_snapshot() -> Dict[str, str]:
    """Snapshot of registered kinds for tooling or docs."""
    return {kind.value: cls.__name__ for kind, cls in VAR_REGISTRY.items()}
