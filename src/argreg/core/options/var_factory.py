"""
Factory helper to instantiate output slots from registry identifiers.
"""
# 说明：根据选项种类标识符创建输出槽位实例的工厂辅助函数。
# 职责：
# - 规范化字符串或枚举形式的种类标识符并解析为具体槽位类
# - 可选地以初始值构造槽位，并校验初始值与种类匹配

from __future__ import annotations

from typing import Any, Optional

from .exceptions import DefaultTypeMismatchError
from .kind_registry import get_var_class, normalize_kind
from .kinds import OptionKind
from .variables import Var


def create_var(kind: str | OptionKind, value: Optional[Any] = None) -> Var:
    """
    Create a bound variable by kind identifier.

    Args:
        kind: OptionKind or string identifier ("text", "bool", "int", ...).
        value: Optional initial value; must match the kind when given.
    """
    option_kind = normalize_kind(kind)
    var_cls = get_var_class(option_kind)
    var = var_cls()
    if value is not None:
        if not var.accepts(value):
            raise DefaultTypeMismatchError(value, option_kind.value)
        var.set(value)
    return var
