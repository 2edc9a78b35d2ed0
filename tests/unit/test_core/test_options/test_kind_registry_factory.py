"""
Unit tests for the kind registry and var factory.
"""
# 说明：选项种类注册表与槽位工厂方法的单元测试。
# 覆盖：
# - 注册表中三种槽位的映射关系与快照
# - 字符串与枚举到 OptionKind 的归一化以及绑定变量的种类判定
# - 工厂按种类创建槽位并校验初始值

import pytest

from argreg.core.options import (
    VAR_REGISTRY,
    BoolVar,
    DefaultTypeMismatchError,
    IntVar,
    OptionKind,
    TextVar,
    UnsupportedTypeError,
    create_var,
    get_var_class,
    kind_of,
    normalize_kind,
    registered_kinds_snapshot,
)


def test_registry_contains_expected_kinds() -> None:
    assert VAR_REGISTRY[OptionKind.TEXT] is TextVar
    assert VAR_REGISTRY[OptionKind.BOOLEAN] is BoolVar
    assert VAR_REGISTRY[OptionKind.INTEGER] is IntVar
    assert registered_kinds_snapshot() == {
        "text": "TextVar",
        "boolean": "BoolVar",
        "integer": "IntVar",
    }


def test_normalize_kind_accepts_string_and_enum() -> None:
    assert normalize_kind("integer") is OptionKind.INTEGER
    assert normalize_kind(OptionKind.TEXT) is OptionKind.TEXT
    with pytest.raises(UnsupportedTypeError):
        normalize_kind("list")


def test_get_var_class_lookup() -> None:
    assert get_var_class("bool") is BoolVar


def test_kind_of_classifies_and_rejects() -> None:
    assert kind_of(TextVar()) is OptionKind.TEXT
    assert kind_of(IntVar()) is OptionKind.INTEGER
    with pytest.raises(UnsupportedTypeError):
        kind_of("plain string")
    with pytest.raises(UnsupportedTypeError):
        kind_of([1, 2])


def test_create_var_with_and_without_value() -> None:
    var = create_var("int")
    assert isinstance(var, IntVar) and var.value == 0
    assert create_var(OptionKind.TEXT, "hi").value == "hi"
    with pytest.raises(DefaultTypeMismatchError):
        create_var("boolean", "yes")
