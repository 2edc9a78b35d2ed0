"""
Runtime configuration utilities.

Centralises the library's tunable options and exposes helpers to read
from environment variables or update settings at runtime.
"""
# 说明：运行时配置管理工具，集中管理库内可调选项，并支持环境变量覆写与运行期更新。
# 职责：
# - RuntimeConfig：封装日志等级、默认错误处理策略、用法文本缩进/列间距、敏感值掩码等配置项
# - load_from_env(...)：按统一前缀（如 ARGREG_）从环境变量加载并解析配置值
# - get_config()：获取全局 RuntimeConfig 单例，作为库级默认配置入口
# - configure(...)：通过关键字参数便捷更新全局配置并返回更新后的实例
# 约定：
# - 布尔类环境变量使用 {"1", "true", "yes"}（大小写不敏感）视为 True
# - USAGE_INDENT / COLUMN_GAP 环境变量会被解析为非负整数
# - 未知配置键在 update(...) 中会触发 AttributeError，避免静默吞错

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict

_ERROR_HANDLING_CHOICES = ("continue", "exit")


@dataclass
class RuntimeConfig:
    log_level: str = field(default_factory=lambda: os.environ.get("ARGREG_LOG_LEVEL", "INFO"))
    error_handling: str = "continue"
    usage_indent: int = 4
    column_gap: int = 4
    mask_sensitive_fields: bool = True
    extra: Dict[str, Any] = field(default_factory=dict)

    def update(self, **kwargs: Any) -> None:
        # 按关键字参数更新当前配置实例，未知字段名将显式报错
        for key, value in kwargs.items():
            if not hasattr(self, key):
                raise AttributeError(f"unknown config option '{key}'")
            if key == "error_handling" and value not in _ERROR_HANDLING_CHOICES:
                raise ValueError(f"error_handling must be one of {_ERROR_HANDLING_CHOICES}, got '{value}'")
            setattr(self, key, value)

    def load_from_env(self, prefix: str = "ARGREG_") -> None:
        # 从带有指定前缀的环境变量中加载配置，并进行类型转换后写回实例字段
        for key in ("LOG_LEVEL", "ERROR_HANDLING", "USAGE_INDENT", "COLUMN_GAP", "MASK_SENSITIVE_FIELDS"):
            env_key = f"{prefix}{key}"
            if env_key not in os.environ:
                continue    # 未设置对应环境变量时保持当前配置值不变
            raw = os.environ[env_key]
            value: Any = raw
            if key == "MASK_SENSITIVE_FIELDS":
                value = raw.lower() in {"1", "true", "yes"}   # 将布尔开关类字符串标准化为 True/False
            elif key in ("USAGE_INDENT", "COLUMN_GAP"):
                value = max(int(raw), 0)    # 宽度类配置使用非负整数
            elif key == "ERROR_HANDLING":
                value = raw.lower()
            self.update(**{key.lower(): value})


# 全局配置单例，用作库内默认的运行时配置
_GLOBAL_CONFIG = RuntimeConfig()


def get_config() -> RuntimeConfig:
    # 返回全局 RuntimeConfig 实例，供调用方读取或在本进程内共享配置
    return _GLOBAL_CONFIG


def configure(**kwargs: Any) -> RuntimeConfig:
    # 以关键字参数更新全局配置，并返回更新后的实例（便于链式调用或调试）
    _GLOBAL_CONFIG.update(**kwargs)
    return _GLOBAL_CONFIG
