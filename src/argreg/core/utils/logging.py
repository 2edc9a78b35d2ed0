"""
Lightweight logging helpers that keep option values out of log output.
"""
# 说明：轻量级日志工具，提供对参数值友好的默认脱敏配置与统一的 logger 获取入口。
# 职责：
# - TokenMaskFilter：根据运行时配置对日志记录中的参数 token / 取值字段进行脱敏处理
# - configure_logging(...)：初始化 logging 基本配置并为根 logger 挂载掩码过滤器
# - get_logger(...)：按名称获取 logger，必要时自动完成日志系统初始化
# 约定：
# - 是否掩码由 RuntimeConfig.mask_sensitive_fields 控制（命令行参数可能携带密码等敏感值）
# - 日志级别优先级：显式参数 level > 环境变量 ARGREG_LOG_LEVEL > 运行时配置的 log_level

from __future__ import annotations

import logging
import os
from typing import Optional

from .config import get_config

_MASKED_ATTRS = ("tokens", "value")


class TokenMaskFilter(logging.Filter):
    """Filter that hides raw argument tokens and parsed values if configured."""
    # 日志掩码过滤器：在启用掩码配置时，对约定字段名（tokens / value）进行统一脱敏处理

    def filter(self, record: logging.LogRecord) -> bool:
        config = get_config()
        if not config.mask_sensitive_fields:
            return True
        # 对约定的敏感属性进行覆盖，保留字段结构但隐藏具体内容
        for attr in _MASKED_ATTRS:
            if hasattr(record, attr):
                setattr(record, attr, "***")
        return True


def configure_logging(level: Optional[str] = None) -> None:
    # 初始化根 logger：确定最终日志级别、设置格式，并挂载 TokenMaskFilter
    log_level = level or os.environ.get("ARGREG_LOG_LEVEL", get_config().log_level)
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(name)s %(asctime)s | %(message)s",
    )
    root = logging.getLogger()
    if not any(isinstance(f, TokenMaskFilter) for f in root.filters):
        root.addFilter(TokenMaskFilter())


def get_logger(name: str) -> logging.Logger:
    # 获取指定名称的 logger，若尚无 handler，则懒加载方式调用 configure_logging 进行初始化
    logger = logging.getLogger(name)
    if not logger.handlers:
        configure_logging()
    # 根 logger 上的过滤器不作用于子 logger 传播上来的记录，因此在具名 logger 上同样挂载
    if not any(isinstance(f, TokenMaskFilter) for f in logger.filters):
        logger.addFilter(TokenMaskFilter())
    return logger
