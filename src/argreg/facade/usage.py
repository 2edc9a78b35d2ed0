"""
Aligned usage text for a list of option descriptors.
"""
# 说明：根据选项描述符列表生成对齐的用法/帮助文本。
# 约定：
# - 短标志列宽 = 最长短标志名 + 1（前导 "-"），长标志列宽 = 最长长标志名 + 2（前导 "--"）
# - 缺失的短/长标志以等宽空白占位，保持列对齐
# - 默认值非 None 且非空字符串时在描述后追加 " (default: <value>)"，布尔值渲染为 true/false
# - 缩进与列间距默认取自 RuntimeConfig（均为 4 个空格）

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from argreg.core.options.descriptor import Opt
from argreg.core.utils.config import get_config


def format_default(value: Any) -> str:
    # 布尔默认值按命令行书写习惯渲染为小写
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def render_option_lines(
    opts: Sequence[Opt],
    *,
    indent: Optional[int] = None,
    gap: Optional[int] = None,
) -> List[str]:
    """Return one aligned line per descriptor, without trailing newlines."""
    config = get_config()
    indent = config.usage_indent if indent is None else indent
    gap = config.column_gap if gap is None else gap

    max_short = max((len(o.shorthand_flag) for o in opts), default=0)
    max_long = max((len(o.longhand_flag) for o in opts), default=0)

    lead = " " * indent
    sep = " " * gap
    lines = []
    for o in opts:
        if o.shorthand_flag:
            short = "-" + o.shorthand_flag.ljust(max_short)
        else:
            short = " " * (max_short + 1)
        if o.longhand_flag:
            long = "--" + o.longhand_flag.ljust(max_long)
        else:
            long = " " * (max_long + 2)
        desc = o.description
        if o.has_printable_default:
            desc += f" (default: {format_default(o.default_value)})"
        lines.append(f"{lead}{short}{sep}{long}{sep}{desc}")
    return lines


def render_usage(
    opts: Sequence[Opt],
    usage: str = "",
    examples: str = "",
    *,
    indent: Optional[int] = None,
    gap: Optional[int] = None,
) -> str:
    """
    Render the full usage block.

    The header line is always emitted (possibly empty), followed by an
    ``Options:`` marker and one line per descriptor when any are registered,
    and finally the examples text when it is non-empty.
    """
    parts = [f"{usage}\n"]
    if opts:
        parts.append("Options:\n")
        parts.extend(f"{line}\n" for line in render_option_lines(opts, indent=indent, gap=gap))
    if examples:
        parts.append(f"{examples}\n")
    return "".join(parts)
