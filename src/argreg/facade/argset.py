"""
Option registry and parser facade.

Responsibilities
  - Hold the ordered list of registered option descriptors.
  - Validate each registration (slot kind, default type, flag names, uniqueness)
    before binding its flags to the engine.
  - Forward the stored tokens to the engine on parse().
  - Render aligned usage text through a configurable printer.

Usage Context
  - Create one ArgSet per command invocation, register options, parse once,
    and print usage on failure.

Limitations
  - Not safe for concurrent use; one instance belongs to one invocation.
  - Positional arguments and sub-commands are not supported.
"""
# 说明：选项注册表与解析门面，持有有序的选项描述符列表，并把 token 解析委托给 FlagEngine。
# 职责：
# - add_var / add_opt / add：校验槽位种类、默认值类型、标志名格式与唯一性，成功后才追加到注册表
# - parse：把构造时保存的 token 序列交给引擎解析，结果原地写入各槽位
# - format_usage / get_usage：按注册顺序生成对齐的用法文本，并通过 printer 输出
# - modify：在解析前追加配置修饰器，修饰器失败统一包装为 ModifierError
# 约定：
# - 校验先于追加：失败的注册不会占用注册表位置，也不会修改调用方的槽位
# - 同一描述符的短/长标志写入同一槽位，token 序列中后出现者生效
# - 每个 ArgSet 默认持有私有引擎，不依赖进程级全局状态

from __future__ import annotations

import sys
from typing import Any, List, Optional, Sequence, Tuple

from argreg.core.options.descriptor import Opt
from argreg.core.options.exceptions import (
    ArgRegError,
    DefaultTypeMismatchError,
    DuplicateFlagError,
    InvalidFlagError,
    ModifierError,
)
from argreg.core.options.kind_registry import kind_of
from argreg.core.options.kinds import OptionKind
from argreg.core.options.var_factory import create_var
from argreg.core.options.variables import Var
from argreg.core.utils.logging import get_logger
from argreg.core.utils.param_validation import ensure, ensure_flag_name, ensure_type

from .engine import FlagEngine
from .modifiers import Modifier, Printer
from .usage import render_usage

logger = get_logger(__name__)


def _stdout(text: str) -> None:
    sys.stdout.write(text)




class ArgSet:
    """
    Registry of options bound to caller-owned variables.

    - Configuration
      - arguments: Command-line tokens, usually ``sys.argv[1:]``.
      - modifiers: Optional ``with_*`` modifiers applied in order.

    - Behavior
      - add_var()/add_opt() validate and register an option.
      - parse() hands the tokens to the engine; errors follow its policy.
      - get_usage() writes the usage block through the printer.

    - Usage Notes
      - Call modify() before registering options when replacing the engine.
    """

    def __init__(self, arguments: Sequence[str], *modifiers: Modifier) -> None:
        ensure(
            not isinstance(arguments, (str, bytes)),
            "arguments must be a sequence of tokens, not a single string",
        )
        self._arguments: Tuple[str, ...] = tuple(str(token) for token in arguments)
        self._usage = ""
        self._examples = ""
        self._printer: Printer = _stdout
        self._engine = FlagEngine()
        self._engine.usage = self.get_usage
        self._opts: List[Opt] = []
        self.modify(*modifiers)

    @classmethod
    def from_argv(cls, *modifiers: Modifier) -> "ArgSet":
        """Build an ArgSet from the running process's arguments."""
        return cls(sys.argv[1:], *modifiers)

    # ------------------------------------------------------------------ config
    @property
    def arguments(self) -> Tuple[str, ...]:
        return self._arguments

    @property
    def engine(self) -> FlagEngine:
        return self._engine

    @property
    def opts(self) -> Tuple[Opt, ...]:
        return tuple(self._opts)

    @property
    def usage(self) -> str:
        return self._usage

    @property
    def examples(self) -> str:
        return self._examples

    @property
    def parsed(self) -> bool:
        return self._engine.parsed

    def modify(self, *modifiers: Modifier) -> "ArgSet":
        """Apply configuration modifiers; failures raise ModifierError."""
        for modifier in modifiers:
            try:
                modifier(self)
            except ModifierError:
                raise
            except (ArgRegError, ValueError, TypeError) as exc:
                raise ModifierError(str(exc)) from exc
        return self

    # ------------------------------------------------------------ registration
    def add_opt(self, opt: Opt) -> Var:
        """Register a prebuilt descriptor; same validation as add_var()."""
        ensure_type(opt, (Opt,), label="opt")
        return self.add_var(
            opt.var,
            opt.longhand_flag,
            opt.shorthand_flag,
            opt.default_value,
            opt.description,
        )

    def add_var(
        self,
        var: Var,
        longhand: str = "",
        shorthand: str = "",
        default_value: Any = None,
        description: str = "",
    ) -> Var:
        """
        Register ``var`` under the given flags and seed it with ``default_value``.

        Raises:
            UnsupportedTypeError: ``var`` is not a TextVar, BoolVar or IntVar.
            DefaultTypeMismatchError: ``default_value`` does not fit ``var``.
            InvalidFlagError: a flag name is malformed.
            DuplicateFlagError: a flag is already registered.
        """
        option_kind = kind_of(var)
        if not var.accepts(default_value):
            raise DefaultTypeMismatchError(default_value, option_kind.value)
        opt = Opt(
            var=var,
            default_value=default_value,
            description=str(description),
            shorthand_flag=ensure_flag_name(shorthand, label="shorthand flag", error=InvalidFlagError),
            longhand_flag=ensure_flag_name(longhand, label="longhand flag", error=InvalidFlagError),
        )
        self._check_unique(opt)

        self._engine.bind(opt.option_strings, var, opt.description)
        var.set(default_value)
        self._opts.append(opt)
        logger.debug(
            "registered %s option %s",
            option_kind.value,
            "/".join(opt.option_strings) or "<no flags>",
            extra={"value": default_value},
        )
        return var

    def add(
        self,
        kind: str | OptionKind,
        longhand: str = "",
        shorthand: str = "",
        default_value: Any = None,
        description: str = "",
    ) -> Var:
        """Create a fresh variable of ``kind``, register it and return it."""
        var = create_var(kind)
        if default_value is None:
            default_value = var.value
        return self.add_var(var, longhand, shorthand, default_value, description)

    def _check_unique(self, opt: Opt) -> None:
        # 标志名按去掉横线后的名称判重：-v 与 --v 视为同一个标志
        if opt.shorthand_flag and opt.shorthand_flag == opt.longhand_flag:
            raise DuplicateFlagError(opt.longhand_flag)
        claimed = {name for existing in self._opts for name in existing.flags}
        for name in opt.flags:
            if name in claimed or self._engine.is_bound(name):
                raise DuplicateFlagError(name)

    # ----------------------------------------------------------------- parsing
    def parse(self) -> None:
        """Parse the stored tokens into the registered variables."""
        self._engine.parse(self._arguments)

    # ------------------------------------------------------------------- usage
    def format_usage(self) -> str:
        """Return the usage block as a string."""
        return render_usage(self._opts, self._usage, self._examples)

    def get_usage(self) -> None:
        """Write the usage block through the configured printer."""
        self._printer(self.format_usage())

    def __repr__(self) -> str:
        flags = ", ".join("/".join(o.option_strings) for o in self._opts)
        return f"ArgSet(arguments={list(self._arguments)!r}, opts=[{flags}])"
