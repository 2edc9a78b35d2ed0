"""
Flag engine: the token-parsing primitive the facade delegates to.

Responsibilities
  - Wrap ``argparse.ArgumentParser`` so every bound option writes straight
    into its caller-owned slot, in token order.
  - Recognise ``-name=value`` and ``-name value`` with one or two leading
    dashes for every bound name, matching names exactly;
    a bare boolean flag sets true without consuming the next token.
  - Apply the configured error-handling policy on failure.

Usage Context
  - Created implicitly by each ArgSet, or supplied through ``with_engine`` to
    pick a different error policy or output stream.

Limitations
  - Positional arguments are not accepted; a stray token is a parse error.
  - One engine serves one ArgSet; it holds no process-wide state.
"""
# 说明：标志解析引擎，基于 argparse 实现 token 解析，并将结果原地写入调用方持有的输出槽位。
# 职责：
# - ErrorHandling：统一表示“报告后继续（抛出 ParseError）”与“报告后退出进程”两种错误处理策略
# - FlagEngine.bind(...)：将一组选项字符串（-s / --long）绑定到同一个输出槽位
# - FlagEngine.parse(...)：按 token 顺序解析，后出现的标志覆盖先出现的标志
# - 解析前按裸标志名精确匹配并改写为 "<选项字符串>=<取值>"，避免 argparse 的短标志前缀匹配
# - 失败时先把错误信息写入 output，再调用 usage 钩子，最后按策略抛错或退出
# 约定：
# - 未注册的 -h / -help / --help 视为帮助请求：打印用法后抛出 HelpRequested（退出策略下退出码为 0）
# - 其余解析失败在退出策略下退出码为 2

from __future__ import annotations

import argparse
import enum
import sys
from typing import Any, Callable, Dict, List, NoReturn, Optional, Sequence, Set, Tuple

from argreg.core.options.exceptions import (
    DuplicateFlagError,
    HelpRequested,
    ParseError,
)
from argreg.core.options.variables import BoolVar, Var
from argreg.core.utils.config import get_config
from argreg.core.utils.logging import get_logger
from argreg.core.utils.param_validation import ParamValidationError

logger = get_logger(__name__)

Output = Callable[[str], Any]

_HELP_NAMES = frozenset({"h", "help"})


class ErrorHandling(enum.Enum):
    """What the engine does after reporting a parse failure."""

    CONTINUE_ON_ERROR = "continue"
    EXIT_ON_ERROR = "exit"

    @classmethod
    def from_str(cls, name: str) -> "ErrorHandling":
        try:
            return cls(str(name).strip().lower())
        except ValueError as exc:
            raise ParamValidationError(f"unknown error handling policy '{name}'") from exc


def _stderr(text: str) -> None:
    # 调用时再解析 sys.stderr，便于测试替换输出流
    sys.stderr.write(text)


class _EngineParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing and exiting."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise ParseError(message)


class _SlotAction(argparse.Action):
    """Action writing the converted value into a bound slot."""

    def __init__(self, option_strings: Sequence[str], dest: str, var: Var, **kwargs: Any) -> None:
        self.var = var
        super().__init__(option_strings, dest, **kwargs)

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: Optional[str] = None,
    ) -> None:
        self.var.set(values)


def _converter(var: Var) -> Callable[[str], Any]:
    # 将槽位的 ValueError 转换为 argparse 可识别的 ArgumentTypeError，保留原始错误信息
    def convert(token: str) -> Any:
        try:
            return var.convert(token)
        except ValueError as exc:
            raise argparse.ArgumentTypeError(str(exc)) from exc

    convert.__name__ = var.kind.value
    return convert


class FlagEngine:
    """
    Token parser with a configurable error-handling policy.

    - Configuration
      - name: Program name used in messages.
      - error_handling: ErrorHandling member or its string value; defaults to
        the runtime config's ``error_handling``.
      - output: Sink for error messages; defaults to stderr.

    - Behavior
      - usage: Optional zero-argument hook called after an error is reported.
      - parsed: True once parse() has completed successfully.
    """

    def __init__(
        self,
        name: str = "",
        error_handling: ErrorHandling | str | None = None,
        *,
        output: Optional[Output] = None,
    ) -> None:
        if error_handling is None:
            error_handling = get_config().error_handling
        if not isinstance(error_handling, ErrorHandling):
            error_handling = ErrorHandling.from_str(error_handling)
        self.name = name
        self.error_handling = error_handling
        self.output: Output = output or _stderr
        self.usage: Optional[Callable[[], Any]] = None
        self._parser = _EngineParser(
            prog=name or "argreg",
            add_help=False,
            allow_abbrev=False,
        )
        self._option_strings: Set[str] = set()
        # 裸标志名 -> (绑定时使用的选项字符串, 槽位)
        self._names: Dict[str, Tuple[str, Var]] = {}
        self._bound = 0
        self._parsed = False

    @property
    def option_strings(self) -> Tuple[str, ...]:
        return tuple(sorted(self._option_strings))

    @property
    def parsed(self) -> bool:
        return self._parsed

    def is_bound(self, option_string: str) -> bool:
        # -name 与 --name 指向同一个标志
        return option_string.lstrip("-") in self._names

    def bind(self, option_strings: Sequence[str], var: Var, description: str = "") -> None:
        """Route every option string in ``option_strings`` into ``var``."""
        if not option_strings:
            return
        for option_string in option_strings:
            if self.is_bound(option_string):
                raise DuplicateFlagError(option_string)
        kwargs: dict[str, Any] = {
            "action": _SlotAction,
            "var": var,
            "dest": f"_slot_{self._bound}",
            "default": argparse.SUPPRESS,
            "type": _converter(var),
            "help": description.replace("%", "%%"),
        }
        if isinstance(var, BoolVar):
            # 布尔标志单独出现即为 True，也接受 -s=false 形式的显式取值
            kwargs.update(nargs="?", const=True)
        try:
            self._parser.add_argument(*option_strings, **kwargs)
        except argparse.ArgumentError as exc:
            raise DuplicateFlagError(", ".join(option_strings)) from exc
        self._option_strings.update(option_strings)
        for option_string in option_strings:
            self._names[option_string.lstrip("-")] = (option_string, var)
        self._bound += 1
        logger.debug("bound %s to %s", "/".join(option_strings), var.kind.value)

    def parse(self, tokens: Sequence[str]) -> None:
        """Parse ``tokens`` and write matches into their bound slots."""
        tokens = list(tokens)
        self._parsed = False
        try:
            self._parser.parse_args(self._canonicalize(tokens))
        except ParseError as exc:
            self._fail(exc, tokens)
        self._parsed = True
        logger.debug("parsed %d tokens", len(tokens), extra={"tokens": tokens})

    def _canonicalize(self, tokens: List[str]) -> List[str]:
        """
        Rewrite flag tokens into exact ``<option string>=<value>`` form.

        Each flag name is matched exactly against the bound names with one or
        two leading dashes, so argparse never resolves a token by prefix.
        Non-boolean flags without ``=`` take the next token as their value,
        even when it starts with '-'. Any token after ``--``, and any token that
        is not a flag, is rejected as an unrecognized argument.
        """
        result: List[str] = []
        index = 0
        while index < len(tokens):
            token = tokens[index]
            if token == "--":
                index += 1
            if token == "--" or len(token) < 2 or not token.startswith("-"):
                if index < len(tokens):
                    raise ParseError(f"unrecognized arguments: {' '.join(tokens[index:])}")
                break
            index += 1
            name = token[2:] if token.startswith("--") else token[1:]
            if not name or name[0] in "-=":
                raise ParseError(f"bad flag syntax: {token}")
            name, sep, value = name.partition("=")
            if name not in self._names:
                if name in _HELP_NAMES:
                    raise HelpRequested()
                raise ParseError(f"flag provided but not defined: -{name}")
            option_string, var = self._names[name]
            if not sep:
                if isinstance(var, BoolVar):
                    value = "true"
                elif index < len(tokens):
                    value = tokens[index]
                    index += 1
                else:
                    raise ParseError(f"flag needs an argument: -{name}")
            result.append(f"{option_string}={value}")
        return result

    def _fail(self, error: ParseError, tokens: List[str]) -> NoReturn:
        if not isinstance(error, HelpRequested):
            self.output(f"{error}\n")
            logger.debug("argument parsing failed: %s", error, extra={"tokens": tokens})
        if self.usage is not None:
            self.usage()
        if self.error_handling is ErrorHandling.EXIT_ON_ERROR:
            raise SystemExit(0 if isinstance(error, HelpRequested) else 2)
        raise error
