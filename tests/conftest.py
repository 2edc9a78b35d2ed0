"""Shared pytest configuration and path setup for test modules."""

import sys
from pathlib import Path

import pytest

# Ensure repo root and src/ are on sys.path for all tests
_ROOT = Path(__file__).resolve().parents[1]
_SRC = _ROOT / "src"
for p in (str(_ROOT), str(_SRC)):
    if p not in sys.path:
        sys.path.insert(0, p)

from argreg.core.utils.config import get_config  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_runtime_config():
    # 每个用例结束后恢复全局配置，避免 configure(...) 的修改在用例之间泄漏
    config = get_config()
    snapshot = dict(vars(config))
    snapshot["extra"] = dict(config.extra)
    yield
    for key, value in snapshot.items():
        setattr(config, key, value)


class PrinterStorage:
    """Collects everything written through an ArgSet printer."""

    def __init__(self) -> None:
        self.chunks = []

    def __call__(self, text: str) -> None:
        self.chunks.append(text)

    @property
    def text(self) -> str:
        return "".join(self.chunks)


@pytest.fixture
def printer() -> PrinterStorage:
    return PrinterStorage()
