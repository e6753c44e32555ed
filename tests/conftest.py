# topmark:header:start
#
#   project      : glstri
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the glstri test suite.

Notes:
    Tests respect the immutable/mutable configuration split: build a draft with
    `MutableConfig` (or `make_config`), then `freeze()` it into a `Config`.
"""

from __future__ import annotations

from collections.abc import Callable
from io import BytesIO
from typing import TYPE_CHECKING, Any, TypeVar, Unpack, cast

import pytest

from glstri.config import Config, MutableConfig, logging
from glstri.diagnostics import Diagnostics

if TYPE_CHECKING:
    from glstri.console_api import StyleKwargs

F = TypeVar("F", bound=Callable[..., object])

# A decorator that takes a callable (F) and returns the same callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_core: DecoratorType[Any] = as_typed_mark(pytest.mark.core)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_glstri_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure glstri's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to clear ``GLSTRI_LOG_LEVEL``.
    """
    monkeypatch.delenv("GLSTRI_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the log level to TRACE for the whole test session."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and overrides.

    Args:
        **overrides (Any): Field overrides applied to the mutable draft.

    Returns:
        Config: An immutable configuration snapshot.
    """
    m: MutableConfig = MutableConfig.from_defaults()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m.freeze()


class RecordingConsole:
    """`ConsoleLike` that records output instead of printing it."""

    def __init__(self) -> None:
        self.lines: list[str] = []
        self.warnings: list[str] = []
        self.errors: list[str] = []

    def print(self, text: str = "", *, nl: bool = True) -> None:
        self.lines.append(text)

    def warn(self, text: str, *, nl: bool = True) -> None:
        self.warnings.append(text)

    def error(self, text: str, *, nl: bool = True) -> None:
        self.errors.append(text)

    def styled(self, text: str, **style_kwargs: Unpack[StyleKwargs]) -> str:
        return text


def make_diagnostics(config: Config) -> tuple[Diagnostics, RecordingConsole]:
    """Return a `Diagnostics` wired to a fresh `RecordingConsole`."""
    console = RecordingConsole()
    return Diagnostics(console, config), console


def stream(data: bytes | str) -> BytesIO:
    """Return a binary stream over ``data`` (str is encoded as latin-1)."""
    return BytesIO(data.encode("latin-1") if isinstance(data, str) else data)
