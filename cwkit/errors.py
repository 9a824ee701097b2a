"""Base exception type and assertion helpers."""

from __future__ import annotations

import inspect
import traceback


class CWidgetError(Exception):
    """Base class for errors raised by the toolkit.

    Subclasses describe themselves through :meth:`errmsg`; ``str()`` of an
    instance returns the same text.
    """

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self._message = message

    def errmsg(self) -> str:
        """Return a human-readable description of the error."""
        return self._message

    @property
    def backtrace(self) -> str:
        """The stack at the point where the error was raised, if any."""
        if self.__traceback__ is None:
            return ""
        return "".join(traceback.format_tb(self.__traceback__))

    def __str__(self) -> str:
        return self.errmsg()


class AssertionFailure(CWidgetError):
    """Raised when an internal invariant does not hold."""

    def __init__(self, file: str, line: int, func: str, exp: str, msg: str = "") -> None:
        self.file = file
        self.line = line
        self.func = func
        self.exp = exp
        self.msg = msg
        super().__init__(self.errmsg())

    def errmsg(self) -> str:
        if not self.msg:
            return f'{self.file}:{self.line}: {self.func}: Assertion "{self.exp}" failed.'
        return (
            f'{self.file}:{self.line}: {self.func}: {self.msg}: '
            f'Assertion "{self.exp}" failed.'
        )


def eassert(invariant: object, expression: str = "", msg: str = "") -> None:
    """Raise :class:`AssertionFailure` if *invariant* is false.

    The failure records the file, line and function of the caller.
    *expression* is the text of the checked condition and *msg* an
    optional extra explanation.
    """
    if invariant:
        return
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    try:
        if caller is None:
            file, line, func = "<unknown>", 0, "<unknown>"
        else:
            file = caller.f_code.co_filename
            line = caller.f_lineno
            func = caller.f_code.co_name
    finally:
        del frame, caller
    raise AssertionFailure(file, line, func, expression, msg)