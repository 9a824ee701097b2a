"""Conversion between encoded byte strings and text.

Invalid input is not fatal: every byte (or character) that cannot be
converted is replaced by ``?`` and conversion carries on.  The strict
functions :func:`decode` and :func:`encode` report such damage by raising
:class:`TranscodeError`, which carries the best-effort result.
:func:`transcode` hands that result to an error handler instead.
"""

from __future__ import annotations

import codecs
import locale
from typing import Callable, Optional, Union

from .errors import CWidgetError

_REPLACE_HANDLER = "cwkit.question-mark"

BytesLike = Union[bytes, bytearray, memoryview]


class TranscodeError(CWidgetError):
    """Raised when a string could not be converted in full.

    ``partial`` holds the converted result, with ``?`` in place of every
    piece of input that could not be converted.
    """

    def __init__(self, partial: Union[str, bytes], reason: str) -> None:
        super().__init__(reason)
        self.partial = partial
        self.reason = reason


def _replace_with_question_mark(exc: UnicodeError) -> tuple[str, int]:
    """Substitute ``?`` for one unit of bad input and skip past it."""
    if isinstance(exc, (UnicodeDecodeError, UnicodeEncodeError, UnicodeTranslateError)):
        return "?", exc.start + 1
    raise exc


codecs.register_error(_REPLACE_HANDLER, _replace_with_question_mark)


def _resolve_encoding(encoding: Optional[str]) -> str:
    if encoding is None:
        return locale.getpreferredencoding(False)
    return encoding


def decode(data: BytesLike, encoding: Optional[str] = None) -> str:
    """Decode *data* from *encoding* (the locale's encoding by default).

    Raises :class:`TranscodeError` if any byte could not be decoded; its
    ``partial`` is the text with ``?`` for each bad byte.
    """
    raw = bytes(data)
    codec = _resolve_encoding(encoding)
    try:
        return raw.decode(codec)
    except LookupError as exc:
        raise TranscodeError("", f"unknown encoding: {codec}") from exc
    except UnicodeDecodeError as exc:
        partial = raw.decode(codec, _REPLACE_HANDLER)
        raise TranscodeError(partial, str(exc)) from exc


def encode(text: str, encoding: Optional[str] = None) -> bytes:
    """Encode *text* into *encoding* (the locale's encoding by default).

    Raises :class:`TranscodeError` if any character could not be encoded;
    its ``partial`` is the encoded bytes with ``?`` for each such character.
    """
    codec = _resolve_encoding(encoding)
    try:
        return text.encode(codec)
    except LookupError as exc:
        raise TranscodeError(b"", f"unknown encoding: {codec}") from exc
    except UnicodeEncodeError as exc:
        try:
            partial = text.encode(codec, _REPLACE_HANDLER)
        except UnicodeEncodeError:
            partial = b""
        raise TranscodeError(partial, str(exc)) from exc


DecodeErrorHandler = Callable[[TranscodeError, str, bytes], str]
EncodeErrorHandler = Callable[[TranscodeError, bytes, str], bytes]


def _default_decode_error(error: TranscodeError, partial: str, data: bytes) -> str:
    return partial


def _default_encode_error(error: TranscodeError, partial: bytes, text: str) -> bytes:
    return partial


decode_error_handler: DecodeErrorHandler = _default_decode_error
"""Handler used by :func:`transcode` for failed decodes when none is given."""

encode_error_handler: EncodeErrorHandler = _default_encode_error
"""Handler used by :func:`transcode` for failed encodes when none is given."""


def transcode(
    s: Union[str, BytesLike],
    encoding: Optional[str] = None,
    errf: Optional[Callable] = None,
):
    """Convert *s* without raising on bad input.

    Bytes are decoded to text and text is encoded to bytes.  When the
    conversion is incomplete, ``errf(error, partial, s)`` is called and its
    result returned; without *errf* the module's default handler is used,
    which returns ``partial``.
    """
    if isinstance(s, str):
        try:
            return encode(s, encoding)
        except TranscodeError as error:
            handler = errf if errf is not None else encode_error_handler
            return handler(error, error.partial, s)
    if isinstance(s, (bytes, bytearray, memoryview)):
        data = bytes(s)
        try:
            return decode(data, encoding)
        except TranscodeError as error:
            handler = errf if errf is not None else decode_error_handler
            return handler(error, error.partial, data)
    raise TypeError(f"expected str or bytes, not {type(s).__name__}")