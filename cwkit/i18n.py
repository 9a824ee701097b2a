"""Message translation helpers."""

from __future__ import annotations

import gettext

DOMAIN = "libcwidget3"


def translate(text: str) -> str:
    """Translate *text* using the toolkit's message catalogue."""
    return gettext.dgettext(DOMAIN, text)


def strip_context(text: str) -> str:
    """Translate *text* and drop everything up to the first ``|``.

    Translations that hold no ``|`` are returned unchanged.
    """
    translation = translate(text)
    _, sep, rest = translation.partition("|")
    return rest if sep else translation


_ = translate