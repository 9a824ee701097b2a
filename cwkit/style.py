"""Display styles: colour and attribute changes, and a named registry."""

from __future__ import annotations

import copy
from typing import Dict


class Style:
    """A change to apply to the colours and attributes of displayed text.

    A style may set the foreground colour, the background colour, and set,
    clear or flip attribute bits.  Anything it leaves unspecified is taken
    from the context the text is drawn in.  Styles compose with ``+``,
    which is not commutative: the right-hand style is applied on top of
    the left.
    """

    def __init__(self) -> None:
        # A negative foreground means "no change"; a background of -2 means
        # "no change" and -1 means the terminal's default colour.
        self._fg = -1
        self._bg = -2
        self._set_attrs = 0
        self._clear_attrs = 0
        self._flip_attrs = 0

    def set_fg(self, fg: int) -> None:
        """Set the foreground colour; a negative value changes nothing."""
        if fg >= 0:
            self._fg = fg

    def set_bg(self, bg: int) -> None:
        """Set the background colour; a value below -1 changes nothing."""
        if bg >= -1:
            self._bg = bg

    def attrs_on(self, attrs: int) -> None:
        """Set the given attribute bits."""
        self._set_attrs |= attrs
        self._clear_attrs &= ~attrs
        self._flip_attrs &= ~attrs

    def attrs_off(self, attrs: int) -> None:
        """Clear the given attribute bits."""
        self._clear_attrs |= attrs
        self._set_attrs &= ~attrs
        self._flip_attrs &= ~attrs

    def attrs_flip(self, attrs: int) -> None:
        """Flip the given attribute bits."""
        self._flip_attrs ^= attrs

    def apply_style(self, other: "Style") -> None:
        """Update this style by applying the settings of *other*."""
        self.set_fg(other._fg)
        self.set_bg(other._bg)
        self.attrs_on(other._set_attrs)
        self.attrs_off(other._clear_attrs)
        self.attrs_flip(other._flip_attrs)

    def __add__(self, other: "Style") -> "Style":
        if not isinstance(other, Style):
            return NotImplemented
        result = copy.copy(self)
        result.apply_style(other)
        return result

    def __iadd__(self, other: "Style") -> "Style":
        if not isinstance(other, Style):
            return NotImplemented
        self.apply_style(other)
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Style):
            return NotImplemented
        return (
            self._fg == other._fg
            and self._bg == other._bg
            and self._set_attrs == other._set_attrs
            and self._clear_attrs == other._clear_attrs
            and self._flip_attrs == other._flip_attrs
        )

    __hash__ = None  # type: ignore[assignment]

    @property
    def fg(self) -> int:
        """The foreground colour, or 0 if the style leaves it unset."""
        return max(self._fg, 0)

    @property
    def bg(self) -> int:
        """The background colour, or 0 if the style leaves it unset or default."""
        return max(self._bg, 0)

    def __repr__(self) -> str:
        return (
            f"Style(fg={self._fg}, bg={self._bg}, set={self._set_attrs:#x}, "
            f"clear={self._clear_attrs:#x}, flip={self._flip_attrs:#x})"
        )


def style_fg(fg: int) -> Style:
    """Return a style that only sets the foreground colour."""
    result = Style()
    result.set_fg(fg)
    return result


def style_bg(bg: int) -> Style:
    """Return a style that only sets the background colour."""
    result = Style()
    result.set_bg(bg)
    return result


def style_attrs_on(attrs: int) -> Style:
    """Return a style that only sets the given attributes."""
    result = Style()
    result.attrs_on(attrs)
    return result


def style_attrs_off(attrs: int) -> Style:
    """Return a style that only clears the given attributes."""
    result = Style()
    result.attrs_off(attrs)
    return result


def style_attrs_flip(attrs: int) -> Style:
    """Return a style that only flips the given attributes."""
    result = Style()
    result.attrs_flip(attrs)
    return result


_styles: Dict[str, Style] = {}


def get_style(name: str) -> Style:
    """Return a copy of the registered style *name*, or an empty style."""
    found = _styles.get(name)
    if found is None:
        return Style()
    return copy.copy(found)


def set_style(name: str, style: Style) -> None:
    """Register *style* under *name*, replacing any earlier one."""
    _styles[name] = copy.copy(style)