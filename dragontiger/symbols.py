"""Interned strings used for identifiers and literals."""

from __future__ import annotations

from typing import ClassVar


class Symbol:
    """An interned string.

    Equal texts always produce the very same ``Symbol`` object, so
    comparison is an identity check. ``Symbol()`` is the null symbol,
    which stands for the absence of a name. Copying a symbol yields the
    same interned object.
    """

    __slots__ = ("_text", "__weakref__")

    _table: ClassVar[dict[str | None, Symbol]] = {}

    def __new__(cls, text: str | Symbol | None = None) -> Symbol:
        if isinstance(text, Symbol):
            return text
        if text is not None and not isinstance(text, str):
            raise TypeError(f"Symbol text must be a str, not {type(text).__name__}")
        existing = cls._table.get(text)
        if existing is not None:
            return existing
        symbol = super().__new__(cls)
        symbol._text = text
        cls._table[text] = symbol
        return symbol

    @property
    def text(self) -> str | None:
        """The interned string, or ``None`` for the null symbol."""
        return self._text

    @property
    def is_null(self) -> bool:
        return self._text is None

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Symbol):
            return self is other
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        if isinstance(other, Symbol):
            return self is not other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._text)

    def __bool__(self) -> bool:
        return self._text is not None

    def __str__(self) -> str:
        return "<null>" if self._text is None else self._text

    def __repr__(self) -> str:
        if self._text is None:
            return "Symbol()"
        return f"Symbol({self._text!r})"

    def __reduce__(self):
        # Rebuilding through the constructor returns the interned instance,
        # which also makes copy.copy and copy.deepcopy yield this object.
        return (Symbol, (self._text,))