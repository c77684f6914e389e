"""Access to the symbols of a word during descent."""

from __future__ import annotations


class SymbolCursor:
    """Forward cursor over the characters of a word.

    The cursor is advanced in place, so walking down the tree never builds
    copies of the remaining suffix.
    """

    __slots__ = ("_word", "_pos")

    def __init__(self, word: str) -> None:
        self._word = word
        self._pos = 0

    def __repr__(self):
        return f"SymbolCursor(word={self._word!r}, pos={self._pos})"

    def has_more(self) -> bool:
        return self._pos < len(self._word)

    def current(self) -> str:
        """Return the symbol under the cursor.

        Raises
        ------
            IndexError: If the cursor is past the last symbol.
        """
        if self._pos >= len(self._word):
            msg = "cursor is exhausted"
            raise IndexError(msg)
        return self._word[self._pos]

    def advance(self) -> None:
        self._pos += 1


def head(s: str) -> str | None:
    """First character of ``s``, or None for the empty string.

    Convenience helper for callers splitting words themselves; the tree
    walks words with :class:`SymbolCursor` instead.
    """
    if not s:
        return None
    return s[0]


def tail(s: str) -> str:
    """Everything after the first character of ``s``.

    Convenience helper for callers; see :func:`head`.
    """
    if len(s) < 2:
        return ""
    return s[1:]
