"""Ternary search tree over the characters of strings."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Optional

from ternary_search.exceptions import InvalidSymbolError
from ternary_search.ternary_tree.encoding import (
    decode_symbol,
    encode_symbol,
    is_end,
    set_end,
)
from ternary_search.ternary_tree.sequence import SymbolCursor

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

# Markers for nodes waiting on the traversal stack
_EQUAL_PENDING = 0
_RIGHT_PENDING = 1


def _code_point(symbol: str | int) -> int:
    """Return the code point of a one-character string or pass an int through."""
    if isinstance(symbol, str):
        if len(symbol) != 1:
            msg = f"symbol must be a single character, got {symbol!r}"
            raise InvalidSymbolError(msg)
        return ord(symbol)
    return int(symbol)


class Tree:
    """Node of a ternary search tree; the root node is the whole tree.

    Each node holds one symbol and up to three children:

    * ``left`` holds words with a lesser symbol at this position,
    * ``equal`` holds continuations of words sharing this symbol,
    * ``right`` holds words with a greater symbol at this position.

    The symbol and the end-of-word flag share one packed 32-bit field (see
    :mod:`ternary_search.ternary_tree.encoding`). The symbol is fixed on the
    first insertion through the node and children are created lazily. The
    shape of the tree depends only on insertion order; nothing is ever
    rebalanced or removed.

    The tree has no internal locking. Inserts must be serialized against
    every other call by the caller.

    Example
    -------
        >>> tst = Tree()
        >>> tst.insert("polygon")
        >>> tst.insert("poly")
        >>> tst.search("polygon"), tst.search("polygons"), tst.search("gon")
        (True, False, False)
    """

    __slots__ = ("_code", "left", "equal", "right")

    def __init__(self) -> None:
        self._code = 0
        self.left: Optional[Tree] = None
        self.equal: Optional[Tree] = None
        self.right: Optional[Tree] = None

    def __repr__(self):
        return f"Tree(symbol={self.symbol!r}, ending={self.ending})"

    # -- field access -----------------------------------------------------

    @property
    def packed(self) -> int:
        """Raw packed field: end flag in bit 31, code point in bits [0, 30]."""
        return self._code

    @property
    def symbol(self) -> str | None:
        return self.get_symbol()

    @property
    def ending(self) -> bool:
        return is_end(self._code)

    def get_symbol(self) -> str | None:
        """Decode the node's symbol, None if no word has passed through yet."""
        code = decode_symbol(self._code)
        if code == 0:
            return None
        return chr(code)

    def set_symbol(self, symbol: str | int) -> None:
        """Store ``symbol`` (a character or a code point), keeping the end flag.

        Raises
        ------
            InvalidSymbolError: For code point 0, code points outside the
                31-bit range or strings that are not a single character.
        """
        code = _code_point(symbol)
        packed = encode_symbol(self._code, code)
        if code > sys.maxunicode:
            msg = f"code point {code} does not name a character"
            raise InvalidSymbolError(msg)
        self._code = packed

    def is_end_of_word(self) -> bool:
        return is_end(self._code)

    def set_end_of_word(self, flag: bool = True) -> None:
        self._code = set_end(self._code, flag)

    def is_empty(self) -> bool:
        """True if nothing was ever inserted through this node."""
        return decode_symbol(self._code) == 0

    # -- insert / search --------------------------------------------------

    def insert(self, word: str) -> None:
        """Insert ``word`` into the tree.

        Inserting the empty string does nothing and inserting a word twice is
        harmless. Every symbol is validated before the tree is touched, so a
        rejected word leaves no partial path behind.

        Args
        -----
            word (str): Word to insert.

        Raises
        ------
            InvalidSymbolError: If the word contains ``"\\0"``.
        """
        for ch in word:
            if ch == "\0":
                msg = f"cannot insert {word!r}: the NUL character is reserved"
                raise InvalidSymbolError(msg)

        cursor = SymbolCursor(word)
        if not cursor.has_more():
            return

        node = self
        while True:
            head = cursor.current()
            value = node.get_symbol()
            if value is None:
                node.set_symbol(head)
                value = head

            if head < value:
                if node.left is None:
                    node.left = Tree()
                node = node.left
            elif head > value:
                if node.right is None:
                    node.right = Tree()
                node = node.right
            else:
                cursor.advance()
                if not cursor.has_more():
                    node.set_end_of_word(True)
                    return
                if node.equal is None:
                    node.equal = Tree()
                node = node.equal

    def search(self, word: str) -> bool:
        """Return True if ``word`` was inserted.

        A prefix of a stored word is only found if it was inserted itself.
        The empty string is never found.
        """
        cursor = SymbolCursor(word)
        if not cursor.has_more():
            return False

        node: Optional[Tree] = self
        while node is not None:
            value = node.get_symbol()
            if value is None:
                return False

            head = cursor.current()
            if head < value:
                node = node.left
            elif head > value:
                node = node.right
            else:
                cursor.advance()
                if not cursor.has_more():
                    return node.ending
                node = node.equal
        return False

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)

    # -- enumeration ------------------------------------------------------

    def iter_words(self) -> Iterator[str]:
        """Yield every stored word once, in ascending order.

        The traversal keeps its own stack, so deep or skewed trees do not
        run into the interpreter's recursion limit. Each call starts over
        from this node.
        """
        stack: list[tuple[Tree, int]] = []
        prefix: list[str] = []
        node: Optional[Tree] = None if self.is_empty() else self

        while node is not None or stack:
            if node is not None:
                stack.append((node, _EQUAL_PENDING))
                node = node.left
                continue

            node, pending = stack.pop()
            if pending == _EQUAL_PENDING:
                prefix.append(node.get_symbol())
                if node.ending:
                    yield "".join(prefix)
                stack.append((node, _RIGHT_PENDING))
                node = node.equal
            else:
                prefix.pop()
                node = node.right

    def __iter__(self) -> Iterator[str]:
        return self.iter_words()

    def each_word(self, visit: Callable[[str], None]) -> None:
        """Call ``visit`` with every stored word, in ascending order."""
        for word in self.iter_words():
            visit(word)

    def words(self) -> list[str]:
        """Return all stored words, sorted.

        This builds the whole list in memory; prefer :meth:`iter_words` on
        large trees.
        """
        return list(self.iter_words())

    # -- measurement ------------------------------------------------------

    def max_word_length(self) -> int:
        """Length of the longest stored word, 0 if the tree is empty.

        Each node contributes ``max(left, right, 1 if ending, 1 + equal)``,
        where an equal subtree counts only if it holds a word. Nodes are
        visited in post-order with an explicit stack, so deep trees do not
        run into the interpreter's recursion limit.
        """
        if self.is_empty():
            return 0

        lengths: dict[int, int] = {}
        stack: list[tuple[Tree, bool]] = [(self, False)]
        while stack:
            node, expanded = stack.pop()
            children = [
                child for child in (node.left, node.equal, node.right)
                if child is not None and not child.is_empty()
            ]
            if not expanded:
                stack.append((node, True))
                stack.extend((child, False) for child in children)
                continue

            best = 1 if node.ending else 0
            if node.left in children:
                best = max(best, lengths.pop(id(node.left)))
            if node.equal in children:
                below = lengths.pop(id(node.equal))
                if below > 0:
                    best = max(best, below + 1)
            if node.right in children:
                best = max(best, lengths.pop(id(node.right)))
            lengths[id(node)] = best

        return lengths[id(self)]
