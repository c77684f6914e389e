"""Unit tests for the ternary search tree."""

import pytest

from ternary_search import InvalidSymbolError, Tree


@pytest.fixture
def tree() -> Tree:
    """Tree holding p, pr, pa and cr."""
    tst = Tree()
    for word in ("p", "pr", "pa", "cr"):
        tst.insert(word)
    return tst


def test_simple_insert_and_search() -> None:
    """Two words sharing a second letter are both found, a longer one is not."""
    tst = Tree()
    tst.insert("pr")
    tst.insert("cr")

    assert tst.search("pr") is True
    assert tst.search("prs") is False
    assert tst.search("cr") is True


def test_single_letter_then_longer_words() -> None:
    """A one-letter word stays found after longer words are added around it."""
    tst = Tree()
    tst.insert("p")
    assert tst.search("p") is True

    tst.insert("pr")
    tst.insert("cr")

    assert tst.search("p") is True
    assert tst.search("pr") is True
    assert tst.search("prs") is False
    assert tst.search("cr") is True


def test_words_are_sorted(tree: Tree) -> None:
    """words() lists every stored word in ascending order."""
    assert tree.words() == ["cr", "p", "pa", "pr"]


def test_max_word_length() -> None:
    """The longest word decides the length, not the insertion order."""
    tst = Tree()
    for word in ("p", "pr", "prototype", "cra"):
        tst.insert(word)
    assert tst.max_word_length() == 9


def test_empty_tree() -> None:
    """A fresh tree finds nothing, lists nothing and has length 0."""
    tst = Tree()
    assert tst.search("") is False
    assert tst.search("a") is False
    assert tst.words() == []
    assert tst.max_word_length() == 0
    assert tst.is_empty()


def test_empty_word_insert_is_noop() -> None:
    """Inserting the empty string leaves the tree empty."""
    tst = Tree()
    tst.insert("")
    assert tst.is_empty()
    assert tst.search("") is False


@pytest.mark.parametrize("prefix", ["p", "po", "pol", "poly", "polygo"])
def test_strict_prefix_not_found(prefix: str) -> None:
    """Prefixes of a stored word are not members unless inserted."""
    tst = Tree()
    tst.insert("polygon")
    assert tst.search(prefix) is False


def test_prefix_found_once_inserted() -> None:
    """Inserting a prefix after the longer word marks its node as a word end."""
    tst = Tree()
    tst.insert("polygon")
    tst.insert("poly")
    assert tst.search("poly") is True
    assert tst.search("polygon") is True
    assert tst.search("polygons") is False
    assert tst.search("gon") is False


def test_insert_is_idempotent(tree: Tree) -> None:
    """Re-inserting existing words changes neither membership nor listing."""
    before = tree.words()
    for word in ("p", "pr", "pa", "cr"):
        tree.insert(word)
    assert tree.words() == before
    assert all(word in tree for word in before)


def test_words_match_sorted_unique_history() -> None:
    """words() is sorted, without duplicates or omissions."""
    history = ["banana", "band", "ban", "apple", "b", "zebra", "band", "apples", "a"]
    tst = Tree()
    for word in history:
        tst.insert(word)
    assert tst.words() == sorted(set(history))
    assert tst.max_word_length() == max(len(w) for w in history)


def test_unicode_words() -> None:
    """Characters outside ASCII are stored and ordered by code point."""
    words = ["eĥoŝanĝo", "ĉiuĵaŭde", "terpomo", "🤯"]
    tst = Tree()
    for word in words:
        tst.insert(word)
    assert tst.words() == sorted(words)
    assert tst.search("eĥo") is False


def test_each_word_and_iteration(tree: Tree) -> None:
    """each_word and iteration yield the same words as words()."""
    seen: list[str] = []
    tree.each_word(seen.append)
    assert seen == tree.words()
    assert list(tree) == tree.words()


def test_iter_words_restarts() -> None:
    """A fresh call starts over even if an earlier one was abandoned."""
    tst = Tree()
    for word in ("b", "a", "c"):
        tst.insert(word)
    partial = tst.iter_words()
    assert next(partial) == "a"
    assert list(tst.iter_words()) == ["a", "b", "c"]


def test_long_word_does_not_recurse() -> None:
    """Every operation handles words far deeper than the recursion limit."""
    word = "ab" * 5000
    tst = Tree()
    tst.insert(word)
    assert tst.search(word) is True
    assert tst.search(word[:-1]) is False
    assert tst.words() == [word]
    assert tst.max_word_length() == len(word)


def test_sorted_insertion_skews_but_works() -> None:
    """Sorted inserts build long right chains without affecting results."""
    words = [chr(c) for c in range(ord("a"), ord("a") + 2000)]
    tst = Tree()
    for word in words:
        tst.insert(word)
    assert tst.words() == words
    assert tst.right is not None
    assert tst.max_word_length() == 1


def test_contains_rejects_non_strings(tree: Tree) -> None:
    """Membership tests with non-strings are simply False."""
    assert "pa" in tree
    assert 3 not in tree


def test_insert_nul_raises_and_leaves_tree_untouched(tree: Tree) -> None:
    """A word containing NUL is rejected before any node is created."""
    before = tree.words()
    with pytest.raises(InvalidSymbolError):
        tree.insert("p\0x")
    with pytest.raises(InvalidSymbolError):
        tree.insert("\0")
    assert tree.words() == before
    assert tree.left.left is None


def test_node_fields(tree: Tree) -> None:
    """Child links and flags are readable for external serializers."""
    assert tree.symbol == "p"
    assert tree.ending is True
    assert tree.left.symbol == "c"
    assert tree.left.ending is False
    assert tree.left.equal.symbol == "r"
    assert tree.left.equal.ending is True
    assert tree.equal.symbol == "r"
    assert tree.equal.left.symbol == "a"
    assert tree.right is None


def test_symbol_fixed_after_first_insert() -> None:
    """Later words branch around the first symbol instead of replacing it."""
    tst = Tree()
    tst.insert("m")
    tst.insert("a")
    tst.insert("z")
    assert tst.symbol == "m"
    assert tst.left.symbol == "a"
    assert tst.right.symbol == "z"


def test_set_symbol_keeps_end_flag() -> None:
    """Symbol and end flag are independent parts of the packed field."""
    node = Tree()
    node.set_end_of_word(True)
    node.set_symbol("x")
    assert node.get_symbol() == "x"
    assert node.is_end_of_word() is True
    node.set_end_of_word(False)
    assert node.get_symbol() == "x"
    assert node.packed == ord("x")


@pytest.mark.parametrize("symbol", ["\0", 0, -1, "", "ab", 2**31, 0x110000])
def test_set_symbol_rejects_invalid(symbol) -> None:
    """Reserved, out-of-range and multi-character symbols are rejected."""
    node = Tree()
    with pytest.raises(InvalidSymbolError):
        node.set_symbol(symbol)
    assert node.is_empty()


def test_set_symbol_accepts_code_points() -> None:
    """An int symbol is taken as a code point."""
    node = Tree()
    node.set_symbol(0x1F92F)
    assert node.symbol == "🤯"
