"""Packed symbol field shared by every tree node.

A node stores its symbol and its end-of-word flag in one unsigned 32-bit
field:

    bit 31        end-of-word flag
    bits [0, 30]  code point of the symbol, 0 meaning "unset"

All reads and writes of the field go through the helpers below so the
layout can change without touching the tree algorithms.
"""

from ternary_search.exceptions import InvalidSymbolError

SYMBOL_MASK = 0x7FFF_FFFF
END_FLAG = 0x8000_0000
MAX_CODE_POINT = SYMBOL_MASK
UNSET = 0


def decode_symbol(packed: int) -> int:
    """Return the code point held in bits [0, 30], 0 when unset."""
    return packed & SYMBOL_MASK


def encode_symbol(packed: int, code: int) -> int:
    """Store ``code`` in bits [0, 30] of ``packed``, keeping bit 31.

    Args
    -----
        packed (int): Current value of the field.
        code (int): Code point to store.

    Returns
    -------
        int: The updated field.

    Raises
    ------
        InvalidSymbolError: If ``code`` is 0 or outside [1, 2**31 - 1].
    """
    if code == UNSET:
        msg = "code point 0 is reserved and cannot be stored"
        raise InvalidSymbolError(msg)
    if not (0 < code <= MAX_CODE_POINT):
        msg = f"code point must be in [1, {MAX_CODE_POINT}], got {code}"
        raise InvalidSymbolError(msg)
    return (packed & END_FLAG) | code


def is_end(packed: int) -> bool:
    """Read the end-of-word flag (bit 31)."""
    return bool(packed & END_FLAG)


def set_end(packed: int, flag: bool) -> int:
    """Set or clear bit 31 without disturbing the symbol bits."""
    if flag:
        return packed | END_FLAG
    return packed & SYMBOL_MASK
