"""Exception types raised by the ternary search tree and its serializers."""


class TernarySearchError(Exception):
    """Base class for all errors raised by this package."""


class InvalidSymbolError(TernarySearchError, ValueError):
    """A symbol cannot be stored in a node's packed symbol field.

    Raised for the reserved code point 0, for code points outside the
    31-bit range, and for symbols that are not a single character.
    """


class SerializationError(TernarySearchError, ValueError):
    """Serialized tree data is malformed and cannot be rebuilt."""
