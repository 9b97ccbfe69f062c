class HuffmanError(Exception):
    """Base class for every error raised by the Huffman codec."""


class InvalidInput(HuffmanError, ValueError):
    """Raised when a weight table cannot be turned into a Huffman code.

    Covers an empty alphabet, a non-positive or non-integer weight and a
    repeated symbol.
    """


class UnknownSymbolError(HuffmanError, LookupError):
    """Raised when encoding a symbol that is not part of the alphabet.

    :ivar symbol: The offending input value.
    """

    def __init__(self, symbol):
        super().__init__(f"No such symbol in code table: {symbol!r}")
        self.symbol = symbol


class DecodeError(HuffmanError, ValueError):
    """Base class for errors raised while decoding a bit sequence."""


class TruncatedInputError(DecodeError, EOFError):
    """Raised when the bit sequence ends in the middle of a codeword.

    :ivar offset: Bit offset where the unfinished codeword starts.
    :type offset: int
    :ivar decoded: Number of symbols decoded before the truncation.
    :type decoded: int
    """

    def __init__(self, offset: int, decoded: int):
        super().__init__(
            f"Bit sequence ends inside a codeword starting at bit {offset}"
            f" (after {decoded} symbols)"
        )
        self.offset = offset
        self.decoded = decoded


class InvalidCodeError(DecodeError):
    """Raised when the input holds a bit that leads nowhere in the tree."""
