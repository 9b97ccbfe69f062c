import copy
from typing import Any, Iterable, Iterator, List, Union

from bitarray import bitarray

from codetable import CodeTable
from errors import InvalidCodeError, TruncatedInputError

Bits = Union[bitarray, str, Iterable[int]]


def as_bits(bits: Bits) -> bitarray:
    """Normalize ``bits`` to a ``bitarray``.

    Accepts a ``bitarray`` (used as is), a string of ``'0'``/``'1'``
    characters or an iterable of ``0``/``1`` (or ``bool``) values.

    :param bits: Bits to normalize.
    :returns: The bits as a ``bitarray``.
    :rtype: bitarray
    :raises InvalidCodeError: If ``bits`` holds anything but bits.
    """
    if isinstance(bits, bitarray):
        return bits
    if isinstance(bits, (int, bytes, bytearray, memoryview)):
        raise InvalidCodeError(
            f"Expected a bit sequence, got {type(bits).__name__}"
        )
    try:
        return bitarray(bits if isinstance(bits, str) else list(bits))
    except (TypeError, ValueError) as e:
        raise InvalidCodeError(f"Invalid bit sequence: {e}") from None


class Decoder:
    """Turns bit sequences back into symbols by walking the Huffman tree.

    :ivar codes: Code table whose tree drives decoding.
    :type codes: CodeTable
    """

    __slots__ = ("codes",)

    def __init__(self, codes: CodeTable):
        """Bind the decoder to ``codes``.

        :param codes: Code table whose tree is walked.
        :type codes: CodeTable
        :returns: None
        :rtype: None
        """
        self.codes = codes

    def decode_iter(self, bits: Bits) -> Iterator[Any]:
        """Lazily yield the symbols encoded in ``bits``.

        The yielded objects are the symbols stored in the tree, not copies.

        :param bits: Encoded bits.
        :returns: Iterator over decoded symbols.
        :raises InvalidCodeError: If ``bits`` is not a bit sequence, or
            holds a bit with no path in the tree.
        :raises TruncatedInputError: While iterating, if ``bits`` ends in
            the middle of a codeword.
        """
        return self._walk(as_bits(bits))

    def decode(self, bits: Bits) -> List[Any]:
        """Decode ``bits`` into the symbols held by the code table.

        :param bits: Encoded bits.
        :returns: Decoded symbols, shared with the table.
        :rtype: list
        :raises InvalidCodeError: If ``bits`` is not a valid bit sequence.
        :raises TruncatedInputError: If ``bits`` ends inside a codeword.
        """
        return list(self.decode_iter(bits))

    def decode_owned(self, bits: Bits) -> List[Any]:
        """Like :meth:`decode`, but every symbol is an independent deep copy.

        :rtype: list
        """
        return [copy.deepcopy(symbol) for symbol in self.decode_iter(bits)]

    def _walk(self, bits: bitarray) -> Iterator[Any]:
        root = self.codes.root

        if root.is_leaf:
            for offset, bit in enumerate(bits):
                if bit != CodeTable.LEFT_BIT:
                    raise InvalidCodeError(
                        f"Bit {bit} at offset {offset} has no path "
                        "in a single-symbol tree"
                    )
                yield root.symbol
            return

        node = root
        start = 0
        decoded = 0
        for offset, bit in enumerate(bits):
            node = node.left if bit == CodeTable.LEFT_BIT else node.right
            if node.is_leaf:
                yield node.symbol
                decoded += 1
                node = root
                start = offset + 1

        if node is not root:
            raise TruncatedInputError(start, decoded)
