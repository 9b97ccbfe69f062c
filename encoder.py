from typing import Iterable

from bitarray import bitarray

from codetable import CodeTable
from errors import UnknownSymbolError


class Encoder:
    """Turns symbol sequences into bit sequences using a code table.

    :ivar codes: Code table shared with the matching decoder.
    :type codes: CodeTable
    """

    __slots__ = ("codes",)

    def __init__(self, codes: CodeTable):
        """Bind the encoder to ``codes``.

        :param codes: Code table to look codewords up in.
        :type codes: CodeTable
        :returns: None
        :rtype: None
        """
        self.codes = codes

    def encode(self, symbols: Iterable) -> bitarray:
        """Concatenate the codewords of ``symbols`` in input order.

        The output holds exactly the codeword bits, with no padding.

        :param symbols: Symbols from the alphabet.
        :type symbols: Iterable
        :returns: Encoded bits.
        :rtype: bitarray
        :raises UnknownSymbolError: If any symbol is not in the alphabet.
            Nothing is returned in that case.
        """
        codewords = self.codes.codewords
        out = bitarray()
        for symbol in symbols:
            try:
                code = codewords[symbol]
            except (KeyError, TypeError):
                raise UnknownSymbolError(symbol) from None
            out.extend(code)
        return out

    def encoded_length(self, symbols: Iterable) -> int:
        """Number of bits :meth:`encode` would produce for ``symbols``.

        :raises UnknownSymbolError: If any symbol is not in the alphabet.
        """
        codewords = self.codes.codewords
        total = 0
        for symbol in symbols:
            try:
                total += len(codewords[symbol])
            except (KeyError, TypeError):
                raise UnknownSymbolError(symbol) from None
        return total
