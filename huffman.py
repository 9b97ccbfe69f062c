import logging
from typing import Any, Iterable, Iterator, List, Mapping, Tuple, Union

from bitarray import bitarray

from codetable import CodeTable
from decoder import Bits, Decoder
from encoder import Encoder
from huffman_tree import Node, build_tree
from weights import WeightTable

logger = logging.getLogger(__name__)

Weights = Union[Iterable[Tuple[Any, int]], Mapping[Any, int], WeightTable]


class HuffmanTable:
    """Huffman code over a weighted alphabet, with encoder and decoder.

    The table is built once and exposes its parts only through read-only
    properties, so a single instance can serve any number of encode/decode
    calls, including from several threads at once. The tree nodes behind
    :attr:`root` are plain objects and are immutable by convention only.
    """

    __slots__ = ("_weights", "_codes", "_encoder", "_decoder")

    def __init__(self, weights: Weights):
        """Build the code for ``weights``.

        :param weights: Ordered ``(symbol, weight)`` pairs, a mapping from
                        symbol to weight or an existing :class:`WeightTable`.
        :type weights: Iterable[Tuple[Any, int]] | Mapping[Any, int] | WeightTable
        :returns: None
        :rtype: None
        :raises InvalidInput: If the alphabet is empty, has a non-positive
            weight or a duplicate symbol.
        """
        table = weights if isinstance(weights, WeightTable) else WeightTable(weights)
        codes = CodeTable(build_tree(table))

        self._weights = table
        self._codes = codes
        self._encoder = Encoder(codes)
        self._decoder = Decoder(codes)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Huffman table ready: %d symbols, total weight %d, "
                "weighted length %d bits",
                len(table), table.total_weight, codes.weighted_length(),
            )

    @property
    def weights(self) -> WeightTable:
        """Validated alphabet the code was built from.

        :rtype: WeightTable
        """
        return self._weights

    @property
    def codes(self) -> CodeTable:
        """Symbol to codeword assignment; also holds the tree.

        :rtype: CodeTable
        """
        return self._codes

    @property
    def encoder(self) -> Encoder:
        return self._encoder

    @property
    def decoder(self) -> Decoder:
        return self._decoder

    @property
    def root(self) -> Node:
        """Root node of the Huffman tree.

        :rtype: Leaf | Internal
        """
        return self._codes.root

    def encode(self, symbols: Iterable) -> bitarray:
        """Encode ``symbols``; see :meth:`Encoder.encode`.

        :param symbols: Symbols from the alphabet.
        :type symbols: Iterable
        :returns: Encoded bits.
        :rtype: bitarray
        :raises UnknownSymbolError: If a symbol is not in the alphabet.
        """
        return self._encoder.encode(symbols)

    def decode(self, bits: Bits) -> List[Any]:
        """Decode ``bits``; see :meth:`Decoder.decode`.

        :param bits: Encoded bits.
        :returns: Decoded symbols, shared with the table.
        :rtype: list
        :raises TruncatedInputError: If ``bits`` ends inside a codeword.
        """
        return self._decoder.decode(bits)

    def decode_owned(self, bits: Bits) -> List[Any]:
        """Decode ``bits`` into independent copies of the symbols.

        :param bits: Encoded bits.
        :returns: Decoded symbols, deep-copied.
        :rtype: list
        :raises TruncatedInputError: If ``bits`` ends inside a codeword.
        """
        return self._decoder.decode_owned(bits)

    def decode_iter(self, bits: Bits) -> Iterator[Any]:
        """Lazily decode ``bits``; see :meth:`Decoder.decode_iter`.

        :param bits: Encoded bits.
        :returns: Iterator over decoded symbols.
        :rtype: Iterator
        """
        return self._decoder.decode_iter(bits)

    def split(self) -> Tuple[Encoder, Decoder]:
        """Hand out the encoder and decoder halves separately.

        Both keep referring to the same code table.

        :rtype: Tuple[Encoder, Decoder]
        """
        return self._encoder, self._decoder

    def __contains__(self, symbol) -> bool:
        return symbol in self._codes

    def __len__(self) -> int:
        return len(self._codes)

    def __repr__(self):
        return f"HuffmanTable({len(self)} symbols)"


def build(weights: Weights) -> HuffmanTable:
    """Build a :class:`HuffmanTable` from ``weights``.

    :raises InvalidInput: If ``weights`` is not a valid alphabet.
    """
    return HuffmanTable(weights)


def encode(table: HuffmanTable, symbols: Iterable) -> bitarray:
    """Encode ``symbols`` with ``table``.

    :raises UnknownSymbolError: If a symbol is not in the table.
    """
    return table.encode(symbols)


def decode(table: HuffmanTable, bits: Bits) -> List[Any]:
    """Decode ``bits`` with ``table``; symbols are shared with the table.

    :raises TruncatedInputError: If ``bits`` ends inside a codeword.
    """
    return table.decode(bits)


def decode_owned(table: HuffmanTable, bits: Bits) -> List[Any]:
    """Decode ``bits`` with ``table``; symbols are independent copies.

    :raises TruncatedInputError: If ``bits`` ends inside a codeword.
    """
    return table.decode_owned(bits)


def decode_iter(table: HuffmanTable, bits: Bits) -> Iterator[Any]:
    """Lazily decode ``bits`` with ``table``.

    :returns: Iterator over decoded symbols, shared with the table.
    :rtype: Iterator
    """
    return table.decode_iter(bits)
