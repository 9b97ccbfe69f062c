from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Tuple

from bitarray import frozenbitarray

from huffman_tree import Node


class CodeTable:
    """Symbol to codeword assignment derived from a Huffman tree.

    The tree is kept as is and serves as the decoding structure.

    :ivar LEFT_BIT: Bit appended when descending to a left child.
    :type LEFT_BIT: int
    :ivar RIGHT_BIT: Bit appended when descending to a right child.
    :type RIGHT_BIT: int
    :ivar root: Root of the tree the codewords were derived from.
    :type root: Leaf | Internal
    """

    LEFT_BIT = 0
    RIGHT_BIT = 1

    __slots__ = ("root", "_codes")

    def __init__(self, root: Node):
        """Assign a codeword to every leaf of ``root``.

        A tree made of a single leaf still needs one bit per symbol, so that
        leaf gets the codeword ``0``.

        :param root: Root node of a Huffman tree.
        :type root: Leaf | Internal
        :returns: None
        :rtype: None
        """
        self.root = root
        self._codes: Dict[Any, frozenbitarray] = {}

        if root.is_leaf:
            self._codes[root.symbol] = frozenbitarray([self.LEFT_BIT])
            return

        stack = [(root, ())]
        while stack:
            node, path = stack.pop()
            if node.is_leaf:
                self._codes[node.symbol] = frozenbitarray(path)
            else:
                stack.append((node.right, path + (self.RIGHT_BIT,)))
                stack.append((node.left, path + (self.LEFT_BIT,)))

    def codeword(self, symbol) -> frozenbitarray:
        """Return the codeword of ``symbol``.

        :param symbol: A symbol of the alphabet.
        :returns: Immutable codeword bits.
        :rtype: frozenbitarray
        :raises KeyError: If ``symbol`` has no codeword.
        :raises TypeError: If ``symbol`` is unhashable.
        """
        return self._codes[symbol]

    @property
    def codewords(self) -> Mapping[Any, frozenbitarray]:
        return MappingProxyType(self._codes)

    @property
    def symbols(self) -> Tuple[Any, ...]:
        """Symbols of the code, in tree order (left to right).

        :rtype: Tuple[Any, ...]
        """
        return tuple(self._codes)

    def code_lengths(self) -> Dict[Any, int]:
        """Codeword length of every symbol.

        :returns: Mapping from symbol to codeword length in bits.
        :rtype: Dict[Any, int]
        """
        return {symbol: len(code) for symbol, code in self._codes.items()}

    def weighted_length(self) -> int:
        """Total encoded length of the alphabet, each symbol counted by weight.

        This is the sum of ``weight * len(codeword)`` over all leaves, which
        a Huffman tree minimizes.

        :rtype: int
        """
        return sum(
            weight * len(self._codes[symbol])
            for symbol, weight in self._leaf_weights()
        )

    def _leaf_weights(self) -> Iterator[Tuple[Any, int]]:
        stack = [self.root]
        while stack:
            node = stack.pop()
            if node.is_leaf:
                yield node.symbol, node.weight
            else:
                stack.append(node.right)
                stack.append(node.left)

    def __contains__(self, symbol) -> bool:
        try:
            return symbol in self._codes
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self._codes)

    def __iter__(self):
        return iter(self._codes.items())

    def __repr__(self):
        body = ", ".join(
            f"{symbol!r}: {code.to01()}" for symbol, code in self._codes.items()
        )
        return f"CodeTable({{{body}}})"
