from typing import Any, Iterable, Iterator, Mapping, Tuple, Union

from errors import InvalidInput


class WeightTable:
    """Validated, ordered alphabet of ``(symbol, weight)`` pairs.

    Input order is preserved; it breaks ties between equal weights when the
    tree is built.

    :ivar pairs: The validated pairs in input order.
    :type pairs: Tuple[Tuple[Any, int], ...]
    """

    __slots__ = ("_pairs", "_index")

    def __init__(
        self, weights: Union[Iterable[Tuple[Any, int]], Mapping[Any, int]]
    ):
        """Validate ``weights`` and freeze them.

        :param weights: Ordered ``(symbol, weight)`` pairs, or a mapping
                        from symbol to weight (insertion order is kept).
        :type weights: Iterable[Tuple[Any, int]] | Mapping[Any, int]
        :returns: None
        :rtype: None
        :raises InvalidInput: If the alphabet is empty, a weight is not a
            positive integer, a symbol is unhashable or repeats.
        """
        if isinstance(weights, Mapping):
            weights = weights.items()

        pairs = []
        index = {}
        for position, item in enumerate(weights):
            try:
                symbol, weight = item
            except (TypeError, ValueError):
                raise InvalidInput(
                    f"Entry {position} is not a (symbol, weight) pair: {item!r}"
                ) from None
            if isinstance(weight, bool) or not isinstance(weight, int):
                raise InvalidInput(
                    f"Weight of {symbol!r} must be an integer, got {weight!r}"
                )
            if weight <= 0:
                raise InvalidInput(
                    f"Weight of {symbol!r} must be positive, got {weight}"
                )
            try:
                seen = symbol in index
            except TypeError:
                raise InvalidInput(f"Symbol {symbol!r} is not hashable") from None
            if seen:
                raise InvalidInput(
                    f"Duplicate symbol {symbol!r} at entries "
                    f"{index[symbol]} and {position}"
                )
            index[symbol] = position
            pairs.append((symbol, weight))

        if not pairs:
            raise InvalidInput("Alphabet must contain at least one symbol")

        self._pairs = tuple(pairs)
        self._index = index

    @property
    def pairs(self) -> Tuple[Tuple[Any, int], ...]:
        """Validated pairs in input order.

        :rtype: Tuple[Tuple[Any, int], ...]
        """
        return self._pairs

    @property
    def symbols(self) -> Tuple[Any, ...]:
        """Symbols in input order.

        :rtype: Tuple[Any, ...]
        """
        return tuple(symbol for symbol, _ in self._pairs)

    @property
    def total_weight(self) -> int:
        """Sum of all weights.

        :rtype: int
        """
        return sum(weight for _, weight in self._pairs)

    def weight(self, symbol) -> int:
        """Return the weight recorded for ``symbol``.

        :raises KeyError: If ``symbol`` is not in the table.
        """
        return self._pairs[self._index[symbol]][1]

    def __len__(self) -> int:
        return len(self._pairs)

    def __iter__(self) -> Iterator[Tuple[Any, int]]:
        return iter(self._pairs)

    def __getitem__(self, position: int) -> Tuple[Any, int]:
        return self._pairs[position]

    def __eq__(self, other):
        if not isinstance(other, WeightTable):
            return NotImplemented
        return self._pairs == other._pairs

    def __hash__(self):
        return hash(self._pairs)

    def __repr__(self):
        return f"WeightTable({list(self._pairs)!r})"
