import heapq
import logging
from typing import Iterator, List, Tuple, Union

from weights import WeightTable

logger = logging.getLogger(__name__)


class Leaf:
    """Leaf of a Huffman tree, holding one symbol of the alphabet.

    Nodes are not frozen; once a tree is built they are treated as read-only.

    :ivar symbol: The symbol stored at this leaf.
    :ivar weight: Frequency (weight) of the symbol.
    :type weight: int
    """

    __slots__ = ("symbol", "weight")

    def __init__(self, symbol, weight: int):
        """Create a leaf.

        :param symbol: Symbol stored at the leaf.
        :param int weight: Frequency of the symbol.
        :returns: None
        :rtype: None
        """
        self.symbol = symbol
        self.weight = weight

    @property
    def is_leaf(self) -> bool:
        return True

    def __repr__(self):
        return f"Leaf({self.symbol!r}, {self.weight})"


class Internal:
    """Internal node of a Huffman tree with exactly two children.

    The weight of the node is the sum of the weights of its children.

    :ivar left: Child reached with a 0 bit.
    :type left: Leaf | Internal
    :ivar right: Child reached with a 1 bit.
    :type right: Leaf | Internal
    :ivar weight: Frequency (weight) of the subtree rooted at this node.
    :type weight: int
    """

    __slots__ = ("left", "right", "weight")

    def __init__(self, left: "Node", right: "Node"):
        """Join two subtrees under a new node.

        :param left: Subtree reached with a 0 bit.
        :type left: Leaf | Internal
        :param right: Subtree reached with a 1 bit.
        :type right: Leaf | Internal
        :returns: None
        :rtype: None
        """
        self.left = left
        self.right = right
        self.weight = left.weight + right.weight

    @property
    def is_leaf(self) -> bool:
        return False

    def __repr__(self):
        return f"Internal({self.left!r}, {self.right!r})"


Node = Union[Leaf, Internal]


def build_tree(table: WeightTable) -> Node:
    """Build an optimal binary code tree from a weight table.

    Nodes are kept in a min-heap ordered by ``(weight, sequence)``. Leaves
    take their position in ``table`` as sequence number and every merged
    node takes the next free one, so ties always resolve the same way and
    the resulting tree depends only on the ordered input.

    The first node popped in a merge becomes the left child.

    With a single symbol the root is the leaf itself.

    :param table: Validated alphabet.
    :type table: WeightTable
    :returns: Root node of the tree.
    :rtype: Leaf | Internal
    """
    heap: List[Tuple[int, int, Node]] = [
        (weight, seq, Leaf(symbol, weight))
        for seq, (symbol, weight) in enumerate(table)
    ]
    heapq.heapify(heap)

    seq = len(heap)
    while len(heap) > 1:
        _, _, left = heapq.heappop(heap)
        _, _, right = heapq.heappop(heap)
        merged = Internal(left, right)
        heapq.heappush(heap, (merged.weight, seq, merged))
        seq += 1

    root = heap[0][2]
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Built Huffman tree: %d symbols, root weight %d, depth %d",
            len(table), root.weight, tree_depth(root),
        )
    return root


def iter_leaves(root: Node) -> Iterator[Tuple[Leaf, int]]:
    """Yield ``(leaf, depth)`` for every leaf, left to right."""
    stack = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        if node.is_leaf:
            yield node, depth
        else:
            stack.append((node.right, depth + 1))
            stack.append((node.left, depth + 1))


def tree_depth(root: Node) -> int:
    """Length of the longest root-to-leaf path.

    :param root: Root node of a Huffman tree.
    :type root: Leaf | Internal
    :returns: Depth of the deepest leaf; 0 for a lone leaf.
    :rtype: int
    """
    return max(depth for _, depth in iter_leaves(root))
