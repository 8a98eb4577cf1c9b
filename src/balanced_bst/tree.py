"""
Balanced binary search tree over unique numeric keys.

The tree is built height-minimal from its input, stays a plain BST under
insert and delete, and can be rebuilt into minimal height on request with
``rebalance``. All shape algorithms are structural recursion over ``Node``.
"""

import logging
import sys
from collections import deque
from typing import Callable, Deque, Iterable, Iterator, List, Optional, Sequence, TextIO

from .coerce import process_items, to_number
from .errors import CallbackError, ConversionError, NotFoundError
from .node import Node, Number
from .pretty import render

logger = logging.getLogger(__name__)

Visitor = Callable[[Node], object]

_ROOT = object()


def _check_callback(callback: object) -> None:
    if not callable(callback):
        raise CallbackError(callback)


class Tree:
    def __init__(self, items: Iterable[object] = ()) -> None:
        keys = process_items(items)
        self.root: Optional[Node] = self.build_balanced(keys)
        self._size: int = len(keys)
        logger.debug("built tree with %d keys", self._size)

    @staticmethod
    def build_balanced(keys: Sequence[Number]) -> Optional[Node]:
        """
        Build a height-minimal BST from sorted, unique keys.

        The middle key becomes the root and each half is built the same way,
        so sibling subtree sizes differ by at most one at every node.
        """
        if not keys:
            return None

        mid = len(keys) // 2
        root = Node(keys[mid])
        root.left = Tree.build_balanced(keys[:mid])
        root.right = Tree.build_balanced(keys[mid + 1:])
        return root

    def _insert(self, node: Optional[Node], value: Number) -> Node:
        if node is None:
            self._size += 1
            return Node(value)

        if value > node.key:
            node.right = self._insert(node.right, value)
        elif value < node.key:
            node.left = self._insert(node.left, value)

        return node

    def insert(self, value: object) -> None:
        self.root = self._insert(self.root, to_number(value))

    def _find_min_node(self, node: Node) -> Node:
        while node.left is not None:
            node = node.left
        return node

    def _delete_item(self, node: Optional[Node], value: Number) -> Optional[Node]:
        if node is None:
            return None

        if value > node.key:
            node.right = self._delete_item(node.right, value)
        elif value < node.key:
            node.left = self._delete_item(node.left, value)
        else:
            if node.left is None:
                self._size -= 1
                return node.right
            if node.right is None:
                self._size -= 1
                return node.left

            # two children: take over the in-order successor's key, then
            # remove the successor, which has no left child
            successor = self._find_min_node(node.right)
            node.key = successor.key
            node.right = self._delete_item(node.right, successor.key)

        return node

    def delete_item(self, value: object) -> None:
        self.root = self._delete_item(self.root, to_number(value))

    def find(self, value: object) -> Optional[Node]:
        key = to_number(value)
        return self._find(self.root, key)

    def _find(self, node: Optional[Node], key: Number) -> Optional[Node]:
        if node is None or node.key == key:
            return node
        if key > node.key:
            return self._find(node.right, key)
        return self._find(node.left, key)

    def level_order(self, callback: Visitor) -> None:
        _check_callback(callback)
        if self.root is None:
            return

        queue: Deque[Node] = deque([self.root])
        while queue:
            node = queue.popleft()
            callback(node)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)

    def _in_order(self, node: Optional[Node], callback: Visitor) -> None:
        if node is None:
            return
        self._in_order(node.left, callback)
        callback(node)
        self._in_order(node.right, callback)

    def in_order(self, callback: Visitor) -> None:
        _check_callback(callback)
        self._in_order(self.root, callback)

    def _pre_order(self, node: Optional[Node], callback: Visitor) -> None:
        if node is None:
            return
        callback(node)
        self._pre_order(node.left, callback)
        self._pre_order(node.right, callback)

    def pre_order(self, callback: Visitor) -> None:
        _check_callback(callback)
        self._pre_order(self.root, callback)

    def _post_order(self, node: Optional[Node], callback: Visitor) -> None:
        if node is None:
            return
        self._post_order(node.left, callback)
        self._post_order(node.right, callback)
        callback(node)

    def post_order(self, callback: Visitor) -> None:
        _check_callback(callback)
        self._post_order(self.root, callback)

    def height(self, node: object = _ROOT) -> int:
        """
        Count the nodes on the longest downward path from ``node``.

        An absent node has height 0 and a leaf has height 1. Called without
        an argument, measures the whole tree.
        """
        if node is _ROOT:
            return self._height(self.root)
        return self._height(node)  # type: ignore[arg-type]

    def _height(self, node: Optional[Node]) -> int:
        if node is None:
            return 0
        return 1 + max(self._height(node.left), self._height(node.right))

    def depth(self, node: Node) -> int:
        """
        Count the edges between the root and ``node``.

        The descent navigates by key, so ``node`` must be the very node
        stored under its key in this tree.

        Raises:
            NotFoundError: If ``node`` is not part of this tree
        """
        if not isinstance(node, Node):
            raise NotFoundError(f"depth needs a node of this tree, got {node!r}")

        result = 0
        current = self.root
        while current is not None and current.key != node.key:
            current = current.right if node.key > current.key else current.left
            result += 1

        if current is not node:
            raise NotFoundError(f"{node!r} is not part of this tree")
        return result

    def _is_balanced(self, node: Optional[Node]) -> bool:
        if node is None:
            return True
        if abs(self._height(node.left) - self._height(node.right)) > 1:
            return False
        return self._is_balanced(node.left) and self._is_balanced(node.right)

    def is_balanced(self) -> bool:
        return self._is_balanced(self.root)

    def rebalance(self) -> None:
        if self.is_balanced():
            return
        keys = self.keys()
        logger.debug("rebalancing %d keys from height %d", len(keys), self.height())
        self.root = self.build_balanced(keys)

    def keys(self) -> List[Number]:
        result: List[Number] = []
        self.in_order(lambda node: result.append(node.key))
        return result

    def render(self, node: Optional[Node] = None) -> str:
        return render(self.root if node is None else node)

    def pretty_print(self, node: Optional[Node] = None, file: Optional[TextIO] = None) -> None:
        text = self.render(node)
        if text:
            print(text, file=sys.stdout if file is None else file)

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self.root is None

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: object) -> bool:
        try:
            return self.find(value) is not None
        except ConversionError:
            return False

    def __iter__(self) -> Iterator[Number]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return f"Tree({self.keys()})"

    def __str__(self) -> str:
        return f"Tree(size={self._size}, height={self.height()})"
