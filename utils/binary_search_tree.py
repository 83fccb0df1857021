from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class _Node(Generic[T]):
    key: Any
    element: T
    left: Optional["_Node[T]"] = None
    right: Optional["_Node[T]"] = None
    height: int = 1


def _height(node: Optional[_Node]) -> int:
    return node.height if node is not None else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(node: _Node) -> _Node:
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    _update(node)
    _update(pivot)
    return pivot


def _rotate_left(node: _Node) -> _Node:
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    _update(node)
    _update(pivot)
    return pivot


def _rebalance(node: _Node) -> _Node:
    _update(node)
    balance = _height(node.left) - _height(node.right)

    if balance > 1:
        if _height(node.left.left) < _height(node.left.right):
            node.left = _rotate_left(node.left)
        return _rotate_right(node)

    if balance < -1:
        if _height(node.right.right) < _height(node.right.left):
            node.right = _rotate_right(node.right)
        return _rotate_left(node)

    return node


class BinarySearchTree(Generic[T]):
    """
    Ordered store keyed by ``key(element)``.

    - insert / search are O(log n); the tree rebalances itself (AVL), so
      already-sorted input does not degrade it into a list.
    - an element whose key is already present is ignored: the first one wins.
    - traverse_in_order visits elements in ascending key order. The tree must
      not be changed from inside the visit callback (RuntimeError).
    """

    def __init__(self, key: Callable[[T], Any] = lambda element: element) -> None:
        self._key = key
        self._root: Optional[_Node[T]] = None
        self._size = 0
        self._traversing = 0

    @property
    def is_empty(self) -> bool:
        return self._root is None

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def __iter__(self) -> Iterator[T]:
        # snapshot, so the caller may mutate the tree while consuming it
        items: list[T] = []
        self.traverse_in_order(items.append)
        return iter(items)

    def clear(self) -> None:
        self._check_not_traversing("clear")
        self._root = None
        self._size = 0

    def insert(self, element: T) -> bool:
        """Insert ``element``. Returns False (and changes nothing) on a duplicate key."""
        self._check_not_traversing("insert")
        size_before = self._size
        self._root = self._insert(self._root, self._key(element), element)
        return self._size > size_before

    def search(self, key: Any) -> Optional[T]:
        node = self._find(key)
        return node.element if node is not None else None

    def traverse_in_order(self, visit: Callable[[T], None]) -> None:
        self._traversing += 1
        try:
            self._in_order(self._root, visit)
        finally:
            self._traversing -= 1

    # --- internals ---

    def _check_not_traversing(self, operation: str) -> None:
        if self._traversing:
            raise RuntimeError(f"cannot {operation} while traversing the tree")

    def _insert(self, node: Optional[_Node[T]], key: Any, element: T) -> _Node[T]:
        if node is None:
            self._size += 1
            return _Node(key=key, element=element)

        if key < node.key:
            node.left = self._insert(node.left, key, element)
        elif key > node.key:
            node.right = self._insert(node.right, key, element)
        else:
            # duplicate key: keep the existing element
            return node

        return _rebalance(node)

    def _find(self, key: Any) -> Optional[_Node[T]]:
        node = self._root
        while node is not None:
            if key == node.key:
                return node
            node = node.left if key < node.key else node.right
        return None

    def _in_order(self, node: Optional[_Node[T]], visit: Callable[[T], None]) -> None:
        if node is None:
            return
        self._in_order(node.left, visit)
        visit(node.element)
        self._in_order(node.right, visit)

    def __repr__(self) -> str:
        return f"<BinarySearchTree size={self._size}>"
