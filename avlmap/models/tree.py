"""
Height-balanced binary search tree.

Rebalanced on insert with single and double rotations chosen by the last
two descent steps.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, TextIO

from avlmap.interfaces.ordered_map import OrderedMap
from avlmap.models.exceptions import UnorderableKeyError
from avlmap.models.step import Step

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Node:
    """Node in the balanced tree. Owns its two child slots."""

    key: Any
    value: Any
    left: "Tree" = field(default_factory=lambda: Tree())
    right: "Tree" = field(default_factory=lambda: Tree())


def _compare(key: Any, other: Any) -> int:
    """Three-way compare of key against a stored key."""
    try:
        if key < other:
            return -1
        if key > other:
            return 1
    except TypeError as e:
        raise UnorderableKeyError(key, other) from e
    return 0


class Tree(OrderedMap):
    """
    A slot that is either empty or holds a Node.

    Every Node owns two Tree slots, so the whole structure is a chain of
    slots. Rotations move nodes between slots; keys and values are never
    copied.

    Properties maintained after every add:
    1. Keys in a node's left subtree are smaller, keys in its right
       subtree are larger, and no key appears twice
    2. For every node, the level_max of its two children differ by at most 1
    """

    # Indent unit used by render() and dump()
    DEFAULT_INDENT = "    "

    def __init__(self, node: Node | None = None) -> None:
        self.node = node

    @property
    def is_empty(self) -> bool:
        return self.node is None

    def __bool__(self) -> bool:
        return self.node is not None

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: Any) -> bool:
        return self.has(key)

    def __repr__(self) -> str:
        return f"Tree({self.node!r})"

    def add(self, key: Any, value: Any) -> tuple[Step, Step]:
        """
        Insert key unless it is already present. O(log N) descent.

        Returns:
            (step taken here, step taken by the child). A new leaf reports
            (LEAF, NONE); a duplicate key reports (NONE, NONE) and leaves the
            stored value alone.
        """
        node = self.node
        if node is None:
            self.node = Node(key=key, value=value)
            return (Step.LEAF, Step.NONE)

        order = _compare(key, node.key)
        if order < 0:
            inserted = (Step.LEFT, node.left.add(key, value)[0])
        elif order > 0:
            inserted = (Step.RIGHT, node.right.add(key, value)[0])
        else:
            return (Step.NONE, Step.NONE)

        diff = node.left.level_max() - node.right.level_max()
        if abs(diff) > 1:
            self._rebalance(inserted)
        return inserted

    def insert(self, key: Any, value: Any) -> bool:
        """Like add(), but return True only if a new node was created."""
        if self.has(key):
            return False
        self.add(key, value)
        return True

    def get(self, key: Any, default: Any = None) -> Any:
        """Retrieve value by key. O(log N)"""
        node = self._find_node(key)
        return node.value if node is not None else default

    def has(self, key: Any) -> bool:
        return self._find_node(key) is not None

    def delete(self, key: Any) -> "Tree":
        """
        Detach the branch rooted at key.

        The matched node leaves together with both of its children and the
        slot that held it becomes empty. Nothing is spliced back and no
        rebalancing runs.

        Returns:
            The detached branch, or an empty Tree if key is absent.
        """
        node = self.node
        if node is None:
            return Tree()

        order = _compare(key, node.key)
        if order < 0:
            return node.left.delete(key)
        if order > 0:
            return node.right.delete(key)

        self.node = None
        logger.debug(f"Detached branch at {node.key!r}")
        return Tree(node)

    def level_max(self) -> int:
        if self.node is None:
            return 0
        return 1 + max(self.node.left.level_max(), self.node.right.level_max())

    def level_min(self) -> int:
        """One more than the shorter of the two children's level_max."""
        if self.node is None:
            return 0
        return 1 + min(self.node.left.level_max(), self.node.right.level_max())

    def size(self) -> int:
        if self.node is None:
            return 0
        return 1 + self.node.left.size() + self.node.right.size()

    def rotate_left(self) -> None:
        """Single left rotation. No-op without a right child."""
        a = self.node
        if a is None or a.right.node is None:
            return

        b = a.right.node
        a.right.node = b.left.node
        b.left.node = a
        self.node = b

    def rotate_right(self) -> None:
        """Single right rotation. No-op without a left child."""
        a = self.node
        if a is None or a.left.node is None:
            return

        b = a.left.node
        a.left.node = b.right.node
        b.right.node = a
        self.node = b

    def rotate_left_double(self) -> None:
        """Right rotation on the right child, then left rotation here."""
        if self.node is None:
            return
        self.node.right.rotate_right()
        self.rotate_left()

    def rotate_right_double(self) -> None:
        """Left rotation on the left child, then right rotation here."""
        if self.node is None:
            return
        self.node.left.rotate_left()
        self.rotate_right()

    def preorder(self, depth: int = 0) -> Iterator[tuple[int, Any, Any]]:
        """Yield (depth, key, value) root first, then left, then right."""
        node = self.node
        if node is None:
            return
        yield depth, node.key, node.value
        yield from node.left.preorder(depth + 1)
        yield from node.right.preorder(depth + 1)

    def inorder(self) -> Iterator[tuple[Any, Any]]:
        """Yield (key, value) pairs in ascending key order."""
        node = self.node
        if node is None:
            return
        yield from node.left.inorder()
        yield node.key, node.value
        yield from node.right.inorder()

    def render(self, indent: str | None = None) -> str:
        """
        Format the tree one "key: value" line per node, in pre-order.

        Args:
            indent: Prefix repeated once per depth level. Defaults to
                DEFAULT_INDENT.

        Returns:
            The formatted lines, each terminated by a newline.
        """
        unit = self.DEFAULT_INDENT if indent is None else indent
        if not isinstance(unit, str) or not unit:
            raise ValueError(f"indent must be a non-empty string, got {unit!r}")

        return "".join(
            f"{unit * depth}{key}: {value}\n" for depth, key, value in self.preorder()
        )

    def dump(self, file: TextIO | None = None, indent: str | None = None) -> None:
        """Print render() output to file (stdout by default)."""
        print(self.render(indent), end="", file=file)

    def _find_node(self, key: Any) -> Node | None:
        """Find node by key."""
        node = self.node
        if node is None:
            return None

        order = _compare(key, node.key)
        if order < 0:
            return node.left._find_node(key)
        if order > 0:
            return node.right._find_node(key)
        return node

    def _rebalance(self, inserted: tuple[Step, Step]) -> None:
        """Rotate according to the last two descent steps."""
        logger.debug(
            f"Rebalancing at {self.node.key!r}: {inserted[0].name}/{inserted[1].name}"
        )
        if inserted == (Step.LEFT, Step.LEFT):
            self.rotate_right()
        elif inserted == (Step.LEFT, Step.RIGHT):
            self.rotate_right_double()
        elif inserted == (Step.RIGHT, Step.RIGHT):
            self.rotate_left()
        elif inserted == (Step.RIGHT, Step.LEFT):
            self.rotate_left_double()
