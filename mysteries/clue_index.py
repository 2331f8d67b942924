"""
Clue Index - Ordered set of clue descriptions backed by an unbalanced binary search tree
"""

import logging
from typing import Iterator, List, Optional

logger = logging.getLogger(__name__)


class ClueNode:
    """A single clue in the tree; owns its children"""

    __slots__ = ("text", "left", "right")

    def __init__(self, text: str):
        self.text = text
        self.left: Optional["ClueNode"] = None
        self.right: Optional["ClueNode"] = None


class ClueIndex:
    """Set of clue texts kept in lexicographic order.

    Shape depends on insertion order; no rebalancing is done, so a sorted
    insertion sequence degenerates into a chain. All walks are iterative.
    """

    def __init__(self, clues: Optional[List[str]] = None):
        self.root: Optional[ClueNode] = None
        for text in clues or []:
            self.insert(text)

    def insert(self, text: str) -> None:
        """Insert a clue unless an identical one is already present"""
        if self.root is None:
            self.root = ClueNode(text)
            logger.debug("Clue index root set to %r", text)
            return

        node = self.root
        while True:
            if text < node.text:
                if node.left is None:
                    node.left = ClueNode(text)
                    break
                node = node.left
            elif text > node.text:
                if node.right is None:
                    node.right = ClueNode(text)
                    break
                node = node.right
            else:
                return
        logger.debug("Clue indexed: %r", text)

    def contains(self, text: str) -> bool:
        node = self.root
        while node is not None:
            if text < node.text:
                node = node.left
            elif text > node.text:
                node = node.right
            else:
                return True
        return False

    def in_order(self) -> Iterator[str]:
        """Yield clues in ascending order (left subtree, node, right subtree)"""
        stack: List[ClueNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.text
            node = node.right

    def count(self) -> int:
        """Number of clues: 1 + count(left) + count(right), 0 for an empty subtree"""
        total = 0
        pending = [self.root]
        while pending:
            node = pending.pop()
            if node is None:
                continue
            total += 1
            pending.append(node.left)
            pending.append(node.right)
        return total

    def is_empty(self) -> bool:
        return self.root is None

    def __contains__(self, text: object) -> bool:
        return isinstance(text, str) and self.contains(text)

    def __iter__(self) -> Iterator[str]:
        return self.in_order()

    def __len__(self) -> int:
        return self.count()

    def __repr__(self) -> str:
        return f"ClueIndex({list(self.in_order())!r})"
