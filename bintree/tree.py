"""Binary tree nodes linked to their parent and children."""

from __future__ import annotations

from collections.abc import Iterator


class Node:
    """A binary tree node holding an integer value."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Node | None = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Node | None = None
        self.right: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; any existing left child moves under it."""
        node = Node(value, self)
        node.left = self.left
        if self.left is not None:
            self.left.parent = node
        self.left = node
        return node

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; any existing right child moves under it."""
        node = Node(value, self)
        node.right = self.right
        if self.right is not None:
            self.right.parent = node
        self.right = node
        return node

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def _walk(self) -> Iterator[Node]:
        stack: list[Node] = [self]
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def preorder(self) -> Iterator[int]:
        """Yield values in node, left, right order."""
        for node in self._walk():
            yield node.value

    def inorder(self) -> Iterator[int]:
        """Yield values in left, node, right order."""
        stack: list[Node] = []
        node: Node | None = self
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def postorder(self) -> Iterator[int]:
        """Yield values in left, right, node order."""
        stack: list[tuple[Node, bool]] = [(self, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                yield node.value
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

    def height(self) -> int:
        """Return the number of edges on the longest path down to a leaf."""
        if self.is_leaf():
            return 0
        return 1 + max(
            child.height() for child in (self.left, self.right) if child is not None
        )

    def depth(self) -> int:
        """Return the number of edges between the node and the root."""
        count = 0
        node = self.parent
        while node is not None:
            count += 1
            node = node.parent
        return count

    def size(self) -> int:
        """Return the number of nodes in the tree."""
        return sum(1 for _ in self._walk())

    def leaves(self) -> int:
        """Return the number of leaves in the tree."""
        return sum(1 for node in self._walk() if node.is_leaf())

    def nodes(self) -> int:
        """Return the number of nodes with at least one child."""
        return sum(1 for node in self._walk() if not node.is_leaf())

    def balance(self) -> int:
        """Return the height of the left subtree minus that of the right."""
        return _levels(self.left) - _levels(self.right)

    def is_full(self) -> bool:
        """Return True if every node has either zero or two children."""
        return all((node.left is None) == (node.right is None) for node in self._walk())

    def is_perfect(self) -> bool:
        """Return True if every inner node has two children and all leaves share a level."""
        return _reaches(self, self.height())

    def sibling(self) -> Node | None:
        """Return the other child of this node's parent, if any."""
        parent = self.parent
        if parent is None:
            return None
        if parent.left is self:
            return parent.right
        if parent.right is self:
            return parent.left
        return None

    def uncle(self) -> Node | None:
        """Return the sibling of this node's parent, if any."""
        parent = self.parent
        if parent is None or parent.parent is None:
            return None
        grandparent = parent.parent
        if grandparent.left is parent:
            return grandparent.right
        return grandparent.left


def _levels(node: Node | None) -> int:
    """Height counted in nodes: 0 for no tree, 1 for a single node."""
    if node is None:
        return 0
    return 1 + max(_levels(node.left), _levels(node.right))


def _reaches(node: Node | None, remaining: int) -> bool:
    if node is None:
        return False
    if remaining == 0:
        return True
    return (
        node.left is not None
        and node.right is not None
        and _reaches(node.left, remaining - 1)
        and _reaches(node.right, remaining - 1)
    )