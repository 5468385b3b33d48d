from typing import Optional


class Node:
    """Node of a height-balanced binary search tree."""
    __slots__ = 'value', 'left', 'right', 'height'

    def __init__(self, value: int):
        self.value = value
        self.left: Optional["Node"] = None
        self.right: Optional["Node"] = None
        self.height = 1  # new nodes are always leaves

    def __repr__(self):
        return f"Node({self.value}, h={self.height})"


class BalancedBinarySearchTree:
    """
    Self-balancing (AVL) binary search tree over integer keys.

    Every operation takes an explicit subtree root and returns the updated
    subtree root, since a rotation may change which node sits on top. Callers
    store the result back, e.g. ``tree.root = tree.insert(tree.root, 5)``.
    Duplicate inserts and deletes of missing keys are silent no-ops.
    """

    def __init__(self):
        self.root: Optional[Node] = None

    def is_empty(self) -> bool:
        return self.root is None

    # ------------------ Height helpers ------------------
    def _get_height(self, node: Optional[Node]) -> int:
        """Return the cached height of node (or 0 if None)."""
        if node is None:
            return 0
        return node.height

    def _get_balance(self, node: Optional[Node]) -> int:
        """Return height(left) - height(right) for node (or 0 if None)."""
        if node is None:
            return 0
        return self._get_height(node.left) - self._get_height(node.right)

    def _update_height(self, node: Node) -> None:
        node.height = 1 + max(self._get_height(node.left), self._get_height(node.right))

    # ------------------ Rotations ------------------
    def _right_rotate(self, y: Node) -> Node:
        """Promote y.left over y and return it as the new subtree root."""
        x = y.left
        t2 = x.right

        x.right = y
        y.left = t2

        # y is now below x, so it goes first
        self._update_height(y)
        self._update_height(x)
        return x

    def _left_rotate(self, x: Node) -> Node:
        """Promote x.right over x and return it as the new subtree root."""
        y = x.right
        t2 = y.left

        y.left = x
        x.right = t2

        self._update_height(x)
        self._update_height(y)
        return y

    # ------------------ Rebalancing ------------------
    def _balance_after_insertion(self, node: Node, value: int) -> Node:
        """Restore the AVL property at node, picking the case from the inserted value."""
        balance = self._get_balance(node)

        if balance > 1:
            if value < node.left.value:
                return self._right_rotate(node)  # Left-Left
            node.left = self._left_rotate(node.left)  # Left-Right
            return self._right_rotate(node)

        if balance < -1:
            if value > node.right.value:
                return self._left_rotate(node)  # Right-Right
            node.right = self._right_rotate(node.right)  # Right-Left
            return self._left_rotate(node)

        return node

    def _balance_after_deletion(self, node: Node) -> Node:
        """Restore the AVL property at node, picking the case from the heavy child's balance."""
        balance = self._get_balance(node)

        if balance > 1:
            if self._get_balance(node.left) >= 0:
                return self._right_rotate(node)  # Left-Left
            node.left = self._left_rotate(node.left)  # Left-Right
            return self._right_rotate(node)

        if balance < -1:
            if self._get_balance(node.right) <= 0:
                return self._left_rotate(node)  # Right-Right
            node.right = self._right_rotate(node.right)  # Right-Left
            return self._left_rotate(node)

        return node

    def _subtree_first_position(self, node: Node) -> Node:
        """Return the node with the smallest key in the subtree rooted at node."""
        walk = node
        while walk.left is not None:
            walk = walk.left
        return walk

    # ------------------ Core operations ------------------
    def insert(self, node: Optional[Node], value: int) -> Node:
        """Insert value below node and return the rebalanced subtree root."""
        if node is None:
            return Node(value)

        if value < node.value:
            node.left = self.insert(node.left, value)
        elif value > node.value:
            node.right = self.insert(node.right, value)
        else:
            return node  # duplicates are ignored

        self._update_height(node)
        return self._balance_after_insertion(node, value)

    def delete_node(self, node: Optional[Node], value: int) -> Optional[Node]:
        """Remove value from the subtree rooted at node; return the new root or None."""
        if node is None:
            return None

        if value < node.value:
            node.left = self.delete_node(node.left, value)
        elif value > node.value:
            node.right = self.delete_node(node.right, value)
        elif node.left is None or node.right is None:
            node = node.left if node.left is not None else node.right
        else:
            successor = self._subtree_first_position(node.right)
            node.value = successor.value
            node.right = self.delete_node(node.right, successor.value)

        if node is None:
            return None

        self._update_height(node)
        return self._balance_after_deletion(node)

    def search(self, node: Optional[Node], value: int) -> Optional[Node]:
        """Return the node holding value in the subtree rooted at node, or None."""
        if node is None or node.value == value:
            return node
        if value < node.value:
            return self.search(node.left, value)
        return self.search(node.right, value)

    # ------------------ Root-level shortcuts ------------------
    def add(self, value: int) -> None:
        self.root = self.insert(self.root, value)

    def discard(self, value: int) -> None:
        self.root = self.delete_node(self.root, value)

    def contains(self, value: int) -> bool:
        return self.search(self.root, value) is not None
