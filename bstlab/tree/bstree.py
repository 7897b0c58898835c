import collections

from .. import log
from ..exception import InvalidArgumentError, NodeNotInTreeError, InvalidKeyError

class Node(object):
    """A binary search tree node holding an integer key and an optional
    payload.

    Nodes compare equal if their keys are equal, regardless of payload or
    position in a tree."""

    def __init__(self, key, payload=None):
        if not isinstance(key, int) or isinstance(key, bool):
            raise InvalidKeyError(key)
        self._key = key
        self.payload = payload

        self.parent = None
        self.left = None
        self.right = None

    @property
    def key(self):
        return self._key

    def _take_value(self, other):
        # only used by BinarySearchTree.delete_node
        self._key = other.key
        self.payload = other.payload

    def is_root(self):
        return self.parent is None

    def is_leaf(self):
        return self.left is None and self.right is None

    def is_left_child(self):
        return self.parent is not None and self.parent.left is self

    def is_right_child(self):
        return self.parent is not None and self.parent.right is self

    def __eq__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        return self._key == other._key

    __hash__ = None

    def __str__(self):
        return "({0:d},{1:s},{2:s},{3:s})".format(self._key,
                _key_str(self.parent), _key_str(self.left),
                _key_str(self.right))

    def __repr__(self):
        return "Node(key={0:d}, payload={1!r})".format(self._key,
                self.payload)

def _key_str(node):
    return '' if node is None else str(node.key)


class BinarySearchTree(object):
    """An unbalanced binary search tree.

    The tree links freestanding Node objects into its structure; all
    navigation uses the parent, left and right links of the nodes.
    Lookups return None if no matching node exists."""

    def __init__(self):
        self.root = None

    def is_empty(self):
        return self.root is None

    def size(self):
        n = [0]
        def count(x):
            n[0] += 1
        self.inorder(count)
        return n[0]

    def __len__(self):
        return self.size()

    def contains(self, k):
        return self.find(k) is not None

    def find(self, k):
        return self.get_node(self.root, k)

    def insert(self, node):
        """Links node into the tree.

        Keys equal to an existing key are placed in its right subtree.

        Time complexity: O(h)"""
        self._check_freestanding(node)
        y = None
        x = self.root
        while x is not None:
            y = x
            if node.key < x.key:
                x = x.left
            else:
                if node.key == x.key:
                    log.debug2("duplicate key ", node.key,
                            ", placing it in the right subtree")
                x = x.right
        node.parent = y
        if y is None:
            self.root = node
        elif node.key < y.key:
            y.left = node
        else:
            y.right = node
        return node

    def _check_freestanding(self, node):
        if not isinstance(node, Node):
            raise InvalidArgumentError("cannot insert ", repr(node),
                    ", not a Node")
        if (node is self.root or node.parent is not None or
                node.left is not None or node.right is not None):
            raise InvalidArgumentError("node ", node,
                    " is already linked into a tree")

    def get_node(self, start, k):
        """Finds the node with key k in the subtree rooted at start.
        Returns None if k is not found.

        Time complexity: O(h)"""
        x = start
        while x is not None and k != x.key:
            if k < x.key:
                x = x.left
            else:
                x = x.right
        return x

    def get_min(self, x):
        """Finds the node with the minimal key in the subtree rooted at x

        Returns None if x is None"""
        if x is None:
            return None
        while x.left is not None:
            x = x.left
        return x

    def get_max(self, x):
        """Finds the node with the maximum key in the subtree rooted at x

        Returns None if x is None"""
        if x is None:
            return None
        while x.right is not None:
            x = x.right
        return x

    def get_successor(self, x):
        """Finds the successor of node x in sorted order

        Returns None if x holds the maximum key.
        Time complexity: O(h)"""
        if x.right is not None:
            return self.get_min(x.right)
        y = x.parent
        while y is not None and x is y.right:
            x = y
            y = y.parent
        return y

    def get_predecessor(self, x):
        """Finds the predecessor of node x in sorted order

        Returns None if x holds the minimum key.
        Time complexity: O(h)"""
        if x.left is not None:
            return self.get_max(x.left)
        y = x.parent
        while y is not None and x is y.left:
            x = y
            y = y.parent
        return y

    def get_height(self, x):
        """Number of edges on the longest downward path from x to a leaf.

        A single node has height 0, an empty subtree has height -1.
        Counts levels breadth first.
        Time complexity: O(n)"""
        height = -1
        level = collections.deque()
        if x is not None:
            level.append(x)
        while level:
            height += 1
            for _ in range(len(level)):
                n = level.popleft()
                if n.left is not None:
                    level.append(n.left)
                if n.right is not None:
                    level.append(n.right)
        return height

    def delete_node(self, node):
        """Removes node from the tree.

        A node with two children is not unlinked itself: it takes over the
        key and payload of its successor, which is removed instead.

        Raises InvalidArgumentError if node is not a Node and
        NodeNotInTreeError if node is not linked into this tree. The tree is
        left untouched in both cases.
        Time complexity: O(h)"""
        if not isinstance(node, Node):
            raise InvalidArgumentError("cannot delete ", repr(node),
                    ", not a Node")
        self._check_linked(node)
        self._delete(node)

    def _check_linked(self, node):
        x = node
        while x.parent is not None:
            if x is not x.parent.left and x is not x.parent.right:
                raise NodeNotInTreeError(node)
            x = x.parent
        if x is not self.root:
            raise NodeNotInTreeError(node)

    def _delete(self, z):
        if z.left is not None and z.right is not None:
            y = self.get_successor(z)
            log.debug3("deleting ", z, ": replacing it by successor ", y)
            z._take_value(y)
            self._delete(y)
        elif z.left is not None:
            log.debug3("deleting ", z, ": splicing in left child")
            self._transplant(z, z.left)
        elif z.right is not None:
            log.debug3("deleting ", z, ": splicing in right child")
            self._transplant(z, z.right)
        else:
            log.debug3("deleting leaf ", z)
            self._transplant(z, None)

    def _transplant(self, u, v):
        """Replace the subtree rooted at u by the subtree rooted at v and
        detach u.

        Time complexity: O(1)"""
        if u.parent is None:
            self.root = v
        elif u is u.parent.left:
            u.parent.left = v
        else:
            u.parent.right = v
        if v is not None:
            v.parent = u.parent
        u.parent = None
        u.left = None
        u.right = None

    def inorder(self, f):
        """Does an inorder traversal and calls f(x) for every node x.

        Time complexity: O(n)
        """
        return self._inorder_iter(self.root, f)

    def inorder_walk(self, x, sink):
        """Appends the string form of every node in the subtree rooted at x
        to sink, in ascending key order. Returns sink."""
        self._inorder_iter(x, lambda n: sink.append(str(n)))
        return sink

    def _inorder_iter(self, x, f):
        stack = []
        while stack or x is not None:
            if x is not None:
                stack.append(x)
                x = x.left
            else:
                x = stack.pop()
                f(x)
                x = x.right
