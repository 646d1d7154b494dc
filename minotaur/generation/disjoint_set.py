"""Union-find over dense integer ids."""

from __future__ import annotations


class DisjointSet:
    """Disjoint-set forest with path compression and union by size.

    ``find`` is iterative so deep trees never grow the call stack.
    """

    def __init__(self, size: int) -> None:
        self._parent = list(range(size))
        self._size = [1] * size

    def find(self, item: int) -> int:
        """Return the representative of ``item``'s set."""
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        # Point every node on the walked chain straight at the root.
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets holding ``a`` and ``b``.

        Returns:
            True if the sets were distinct and have been merged, False if
            ``a`` and ``b`` were already connected.
        """
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False
        if self._size[root_a] < self._size[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        self._size[root_a] += self._size[root_b]
        return True
