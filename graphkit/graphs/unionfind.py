"""
Union-Find (disjoint set) keyed by an integer extracted from each element.

Used by connected components and Kruskal's algorithm, where the key is the
vertex id.
"""

from typing import Callable, Dict, Generic, Hashable, TypeVar

T = TypeVar("T")


class UnionFind(Generic[T]):
    """
    Union-Find data structure with path compression and union by rank.

    Elements are tracked by ``key(element)``; two elements with the same key
    are the same member.

    Example:
        >>> uf = UnionFind(key=lambda v: v.id)
        >>> uf.union(a, b)
        True
        >>> uf.is_connected(a, b)
        True
    """

    def __init__(self, key: Callable[[T], Hashable]):
        """
        Initialize an empty union-find.

        Args:
            key: Maps an element to its integer key.
        """
        self._key = key
        self._elements: Dict[Hashable, T] = {}
        self.parent: Dict[Hashable, Hashable] = {}
        self.rank: Dict[Hashable, int] = {}

    def add(self, element: T) -> None:
        """Track ``element`` as a singleton set; no-op if already tracked."""
        k = self._key(element)
        if k not in self.parent:
            self._elements[k] = element
            self.parent[k] = k
            self.rank[k] = 0

    def _find_key(self, k: Hashable) -> Hashable:
        root = k
        while self.parent[root] != root:
            root = self.parent[root]
        # Path compression
        while self.parent[k] != root:
            self.parent[k], k = root, self.parent[k]
        return root

    def find(self, element: T) -> T:
        """
        Return the representative element of the set holding ``element``.

        Raises:
            KeyError: If ``element`` is not tracked.
        """
        return self._elements[self._find_key(self._key(element))]

    def union(self, x: T, y: T) -> bool:
        """
        Merge the sets containing x and y using union by rank.

        Untracked elements are added first.

        Returns:
            True if two different sets were merged, False if x and y were
            already connected.
        """
        self.add(x)
        self.add(y)
        root_x = self._find_key(self._key(x))
        root_y = self._find_key(self._key(y))

        if root_x == root_y:
            return False

        if self.rank[root_x] < self.rank[root_y]:
            self.parent[root_x] = root_y
        elif self.rank[root_x] > self.rank[root_y]:
            self.parent[root_y] = root_x
        else:
            self.parent[root_y] = root_x
            self.rank[root_x] += 1

        return True

    def is_connected(self, x: T, y: T) -> bool:
        """Return True if x and y are tracked and share a root."""
        kx, ky = self._key(x), self._key(y)
        if kx not in self.parent or ky not in self.parent:
            return False
        return self._find_key(kx) == self._find_key(ky)

    def __contains__(self, element: T) -> bool:
        return self._key(element) in self.parent

    def __len__(self) -> int:
        return len(self.parent)
