"""Disjoint-set forest over arbitrary hashable keys.

Keys are mapped to compact integer ids; the forest itself is a pair of
parent / rank arrays indexed by id.
"""

from typing import Generic, Hashable, TypeVar

K = TypeVar("K", bound=Hashable)


class DisjointSet(Generic[K]):
    """Union-find with path compression and union by rank."""

    def __init__(self) -> None:
        self._ids: dict[K, int] = {}
        self._parent: list[int] = []
        self._rank: list[int] = []

    def __contains__(self, key: object) -> bool:
        return key in self._ids

    def __len__(self) -> int:
        return len(self._parent)

    def make_set(self, key: K) -> int:
        """Register key as a singleton set if it is new.

        Args:
            key: Element to add.

        Returns:
            The integer id of key.
        """
        node = self._ids.get(key)
        if node is None:
            node = len(self._parent)
            self._ids[key] = node
            self._parent.append(node)
            self._rank.append(0)
        return node

    def id_of(self, key: K) -> int:
        """Get the integer id of a registered key.

        Raises:
            KeyError: If key was never passed to make_set.
        """
        try:
            return self._ids[key]
        except KeyError:
            raise KeyError(f"{key!r} is not a member of any set") from None

    def find(self, key: K) -> int:
        """Find the root id of the set containing key."""
        return self._find_root(self.id_of(key))

    def _find_root(self, node: int) -> int:
        parent = self._parent
        root = node
        while parent[root] != root:
            root = parent[root]
        # Path compression
        while parent[node] != root:
            parent[node], node = root, parent[node]
        return root

    def union(self, a: K, b: K) -> int:
        """Merge the sets containing a and b.

        Returns:
            Root id of the merged set.
        """
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return root_a

        rank = self._rank
        if rank[root_a] < rank[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        if rank[root_a] == rank[root_b]:
            rank[root_a] += 1
        return root_a

    def connected(self, a: K, b: K) -> bool:
        """Check if a and b are in the same set."""
        return self.find(a) == self.find(b)
