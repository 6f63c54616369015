from __future__ import annotations

from typing import Dict, List


class DisjointSetForest:
    def __init__(self, n: int):
        """Initialize a forest of ``n`` singleton components.

        Elements are the dense indices ``0..n-1``. Two parallel lists back
        the structure:
        - parent: maps each index to its parent (or itself if it is a root)
        - size: number of elements under a root, stale for non-roots.
        """
        if n < 0:
            raise ValueError(f"Forest size must be non-negative, got {n}")
        self.parent: List[int] = list(range(n))
        self.size: List[int] = [1] * n
        self._count = n

    def __len__(self) -> int:
        return len(self.parent)

    @property
    def component_count(self) -> int:
        return self._count

    def _check(self, index) -> None:
        # negative ints would silently wrap on list access
        if isinstance(index, bool) or not isinstance(index, int):
            raise IndexError(f"Forest index must be an int, got {index!r}")
        if not 0 <= index < len(self.parent):
            raise IndexError(
                f"Forest index {index} out of range [0, {len(self.parent)})"
            )

    def find(self, index: int) -> int:
        self._check(index)
        parent = self.parent
        p = parent[index]
        if p == index or parent[p] == p:
            return p

        root = index
        while parent[root] != root:
            root = parent[root]
        # path compression
        while parent[index] != root:
            parent[index], index = root, parent[index]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the components containing a and b.

        Args:
            a (int): First element.
            b (int): Second element.

        Returns:
            bool: True if two components were merged, False if a and b
            already shared a root.

        Notes:
            Applies union by size. On equal sizes the root of ``a`` is
            attached under the root of ``b``.
        """
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self.size[ra] > self.size[rb]:
            self.parent[rb] = ra
            self.size[ra] += self.size[rb]
        else:
            self.parent[ra] = rb
            self.size[rb] += self.size[ra]
        self._count -= 1
        return True

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

    def component_size(self, index: int) -> int:
        return self.size[self.find(index)]

    def groups(self) -> Dict[int, List[int]]:
        """Return all components as root -> member indices.

        Roots appear in the order they are first reached while scanning
        indices upwards; members are ascending.
        """
        out: Dict[int, List[int]] = {}
        for i in range(len(self.parent)):
            out.setdefault(self.find(i), []).append(i)
        return out
