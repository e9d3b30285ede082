from __future__ import annotations

import logging
from typing import Callable, Dict, List, Set

logger = logging.getLogger(__name__)


class AdjacencyGraph:
    """Undirected graph over territory ids ``0..num_vertices-1``.

    Inactive vertices are excluded from edge mutation and cluster search.
    Deactivating a vertex leaves the edges it already has in place, and adding
    the same edge twice stores it twice.
    """

    def __init__(self, num_vertices: int) -> None:
        self.num_vertices = num_vertices
        self._adjacency: Dict[int, List[int]] = {
            vertex: [] for vertex in range(num_vertices)
        }
        self._inactive: Set[int] = set()

    def __len__(self) -> int:
        return self.num_vertices

    def add_edge(self, u: int, v: int) -> None:
        if self.is_active(u) and self.is_active(v):
            self._adjacency[u].append(v)
            self._adjacency[v].append(u)

    def remove_edge(self, u: int, v: int) -> None:
        if not (self.is_active(u) and self.is_active(v)):
            return
        if v in self._adjacency[u]:
            self._adjacency[u].remove(v)
        if u in self._adjacency[v]:
            self._adjacency[v].remove(u)

    def deactivate_vertex(self, vertex: int) -> None:
        self._inactive.add(vertex)

    def is_active(self, vertex: int) -> bool:
        return vertex not in self._inactive

    def neighbors_of(self, vertex: int) -> List[int]:
        return list(self._adjacency.get(vertex, ()))

    def edge_count(self) -> int:
        return sum(len(neighbors) for neighbors in self._adjacency.values()) // 2

    def largest_cluster_size(self, predicate: Callable[[int], bool]) -> int:
        """Size of the largest connected set of active vertices matching ``predicate``."""
        visited: Set[int] = set()
        largest = 0
        for start in range(self.num_vertices):
            if start in visited or not self.is_active(start) or not predicate(start):
                continue
            visited.add(start)
            stack = [start]
            size = 0
            while stack:
                vertex = stack.pop()
                size += 1
                for neighbor in self._adjacency[vertex]:
                    if (
                        neighbor not in visited
                        and self.is_active(neighbor)
                        and predicate(neighbor)
                    ):
                        visited.add(neighbor)
                        stack.append(neighbor)
            largest = max(largest, size)
        logger.debug("Largest cluster size: %d", largest)
        return largest
