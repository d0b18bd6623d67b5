"""Shortest paths, spanning trees, topological order and tree centres."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass
from operator import attrgetter
from typing import Optional

INF = 99999
"""Weight that stands for a missing edge in an adjacency matrix."""


def floyd_warshall(graph: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the matrix of shortest path distances between every pair of vertices.

    ``graph`` is a square adjacency matrix where ``INF`` marks a missing edge.
    The input is not modified.
    """
    dist = [list(row) for row in graph]
    size = len(dist)
    if any(len(row) != size for row in dist):
        raise ValueError("adjacency matrix must be square")
    for k in range(size):
        via = dist[k]
        for row in dist:
            to_k = row[k]
            for j, onward in enumerate(via):
                if to_k + onward < row[j]:
                    row[j] = to_k + onward
    return dist


def format_distances(dist: Sequence[Sequence[int]]) -> str:
    """Render a distance matrix as tab-separated lines, writing ``INF`` for no path."""
    return "".join(
        "".join("INF\t" if d == INF else f"{d}\t" for d in row) + "\n" for row in dist
    )


@dataclass(frozen=True)
class Edge:
    """A weighted edge between two vertices."""

    src: int
    dest: int
    weight: int


def _check_vertex_count(vertices: int) -> None:
    if vertices < 0:
        raise ValueError("vertex count must not be negative")


def _check_vertex(vertices: int, *names: int) -> None:
    for v in names:
        if not 0 <= v < vertices:
            raise ValueError(f"vertex {v} out of range 0..{vertices - 1}")


class WeightedGraph:
    """An undirected weighted graph held as a list of edges."""

    def __init__(self, vertices: int) -> None:
        _check_vertex_count(vertices)
        self.vertices = vertices
        self.edges: list[Edge] = []

    def add_edge(self, src: int, dest: int, weight: int) -> None:
        """Add an edge of the given weight between ``src`` and ``dest``."""
        _check_vertex(self.vertices, src, dest)
        self.edges.append(Edge(src, dest, weight))

    def kruskal_mst(self) -> list[Edge]:
        """Return the edges of a minimum spanning forest, lightest first."""
        parent: list[Optional[int]] = [None] * self.vertices

        def root(v: int) -> int:
            while (up := parent[v]) is not None:
                v = up
            return v

        tree: list[Edge] = []
        for edge in sorted(self.edges, key=attrgetter("weight")):
            a, b = root(edge.src), root(edge.dest)
            if a != b:
                tree.append(edge)
                parent[a] = b
        return tree


class Digraph:
    """A directed graph held as adjacency lists."""

    def __init__(self, vertices: int) -> None:
        _check_vertex_count(vertices)
        self.vertices = vertices
        self._adjacency: list[list[int]] = [[] for _ in range(vertices)]

    def add_edge(self, v: int, w: int) -> None:
        """Add an edge from ``v`` to ``w``."""
        _check_vertex(self.vertices, v, w)
        self._adjacency[v].append(w)

    def topological_sort(self) -> list[int]:
        """Return the vertices in depth-first topological order."""
        visited = [False] * self.vertices
        finished: list[int] = []
        for start in range(self.vertices):
            if visited[start]:
                continue
            visited[start] = True
            stack = [(start, iter(self._adjacency[start]))]
            while stack:
                node, children = stack[-1]
                for child in children:
                    if not visited[child]:
                        visited[child] = True
                        stack.append((child, iter(self._adjacency[child])))
                        break
                else:
                    stack.pop()
                    finished.append(node)
        finished.reverse()
        return finished


class UndirectedGraph:
    """An undirected graph held as adjacency lists with vertex degrees."""

    def __init__(self, vertices: int) -> None:
        _check_vertex_count(vertices)
        self.vertices = vertices
        self._adjacency: list[list[int]] = [[] for _ in range(vertices)]
        self._degree = [0] * vertices

    def add_edge(self, v: int, w: int) -> None:
        """Connect ``v`` and ``w``."""
        _check_vertex(self.vertices, v, w)
        self._adjacency[v].append(w)
        self._adjacency[w].append(v)
        self._degree[v] += 1
        self._degree[w] += 1

    def roots_for_minimum_height(self) -> list[int]:
        """Return the vertices left after peeling leaves until at most two remain.

        Raises ``ValueError`` when no leaf is left to peel before that point,
        which happens when the graph is not a tree.
        """
        degree = list(self._degree)
        remaining = self.vertices
        leaves = deque(v for v, d in enumerate(degree) if d == 1)
        while remaining > 2:
            if not leaves:
                raise ValueError("graph is not a tree")
            layer = len(leaves)
            remaining -= layer
            for _ in range(layer):
                leaf = leaves.popleft()
                for neighbour in self._adjacency[leaf]:
                    degree[neighbour] -= 1
                    if degree[neighbour] == 1:
                        leaves.append(neighbour)
        return list(leaves)


__all__ = [
    "INF",
    "Digraph",
    "Edge",
    "UndirectedGraph",
    "WeightedGraph",
    "floyd_warshall",
    "format_distances",
]