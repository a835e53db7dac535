"""Counting paths through a cave system."""

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass, field

START = "start"
END = "end"


class MalformedEdge(ValueError):
    """Raised when an edge line cannot be parsed."""


def _is_big(name: str) -> bool:
    return name.upper() == name


@dataclass
class Graph:
    edges: dict[str, list[str]] = field(default_factory=dict)

    def _neighbours(self, node: str) -> list[str]:
        try:
            return self.edges[node]
        except KeyError:
            raise ValueError(f"cave {node!r} is not connected") from None

    def _count_from(self, node: str, visited: frozenset[str], double_visit: bool) -> int:
        if node == END:
            return 1
        visited = visited | {node}
        paths = 0
        for neighbour in self._neighbours(node):
            if _is_big(neighbour) or neighbour not in visited:
                paths += self._count_from(neighbour, visited, double_visit)
            elif double_visit and neighbour not in (START, END):
                paths += self._count_from(neighbour, visited, False)
        return paths

    def count_paths(self, allow_double_visit: bool) -> int:
        """Paths from start to end; small caves are visited at most once,
        except that one may be visited twice when allowed."""
        return self._count_from(START, frozenset(), allow_double_visit)


def parse_edge(text: str) -> tuple[str, str]:
    """Parse a line such as ``start-A`` into its two cave names."""
    parts = text.split("-")
    if len(parts) < 2:
        raise MalformedEdge(f"invalid edge: {text!r}")
    return parts[0], parts[1]


def build_graph(edges: Iterable[tuple[str, str]]) -> Graph:
    """Build an undirected graph from edges."""
    adjacency: defaultdict[str, list[str]] = defaultdict(list)
    for a, b in edges:
        adjacency[a].append(b)
        adjacency[b].append(a)
    return Graph(dict(adjacency))


def part1(edges: Iterable[tuple[str, str]]) -> int:
    return build_graph(edges).count_paths(False)


def part2(edges: Iterable[tuple[str, str]]) -> int:
    return build_graph(edges).count_paths(True)