"""
Shortest weighted path between two words.

Dijkstra's algorithm restricted to a single target. Edge weights are occurrence counts
and therefore always positive, so the first time the target leaves the queue its
distance is optimal.
"""

# Standard Library Imports
import heapq
import itertools
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Tuple

# Local Imports
from core.graph import WordGraph

logger = logging.getLogger(__name__)

NO_DISTANCE: int = -1


class PathStatus(Enum):
    """Outcome of a shortest path query"""
    FOUND = "found"
    UNKNOWN_WORD = "one or both words are not in the graph"
    UNREACHABLE = "no path between the words"


@dataclass(frozen=True)
class ShortestPathResult:
    """
    Tagged result of a shortest path query.

    Attributes:
        status: Which outcome the query reached
        path: Words from source to target, empty unless found
        distance: Sum of edge weights along the path, NO_DISTANCE unless found
    """
    status: PathStatus
    path: List[str] = field(default_factory=list)
    distance: int = NO_DISTANCE

    @property
    def found(self) -> bool:
        return self.status is PathStatus.FOUND

    @classmethod
    def unknown_word(cls) -> 'ShortestPathResult':
        return cls(PathStatus.UNKNOWN_WORD)

    @classmethod
    def unreachable(cls) -> 'ShortestPathResult':
        return cls(PathStatus.UNREACHABLE)


def shortest_path(graph: WordGraph, word1: str, word2: str) -> ShortestPathResult:
    """
    Find a minimum-weight path from word1 to word2.

    Each queue entry carries a copy of the path taken to reach it. Among several paths of
    equal weight, whichever the heap yields first is returned.

    Args:
        graph: The word graph to search
        word1: Source word (case-insensitive)
        word2: Target word (case-insensitive)

    Returns:
        ShortestPathResult with status FOUND, UNKNOWN_WORD or UNREACHABLE
    """
    start_id = graph.get_id(word1)
    end_id = graph.get_id(word2)
    if start_id is None or end_id is None:
        return ShortestPathResult.unknown_word()

    if start_id == end_id:
        return ShortestPathResult(PathStatus.FOUND, [graph.get_word(start_id)], 0)

    distances: Dict[int, int] = {start_id: 0}
    # The counter keeps entries comparable without ever comparing paths
    counter = itertools.count()
    queue: List[Tuple[int, int, int, List[int]]] = [(0, next(counter), start_id, [start_id])]

    while queue:
        distance, _, node_id, path = heapq.heappop(queue)

        if distance > distances[node_id]:
            continue

        if node_id == end_id:
            logger.debug("Shortest path %s -> %s found with distance %d", word1, word2, distance)
            return ShortestPathResult(PathStatus.FOUND, [graph.get_word(i) for i in path], distance)

        for neighbor_id, weight in graph.get_successor_ids(node_id).items():
            candidate = distance + weight
            if candidate < distances.get(neighbor_id, candidate + 1):
                distances[neighbor_id] = candidate
                heapq.heappush(queue, (candidate, next(counter), neighbor_id, path + [neighbor_id]))

    return ShortestPathResult.unreachable()
