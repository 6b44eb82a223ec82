"""
Random walk over the word graph.

The walk starts at a uniformly chosen word and keeps following uniformly chosen
outgoing edges until it reaches a word without successors or picks an edge it has
already traversed. Edge weights do not bias the choice.
"""

# Standard Library Imports
import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Set, Tuple

# Local Imports
from core.graph import WordGraph

logger = logging.getLogger(__name__)


class WalkTermination(Enum):
    """Reasons a random walk stops, with their display messages"""
    EMPTY_GRAPH = "the graph is empty, no random walk is possible"
    NO_OUT_EDGES = "walk stopped: current word has no out-edges"
    REPEATED_EDGE = "walk stopped: repeated edge"


@dataclass(frozen=True)
class WalkResult:
    """
    Result of a single random walk.

    Attributes:
        path: Visited words in order; for REPEATED_EDGE the last word is the repeated edge's target
        termination: Why the walk stopped
    """
    termination: WalkTermination
    path: List[str] = field(default_factory=list)

    @property
    def edges(self) -> List[Tuple[str, str]]:
        """Edges in the order they were traversed, the repeated one included."""
        return list(zip(self.path, self.path[1:]))

    def __str__(self) -> str:
        if self.termination is WalkTermination.EMPTY_GRAPH:
            return self.termination.value
        return f"{' '.join(self.path)} ({self.termination.value})"


def random_walk(graph: WordGraph, rng: Optional[random.Random] = None) -> WalkResult:
    """
    Walk the graph from a random word until a dead end or a repeated edge.

    Terminates within (number of distinct edges + 1) steps, since every step either ends
    the walk or uses an edge not traversed before.

    Args:
        graph: The word graph to walk
        rng: Random source; defaults to a system-entropy generator. Pass a seeded
            random.Random for reproducible walks.

    Returns:
        WalkResult with the visited words and the termination reason
    """
    if graph.node_count == 0:
        return WalkResult(WalkTermination.EMPTY_GRAPH)

    rng = rng or random.SystemRandom()
    current = rng.choice(sorted(graph.all_words()))
    path: List[str] = [current]
    visited_edges: Set[Tuple[str, str]] = set()

    while True:
        successors = graph.get_successors(current)
        if not successors:
            termination = WalkTermination.NO_OUT_EDGES
            break

        following = rng.choice(sorted(successors))
        edge = (current, following)
        if edge in visited_edges:
            path.append(following)
            termination = WalkTermination.REPEATED_EDGE
            break

        visited_edges.add(edge)
        path.append(following)
        current = following

    logger.debug("Random walk of %d words ended: %s", len(path), termination.name)
    return WalkResult(termination, path)
