"""
PageRank over the word graph.

This module implements the damped random-surfer model on a WordGraph using a sparse
transition matrix. Rank held by dangling words (no successors) is spread evenly over
every word, dangling ones included, and the iteration always runs a fixed number of passes.
"""

# Standard Library Imports
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

# Third-Party Imports
import numpy as np
from scipy.sparse import csr_matrix

# Local Imports
from core.config import DEFAULT_DAMPING_FACTOR, DEFAULT_ITERATIONS
from core.graph import WordGraph

logger = logging.getLogger(__name__)


@dataclass
class PageRankConfig:
    """
    Configuration parameters for PageRank calculation.

    Attributes:
        damping_factor: Probability of following an edge vs. a random jump (default: 0.85)
        iterations: Exact number of update passes (default: 100)

    Raises:
        ValueError: If parameters are outside their valid ranges
    """
    damping_factor: float = DEFAULT_DAMPING_FACTOR
    iterations: int = DEFAULT_ITERATIONS

    def __post_init__(self):
        """Validate configuration parameters after initialization."""
        if not 0 <= self.damping_factor <= 1:
            raise ValueError("Damping factor must be between 0 and 1")
        if self.iterations < 0:
            raise ValueError("Iterations must not be negative")


class WordPageRank:
    """
    PageRank calculator for a word graph.

    Edge weights are ignored: each distinct successor of a word receives an equal share
    of that word's rank.
    """

    def __init__(self, graph: WordGraph, config: Optional[PageRankConfig] = None):
        """
        Initialize PageRank calculator.

        Args:
            graph: Input word graph
            config: Optional configuration parameters
        """
        self.graph = graph
        self.config = config or PageRankConfig()
        self.n = graph.node_count
        self._transition_matrix: Optional[csr_matrix] = None

    def _create_transition_matrix(self) -> csr_matrix:
        """Creates the row-stochastic transition matrix; dangling rows stay empty."""
        rows, cols, data = [], [], []

        for node_id in range(self.n):
            successors = self.graph.get_successor_ids(node_id)
            if successors:
                prob = 1.0 / len(successors)
                for target in successors:
                    rows.append(node_id)
                    cols.append(target)
                    data.append(prob)

        return csr_matrix(
            (np.array(data, dtype=float), (np.array(rows, dtype=np.int64), np.array(cols, dtype=np.int64))),
            shape=(self.n, self.n)
        )

    def _get_dangling_nodes(self) -> np.ndarray:
        """Returns a vector with 1.0 for every word without successors."""
        out_degrees = np.array([self.graph.get_out_degree(i) for i in range(self.n)])
        return (out_degrees == 0).astype(float)

    def _initialize_rank_vector(self) -> np.ndarray:
        """Initializes the rank vector with uniform probabilities."""
        return np.ones(self.n) / self.n

    def calculate_vector(self) -> np.ndarray:
        """
        Calculates PageRank values as a vector indexed by word ID.

        Returns:
            numpy array of final PageRank scores, empty for an empty graph
        """
        if self.n == 0:
            return np.zeros(0)

        self._transition_matrix = self._create_transition_matrix()
        dangling_nodes = self._get_dangling_nodes()
        rank_vector = self._initialize_rank_vector()

        d = self.config.damping_factor
        teleport = (1 - d) / self.n
        transposed = self._transition_matrix.T.tocsr()

        for _ in range(self.config.iterations):
            dangling_sum = float(np.dot(rank_vector, dangling_nodes))
            # New vector is computed entirely from the previous one
            rank_vector = teleport + d * (transposed.dot(rank_vector) + dangling_sum / self.n)

        logger.info("PageRank finished: %d words, d=%.2f, %d iterations",
                    self.n, d, self.config.iterations)
        return rank_vector

    def calculate(self) -> Dict[str, float]:
        """
        Calculates PageRank values keyed by word.

        Returns:
            Mapping from word to its final rank; empty for an empty graph
        """
        rank_vector = self.calculate_vector()
        return {self.graph.get_word(i): float(rank_vector[i]) for i in range(self.n)}


def page_rank(graph: WordGraph,
              damping_factor: float = DEFAULT_DAMPING_FACTOR,
              iterations: int = DEFAULT_ITERATIONS) -> Dict[str, float]:
    """Compute PageRank for every word of the graph."""
    config = PageRankConfig(damping_factor=damping_factor, iterations=iterations)
    return WordPageRank(graph, config).calculate()


def top_words(ranks: Dict[str, float], n: Optional[int] = None) -> List[Tuple[str, float]]:
    """
    Order words by rank, highest first.

    Args:
        ranks: Mapping from word to rank
        n: Number of words to return, all when None

    Returns:
        List of (word, rank) tuples; equal ranks are ordered by word
    """
    ordered = sorted(ranks.items(), key=lambda item: (-item[1], item[0]))
    return ordered if n is None else ordered[:n]
