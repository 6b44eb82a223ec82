"""
Word-adjacency graph implementation.

This module provides a directed, weighted graph whose nodes are lowercase words and whose
edges count how often one word immediately follows another in a text.

Example:
    >>> graph = WordGraph.from_words(["to", "be", "or", "not", "to", "be"])
    >>> print(graph.get_successors("to"))  # Shows words that follow "to" with their counts
    {'be': 2}
"""

# Standard Library Imports
import logging
from types import MappingProxyType
from typing import Dict, FrozenSet, Set, List, Iterator, Iterable, Mapping, Optional, Sequence, Tuple

# Third-Party Imports
from tqdm import tqdm

# Local Imports
from core.config import PROGRESS_THRESHOLD

logger = logging.getLogger(__name__)


class GraphFrozenError(RuntimeError):
    """Raised when a frozen graph is asked to grow."""


class WordGraph:
    """
    A directed, weighted word graph using adjacency lists.

    Words are identified by dense integer IDs starting from zero, assigned on first sight
    and never reused. Successors carry edge weights, predecessors are plain sets.
    All word lookups are case-insensitive.
    """

    def __init__(self) -> None:
        """Initialize an empty graph."""
        self._word_to_id: Dict[str, int] = {}
        self._id_to_word: List[str] = []
        self._successors: List[Dict[int, int]] = []
        self._predecessors: List[Set[int]] = []
        self._frozen: bool = False

    def _get_or_create_id(self, word: str) -> int:
        """Return the ID of a word, creating the node on first occurrence."""
        key = word.lower()
        node_id = self._word_to_id.get(key)
        if node_id is None:
            node_id = len(self._id_to_word)
            self._word_to_id[key] = node_id
            self._id_to_word.append(key)
            self._successors.append({})
            self._predecessors.append(set())
        return node_id

    def _ensure_mutable(self) -> None:
        if self._frozen:
            raise GraphFrozenError("Graph construction has been completed; no further edges can be added")

    def add_word(self, word: str) -> int:
        """
        Add an isolated word to the graph if it doesn't already exist.

        Args:
            word: The word to add (case-insensitive).

        Returns:
            int: The ID of the word.

        Raises:
            GraphFrozenError: If the graph has been frozen.
        """
        self._ensure_mutable()
        return self._get_or_create_id(word)

    def add_edge(self, from_word: str, to_word: str) -> None:
        """
        Record that from_word is immediately followed by to_word.

        Creates both words if they don't exist. Repeating a pair increments the weight
        of the existing edge instead of adding a parallel one.

        Args:
            from_word: Source word
            to_word: Target word

        Raises:
            GraphFrozenError: If the graph has been frozen.
        """
        self._ensure_mutable()
        from_id = self._get_or_create_id(from_word)
        to_id = self._get_or_create_id(to_word)

        successors = self._successors[from_id]
        successors[to_id] = successors.get(to_id, 0) + 1
        self._predecessors[to_id].add(from_id)

    def freeze(self) -> 'WordGraph':
        """Complete construction; the graph is read-only afterwards."""
        self._frozen = True
        logger.debug("Graph frozen with %d words and %d edges", self.node_count, self.edge_count)
        return self

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def get_id(self, word: str) -> Optional[int]:
        """Get the ID of a word, or None if the word is not in the graph."""
        return self._word_to_id.get(word.lower())

    def get_word(self, node_id: int) -> Optional[str]:
        """Get the word for an ID, or None if the ID is unknown."""
        return self._id_to_word[node_id] if self._has_id(node_id) else None

    def _has_id(self, node_id: int) -> bool:
        return 0 <= node_id < len(self._id_to_word)

    def has_node(self, word: str) -> bool:
        """Check if a word exists in the graph."""
        return word.lower() in self._word_to_id

    def has_edge(self, from_word: str, to_word: str) -> bool:
        """Check if an edge exists between two words."""
        return self.get_edge_weight(from_word, to_word) > 0

    def get_edge_weight(self, from_word: str, to_word: str) -> int:
        """Get the weight of an edge, 0 if either word or the edge is absent."""
        from_id = self.get_id(from_word)
        to_id = self.get_id(to_word)
        if from_id is None or to_id is None:
            return 0
        return self._successors[from_id].get(to_id, 0)

    def get_successors(self, word: str) -> Dict[str, int]:
        """Get the words following the specified word, mapped to edge weights."""
        node_id = self.get_id(word)
        if node_id is None:
            return {}
        return {self._id_to_word[succ_id]: weight for succ_id, weight in self._successors[node_id].items()}

    def get_successor_ids(self, node_id: int) -> Mapping[int, int]:
        """Get a read-only view of the successor IDs of a node mapped to edge weights."""
        return MappingProxyType(self._successors[node_id] if self._has_id(node_id) else {})

    def get_predecessor_ids(self, node_id: int) -> FrozenSet[int]:
        """Get the IDs of all nodes that point to the specified node."""
        return frozenset(self._predecessors[node_id]) if self._has_id(node_id) else frozenset()

    def get_predecessors(self, word: str) -> Set[str]:
        """Get the words that are immediately followed by the specified word."""
        node_id = self.get_id(word)
        if node_id is None:
            return set()
        return {self._id_to_word[pred_id] for pred_id in self._predecessors[node_id]}

    def get_out_degree(self, node_id: int) -> int:
        """Get the number of distinct successors of a node."""
        return len(self.get_successor_ids(node_id))

    def get_in_degree(self, node_id: int) -> int:
        """Get the number of distinct predecessors of a node."""
        return len(self._predecessors[node_id]) if self._has_id(node_id) else 0

    def all_words(self) -> Set[str]:
        """Get a copy of the set of all words in the graph."""
        return set(self._word_to_id)

    def iter_words(self) -> Iterator[str]:
        """Iterate over all words in ID order."""
        return iter(self._id_to_word)

    @property
    def node_count(self) -> int:
        """Get the total number of words in the graph."""
        return len(self._id_to_word)

    @property
    def edge_count(self) -> int:
        """Get the number of distinct directed edges."""
        return sum(len(successors) for successors in self._successors)

    @classmethod
    def from_edge_list(cls, edges: Iterable[Tuple[str, str]]) -> 'WordGraph':
        """
        Create a graph from explicit word pairs.

        Args:
            edges: Iterable of (from_word, to_word) pairs; repeated pairs raise the weight

        Returns:
            WordGraph: A new, unfrozen graph instance
        """
        graph: WordGraph = cls()
        for from_word, to_word in edges:
            graph.add_edge(from_word, to_word)
        return graph

    @classmethod
    def from_words(cls, words: Sequence[str], freeze: bool = False) -> 'WordGraph':
        """
        Create a graph from a token sequence by linking every consecutive pair.

        A single word becomes an isolated node. A progress bar is shown for long sequences.

        Args:
            words: Ordered word tokens
            freeze: Whether to freeze the graph once built

        Returns:
            WordGraph: A new graph instance
        """
        graph: WordGraph = cls()
        if len(words) == 1:
            graph.add_word(words[0])

        pairs = zip(words, words[1:])
        if len(words) > PROGRESS_THRESHOLD:
            pairs = tqdm(pairs, total=len(words) - 1, desc="Building graph", unit="edge")

        for from_word, to_word in pairs:
            graph.add_edge(from_word, to_word)

        logger.info("Built graph with %d words and %d edges from %d tokens",
                    graph.node_count, graph.edge_count, len(words))
        return graph.freeze() if freeze else graph

    def __len__(self) -> int:
        return self.node_count

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.has_node(word)

    def __str__(self):
        """
        Create a string representation of the graph showing adjacency lists.

        Returns:
            str: A string showing each word and its weighted outgoing edges
        """
        adjacency_representation: str = ""
        for word in sorted(self._id_to_word):
            successors = self.get_successors(word)
            adjacency_representation += f"{word}: {sorted(successors.items())}\n"
        return adjacency_representation
