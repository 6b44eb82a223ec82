"""
Formatting of word graph query results for the command-line interface.
"""

# Standard Library Imports
from typing import Dict, List

# Local Imports
from core.bridge_words import find_bridge_words
from core.graph import WordGraph
from core.pagerank_graph import top_words
from core.shortest_path import PathStatus, ShortestPathResult


def format_graph(graph: WordGraph) -> str:
    """Render the adjacency lists sorted by word, successors with their weights."""
    if graph.node_count == 0:
        return "(graph is empty)"

    lines: List[str] = []
    for word in sorted(graph.all_words()):
        successors = graph.get_successors(word)
        if not successors:
            lines.append(f"{word} -> (no out-edges)")
            continue
        targets = ", ".join(f"{target}(weight: {successors[target]})" for target in sorted(successors))
        lines.append(f"{word} -> {{{targets}}}")
    return "\n".join(lines)


def _quote(word: str) -> str:
    return f'"{word}"'


def describe_bridge_words(graph: WordGraph, word1: str, word2: str) -> str:
    """
    Describe the bridge words between two words, telling unknown words apart from missing bridges.

    The user's spelling of word1 and word2 is echoed back unchanged.
    """
    first_exists = graph.has_node(word1)
    second_exists = graph.has_node(word2)

    if not first_exists and not second_exists:
        return f"No {_quote(word1)} and {_quote(word2)} in the graph!"
    if not first_exists:
        return f"No {_quote(word1)} in the graph!"
    if not second_exists:
        return f"No {_quote(word2)} in the graph!"

    bridges = find_bridge_words(graph, word1, word2)
    if not bridges:
        return f"No bridge words from {_quote(word1)} to {_quote(word2)}!"
    if len(bridges) == 1:
        return f"The bridge word from {_quote(word1)} to {_quote(word2)} is: {_quote(bridges[0])}."

    quoted = [_quote(bridge) for bridge in bridges]
    listing = ", ".join(quoted[:-1]) + ", and " + quoted[-1]
    return f"The bridge words from {_quote(word1)} to {_quote(word2)} are: {listing}."


def describe_shortest_path(result: ShortestPathResult, word1: str, word2: str) -> str:
    """Describe a shortest path result for display."""
    if result.status is PathStatus.UNKNOWN_WORD:
        return "One or both words are not in the graph."
    if result.status is PathStatus.UNREACHABLE:
        return f"No path from {_quote(word1)} to {_quote(word2)} (unreachable)."
    return f"Shortest path: {' -> '.join(result.path)}\nPath length: {result.distance}"


def format_page_ranks(ranks: Dict[str, float], damping_factor: float) -> str:
    """List PageRank values in descending order with five decimals."""
    if not ranks:
        return "The graph is empty; PageRank cannot be computed."
    lines = [f"PageRank values (d={damping_factor}, highest first):"]
    lines.extend(f"- {word}: {rank:.5f}" for word, rank in top_words(ranks))
    return "\n".join(lines)
