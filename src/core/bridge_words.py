"""
Bridge word discovery.

A word w3 bridges word1 and word2 when the graph holds both edges word1 -> w3 and w3 -> word2.
Edge weights play no role in qualification.
"""

# Standard Library Imports
import random
from typing import List, Optional

# Local Imports
from core.graph import WordGraph
from data_processing.text_parser import tokenize


def find_bridge_words(graph: WordGraph, word1: str, word2: str) -> List[str]:
    """
    Find all bridge words between two words.

    Args:
        graph: The word graph to search
        word1: First word (case-insensitive)
        word2: Second word (case-insensitive)

    Returns:
        Bridge words sorted ascending. Empty if either word is absent or no bridge exists.
    """
    first_id = graph.get_id(word1)
    second_id = graph.get_id(word2)
    if first_id is None or second_id is None:
        return []

    bridges = [
        graph.get_word(candidate_id)
        for candidate_id in graph.get_successor_ids(first_id)
        if second_id in graph.get_successor_ids(candidate_id)
    ]
    return sorted(bridges)


def generate_new_text(graph: WordGraph, text: str, rng: Optional[random.Random] = None) -> str:
    """
    Rewrite a text by inserting a bridge word between each adjacent pair of words.

    Where several bridge words exist, one is chosen uniformly at random. Pairs without a
    bridge are left as they are.

    Args:
        graph: The word graph supplying bridge words
        text: Input text; it is tokenized the same way as a corpus
        rng: Random source, defaults to a system-entropy generator

    Returns:
        The rewritten text, or the input unchanged when it holds fewer than two words
    """
    words = tokenize(text)
    if len(words) < 2:
        return text

    rng = rng or random.SystemRandom()
    output: List[str] = []
    for current, following in zip(words, words[1:]):
        output.append(current)
        bridges = find_bridge_words(graph, current, following)
        if bridges:
            output.append(rng.choice(bridges))
    output.append(words[-1])
    return " ".join(output)
