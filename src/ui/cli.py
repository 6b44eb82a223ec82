"""
Word Graph CLI Module

This module provides an interactive menu for querying a word graph: showing it, finding
bridge words, generating text, computing shortest paths and PageRank, and random walks.
"""

# Standard Library Imports
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, Optional

# Local Imports
from core.bridge_words import generate_new_text
from core.config import DEFAULT_DAMPING_FACTOR, DEFAULT_ITERATIONS, RANDOM_WALK_OUTPUT_FILE, TEXT_ENCODING
from core.graph import WordGraph
from core.pagerank_graph import page_rank
from core.random_walk import random_walk
from core.shortest_path import shortest_path
from ui.formatting import describe_bridge_words, describe_shortest_path, format_graph, format_page_ranks


@dataclass
class CLIPrompts:
    """Container for CLI prompt messages"""
    welcome: str = "Word Graph Analysis"
    menu: str = (
        "\nAvailable operations:\n"
        "1. Show directed graph\n"
        "2. Query bridge words\n"
        "3. Generate new text with bridge words\n"
        "4. Shortest path between two words\n"
        "5. PageRank (d={damping_factor})\n"
        "6. Random walk\n"
        "7. Exit"
    )
    choice: str = "Enter your choice (1-7):"
    invalid_number: str = "Invalid input. Please enter a number between 1 and 7."
    invalid_choice: str = "Invalid choice, please try again."
    graph_header: str = "\n--- Directed graph ---"
    graph_footer: str = "--- End of graph ---"
    bridge_word1: str = "Enter the first word (word1):"
    bridge_word2: str = "Enter the second word (word2):"
    new_text: str = "Enter a line of new text:"
    generated_text: str = "Generated text: {text}"
    path_start: str = "Enter the start word of the shortest path:"
    path_end: str = "Enter the end word of the shortest path:"
    walk_result: str = "Random walk: {walk}"
    walk_saved: str = "Random walk saved to {path}."
    walk_save_error: str = "Error writing random walk to file: {error}"
    error: str = "Error: {error}"
    exit: str = "Exiting."


@dataclass
class CLIConfig:
    """Configuration for the CLI interface"""
    damping_factor: float = DEFAULT_DAMPING_FACTOR
    iterations: int = DEFAULT_ITERATIONS
    walk_output_file: Path = RANDOM_WALK_OUTPUT_FILE
    prompts: CLIPrompts = field(default_factory=CLIPrompts)

    def __post_init__(self):
        """Validate configuration parameters after initialization."""
        if not 0 <= self.damping_factor <= 1:
            raise ValueError("Damping factor must be between 0 and 1")
        if self.iterations < 0:
            raise ValueError("Iterations must not be negative")
        self.walk_output_file = Path(self.walk_output_file)


class UserInteraction:
    """Handles all user input"""

    @staticmethod
    def get_number(prompt: str) -> Optional[int]:
        """Get numeric input from user. Returns None if invalid."""
        try:
            return int(input(f"{prompt} ").strip())
        except ValueError:
            return None

    @staticmethod
    def get_text(prompt: str) -> str:
        """Get a line of text from user."""
        return input(f"{prompt} ").strip()


class WordGraphCLI:
    """Command-line interface for querying a word graph."""

    EXIT_CHOICE: int = 7

    def __init__(self, graph: WordGraph, config: Optional[CLIConfig] = None,
                 rng: Optional[random.Random] = None):
        self.graph = graph
        self.config = config or CLIConfig()
        self.rng = rng or random.SystemRandom()
        self.ui = UserInteraction()
        self._actions: Dict[int, Callable[[], None]] = {
            1: self.show_graph,
            2: self.query_bridge_words,
            3: self.generate_text,
            4: self.calc_shortest_path,
            5: self.show_page_ranks,
            6: self.run_random_walk,
        }

    def show_graph(self) -> None:
        print(self.config.prompts.graph_header)
        print(format_graph(self.graph))
        print(self.config.prompts.graph_footer)

    def query_bridge_words(self) -> None:
        word1 = self.ui.get_text(self.config.prompts.bridge_word1)
        word2 = self.ui.get_text(self.config.prompts.bridge_word2)
        print(describe_bridge_words(self.graph, word1, word2))

    def generate_text(self) -> None:
        text = self.ui.get_text(self.config.prompts.new_text)
        print(self.config.prompts.generated_text.format(text=generate_new_text(self.graph, text, self.rng)))

    def calc_shortest_path(self) -> None:
        word1 = self.ui.get_text(self.config.prompts.path_start)
        word2 = self.ui.get_text(self.config.prompts.path_end)
        print(describe_shortest_path(shortest_path(self.graph, word1, word2), word1, word2))

    def show_page_ranks(self) -> None:
        ranks = page_rank(self.graph, self.config.damping_factor, self.config.iterations)
        print(format_page_ranks(ranks, self.config.damping_factor))

    def run_random_walk(self) -> None:
        """Run a random walk, print it and save the transcript."""
        transcript = str(random_walk(self.graph, self.rng))
        print(self.config.prompts.walk_result.format(walk=transcript))
        self.save_walk(transcript)

    def save_walk(self, transcript: str) -> bool:
        """Write a walk transcript to the configured file. Returns False on I/O failure."""
        path = self.config.walk_output_file
        try:
            path.write_text(transcript, encoding=TEXT_ENCODING)
        except OSError as e:
            print(self.config.prompts.walk_save_error.format(error=e))
            return False
        print(self.config.prompts.walk_saved.format(path=path))
        return True

    def dispatch(self, choice: int) -> bool:
        """Run the action for a menu choice. Returns False when the user chose to exit."""
        if choice == self.EXIT_CHOICE:
            print(self.config.prompts.exit)
            return False

        action = self._actions.get(choice)
        if action is None:
            print(self.config.prompts.invalid_choice)
            return True

        try:
            action()
        except EOFError:
            raise
        except Exception as e:
            print(self.config.prompts.error.format(error=e))
        return True

    def run(self) -> None:
        """Run the interactive menu until the user exits or input ends"""
        print(self.config.prompts.welcome)

        while True:
            print(self.config.prompts.menu.format(damping_factor=self.config.damping_factor))
            try:
                choice = self.ui.get_number(self.config.prompts.choice)
            except EOFError:
                print(self.config.prompts.exit)
                break

            if choice is None:
                print(self.config.prompts.invalid_number)
                continue

            try:
                if not self.dispatch(choice):
                    break
            except EOFError:
                print(self.config.prompts.exit)
                break
