"""
Main Entry Point for the Word Graph Analysis Tool

This script reads a text file, builds the word-adjacency graph from consecutive word pairs
and runs the command-line interface (CLI) for querying it.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from core.config import LOG_LEVEL
from core.graph import WordGraph
from data_processing.text_parser import load_corpus
from ui.cli import CLIConfig, WordGraphCLI


def prompt_for_corpus_path() -> Path:
    """Ask the user for the path of the text file."""
    return Path(input("Enter the path of the text file: ").strip())


def build_graph(corpus_path: Path) -> Optional[WordGraph]:
    """
    Load the corpus and build a frozen word graph from it.

    Args:
        corpus_path: Path to the text file

    Returns:
        Optional[WordGraph]: The graph, or None if the corpus could not be used
    """
    result = load_corpus(corpus_path)
    if not result.ok:
        print(result.message, file=sys.stderr)
        return None

    graph = WordGraph.from_words(result.words, freeze=True)
    print(f"Graph built from {corpus_path}: {graph.node_count} words, {graph.edge_count} edges.")
    return graph


def configure_logging(level_name: str) -> None:
    """
    Configure root logging from a level name such as "info" or "DEBUG".

    Raises:
        ValueError: If the name is not a known logging level
    """
    level = logging.getLevelName(level_name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {level_name!r}")
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build a word graph from a text file and query it.")
    parser.add_argument("corpus", nargs="?", type=Path, help="Path of the text file (prompted if omitted)")
    parser.add_argument("--output", type=Path, default=None, help="File for the random walk transcript")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None):
    """Main entry point for the word graph tool."""
    args = parse_args(argv)

    try:
        configure_logging(LOG_LEVEL)
        corpus_path = args.corpus or prompt_for_corpus_path()
        graph = build_graph(corpus_path)
        if graph is None:
            sys.exit(1)

        config = CLIConfig() if args.output is None else CLIConfig(walk_output_file=args.output)
        cli = WordGraphCLI(graph, config)
        cli.run()

    except KeyboardInterrupt:
        print("\nProgram terminated by user")
        sys.exit(0)
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
