"""
Configuration constants for the word graph tool.

Defaults for the graph algorithms and the command-line front end live here.
The log level can be overridden through the environment.
"""

import os
from pathlib import Path

# PageRank defaults
DEFAULT_DAMPING_FACTOR = 0.85
DEFAULT_ITERATIONS = 100

# Token count above which graph construction shows a progress bar
PROGRESS_THRESHOLD = 100_000

# Where the CLI saves the latest random walk transcript
RANDOM_WALK_OUTPUT_FILE = Path("random_walk_output.txt")

# Encoding used to read corpora and write transcripts
TEXT_ENCODING = "utf-8"

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("WORD_GRAPH_LOG_LEVEL", "WARNING").strip().upper()
