"""
Text Parser Module

This module turns raw text into the word sequence the word graph is built from, and loads
corpora from disk. Loading failures are reported as values so the caller can decide how to
present them.
"""

# Standard Library Imports
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

# Local Imports
from core.config import TEXT_ENCODING

logger = logging.getLogger(__name__)

MIN_CORPUS_WORDS: int = 2


def tokenize(text: Optional[str]) -> List[str]:
    """
    Split text into lowercase words.

    Every character that is not a letter acts as a separator and runs of separators
    collapse, so no empty tokens are produced.

    Args:
        text: Raw text, may be None or empty

    Returns:
        Ordered list of lowercase words
    """
    if not text:
        return []
    letters_only = "".join(char if char.isalpha() else " " for char in text.lower())
    return letters_only.split()


class LoadError(Enum):
    """Kinds of corpus loading failure with their display messages"""
    NOT_FOUND = "File not found: {path}"
    UNREADABLE = "Error reading file {path}: {detail}"
    TOO_FEW_WORDS = "The file {path} does not contain enough words to form a graph edge"


@dataclass(frozen=True)
class CorpusLoadResult:
    """Outcome of loading a corpus: either its words or an error."""
    path: Path
    words: List[str] = field(default_factory=list)
    error: Optional[LoadError] = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        """Human-readable description of the error, empty on success."""
        if self.error is None:
            return ""
        return self.error.value.format(path=self.path, detail=self.detail)


@dataclass
class CorpusConfig:
    """Configuration for reading a corpus file"""
    path: Path
    encoding: str = TEXT_ENCODING
    min_words: int = MIN_CORPUS_WORDS

    def __post_init__(self):
        """Normalize the path and validate the word minimum."""
        self.path = Path(self.path)
        if self.min_words < 0:
            raise ValueError("Minimum word count must not be negative")


class CorpusLoader:
    """Reads a text file and tokenizes it for graph construction."""

    def __init__(self, config: CorpusConfig) -> None:
        self.config = config

    def load(self) -> CorpusLoadResult:
        """
        Read and tokenize the configured corpus.

        Returns:
            CorpusLoadResult holding the words, or the reason they could not be produced
        """
        path = self.config.path
        if not path.is_file():
            return CorpusLoadResult(path, error=LoadError.NOT_FOUND)

        try:
            content = path.read_text(encoding=self.config.encoding)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Failed to read corpus %s: %s", path, e)
            return CorpusLoadResult(path, error=LoadError.UNREADABLE, detail=str(e))

        words = tokenize(content)
        logger.info("Read %d words from %s", len(words), path)
        if len(words) < self.config.min_words:
            return CorpusLoadResult(path, words=words, error=LoadError.TOO_FEW_WORDS)

        return CorpusLoadResult(path, words=words)


def load_corpus(path: Path, encoding: str = TEXT_ENCODING) -> CorpusLoadResult:
    """Load and tokenize a corpus file with default settings."""
    return CorpusLoader(CorpusConfig(path=path, encoding=encoding)).load()
