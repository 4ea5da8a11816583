"""
Core inverted index data structure for line search.
"""

from typing import Dict, FrozenSet, Iterable, Set, Tuple
from collections import defaultdict
import logging

from tqdm import tqdm

from src.preprocessing.text_preprocessor import TextPreprocessor

logger = logging.getLogger(__name__)


class LineIndex:
    """
    Inverted index over an ordered sequence of lines.
    Maps lowercased terms to the set of line numbers containing them.

    Instances are built once with ``LineIndex.build`` and never modified.
    """

    def __init__(self, lines: Tuple[str, ...], dictionary: Dict[str, FrozenSet[int]]):
        """
        Initialize index from already computed postings.

        Args:
            lines: The indexed lines, position is the line number
            dictionary: Term -> posting set mapping
        """
        self._lines = lines
        self._dictionary = dictionary
        self._universe = frozenset(range(len(lines)))

    @classmethod
    def build(cls, lines: Iterable[str], show_progress: bool = False) -> 'LineIndex':
        """
        Build an index from lines.

        Args:
            lines: Ordered lines; line numbers are 0-based positions
            show_progress: Whether to display a progress bar

        Returns:
            A new LineIndex
        """
        lines = tuple(lines)
        preprocessor = TextPreprocessor()
        postings: Dict[str, Set[int]] = defaultdict(set)

        for line_number, line in enumerate(
            tqdm(lines, desc="Indexing lines", disable=not show_progress)
        ):
            for term in preprocessor.preprocess(line):
                postings[term].add(line_number)

        index = cls(lines, {term: frozenset(ids) for term, ids in postings.items()})
        logger.info(f"Built index over {index.line_count} lines "
                    f"({index.get_vocabulary_size()} distinct terms)")
        return index

    @property
    def lines(self) -> Tuple[str, ...]:
        """All indexed lines in load order."""
        return self._lines

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, line_number: int) -> str:
        """Get the original text of a line."""
        return self._lines[line_number]

    def universe(self) -> FrozenSet[int]:
        """Set of every valid line number."""
        return self._universe

    def get_postings(self, term: str) -> FrozenSet[int]:
        """
        Get posting set for a term.

        Args:
            term: The (lowercased) term to look up

        Returns:
            Line numbers containing the term, empty if the term is unknown
        """
        return self._dictionary.get(term, frozenset())

    def get_document_frequency(self, term: str) -> int:
        """Get number of lines containing term."""
        return len(self.get_postings(term))

    def contains_term(self, term: str) -> bool:
        """Check if term exists in vocabulary."""
        return term in self._dictionary

    def get_vocabulary(self) -> Set[str]:
        """Get all terms in the index."""
        return set(self._dictionary.keys())

    def get_vocabulary_size(self) -> int:
        """Get size of vocabulary (number of unique terms)."""
        return len(self._dictionary)

    def to_mapping(self) -> Dict[str, Set[int]]:
        """Copy of the term -> line numbers mapping."""
        return {term: set(ids) for term, ids in self._dictionary.items()}

    def get_statistics(self) -> Dict:
        """Get index statistics."""
        total_postings = sum(len(ids) for ids in self._dictionary.values())
        preprocessor = TextPreprocessor()
        total_tokens = sum(len(preprocessor.preprocess(line)) for line in self._lines)

        return {
            'num_lines': self.line_count,
            'vocabulary_size': len(self._dictionary),
            'total_tokens': total_tokens,
            'avg_postings_length': total_postings / len(self._dictionary) if self._dictionary else 0,
        }

    def __eq__(self, other):
        if not isinstance(other, LineIndex):
            return NotImplemented
        return self._lines == other._lines and self._dictionary == other._dictionary

    def __hash__(self):
        return hash(self._lines)

    def __len__(self):
        return self.line_count

    def __repr__(self):
        return f"LineIndex(lines={self.line_count}, terms={self.get_vocabulary_size()})"


def build_index(lines: Iterable[str], show_progress: bool = False) -> Dict[str, Set[int]]:
    """
    Build the term -> line numbers mapping for lines.

    Args:
        lines: Ordered lines
        show_progress: Whether to display a progress bar

    Returns:
        Mapping from lowercased term to the set of line numbers containing it
    """
    return LineIndex.build(lines, show_progress=show_progress).to_mapping()
