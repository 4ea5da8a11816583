"""
Query processing: ALL / ANY / NONE matching over a LineIndex.
"""

from enum import Enum
from typing import List, Sequence, Set, Union
import logging

from .inverted_index import LineIndex
from .boolean_ops import BooleanOperations
from src.preprocessing.text_preprocessor import TextPreprocessor

logger = logging.getLogger(__name__)


class InvalidStrategyError(ValueError):
    """Raised when a strategy token is not one of ALL, ANY, NONE."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Unknown matching strategy: {token}")


class MatchStrategy(Enum):
    """How the posting sets of the query terms are combined."""
    ALL = 'ALL'
    ANY = 'ANY'
    NONE = 'NONE'

    @classmethod
    def parse(cls, token: str) -> 'MatchStrategy':
        """
        Parse a strategy token. Matching is exact and case-sensitive.

        Args:
            token: One of 'ALL', 'ANY', 'NONE'

        Returns:
            The matching MatchStrategy

        Raises:
            InvalidStrategyError: If token is anything else
        """
        try:
            return cls(token)
        except ValueError:
            raise InvalidStrategyError(token) from None


def parse_query_terms(query: str) -> List[str]:
    """Lowercase a raw query line and split it into terms."""
    return TextPreprocessor().preprocess(query)


class BooleanQueryProcessor:
    """
    Evaluates ALL / ANY / NONE queries against a LineIndex.
    Never modifies the index.
    """

    def __init__(self, index: LineIndex):
        """
        Initialize query processor.

        Args:
            index: LineIndex to query
        """
        self.index = index

    def search(self, strategy: Union[MatchStrategy, str], terms: Sequence[str]) -> Set[int]:
        """
        Find line numbers matching terms under strategy.

        Args:
            strategy: MatchStrategy or its literal name
            terms: Lowercased query terms

        Returns:
            Set of matching line numbers

        Raises:
            InvalidStrategyError: If strategy is not a MatchStrategy or
                one of its literal names
        """
        if isinstance(strategy, str):
            strategy = MatchStrategy.parse(strategy)

        if strategy is MatchStrategy.ALL:
            result = self.search_all(terms)
        elif strategy is MatchStrategy.ANY:
            result = self.search_any(terms)
        elif strategy is MatchStrategy.NONE:
            result = self.search_none(terms)
        else:
            raise InvalidStrategyError(str(strategy))

        logger.debug(f"{strategy.value} {list(terms)} -> {len(result)} lines")
        return result

    def search_query(self, strategy: Union[MatchStrategy, str], query: str) -> Set[int]:
        """Search with a raw, space separated query line."""
        return self.search(strategy, parse_query_terms(query))

    def search_all(self, terms: Sequence[str]) -> Set[int]:
        """Lines containing every term."""
        return BooleanOperations.intersect_many(
            [self.index.get_postings(term) for term in terms],
            self.index.universe()
        )

    def search_any(self, terms: Sequence[str]) -> Set[int]:
        """Lines containing at least one term."""
        return BooleanOperations.union_many(
            self.index.get_postings(term) for term in terms
        )

    def search_none(self, terms: Sequence[str]) -> Set[int]:
        """Lines containing none of the terms."""
        return BooleanOperations.negate(
            (self.index.get_postings(term) for term in terms),
            self.index.universe()
        )
