"""
Boolean operations on posting sets (AND, OR, NOT).
"""

from typing import AbstractSet, Iterable, Set
import logging

logger = logging.getLogger(__name__)


class BooleanOperations:
    """Implements boolean operations on posting sets."""

    @staticmethod
    def intersect_many(postings: Iterable[AbstractSet[int]],
                       universe: AbstractSet[int]) -> Set[int]:
        """
        Intersect posting sets, starting from the universe.
        Processes the smallest set first and stops once the result is empty.

        Args:
            postings: Posting sets, one per term
            universe: Set of every valid line number

        Returns:
            Line numbers present in every posting set (the universe when
            there are no posting sets)
        """
        result = set(universe)

        for posting_set in sorted(postings, key=len):
            result &= posting_set

            if not result:
                break

        return result

    @staticmethod
    def union_many(postings: Iterable[AbstractSet[int]]) -> Set[int]:
        """
        Union posting sets.

        Args:
            postings: Posting sets, one per term

        Returns:
            Line numbers present in any posting set
        """
        result: Set[int] = set()
        for posting_set in postings:
            result |= posting_set
        return result

    @staticmethod
    def negate(postings: Iterable[AbstractSet[int]],
               universe: AbstractSet[int]) -> Set[int]:
        """
        Lines in none of the posting sets (NOT (a OR b ...)).

        Args:
            postings: Posting sets to exclude
            universe: Set of every valid line number

        Returns:
            Universe minus the union of the posting sets
        """
        return set(universe) - BooleanOperations.union_many(postings)
