"""
Line search - in-memory inverted index over the lines of a text file.
"""

from .inverted_index import LineIndex, build_index
from .boolean_ops import BooleanOperations
from .query_processor import (
    InvalidStrategyError,
    MatchStrategy,
    BooleanQueryProcessor,
    parse_query_terms
)

__all__ = [
    'LineIndex',
    'build_index',

    'BooleanOperations',
    'InvalidStrategyError',
    'MatchStrategy',
    'BooleanQueryProcessor',
    'parse_query_terms',
]
