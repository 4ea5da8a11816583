#!/usr/bin/env python
"""
Demo script: build an index over examples/people.txt and run ALL / ANY / NONE queries.

Run with: python examples/demo.py
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.data.data_loader import LineLoader
from src.linesearch import LineIndex, BooleanQueryProcessor, MatchStrategy, parse_query_terms
from src.utils.result_renderer import ResultRenderer


def main():
    """Run demo queries."""
    lines = LineLoader().load_lines(Path(__file__).parent / "people.txt")
    index = LineIndex.build(lines)
    processor = BooleanQueryProcessor(index)
    renderer = ResultRenderer()

    print("="*60)
    print("Index")
    print("="*60)
    for term in sorted(index.get_vocabulary()):
        print(f"  {term!r}: {sorted(index.get_postings(term))}")

    queries = [
        (MatchStrategy.ANY, "alice"),
        (MatchStrategy.ALL, "alice jones"),
        (MatchStrategy.NONE, "bob"),
        (MatchStrategy.ANY, "smith carol@y.org"),
        (MatchStrategy.ALL, "nobody"),
    ]

    for strategy, query in queries:
        print("\n" + "="*60)
        print(f"{strategy.value}: {query}")
        print("="*60)
        line_numbers = processor.search(strategy, parse_query_terms(query))
        print(renderer.render(line_numbers, index))


if __name__ == "__main__":
    main()
