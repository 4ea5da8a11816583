from typing import AbstractSet, Iterable

from src.linesearch import LineIndex

NO_MATCHES_MESSAGE = "No matching data found."


class ResultRenderer:
    """Formats matched line numbers as text for display."""

    def __init__(self, sort_results: bool = True):
        """
        Args:
            sort_results: Show matches in ascending line order
        """
        self.sort_results = sort_results

    def _ordered(self, line_numbers: AbstractSet[int]) -> Iterable[int]:
        return sorted(line_numbers) if self.sort_results else line_numbers

    def render(self, line_numbers: AbstractSet[int], index: LineIndex) -> str:
        """
        Render a search result.

        Args:
            line_numbers: Matching line numbers
            index: Index the line numbers refer to

        Returns:
            Count header followed by the matching lines, or a no matches
            message when there are none
        """
        if not line_numbers:
            return NO_MATCHES_MESSAGE + "\n"

        body = "\n".join(index.get_line(i) for i in self._ordered(line_numbers))
        return f"\n{len(line_numbers)} persons found:\n{body}\n"

    @staticmethod
    def render_all(index: LineIndex) -> str:
        """Render every indexed line under a header."""
        return "\n".join(("=== List of data ===",) + index.lines) + "\n"
