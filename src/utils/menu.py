"""
Interactive text menu for searching an index.
"""

import logging
from typing import Callable

from src.linesearch import BooleanQueryProcessor, InvalidStrategyError, LineIndex, parse_query_terms
from .result_renderer import ResultRenderer

logger = logging.getLogger(__name__)

MENU = """=== Menu ===
1. Find a person
2. Print all people
0. Exit"""


class MenuSession:
    """
    Menu loop reading commands from input_fn and writing to output_fn.

    Commands: 1 = search, 2 = list all lines, 0 = exit.
    """

    def __init__(self, index: LineIndex, renderer: ResultRenderer = None,
                 input_fn: Callable[[], str] = None,
                 output_fn: Callable[[str], None] = None):
        self.index = index
        self.processor = BooleanQueryProcessor(index)
        self.renderer = renderer or ResultRenderer()
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print

    def run(self):
        """Run until the exit command or end of input."""
        while True:
            self.output_fn(MENU)
            try:
                raw_command = self.input_fn()
            except EOFError:
                logger.debug("Input closed, leaving menu")
                break
            self.output_fn("")

            try:
                command = int(raw_command.strip())
            except ValueError:
                command = None

            if command == 0:
                self.output_fn("Bye!")
                break

            try:
                if command == 1:
                    self.search()
                elif command == 2:
                    self.output_fn(self.renderer.render_all(self.index))
                else:
                    self.output_fn("Incorrect option! Try again.")
            except EOFError:
                logger.debug("Input closed during search")
                break

    def search(self):
        """Prompt for a strategy and terms, then show the matches."""
        self.output_fn("Select a matching strategy: ALL, ANY, NONE")
        strategy = self.input_fn()

        self.output_fn("Enter a name or email to search all suitable people.")
        terms = parse_query_terms(self.input_fn())

        try:
            line_numbers = self.processor.search(strategy, terms)
        except InvalidStrategyError as e:
            logger.warning(str(e))
            self.output_fn(str(e))
            return

        self.output_fn(self.renderer.render(line_numbers, self.index))
