#!/usr/bin/env python
"""
Main entry point for line search.
Uses Fire for CLI and Hydra for configuration management.
"""

import os
import sys
import logging
from pathlib import Path
import fire
import hydra
from omegaconf import OmegaConf
from dotenv import load_dotenv

# Load .env variables and register resolver
load_dotenv()
OmegaConf.register_new_resolver("env", os.getenv)

# Add src to path
sys.path.insert(0, str(Path(__file__).parent))

from src.data.data_loader import LineLoader
from src.linesearch import BooleanQueryProcessor, InvalidStrategyError, LineIndex, parse_query_terms
from src.utils.menu import MenuSession
from src.utils.result_renderer import ResultRenderer


class LineSearchCLI:
    """CLI for searching the lines of a text file."""

    def __init__(self, config_path: str = "conf", config_name: str = "config",
                 verbose: bool = False):
        """
        Initialize CLI with configuration.

        Args:
            config_path: Path to config directory
            config_name: Name of main config file
            verbose: Log at INFO level instead of the configured level
        """
        self.config_path = config_path
        self.config_name = config_name
        self.verbose = verbose
        self.config = None
        self.logger = None

    def _init_config(self, overrides=None):
        """Initialize Hydra configuration."""
        overrides = list(overrides or [])
        if self.verbose:
            overrides.append("logging.level=INFO")

        with hydra.initialize(version_base=None, config_path=self.config_path):
            self.config = hydra.compose(config_name=self.config_name, overrides=overrides)

        # Setup logging
        logging.basicConfig(
            level=getattr(logging, self.config.logging.level),
            format=self.config.logging.format
        )
        self.logger = logging.getLogger(__name__)

    def _load_index(self, data: str = None) -> LineIndex:
        """
        Load the data file and build its index.
        A missing file is reported and yields an empty index.

        Args:
            data: Path to the data file (defaults to data.path from config)
        """
        self._init_config()

        data_path = data if data is not None else self.config.data.path
        loader = LineLoader.from_config(self.config)

        lines = []
        if data_path is None:
            self.logger.warning("No data file given, use --data or set LINESEARCH_DATA")
            print("File not found.")
        else:
            try:
                lines = loader.load_lines(str(data_path))
            except FileNotFoundError as e:
                self.logger.warning(str(e))
                print("File not found.")

        return LineIndex.build(lines, show_progress=self.config.indexing.show_progress)

    def _renderer(self) -> ResultRenderer:
        return ResultRenderer(sort_results=self.config.search.sort_results)

    def interactive(self, data: str = None):
        """
        Run the interactive search menu.

        Args:
            data: Path to the data file
        """
        index = self._load_index(data)
        MenuSession(index, renderer=self._renderer()).run()

    def search(self, strategy: str, query: str = "", data: str = None):
        """
        Run a single search and print the matching lines.

        Args:
            strategy: Matching strategy (ALL, ANY, NONE)
            query: Space separated search terms
            data: Path to the data file
        """
        index = self._load_index(data)
        processor = BooleanQueryProcessor(index)

        # Fire converts numeric arguments, terms are always text
        terms = parse_query_terms(str(query))

        try:
            line_numbers = processor.search(str(strategy), terms)
        except InvalidStrategyError as e:
            self.logger.error(str(e))
            print(str(e))
            return

        self.logger.info(f"Query: {strategy} {terms} -> {len(line_numbers)} matches")
        print(self._renderer().render(line_numbers, index))

    def list_lines(self, data: str = None):
        """
        Print all lines of the data file.

        Args:
            data: Path to the data file
        """
        index = self._load_index(data)
        print(ResultRenderer.render_all(index))

    def stats(self, data: str = None):
        """
        Show index statistics.

        Args:
            data: Path to the data file
        """
        index = self._load_index(data)
        statistics = index.get_statistics()

        self.logger.info("=" * 60)
        self.logger.info("INDEX STATISTICS")
        self.logger.info("=" * 60)
        for key, value in statistics.items():
            self.logger.info(f"{key}: {value}")

        return statistics

    def show_config(self):
        """Display current configuration."""
        self._init_config()
        print(OmegaConf.to_yaml(self.config))


def main():
    """Main entry point."""
    fire.Fire(LineSearchCLI)


if __name__ == "__main__":
    main()
