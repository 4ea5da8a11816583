import logging
from pathlib import Path
from typing import Iterator, List, Union
from tqdm import tqdm

logger = logging.getLogger(__name__)


class LineLoader:
    """Loads the records of a plain text file, one per line."""

    def __init__(self, encoding: str = 'utf-8', show_progress: bool = False):
        """
        Initialize line loader.

        Args:
            encoding: Text encoding of the input file
            show_progress: Whether to display a progress bar while reading
        """
        self.encoding = encoding
        self.show_progress = show_progress

    @classmethod
    def from_config(cls, config) -> 'LineLoader':
        """
        Create a loader from configuration.

        Args:
            config: Hydra configuration object
        """
        return cls(
            encoding=config.data.get('encoding', 'utf-8'),
            show_progress=config.indexing.show_progress
        )

    def iter_lines(self, path: Union[str, Path]) -> Iterator[str]:
        """
        Yield lines of a file without their line terminators.

        Args:
            path: Path to the input file

        Yields:
            Each line of the file, in order

        Raises:
            FileNotFoundError: If path does not point to a file
        """
        data_path = Path(path)

        if not data_path.is_file():
            raise FileNotFoundError(f"Data file not found: {data_path}")

        logger.info(f"Loading lines from: {data_path}")

        with open(data_path, 'r', encoding=self.encoding) as f:
            for line in tqdm(f, desc="Loading lines", disable=not self.show_progress):
                yield line.rstrip('\n')

    def load_lines(self, path: Union[str, Path]) -> List[str]:
        """
        Load all lines of a file.

        Args:
            path: Path to the input file

        Returns:
            List of lines in file order
        """
        lines = list(self.iter_lines(path))
        logger.info(f"Loaded {len(lines):,} lines")
        return lines
