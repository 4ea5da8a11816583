"""
Tokenization shared by index construction and query parsing.
"""

from typing import List

# Lines and queries are split on this literal character only
SEPARATOR = ' '


def tokenize(text: str) -> List[str]:
    """
    Split text on single spaces.

    Repeated or leading spaces yield empty-string tokens. Trailing empty
    tokens are dropped, so text made only of spaces yields no tokens while
    text with no space at all is returned as its own single token.

    Args:
        text: Input line or query string

    Returns:
        List of raw tokens (case preserved)
    """
    if SEPARATOR not in text:
        return [text]

    tokens = text.split(SEPARATOR)
    while tokens and tokens[-1] == '':
        tokens.pop()
    return tokens


class TextPreprocessor:
    """Turns a line or query into index terms."""

    def __init__(self, lowercase: bool = True):
        """
        Initialize preprocessor.

        Args:
            lowercase: Whether to lowercase terms (index keys are lowercase)
        """
        self.lowercase = lowercase

    def preprocess(self, text: str) -> List[str]:
        """
        Preprocess text into terms.

        Args:
            text: Input text string

        Returns:
            List of terms, in order, duplicates kept
        """
        if self.lowercase:
            text = text.lower()
        return tokenize(text)
