"""Text normalization helpers shared by section and block parsing."""
import re
from typing import List

MARKDOWN_HEADING_PREFIX = re.compile(r'^#+\s*')
NUMBERING_PREFIX = re.compile(r'^\d+\.\s*')
BULLET_MARKER = re.compile(r'^[-*•]\s+')
NUMERIC_MARKER = re.compile(r'^\d+\.\s+')
QUOTE_MARKER = re.compile(r'^>\s*')
FILE_EXTENSION = re.compile(r'\.[^/.]+$')


class TextNormalizer:
    """Normalizes extracted text while preserving meaning."""

    @staticmethod
    def split_lines(text: str) -> List[str]:
        """
        Split text into lines, accepting any newline convention.

        Args:
            text: Raw text

        Returns:
            List[str]: Lines without their terminators
        """
        if not text:
            return []
        return text.replace('\r\n', '\n').replace('\r', '\n').split('\n')

    @staticmethod
    def clean_heading_title(line: str) -> str:
        """Drop a markdown '#' prefix, then an 'N.' numbering prefix."""
        title = MARKDOWN_HEADING_PREFIX.sub('', line.strip(), count=1)
        return NUMBERING_PREFIX.sub('', title, count=1)

    @staticmethod
    def strip_list_marker(line: str) -> str:
        """
        Remove the leading list marker from a list line.

        Bullet markers ('-', '*', '•') and numeric markers ('1.') are
        separate rules; at most one of them applies.

        Args:
            line: Trimmed list line

        Returns:
            str: Item text
        """
        if BULLET_MARKER.match(line):
            return BULLET_MARKER.sub('', line, count=1)
        return NUMERIC_MARKER.sub('', line, count=1)

    @staticmethod
    def is_list_line(line: str) -> bool:
        return bool(BULLET_MARKER.match(line) or NUMERIC_MARKER.match(line))

    @staticmethod
    def strip_quote_marker(line: str) -> str:
        return QUOTE_MARKER.sub('', line, count=1)

    @staticmethod
    def strip_extension(filename: str) -> str:
        """'notes.final.md' -> 'notes.final'"""
        return FILE_EXTENSION.sub('', filename)

    @staticmethod
    def count_words(text: str) -> int:
        return len(text.split())
