"""Heading detection and section extraction."""
import re
from typing import List, Optional

from portal.services.parsing.models import DocumentSection
from portal.services.parsing.normalizer import TextNormalizer

# Heading thresholds, measured on the trimmed line
MAX_HEADING_LENGTH = 100
MIN_HEADING_LENGTH = 4

MARKDOWN_HEADING = re.compile(r'^#{1,6}\s')
NUMBERED_HEADING = re.compile(r'^\d+\.\s+[A-Z]')
TITLE_CASE_HEADING = re.compile(r'^[A-Z][a-z]+(\s+[A-Z][a-z]+)*$')

HEADING_PATTERNS = (MARKDOWN_HEADING, NUMBERED_HEADING, TITLE_CASE_HEADING)

FALLBACK_SECTION_TITLE = "Content"


def is_heading(line: str) -> bool:
    """
    Decide whether a line looks like a heading.

    A heading is a short line that is a markdown heading, a numbered
    heading ("2. Setup"), an all-uppercase line or a Title Case phrase.
    Ordinary short sentences in Title Case or capitals are misread as
    headings; callers treat the result as a hint.

    Args:
        line: Raw or trimmed line

    Returns:
        bool: True if the line opens a new section
    """
    line = line.strip()
    if not MIN_HEADING_LENGTH <= len(line) < MAX_HEADING_LENGTH:
        return False
    if line.isupper():
        return True
    return any(pattern.match(line) for pattern in HEADING_PATTERNS)


def _make_section(order: int, title: str, lines: List[str]) -> DocumentSection:
    # Blank lines directly under a heading are not content
    while lines and not lines[0]:
        lines.pop(0)
    return DocumentSection(
        id=f"section-{order}",
        title=title,
        content='\n'.join(lines),
        order=order,
    )


def extract_sections(content: str) -> List[DocumentSection]:
    """
    Split document text into heading-delimited sections.

    Every heading opens a section numbered after the previous one. The
    trimmed lines that follow accumulate into it. Text ahead of the first
    heading becomes a leading "Content" section; a document without any
    heading becomes a single "Content" section holding the full text.

    Args:
        content: Raw document text

    Returns:
        List[DocumentSection]: Sections in document order, empty for
        blank input
    """
    if not content or not content.strip():
        return []

    sections: List[DocumentSection] = []
    preamble: List[str] = []
    current_title: Optional[str] = None
    current_lines: List[str] = []

    for raw_line in TextNormalizer.split_lines(content):
        line = raw_line.strip()

        if is_heading(line):
            if current_title is not None:
                sections.append(
                    _make_section(len(sections) + 1, current_title, current_lines)
                )
            elif any(preamble):
                sections.append(
                    _make_section(len(sections) + 1, FALLBACK_SECTION_TITLE, preamble)
                )
            current_title = TextNormalizer.clean_heading_title(line)
            current_lines = []
        elif current_title is not None:
            current_lines.append(line)
        else:
            preamble.append(line)

    if current_title is None:
        return [
            DocumentSection(
                id="section-1",
                title=FALLBACK_SECTION_TITLE,
                content=content,
                order=1,
            )
        ]

    sections.append(_make_section(len(sections) + 1, current_title, current_lines))
    return sections
