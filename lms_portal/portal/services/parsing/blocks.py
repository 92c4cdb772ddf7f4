"""Turn document text into display blocks for previews."""
import re
from typing import List, Optional

from portal.services.parsing.models import BlockType, DisplayBlock, ParsedDocument
from portal.services.parsing.normalizer import TextNormalizer

CODE_FENCE = "```"
HEADING_LINE = re.compile(r'^(#{1,6})\s+(.*)$')
QUOTE_PREFIX = ">"


def parse_content_blocks(content: str) -> List[DisplayBlock]:
    """
    Classify the lines of a text into display blocks.

    Fenced code is captured verbatim up to the closing fence, markdown
    headings and '>' quotes become single blocks, runs of bullet or
    numbered lines become one list, and everything else is folded into
    paragraphs that break on blank lines. Blocks never nest and keep the
    order of the input.

    Args:
        content: Section or document text

    Returns:
        List[DisplayBlock]: Blocks in input order
    """
    blocks: List[DisplayBlock] = []
    lines = TextNormalizer.split_lines(content)

    paragraph: List[str] = []
    code_lines: List[str] = []
    code_language: Optional[str] = None
    in_code = False

    def flush_paragraph() -> None:
        if paragraph:
            blocks.append(
                DisplayBlock(type=BlockType.PARAGRAPH, content=' '.join(paragraph))
            )
            paragraph.clear()

    def flush_code() -> None:
        blocks.append(
            DisplayBlock(
                type=BlockType.CODE,
                content='\n'.join(code_lines).strip(),
                language=code_language,
            )
        )
        code_lines.clear()

    i = 0
    while i < len(lines):
        line = lines[i]
        trimmed = line.strip()
        i += 1

        if trimmed.startswith(CODE_FENCE):
            if in_code:
                flush_code()
                in_code = False
            else:
                flush_paragraph()
                code_language = trimmed[len(CODE_FENCE):].strip() or None
                in_code = True
            continue

        if in_code:
            code_lines.append(line)
            continue

        heading = HEADING_LINE.match(trimmed)
        if heading:
            flush_paragraph()
            blocks.append(
                DisplayBlock(
                    type=BlockType.HEADING,
                    content=heading.group(2).strip(),
                    level=len(heading.group(1)),
                )
            )
            continue

        if TextNormalizer.is_list_line(trimmed):
            flush_paragraph()
            items = [TextNormalizer.strip_list_marker(trimmed)]
            while i < len(lines) and TextNormalizer.is_list_line(lines[i].strip()):
                items.append(TextNormalizer.strip_list_marker(lines[i].strip()))
                i += 1
            blocks.append(DisplayBlock(type=BlockType.LIST, items=items))
            continue

        if trimmed.startswith(QUOTE_PREFIX):
            flush_paragraph()
            blocks.append(
                DisplayBlock(
                    type=BlockType.QUOTE,
                    content=TextNormalizer.strip_quote_marker(trimmed),
                )
            )
            continue

        if trimmed:
            paragraph.append(trimmed)
        else:
            flush_paragraph()

    # An unterminated fence still yields its code
    if in_code and code_lines:
        flush_code()
    flush_paragraph()

    return blocks


def format_document_for_display(document: ParsedDocument) -> List[DisplayBlock]:
    """Render a parsed document as blocks, section by section when it has sections."""
    if not document.sections:
        return parse_content_blocks(document.content)

    blocks: List[DisplayBlock] = []
    for section in document.sections:
        blocks.append(DisplayBlock(type=BlockType.HEADING, content=section.title))
        blocks.extend(parse_content_blocks(section.content))
    return blocks
