"""
Entry block parsing.

An entry block is one header line followed by the entry body. The body holds
one or more senses, numbered "1)", "2)", ... at the start of a line. Single
sense entries carry no number at all.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Tuple

from warodai.header import Header, parse_header


logger = logging.getLogger(__name__)


# Sense markers: "N)" at the very start of the body or after line breaks
SENSE_MARKER_RE = re.compile(r'(?:^|[\r\n]+)\d+\)')


@dataclass(frozen=True)
class ParsedEntry:
    """Header plus split (not yet cleaned) sense texts."""
    header: Header
    meanings: Tuple[str, ...]


def split_meanings(body: str) -> List[str]:
    """
    Split an entry body into sense texts.

    Numbers are treated purely as delimiters; gaps or a numbering that does
    not start at 1 are accepted as-is.
    """
    result = []
    for segment in SENSE_MARKER_RE.split(body):
        segment = segment.strip()
        if segment:
            result.append(segment)
    return result


def parse_entry(raw: str) -> ParsedEntry:
    """Parse one raw entry block into header and sense list."""
    raw = raw.lstrip('\ufeff')

    if '\n' in raw:
        header_line, body = raw.split('\n', 1)
    else:
        logger.warning(f"Wrong entry, no body: {raw!r}")
        header_line, body = raw, ''

    header = parse_header(header_line)
    if not header.has_fragments:
        logger.debug(f"Header has no bracketed fragments: {header_line!r}")

    meanings = tuple(split_meanings(body))
    if not meanings:
        logger.warning(f"Entry without meanings: {header.kana} [{header.id}]")

    return ParsedEntry(header=header, meanings=meanings)
