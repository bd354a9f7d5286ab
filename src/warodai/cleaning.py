"""
Sense text cleanup.

Warodai sense texts carry light HTML-like markup (<i>...</i> for labels,
<a href="#id">...</a> for cross references) and sentence-final punctuation
that is meaningless once a sense stands alone as a glossary item.
"""

import re
from typing import Iterable, Tuple


# <i>, </i>, <a href="...">, </a>
MARKUP_RE = re.compile(r'</?(?:i|a(?:\shref.+?)?)>')

# Terminal '.'/';' before end of text or a line break becomes a plain break
SENTENCE_BREAK_RE = re.compile(r'[.;]+(?:\Z|[\r\n]+)')

EDGE_PUNCTUATION = ';.'


def clean_meaning(raw: str) -> str:
    """
    Clean a single sense text.

    Markup is removed before punctuation is collapsed, since a tag may sit
    right before the terminal punctuation. A whole run of terminal "." and ";"
    collapses at once, so an abbreviation dot before ";" and a line break is
    dropped as well ("и т. п.;\\n" becomes "и т. п\\n").

    Example:
        >>> clean_meaning('рыбий клей; <i>ср.</i> <a href="#005-13-65">にべもない</a>.')
        'рыбий клей; ср. にべもない'
    """
    line = raw.strip(EDGE_PUNCTUATION)
    line = line.strip()
    line = MARKUP_RE.sub('', line)
    line = SENTENCE_BREAK_RE.sub('\n', line)
    return line.strip()


def clean_meanings(lines: Iterable[str]) -> Tuple[str, ...]:
    """Clean every sense of an entry."""
    return tuple(clean_meaning(line) for line in lines)
