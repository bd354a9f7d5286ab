"""
Headword line parser.

A Warodai header looks like:

    きやり, きやりおんど【木遣り, 木遣り音頭】(кияри, кияриондо)〔000-28-75〕

Each opening bracket switches the field that following characters belong to;
the format never nests brackets, so a single left-to-right scan with one
active field is enough.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List


class FragmentType(Enum):
    """Header field that characters are currently accumulated into."""
    KANA = "kana"
    KANJI = "kanji"
    TRANSCRIPTION = "transcription"
    TAG = "tag"
    ID = "id"


OPENERS: Dict[str, FragmentType] = {
    '【': FragmentType.KANJI,
    '(': FragmentType.TRANSCRIPTION,
    '[': FragmentType.TAG,
    '〔': FragmentType.ID,
}

CLOSERS = frozenset('】)〕]')


@dataclass(frozen=True)
class Header:
    """
    Parsed headword line.

    Attributes:
        kana: Comma-separated readings
        kanji: Comma-separated spelling groups, alternates joined by '･'
        transcription: Cyrillic transcription of the reading
        tag: Usage tag, e.g. 'геогр.'
        id: Warodai entry id, e.g. '006-56-61'
    """
    kana: str = ""
    kanji: str = ""
    transcription: str = ""
    tag: str = ""
    id: str = ""

    @property
    def has_fragments(self) -> bool:
        """True when anything besides the kana field was recognized."""
        return bool(self.kanji or self.transcription or self.tag or self.id)


def parse_header(header_line: str) -> Header:
    """Split a header line into its five fields."""
    fragments: Dict[FragmentType, List[str]] = {ft: [] for ft in FragmentType}
    state = FragmentType.KANA

    for ch in header_line:
        if ch in OPENERS:
            state = OPENERS[ch]
        elif ch in CLOSERS:
            continue
        else:
            fragments[state].append(ch)

    return Header(**{
        ft.value: ''.join(chars).strip()
        for ft, chars in fragments.items()
    })
