"""
Expansion of parsed entries into flat term records.

One Warodai entry may list several readings and several spelling groups:

    きやり, きやりおんど【木遣り, 木遣り音頭】   one group per reading
    ろくろくび, ろくろっくび【轆轤首】          readings share one spelling
    ばちゃん, ばちゃんと                       no spelling at all

A spelling group may itself hold alternates joined by '･'
(うちあげる【打ち揚げる･打ち上げる】).
"""

import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from warodai.cleaning import clean_meanings
from warodai.entry import parse_entry
from warodai.header import Header


logger = logging.getLogger(__name__)


ALTERNATE_SEPARATOR = '･'


@dataclass(frozen=True)
class OutputRecord:
    """A single (expression, reading, glossary) term."""
    expression: str
    reading: str
    glossary: Tuple[str, ...]

    def to_term_bank_row(self) -> list:
        """Render as a Yomichan v3 term bank row."""
        return [self.expression, self.reading, "", "", 0, list(self.glossary), 0, ""]


def split_list(field: str) -> List[str]:
    """Split a comma-separated header field; an empty field has no items."""
    if not field:
        return []
    return [item.strip() for item in field.split(',')]


def expand(header: Header, meanings: Sequence[str]) -> List[OutputRecord]:
    """
    Expand a header and its senses into term records.

    Returns an empty list (and logs) when the header has no reading or when
    the number of readings and spelling groups cannot be matched up.
    """
    readings = split_list(header.kana)
    kanjis = split_list(header.kanji)

    if not readings:
        logger.warning(f"Entry header without reading: kana={header.kana!r}, kanji={header.kanji!r}")
        return []

    if kanjis and len(readings) != len(kanjis) and len(kanjis) != 1:
        logger.warning(f"Wrong entry header {header.kana}, {header.kanji}")
        return []

    glossary = clean_meanings(meanings)
    result = []

    for i, reading in enumerate(readings):
        if kanjis and len(readings) == len(kanjis):
            for alternate in kanjis[i].split(ALTERNATE_SEPARATOR):
                result.append(OutputRecord(alternate.strip(), reading, glossary))
        elif kanjis:
            result.append(OutputRecord(header.kanji, reading, glossary))
        else:
            result.append(OutputRecord(reading, reading, glossary))

    return result


def convert_entry(raw: str) -> List[OutputRecord]:
    """Parse and expand one raw entry block."""
    entry = parse_entry(raw)
    return expand(entry.header, entry.meanings)
