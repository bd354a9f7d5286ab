"""
Warodai to Yomichan converter.

Turns Warodai plain-text entry files into Yomichan term-bank dictionaries.

Modules:
- header: Headword line parser
- entry: Entry block split and numbered-sense splitter
- cleaning: Sense text cleanup
- expand: Reading/spelling expansion into term records
- term_bank: Batched term-bank and index writer
- convert: Directory conversion pipeline
"""

from warodai.header import Header, FragmentType, parse_header
from warodai.entry import ParsedEntry, parse_entry, split_meanings
from warodai.cleaning import clean_meaning, clean_meanings
from warodai.expand import OutputRecord, expand, convert_entry

__version__ = "0.1.0"

__all__ = [
    "Header",
    "FragmentType",
    "parse_header",
    "ParsedEntry",
    "parse_entry",
    "split_meanings",
    "clean_meaning",
    "clean_meanings",
    "OutputRecord",
    "expand",
    "convert_entry",
    "__version__",
]
