"""
convert.py — Convert a Warodai source tree into a Yomichan dictionary.

Reads:
  - {source_dir}/**/*.txt (one Warodai entry per file)

Outputs:
  - {output_dir}/term_bank_{n}.json
  - {output_dir}/index.json

Malformed entries are logged and skipped; the run itself only stops on
I/O errors.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from warodai.config import ConversionConfig
from warodai.expand import convert_entry
from warodai.progress_display import ProgressDisplay
from warodai.sources import iter_entry_files, read_entry
from warodai.term_bank import TermBankWriter, write_index


logger = logging.getLogger(__name__)


@dataclass
class ConversionStats:
    files: int = 0
    skipped: int = 0
    terms: int = 0
    term_banks: int = 0

    @property
    def entries(self) -> int:
        """Entries that produced at least one term."""
        return self.files - self.skipped


def convert_file(path: Path, writer: TermBankWriter, stats: ConversionStats):
    """Convert a single entry file and hand its terms to the writer."""
    records = convert_entry(read_entry(path))

    stats.files += 1
    if not records:
        stats.skipped += 1
        logger.debug(f"No terms from {path}")
        return

    stats.terms += writer.add(records)
    writer.flush_if_full()


def convert_directory(
    source_dir: Path,
    output_dir: Path,
    config: ConversionConfig,
    show_progress: bool = True
) -> ConversionStats:
    """
    Convert every entry file under source_dir.

    Args:
        source_dir: Root of the Warodai source tree
        output_dir: Directory for term banks and index.json
        config: Dictionary metadata and batching settings
        show_progress: Draw a live progress panel

    Returns:
        Counters for the run
    """
    logger.info(f"Converting {source_dir} -> {output_dir}")

    writer = TermBankWriter(output_dir, batch_size=config.batch_size)
    stats = ConversionStats()

    with ProgressDisplay("Converting Warodai", enabled=show_progress) as progress:
        for path in iter_entry_files(source_dir, config.source_suffix):
            convert_file(path, writer, stats)
            progress.update(Files=stats.files, Terms=stats.terms, Skipped=stats.skipped)

    writer.close()
    stats.term_banks = writer.banks_written

    write_index(output_dir, config)

    logger.info("")
    logger.info("Statistics:")
    logger.info(f"  Entry files: {stats.files:,}")
    logger.info(f"  Skipped entries: {stats.skipped:,}")
    logger.info(f"  Terms written: {stats.terms:,}")
    logger.info(f"  Term banks: {stats.term_banks:,}")

    return stats
