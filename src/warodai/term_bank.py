"""
term_bank.py — Write Yomichan dictionary files.

Outputs:
  - {output_dir}/term_bank_{n}.json (n = 1, 2, ...; batched by row count)
  - {output_dir}/index.json (dictionary metadata)
  - optional zip archive ready for import into Yomichan
"""

import logging
import zipfile
from pathlib import Path
from typing import Iterable, List

import orjson

from warodai.config import ConversionConfig, DEFAULT_BATCH_SIZE
from warodai.expand import OutputRecord


logger = logging.getLogger(__name__)


INDEX_FORMAT = 3
TERM_BANK_GLOB = "term_bank_*.json"


class TermBankWriter:
    """
    Buffers term rows and writes them out in numbered term bank files.

    Usage:
        writer = TermBankWriter(output_dir, batch_size=10000)
        for records in converted_entries:
            writer.add(records)
            writer.flush_if_full()
        writer.close()
    """

    def __init__(self, output_dir: Path, batch_size: int = DEFAULT_BATCH_SIZE):
        if batch_size < 1:
            raise ValueError("batch_size must be >= 1")

        self.output_dir = output_dir
        self.batch_size = batch_size

        self.pending: List[list] = []
        self.bank_index = 1
        self.total_rows = 0
        self.written_paths: List[Path] = []

        self.remove_stale_banks()

    def remove_stale_banks(self):
        """Delete term banks left in output_dir by an earlier run."""
        if not self.output_dir.is_dir():
            return

        stale = list(self.output_dir.glob(TERM_BANK_GLOB))
        for path in stale:
            path.unlink()
        if stale:
            logger.info(f"Removed {len(stale)} term banks from a previous run in {self.output_dir}")

    @property
    def banks_written(self) -> int:
        return len(self.written_paths)

    def add(self, records: Iterable[OutputRecord]) -> int:
        """Buffer records; returns how many rows were added."""
        rows = [record.to_term_bank_row() for record in records]
        self.pending.extend(rows)
        return len(rows)

    def flush_if_full(self) -> bool:
        """Write the pending rows if the batch threshold has been reached."""
        if len(self.pending) >= self.batch_size:
            self.flush()
            return True
        return False

    def flush(self):
        """Write pending rows to the next term bank file."""
        if not self.pending:
            return

        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.output_dir / f"term_bank_{self.bank_index}.json"

        with open(path, 'wb') as f:
            f.write(orjson.dumps(self.pending))

        self.total_rows += len(self.pending)
        self.written_paths.append(path)
        self.bank_index += 1
        self.pending = []

        logger.info(f"Written: {path.name} ({self.total_rows:,} terms total)")

    def close(self):
        """Write whatever is still pending."""
        self.flush()


def build_index(config: ConversionConfig) -> dict:
    return {
        'title': config.title,
        'format': INDEX_FORMAT,
        'revision': config.revision,
        'sequenced': False,
        'url': config.url,
        'description': config.description,
    }


def write_index(output_dir: Path, config: ConversionConfig) -> Path:
    """Write index.json for the dictionary."""
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / "index.json"

    with open(path, 'wb') as f:
        f.write(orjson.dumps(build_index(config), option=orjson.OPT_INDENT_2))

    logger.info(f"Written: {path}")
    return path


def package_dictionary(output_dir: Path, zip_path: Path) -> Path:
    """Bundle index.json and the term banks into a zip archive."""
    index_path = output_dir / "index.json"
    if not index_path.exists():
        raise FileNotFoundError(f"index.json not found in {output_dir}")

    term_banks = sorted(
        output_dir.glob(TERM_BANK_GLOB),
        key=lambda p: int(p.stem.rsplit('_', 1)[1])
    )

    zip_path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(zip_path, 'w', compression=zipfile.ZIP_DEFLATED) as zf:
        zf.write(index_path, arcname=index_path.name)
        for bank in term_banks:
            zf.write(bank, arcname=bank.name)

    logger.info(f"✓ Packaged {len(term_banks)} term banks: {zip_path}")
    return zip_path
