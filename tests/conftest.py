"""Pytest configuration and shared fixtures."""
import pytest
import tempfile
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_entries():
    """Warodai entry files keyed by their path inside a source tree."""
    return {
        "000/00/000-00-01.txt": (
            "てんげん【天元】(тэнгэн)〔000-00-01〕\n"
            "1) центр вселенной;\n"
            "2) центр доски <i>(для игры в го)</i>."
        ),
        "000/00/000-00-02.txt": (
            "うちあげる【打ち揚げる･打ち上げる】(утиагэру)〔000-00-02〕\n"
            "1) запускать (ракету);\n"
            "2) выбрасывать на берег."
        ),
        "000/01/000-01-01.txt": (
            "ろくろくび, ろくろっくび【轆轤首】(рокурокуби, рокуроккуби)〔000-01-01〕\n"
            "чудовище с длинной шеей."
        ),
        # Two readings against three spelling groups: skipped
        "000/01/000-01-02.txt": (
            "ああ, いい【亜, 阿, 唖】(аа, ии)〔000-01-02〕\n"
            "что-то."
        ),
        "000/01/notes.md": "not an entry",
    }


@pytest.fixture
def source_tree(temp_dir, sample_entries):
    """Write sample_entries into a source directory and return its path."""
    source_dir = temp_dir / "warodai-source"
    for rel_path, text in sample_entries.items():
        path = source_dir / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding='utf-8')
    return source_dir
