import sys
from pathlib import Path

import pytest

# Project root, so tests run without an editable install
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from shadowing.models.diff_entry import DiffEntry, DiffType  # noqa: E402


def make_entries(*pairs):
    """Build diff entries from (word, "correct"|"missing"|...) pairs."""
    return [DiffEntry(word=w, type=DiffType(t), position=i) for i, (w, t) in enumerate(pairs)]


@pytest.fixture
def entries():
    return make_entries
