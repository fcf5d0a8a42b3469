"""Pytest configuration shared by all test suites"""

import gzip
import sys
from pathlib import Path

import pytest

# Add project root to path for src imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def fixtures_dir():
    return FIXTURES_DIR


@pytest.fixture(scope="session")
def golden_pairs():
    """
    Word/stem pairs from the published Porter2 sample vocabulary.

    File format: one "word stem" pair per line, # starts a comment.
    """
    pairs = []
    with open(FIXTURES_DIR / "golden" / "porter2_pairs.txt", "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            word, expected = line.split()
            pairs.append((word, expected))
    return pairs


@pytest.fixture(scope="session")
def vocabulary():
    """
    Large lowercase word list for comparisons against reference stemmers.

    File format: gzipped, one word per line, # starts a comment.
    """
    with gzip.open(FIXTURES_DIR / "golden" / "vocabulary.txt.gz", "rt", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip() and not line.startswith("#")]
