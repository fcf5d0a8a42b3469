"""Runtime code must not depend on the comparison/test-only libraries"""

from pathlib import Path

import pytest

SRC_DIR = Path(__file__).parent.parent.parent / "src"

# Installed only with the `compare` / `test` extras
OPTIONAL_LIBRARIES = ("nltk", "snowballstemmer")


class TestRuntimeImports:
    """Modules under src/ import only runtime dependencies"""

    @pytest.mark.parametrize("library", OPTIONAL_LIBRARIES)
    def test_optional_library_not_imported(self, library):
        offenders = []
        for path in sorted(SRC_DIR.rglob("*.py")):
            for line in path.read_text(encoding="utf-8").splitlines():
                stripped = line.strip()
                if stripped.startswith((f"import {library}", f"from {library}")):
                    offenders.append(f"{path.relative_to(SRC_DIR)}: {stripped}")
        assert offenders == []

    def test_sources_found(self):
        assert (SRC_DIR / "porter2" / "stemmer.py").exists()
