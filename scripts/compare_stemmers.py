#!/usr/bin/env python3
"""
Compare this stemmer with the NLTK Snowball and Porter stemmers.

Stems every word with all three, prints the words where this stemmer and
NLTK Snowball disagree (Porter is shown for reference, it is a different
algorithm), then the time each stemmer took.

Usage:
    python scripts/compare_stemmers.py               # built-in word list
    python scripts/compare_stemmers.py words.txt     # one word per line
"""

import sys
import time
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from nltk.stem.porter import PorterStemmer
from nltk.stem.snowball import SnowballStemmer

from src.porter2 import stem

# Verbs seen in system/security log messages
ACTIONS = [
    "access", "alert", "allocate", "allow", "audit", "backup", "bind",
    "block", "cancel", "clean", "close", "compress", "connect", "copy",
    "create", "decode", "decompress", "decrypt", "depress", "detect",
    "disconnect", "download", "encode", "encrypt", "establish", "execute",
    "filter", "find", "free", "get", "initialize", "initiate", "install",
    "lock", "login", "logout", "modify", "move", "open", "post", "quarantine",
    "read", "release", "remove", "replicate", "resume", "save", "scan",
    "search", "start", "stop", "suspend", "uninstall", "unlock", "update",
    "upgrade", "upload", "violate", "write",
]

# Repeat the list so timings are measurable
ROUNDS = 1000


def load_words(path: str) -> list:
    with open(path, "r", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


def time_stemmer(fn, words: list) -> float:
    start = time.perf_counter()
    for _ in range(ROUNDS):
        for word in words:
            fn(word)
    return time.perf_counter() - start


def main():
    """Main entry point."""
    if len(sys.argv) > 1:
        try:
            words = load_words(sys.argv[1])
        except OSError as e:
            print(f"Error reading word list: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        words = ACTIONS

    snowball = SnowballStemmer("english")
    porter = PorterStemmer()

    stemmers = [
        ("porter2", stem),
        ("nltk-snowball", snowball.stem),
        ("nltk-porter", porter.stem),
    ]

    print(f"{'word':<20} {'porter2':<16} {'nltk-snowball':<16} {'nltk-porter':<16}")
    print("=" * 70)

    mismatches = 0
    for word in words:
        ours = stem(word)
        reference = snowball.stem(word)
        if ours != reference:
            mismatches += 1
            print(f"{word:<20} {ours:<16} {reference:<16} {porter.stem(word):<16}")

    print("=" * 70)
    print(f"{mismatches} of {len(words)} words differ from nltk-snowball")
    print()

    for name, fn in stemmers:
        elapsed = time_stemmer(fn, words)
        print(f"{name:<16} {elapsed:8.3f}s  ({ROUNDS} x {len(words)} words)")


if __name__ == "__main__":
    main()
