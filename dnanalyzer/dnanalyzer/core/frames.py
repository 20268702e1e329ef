from __future__ import annotations

from collections import Counter
from typing import Iterator, List, Tuple

from dnanalyzer.exceptions import InvalidArgumentError

READING_FRAMES = (0, 1, 2)


def check_frame(frame: int) -> int:
    if isinstance(frame, bool) or not isinstance(frame, int) or frame not in READING_FRAMES:
        raise InvalidArgumentError(f"Reading frame must be 0, 1 or 2, got {frame!r}")
    return frame


def iter_codons(seq: str, frame: int = 0) -> Iterator[Tuple[int, str]]:
    """
    Yield (position, codon) for every complete codon of the given frame.
    A trailing partial codon is dropped.
    """
    check_frame(frame)
    s = (seq or "").lower()
    for i in range(frame, len(s) - 2, 3):
        yield i, s[i : i + 3]


def count_codons(seq: str, frame: int, min_count: int, max_count: int) -> List[Tuple[str, int]]:
    """
    Codon occurrence counts for one reading frame, filtered to
    min_count <= count <= max_count.

    Only codons that actually occur are tallied, so a [0, 0] range is always
    empty. Sorted by descending count, ties by codon.
    """
    check_frame(frame)
    if min_count < 0 or max_count < 0:
        raise InvalidArgumentError(f"Count bounds must be >= 0, got [{min_count}, {max_count}]")
    if min_count > max_count:
        raise InvalidArgumentError(f"min_count ({min_count}) is greater than max_count ({max_count})")

    tally = Counter(codon for _, codon in iter_codons(seq, frame))
    kept = [(codon, n) for codon, n in tally.items() if min_count <= n <= max_count]
    return sorted(kept, key=lambda x: (-x[1], x[0]))
