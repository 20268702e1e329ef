from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from dnanalyzer.core.proteins import Protein
from dnanalyzer.exceptions import EmptyInputError, InvalidArgumentError

DEFAULT_WINDOW_SIZE = 100
DEFAULT_COVERAGE_THRESHOLD = 2


@dataclass(frozen=True)
class Region:
    start: int  # 0-based inclusive
    end: int    # 0-based exclusive
    coverage: int  # proteins intersecting [start, end)

    @property
    def length(self) -> int:
        return self.end - self.start


def longest_protein(proteins: Sequence[Protein]) -> Protein:
    """
    Protein with the most codons; the earliest start wins a tie.
    """
    if not proteins:
        raise EmptyInputError("No proteins to report: the protein list is empty")
    return min(proteins, key=lambda p: (-p.length, p.start))


def high_coverage_regions(
    proteins: Sequence[Protein],
    window_size: int = DEFAULT_WINDOW_SIZE,
    threshold: int = DEFAULT_COVERAGE_THRESHOLD,
) -> List[Region]:
    """
    Regions where at least `threshold` proteins overlap.

    The span from the first protein start to the last protein end is tiled
    with consecutive windows of `window_size` nt (the last window is cut at
    the span end). A window is kept when `threshold` or more proteins
    intersect it, and adjacent kept windows are merged. A region's coverage
    is the number of proteins intersecting the merged interval.
    """
    if window_size < 1:
        raise InvalidArgumentError(f"window_size must be >= 1, got {window_size}")
    if threshold < 1:
        raise InvalidArgumentError(f"threshold must be >= 1, got {threshold}")
    if not proteins or threshold > len(proteins):
        return []

    span_start = min(p.start for p in proteins)
    span_end = max(p.end for p in proteins)

    merged: List[Tuple[int, int]] = []
    cur_start = None
    cur_end = None

    for w_start in range(span_start, span_end, window_size):
        w_end = min(w_start + window_size, span_end)
        count = sum(1 for p in proteins if p.overlaps(w_start, w_end))
        if count >= threshold:
            if cur_start is None:
                cur_start = w_start
            cur_end = w_end
        elif cur_start is not None:
            merged.append((cur_start, cur_end))
            cur_start = None

    if cur_start is not None:
        merged.append((cur_start, cur_end))

    return [
        Region(start, end, sum(1 for p in proteins if p.overlaps(start, end)))
        for start, end in merged
    ]
