from __future__ import annotations

import math
from collections import Counter
from typing import Dict, Iterable

NUCLEOTIDES = ("a", "t", "g", "c")

# chi-square critical value, 3 degrees of freedom, alpha = 0.05
DEFAULT_RANDOMNESS_THRESHOLD = 7.815


def gc_content(seq: str) -> float:
    """
    GC fraction in [0,1]. Case-insensitive; returns 0.0 for empty input.
    """
    if not seq:
        return 0.0
    s = seq.lower()
    gc = s.count("g") + s.count("c")
    return gc / len(s)


def nucleotide_counts(seq: str) -> Dict[str, int]:
    """
    Count of each of a/t/g/c. All four keys are always present.
    """
    tally = Counter((seq or "").lower())
    return {base: tally.get(base, 0) for base in NUCLEOTIDES}


def chi_square_uniform(seq: str) -> float:
    """
    Pearson chi-square of the base counts against 25% per base.
    """
    counts = nucleotide_counts(seq)
    total = sum(counts.values())
    if total == 0:
        return 0.0
    expected = total / len(NUCLEOTIDES)
    return sum((n - expected) ** 2 / expected for n in counts.values())


def is_random(seq: str, threshold: float = DEFAULT_RANDOMNESS_THRESHOLD) -> bool:
    """
    True when base composition is indistinguishable from uniform, i.e. the
    chi-square statistic does not exceed `threshold`.

    The statistic grows with sequence length, so long sequences need a
    near-exact 25/25/25/25 split to be called random at the default cutoff.
    """
    return chi_square_uniform(seq) <= threshold


def shannon_entropy(values: Iterable[float]) -> float:
    """
    Shannon entropy H = -sum_i p_i log2 p_i.
    If inputs are not normalized, they are normalized internally.
    """
    vals = list(values)
    total = sum(vals)
    if total <= 0:
        return 0.0
    entropy = 0.0
    for v in vals:
        p = v / total
        if p > 0.0:
            entropy -= p * math.log2(p)
    return entropy
