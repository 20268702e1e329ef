__version__ = "1.2.1"

from dnanalyzer.core import (  # noqa: E402
    AminoAcid,
    CodonTable,
    Protein,
    Region,
    build_codon_table,
    count_codons,
    find_proteins,
    high_coverage_regions,
    iter_codons,
    longest_protein,
)
from dnanalyzer.metrics.basic import (  # noqa: E402
    chi_square_uniform,
    gc_content,
    is_random,
    nucleotide_counts,
)

__all__ = [
    "__version__",
    "AminoAcid",
    "CodonTable",
    "Protein",
    "Region",
    "build_codon_table",
    "count_codons",
    "find_proteins",
    "high_coverage_regions",
    "iter_codons",
    "longest_protein",
    "chi_square_uniform",
    "gc_content",
    "is_random",
    "nucleotide_counts",
]
