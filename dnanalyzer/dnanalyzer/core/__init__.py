from dnanalyzer.core.codon_table import AminoAcid, CodonTable, build_codon_table
from dnanalyzer.core.coverage import Region, high_coverage_regions, longest_protein
from dnanalyzer.core.frames import count_codons, iter_codons
from dnanalyzer.core.proteins import Protein, find_proteins

__all__ = [
    "AminoAcid",
    "CodonTable",
    "build_codon_table",
    "Protein",
    "find_proteins",
    "count_codons",
    "iter_codons",
    "Region",
    "longest_protein",
    "high_coverage_regions",
]
