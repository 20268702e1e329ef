from dnanalyzer.metrics.basic import NUCLEOTIDES, shannon_entropy

PROTEIN_COLUMNS = [
    "record_id", "protein_index", "start", "end", "frame",
    "length_codons", "terminator", "sequence", "peptide",
]
CODON_COLUMNS = ["record_id", "frame", "codon", "count"]
REGION_COLUMNS = ["record_id", "start", "end", "length", "coverage"]


def build_protein_rows(record_id, proteins, genetic_code=1):
    rows = []
    for i, p in enumerate(proteins, start=1):
        rows.append(
            {
                "record_id": record_id,
                "protein_index": i,
                "start": p.start,
                "end": p.end,
                "frame": p.frame,
                "length_codons": p.length,
                "terminator": p.terminator,
                "sequence": p.sequence,
                "peptide": p.translate(genetic_code),
            }
        )
    return rows


def build_codon_rows(record_id, frame, codon_counts):
    return [
        {"record_id": record_id, "frame": frame, "codon": codon, "count": n}
        for codon, n in codon_counts
    ]


def build_region_rows(record_id, regions):
    return [
        {
            "record_id": record_id,
            "start": r.start,
            "end": r.end,
            "length": r.length,
            "coverage": r.coverage,
        }
        for r in regions
    ]


def build_summary_row(record_id, result, settings):
    counts = result.nucleotide_counts
    longest = result.longest
    row = {
        "record_id": record_id,
        "length_nt": result.length,
        "amino_acid": result.amino_acid,
        "gc_fraction": f"{result.gc_content:.5f}",
        "base_entropy": f"{shannon_entropy(counts.values()):.5f}",
        "chi_square": f"{result.chi_square:.5f}",
        "is_random": int(result.is_random),
        "n_proteins": len(result.proteins),
        "longest_protein_start": "" if longest is None else longest.start,
        "longest_protein_codons": "" if longest is None else longest.length,
        "n_high_coverage_regions": len(result.regions),
        "reading_frame": settings.reading_frame,
        "min_count": settings.min_count,
        "max_count": settings.max_count,
        "randomness_threshold": settings.randomness_threshold,
    }
    for base in NUCLEOTIDES:
        row[f"count_{base}"] = counts[base]
    return row
