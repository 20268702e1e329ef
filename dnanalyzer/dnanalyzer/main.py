from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from tqdm import tqdm

from dnanalyzer.cli import get_cli_args
from dnanalyzer.config import AnalysisSettings, load_settings
from dnanalyzer.core.codon_table import AminoAcid, CodonTable, build_codon_table
from dnanalyzer.core.coverage import Region, high_coverage_regions, longest_protein
from dnanalyzer.core.frames import count_codons
from dnanalyzer.core.proteins import Protein, find_proteins
from dnanalyzer.exceptions import DNAnalyzerError, InputFormatError
from dnanalyzer.io.output import ensure_outdir, write_tsv
from dnanalyzer.io.sequence import normalize_dna, read_sequence_records, validate_dna
from dnanalyzer.logging_utils import setup_logger
from dnanalyzer.metrics.basic import chi_square_uniform, gc_content, is_random, nucleotide_counts
from dnanalyzer.report import (
    CODON_COLUMNS,
    PROTEIN_COLUMNS,
    REGION_COLUMNS,
    build_codon_rows,
    build_protein_rows,
    build_region_rows,
    build_summary_row,
)


@dataclass
class AnalysisResult:
    length: int
    amino_acid: str
    proteins: List[Protein]
    gc_content: float
    nucleotide_counts: Dict[str, int]
    codon_counts: List[Tuple[str, int]]
    regions: List[Region]
    chi_square: float
    is_random: bool
    longest: Optional[Protein] = None
    notes: List[str] = field(default_factory=list)


def analyze_sequence(
    dna: str,
    amino_acid: AminoAcid,
    table: CodonTable,
    settings: AnalysisSettings,
) -> AnalysisResult:
    """
    Run every analysis over one validated, lowercase DNA sequence.
    """
    proteins = find_proteins(dna, amino_acid, table, frame=settings.protein_frame)
    codon_counts = count_codons(dna, settings.reading_frame, settings.min_count, settings.max_count)
    regions = high_coverage_regions(
        proteins,
        window_size=settings.coverage_window,
        threshold=settings.coverage_threshold,
    )

    result = AnalysisResult(
        length=len(dna),
        amino_acid=amino_acid.name,
        proteins=proteins,
        gc_content=gc_content(dna),
        nucleotide_counts=nucleotide_counts(dna),
        codon_counts=codon_counts,
        regions=regions,
        chi_square=chi_square_uniform(dna),
        is_random=is_random(dna, settings.randomness_threshold),
    )
    if proteins:
        result.longest = longest_protein(proteins)
    else:
        result.notes.append("no proteins found")
    return result


def _ask_amino_acid() -> str:
    return input("Enter an amino acid: ").strip().lower()


def _log_result(logger, record_id: str, result: AnalysisResult, settings: AnalysisSettings) -> None:
    logger.info(f"[{record_id}] {len(result.proteins)} protein(s) ending at stop or {result.amino_acid}")
    for i, p in enumerate(result.proteins, start=1):
        logger.debug(f"[{record_id}] {i}: {p.start}-{p.end} ({p.length} codons, {p.terminator}) {p.sequence}")

    logger.info(f"[{record_id}] GC-content: {result.gc_content:.5f}")
    counts = ", ".join(f"{b.upper()}: {n}" for b, n in result.nucleotide_counts.items())
    logger.info(f"[{record_id}] Nucleotide counts: {counts}")

    if result.regions:
        for r in result.regions:
            logger.info(f"[{record_id}] High coverage region: {r.start}-{r.end} ({r.coverage} proteins)")
    else:
        logger.info(f"[{record_id}] No high coverage regions")

    if result.longest is not None:
        logger.info(
            f"[{record_id}] Longest protein: {result.longest.start}-{result.longest.end} "
            f"({result.longest.length} codons) {result.longest.sequence}"
        )
    else:
        logger.info(f"[{record_id}] No proteins found; nothing to report as longest")

    logger.info(
        f"[{record_id}] Codons in frame {settings.reading_frame} occurring "
        f"{settings.min_count}-{settings.max_count} times: {len(result.codon_counts)}"
    )
    for codon, n in result.codon_counts:
        logger.info(f"[{record_id}]   {codon.upper()}: {n}")

    if result.is_random:
        logger.warning(f"[{record_id}] DNA sequence has been detected to be random (chi2={result.chi_square:.3f})")


def main(argv: Optional[list[str]] = None) -> int:
    args = get_cli_args(argv)
    logger = setup_logger(args.log_file, args.verbose, args.quiet)
    logger.info("Starting dnanalyzer")

    try:
        settings = load_settings(
            args.config,
            genetic_code=args.genetic_code,
            protein_frame=args.protein_frame,
            reading_frame=args.reading_frame,
            min_count=args.min_count,
            max_count=args.max_count,
            randomness_threshold=args.randomness_threshold,
            coverage_window=args.coverage_window,
            coverage_threshold=args.coverage_threshold,
        )
        logger.debug(f"Settings: {settings}")

        table = build_codon_table(settings.genetic_code)
        records = read_sequence_records(args.sequence)
        if not records:
            raise InputFormatError(f"No sequence records in {args.sequence}")

        name = args.amino_acid if args.amino_acid is not None else _ask_amino_acid()
        amino_acid = table.resolve(name)
        logger.info(f"Proteins end at a stop codon or at {amino_acid.name} ({', '.join(sorted(amino_acid.codons))})")

        protein_rows, codon_rows, region_rows, summary_rows = [], [], [], []
        for record_id, raw in tqdm(records, desc="Analyzing records", disable=len(records) < 2):
            dna = validate_dna(normalize_dna(raw), record_id)
            result = analyze_sequence(dna, amino_acid, table, settings)
            _log_result(logger, record_id, result, settings)

            protein_rows.extend(build_protein_rows(record_id, result.proteins, settings.genetic_code))
            codon_rows.extend(build_codon_rows(record_id, settings.reading_frame, result.codon_counts))
            region_rows.extend(build_region_rows(record_id, result.regions))
            summary_rows.append(build_summary_row(record_id, result, settings))

    except DNAnalyzerError as e:
        logger.error(str(e))
        return 2

    if args.out:
        out = ensure_outdir(args.out)
        write_tsv(out / "proteins.tsv", protein_rows, columns=PROTEIN_COLUMNS)
        write_tsv(out / "codon_counts.tsv", codon_rows, columns=CODON_COLUMNS)
        write_tsv(out / "regions.tsv", region_rows, columns=REGION_COLUMNS)
        write_tsv(out / "summary.tsv", summary_rows)
        logger.info(f"Wrote reports to {out}")

    logger.info("dnanalyzer finished successfully")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
