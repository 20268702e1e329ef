# dnanalyzer/cli.py

from __future__ import annotations

import argparse
from typing import Optional

from dnanalyzer import __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dnanalyzer",
        description="Find proteins, codon statistics and composition metrics in a DNA sequence.",
    )
    parser.add_argument("--version", action="version", version=f"dnanalyzer {__version__}")

    # Inputs
    parser.add_argument("sequence", help="DNA/RNA sequence file (FASTA or plain text).")
    parser.add_argument(
        "--amino-acid",
        default=None,
        help="Amino acid that also terminates proteins (name, 3-letter or 1-letter code). "
        "Prompted for when omitted.",
    )
    parser.add_argument("--config", default=None, help="Optional YAML settings file.")

    # Outputs
    parser.add_argument("--out", default=None, help="Output directory for TSV reports.")
    parser.add_argument("--log-file", default=None, help="Optional log file path.")
    parser.add_argument("--verbose", action="store_true", help="Verbose logging.")
    parser.add_argument("--quiet", action="store_true", help="Only log warnings and errors.")

    # Knobs (override the config file)
    parser.add_argument("--genetic-code", type=int, default=None, help="NCBI genetic code id (default 1).")
    parser.add_argument("--protein-frame", type=int, default=None, help="Frame scanned for proteins (default 0).")
    parser.add_argument("--reading-frame", type=int, default=None, help="Frame offset for codon counts (default 1).")
    parser.add_argument("--min-count", type=int, default=None, help="Minimum codon count to report (default 5).")
    parser.add_argument("--max-count", type=int, default=None, help="Maximum codon count to report (default 10).")
    parser.add_argument(
        "--randomness-threshold",
        type=float,
        default=None,
        help="Chi-square cutoff below which composition is called random (default 7.815).",
    )
    parser.add_argument(
        "--coverage-window",
        type=int,
        default=None,
        help="Window size in nt for high coverage regions (default 100).",
    )
    parser.add_argument(
        "--coverage-threshold",
        type=int,
        default=None,
        help="Minimum number of proteins per window for a high coverage region (default 2).",
    )
    return parser


def get_cli_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)
