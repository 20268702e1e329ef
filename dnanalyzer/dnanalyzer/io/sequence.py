# dnanalyzer/io/sequence.py

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Tuple

from Bio import SeqIO

from dnanalyzer.exceptions import InputFormatError

_DNA_RE = re.compile(r"[atgc]+")


def normalize_dna(seq: str) -> str:
    """
    Lowercase, drop whitespace and convert RNA uracil to thymine.
    """
    s = "".join((seq or "").split()).lower()
    return s.replace("u", "t")


def is_valid_dna(seq: str) -> bool:
    return bool(seq) and _DNA_RE.fullmatch(seq) is not None


def validate_dna(seq: str, record_id: str = "sequence") -> str:
    if not seq:
        raise InputFormatError(f"Record '{record_id}' has an empty sequence")
    if not is_valid_dna(seq):
        bad = sorted(set(seq) - set("atgc"))
        raise InputFormatError(
            f"Invalid characters are present in DNA sequence '{record_id}': {''.join(bad)!r}"
        )
    return seq


def _is_fasta(path: Path) -> bool:
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            if line.strip():
                return line.lstrip().startswith(">")
    return False


def read_sequence_records(path) -> List[Tuple[str, str]]:
    """
    Read (record_id, sequence) pairs from a FASTA file or a plain text file.

    Plain text is concatenated into a single record named after the file
    stem. Sequences are returned as found; call normalize_dna/validate_dna
    before analysis.
    """
    p = Path(path)
    if not p.is_file():
        raise InputFormatError(f"Sequence file not found: {p}")

    try:
        if _is_fasta(p):
            return [(r.id, str(r.seq)) for r in SeqIO.parse(str(p), "fasta")]
        text = p.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise InputFormatError(f"Sequence file is not text: {p}. Error: {e}")

    return [(p.stem, "".join(text.split()))]
