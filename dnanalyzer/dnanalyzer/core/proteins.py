# dnanalyzer/core/proteins.py

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Union

from Bio.Seq import Seq

from dnanalyzer.core.codon_table import STOP, AminoAcid, CodonTable
from dnanalyzer.core.frames import iter_codons


@dataclass(frozen=True)
class Protein:
    """An open reading frame from a methionine codon to its terminating codon."""

    sequence: str    # DNA, includes the terminating codon
    start: int       # 0-based inclusive (first base of the start codon)
    end: int         # 0-based exclusive (after the terminating codon)
    frame: int
    terminator: str  # amino acid name that closed the protein

    @property
    def length(self) -> int:
        """Codon count including the terminating codon."""
        return len(self.sequence) // 3

    def overlaps(self, start: int, end: int) -> bool:
        return self.start < end and start < self.end

    def translate(self, table: int = 1) -> str:
        return str(Seq(self.sequence.upper()).translate(table=table))


def find_proteins(
    seq: str,
    target: Union[str, AminoAcid],
    table: CodonTable,
    frame: int = 0,
) -> List[Protein]:
    """
    Scan one reading frame for proteins.

    A methionine codon opens a protein; it closes (inclusively) at the first
    codon, the opening one included, that is a stop codon or encodes the
    target amino acid, stop taking precedence. With methionine as the target
    every start codon is therefore a one-codon protein. Scanning resumes
    after the closing codon, so proteins never overlap. A protein still open
    at the end of the sequence is dropped.
    """
    target_aa = table.resolve(target)
    starts = table.start_codons
    stops = table.stop_codons

    s = (seq or "").lower()
    proteins: List[Protein] = []
    open_at: Optional[int] = None

    for pos, codon in iter_codons(s, frame):
        if open_at is None:
            if codon not in starts:
                continue
            open_at = pos

        if codon in stops:
            closed_by = STOP
        elif codon in target_aa.codons:
            closed_by = target_aa.name
        else:
            continue

        proteins.append(
            Protein(
                sequence=s[open_at : pos + 3],
                start=open_at,
                end=pos + 3,
                frame=frame,
                terminator=closed_by,
            )
        )
        open_at = None

    return proteins
