# dnanalyzer/core/codon_table.py

from __future__ import annotations

from dataclasses import dataclass
from itertools import product
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Tuple, Union

from Bio.Data import CodonTable as BioCodonTable

from dnanalyzer.exceptions import AminoAcidNotFoundError, InvalidArgumentError

STOP = "stop"
METHIONINE = "methionine"

ALL_CODONS: Tuple[str, ...] = tuple("".join(p) for p in product("acgt", repeat=3))

# one-letter code -> (full name, three-letter abbreviation)
AMINO_ACID_NAMES: Dict[str, Tuple[str, str]] = {
    "I": ("isoleucine", "ile"),
    "L": ("leucine", "leu"),
    "V": ("valine", "val"),
    "F": ("phenylalanine", "phe"),
    "M": (METHIONINE, "met"),
    "C": ("cysteine", "cys"),
    "A": ("alanine", "ala"),
    "G": ("glycine", "gly"),
    "P": ("proline", "pro"),
    "T": ("threonine", "thr"),
    "S": ("serine", "ser"),
    "Y": ("tyrosine", "tyr"),
    "W": ("tryptophan", "trp"),
    "Q": ("glutamine", "gln"),
    "N": ("asparagine", "asn"),
    "H": ("histidine", "his"),
    "E": ("glutamic acid", "glu"),
    "D": ("aspartic acid", "asp"),
    "K": ("lysine", "lys"),
    "R": ("arginine", "arg"),
    "*": (STOP, STOP),
}


@dataclass(frozen=True)
class AminoAcid:
    name: str
    code: str
    abbreviation: str
    codons: FrozenSet[str]

    def __contains__(self, codon: str) -> bool:
        return codon.lower() in self.codons


def _norm_name(x: str) -> str:
    s = str(x).strip().lower().replace("_", " ").replace("-", " ")
    return " ".join(s.split())


class CodonTable:
    """
    Read-only mapping of amino acid name -> synonymous codons.

    Every codon in the table is lowercase DNA (t, not u). Lookups accept the
    full name ("glutamic acid"), the three-letter abbreviation ("glu") or the
    one-letter code ("e", "*" for stop), case-insensitively.
    """

    def __init__(self, amino_acids: Iterable[AminoAcid], table_id: int | None = None):
        by_name: Dict[str, AminoAcid] = {}
        by_codon: Dict[str, AminoAcid] = {}
        for aa in amino_acids:
            by_name[aa.name] = aa
            for codon in aa.codons:
                if codon in by_codon:
                    raise InvalidArgumentError(
                        f"Codon {codon!r} assigned to both {by_codon[codon].name!r} and {aa.name!r}"
                    )
                by_codon[codon] = aa

        missing = set(ALL_CODONS) - set(by_codon)
        if missing:
            raise InvalidArgumentError(f"Codon table does not assign codon(s): {sorted(missing)}")
        if METHIONINE not in by_name or STOP not in by_name:
            raise InvalidArgumentError("Codon table needs both a methionine and a stop class")

        aliases: Dict[str, AminoAcid] = {}
        for aa in by_name.values():
            aliases[aa.name] = aa
            aliases[aa.abbreviation] = aa
            aliases[aa.code.lower()] = aa

        self.table_id = table_id
        self._by_name: Mapping[str, AminoAcid] = MappingProxyType(by_name)
        self._by_codon: Mapping[str, AminoAcid] = MappingProxyType(by_codon)
        self._aliases: Mapping[str, AminoAcid] = MappingProxyType(aliases)

    def __len__(self) -> int:
        return len(self._by_name)

    def __iter__(self):
        return iter(self._by_name.values())

    def __contains__(self, name: str) -> bool:
        return _norm_name(name) in self._aliases

    def __repr__(self) -> str:
        return f"CodonTable(table_id={self.table_id}, amino_acids={len(self)})"

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(self._by_name)

    @property
    def start_codons(self) -> FrozenSet[str]:
        return self._by_name[METHIONINE].codons

    @property
    def stop_codons(self) -> FrozenSet[str]:
        return self._by_name[STOP].codons

    def resolve(self, name: Union[str, AminoAcid]) -> AminoAcid:
        if isinstance(name, AminoAcid):
            return name
        key = _norm_name(name)
        try:
            return self._aliases[key]
        except KeyError:
            raise AminoAcidNotFoundError(
                f"Unknown amino acid: {name!r}. Expected one of: {', '.join(self.names)}"
            ) from None

    def codons_for(self, name: Union[str, AminoAcid]) -> FrozenSet[str]:
        return self.resolve(name).codons

    def amino_acid_for(self, codon: str) -> AminoAcid:
        c = str(codon).strip().lower().replace("u", "t")
        try:
            return self._by_codon[c]
        except KeyError:
            raise InvalidArgumentError(f"Invalid codon: {codon!r} (expected a/c/g/t triplet)") from None


def build_codon_table(table_id: int = 1) -> CodonTable:
    """
    Build the codon table for an NCBI genetic code (1 = standard).

    Codon assignments come from Biopython; the start signal is always the
    methionine class, not the table's alternative initiation codons.
    """
    try:
        bio_table = BioCodonTable.unambiguous_dna_by_id[int(table_id)]
    except (KeyError, TypeError, ValueError):
        raise InvalidArgumentError(f"Unknown NCBI genetic code id: {table_id!r}") from None

    grouped: Dict[str, set] = {code: set() for code in AMINO_ACID_NAMES}
    for codon, aa in bio_table.forward_table.items():
        grouped[aa].add(codon.lower())
    grouped["*"].update(c.lower() for c in bio_table.stop_codons)

    amino_acids = []
    for code, (name, abbreviation) in AMINO_ACID_NAMES.items():
        amino_acids.append(
            AminoAcid(name=name, code=code, abbreviation=abbreviation, codons=frozenset(grouped[code]))
        )
    return CodonTable(amino_acids, table_id=int(table_id))
