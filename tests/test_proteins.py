import random

import pytest

from dnanalyzer.core.proteins import Protein, find_proteins
from dnanalyzer.exceptions import AminoAcidNotFoundError, InvalidArgumentError


def test_single_protein(table):
    proteins = find_proteins("atgaaatag", "leucine", table)
    assert proteins == [
        Protein(sequence="atgaaatag", start=0, end=9, frame=0, terminator="stop")
    ]
    assert proteins[0].length == 3


def test_methionine_target_closes_at_start_codon(table):
    """
    With methionine as the target, the start codon is itself a terminator,
    so the protein is the single start codon rather than running to a stop.
    """
    proteins = find_proteins("atgaaatgataatag", "methionine", table)
    assert proteins == [
        Protein(sequence="atg", start=0, end=3, frame=0, terminator="methionine")
    ]
    assert proteins[0].length == 1


def test_repeated_methionine_gives_one_codon_proteins(table):
    proteins = find_proteins("atgaaaatgaaataa", "met", table)
    assert [(p.start, p.end) for p in proteins] == [(0, 3), (6, 9)]
    assert all(p.length == 1 for p in proteins)
    assert all(p.terminator == "methionine" for p in proteins)


def test_target_amino_acid_terminates(table):
    proteins = find_proteins("atgcccaagtaa", "lysine", table)
    assert [p.sequence for p in proteins] == ["atgcccaag"]
    assert proteins[0].terminator == "lysine"


def test_stop_as_target(table):
    proteins = find_proteins("atgtaa", "stop", table)
    assert len(proteins) == 1
    assert proteins[0].terminator == "stop"


def test_scanning_resumes_after_terminator(table):
    seq = "atgaaatag" + "ccc" + "atggggtga"
    proteins = find_proteins(seq, "tryptophan", table)
    assert [(p.start, p.end) for p in proteins] == [(0, 9), (12, 21)]


def test_no_start_codon(table):
    assert find_proteins("cccgggtaa", "lysine", table) == []


def test_unterminated_protein_is_dropped(table):
    assert find_proteins("atgcccggg", "lysine", table) == []
    proteins = find_proteins("atgtaaatgccc", "lysine", table)
    assert [p.sequence for p in proteins] == ["atgtaa"]


def test_start_codon_inside_protein_is_ignored(table):
    proteins = find_proteins("atgatgcccatgtag", "lysine", table)
    assert [p.sequence for p in proteins] == ["atgatgcccatgtag"]


def test_frame_offset(table):
    proteins = find_proteins("catgaaataga", "leucine", table, frame=1)
    assert len(proteins) == 1
    assert proteins[0].start == 1
    assert proteins[0].end == 10
    assert proteins[0].frame == 1
    # Out of frame in frame 0
    assert find_proteins("catgaaataga", "leucine", table) == []


def test_uppercase_input(table):
    proteins = find_proteins("ATGAAATAG", "leucine", table)
    assert proteins[0].sequence == "atgaaatag"


@pytest.mark.parametrize("frame", [-1, 3, 1.0])
def test_invalid_frame(table, frame):
    with pytest.raises(InvalidArgumentError):
        find_proteins("atgaaatag", "leucine", table, frame=frame)


def test_unknown_target(table):
    with pytest.raises(AminoAcidNotFoundError):
        find_proteins("atgaaatag", "unobtainium", table)


def test_translate():
    protein = Protein(sequence="atgaaatag", start=0, end=9, frame=0, terminator="stop")
    assert protein.translate() == "MK*"


@pytest.mark.parametrize("seed", range(5))
@pytest.mark.parametrize("target", ["lysine", "methionine", "stop", "glycine"])
def test_proteins_are_well_formed(table, seed, target):
    rng = random.Random(seed)
    seq = "".join(rng.choice("atgc") for _ in range(3000))
    terminators = table.stop_codons | table.codons_for(target)
    proteins = find_proteins(seq, target, table)

    for p in proteins:
        assert p.sequence[:3] in table.start_codons
        assert p.sequence[-3:] in terminators
        assert seq[p.start : p.end] == p.sequence
        assert (p.end - p.start) % 3 == 0
        # No terminator before the last codon
        inner = [p.sequence[i : i + 3] for i in range(3, len(p.sequence) - 3, 3)]
        assert not (set(inner) & terminators)

    for a, b in zip(proteins, proteins[1:]):
        assert a.end <= b.start
