import pandas as pd
import pytest

from dnanalyzer.config import AnalysisSettings
from dnanalyzer.core.coverage import Region
from dnanalyzer.main import analyze_sequence, main

SEQ = "atgaaatagcccatgcccgggtaa"


@pytest.fixture
def seq_file(tmp_path):
    path = tmp_path / "dna.fa"
    path.write_text(f">rec1\n{SEQ.upper()}\n>rec2\n{SEQ.replace('t', 'u')}\n")
    return path


def test_analyze_sequence(table):
    result = analyze_sequence(SEQ, table.resolve("lysine"), table, AnalysisSettings(min_count=1))
    assert [(p.start, p.end) for p in result.proteins] == [(0, 6), (12, 24)]
    assert result.proteins[0].terminator == "lysine"
    assert result.longest == result.proteins[1]
    assert result.length == len(SEQ)
    assert sum(result.nucleotide_counts.values()) == len(SEQ)
    assert result.codon_counts
    assert all(1 <= n <= 10 for _, n in result.codon_counts)
    assert result.regions == [Region(0, 24, 2)]
    assert result.notes == []


def test_analyze_sequence_without_proteins(table):
    result = analyze_sequence("cccgggccc", table.resolve("lysine"), table, AnalysisSettings())
    assert result.proteins == []
    assert result.longest is None
    assert result.notes == ["no proteins found"]


def test_main_writes_reports(seq_file, tmp_path):
    out = tmp_path / "out"
    code = main([str(seq_file), "--amino-acid", "Lys", "--out", str(out), "--min-count", "1"])
    assert code == 0

    proteins = pd.read_csv(out / "proteins.tsv", sep="\t")
    assert list(proteins["record_id"]) == ["rec1", "rec1", "rec2", "rec2"]
    assert list(proteins["peptide"])[:2] == ["MK", "MPG*"]

    summary = pd.read_csv(out / "summary.tsv", sep="\t")
    assert list(summary["n_proteins"]) == [2, 2]
    assert list(summary["amino_acid"]) == ["lysine", "lysine"]
    assert (summary["count_a"] + summary["count_t"] + summary["count_g"] + summary["count_c"] == len(SEQ)).all()

    codons = pd.read_csv(out / "codon_counts.tsv", sep="\t")
    assert set(codons["frame"]) == {1}
    assert (out / "regions.tsv").exists()


def test_main_prompts_for_amino_acid(seq_file, monkeypatch):
    monkeypatch.setattr("builtins.input", lambda prompt="": "Methionine\n")
    assert main([str(seq_file)]) == 0


def test_main_config_file(seq_file, tmp_path):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("reading_frame: 0\ncoverage_threshold: 1\n")
    out = tmp_path / "out"
    assert main([str(seq_file), "--amino-acid", "stop", "--config", str(cfg), "--out", str(out)]) == 0
    regions = pd.read_csv(out / "regions.tsv", sep="\t")
    assert len(regions) >= 1


def test_main_invalid_dna(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("atgxxxtag\n")
    assert main([str(path), "--amino-acid", "lysine"]) == 2


def test_main_unknown_amino_acid(seq_file):
    assert main([str(seq_file), "--amino-acid", "kryptonite"]) == 2


@pytest.mark.parametrize(
    "args",
    [
        ["--reading-frame", "5"],
        ["--min-count", "9", "--max-count", "2"],
        ["--coverage-window", "0"],
        ["--genetic-code", "999"],
    ],
)
def test_main_invalid_settings(seq_file, args):
    assert main([str(seq_file), "--amino-acid", "lysine", *args]) == 2


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.fa"), "--amino-acid", "lysine"]) == 2
