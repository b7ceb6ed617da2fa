import logging

import pytest

from seqanagram.matching import MatchResult
from seqanagram.runner import (
    RunConfig,
    collect_pairs,
    format_report,
    format_summary,
    load_config,
    run_pairs,
    write_match_fasta,
    write_report_tsv,
)
from seqanagram.sequence import DEFAULT_PAIRS, SequencePair


def test_run_default_pairs():
    reports = run_pairs(DEFAULT_PAIRS)
    assert [r.result for r in reports] == [
        MatchResult(3, 1, 0),
        MatchResult(2, 0, 0),
        MatchResult(2, 0, 0),
        MatchResult(0, -1, -1),
    ]
    assert [r.status for r in reports] == ["matched", "matched", "matched", "no_match"]
    assert reports[0].matched_seq1 == "CGT"
    assert reports[0].matched_seq2 == "GTC"
    assert reports[3].matched_seq1 == ""


def test_format_report_and_summary():
    report = run_pairs([SequencePair("ACGT", "GTC")])[0]
    assert format_report(report) == (
        "Pair:            ACGT / GTC\n"
        "Match Length:    3\n"
        "Sequence 1 pos:  1\n"
        "Sequence 2 pos:  0\n"
        "--"
    )
    assert format_summary(4) == "+Total Sequences Checked:           4"


def test_max_short_length_skips_long_searches():
    cfg = RunConfig(max_short_length=3)
    pairs = [SequencePair("ACGTA", "TTGCAT"), SequencePair("ACGT", "GTC"), SequencePair("ACGTA", "ACGTA")]
    reports = run_pairs(pairs, cfg)
    assert [r.status for r in reports] == ["skipped", "matched", "matched"]
    assert reports[0].result == MatchResult.none()
    assert "skipped" in format_report(reports[0])


def test_max_short_length_still_reports_literal_containment():
    cfg = RunConfig(max_short_length=3)
    reports = run_pairs([SequencePair("ACGTAC", "TTACGTACGG"), SequencePair("GGCATT", "TTACGG")], cfg)
    assert [r.status for r in reports] == ["matched", "matched"]
    assert reports[0].result == MatchResult(6, 0, 2)
    assert reports[1].result == MatchResult(6, 0, 0)


class _FixedFinder:
    def __init__(self):
        self.calls = []

    def find_match(self, seq1, seq2):
        self.calls.append((seq1, seq2))
        return MatchResult(1, 0, 0)


def test_run_pairs_uses_supplied_finder():
    finder = _FixedFinder()
    reports = run_pairs([SequencePair("AC", "CA")], finder=finder)
    assert finder.calls == [("AC", "CA")]
    assert reports[0].result == MatchResult(1, 0, 0)


def test_collect_pairs_skips_invalid_tokens(caplog):
    cfg = RunConfig()
    with caplog.at_level(logging.ERROR, logger="seqanagram.runner"):
        pairs = collect_pairs(["tacg,gc", "TACX,GC"], cfg)
    assert pairs == [SequencePair("TACG", "GC")]
    assert 'Invalid pair string: "TACX,GC"' in caplog.text


def test_collect_pairs_falls_back_to_defaults():
    cfg = RunConfig(default_pairs=[SequencePair("AC", "CA")])
    assert collect_pairs(["nope"], cfg) == [SequencePair("AC", "CA")]
    assert collect_pairs([], cfg) == [SequencePair("AC", "CA")]
    assert collect_pairs([], cfg, fallback=False) == []


def test_dump_candidates_logs_candidate_stream(caplog):
    cfg = RunConfig(dump_candidates=True)
    with caplog.at_level(logging.DEBUG, logger="seqanagram.runner"):
        run_pairs([SequencePair("ACA", "GT")], cfg)
    assert "Dumping ALL sequences for GT" in caplog.text
    assert "'TG'" in caplog.text


def test_config_from_yaml(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text(
        "pairs:\n"
        "  - acgt,gtc\n"
        "  - [TTGACATG, AGTAGCAT]\n"
        "verbose: true\n"
        "max_short_length: 8\n"
        "outputs:\n"
        "  report_tsv: report.tsv\n",
        encoding="utf-8",
    )
    cfg = RunConfig.from_mapping(load_config(str(path)))
    assert cfg.default_pairs == [SequencePair("ACGT", "GTC"), SequencePair("TTGACATG", "AGTAGCAT")]
    assert cfg.verbose is True
    assert cfg.dump_candidates is False
    assert cfg.max_short_length == 8
    assert cfg.report_tsv == "report.tsv"
    assert cfg.matches_fasta is None


def test_config_errors(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- ACGT,GTC\n", encoding="utf-8")
    with pytest.raises(ValueError, match="mapping"):
        load_config(str(path))
    with pytest.raises(ValueError, match="pairs\\[0\\]"):
        RunConfig.from_mapping({"pairs": [["A", "C", "G"]]})
    with pytest.raises(ValueError, match="max_short_length"):
        RunConfig.from_mapping({"max_short_length": 0})


def test_empty_config_file_uses_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    cfg = RunConfig.from_mapping(load_config(str(path)))
    assert cfg.default_pairs == list(DEFAULT_PAIRS)


def test_write_report_tsv(tmp_path):
    reports = run_pairs([SequencePair("ACGT", "GTC", label="p1"), SequencePair("ACA", "GT")])
    path = tmp_path / "report.tsv"
    write_report_tsv(str(path), reports)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0].split("\t") == [
        "label", "seq1", "seq2", "status", "length", "seq1_pos", "seq2_pos", "matched_seq1", "matched_seq2",
    ]
    assert lines[1].split("\t") == ["p1", "ACGT", "GTC", "matched", "3", "1", "0", "CGT", "GTC"]
    assert lines[2].split("\t") == ["", "ACA", "GT", "no_match", "0", "-1", "-1", "", ""]


def test_write_match_fasta(tmp_path):
    reports = run_pairs([SequencePair("ACGT", "GTC", label="p1"), SequencePair("ACA", "GT")])
    path = tmp_path / "matches.fasta"
    write_match_fasta(str(path), reports)
    assert path.read_text(encoding="utf-8").splitlines() == [
        ">p1|seq1|pos=1|len=3",
        "CGT",
        ">p1|seq2|pos=0|len=3",
        "GTC",
    ]
