from __future__ import annotations
import argparse
import logging
from typing import List, Optional

from .io_fasta import read_fasta_pairs
from .pairs_xlsx import load_pairs_xlsx
from .runner import (
    RunConfig,
    collect_pairs,
    format_report,
    format_summary,
    load_config,
    run_pairs,
    write_match_fasta,
    write_report_tsv,
)
from .sequence import SequencePair

BANNER = "+ Find DNA sequences with anagram pairs within them, output largest result per pair."


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="seqanagram", description="Largest anagram match between DNA sequence pairs.")
    sub = p.add_subparsers(dest="cmd", required=True)

    run = sub.add_parser("run", help="Find the largest anagram match for each sequence pair.")
    run.add_argument("pairs", nargs="*", help="Comma-delimited sequence pairs, e.g. TACG,GC TTGACATG,AGTAGCAT")
    run.add_argument("--config", help="Path to YAML config.")
    run.add_argument("--fasta", help="FASTA file; consecutive records form a pair.")
    run.add_argument("--xlsx", help="Workbook with seq1/seq2 columns.")
    run.add_argument("--sheet", default=None, help="Worksheet name for --xlsx.")
    run.add_argument("--report-tsv", default=None, help="Write a TSV report here.")
    run.add_argument("--matches-fasta", default=None, help="Write matched substrings here.")
    run.add_argument("--max-short-length", type=int, default=None,
                     help="Skip pairs whose shorter sequence exceeds this length.")
    run.add_argument("--verbose", action="store_true", help="Log debug output.")
    run.add_argument("--dump-candidates", action="store_true",
                     help="Log every permutation candidate (can get lengthy!).")
    return p


def _resolve_config(args: argparse.Namespace) -> RunConfig:
    cfg = RunConfig.from_mapping(load_config(args.config)) if args.config else RunConfig()
    if args.verbose:
        cfg.verbose = True
    if args.dump_candidates:
        cfg.dump_candidates = True
    if args.max_short_length is not None:
        if args.max_short_length < 1:
            raise ValueError("--max-short-length must be >= 1.")
        cfg.max_short_length = args.max_short_length
    if args.report_tsv:
        cfg.report_tsv = args.report_tsv
    if args.matches_fasta:
        cfg.matches_fasta = args.matches_fasta
    return cfg


def run(args: argparse.Namespace) -> int:
    cfg = _resolve_config(args)
    logging.basicConfig(
        level=logging.DEBUG if (cfg.verbose or cfg.dump_candidates) else logging.WARNING,
        format="%(asctime)s - [%(levelname)s] %(name)s: %(message)s",
    )

    print(BANNER)

    pairs: List[SequencePair] = []
    if args.fasta:
        pairs += read_fasta_pairs(args.fasta)
    if args.xlsx:
        pairs += load_pairs_xlsx(args.xlsx, args.sheet)
    pairs += collect_pairs(args.pairs, cfg, fallback=not pairs)

    reports = run_pairs(pairs, cfg)
    for r in reports:
        print(format_report(r))
    print(format_summary(len(reports)))

    if cfg.report_tsv:
        write_report_tsv(cfg.report_tsv, reports)
    if cfg.matches_fasta:
        write_match_fasta(cfg.matches_fasta, reports)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    p = _build_parser()
    args = p.parse_args(argv)

    if args.cmd == "run":
        return run(args)
    return 2
