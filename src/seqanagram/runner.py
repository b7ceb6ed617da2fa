from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

import yaml

from .io_fasta import write_fasta
from .matching import AnagramMatchFinder, MatchFinder, MatchResult, all_candidates, literal_match, order_by_length
from .sequence import DEFAULT_PAIRS, InvalidPairError, SequencePair, pair_from_values, parse_pair

logger = logging.getLogger(__name__)

STATUS_MATCHED = "matched"
STATUS_NO_MATCH = "no_match"
STATUS_SKIPPED = "skipped"

REPORT_HEADER = [
    "label",
    "seq1",
    "seq2",
    "status",
    "length",
    "seq1_pos",
    "seq2_pos",
    "matched_seq1",
    "matched_seq2",
]


@dataclass
class RunConfig:
    default_pairs: List[SequencePair] = field(default_factory=lambda: list(DEFAULT_PAIRS))
    verbose: bool = False
    dump_candidates: bool = False
    max_short_length: Optional[int] = None  # None = no bound on permutation search
    report_tsv: Optional[str] = None
    matches_fasta: Optional[str] = None

    @classmethod
    def from_mapping(cls, cfg: Dict[str, Any]) -> "RunConfig":
        pairs_cfg = cfg.get("pairs", None)
        if pairs_cfg:
            default_pairs = _pairs_from_config(pairs_cfg)
        else:
            default_pairs = list(DEFAULT_PAIRS)

        max_short = cfg.get("max_short_length", None)
        if max_short is not None:
            max_short = int(max_short)
            if max_short < 1:
                raise ValueError("max_short_length must be >= 1.")

        outputs = cfg.get("outputs", {}) or {}
        return cls(
            default_pairs=default_pairs,
            verbose=bool(cfg.get("verbose", False)),
            dump_candidates=bool(cfg.get("dump_candidates", False)),
            max_short_length=max_short,
            report_tsv=outputs.get("report_tsv"),
            matches_fasta=outputs.get("matches_fasta"),
        )


@dataclass(frozen=True)
class PairReport:
    pair: SequencePair
    result: MatchResult
    status: str

    @property
    def matched_seq1(self) -> str:
        if not self.result.found:
            return ""
        return self.pair.seq1[self.result.seq1_pos:self.result.seq1_pos + self.result.length]

    @property
    def matched_seq2(self) -> str:
        if not self.result.found:
            return ""
        return self.pair.seq2[self.result.seq2_pos:self.result.seq2_pos + self.result.length]


def _pairs_from_config(items: Iterable[Any]) -> List[SequencePair]:
    pairs: List[SequencePair] = []
    for i, item in enumerate(items):
        if isinstance(item, str):
            pairs.append(parse_pair(item))
        elif isinstance(item, (list, tuple)) and len(item) == 2:
            pairs.append(pair_from_values(str(item[0]), str(item[1])))
        else:
            raise ValueError(f"pairs[{i}] must be 'A,B' or a 2-item list; got {item!r}")
    return pairs


def load_config(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    if cfg is None:
        return {}
    if not isinstance(cfg, dict):
        raise ValueError("Config must be a YAML mapping.")
    return cfg


def collect_pairs(tokens: Iterable[str], config: RunConfig, fallback: bool = True) -> List[SequencePair]:
    """
    Parse 'A,B' tokens, logging and skipping invalid ones.
    Falls back to config.default_pairs when nothing valid was given (unless fallback=False).
    """
    pairs: List[SequencePair] = []
    for i, token in enumerate(tokens):
        try:
            pair = parse_pair(token)
        except InvalidPairError as e:
            logger.error("+ERROR: %s", e)
            continue
        logger.debug("CLI Pair %d: %s | %s", i, pair.seq1, pair.seq2)
        pairs.append(pair)
    if not pairs and fallback:
        return list(config.default_pairs)
    return pairs


def run_pairs(
    pairs: Iterable[SequencePair],
    config: Optional[RunConfig] = None,
    finder: Optional[MatchFinder] = None,
) -> List[PairReport]:
    config = config or RunConfig()
    finder = finder or AnagramMatchFinder()

    reports: List[PairReport] = []
    for pair in pairs:
        short, _long, _short_is_seq1 = order_by_length(pair.seq1, pair.seq2)

        if config.max_short_length is not None and len(short) > config.max_short_length:
            # Identity and literal containment need no permutations, so they still run.
            fast = literal_match(pair.seq1, pair.seq2)
            if fast is not None:
                reports.append(PairReport(pair=pair, result=fast, status=STATUS_MATCHED))
                continue
            logger.warning(
                "Skipping %s: shorter sequence has %d symbols (max_short_length=%d)",
                pair.display, len(short), config.max_short_length,
            )
            reports.append(PairReport(pair=pair, result=MatchResult.none(), status=STATUS_SKIPPED))
            continue

        if config.dump_candidates:
            logger.debug("Dumping ALL sequences for %s - %s", short, list(all_candidates(short)))

        res = finder.find_match(pair.seq1, pair.seq2)
        status = STATUS_MATCHED if res.found else STATUS_NO_MATCH
        logger.info("%s -> %s (length=%d)", pair.display, status, res.length)
        reports.append(PairReport(pair=pair, result=res, status=status))
    return reports


def format_report(report: PairReport) -> str:
    res = report.result
    lines = [
        f"Pair:            {report.pair.display}",
        f"Match Length:    {res.length}",
        f"Sequence 1 pos:  {res.seq1_pos}",
        f"Sequence 2 pos:  {res.seq2_pos}",
    ]
    if report.status == STATUS_SKIPPED:
        lines.append("Status:          skipped (sequence too long for permutation search)")
    lines.append("--")
    return "\n".join(lines)


def format_summary(n_pairs: int) -> str:
    return f"+Total Sequences Checked:           {n_pairs}"


def write_report_tsv(path: str, reports: Iterable[PairReport]) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write("\t".join(REPORT_HEADER) + "\n")
        for r in reports:
            row = {
                "label": r.pair.label,
                "seq1": r.pair.seq1,
                "seq2": r.pair.seq2,
                "status": r.status,
                "length": str(r.result.length),
                "seq1_pos": str(r.result.seq1_pos),
                "seq2_pos": str(r.result.seq2_pos),
                "matched_seq1": r.matched_seq1,
                "matched_seq2": r.matched_seq2,
            }
            f.write("\t".join(row[h] for h in REPORT_HEADER) + "\n")


def write_match_fasta(path: str, reports: Iterable[PairReport]) -> None:
    entries = []
    for idx, r in enumerate(reports, start=1):
        if not r.result.found:
            continue
        pair_id = r.pair.label or f"pair{idx:02d}"
        entries.append((f"{pair_id}|seq1|pos={r.result.seq1_pos}|len={r.result.length}", r.matched_seq1))
        entries.append((f"{pair_id}|seq2|pos={r.result.seq2_pos}|len={r.result.length}", r.matched_seq2))
    write_fasta(path, entries)
