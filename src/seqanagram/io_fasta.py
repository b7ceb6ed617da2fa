from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Tuple
from Bio import SeqIO

from .sequence import SequencePair, pair_from_values

@dataclass
class FastaRecord:
    id: str
    description: str
    seq: str

def read_fasta(path: str) -> List[FastaRecord]:
    recs: List[FastaRecord] = []
    for r in SeqIO.parse(path, "fasta"):
        recs.append(FastaRecord(id=r.id, description=r.description, seq=str(r.seq)))
    if not recs:
        raise ValueError(f"No FASTA records found: {path}")
    return recs

def read_fasta_pairs(path: str) -> List[SequencePair]:
    """Consecutive records form a pair: (1st, 2nd), (3rd, 4th), ..."""
    recs = read_fasta(path)
    if len(recs) % 2 != 0:
        raise ValueError(f"Expected an even number of FASTA records in {path}, found {len(recs)}.")
    pairs: List[SequencePair] = []
    for a, b in zip(recs[0::2], recs[1::2]):
        pairs.append(pair_from_values(a.seq, b.seq, label=f"{a.id}/{b.id}"))
    return pairs

def write_fasta(path: str, entries: Iterable[Tuple[str, str]]) -> None:
    with open(path, "w", encoding="utf-8") as f:
        for h, s in entries:
            f.write(f">{h}\n")
            for i in range(0, len(s), 80):
                f.write(s[i:i+80] + "\n")
