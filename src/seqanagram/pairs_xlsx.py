from __future__ import annotations
from typing import List, Optional
import openpyxl

from .sequence import SequencePair, pair_from_values, InvalidPairError

def load_pairs_xlsx(path: str, sheet: Optional[str] = None) -> List[SequencePair]:
    wb = openpyxl.load_workbook(path, data_only=True, read_only=True)
    try:
        return _read_pairs(wb, path, sheet)
    finally:
        wb.close()


def _read_pairs(wb, path: str, sheet: Optional[str]) -> List[SequencePair]:
    if sheet:
        if sheet not in wb.sheetnames:
            raise ValueError(f"Sheet '{sheet}' not found in {path}. Available: {wb.sheetnames}")
        ws = wb[sheet]
    else:
        ws = wb[wb.sheetnames[0]]

    rows = ws.iter_rows(values_only=True)
    try:
        header = [str(x).strip().lower() if x is not None else "" for x in next(rows)]
    except StopIteration:
        raise ValueError("Empty sequence pair sheet.")

    def idx_of(*names: str) -> int:
        for n in names:
            if n in header:
                return header.index(n)
        return -1

    i_seq1 = idx_of("seq1", "sequence 1", "sequence_1", "seq_1", "a")
    i_seq2 = idx_of("seq2", "sequence 2", "sequence_2", "seq_2", "b")
    i_label = idx_of("label", "id", "name")

    if i_seq1 < 0 or i_seq2 < 0:
        raise ValueError(f"Pair sheet must have seq1 and seq2 columns; header={header}")

    def cell(r, i: int) -> str:
        if i < 0 or i >= len(r) or r[i] is None:
            return ""
        return str(r[i]).strip()

    out: List[SequencePair] = []
    for row_no, r in enumerate(rows, start=2):
        s1 = cell(r, i_seq1)
        s2 = cell(r, i_seq2)
        if not s1 and not s2:
            continue
        label = cell(r, i_label)
        try:
            out.append(pair_from_values(s1, s2, label=label))
        except InvalidPairError as e:
            raise InvalidPairError(f"{path} row {row_no}: {e}") from e
    return out
