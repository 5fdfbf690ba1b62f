# records.py
from dataclasses import asdict, dataclass, fields
from typing import Dict, List, Optional

import pandas as pd


@dataclass(frozen=True)
class ResultRecord:
    graph: Optional[str]
    early_madvice: bool
    block_size: float
    mode: Optional[str]
    time: float
    sum: float
    technique: str


RECORD_COLUMNS = [f.name for f in fields(ResultRecord)]

LogTable = Dict[Optional[str], List[ResultRecord]]


def flatten_all(table: LogTable) -> List[ResultRecord]:
    """Concatenate each graph's records, graphs in first-seen order."""
    rows = []
    for records in table.values():
        rows.extend(records)
    return rows


def keep_grouped(table: LogTable) -> LogTable:
    return table


def as_dict(record) -> dict:
    if isinstance(record, ResultRecord):
        return asdict(record)
    return dict(record)


def to_frame(records, convert=None) -> pd.DataFrame:
    """
    Tabular view of uniformly-shaped records (dataclasses or mappings).
    Columns follow the field order of the first record; `convert` is applied
    to every value when given.
    """
    rows = [as_dict(r) for r in records]
    if convert is not None:
        rows = [{k: convert(v) for k, v in row.items()} for row in rows]
    if not rows:
        return pd.DataFrame(columns=RECORD_COLUMNS)
    return pd.DataFrame(rows, columns=list(rows[0].keys()), dtype=object)
