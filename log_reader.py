# log_reader.py
from dataclasses import dataclass
from typing import Optional

from file_io import read_lines
from line_parser import parse_line, to_record_fields
from records import LogTable, ResultRecord


@dataclass(frozen=True)
class ParserState:
    graph: Optional[str] = None     # None until the first header line


def step(state: ParserState, line: str):
    """
    One transition of the log scanner.

    Returns the next state and the emitted event, which is one of
    ("header", graph), ("record", ResultRecord) or None for inert lines.
    """
    parsed = parse_line(line)
    if parsed is None:
        return state, None

    if parsed["kind"] == "header":
        graph = parsed["graph"]
        return ParserState(graph), ("header", graph)

    record = ResultRecord(graph=state.graph, **to_record_fields(parsed["fields"]))
    return state, ("record", record)


def parse_lines(lines) -> LogTable:
    table: LogTable = {}
    state = ParserState()

    for line in lines:
        state, event = step(state, line)
        if event is None:
            continue

        kind, value = event
        if kind == "header":
            # a repeated header keeps the records collected so far
            table.setdefault(value, [])
        else:
            table.setdefault(value.graph, []).append(value)

    return table


def read_log(log_path) -> LogTable:
    print(f"Reading log file: {log_path}")

    table = parse_lines(read_lines(log_path))

    total = sum(len(records) for records in table.values())
    print(f"Loaded {total} results for {len(table)} graphs.")
    return table
