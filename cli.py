# cli.py
import argparse
import os
import sys
from pathlib import Path

from log_reader import read_log
from random_ints import parse_random_spec, write_random_ints
from records import flatten_all, keep_grouped
from report_writer import write_csv

CSV_SUFFIX = ".csv"
UNDEFINED_GRAPH = "undefined"   # file stem for results seen before any header


def resolve_command(cmd: str, out: str) -> str:
    # an output path without extension means "write into a directory"
    if os.path.splitext(out)[1] == "":
        return cmd + "-dir"
    return cmd


def run(token, source, out) -> int:
    cmd = resolve_command(token, out)

    if cmd == "csv":
        table = read_log(source)
        write_csv(out, flatten_all(table))

    elif cmd == "csv-dir":
        table = read_log(source)
        if None in table and UNDEFINED_GRAPH in table:
            raise ValueError(f"graph '{UNDEFINED_GRAPH}' clashes with results logged before any header")
        out_dir = Path(out)
        out_dir.mkdir(parents=True, exist_ok=True)
        for graph, records in keep_grouped(table).items():
            stem = UNDEFINED_GRAPH if graph is None else graph
            write_csv(out_dir / (stem + CSV_SUFFIX), records)

    elif cmd in ("random-ints", "random-ints-dir"):
        n, low, high = parse_random_spec(source)
        write_random_ints(out, n, low, high)

    else:
        print(f'error: "{token}"?', file=sys.stderr)
        return 1

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert byte-sum benchmark logs to CSV, or write random integers"
    )
    parser.add_argument("command", help="csv | random-ints")
    parser.add_argument("source", help="log file, or 'n,min,max' for random-ints")
    parser.add_argument("out", help="output file; a path without extension is a directory")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return run(args.command, args.source, args.out)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
