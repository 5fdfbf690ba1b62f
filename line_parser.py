# line_parser.py
import math
import re

TIMESTAMP_RE = re.compile(r"^\d+-\d+-\d+ \d+:\d+:\d+\s+")

HEADER_RE = re.compile(
    r"Finding byte sum of file (?:.*/)?(?P<graph>[^/]*?)\.mtx(?=\s|$)"
)

RESULT_RE = re.compile(
    r"\{adv=(?P<adv>.+?), block=(?P<block>.+?), mode=(?P<mode>.+?)\}"
    r" -> \{(?P<time>.+?)ms, sum=(?P<sum>.+?)\} (?P<technique>.+)"
)

# leading numeric prefix, the rest of the token is ignored
NUMBER_RE = re.compile(r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))")

MODES = ("default", "madvice", "mmap")


def strip_timestamp(line: str) -> str:
    return TIMESTAMP_RE.sub("", line, count=1)


def parse_number(text: str) -> float:
    """
    Lenient float reader: parses the longest numeric prefix of `text`.
    Returns nan when there is none.
    """
    match = NUMBER_RE.match(text or "")
    if not match:
        return math.nan
    token = match.group(1)
    if token.endswith("Infinity"):
        return -math.inf if token.startswith("-") else math.inf
    return float(token)


def mode_name(index: float):
    """Look up a mode by index; None stands for an unknown mode."""
    if not math.isfinite(index) or index != int(index):
        return None
    index = int(index)
    if 0 <= index < len(MODES):
        return MODES[index]
    return None


def to_record_fields(fields: dict) -> dict:
    adv = parse_number(fields["adv"])
    return {
        "early_madvice": bool(adv) and not math.isnan(adv),
        "block_size": parse_number(fields["block"]),
        "mode": mode_name(parse_number(fields["mode"])),
        "time": parse_number(fields["time"]),
        "sum": parse_number(fields["sum"]),
        "technique": fields["technique"],
    }


def parse_line(line: str):
    line = strip_timestamp(line)

    # header takes precedence over result
    match = HEADER_RE.search(line)
    if match:
        return {"kind": "header", "graph": match.group("graph")}

    match = RESULT_RE.match(line)
    if match:
        return {"kind": "result", "fields": match.groupdict()}

    return None
