# report_writer.py
import csv
import math
from decimal import Decimal

import numpy as np

from file_io import write_text
from records import to_frame


def format_float(value: float) -> str:
    # shortest round-trip digits; exponent form only below 1e-6, as "1e-7"
    text = repr(value)
    if "e" not in text:
        return text
    mantissa, exp = text.split("e")
    exp = int(exp)
    if -7 < exp < 21:
        return format(Decimal(text), "f")
    return f"{mantissa}e{exp:+d}"


def format_value(value) -> str:
    if value is None:
        return ""
    if isinstance(value, (bool, np.bool_)):
        return "true" if value else "false"
    if isinstance(value, (float, np.floating)):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value == int(value) and abs(value) < 1e21:
            return str(int(value))
        return format_float(float(value))
    return str(value)


def write_csv(path, records):
    """
    Header row: field names of the first record, unquoted.
    Data rows: every value double-quoted, whatever its type.
    """
    df = to_frame(records, convert=format_value)
    if df.empty:
        raise ValueError(f"no records to write to {path}")

    header = ",".join(str(c) for c in df.columns) + "\n"
    body = df.to_csv(index=False, header=False, quoting=csv.QUOTE_ALL, lineterminator="\n")

    write_text(path, header + body)
    print(f"[CSV] wrote {len(df)} rows to {path}")
