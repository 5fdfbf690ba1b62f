# random_ints.py
import math

import numpy as np

from file_io import write_text
from line_parser import parse_number


def parse_random_spec(spec: str):
    """Parse "n,min,max" into three integers."""
    parts = [parse_number(p.strip()) for p in spec.split(",")]
    if len(parts) != 3 or not all(math.isfinite(p) for p in parts):
        raise ValueError(f"random spec must be 'n,min,max', got {spec!r}")

    n, low, high = (int(p) for p in parts)
    if n < 0 or low > high:
        raise ValueError(f"invalid random spec {spec!r}")
    return n, low, high


def random_ints(n, low, high, seed=None):
    # uniform, independent, inclusive bounds
    rng = np.random.default_rng(seed)
    return rng.integers(low, high, size=n, endpoint=True)


def write_random_ints(path, n, low, high, seed=None):
    values = random_ints(n, low, high, seed)
    write_text(path, "".join(f"{v}\n" for v in values))
    print(f"[RANDOM] wrote {len(values)} values to {path}")
