# file_io.py
import os
import re

EOL_RE = re.compile(r"\r?\n")


def read_text(path) -> str:
    """Read the whole file and canonicalise line endings to '\\n'."""
    with open(path, "r", encoding="utf-8", errors="replace", newline="") as f:
        text = f.read()
    return EOL_RE.sub("\n", text)


def read_lines(path):
    return read_text(path).split("\n")


def write_text(path, text: str):
    # render '\n' text with the host line ending
    text = EOL_RE.sub(os.linesep, text)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)
