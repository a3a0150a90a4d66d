# source.py
from typing import Iterable, List

COMMENT = "//"


def strip_comment(line):
    idx = line.find(COMMENT)
    if idx >= 0:
        line = line[:idx]
    return line


def prepare(lines: Iterable[str], strip_comments=True) -> List[str]:
    """Trim every line, optionally dropping ``//`` comments.

    Blank lines stay in the result as ``""`` so a line's position still
    matches its line number in the file.
    """
    prepared = []
    for line in lines:
        if strip_comments:
            line = strip_comment(line)
        prepared.append(line.strip())
    return prepared


def read_source(path) -> List[str]:
    with open(path, "r", encoding="utf-8-sig") as f:
        return f.read().splitlines()
