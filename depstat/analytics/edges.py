"""
Edge line parsing — pure functions only.
"""
from __future__ import annotations

import re

from depstat.errors import ParseError

# Both captures are greedy; the pattern may sit anywhere in the line.
EDGE_PATTERN = re.compile(r'"(.*)" -> "(.*)";')


def parse_edge_line(line: str) -> tuple[str, str]:
    """
    Extract (source, destination) from one `"A" -> "B";` line.

    Captures are returned verbatim: no trimming, no unescaping.
    Raises ParseError (with the size of the match result, 0 on no match)
    when the line does not fit the grammar.
    """
    m = EDGE_PATTERN.search(line)
    if m is None:
        raise ParseError(line, 0)
    return m.group(1), m.group(2)
