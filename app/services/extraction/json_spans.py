"""
Heuristic location of JSON-shaped spans inside free text.

The scanner counts brace (or bracket) tokens found by a regex and returns the
first span whose depth returns to zero. It does not understand JSON strings:
a ``"}"`` inside a string value is counted like a structural brace. That is an
accepted precision trade-off; a span cut short this way simply fails to parse
and the caller moves on to its next strategy.
"""
import re
from typing import Optional

_TOKEN_PATTERNS = {
    "{": re.compile(r"[{}]"),
    "[": re.compile(r"[\[\]]"),
}


def first_balanced_span(text: str, opener: str) -> Optional[str]:
    """
    Returns the first ``opener``-delimited balanced span, or None.
    Closers seen before any opener are ignored. If the first span never
    closes, later spans are not tried.
    """
    pattern = _TOKEN_PATTERNS[opener]
    depth = 0
    start = 0
    for match in pattern.finditer(text or ""):
        if match.group() == opener:
            if depth == 0:
                start = match.start()
            depth += 1
        elif depth > 0:
            depth -= 1
            if depth == 0:
                return text[start : match.end()]
    return None


def first_object_span(text: str) -> Optional[str]:
    return first_balanced_span(text, "{")


def first_array_span(text: str) -> Optional[str]:
    return first_balanced_span(text, "[")
