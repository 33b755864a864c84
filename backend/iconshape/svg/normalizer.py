"""Path normalizer — absolute-start invariant for path fragments.

Fragments from independent elements are later joined into one ``d`` string.
A leading relative ``m`` is only absolute while it is the first command of its
own path; once joined after another fragment it would be resolved against
that fragment's end point. Every fragment therefore has to start with ``M``
before concatenation.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from iconshape.svg.primitives import NUMBER_PATTERN

_NUMBER_START_RE = re.compile(NUMBER_PATTERN)
# "m x y" (separators optional between numbers, e.g. "m1-2" or "m.5.5")
_LEADING_MOVE_RE = re.compile(rf"m\s*{NUMBER_PATTERN}\s*,?\s*{NUMBER_PATTERN}")
_SEPARATORS = " \t\r\n,"


def normalize_path_start(fragment: str) -> str:
    """Rewrite a leading relative ``m`` as an absolute ``M``.

    Only command letters change; coordinates are kept verbatim. Extra
    coordinate pairs directly after a leading ``m`` are implicit *relative*
    line-tos, so an explicit ``l`` is inserted before them to keep their
    meaning once the move is absolute. Idempotent.
    """
    trimmed = fragment.strip()
    if not trimmed.startswith("m"):
        return trimmed

    match = _LEADING_MOVE_RE.match(trimmed)
    if match is None:
        return "M" + trimmed[1:]

    head = "M" + trimmed[1 : match.end()]
    rest = trimmed[match.end() :]
    implicit = rest.lstrip(_SEPARATORS)
    if implicit and _NUMBER_START_RE.match(implicit):
        return f"{head} l{implicit}"
    return head + rest


def starts_absolute(fragment: str) -> bool:
    """True when the fragment begins with an absolute move command."""
    return fragment.lstrip().startswith("M")


def join_fragments(fragments: Iterable[str]) -> str:
    """Normalize each fragment and join the non-empty ones with single spaces."""
    normalized = (normalize_path_start(f) for f in fragments)
    return " ".join(f for f in normalized if f)
