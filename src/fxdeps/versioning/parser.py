"""Parsing of requested version strings.

A version wrapped in ``#`` delimiters (``#latest#``, ``#early#``,
``#21\\..*#``) is a special case resolved against the search index; anything
else is a literal version used as-is.
"""

import re
from typing import Optional

from .models import VersionSpec

SPECIAL_CASE_PATTERN = re.compile(r"#(.+)#")


def parse_version(raw: Optional[str]) -> VersionSpec:
    """Parse a version string into a literal or special-case VersionSpec."""
    raw = "" if raw is None else str(raw)
    match = SPECIAL_CASE_PATTERN.search(raw)
    if match is None:
        return VersionSpec(raw=raw.strip())
    return VersionSpec(raw=raw, token=match.group(1).strip())


def is_special_case(raw: Optional[str]) -> bool:
    """True when ``raw`` is a ``#token#`` special case."""
    return parse_version(raw).is_special_case


def extract_token(raw: Optional[str]) -> str:
    """Special-case token of ``raw``, or an empty string for literals."""
    return parse_version(raw).token or ""
