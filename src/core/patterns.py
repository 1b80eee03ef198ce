from __future__ import annotations

import re
from functools import lru_cache
from typing import Iterable, List, Optional, Pattern

"""
Glob matching for key enumeration.

Only '*' (any run of characters, possibly empty) and '?' (exactly one
character) are wildcards. Everything else, regex metacharacters and
brackets included, matches literally and the whole key must match.
"""


@lru_cache(maxsize=256)
def compile_glob(pattern: str) -> Pattern[str]:
    parts: List[str] = []
    for ch in pattern:
        if ch == "*":
            parts.append(".*")
        elif ch == "?":
            parts.append(".")
        else:
            parts.append(re.escape(ch))
    # DOTALL keeps '*' and '?' consistent for any character
    return re.compile("".join(parts), re.DOTALL)


def glob_match(key: str, pattern: str) -> bool:
    return compile_glob(pattern).fullmatch(key) is not None


def filter_keys(keys: Iterable[str], pattern: Optional[str] = None) -> List[str]:
    if not pattern:
        return list(keys)
    rx = compile_glob(pattern)
    return [k for k in keys if rx.fullmatch(k) is not None]
