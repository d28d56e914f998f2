"""Heuristic extraction of declared method names from JavaScript-like source."""

from __future__ import annotations

import re
from typing import Iterable, List

# identifier, parenthesised argument list, opening brace
_DEFINITION_RE = re.compile(r"(\w+)\([^)]*\)\s*\{", re.ASCII)

RESERVED_NAMES: frozenset[str] = frozenset({"module", "exports"})


class MethodNameScanner:
    """Collects distinct callable names matching a definition-header shape.

    This is a pattern match, not a parser: control-flow headers such as
    ``if (x) {`` are reported too, and arrow functions assigned to names are
    missed. Reserved names are compared case-insensitively.
    """

    def __init__(self, reserved: Iterable[str] = RESERVED_NAMES) -> None:
        self.reserved = frozenset(name.casefold() for name in reserved)

    def scan(self, source_text: str) -> List[str]:
        seen: dict[str, bool] = {}
        for match in _DEFINITION_RE.finditer(source_text or ""):
            name = match.group(1)
            if name.casefold() in self.reserved:
                continue
            seen.setdefault(name, True)
        return list(seen)


def extract_method_names(source_text: str) -> List[str]:
    """Return distinct method names in first-seen order."""
    return MethodNameScanner().scan(source_text)


__all__ = ["MethodNameScanner", "RESERVED_NAMES", "extract_method_names"]
