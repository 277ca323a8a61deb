"""Extraction of relative import specifiers from JavaScript / TypeScript source."""

from __future__ import annotations

import re
from typing import List, Set

# import x from './a'   import './a'   import type { T } from "./t"
_IMPORT_RE = re.compile(r"""\bimport\b[^'"\n;]*?['"]([^'"\n]+)['"]""")
# export * from './a'   export { x } from "./a"
_EXPORT_FROM_RE = re.compile(r"""\bexport\b[^'"\n;]*?\bfrom\s*['"]([^'"\n]+)['"]""")
# import React, {\n  a,\n  b,\n} from "./ab"
_BRACED_RE = re.compile(r"""\b(?:import|export)\s+(?:type\s+)?(?:[\w$]+\s*,\s*)?\{[^}]*\}\s*from\s*['"]([^'"\n]+)['"]""")
# require('./a')
_REQUIRE_RE = re.compile(r"""\brequire\(\s*['"]([^'"\n]+)['"]\s*\)""")

_PATTERNS = (_IMPORT_RE, _EXPORT_FROM_RE, _BRACED_RE, _REQUIRE_RE)


def is_relative(specifier: str) -> bool:
    """True for './x', '../x', '.' and '..'; bare package names are not relative."""
    return specifier == "." or specifier == ".." or specifier.startswith(("./", "../"))


def extract_specifiers(content: str) -> List[str]:
    """Return the sorted, distinct relative specifiers referenced by ``content``."""
    found: Set[str] = set()
    for pattern in _PATTERNS:
        for match in pattern.finditer(content):
            spec = match.group(1).strip()
            if is_relative(spec):
                found.add(spec)
    return sorted(found)
