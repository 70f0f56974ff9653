"""Textual reference detection.

A component counts as referenced by a file when its name shows up there as an
import binding or as a JSX tag. This is pattern matching over raw text, not
module resolution: any file importing *a* ``Foo`` references every component
named ``Foo``.
"""

from __future__ import annotations

import re
from functools import lru_cache

# Identifier boundaries for JS names ($ and _ are identifier characters)
_B = r"(?<![\w$])"
_E = r"(?![\w$])"


@lru_cache(maxsize=4096)
def reference_pattern(name: str) -> re.Pattern[str]:
    """
    Compiled pattern matching import-style or JSX references to ``name``.

    Matches:
        import Foo from ...          import Foo, { x } from ...
        import { Foo } from ...      import { Bar as Foo } from ...
        import type { Foo } ...      export { Foo } from ...
        export { default as Foo } from ...
        const Foo = require(...)     const { Foo } = require(...)
        <Foo ...>  <Foo/>  <Foo.Item>
    """
    n = re.escape(name)
    alternatives = [
        # default import
        rf"\bimport\s+(?:type\s+)?{n}{_E}",
        # named import member, possibly aliased
        rf"\bimport\s+(?:type\s+)?(?:[\w$]+\s*,\s*)?\{{[^}}]*{_B}{n}{_E}[^}}]*\}}",
        # re-export from another module (a local export list is not a reference)
        rf"\bexport\s+(?:type\s+)?\{{[^}}]*{_B}{n}{_E}[^}}]*\}}\s*from\b",
        # CommonJS binding
        rf"\b(?:const|let|var)\s+{n}\s*=\s*require\s*\(",
        rf"\b(?:const|let|var)\s+\{{[^}}]*{_B}{n}{_E}[^}}]*\}}\s*=\s*require\s*\(",
        # JSX tag
        rf"<{n}{_E}",
    ]
    return re.compile("|".join(f"(?:{alt})" for alt in alternatives))


def is_imported(name: str, content: str) -> bool:
    """True if ``content`` references ``name`` as an import binding or a JSX tag."""
    if not name or name not in content:
        return False
    return reference_pattern(name).search(content) is not None
