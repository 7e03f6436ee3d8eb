from __future__ import annotations

"""
Stylesheet Specifier Extraction.

Recognizes the import at-rules of CSS, Sass/SCSS, Less and Stylus:
'@import', '@use', '@forward' and '@require'. Remote imports (http, https
and protocol-relative URLs) and Sass built-in modules are dropped.
"""

import re
from typing import List

# -----------------------------------------------------------------------------
# REGEX CONSTANTS
# -----------------------------------------------------------------------------

# Quoted strings are matched first; '//' only opens a comment after whitespace
_COMMENT_OR_STRING_RX = re.compile(
    r"(?P<string>'(?:\\.|[^'\\\n])*'|\"(?:\\.|[^\"\\\n])*\")"
    r"|(?P<comment>/\*.*?\*/|(?<!\S)//[^\n]*)",
    re.DOTALL,
)

_AT_RULE_RX = re.compile(r"@(?:import|use|forward|require)\s+(?P<body>[^;\n]+)")
_TARGET_RX = re.compile(r"url\(\s*(['\"]?)(?P<url>[^'\")]+)\1\s*\)|(['\"])(?P<quoted>[^'\"]+)\3")

# Remote URLs and Sass built-in modules are not local files
_SKIPPED_PREFIXES = ("http://", "https://", "//", "sass:")


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def extract_stylesheet_imports(source: str) -> List[str]:
    """
    List the stylesheet specifiers imported by a style file, in order.

    Quoted targets, url(...) targets and comma-separated lists are
    supported. Stylus allows unquoted targets ('@import b'); when a rule
    carries no quoted target its first bare word is used instead.

    Args:
        source: Stylesheet source.

    Returns:
        List[str]: Raw specifiers.
    """
    code = _COMMENT_OR_STRING_RX.sub(lambda m: m.group("string") or "", source)

    specifiers: List[str] = []
    for rule in _AT_RULE_RX.finditer(code):
        body = rule.group("body").strip()
        targets = [
            m.group("url") or m.group("quoted")
            for m in _TARGET_RX.finditer(body)
        ]
        if not targets:
            targets = [body.split()[0].rstrip(",")] if body else []

        for target in targets:
            target = target.strip()
            if not target or target.startswith(_SKIPPED_PREFIXES):
                continue
            specifiers.append(target)

    return specifiers
