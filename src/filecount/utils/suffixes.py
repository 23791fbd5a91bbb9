from __future__ import annotations
"""Extension utilities for the include filter.

This module centralizes how extension tokens coming from the configuration
file (`ext`) and from `--ext` are normalized, and how a file's extension is
derived from its name.

Semantics:
    * Tokens WITHOUT a dot are treated as bare extensions and normalized by
      prefixing a dot. Example: "go" -> ".go".
    * Tokens WITH a leading dot are kept as-is. Example: ".go" stays ".go".
    * Empty tokens are dropped.
    * Matching is exact set membership against `extension_of(name)`, so
      ".tar.gz" never matches (the extension of "a.tar.gz" is ".gz").

Examples:
    normalize_extensions(["go"])        -> (".go",)
    normalize_extensions([".go", "go"]) -> (".go",)
    extension_of("main.go")             -> ".go"
    extension_of("Makefile")            -> ""
    extension_of(".bashrc")             -> ".bashrc"
"""

from typing import AbstractSet, Sequence, Tuple


def extension_of(name: str) -> str:
    """Return the extension of a base name, including the leading dot.

    The extension is the substring starting at the last '.' of *name*; a name
    without any dot has an empty extension.
    """
    idx = name.rfind(".")
    if idx < 0:
        return ""
    return name[idx:]


def normalize_extensions(tokens: Sequence[str] | None) -> Tuple[str, ...]:
    """Normalize extension tokens, preserving first-seen order.

    Args:
        tokens: Raw tokens from the config file or `--ext`.

    Returns:
        A tuple of unique extensions, each starting with '.'.
    """
    if not tokens:
        return ()
    out: list[str] = []
    for raw in tokens:
        s = (raw or "").strip()
        if not s:
            continue
        if not s.startswith("."):
            s = f".{s}"
        if s not in out:
            out.append(s)
    return tuple(out)


def is_extension_allowed(extension: str, allowed: AbstractSet[str]) -> bool:
    """Return True if *extension* passes the allow-list (empty = allow all)."""
    return not allowed or extension in allowed
