"""
Path composition for error locations.

Paths are built bottom-up while a failure propagates out of nested
validators, so the finished path reads like an access expression against
the root input: `items[3].owner["id"]`.
"""

from __future__ import annotations


def indexed_path(here: str | int, inner: str = "") -> str:
    """
    Prepend a bracketed segment to `inner`.

    Ints render as `[n]`, strings as `["key"]`. Chains of brackets are
    joined directly, anything else with a dot.

    Usage:
        indexed_path(3, "")          # '[3]'
        indexed_path(3, "[1]")       # '[3][1]'
        indexed_path("k", "name")    # '["k"].name'
    """
    if isinstance(here, int) and not isinstance(here, bool):
        segment = f"[{here}]"
    else:
        segment = f'["{here}"]'

    if inner == "":
        return segment
    if inner.startswith("["):
        return f"{segment}{inner}"
    return f"{segment}.{inner}"


def member_path(here: str, inner: str = "") -> str:
    """
    Prepend a bare member name to `inner`.

    Usage:
        member_path("horse", "")       # 'horse'
        member_path("horse", "goat")   # 'horse.goat'
    """
    if inner == "":
        return here
    return f"{here}.{inner}"

