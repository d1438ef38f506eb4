"""Small numerical helpers."""

from __future__ import annotations


def rel_err(num: float, exact: float) -> float:
    """Relative error |num - exact| / |exact|; ``exact`` must be nonzero."""
    if exact == 0:
        raise ValueError("exact value must be nonzero")
    return abs(num - exact) / abs(exact)