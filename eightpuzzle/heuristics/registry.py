from __future__ import annotations
from typing import Callable, Dict, Tuple

from eightpuzzle.heuristics.manhattan import manhattan
from eightpuzzle.heuristics.misplaced import misplaced_tiles

State = Tuple[int, ...]
HFun = Callable[[State], int]

HEURISTICS: Dict[str, HFun] = {
    "manhattan": manhattan,
    "misplaced": misplaced_tiles,
}

_ALIASES = {
    "m": "manhattan",
    "h2": "manhattan",
    "misplaced_tiles": "misplaced",
    "hamming": "misplaced",
    "h1": "misplaced",
}

def canonical_name(name: str) -> str:
    n = name.lower()
    n = _ALIASES.get(n, n)
    if n not in HEURISTICS:
        raise ValueError(f"unknown heuristic {name!r}; choose from {sorted(HEURISTICS)}")
    return n

def choose_hfun(name: str) -> HFun:
    return HEURISTICS[canonical_name(name)]
