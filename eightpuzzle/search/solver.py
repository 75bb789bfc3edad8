from __future__ import annotations
from typing import Callable, Dict
from time import perf_counter

from eightpuzzle.domains.puzzle8 import InvalidConfigurationError, is_solvable, validate
from eightpuzzle.search.a_star import Heuristic, a_star, resolve_heuristic
from eightpuzzle.search.dfbb import dfbb
from eightpuzzle.search.ida_star import ida_star
from eightpuzzle.search.result import INVALID, UNSOLVABLE, SearchResult

ALGORITHMS: Dict[str, Callable[..., SearchResult]] = {
    "a": a_star,
    "dfbb": dfbb,
    "ida": ida_star,
}

ALGORITHM_LABELS = {"a": "A*", "dfbb": "DFBB", "ida": "IDA*"}

_ALIASES = {
    "astar": "a",
    "a*": "a",
    "bnb": "dfbb",
    "idastar": "ida",
    "ida*": "ida",
}


def choose_algorithm(name: str) -> str:
    n = name.lower()
    n = _ALIASES.get(n, n)
    if n not in ALGORITHMS:
        raise ValueError(f"unknown algorithm {name!r}; choose from {sorted(ALGORITHMS)}")
    return n


def solve(
    start,
    algorithm: str = "a",
    heuristic: Heuristic = "manhattan",
    tie_break: str = "h",
    check_solvable: bool = False,
    keep_tree: bool = False,
) -> SearchResult:
    """
    Validate `start` and run one search.

    With check_solvable=True an instance with the wrong inversion parity is
    answered with termination 'unsolvable' instead of exhausting the graph.
    """
    key = choose_algorithm(algorithm)
    hname, _ = resolve_heuristic(heuristic)
    label = ALGORITHM_LABELS[key]
    t0 = perf_counter()
    try:
        state = validate(start)
    except InvalidConfigurationError as e:
        return SearchResult(algorithm=label, heuristic=hname, termination=INVALID,
                            tie_break=tie_break, error=str(e), time=perf_counter() - t0)
    if check_solvable and not is_solvable(state):
        return SearchResult(algorithm=label, heuristic=hname, termination=UNSOLVABLE,
                            tie_break=tie_break, time=perf_counter() - t0,
                            error="inversion parity differs from the goal")
    return ALGORITHMS[key](state, heuristic=heuristic, tie_break=tie_break, keep_tree=keep_tree)
