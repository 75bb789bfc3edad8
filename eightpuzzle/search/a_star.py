from __future__ import annotations
from typing import Callable, Set, Tuple, Union
from time import perf_counter
import logging

from eightpuzzle.domains.puzzle8 import InvalidConfigurationError, is_goal, validate
from eightpuzzle.heuristics.registry import canonical_name, choose_hfun
from eightpuzzle.search.frontier import Frontier
from eightpuzzle.search.node import SearchTree, successors
from eightpuzzle.search.result import EXHAUSTED, INVALID, OK, SearchResult

logger = logging.getLogger(__name__)

State = Tuple[int, ...]
Heuristic = Union[str, Callable[[State], int]]


def resolve_heuristic(heuristic: Heuristic):
    """Return (name, hfun) for a heuristic tag or a plain callable."""
    if callable(heuristic):
        return getattr(heuristic, "__name__", "custom"), heuristic
    return canonical_name(heuristic), choose_hfun(heuristic)


def a_star(
    start,
    heuristic: Heuristic = "manhattan",
    tie_break: str = "h",
    keep_tree: bool = False,
) -> SearchResult:
    """
    A* over the 8-puzzle graph.

    Each configuration is expanded at most once; stale frontier entries whose
    configuration is already closed are dropped without being counted.
    """
    hname, hfun = resolve_heuristic(heuristic)
    t0 = perf_counter()
    try:
        start = validate(start)
    except InvalidConfigurationError as e:
        return SearchResult(algorithm="A*", heuristic=hname, termination=INVALID,
                            tie_break=tie_break, error=str(e), time=perf_counter() - t0)

    tree = SearchTree()
    frontier = Frontier(tree, tie_break)
    closed: Set[State] = set()
    frontier.push(tree.add_root(start, hfun))

    expanded = 0
    generated = 0

    while frontier:
        idx = frontier.pop()
        node = tree[idx]
        if node.state in closed:
            continue

        expanded += 1
        if is_goal(node.state):
            return SearchResult(
                algorithm="A*", heuristic=hname, termination=OK,
                path=tree.path(idx), expanded=expanded, generated=generated,
                peak_open=frontier.peak, peak_closed=len(closed),
                time=perf_counter() - t0, tie_break=tie_break,
                tree=tree if keep_tree else None,
            )

        closed.add(node.state)
        for child in successors(tree, idx, hfun):
            generated += 1
            if tree[child].state not in closed:
                frontier.push(child)

    # Open exhausted without finding goal
    logger.debug("A* exhausted the frontier after %d expansions", expanded)
    return SearchResult(
        algorithm="A*", heuristic=hname, termination=EXHAUSTED,
        expanded=expanded, generated=generated,
        peak_open=frontier.peak, peak_closed=len(closed),
        time=perf_counter() - t0, tie_break=tie_break,
        tree=tree if keep_tree else None,
    )
