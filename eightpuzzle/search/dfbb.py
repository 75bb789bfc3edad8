from __future__ import annotations
from typing import Optional, Set, Tuple
from time import perf_counter
import logging

from eightpuzzle.domains.puzzle8 import InvalidConfigurationError, is_goal, validate
from eightpuzzle.search.a_star import Heuristic, resolve_heuristic
from eightpuzzle.search.frontier import Frontier
from eightpuzzle.search.node import SearchTree, successors
from eightpuzzle.search.result import EXHAUSTED, INVALID, OK, SearchResult

logger = logging.getLogger(__name__)

State = Tuple[int, ...]

INITIAL_BOUND = 9999


def dfbb(
    start,
    heuristic: Heuristic = "manhattan",
    tie_break: str = "h",
    keep_tree: bool = False,
) -> SearchResult:
    """
    Best-first branch and bound.

    Runs until the frontier is empty. Every goal popped tightens the bound L to
    its priority, and successors with priority above L are never queued. The
    first goal with the lowest priority is reported.
    """
    hname, hfun = resolve_heuristic(heuristic)
    t0 = perf_counter()
    try:
        start = validate(start)
    except InvalidConfigurationError as e:
        return SearchResult(algorithm="DFBB", heuristic=hname, termination=INVALID,
                            tie_break=tie_break, error=str(e), time=perf_counter() - t0)

    tree = SearchTree()
    frontier = Frontier(tree, tie_break)
    closed: Set[State] = set()
    frontier.push(tree.add_root(start, hfun))

    L = INITIAL_BOUND
    best: Optional[int] = None
    time_to_best: Optional[float] = None
    solutions = 0
    expanded = 0
    generated = 0

    while frontier:
        idx = frontier.pop()
        node = tree[idx]
        if node.state in closed:
            continue

        expanded += 1
        if is_goal(node.state):
            solutions += 1
            if best is None or node.priority < tree[best].priority:
                best = idx
                time_to_best = perf_counter() - t0
            L = node.priority
            logger.debug("DFBB: goal at g=%d, bound tightened to %d", node.g, L)

        closed.add(node.state)
        for child in successors(tree, idx, hfun):
            generated += 1
            c = tree[child]
            if c.state not in closed and c.priority <= L:
                frontier.push(child)

    t1 = perf_counter()
    if best is None:
        logger.debug("DFBB exhausted the frontier after %d expansions", expanded)
        return SearchResult(
            algorithm="DFBB", heuristic=hname, termination=EXHAUSTED,
            expanded=expanded, generated=generated,
            peak_open=frontier.peak, peak_closed=len(closed),
            time=t1 - t0, tie_break=tie_break,
            tree=tree if keep_tree else None,
        )
    return SearchResult(
        algorithm="DFBB", heuristic=hname, termination=OK,
        path=tree.path(best), expanded=expanded, generated=generated,
        peak_open=frontier.peak, peak_closed=len(closed),
        time=t1 - t0, time_to_best=time_to_best, solutions_found=solutions,
        tie_break=tie_break, tree=tree if keep_tree else None,
    )
