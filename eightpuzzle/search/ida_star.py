from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Set, Tuple
from time import perf_counter
import logging

from eightpuzzle.domains.puzzle8 import InvalidConfigurationError, is_goal, validate
from eightpuzzle.search.a_star import Heuristic, resolve_heuristic
from eightpuzzle.search.frontier import Frontier
from eightpuzzle.search.node import SearchTree, successors
from eightpuzzle.search.result import EXHAUSTED, INVALID, OK, SearchResult

logger = logging.getLogger(__name__)

State = Tuple[int, ...]


@dataclass
class BoundedPass:
    """Outcome of one bounded best-first pass of IDA*."""
    found: bool
    min_excess: Optional[int]  # None when nothing was cut off
    expanded: int
    generated: int
    peak_open: int
    peak_closed: int
    goal: Optional[int] = None
    tree: SearchTree = field(default_factory=SearchTree, repr=False)

    @property
    def path(self) -> Optional[List[State]]:
        return self.tree.path(self.goal) if self.goal is not None else None


def bounded_search(
    start: State,
    bound: int,
    hfun: Callable[[State], int],
    tie_break: str = "h",
) -> BoundedPass:
    """
    Best-first pass admitting only nodes with priority <= L (L starts at `bound`).

    Like DFBB it keeps going after a goal is popped, lowering L to the goal's
    priority. For unvisited successors above L, the smallest `priority - L`
    is returned as the increment for the next pass.
    """
    tree = SearchTree()
    frontier = Frontier(tree, tie_break)
    closed: Set[State] = set()
    frontier.push(tree.add_root(start, hfun))

    L = bound
    min_excess: Optional[int] = None
    goal: Optional[int] = None
    expanded = 0
    generated = 0

    while frontier:
        idx = frontier.pop()
        node = tree[idx]
        if node.state in closed:
            continue

        expanded += 1
        if is_goal(node.state):
            if goal is None or node.priority < tree[goal].priority:
                goal = idx
            L = node.priority

        closed.add(node.state)
        for child in successors(tree, idx, hfun):
            generated += 1
            c = tree[child]
            if c.state in closed:
                continue
            if c.priority > L:
                excess = c.priority - L
                if min_excess is None or excess < min_excess:
                    min_excess = excess
            else:
                frontier.push(child)

    return BoundedPass(
        found=goal is not None, min_excess=min_excess,
        expanded=expanded, generated=generated,
        peak_open=frontier.peak, peak_closed=len(closed),
        goal=goal, tree=tree,
    )


def ida_star(
    start,
    heuristic: Heuristic = "manhattan",
    tie_break: str = "h",
    keep_tree: bool = False,
) -> SearchResult:
    """
    Iterative-deepening A*: repeat bounded passes from a fresh start node,
    raising the bound by the smallest excess seen, until a goal is found or a
    pass cuts nothing off (no solution in the reachable graph).
    """
    hname, hfun = resolve_heuristic(heuristic)
    t0 = perf_counter()
    try:
        start = validate(start)
    except InvalidConfigurationError as e:
        return SearchResult(algorithm="IDA*", heuristic=hname, termination=INVALID,
                            tie_break=tie_break, error=str(e), time=perf_counter() - t0)

    bound = hfun(start)
    bounds: List[int] = []
    expanded = 0
    generated = 0
    peak_open = 0
    peak_closed = 0

    while True:
        bounds.append(bound)
        logger.debug("IDA*: current bound is %d", bound)
        p = bounded_search(start, bound, hfun, tie_break)
        expanded += p.expanded
        generated += p.generated
        peak_open = max(peak_open, p.peak_open)
        peak_closed = max(peak_closed, p.peak_closed)

        if p.found:
            return SearchResult(
                algorithm="IDA*", heuristic=hname, termination=OK,
                path=p.path, expanded=expanded, generated=generated,
                peak_open=peak_open, peak_closed=peak_closed,
                time=perf_counter() - t0, tie_break=tie_break, bounds=bounds,
                tree=p.tree if keep_tree else None,
            )
        if p.min_excess is None:
            logger.debug("IDA*: pass at bound %d cut nothing off; no solution", bound)
            return SearchResult(
                algorithm="IDA*", heuristic=hname, termination=EXHAUSTED,
                expanded=expanded, generated=generated,
                peak_open=peak_open, peak_closed=peak_closed,
                time=perf_counter() - t0, tie_break=tie_break, bounds=bounds,
                tree=p.tree if keep_tree else None,
            )
        bound += p.min_excess
