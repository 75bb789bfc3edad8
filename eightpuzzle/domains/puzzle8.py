from __future__ import annotations
from typing import Dict, Iterable, List, Optional, Tuple

State = Tuple[int, ...]  # 9-length tuple, row-major, 0 is blank
GOAL: State = (1, 2, 3, 8, 0, 4, 7, 6, 5)

# Named start configurations
INSTANCES: Dict[str, State] = {
    "easy":   (1, 3, 4, 8, 6, 2, 7, 0, 5),
    "medium": (2, 8, 1, 0, 4, 3, 7, 6, 5),
    "hard":   (2, 8, 1, 4, 6, 3, 0, 7, 5),
    "worst":  (5, 6, 7, 4, 0, 8, 3, 2, 1),
}


class InvalidConfigurationError(ValueError):
    """Raised when a start configuration is not a permutation of 0..8."""


def locate(s: Iterable[int], value: int) -> Optional[int]:
    """Index of `value` in `s`, or None if absent."""
    for i, v in enumerate(s):
        if v == value:
            return i
    return None


def validate(s) -> State:
    """Return `s` as a State or raise InvalidConfigurationError."""
    try:
        cells = tuple(s)
    except TypeError:
        raise InvalidConfigurationError(f"configuration must be a sequence, got {type(s).__name__}")
    if len(cells) != 9:
        raise InvalidConfigurationError(f"configuration must have 9 cells, got {len(cells)}")
    for v in cells:
        if isinstance(v, bool) or not isinstance(v, int):
            raise InvalidConfigurationError(f"cell values must be integers, got {v!r}")
        if not 0 <= v <= 8:
            raise InvalidConfigurationError(f"cell value {v} is outside 0..8")
    missing = sorted(set(range(9)) - set(cells))
    if missing:
        dup = sorted({v for v in cells if cells.count(v) > 1})
        raise InvalidConfigurationError(f"duplicate values {dup}, missing values {missing}")
    return cells


def is_goal(s: State) -> bool:
    return s == GOAL


def _inversions(s: State) -> int:
    arr = [x for x in s if x != 0]
    inv = 0
    for i in range(len(arr)):
        for j in range(i + 1, len(arr)):
            if arr[i] > arr[j]:
                inv += 1
    return inv


def is_solvable(s: State) -> bool:
    """3x3 solvability: inversion parity must match the goal's parity (odd here)."""
    return (_inversions(s) % 2) == (_inversions(GOAL) % 2)


# ---------------- Moves ----------------
# Named after the direction the tile slides into the blank.

def legal_moves(blank: int) -> List[Tuple[str, int]]:
    """(name, slide_from) pairs for a blank at `blank`, in down/up/left/right order."""
    out: List[Tuple[str, int]] = []
    if blank > 2:     out.append(("down", blank - 3))
    if blank < 6:     out.append(("up", blank + 3))
    if blank % 3 < 2: out.append(("left", blank + 1))
    if blank % 3 > 0: out.append(("right", blank - 1))
    return out


def slide(s: State, blank: int, slide_from: int) -> State:
    lst = list(s)
    lst[blank], lst[slide_from] = lst[slide_from], lst[blank]
    return tuple(lst)


def neighbors(s: State) -> List[Tuple[State, int]]:
    """Return list of (next_state, cost) pairs with unit cost."""
    z = s.index(0)
    return [(slide(s, z, j), 1) for _, j in legal_moves(z)]


# ---------------- Heuristics ----------------

_goal_pos: Dict[int, Tuple[int, int]] = {t: divmod(locate(GOAL, t), 3) for t in range(1, 9)}


def misplaced_tiles(s: State) -> int:
    """Number of non-blank cells that differ from the goal."""
    return sum(1 for tile, want in zip(s, GOAL) if tile != 0 and tile != want)


def manhattan(s: State) -> int:
    """Sum of Manhattan distances to goal positions (blank ignored)."""
    dist = 0
    for idx, tile in enumerate(s):
        if tile == 0:
            continue
        r, c = divmod(idx, 3)
        gr, gc = _goal_pos[tile]
        dist += abs(r - gr) + abs(c - gc)
    return dist


def format_board(s: State) -> str:
    return "\n".join(" ".join(str(t) for t in s[r:r + 3]) for r in (0, 3, 6))
