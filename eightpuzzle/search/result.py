from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from eightpuzzle.search.node import SearchTree

State = Tuple[int, ...]

# termination tags
OK = "ok"
EXHAUSTED = "exhausted"
UNSOLVABLE = "unsolvable"
INVALID = "invalid"

CSV_HEADER = [
    "algorithm", "heuristic", "instance", "solvable",
    "expanded", "generated", "g", "time_sec", "time_to_best",
    "peak_open", "peak_closed", "solutions_found", "bound_final", "bounds",
    "tie_break", "termination",
]


@dataclass
class SearchResult:
    algorithm: str
    heuristic: str
    termination: str
    path: Optional[List[State]] = None
    expanded: int = 0
    generated: int = 0
    peak_open: int = 0
    peak_closed: int = 0
    time: float = 0.0
    tie_break: str = "h"
    time_to_best: Optional[float] = None   # DFBB
    solutions_found: int = 0               # DFBB
    bounds: List[int] = field(default_factory=list)  # IDA*
    error: Optional[str] = None
    tree: Optional[SearchTree] = field(default=None, repr=False)

    @property
    def solved(self) -> bool:
        return self.termination == OK and self.path is not None

    @property
    def g(self) -> Optional[int]:
        return len(self.path) - 1 if self.path is not None else None

    moves = g

    @property
    def bound_final(self) -> Optional[int]:
        return self.bounds[-1] if self.bounds else None

    def to_row(self, instance: str = "", solvable: Any = "") -> Dict[str, Any]:
        return {
            "algorithm": self.algorithm,
            "heuristic": self.heuristic,
            "instance": instance,
            "solvable": solvable,
            "expanded": self.expanded,
            "generated": self.generated,
            "g": "" if self.g is None else self.g,
            "time_sec": f"{self.time:.6f}",
            "time_to_best": "" if self.time_to_best is None else f"{self.time_to_best:.6f}",
            "peak_open": self.peak_open,
            "peak_closed": self.peak_closed,
            "solutions_found": self.solutions_found if self.algorithm == "DFBB" else "",
            "bound_final": "" if self.bound_final is None else self.bound_final,
            "bounds": " ".join(str(b) for b in self.bounds),
            "tie_break": self.tie_break,
            "termination": self.termination,
        }
