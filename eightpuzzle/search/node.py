from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Callable, Dict, List, Optional, Tuple

from eightpuzzle.domains.puzzle8 import legal_moves, slide

State = Tuple[int, ...]
HFun = Callable[[State], int]


@dataclass(frozen=True)
class Node:
    state: State
    blank: int
    g: int
    h: int
    parent: Optional[int] = None  # index into the owning SearchTree
    move: Optional[str] = None

    @property
    def priority(self) -> int:
        return self.g + self.h


class SearchTree:
    """
    Arena of Node records for one search run.

    Nodes refer to their parent by integer index, so the whole tree is a flat
    list that can be exported as plain dicts.
    """

    def __init__(self) -> None:
        self.nodes: List[Node] = []

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, idx: int) -> Node:
        return self.nodes[idx]

    def _append(self, node: Node) -> int:
        self.nodes.append(node)
        return len(self.nodes) - 1

    def add_root(self, state: State, hfun: HFun) -> int:
        return self._append(Node(state=state, blank=state.index(0), g=0, h=hfun(state)))

    def add_child(self, parent: int, slide_from: int, hfun: HFun, move: Optional[str] = None) -> int:
        p = self.nodes[parent]
        s2 = slide(p.state, p.blank, slide_from)
        return self._append(Node(state=s2, blank=slide_from, g=p.g + 1, h=hfun(s2),
                                 parent=parent, move=move))

    def path(self, idx: int) -> List[State]:
        """Configurations from the root to node `idx`, inclusive."""
        out: List[State] = []
        cur: Optional[int] = idx
        while cur is not None:
            node = self.nodes[cur]
            out.append(node.state)
            cur = node.parent
        out.reverse()
        return out

    def moves(self, idx: int) -> List[str]:
        out: List[str] = []
        cur = self.nodes[idx]
        while cur.parent is not None:
            out.append(cur.move or "")
            cur = self.nodes[cur.parent]
        out.reverse()
        return out

    def export(self) -> List[Dict]:
        return [dict(asdict(n), index=i) for i, n in enumerate(self.nodes)]


def successors(tree: SearchTree, idx: int, hfun: HFun) -> List[int]:
    """Create up to 4 children of node `idx` (down, up, left, right) and return their indices."""
    node = tree[idx]
    return [tree.add_child(idx, j, hfun, move=name) for name, j in legal_moves(node.blank)]
