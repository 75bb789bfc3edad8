from typing import Tuple
from eightpuzzle.domains.puzzle8 import manhattan as _manhattan

State = Tuple[int, ...]

def manhattan(s: State) -> int:
    return _manhattan(s)
