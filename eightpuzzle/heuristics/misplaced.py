from typing import Tuple
from eightpuzzle.domains.puzzle8 import misplaced_tiles as _misplaced_tiles

State = Tuple[int, ...]

def misplaced_tiles(s: State) -> int:
    return _misplaced_tiles(s)
