"""Start/end placement shared by both generators.

Start comes from the low-index quadrant and end from the high-index one so
the two are usually far apart. On a 1-wide or 1-tall grid both ranges
collapse to the single available row/column.
"""

import random
from typing import Optional

from .topology import Coord


def pick_start(height: int, width: int, rng: Optional[random.Random] = None) -> Coord:
    rng = rng or random
    return (rng.randrange(max(1, width // 2)), rng.randrange(max(1, height // 2)))


def pick_end(height: int, width: int, rng: Optional[random.Random] = None) -> Coord:
    rng = rng or random
    return (rng.randint(width // 2, width - 1), rng.randint(height // 2, height - 1))
