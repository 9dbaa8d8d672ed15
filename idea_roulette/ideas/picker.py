# idea_roulette/ideas/picker.py

import random
from typing import Optional


def pick_index(count: int, last_index: int, rng: random.Random) -> Optional[int]:
    """
    Uniformly pick an index in [0, count).
    Never returns last_index twice in a row when count > 1.
    """
    if count <= 0:
        return None

    index = rng.randrange(count)

    # Resample until it differs from the previous pick
    while count > 1 and index == last_index:
        index = rng.randrange(count)

    return index
