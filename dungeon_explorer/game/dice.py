import random
from typing import Optional


class Dice:
    """Uniform integer source. Every random decision in the game goes through
    :meth:`randrange`, so a scripted stand-in makes play deterministic."""

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def randrange(self, low: int, high: int) -> int:
        return self._random.randrange(low, high)

    def roll(self, sides: int = 20) -> int:
        return self.randrange(1, sides + 1)

    def chance(self, odds: int) -> bool:
        """True with probability ``1 / odds``."""
        return self.randrange(0, odds) == 0
