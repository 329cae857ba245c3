import itertools
import logging
import random
from typing import Callable, Optional

logger = logging.getLogger(__name__)

MIN_NUMBER = 10000
MAX_NUMBER = 99999

class IdSpaceExhausted(RuntimeError):
    pass

class SequentialIdGenerator:
    """Issues TID10000, TID10001, ... TID99999 in order. Never repeats."""

    def __init__(self, prefix: str = "TID", start: int = MIN_NUMBER):
        self.prefix = prefix
        self._counter = itertools.count(start)

    def __call__(self, exists: Callable[[str], bool]) -> str:
        for number in self._counter:
            if number > MAX_NUMBER:
                raise IdSpaceExhausted(f"All {self.prefix} numbers up to {MAX_NUMBER} are issued")
            candidate = f"{self.prefix}{number}"
            if not exists(candidate):
                return candidate

class RandomIdGenerator:
    """prefix + random 5-digit number, redrawn while it collides with an issued ID"""

    def __init__(self, prefix: str = "TID", rng: Optional[random.Random] = None):
        self.prefix = prefix
        self.rng = rng or random.SystemRandom()
        self.max_attempts = MAX_NUMBER - MIN_NUMBER + 1

    def __call__(self, exists: Callable[[str], bool]) -> str:
        for attempt in range(self.max_attempts):
            candidate = f"{self.prefix}{self.rng.randint(MIN_NUMBER, MAX_NUMBER)}"
            if not exists(candidate):
                if attempt:
                    logger.info(f"ID collision resolved after {attempt} redraw(s)")
                return candidate
        raise IdSpaceExhausted(f"Could not draw a free {self.prefix} number")

def build_id_generator(strategy: str, prefix: str):
    """Create the generator named by the ID_GENERATOR setting"""
    if strategy == "sequential":
        return SequentialIdGenerator(prefix)
    if strategy == "random":
        return RandomIdGenerator(prefix)
    raise ValueError(f"Unknown ID generator: {strategy!r}")
