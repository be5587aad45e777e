"""Per-thread uniform random number source."""

import random
import threading


class Random:
    """Uniform float generator on [0, 1); one shared instance per thread."""

    _local = threading.local()

    def __init__(self, seed=None):
        self._engine = random.Random(seed)

    def next(self) -> float:
        """Return the next uniform sample in [0, 1)."""
        return self._engine.random()

    @staticmethod
    def get() -> "Random":
        """Return the calling thread's instance, creating it on first use."""
        instance = getattr(Random._local, "instance", None)
        if instance is None:
            instance = Random()
            Random._local.instance = instance
        return instance