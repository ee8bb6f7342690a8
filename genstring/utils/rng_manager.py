"""Seedable randomness for reproducible searches.

RNGManager hands out named context streams (``"init"``, ``"reproduction"``)
that are derived from a single seed, so a run seeded with the same value
replays the same population history.
"""

from __future__ import annotations

import hashlib
import random


class RNGManager:
    """Owns the seed and the per-context ``random.Random`` streams."""

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = random.SystemRandom().randrange(2**32)
        self.seed = int(seed)
        self._contexts: dict[str, random.Random] = {}

    def _derive_seed(self, context: str) -> int:
        digest = hashlib.sha256(f"{self.seed}:{context}".encode("utf-8")).digest()
        return int.from_bytes(digest[:8], "big")

    def get_context_rng(self, context: str) -> random.Random:
        """Return the stream for ``context``, creating it on first use."""
        rng = self._contexts.get(context)
        if rng is None:
            rng = random.Random(self._derive_seed(context))
            self._contexts[context] = rng
        return rng

    def reset(self) -> None:
        """Drop all context streams so the next draws restart from the seed."""
        self._contexts.clear()


__all__ = ["RNGManager"]
