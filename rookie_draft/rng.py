from __future__ import annotations

import hashlib
import random
from typing import Optional


def stable_seed(*parts: object) -> int:
    """Cross-process stable seed (python hash() is randomized per process)."""
    raw = "|".join(str(p) for p in parts)
    h = hashlib.sha256(raw.encode("utf-8")).digest()
    return int.from_bytes(h[:8], "big", signed=False)


def resolve_rng(rng: Optional[random.Random] = None, rng_seed: Optional[int] = None) -> random.Random:
    """Return the caller's generator, a seeded one, or a fresh private one.

    Never hands out the module-global RNG, so concurrent callers don't share state.
    """
    if rng is not None:
        if rng_seed is not None:
            raise ValueError("pass either rng or rng_seed, not both")
        return rng
    if rng_seed is not None:
        return random.Random(int(rng_seed))
    return random.Random()
