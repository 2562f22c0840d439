# docbr/infrastructure/random_source.py
#
# Process-wide random source for batch generation.
#
# Design decisions:
#   - Seeded from Settings.seed (DOCBR_SEED). Without a seed, random.Random()
#     seeds itself from the OS.
#   - Pseudo-random only: generated documents are not secrets.
from __future__ import annotations

import random
from functools import lru_cache

from docbr.infrastructure.config import get_settings


@lru_cache(maxsize=1)
def get_rng() -> random.Random:
    return random.Random(get_settings().seed)
