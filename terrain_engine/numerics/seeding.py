# terrain_engine/numerics/seeding.py
from __future__ import annotations
import random

import numpy as np

# Диапазон смещений октав (включительно с обеих сторон)
OFFSET_RANGE = (-100_000, 100_000)


def _offset_rng(seed: int) -> random.Random:
    # random.Random сидится по abs() целого: -5 и 5 совпали бы.
    # Отрицательные сиды идут строкой (хэшируется sha512), неотрицательные как есть.
    seed = int(seed)
    if seed < 0:
        return random.Random(f"terrain-offsets:{seed}")
    return random.Random(seed)


def generate_offsets(seed: int, octave_count: int) -> np.ndarray:
    """
    Детерминированные смещения октав из сида.

    random.Random (Mersenne Twister) даёт одну и ту же последовательность
    на любой платформе. Пары тянутся по порядку: x, затем y для каждой октавы.

    Returns:
        np.ndarray формы (octave_count, 2), float64. Строка i — (dx, dy) октавы i.
    """
    count = max(int(octave_count), 0)
    rng = _offset_rng(seed)
    lo, hi = OFFSET_RANGE
    out = np.empty((count, 2), dtype=np.float64)
    for i in range(count):
        out[i, 0] = rng.randint(lo, hi)
        out[i, 1] = rng.randint(lo, hi)
    return out


def reroll_seed(rng: random.Random | None = None) -> int:
    """Новый случайный сид в 31-битном диапазоне (только по явному запросу)."""
    rng = rng or random.Random()
    return rng.randrange(0, 0x7FFFFFFF)
