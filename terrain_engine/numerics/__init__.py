from .seeding import OFFSET_RANGE, generate_offsets, reroll_seed
from .perlin import make_permutation, perlin_noise_2d, perlin_octave_stack
from .simplex import simplex_noise_2d, simplex_octave_stack

__all__ = [
    "OFFSET_RANGE",
    "generate_offsets",
    "reroll_seed",
    "make_permutation",
    "perlin_noise_2d",
    "perlin_octave_stack",
    "simplex_noise_2d",
    "simplex_octave_stack",
]
