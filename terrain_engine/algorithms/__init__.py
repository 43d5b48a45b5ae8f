from .fractal import noise01, octave_stack, sample, sample_grid
from .falloff import chebyshev_distance, falloff_factor, falloff_mask
from .heightfield import build_height_field
from .mesh import build_triangles, build_vertices, triangulate, vertex_index
from .colorize import classify, colorize, inverse_lerp, lerp

__all__ = [
    "noise01",
    "octave_stack",
    "sample",
    "sample_grid",
    "chebyshev_distance",
    "falloff_factor",
    "falloff_mask",
    "build_height_field",
    "build_triangles",
    "build_vertices",
    "triangulate",
    "vertex_index",
    "classify",
    "colorize",
    "inverse_lerp",
    "lerp",
]
