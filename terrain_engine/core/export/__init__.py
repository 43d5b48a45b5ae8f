from .binary_exporters import heightmap_to_u16, read_heightmap_r16, write_heightmap_r16
from .numpy_exporters import read_mesh_npz, write_mesh_npz
from .image_exporters import colors_to_image, write_color_preview
from .obj_exporters import write_mesh_obj

__all__ = [
    "heightmap_to_u16",
    "read_heightmap_r16",
    "write_heightmap_r16",
    "read_mesh_npz",
    "write_mesh_npz",
    "colors_to_image",
    "write_color_preview",
    "write_mesh_obj",
]
