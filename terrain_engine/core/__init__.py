from .types import HeightField, RegenerationScope, TerrainMesh

__all__ = ["HeightField", "RegenerationScope", "TerrainMesh"]
