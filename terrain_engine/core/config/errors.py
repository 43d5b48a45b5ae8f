# ========================
# file: terrain_engine/core/config/errors.py
# ========================
class TerrainConfigError(Exception):
    """Base error for terrain configuration."""


class UnknownFieldError(TerrainConfigError):
    """Raised when a mutation or config source names a field that does not exist."""


class ConfigNotFoundError(TerrainConfigError):
    """Raised when a config path cannot be resolved."""


class InvalidCurveError(TerrainConfigError):
    """Raised when curve control points cannot be parsed."""
