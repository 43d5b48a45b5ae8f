# terrain_engine/core/export/_io.py
from __future__ import annotations
import os
from pathlib import Path


def _ensure_path_exists(path: str) -> None:
    """Убеждается, что директория для файла существует."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)


def _atomic_replace(tmp_path: str, path: str) -> None:
    os.replace(tmp_path, path)
