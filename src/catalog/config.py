"""Runtime settings, read from ``CATALOG_*`` environment variables."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel

# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[2]


class Settings(BaseModel):
    data_dir: Path = _PROJECT_ROOT / "data"
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

    @classmethod
    def from_env(cls) -> Settings:
        values = {
            field: os.environ[f"CATALOG_{field.upper()}"]
            for field in cls.model_fields
            if f"CATALOG_{field.upper()}" in os.environ
        }
        return cls(**values)
