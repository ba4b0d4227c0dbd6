"""FastAPI dependency injection helpers."""

from functools import lru_cache

from parkpath.config import Settings, settings
from parkpath.domain.buildings import BuildingDirectory


def get_settings() -> Settings:
    return settings


@lru_cache
def get_directory() -> BuildingDirectory:
    """One catalogue per process; it is read-only after construction."""
    return BuildingDirectory()
