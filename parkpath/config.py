"""Centralised application settings loaded from environment / .env file."""

from pydantic_settings import BaseSettings

from parkpath.domain.distance import WALKING_SPEED_M_PER_MIN


class Settings(BaseSettings):
    # Proximity graph
    max_edge_distance_km: float = 5.0  # pairwise edge threshold
    complete_components: bool = False  # join stray components to the source

    # Building lookups
    walking_speed_m_per_min: float = WALKING_SPEED_M_PER_MIN
    closest_lots_default: int = 3

    # API
    rate_limit: str = "100/minute"
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_prefix": "PARKPATH_", "extra": "ignore"}


settings = Settings()
