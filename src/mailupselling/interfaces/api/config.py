"""API prefix configuration."""

from dataclasses import dataclass


@dataclass(frozen=True)
class APIConfig:
    """Central API prefix constants."""

    NPS_PREFIX: str = "/api/v1/nps"


api_config = APIConfig()
