from dataclasses import dataclass
import os
from typing import Optional

# Default revalidation window for API responses (seconds)
DEFAULT_REVALIDATE_SECONDS = 3600
DEFAULT_PROXY_PORT = 8080
DEFAULT_SHOTS_API_URL = 'http://localhost:8000'


def get_proxy_url() -> Optional[str]:
    """
    Get the NBA Stats proxy base URL from the environment.

    Uses NBA_STATS_PROXY_URL if set and non-blank. Absence means requests go
    straight to stats.nba.com.

    Returns:
        Raw proxy URL as configured, or None for direct mode
    """
    value = os.getenv('NBA_STATS_PROXY_URL', '').strip()
    return value or None


def _optional_float(name: str) -> Optional[float]:
    value = os.getenv(name, '').strip()
    return float(value) if value else None


@dataclass
class APIConfig:
    proxy_url: Optional[str] = None
    timeout: Optional[float] = None

@dataclass
class Config:
    revalidate_seconds: int = DEFAULT_REVALIDATE_SECONDS
    proxy_port: int = DEFAULT_PROXY_PORT
    shots_api_url: str = DEFAULT_SHOTS_API_URL
    api: APIConfig = None

    def __post_init__(self):
        if self.api is None:
            self.api = APIConfig()

    @property
    def uses_proxy(self) -> bool:
        return bool(self.api.proxy_url)

    @classmethod
    def from_env(cls) -> 'Config':
        return cls(
            revalidate_seconds = int(os.getenv('REVALIDATE_SECONDS', DEFAULT_REVALIDATE_SECONDS)),
            proxy_port = int(os.getenv('PORT', DEFAULT_PROXY_PORT)),
            shots_api_url = os.getenv('SHOTS_API_URL', DEFAULT_SHOTS_API_URL),
            api=APIConfig(
                proxy_url = get_proxy_url(),
                timeout = _optional_float('API_TIMEOUT'),
            )
        )
