"""
Monitoring Configuration

Loads monitoring settings from environment variables.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class MonitoringConfig:
    """Configuration for error tracking."""

    # Sentry settings
    sentry_dsn: Optional[str] = field(default=None)
    sentry_environment: str = "production"
    sentry_traces_sample_rate: float = 0.1

    # Calls slower than this are logged as warnings
    slow_call_warning_seconds: float = 5.0

    # Service metadata
    service_name: str = "shotsto30-api"

    @classmethod
    def from_env(cls) -> "MonitoringConfig":
        """Create config from environment variables."""
        return cls(
            sentry_dsn=os.getenv("SENTRY_DSN"),
            sentry_environment=os.getenv("SENTRY_ENVIRONMENT", "production"),
            sentry_traces_sample_rate=float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "0.1")),
            slow_call_warning_seconds=float(os.getenv("SLOW_CALL_WARNING_SECONDS", "5")),
            service_name=os.getenv("SERVICE_NAME", "shotsto30-api"),
        )

    @property
    def sentry_enabled(self) -> bool:
        """Check if Sentry tracking is configured."""
        return bool(self.sentry_dsn)
