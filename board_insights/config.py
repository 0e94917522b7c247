"""Configuration for board insights."""

import os
from dataclasses import dataclass

DEFAULT_MODEL = "claude-sonnet-4-20250514"
DEFAULT_BASE_URL = "https://api.anthropic.com"

# Host secret store location of the per-user API key
SECRET_SCOPE = "member"
SECRET_VISIBILITY = "private"
SECRET_KEY = "claudeApiKey"


@dataclass
class InsightsConfig:
    """Configuration for the insight actions and the model client."""

    # Model endpoint
    model: str = DEFAULT_MODEL
    base_url: str = DEFAULT_BASE_URL

    # Timeouts (seconds). Retries are always disabled.
    request_timeout: float = 60.0

    # Token budgets per use case
    breakdown_max_tokens: int = 800
    health_max_tokens: int = 500
    suggestions_max_tokens: int = 300

    @classmethod
    def from_env(cls) -> "InsightsConfig":
        """Create configuration from environment variables."""
        return cls(
            model=os.environ.get("INSIGHTS_MODEL", DEFAULT_MODEL),
            base_url=os.environ.get("ANTHROPIC_BASE_URL", DEFAULT_BASE_URL),
            request_timeout=float(os.environ.get("INSIGHTS_REQUEST_TIMEOUT_SECONDS", 60.0)),
            breakdown_max_tokens=int(os.environ.get("INSIGHTS_BREAKDOWN_MAX_TOKENS", 800)),
            health_max_tokens=int(os.environ.get("INSIGHTS_HEALTH_MAX_TOKENS", 500)),
            suggestions_max_tokens=int(os.environ.get("INSIGHTS_SUGGESTIONS_MAX_TOKENS", 300)),
        )
