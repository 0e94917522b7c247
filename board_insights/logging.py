"""Structured logging for insight actions."""

import json
import logging
from datetime import datetime, timezone


class InsightsLogger:
    """Structured JSON logger for insight events."""

    def __init__(self, name: str = "board_insights"):
        self.logger = logging.getLogger(name)
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(message)s"))
            self.logger.addHandler(handler)
            self.logger.setLevel(logging.INFO)

    def _log(self, level: int, event: str, **kwargs):
        """Log a structured event."""
        data = {
            "event": event,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            **kwargs
        }
        self.logger.log(level, json.dumps(data))

    def llm_request(self, provider: str, model: str, max_tokens: int, prompt_chars: int):
        """Log an outgoing model request."""
        self._log(
            logging.INFO,
            "llm_request",
            provider=provider,
            model=model,
            max_tokens=max_tokens,
            prompt_chars=prompt_chars
        )

    def llm_response(self, provider: str, reply_chars: int, duration_seconds: float):
        """Log a successful model reply."""
        self._log(
            logging.INFO,
            "llm_response",
            provider=provider,
            reply_chars=reply_chars,
            duration_seconds=round(duration_seconds, 2)
        )

    def llm_failed(self, provider: str, error_type: str, message: str, status_code: int = None):
        """Log a failed model call."""
        self._log(
            logging.ERROR,
            "llm_failed",
            provider=provider,
            error_type=error_type,
            message=message,
            status_code=status_code
        )

    def parse_fallback(self, reason: str, reply_chars: int):
        """Log a structured parse that fell back to raw text."""
        self._log(
            logging.WARNING,
            "parse_fallback",
            reason=reason,
            reply_chars=reply_chars
        )

    def configuration_missing(self, action: str):
        """Log an action that could not run without an API key."""
        self._log(logging.WARNING, "configuration_missing", action=action)

    def action_failed(self, action: str, error_type: str, message: str):
        """Log a user action that failed."""
        self._log(
            logging.ERROR,
            "action_failed",
            action=action,
            error_type=error_type,
            message=message
        )
