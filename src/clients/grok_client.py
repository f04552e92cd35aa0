"""
Grok API Client - Low-level wrapper for xAI's Grok API.

This client handles:
- Authentication with xAI API
- Client-side rate limiting (requests per rolling hour)
- Fixed generation parameters (temperature, nucleus sampling)
- Response parsing into a plain dictionary

No retries; callers fall back to a fixed text on failure.
"""

import os
from typing import List, Dict, Optional, Any
from datetime import datetime, timedelta

from dotenv import load_dotenv
from xai_sdk import Client  # type: ignore
from xai_sdk.chat import user, system  # type: ignore

from src.logging import get_logger

load_dotenv()


class RateLimitExceeded(Exception):
    """Raised when rate limit is exceeded."""
    pass


class GrokClient:
    """
    Client for interacting with xAI's Grok API using native xAI SDK.

    Usage:
        client = GrokClient(api_key="your-key")
        response = client.chat_completion(
            messages=[{"role": "user", "content": "Hello!"}],
        )
        print(response["content"])
    """

    REQUEST_WINDOW_SECONDS = 3600  # 1 hour

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = "grok-4-1-fast-non-reasoning",
        max_tokens: int = 400,
        temperature: float = 0.7,
        top_p: float = 0.9,
        max_requests_per_hour: int = 100,
    ):
        """
        Initialize Grok API client.

        Args:
            api_key: xAI API key (defaults to GROK_API_KEY or XAI_API_KEY env var)
            model: Model to use
            max_tokens: Maximum tokens in response
            temperature: Sampling temperature
            top_p: Nucleus-sampling threshold
            max_requests_per_hour: Client-side request budget per rolling hour

        Raises:
            ValueError: If no API key is available
        """
        self.api_key = (
            api_key
            or os.getenv('GROK_API_KEY', '')
            or os.getenv('XAI_API_KEY', '')
        ).strip()

        if not self.api_key:
            raise ValueError(
                "API key must be provided or set as GROK_API_KEY or XAI_API_KEY environment variable"
            )

        self.client = Client(api_key=self.api_key)

        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.top_p = top_p
        self.max_requests_per_hour = max_requests_per_hour

        self._request_timestamps: List[datetime] = []

        get_logger().debug(f"GrokClient initialized (model: {model}, using xAI SDK)")

    @classmethod
    def from_config(cls, config, api_key: Optional[str] = None) -> "GrokClient":
        """Build a client from a DashboardConfig."""
        return cls(
            api_key=api_key,
            model=config.model,
            max_tokens=config.max_tokens,
            temperature=config.temperature,
            top_p=config.top_p,
            max_requests_per_hour=config.max_requests_per_hour,
        )

    def _prune(self, now: datetime) -> None:
        cutoff = now - timedelta(seconds=self.REQUEST_WINDOW_SECONDS)
        self._request_timestamps = [
            ts for ts in self._request_timestamps if ts > cutoff
        ]

    def _check_rate_limit(self) -> None:
        """
        Check if we're within rate limits and record the request.

        Raises:
            RateLimitExceeded: If rate limit would be exceeded
        """
        now = datetime.now()
        self._prune(now)

        if len(self._request_timestamps) >= self.max_requests_per_hour:
            oldest = self._request_timestamps[0]
            wait_seconds = (oldest + timedelta(seconds=self.REQUEST_WINDOW_SECONDS) - now).total_seconds()
            raise RateLimitExceeded(
                f"Rate limit exceeded. {len(self._request_timestamps)}/{self.max_requests_per_hour} "
                f"requests in last hour. Wait {wait_seconds:.0f} seconds."
            )

        self._request_timestamps.append(now)

    def chat_completion(
        self,
        messages: List[Dict[str, str]],
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
        top_p: Optional[float] = None,
    ) -> Dict[str, Any]:
        """
        Send a chat completion request to Grok.

        Args:
            messages: List of message dicts with 'role' and 'content'
            model: Override default model
            max_tokens: Override default max_tokens
            temperature: Override default temperature
            top_p: Override default top_p

        Returns:
            API response dictionary with content, model, usage, created_at

        Raises:
            RateLimitExceeded: If rate limit exceeded
            Exception: If the API call fails
        """
        self._check_rate_limit()

        model = model or self.model
        max_tokens = max_tokens or self.max_tokens
        temperature = self.temperature if temperature is None else temperature
        top_p = self.top_p if top_p is None else top_p

        chat = self.client.chat.create(
            model=model,
            max_tokens=max_tokens,
            temperature=temperature,
            top_p=top_p,
        )

        for message in messages:
            role = message.get('role', 'user')
            content = message.get('content', '')

            if role == 'system':
                chat.append(system(content))
            elif role == 'user':
                chat.append(user(content))

        response = chat.sample()

        return self._parse_response(response, model)

    def _parse_response(self, response, model: str) -> Dict[str, Any]:
        """
        Parse xAI SDK response into a clean dictionary.

        Args:
            response: xAI SDK response object (from chat.sample())
            model: Model the request was sent to

        Returns:
            Dictionary with parsed response data

        Raises:
            ValueError: If the response content is not text
        """
        content = getattr(response, "content", None)
        if content is not None and not isinstance(content, str):
            raise ValueError(f"Malformed response content: {type(content).__name__}")

        usage = getattr(response, "usage", None)

        return {
            "content": content or "",
            "role": "assistant",
            "model": model,
            "usage": usage,
            "created_at": datetime.now()
        }

    def get_rate_limit_status(self) -> Dict[str, Any]:
        """
        Get current rate limit status.

        Returns:
            Dictionary with rate limit info
        """
        now = datetime.now()
        self._prune(now)

        remaining = self.max_requests_per_hour - len(self._request_timestamps)

        return {
            "requests_made": len(self._request_timestamps),
            "requests_remaining": remaining,
            "limit": self.max_requests_per_hour,
            "window_seconds": self.REQUEST_WINDOW_SECONDS,
            "reset_time": (
                self._request_timestamps[0] + timedelta(seconds=self.REQUEST_WINDOW_SECONDS)
                if self._request_timestamps else now
            )
        }
