"""HTTP client for the Curiosity REMS weather feed."""

import logging

import httpx

logger = logging.getLogger(__name__)

REMS_FEED_URL = "https://mars.nasa.gov/rss/api/"
REMS_FEED_PARAMS = {"feed": "weather", "category": "msl", "feedtype": "json"}
DEFAULT_USER_AGENT = "marsweather/0.1.0"


class RemsClient:
    def __init__(
        self,
        base_url: str = REMS_FEED_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
    ):
        self.base_url = base_url
        self.user_agent = user_agent
        self.timeout = timeout

    def get_feed(self) -> dict:
        """Fetch the full REMS feed. One request; HTTP errors propagate."""
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}
        resp = httpx.get(
            self.base_url,
            params=REMS_FEED_PARAMS,
            headers=headers,
            timeout=self.timeout,
        )
        resp.raise_for_status()
        payload = resp.json()
        logger.info(
            "Fetched REMS feed: %d soles", len(payload.get("soles", []))
        )
        return payload
