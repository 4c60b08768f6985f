# api_key_client.py
"""Plain HTTPS access to the YouTube Data API with an API key, no generated client."""

from typing import Dict, List, Optional

import requests

from settings import HTTP_TIMEOUT, YOUTUBE_API_BASE_URL


class ApiKeySession(requests.Session):
    """requests.Session that appends `key=<api key>` to every request."""

    def __init__(self, api_key: str, headers: Optional[Dict[str, str]] = None):
        super().__init__()
        if not api_key:
            raise ValueError("api_key is required")
        self.api_key = api_key
        if headers:
            self.headers.update(headers)

    def request(self, method, url, params=None, **kwargs):
        params = dict(params or {})
        params.setdefault("key", self.api_key)
        kwargs.setdefault("timeout", HTTP_TIMEOUT)
        return super().request(method, url, params=params, **kwargs)


def search_channels(session: requests.Session, channel_name: str, max_results: int = 5,
                    order: Optional[str] = None) -> dict:
    """Search channels by name. Raises requests.HTTPError on a non-2xx answer."""
    params = {"part": "snippet", "type": "channel", "q": channel_name, "maxResults": max_results}
    if order:
        params["order"] = order
    response = session.get(f"{YOUTUBE_API_BASE_URL}/search", params=params)
    response.raise_for_status()
    return response.json()


def _truncate(text: str, limit: int = 100) -> str:
    return text[:limit] + "..." if len(text) > limit else text


def format_channels(data: dict) -> List[str]:
    """Render search results as printable blocks, one per channel."""
    blocks = []
    for i, item in enumerate(data.get("items", []) or [], start=1):
        snippet = item.get("snippet", {}) or {}
        blocks.append(
            "\n".join([
                f"\n--- Channel {i} ---",
                f"Channel ID: {snippet.get('channelId', '')}",
                f"Channel name: {snippet.get('title', '')}",
                f"Description: {_truncate(snippet.get('description', '') or '')}",
                f"Created: {snippet.get('publishedAt', '')}",
            ])
        )
    return blocks


def mask_key(api_key: str) -> str:
    return api_key[:10] + "..."
