"""Asynchronous HTTP client for the GMP API endpoints of the xrpl chain."""

from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class ClientError(Exception):
    """Raised when a request fails or the server answers with an error status."""


class Client:
    """Talks to a GMP API server rooted at ``base_url``."""

    def __init__(self, base_url: str) -> None:
        self.base_url = base_url
        self.client = httpx.AsyncClient()

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def get_tasks(self) -> str:
        """Fetch the pending tasks and return the raw response body."""
        url = f"{self.base_url}/chains/xrpl/tasks"
        logger.debug("Making GET request to: %s", url)
        try:
            response = await self.client.get(url)
        except httpx.HTTPError as exc:
            raise ClientError(str(exc)) from exc
        if response.is_success:
            body = response.text
            logger.info("Response: %s", body)
            return body
        message = f"Request failed with status: {response.status_code} {response.reason_phrase}"
        logger.error("%s", message)
        raise ClientError(message)

    async def post_task(self, task: Any) -> str:
        """Post a task as JSON and return the raw response body."""
        return await self._post_json(f"{self.base_url}/chains/xrpl/task", task)

    async def post_events(self, events: Any) -> str:
        """Post events as JSON and return the raw response body."""
        return await self._post_json(f"{self.base_url}/chains/xrpl/events", events)

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self.client.aclose()

    async def _post_json(self, url: str, body: Any) -> str:
        try:
            response = await self.client.post(url, json=body)
        except httpx.HTTPError as exc:
            raise ClientError(str(exc)) from exc
        return response.text