"""Thin HTTP client for the handover API."""

import os
from typing import Any

import httpx

DEFAULT_API_URL = "http://localhost:8000"


class APIClient:
    def __init__(self, base_url: str | None = None, timeout: float = 30.0):
        self.base_url = base_url or os.getenv("HANDOVER_API_URL", DEFAULT_API_URL)
        self.client = httpx.Client(
            base_url=self.base_url,
            headers={"Content-Type": "application/json"},
            timeout=timeout,
        )

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        response = self.client.get(path, params=params)
        response.raise_for_status()
        return response.json()

    def get_text(self, path: str) -> str:
        response = self.client.get(path)
        response.raise_for_status()
        return response.text

    def post(self, path: str, json: dict[str, Any] | None = None) -> Any:
        response = self.client.post(path, json=json)
        response.raise_for_status()
        return response.json()

    def delete(self, path: str) -> None:
        response = self.client.delete(path)
        response.raise_for_status()
