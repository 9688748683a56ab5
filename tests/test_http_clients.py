"""Tests for HTTP-based adapters."""

import asyncio

import httpx
import pytest

from diet_tracker.adapters.fdc_client import HttpxFdcClient


def _client(handler) -> HttpxFdcClient:  # type: ignore[no-untyped-def]
    return HttpxFdcClient(
        api_key="key",
        base_url="https://api.test",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


def test_fdc_client_get_food() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"fdcId": 1, "foodNutrients": []})

    client = _client(handler)

    food = asyncio.run(client.get_food(1))

    assert food["fdcId"] == 1
    assert seen[0].url.path == "/food/1"
    assert seen[0].url.params["api_key"] == "key"
    assert seen[0].url.params["format"] == "full"


def test_fdc_client_raises_on_error_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"error": "not found"})

    client = _client(handler)

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(client.get_food(999))
