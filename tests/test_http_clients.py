"""Tests for HTTP-based adapters."""

import asyncio

import httpx
import pytest

from image_gallery.adapters.picsum_client import HttpxPicsumClient

_LISTING = [
    {
        "id": "0",
        "author": "Alejandro Escamilla",
        "width": 5000,
        "height": 3333,
        "url": "https://unsplash.com/photos/yC-Yzbqy7PY",
        "download_url": "https://picsum.photos/id/0/5000/3333",
    },
    {
        "id": "1",
        "author": "Alejandro Escamilla",
        "width": 5000,
        "height": 3333,
        "url": "https://unsplash.com/photos/LNRyGwIJr5c",
        "download_url": "https://picsum.photos/id/1/5000/3333",
    },
]


def test_picsum_client_lists_photos() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=_LISTING)

    transport = httpx.MockTransport(handler)
    client = HttpxPicsumClient(
        base_url="https://picsum.photos",
        http_client=httpx.AsyncClient(transport=transport),
    )

    entries = asyncio.run(client.list_photos(limit=100))

    assert entries == _LISTING
    assert seen[0].url.path == "/v2/list"
    assert seen[0].url.params["limit"] == "100"


def test_picsum_client_raises_on_http_error() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(503))
    client = HttpxPicsumClient(
        base_url="https://picsum.photos",
        http_client=httpx.AsyncClient(transport=transport),
    )

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(client.list_photos())


def test_picsum_client_maps_entry_to_thumbnail_image() -> None:
    client = HttpxPicsumClient.create("https://picsum.photos/")

    image = client.to_image(_LISTING[1])
    asyncio.run(client.close())

    assert image.external_id == "1"
    assert image.author == "Alejandro Escamilla"
    assert (image.width, image.height) == (5000, 3333)
    assert image.url == "https://unsplash.com/photos/LNRyGwIJr5c"
    assert image.download_url == "https://picsum.photos/id/1/400/400"
    assert image.liked_by == ()
