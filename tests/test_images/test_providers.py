"""Tests for the provider adapters against a mocked transport."""

import httpx
import pytest

from dreamboard.errors import ProviderError
from dreamboard.images.providers.pexels import PexelsProvider
from dreamboard.images.providers.pixabay import PixabayProvider
from dreamboard.images.providers.unsplash import UnsplashProvider
from dreamboard.models.images import ImageSearchParams
from dreamboard.models.vocab import Composition, Orientation

PARAMS = ImageSearchParams(query="mountain sunrise", style="expansive", limit=5)

UNSPLASH_PAYLOAD = {
    "results": [
        {
            "id": "abc",
            "width": 1200,
            "height": 800,
            "color": "#112233",
            "alt_description": "mountain at sunrise",
            "urls": {
                "regular": "https://images.unsplash.com/abc?w=1080",
                "thumb": "https://images.unsplash.com/abc?w=200",
                "full": "https://images.unsplash.com/abc",
            },
            "user": {"name": "Ann", "links": {"html": "https://unsplash.com/@ann"}},
            "tags": [{"title": "mountain"}, {"title": "sunrise"}],
        }
    ]
}

PEXELS_PAYLOAD = {
    "photos": [
        {
            "id": 42,
            "width": 600,
            "height": 900,
            "alt": "Runner on a trail",
            "avg_color": "#445566",
            "photographer": "Bo",
            "photographer_url": "https://pexels.com/@bo",
            "src": {
                "large": "https://images.pexels.com/42-large.jpg",
                "medium": "https://images.pexels.com/42-medium.jpg",
                "original": "https://images.pexels.com/42.jpg",
            },
        }
    ]
}

PIXABAY_PAYLOAD = {
    "hits": [
        {
            "id": 7,
            "imageWidth": 1000,
            "imageHeight": 1000,
            "tags": "beach, sunset , travel",
            "user": "cy",
            "webformatURL": "https://pixabay.com/7_640.jpg",
            "previewURL": "https://pixabay.com/7_150.jpg",
            "largeImageURL": "https://pixabay.com/7_1280.jpg",
        }
    ]
}


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def _json_handler(payload, requests=None, status=200):
    def handler(request: httpx.Request) -> httpx.Response:
        if requests is not None:
            requests.append(request)
        return httpx.Response(status, json=payload)
    return handler


@pytest.mark.asyncio
async def test_unsplash_request_and_normalize():
    requests = []
    provider = UnsplashProvider("key-123")
    async with _client(_json_handler(UNSPLASH_PAYLOAD, requests)) as client:
        images = await provider.fetch(client, "mountain sunrise horizontal wide", PARAMS)

    request = requests[0]
    assert request.headers["Authorization"] == "Client-ID key-123"
    assert request.url.params["orientation"] == "landscape"
    assert request.url.params["per_page"] == "5"

    image = images[0]
    assert image.id == "unsplash_abc"
    assert image.source == "unsplash"
    assert image.photographer == "Ann"
    assert image.photographer_url == "https://unsplash.com/@ann"
    assert image.composition == Composition.LANDSCAPE
    assert image.color_palette == ["#112233"]
    assert image.tags == ["mountain", "sunrise"]
    assert image.style == "expansive"


@pytest.mark.asyncio
async def test_pexels_request_and_normalize():
    requests = []
    provider = PexelsProvider("pex-key")
    async with _client(_json_handler(PEXELS_PAYLOAD, requests)) as client:
        images = await provider.fetch(client, "runner", PARAMS)

    assert requests[0].headers["Authorization"] == "pex-key"
    image = images[0]
    assert image.id == "pexels_42"
    assert image.url == "https://images.pexels.com/42-large.jpg"
    assert image.composition == Composition.PORTRAIT
    assert image.color_palette == ["#445566"]


@pytest.mark.asyncio
async def test_pixabay_request_and_normalize():
    requests = []
    provider = PixabayProvider("pix-key")
    params = ImageSearchParams(query="beach", orientation=Orientation.PORTRAIT, limit=1)
    async with _client(_json_handler(PIXABAY_PAYLOAD, requests)) as client:
        images = await provider.fetch(client, "beach", params)

    query = requests[0].url.params
    assert query["key"] == "pix-key"
    assert query["orientation"] == "vertical"
    assert query["per_page"] == "3"
    image = images[0]
    assert image.id == "pixabay_7"
    assert image.tags == ["beach", "sunset", "travel"]
    assert image.composition == Composition.SQUARE


@pytest.mark.asyncio
async def test_non_success_status_raises_provider_error():
    async with _client(_json_handler({"error": "nope"}, status=403)) as client:
        with pytest.raises(ProviderError, match="HTTP 403"):
            await UnsplashProvider("k").fetch(client, "q", PARAMS)


@pytest.mark.asyncio
async def test_non_json_body_raises_provider_error():
    def handler(request):
        return httpx.Response(200, text="<html>oops</html>")

    async with _client(handler) as client:
        with pytest.raises(ProviderError, match="not JSON"):
            await PexelsProvider("k").fetch(client, "q", PARAMS)


@pytest.mark.asyncio
async def test_missing_results_list_raises_provider_error():
    async with _client(_json_handler({"photos": None})) as client:
        with pytest.raises(ProviderError) as exc_info:
            await PexelsProvider("k").fetch(client, "q", PARAMS)
    assert exc_info.value.provider == "pexels"


@pytest.mark.asyncio
async def test_malformed_result_raises_provider_error():
    async with _client(_json_handler({"hits": [{"id": 1}]})) as client:
        with pytest.raises(ProviderError, match="malformed"):
            await PixabayProvider("k").fetch(client, "q", PARAMS)


@pytest.mark.asyncio
async def test_transport_error_raises_provider_error():
    def handler(request):
        raise httpx.ConnectError("unreachable", request=request)

    async with _client(handler) as client:
        with pytest.raises(ProviderError, match="request failed"):
            await UnsplashProvider("k").fetch(client, "q", PARAMS)


@pytest.mark.parametrize("key,configured", [("", False), ("demo", False), ("  ", False), ("real", True)])
def test_placeholder_keys_are_not_configured(key, configured):
    assert UnsplashProvider(key).is_configured is configured
