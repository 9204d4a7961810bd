import httpx
import pytest

from domain.models import LogoSource
from exceptions import LogoDownloadError, LogoProviderError
from infrastructure import (
    ClearbitLogoProvider,
    GoogleImageSearchProvider,
    HttpImageDownloader,
    SimpleIconsProvider,
)
from infrastructure.simple_icons import find_slug


def make_client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def failing_client() -> httpx.Client:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    return make_client(handler)


class TestGoogleImageSearchProvider:
    def test_unavailable_without_credentials(self):
        client = failing_client()
        assert not GoogleImageSearchProvider(client, "", "").available
        assert not GoogleImageSearchProvider(client, "key", "").available
        assert GoogleImageSearchProvider(client, "key", "cx").available

    def test_returns_preferred_candidate(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen.update(request.url.params)
            return httpx.Response(
                200,
                json={
                    "items": [
                        {"link": "https://example.com/docker-brand-page"},
                        {"link": "https://example.com/docker.png"},
                    ]
                },
            )

        provider = GoogleImageSearchProvider(make_client(handler), "key", "cx")
        candidate = provider.find("Docker")

        assert candidate.url == "https://example.com/docker.png"
        assert candidate.source is LogoSource.GOOGLE
        assert seen["q"] == "Docker logo png transparent"
        assert seen["searchType"] == "image"
        assert seen["key"] == "key"
        assert seen["cx"] == "cx"

    def test_no_items_is_a_miss(self):
        provider = GoogleImageSearchProvider(
            make_client(lambda request: httpx.Response(200, json={})), "key", "cx"
        )
        assert provider.find("Nobody") is None

    def test_api_error_payload_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                403, json={"error": {"code": 403, "message": "Daily limit exceeded"}}
            )

        provider = GoogleImageSearchProvider(make_client(handler), "key", "cx")

        with pytest.raises(LogoProviderError) as exc_info:
            provider.find("Docker")
        assert "Daily limit exceeded" in exc_info.value.message

    def test_network_failure_raises(self):
        provider = GoogleImageSearchProvider(failing_client(), "key", "cx")
        with pytest.raises(LogoProviderError):
            provider.find("Docker")


class TestClearbitLogoProvider:
    def test_probes_domains_in_order(self):
        probed = []

        def handler(request: httpx.Request) -> httpx.Response:
            probed.append(str(request.url))
            assert request.method == "HEAD"
            if request.url.path == "/redis.io":
                return httpx.Response(200)
            return httpx.Response(404)

        candidate = ClearbitLogoProvider(make_client(handler)).find("Redis")

        assert candidate.url == "https://logo.clearbit.com/redis.io"
        assert candidate.source is LogoSource.CLEARBIT
        assert probed == [
            "https://logo.clearbit.com/redis.com",
            "https://logo.clearbit.com/redis.io",
        ]

    def test_strips_non_alphanumerics_from_domain(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200 if request.url.path == "/paloalto.com" else 404)

        candidate = ClearbitLogoProvider(make_client(handler)).find("Palo Alto")
        assert candidate.url == "https://logo.clearbit.com/paloalto.com"

    def test_all_misses_returns_none(self):
        provider = ClearbitLogoProvider(
            make_client(lambda request: httpx.Response(404))
        )
        assert provider.find("Unknown Org") is None

    def test_all_probes_failing_raises(self):
        with pytest.raises(LogoProviderError):
            ClearbitLogoProvider(failing_client()).find("Docker")

    def test_unsluggable_name_is_a_miss(self):
        assert ClearbitLogoProvider(failing_client()).find("+++") is None


class TestSimpleIconsProvider:
    @pytest.mark.parametrize(
        "name,slug",
        [
            ("Node.js", "nodedotjs"),
            ("NodeJS", "nodedotjs"),
            ("C++", "cplusplus"),
            ("Burp-Suite", "burpsuite"),
            ("Docker", "docker"),
            ("  Kali  ", "kalilinux"),
            ("!!!", None),
        ],
    )
    def test_find_slug(self, name, slug):
        assert find_slug(name) == slug

    def test_found(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert str(request.url) == "https://cdn.simpleicons.org/nodedotjs"
            return httpx.Response(200)

        candidate = SimpleIconsProvider(make_client(handler)).find("Node.js")
        assert candidate.source is LogoSource.SIMPLE_ICONS

    def test_missing_icon(self):
        provider = SimpleIconsProvider(make_client(lambda request: httpx.Response(404)))
        assert provider.find("Some Startup") is None

    def test_network_failure_raises(self):
        with pytest.raises(LogoProviderError):
            SimpleIconsProvider(failing_client()).find("Docker")


class TestHttpImageDownloader:
    def test_downloads_bytes_and_content_type(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                content=b"<svg/>",
                headers={"Content-Type": "image/svg+xml; charset=utf-8"},
            )

        image = HttpImageDownloader(make_client(handler)).download(
            "https://cdn.example.com/logo.svg"
        )

        assert image.content == b"<svg/>"
        assert image.content_type == "image/svg+xml"

    def test_http_error_raises(self):
        downloader = HttpImageDownloader(
            make_client(lambda request: httpx.Response(404))
        )
        with pytest.raises(LogoDownloadError) as exc_info:
            downloader.download("https://cdn.example.com/missing.png")
        assert exc_info.value.url == "https://cdn.example.com/missing.png"

    def test_non_image_content_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200, content=b"<html></html>", headers={"Content-Type": "text/html"}
            )

        with pytest.raises(LogoDownloadError) as exc_info:
            HttpImageDownloader(make_client(handler)).download(
                "https://example.com/docker-brand-page"
            )
        assert exc_info.value.reason == "unexpected content type 'text/html'"

    def test_missing_content_type_is_accepted(self):
        downloader = HttpImageDownloader(
            make_client(lambda request: httpx.Response(200, content=b"\x89PNG"))
        )

        image = downloader.download("https://logo.clearbit.com/docker.com")

        assert image.content == b"\x89PNG"
        assert image.content_type is None

    def test_empty_body_raises(self):
        downloader = HttpImageDownloader(
            make_client(lambda request: httpx.Response(200, content=b""))
        )
        with pytest.raises(LogoDownloadError):
            downloader.download("https://cdn.example.com/empty.png")

    def test_network_failure_raises(self):
        with pytest.raises(LogoDownloadError):
            HttpImageDownloader(failing_client()).download("https://example.com/a.png")
