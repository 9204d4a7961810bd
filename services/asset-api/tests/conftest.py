from typing import BinaryIO

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from portfolio_common import (
    MinioConfig,
    RedisConfig,
    StorageObjectNotFoundError,
    StorageUploadError,
)
from portfolio_common.infrastructure import StorageClient, StoredObject

import dependencies
from error_handlers import register_error_handlers
from config import AdminConfig, AppConfig, LogoConfig, UploadConfig
from domain.asset_service import AssetService
from domain.chunk_assembler import ChunkAssembler
from domain.logo_resolver import LogoResolver
from domain.models import DownloadedImage, LogoCandidate, LogoSource
from exceptions import LogoProviderError
from infrastructure import InMemoryUploadSessionStore
from infrastructure.interfaces import ImageDownloader, LogoCache, LogoProvider
from routes import auth_router, images_router, logos_router, upload_router

BUCKET = "test-assets"
MAX_FILE_SIZE = 8 * 1024 * 1024
SESSION_TTL = 600


class FakeStorage(StorageClient):
    def __init__(self):
        self.objects: dict[tuple[str, str], StoredObject] = {}
        self.fail_uploads = False

    def download(self, bucket_name: str, object_name: str) -> StoredObject:
        try:
            return self.objects[(bucket_name, object_name)]
        except KeyError:
            raise StorageObjectNotFoundError(object_name)

    def upload(
        self,
        bucket_name: str,
        object_name: str,
        data: BinaryIO,
        size: int,
        content_type: str,
    ) -> None:
        if self.fail_uploads:
            raise StorageUploadError(object_name, OSError("disk full"))
        content = data.read()
        assert len(content) == size
        self.objects[(bucket_name, object_name)] = StoredObject(
            data=content, content_type=content_type
        )

    def ensure_bucket_exists(self, bucket_name: str) -> None:
        pass

    def keys(self) -> list[str]:
        return [object_name for _, object_name in self.objects]


class FakeLogoCache(LogoCache):
    def __init__(self):
        self.entries: dict[str, str] = {}

    def get(self, name: str) -> str | None:
        return self.entries.get(name)

    def set(self, name: str, storage_key: str) -> None:
        self.entries[name] = storage_key


class StubProvider(LogoProvider):
    def __init__(
        self,
        source: LogoSource,
        url: str | None = None,
        available: bool = True,
        error: str | None = None,
    ):
        self.source = source
        self._url = url
        self._available = available
        self._error = error
        self.calls: list[str] = []

    @property
    def available(self) -> bool:
        return self._available

    def find(self, name: str) -> LogoCandidate | None:
        self.calls.append(name)
        if self._error:
            raise LogoProviderError(self.source.value, self._error)
        if self._url is None:
            return None
        return LogoCandidate(url=self._url, source=self.source)


class StubDownloader(ImageDownloader):
    def __init__(
        self, content: bytes = b"\x89PNG logo", content_type: str = "image/png"
    ):
        self.content = content
        self.content_type = content_type
        self.error: Exception | None = None
        self.calls: list[str] = []

    def download(self, url: str) -> DownloadedImage:
        self.calls.append(url)
        if self.error:
            raise self.error
        return DownloadedImage(content=self.content, content_type=self.content_type)


class FakeClock:
    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def asset_service(storage) -> AssetService:
    return AssetService(
        storage=storage,
        bucket_name=BUCKET,
        max_file_size_bytes=MAX_FILE_SIZE,
        public_prefix="/api/images",
    )


@pytest.fixture
def session_store() -> InMemoryUploadSessionStore:
    return InMemoryUploadSessionStore()


@pytest.fixture
def assembler(session_store, asset_service, clock) -> ChunkAssembler:
    return ChunkAssembler(
        store=session_store,
        asset_service=asset_service,
        session_ttl_seconds=SESSION_TTL,
        clock=clock,
    )


@pytest.fixture
def logo_cache() -> FakeLogoCache:
    return FakeLogoCache()


@pytest.fixture
def downloader() -> StubDownloader:
    return StubDownloader()


@pytest.fixture
def google() -> StubProvider:
    return StubProvider(
        LogoSource.GOOGLE, url="https://images.example/docker.png", available=False
    )


@pytest.fixture
def clearbit() -> StubProvider:
    return StubProvider(LogoSource.CLEARBIT, url="https://logo.clearbit.com/docker.com")


@pytest.fixture
def make_resolver(logo_cache, downloader, storage):
    def _make(providers: list[LogoProvider]) -> LogoResolver:
        return LogoResolver(
            cache=logo_cache,
            providers=providers,
            downloader=downloader,
            storage=storage,
            bucket_name=BUCKET,
            object_prefix="logos",
            public_prefix="/api/images",
        )

    return _make


@pytest.fixture
def resolver(make_resolver, google, clearbit) -> LogoResolver:
    return make_resolver([google, clearbit])


@pytest.fixture
def app_config() -> AppConfig:
    return AppConfig(
        minio=MinioConfig(
            endpoint="minio:9000", user="", password="", bucket_name=BUCKET
        ),
        redis=RedisConfig(host="redis"),
        upload=UploadConfig(
            max_file_size_bytes=MAX_FILE_SIZE, session_ttl_seconds=SESSION_TTL
        ),
        logo=LogoConfig(),
        admin=AdminConfig(
            jwt_secret="test-secret-key-with-enough-length",
            username="admin",
            password="hunter22",
        ),
    )


@pytest.fixture
def app(app_config, storage, asset_service, assembler, resolver) -> FastAPI:
    app = FastAPI()
    register_error_handlers(app)
    app.include_router(auth_router)
    app.include_router(upload_router)
    app.include_router(logos_router)
    app.include_router(images_router)

    app.dependency_overrides[dependencies.get_config] = lambda: app_config
    app.dependency_overrides[dependencies.get_admin_config] = lambda: app_config.admin
    app.dependency_overrides[dependencies.get_storage] = lambda: storage
    app.dependency_overrides[dependencies.get_asset_service] = lambda: asset_service
    app.dependency_overrides[dependencies.get_chunk_assembler] = lambda: assembler
    app.dependency_overrides[dependencies.get_logo_resolver] = lambda: resolver
    return app


@pytest.fixture
def anonymous_client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def client(app) -> TestClient:
    app.dependency_overrides[dependencies.require_admin] = lambda: {"sub": "admin"}
    return TestClient(app)
