import re

import pytest
from portfolio_common import StorageUploadError

from domain.asset_service import sanitize_file_name
from domain.models import MediaKind
from exceptions import EmptyFileError, FileTooLargeError, UnsupportedMediaTypeError

from conftest import BUCKET, MAX_FILE_SIZE


@pytest.mark.parametrize(
    "content_type,kind",
    [
        ("image/png", MediaKind.IMAGE),
        ("image/svg+xml", MediaKind.IMAGE),
        ("IMAGE/JPEG", MediaKind.IMAGE),
        ("application/pdf", MediaKind.PDF),
        ("application/pdf; charset=binary", MediaKind.PDF),
        (
            "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
            MediaKind.DOCUMENT,
        ),
        (
            "application/vnd.openxmlformats-officedocument.presentationml.presentation",
            MediaKind.DOCUMENT,
        ),
        ("application/msword", MediaKind.DOCUMENT),
        ("application/vnd.ms-powerpoint", MediaKind.DOCUMENT),
    ],
)
def test_media_kind_from_content_type(content_type, kind):
    assert MediaKind.from_content_type(content_type) is kind


@pytest.mark.parametrize("content_type", ["text/plain", "application/zip", "", None])
def test_unsupported_content_types(content_type):
    with pytest.raises(UnsupportedMediaTypeError):
        MediaKind.from_content_type(content_type)


def test_sanitize_file_name():
    assert sanitize_file_name("My CV (final).PDF") == "my_cv__final_.pdf"
    assert sanitize_file_name("../../etc/passwd") == ".._.._etc_passwd"


def test_persist_stores_content_and_builds_url(asset_service, storage):
    asset = asset_service.persist(b"%PDF-1.7 ...", "My CV.pdf", "application/pdf")

    assert re.fullmatch(r"\d{13}_[0-9a-f]{6}_my_cv\.pdf", asset.storage_key)
    assert asset.url == f"/api/images/{asset.storage_key}"
    assert asset.media_kind is MediaKind.PDF
    assert asset.file_name == "My CV.pdf"
    assert asset.size == 12

    stored = storage.objects[(BUCKET, asset.storage_key)]
    assert stored.data == b"%PDF-1.7 ..."
    assert stored.content_type == "application/pdf"


def test_same_name_uploads_get_distinct_keys(asset_service, storage):
    first = asset_service.persist(b"a", "logo.png", "image/png")
    second = asset_service.persist(b"b", "logo.png", "image/png")

    assert first.storage_key != second.storage_key
    assert len(storage.objects) == 2


def test_rejects_empty_content(asset_service, storage):
    with pytest.raises(EmptyFileError):
        asset_service.persist(b"", "empty.png", "image/png")
    assert storage.objects == {}


def test_rejects_oversized_content(asset_service, storage):
    with pytest.raises(FileTooLargeError) as exc_info:
        asset_service.persist(b"x" * (MAX_FILE_SIZE + 1), "huge.png", "image/png")

    assert exc_info.value.max_size == MAX_FILE_SIZE
    assert storage.objects == {}


def test_accepts_content_at_the_limit(asset_service):
    asset = asset_service.persist(b"x" * MAX_FILE_SIZE, "big.png", "image/png")
    assert asset.size == MAX_FILE_SIZE


def test_rejects_unsupported_type_before_storing(asset_service, storage):
    with pytest.raises(UnsupportedMediaTypeError):
        asset_service.persist(b"hello", "notes.txt", "text/plain")
    assert storage.objects == {}


def test_storage_errors_propagate(asset_service, storage):
    storage.fail_uploads = True
    with pytest.raises(StorageUploadError):
        asset_service.persist(b"data", "logo.png", "image/png")
