"""Direct and chunked file upload endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from fastapi.responses import JSONResponse
from portfolio_common import StorageUploadError
from portfolio_common.logging import setup_logging

from dependencies import get_asset_service, get_chunk_assembler, require_admin
from domain.asset_service import AssetService
from domain.chunk_assembler import ChunkAssembler
from domain.models import ChunkUpload
from exceptions import (
    EmptyFileError,
    FileTooLargeError,
    InvalidChunkError,
    MissingChunksError,
    UnsupportedMediaTypeError,
    UploadSessionClosedError,
    UploadSessionExpiredError,
)
from response_models import UploadResponse

logger = setup_logging()

router = APIRouter(prefix="/api", tags=["uploads"])

AssetServiceDep = Annotated[AssetService, Depends(get_asset_service)]
AssemblerDep = Annotated[ChunkAssembler, Depends(get_chunk_assembler)]
AdminDep = Annotated[dict, Depends(require_admin)]

_ERROR_STATUS = {
    UnsupportedMediaTypeError: status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
    EmptyFileError: status.HTTP_400_BAD_REQUEST,
    FileTooLargeError: status.HTTP_413_CONTENT_TOO_LARGE,
    InvalidChunkError: status.HTTP_400_BAD_REQUEST,
    MissingChunksError: status.HTTP_422_UNPROCESSABLE_CONTENT,
    UploadSessionClosedError: status.HTTP_409_CONFLICT,
    UploadSessionExpiredError: status.HTTP_410_GONE,
}


def _status_for(error: Exception) -> int:
    for error_type in type(error).__mro__:
        if error_type in _ERROR_STATUS:
            return _ERROR_STATUS[error_type]
    return status.HTTP_400_BAD_REQUEST


def _failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=UploadResponse(success=False, message=message).model_dump(
            exclude_none=True
        ),
    )


@router.post(
    "/upload", response_model=UploadResponse, response_model_exclude_none=True
)
def upload_file(
    assets: AssetServiceDep,
    assembler: AssemblerDep,
    _admin: AdminDep,
    file: Annotated[UploadFile | None, File()] = None,
    upload_id: Annotated[str | None, Form(alias="uploadId")] = None,
    chunk_index: Annotated[int | None, Form(alias="chunkIndex")] = None,
    total_chunks: Annotated[int | None, Form(alias="totalChunks")] = None,
    file_name: Annotated[str | None, Form(alias="fileName")] = None,
    content_type: Annotated[str | None, Form(alias="contentType")] = None,
) -> UploadResponse | JSONResponse:
    """
    Stores an uploaded file.

    Without uploadId the file is persisted directly. With uploadId the request
    is one chunk of a larger file; only the response to the final chunk carries
    the URL of the assembled file.
    """
    if file is None:
        return _failure(status.HTTP_400_BAD_REQUEST, "No file uploaded")

    data = file.file.read()

    try:
        if upload_id is None:
            logger.info(
                "Received direct upload",
                extra={"file_name": file.filename, "content_type": file.content_type},
            )
            asset = assets.persist(
                data, file.filename or "upload", file.content_type or ""
            )
            return UploadResponse(success=True, url=asset.url)

        if chunk_index is None or total_chunks is None:
            return _failure(
                status.HTTP_400_BAD_REQUEST,
                "chunkIndex and totalChunks are required for chunked uploads",
            )

        chunk = ChunkUpload(
            upload_id=upload_id,
            chunk_index=chunk_index,
            total_chunks=total_chunks,
            file_name=file_name or file.filename or "upload",
            content_type=content_type or file.content_type or "",
            data=data,
        )
        result = assembler.receive(chunk)
    except tuple(_ERROR_STATUS) as e:
        logger.warning(
            "Upload rejected",
            extra={"upload_id": upload_id, "reason": str(e)},
        )
        return _failure(_status_for(e), str(e))
    except StorageUploadError:
        return _failure(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to upload file")
    except Exception:
        logger.exception("Unexpected upload failure", extra={"upload_id": upload_id})
        return _failure(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    if result.asset is None:
        return UploadResponse(success=True)
    return UploadResponse(success=True, url=result.asset.url)
