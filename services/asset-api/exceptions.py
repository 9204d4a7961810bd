"""Custom exceptions for the asset-api service."""


class UnsupportedMediaTypeError(Exception):
    """Raised when a declared content type is not an accepted media kind."""

    def __init__(self, content_type: str):
        self.content_type = content_type
        super().__init__(
            f"Unsupported file type '{content_type}'. Allowed: images, PDF, DOCX, PPTX"
        )


class EmptyFileError(Exception):
    """Raised when an upload carries no bytes."""

    def __init__(self, file_name: str):
        self.file_name = file_name
        super().__init__(f"File '{file_name}' is empty")


class FileTooLargeError(Exception):
    """Raised when an upload exceeds the configured maximum size."""

    def __init__(self, file_name: str, size: int, max_size: int):
        self.file_name = file_name
        self.size = size
        self.max_size = max_size
        super().__init__(
            f"File '{file_name}' is too large ({size} bytes). Max {max_size} bytes"
        )


class InvalidChunkError(Exception):
    """Raised when chunk metadata is inconsistent."""

    def __init__(self, upload_id: str, reason: str):
        self.upload_id = upload_id
        self.reason = reason
        super().__init__(f"Invalid chunk for upload '{upload_id}': {reason}")


class MissingChunksError(Exception):
    """Raised when the final chunk arrives but earlier indexes are absent."""

    def __init__(self, upload_id: str, missing: list[int]):
        self.upload_id = upload_id
        self.missing = missing
        super().__init__(
            f"Upload '{upload_id}' is missing chunks {missing}; restart with a new upload id"
        )


class UploadSessionExpiredError(Exception):
    """Raised when a chunk arrives for a session the reaper already discarded."""

    def __init__(self, upload_id: str):
        self.upload_id = upload_id
        super().__init__(f"Upload session '{upload_id}' expired")


class UploadSessionClosedError(Exception):
    """Raised when a chunk arrives for a session that already completed or failed."""

    def __init__(self, upload_id: str, state: str):
        self.upload_id = upload_id
        self.state = state
        super().__init__(
            f"Upload session '{upload_id}' is {state}; start a new upload id"
        )


class InvalidLogoQueryError(Exception):
    """Raised when a logo lookup is requested for an empty name."""

    def __init__(self):
        super().__init__("Missing org query parameter")


class LogoNotFoundError(Exception):
    """Raised when no provider yields a logo for a name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'No logo found for "{name}"')


class LogoProviderError(Exception):
    """Raised when a logo provider call fails."""

    def __init__(self, source: str, message: str, cause: Exception | None = None):
        self.source = source
        self.message = message
        self.cause = cause
        super().__init__(f"Logo provider '{source}' failed: {message}")


class LogoServiceUnavailableError(Exception):
    """Raised when no logo was found and at least one provider failed."""

    def __init__(self, name: str, errors: list[LogoProviderError]):
        self.name = name
        self.errors = errors
        super().__init__(f'Logo providers unavailable for "{name}"')

    @property
    def details(self) -> str:
        return "; ".join(str(e) for e in self.errors)


class LogoDownloadError(Exception):
    """Raised when downloading a candidate logo fails."""

    def __init__(
        self, url: str, cause: Exception | None = None, reason: str | None = None
    ):
        self.url = url
        self.cause = cause
        self.reason = reason
        message = f"Failed to download logo from '{url}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class CacheServiceError(Exception):
    """Raised when cache operations fail."""

    def __init__(self, key: str, operation: str, cause: Exception | None = None):
        self.key = key
        self.operation = operation
        self.cause = cause
        super().__init__(f"Cache {operation} failed for key '{key}'")
